from am_i_vibing.cli import main

if __name__ == "__main__":
    main()
