"""Signatures of the AI coding tools am-i-vibing knows how to recognise.

The registry is scanned top to bottom and the first match wins, so an entry
must come before any more general entry that would also match it (e.g.
"Cursor Agent" before "Cursor").
"""

from __future__ import annotations

from am_i_vibing.models import Category, EnvVarGroup, Signature

PROVIDERS: tuple[Signature, ...] = (
    Signature(
        id="claude-code",
        name="Claude Code",
        category=Category.AGENT,
        env_checks=("CLAUDECODE",),
    ),
    # ── Cursor ────────────────────────────────────────────────────────
    # The agent runs its shell commands with a fixed pager.
    Signature(
        id="cursor-agent",
        name="Cursor Agent",
        category=Category.AGENT,
        env_checks=(
            EnvVarGroup(all_of=("CURSOR_TRACE_ID", ("PAGER", "head -n 10000 | cat"))),
        ),
    ),
    Signature(
        id="cursor",
        name="Cursor",
        category=Category.INTERACTIVE,
        env_checks=("CURSOR_TRACE_ID",),
    ),
    # ── CLI agents recognised by their launcher ──────────────────────
    Signature(
        id="gemini-agent",
        name="Gemini Agent",
        category=Category.AGENT,
        process_checks=("gemini",),
    ),
    Signature(
        id="codex",
        name="OpenAI Codex",
        category=Category.AGENT,
        process_checks=("codex",),
    ),
    Signature(
        id="aider",
        name="Aider",
        category=Category.AGENT,
        env_checks=("AIDER_API_KEY",),
        process_checks=("aider",),
    ),
    # ── Bolt.new (StackBlitz WebContainers) ──────────────────────────
    Signature(
        id="bolt-agent",
        name="Bolt.new Agent",
        category=Category.AGENT,
        env_checks=(
            EnvVarGroup(all_of=(("SHELL", "/bin/jsh"), "npm_config_yes")),
        ),
    ),
    Signature(
        id="bolt",
        name="Bolt.new",
        category=Category.INTERACTIVE,
        env_checks=(
            EnvVarGroup(all_of=(("SHELL", "/bin/jsh"),), none_of=("npm_config_yes",)),
        ),
    ),
    # ── Zed ───────────────────────────────────────────────────────────
    Signature(
        id="zed-agent",
        name="Zed Agent",
        category=Category.AGENT,
        env_checks=(
            EnvVarGroup(all_of=(("TERM_PROGRAM", "zed"), ("PAGER", "cat"))),
        ),
    ),
    Signature(
        id="zed",
        name="Zed",
        category=Category.INTERACTIVE,
        env_checks=(
            EnvVarGroup(all_of=(("TERM_PROGRAM", "zed"),), none_of=(("PAGER", "cat"),)),
        ),
    ),
    # ── Replit ────────────────────────────────────────────────────────
    Signature(
        id="replit-assistant",
        name="Replit Assistant",
        category=Category.AGENT,
        env_checks=(
            EnvVarGroup(all_of=("REPL_ID", ("REPLIT_MODE", "assistant"))),
        ),
    ),
    Signature(
        id="replit",
        name="Replit",
        category=Category.INTERACTIVE,
        env_checks=(
            EnvVarGroup(all_of=("REPL_ID",), none_of=(("REPLIT_MODE", "assistant"),)),
        ),
    ),
    Signature(
        id="github-copilot-agent",
        name="VS Code Copilot",
        category=Category.AGENT,
        env_checks=(
            EnvVarGroup(all_of=(("TERM_PROGRAM", "vscode"), ("GIT_PAGER", "cat"))),
        ),
    ),
    Signature(
        id="jules",
        name="Jules",
        category=Category.AGENT,
        env_checks=(
            EnvVarGroup(all_of=(("HOME", "/home/jules"), ("USER", "swebot"))),
        ),
    ),
    Signature(
        id="crush",
        name="Crush",
        category=Category.AGENT,
        process_checks=("crush",),
    ),
    Signature(
        id="warp",
        name="Warp Terminal",
        category=Category.HYBRID,
        env_checks=(("TERM_PROGRAM", "WarpTerminal"),),
    ),
)


def get_provider(name: str) -> Signature | None:
    """Return the signature with display name *name*, if registered."""
    for provider in PROVIDERS:
        if provider.name == name:
            return provider
    return None


def get_provider_by_id(provider_id: str) -> Signature | None:
    for provider in PROVIDERS:
        if provider.id == provider_id:
            return provider
    return None


def get_providers_by_type(category: Category | str) -> list[Signature]:
    """Return every signature of *category*, in registry order.

    Raises ``ValueError`` for a string that is not a category name.
    """
    wanted = Category(category)
    return [provider for provider in PROVIDERS if provider.category == wanted]
