"""Tests for am_i_vibing.process — psutil-backed ancestry lookup."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import psutil
import pytest

from am_i_vibing.errors import AncestryError
from am_i_vibing.process import ProcessInfo, get_process_ancestry


def _fake_proc(pid: int, name: str, cmdline: list[str], ppid: int = 1) -> MagicMock:
    proc = MagicMock()
    proc.pid = pid
    proc.name.return_value = name
    proc.cmdline.return_value = cmdline
    proc.ppid.return_value = ppid
    return proc


def _patched(parents: list[MagicMock]):
    root = MagicMock()
    root.parents.return_value = parents
    return patch("am_i_vibing.process.psutil.Process", return_value=root)


class TestGetProcessAncestry:

    def test_closest_first(self):
        parents = [
            _fake_proc(20, "node", ["node", "/usr/local/bin/codex"], ppid=10),
            _fake_proc(10, "zsh", ["-zsh"], ppid=1),
        ]
        with _patched(parents):
            ancestry = get_process_ancestry(30)
        assert ancestry == [
            ProcessInfo(pid=20, ppid=10, command="node /usr/local/bin/codex"),
            ProcessInfo(pid=10, ppid=1, command="-zsh"),
        ]

    def test_empty_cmdline_falls_back_to_name(self):
        with _patched([_fake_proc(5, "kthreadd", [])]):
            assert get_process_ancestry(30)[0].command == "kthreadd"

    def test_access_denied_cmdline_falls_back_to_name(self):
        proc = _fake_proc(5, "launchd", [])
        proc.cmdline.side_effect = psutil.AccessDenied(5)
        with _patched([proc]):
            assert get_process_ancestry(30)[0].command == "launchd"

    def test_vanished_parent_is_skipped(self):
        gone = _fake_proc(7, "bash", ["bash"])
        gone.name.side_effect = psutil.NoSuchProcess(7)
        kept = _fake_proc(1, "init", ["/sbin/init"], ppid=0)
        with _patched([gone, kept]):
            ancestry = get_process_ancestry(30)
        assert [p.pid for p in ancestry] == [1]

    def test_missing_process_raises(self):
        with patch("am_i_vibing.process.psutil.Process", side_effect=psutil.NoSuchProcess(99999)):
            with pytest.raises(AncestryError) as exc_info:
                get_process_ancestry(99999)
        assert exc_info.value.details == {"pid": 99999}

    def test_defaults_to_current_process(self):
        with patch("am_i_vibing.process.os.getpid", return_value=4242):
            with _patched([]) as mock_process:
                assert get_process_ancestry() == []
        mock_process.assert_called_once_with(4242)

    def test_live_process_tree(self):
        ancestry = get_process_ancestry()
        assert isinstance(ancestry, list)
        assert all(isinstance(p, ProcessInfo) and p.command for p in ancestry)

    def test_to_dict(self):
        assert ProcessInfo(pid=1, ppid=None, command="init").to_dict() == {
            "pid": 1,
            "ppid": None,
            "command": "init",
        }
