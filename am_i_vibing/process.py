"""Process ancestry lookup.

Walks the parent chain of a process with ``psutil`` so the detector can look
for known agent launchers (``codex``, ``gemini``, ``crush``...) among the
processes that started us.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any

import psutil

from am_i_vibing.errors import AncestryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessInfo:
    """One ancestor of the inspected process."""

    pid: int
    ppid: int | None
    command: str
    """Full command line, or the bare process name when it is unavailable."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _describe(proc: psutil.Process) -> ProcessInfo:
    with proc.oneshot():
        name = proc.name()
        try:
            ppid: int | None = proc.ppid()
        except psutil.Error:
            ppid = None
        try:
            command = " ".join(proc.cmdline())
        except (psutil.AccessDenied, psutil.ZombieProcess):
            command = ""
    return ProcessInfo(pid=proc.pid, ppid=ppid, command=command or name)


def get_process_ancestry(pid: int | None = None) -> list[ProcessInfo]:
    """Return the ancestors of *pid* (default: this process), closest first.

    Ancestors that exit or deny access mid-walk are skipped. Raises
    :class:`AncestryError` when the process table cannot be read at all.
    """
    target = os.getpid() if pid is None else pid
    try:
        parents = psutil.Process(target).parents()
    except psutil.Error as exc:
        raise AncestryError(
            f"Failed to read ancestry of process {target}: {exc}",
            details={"pid": target},
        ) from exc

    ancestry: list[ProcessInfo] = []
    for parent in parents:
        try:
            ancestry.append(_describe(parent))
        except psutil.Error as exc:
            logger.debug("Skipping ancestor %s: %s", parent.pid, exc)
    return ancestry
