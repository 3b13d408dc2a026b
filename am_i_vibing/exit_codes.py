"""Central exit-code taxonomy for am-i-vibing."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """CLI exit codes.

    ``DETECTED`` and ``NOT_DETECTED`` double as the answer to ``--check``.
    """

    DETECTED = 0
    NOT_DETECTED = 1
    INVALID_INPUT = 2
    INTERNAL_ERROR = 70
