"""Rule evaluation and first-match detection.

Each :class:`~am_i_vibing.models.Signature` in the registry is tried in
order against an environment snapshot and the process ancestry; the first
one that matches becomes the :class:`~am_i_vibing.models.DetectionResult`.
A signature matches when any of these hold, checked in this order:

    1. one of its ``env_checks`` (a variable definition or a group) matches;
    2. one of its ``process_checks`` is a substring of an ancestor's command;
    3. one of its ``custom_checks`` returns true.

The environment and ancestry are plain parameters.  They default to the live
process only at the public entry points, so every evaluator below is a pure
function of its arguments.

Public API
----------
detect_agentic_environment(env=None, ancestry=None) -> DetectionResult
is_agent() / is_interactive() / is_hybrid()         -> bool
is_provider(name)                                   -> bool
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Mapping, Sequence

from am_i_vibing.models import (
    Category,
    DetectionResult,
    EnvCheck,
    EnvVarDefinition,
    EnvVarGroup,
    Signature,
)
from am_i_vibing.process import ProcessInfo, get_process_ancestry
from am_i_vibing.providers import PROVIDERS

logger = logging.getLogger(__name__)

Env = Mapping[str, str | None]


# ---------------------------------------------------------------------------
# Live inputs
# ---------------------------------------------------------------------------

def environment_snapshot() -> dict[str, str]:
    """Snapshot of the process environment (mockable in tests)."""
    return dict(os.environ)


def safe_process_ancestry() -> list[ProcessInfo]:
    """Process ancestry, or an empty list when it cannot be read."""
    try:
        return get_process_ancestry()
    except Exception as exc:
        logger.debug("Process ancestry unavailable: %s", exc)
        return []


# ---------------------------------------------------------------------------
# Evaluators
# ---------------------------------------------------------------------------

def check_env_var(definition: EnvVarDefinition, env: Env) -> bool:
    """Presence check for a name, exact value check for a ``(name, value)`` pair."""
    if isinstance(definition, str):
        return bool(env.get(definition))

    if len(definition) != 2:
        raise ValueError(f"Expected a (name, value) pair, got {definition!r}")
    name, expected = definition
    actual = env.get(name)
    return bool(actual) and actual == expected


def check_env_group(group: EnvVarGroup, env: Env) -> bool:
    any_ok = not group.any_of or any(check_env_var(d, env) for d in group.any_of)
    all_ok = not group.all_of or all(check_env_var(d, env) for d in group.all_of)
    none_ok = not group.none_of or not any(check_env_var(d, env) for d in group.none_of)
    return any_ok and all_ok and none_ok


def check_env_checks(check: EnvCheck, env: Env) -> bool:
    if isinstance(check, EnvVarGroup):
        return check_env_group(check, env)
    return check_env_var(check, env)


def check_process_ancestry(names: Sequence[str], ancestry: Sequence[ProcessInfo]) -> bool:
    """True if any of *names* occurs verbatim in any ancestor's command line."""
    return any(name in proc.command for proc in ancestry for name in names)


def run_custom_checks(signature: Signature) -> bool:
    for check in signature.custom_checks:
        try:
            if check():
                return True
        except Exception as exc:
            logger.debug("Custom check for %s raised %r; treating as no match", signature.id, exc)
    return False


def matches_signature(
    signature: Signature,
    env: Env,
    ancestry: Sequence[ProcessInfo] | Callable[[], Sequence[ProcessInfo]],
) -> bool:
    """Decide whether *signature* matches.

    *ancestry* may be a callable so the process table is only read once a
    signature that actually needs it is reached.
    """
    if any(check_env_checks(check, env) for check in signature.env_checks):
        return True

    if signature.process_checks:
        procs = ancestry() if callable(ancestry) else ancestry
        if check_process_ancestry(signature.process_checks, procs):
            return True

    return bool(signature.custom_checks) and run_custom_checks(signature)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

class _LazyAncestry:
    """Resolve the live ancestry at most once per detection pass."""

    def __init__(self) -> None:
        self._value: list[ProcessInfo] | None = None

    def __call__(self) -> list[ProcessInfo]:
        if self._value is None:
            self._value = safe_process_ancestry()
        return self._value


def detect_agentic_environment(
    env: Env | None = None,
    ancestry: Iterable[ProcessInfo] | None = None,
    providers: Sequence[Signature] | None = None,
) -> DetectionResult:
    """Return the first registered signature matching the current process.

    Parameters
    ----------
    env:
        Environment to inspect.  Defaults to a fresh snapshot of
        ``os.environ``.
    ancestry:
        Ancestor processes to inspect, consumed once up front.  Defaults to
        the live process chain, read only if a signature with process checks
        is reached; failures to read it count as no ancestors.
    providers:
        Signatures to try, in priority order.  Defaults to the built-in
        registry.
    """
    if env is None:
        env = environment_snapshot()
    procs = _LazyAncestry() if ancestry is None else tuple(ancestry)
    registry = PROVIDERS if providers is None else providers

    for signature in registry:
        if matches_signature(signature, env, procs):
            logger.debug("Matched signature %s", signature.id)
            return DetectionResult.from_signature(signature)

    logger.debug("No signature matched (%d checked)", len(registry))
    return DetectionResult.none()


detect = detect_agentic_environment


# ---------------------------------------------------------------------------
# Convenience predicates
# ---------------------------------------------------------------------------

def check_category(result: DetectionResult, category: Category | str) -> bool:
    """Does *result* count as *category*?  Hybrid counts as both other kinds."""
    wanted = Category(category)
    if wanted is Category.AGENT:
        return result.is_agent
    if wanted is Category.INTERACTIVE:
        return result.is_interactive
    return result.is_hybrid


def is_agent(env: Env | None = None, ancestry: Sequence[ProcessInfo] | None = None) -> bool:
    """Is an autonomous agent (or hybrid tool) running this process?"""
    return detect_agentic_environment(env, ancestry).is_agent


def is_interactive(env: Env | None = None, ancestry: Sequence[ProcessInfo] | None = None) -> bool:
    """Is this process inside an AI-assisted interactive session (or hybrid tool)?"""
    return detect_agentic_environment(env, ancestry).is_interactive


def is_hybrid(env: Env | None = None, ancestry: Sequence[ProcessInfo] | None = None) -> bool:
    return detect_agentic_environment(env, ancestry).is_hybrid


def is_provider(
    name: str,
    env: Env | None = None,
    ancestry: Sequence[ProcessInfo] | None = None,
) -> bool:
    """True when the detected tool's display name is exactly *name*."""
    return detect_agentic_environment(env, ancestry).name == name
