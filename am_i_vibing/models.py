"""Data model shared by the signature registry and the detector."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Category(str, Enum):
    """How an AI tool relates to the current process."""

    AGENT = "agent"
    """An autonomous agent is driving the process."""

    INTERACTIVE = "interactive"
    """AI features inside a session a human is driving."""

    HYBRID = "hybrid"
    """Both at once (e.g. a terminal with an embedded agent mode)."""


EnvVarDefinition = str | tuple[str, str]
"""A single environment check.

A bare name matches when the variable is set to a non-empty value. A
``(name, expected)`` pair additionally requires an exact, case-sensitive match.
"""


@dataclass(frozen=True)
class EnvVarGroup:
    """Combine environment checks with ``any`` / ``all`` / ``none`` logic.

    Each clause that is left empty counts as satisfied, so a group with no
    clauses at all matches every environment.
    """

    any_of: tuple[EnvVarDefinition, ...] = ()
    all_of: tuple[EnvVarDefinition, ...] = ()
    none_of: tuple[EnvVarDefinition, ...] = ()

    @property
    def is_vacuous(self) -> bool:
        return not (self.any_of or self.all_of or self.none_of)


EnvCheck = EnvVarDefinition | EnvVarGroup


@dataclass(frozen=True)
class Signature:
    """Rules identifying one AI coding tool."""

    id: str
    name: str
    category: Category
    env_checks: tuple[EnvCheck, ...] = ()
    """Matches when any element matches."""

    process_checks: tuple[str, ...] = ()
    """Substrings looked up in every ancestor's command line."""

    custom_checks: tuple[Callable[[], bool], ...] = ()
    """Zero-argument predicates; one that raises counts as ``False``."""


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one detection pass."""

    matched: bool
    id: str | None = None
    name: str | None = None
    category: Category | None = None

    @classmethod
    def none(cls) -> DetectionResult:
        return cls(matched=False)

    @classmethod
    def from_signature(cls, signature: Signature) -> DetectionResult:
        return cls(
            matched=True,
            id=signature.id,
            name=signature.name,
            category=signature.category,
        )

    @property
    def is_agent(self) -> bool:
        return self.category in (Category.AGENT, Category.HYBRID)

    @property
    def is_interactive(self) -> bool:
        return self.category in (Category.INTERACTIVE, Category.HYBRID)

    @property
    def is_hybrid(self) -> bool:
        return self.category == Category.HYBRID

    def to_dict(self) -> dict[str, Any]:
        return {
            "matched": self.matched,
            "id": self.id,
            "name": self.name,
            "category": self.category.value if self.category else None,
        }
