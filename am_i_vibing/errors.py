"""am-i-vibing error hierarchy and structured error models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from am_i_vibing.exit_codes import ExitCode


def _default_exit_code(category: ErrorCategory) -> ExitCode:
    mapping = {
        ErrorCategory.INPUT: ExitCode.INVALID_INPUT,
        ErrorCategory.RUNTIME: ExitCode.INTERNAL_ERROR,
    }
    return mapping[category]


class ErrorCategory(str, Enum):
    INPUT = "input"
    RUNTIME = "runtime"


class Suggestion(BaseModel):
    action: str
    fix: str
    example: str | None = None


class VibingError(Exception):
    """Base error for everything raised by am-i-vibing."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory = ErrorCategory.RUNTIME,
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
        exit_code: ExitCode | int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.suggestion = suggestion
        self.details = details or {}
        resolved_exit_code = exit_code if exit_code is not None else _default_exit_code(category)
        self.exit_code = int(resolved_exit_code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "category": self.category.value,
            "suggestion": self.suggestion.model_dump() if self.suggestion else None,
            "details": self.details,
        }


class InputError(VibingError):
    """E1xxx: Invalid user input (flags, configuration values)."""

    def __init__(
        self,
        message: str,
        code: str = "E1000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.INPUT,
            suggestion=suggestion,
            details=details,
            exit_code=ExitCode.INVALID_INPUT,
        )


class AncestryError(VibingError):
    """E4xxx: The process table could not be read.

    Detection recovers from this locally; it only reaches callers of
    :func:`am_i_vibing.process.get_process_ancestry` directly.
    """

    def __init__(
        self,
        message: str,
        code: str = "E4001",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.RUNTIME,
            details=details,
        )
