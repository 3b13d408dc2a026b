"""Rendering of detection results for the command line."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from am_i_vibing.errors import InputError, Suggestion
from am_i_vibing.models import Category, DetectionResult

ANCESTRY_ERROR_ENTRY: dict[str, Any] = {"error": "Failed to get process ancestry"}


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def parse_output_format(value: str) -> OutputFormat:
    normalized = value.strip().lower()
    for output_format in OutputFormat:
        if normalized == output_format.value:
            return output_format
    raise InputError(
        message=f"Invalid format '{value}'. Must be 'json' or 'text'.",
        code="E1001",
        details={"format": value},
        suggestion=Suggestion(
            action="fix_format",
            fix="Set AM_I_VIBING_FORMAT (or 'format' in the config file) to 'json' or 'text'.",
            example="AM_I_VIBING_FORMAT=json",
        ),
    )


class DebugReport(BaseModel):
    """Everything needed to work out why a signature did or did not match."""

    detection: dict[str, Any]
    environment: dict[str, str]
    process_ancestry: list[dict[str, Any]] = Field(default_factory=list)


def format_text(result: DetectionResult, check: Category | None = None, passed: bool = False) -> str:
    if check is not None:
        if passed:
            return f"✓ Running in {check.value} environment: {result.name}"
        return f"✗ Not running in {check.value} environment"

    if not result.matched:
        return "✗ No agentic environment detected"
    return f"✓ Detected: [{result.id}] {result.name} ({result.category.value})"


def format_quiet(result: DetectionResult, check: Category | None = None, passed: bool = False) -> str:
    if check is not None:
        return "true" if passed else "false"
    return result.name if result.matched else "none"


def format_json(result: DetectionResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def format_debug(
    result: DetectionResult,
    environment: Mapping[str, str],
    ancestry: Sequence[Mapping[str, Any]],
) -> str:
    report = DebugReport(
        detection=result.to_dict(),
        environment=dict(environment),
        process_ancestry=[dict(entry) for entry in ancestry],
    )
    return report.model_dump_json(indent=2)
