"""am-i-vibing — Detect agentic coding environments and AI assistant tools."""

from __future__ import annotations

from am_i_vibing.detector import (
    detect,
    detect_agentic_environment,
    is_agent,
    is_hybrid,
    is_interactive,
    is_provider,
)
from am_i_vibing.models import Category, DetectionResult, EnvVarGroup, Signature
from am_i_vibing.process import ProcessInfo, get_process_ancestry
from am_i_vibing.providers import (
    PROVIDERS,
    get_provider,
    get_provider_by_id,
    get_providers_by_type,
)

__version__ = "0.2.0"
__all__ = [
    "Category",
    "DetectionResult",
    "EnvVarGroup",
    "PROVIDERS",
    "ProcessInfo",
    "Signature",
    "detect",
    "detect_agentic_environment",
    "get_process_ancestry",
    "get_provider",
    "get_provider_by_id",
    "get_providers_by_type",
    "is_agent",
    "is_hybrid",
    "is_interactive",
    "is_provider",
]
