"""Configuration precedence system for am-i-vibing."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from am_i_vibing.errors import InputError, Suggestion

logger = logging.getLogger(__name__)

ENV_PREFIX = "AM_I_VIBING_"

DEFAULTS: dict[str, Any] = {
    "format": "text",
    "log_level": "WARNING",
    "quiet": False,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def user_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "am-i-vibing" / "config.toml"


class VibingConfig:
    """Resolves configuration through the precedence chain.

    Defaults, then the user config file, then ``AM_I_VIBING_*`` environment
    variables.  Command-line flags are applied on top by the CLI.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else user_config_path()
        self._config: dict[str, Any] = {}
        self._load_defaults()
        self._load_user_config()
        self._load_env_vars()

    def _load_defaults(self) -> None:
        self._config = dict(DEFAULTS)

    def _load_user_config(self) -> None:
        """Load from ~/.config/am-i-vibing/config.toml"""
        if not self.path.exists():
            return
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.debug("Ignoring unreadable config file %s: %s", self.path, exc)
            return
        self._config.update(data)

    def _load_env_vars(self) -> None:
        """Load from AM_I_VIBING_* environment variables."""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                config_key = key[len(ENV_PREFIX):].lower()
                if not isinstance(DEFAULTS.get(config_key), bool):
                    self._config[config_key] = value
                elif value.lower() in ("true", "1", "yes"):
                    self._config[config_key] = True
                elif value.lower() in ("false", "0", "no"):
                    self._config[config_key] = False

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)


def parse_log_level(value: str) -> int:
    normalized = value.strip().upper()
    if normalized in LOG_LEVELS:
        return getattr(logging, normalized)
    raise InputError(
        message=f"Invalid log level '{value}'. Must be one of {', '.join(LOG_LEVELS)}.",
        code="E1002",
        details={"log_level": value},
        suggestion=Suggestion(
            action="fix_log_level",
            fix="Set AM_I_VIBING_LOG_LEVEL (or 'log_level' in the config file) to a standard level name.",
            example="AM_I_VIBING_LOG_LEVEL=DEBUG",
        ),
    )
