"""Shared test fixtures for am-i-vibing tests."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pytest
from typer.testing import CliRunner

from am_i_vibing.process import ProcessInfo


@dataclass
class LiveInputs:
    """Stand-ins for the live environment and process tree."""

    env: dict[str, str] = field(default_factory=dict)
    ancestry: list[ProcessInfo] = field(default_factory=list)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def live_inputs(monkeypatch: pytest.MonkeyPatch, tmp_path) -> LiveInputs:
    """Keep tests independent of the host environment and process tree."""
    inputs = LiveInputs()
    monkeypatch.setattr("am_i_vibing.detector.environment_snapshot", lambda: inputs.env)
    monkeypatch.setattr("am_i_vibing.detector.get_process_ancestry", lambda: inputs.ancestry)

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in list(os.environ):
        if key.startswith("AM_I_VIBING_"):
            monkeypatch.delenv(key)
    return inputs
