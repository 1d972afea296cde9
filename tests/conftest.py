# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_panics tests.

The library keeps process-wide state (configuration snapshot, circuit
breaker, in-flight sink threads). Every test starts from a fresh breaker and
the default configuration, and waits for sink threads it started.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from omnibase_panics.models import ModelPanicsConfig
from omnibase_panics.runtime import get_config, reset_circuit_breaker
from omnibase_panics.runtime.panics_state import set_config
from omnibase_panics.services import flush


class RecordingMetricsClient:
    """In-memory ProtocolMetricsClient recording every count() call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int, list[str], float]] = []

    def count(self, name: str, value: int, tags: list[str], rate: float) -> None:
        self.calls.append((name, value, tags, rate))


@pytest.fixture(autouse=True)
def _isolate_panics_state() -> Iterator[None]:
    """Fresh breaker and restored configuration around every test."""
    previous = get_config()
    reset_circuit_breaker()
    yield
    flush(timeout=10.0)
    set_config(previous)
    reset_circuit_breaker()


@pytest.fixture
def panic_log_dir(tmp_path: Path) -> Path:
    """Directory for the panic log of the current test."""
    return tmp_path


@pytest.fixture
def file_sink_config(panic_log_dir: Path) -> ModelPanicsConfig:
    """Install a development configuration with only the file sink enabled."""
    config = ModelPanicsConfig(env="development", filepath=str(panic_log_dir))
    set_config(config)
    return config


@pytest.fixture
def read_panic_log(panic_log_dir: Path):
    """Flush sink threads and return the panic log contents."""

    def _read() -> str:
        assert flush(timeout=10.0)
        path = panic_log_dir / "panics.log"
        if not path.exists():
            return ""
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()

    return _read


@pytest.fixture
def metrics_client() -> RecordingMetricsClient:
    return RecordingMetricsClient()
