# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Integration tests for the SIGUSR1 deployment failure listener."""

from __future__ import annotations

import logging
import os
import signal
import threading
import time
from pathlib import Path

import pytest

from omnibase_panics.models import ModelPanicsConfig
from omnibase_panics.services import (
    DEPLOYMENT_FAILURE_MESSAGE,
    capture_bad_deployment,
    flush,
    get_deployment_listener,
)
from omnibase_panics.services import service_deployment_listener

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not hasattr(signal, "SIGUSR1"), reason="SIGUSR1 not available on this platform"
    ),
]


def _wait_for_log(path: Path, timeout: float = 10.0) -> str:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        flush(timeout=1.0)
        if path.exists():
            with open(path, encoding="utf-8", newline="") as fh:
                text = fh.read()
            if text:
                return text
        time.sleep(0.05)
    return ""


class TestCaptureBadDeployment:
    """Tests for capture_bad_deployment()."""

    def test_idempotent(self) -> None:
        assert capture_bad_deployment() is True
        listener = get_deployment_listener()

        assert capture_bad_deployment() is True
        assert get_deployment_listener() is listener
        assert listener is not None
        assert listener.signum == signal.SIGUSR1
        assert listener.is_running

    def test_signal_publishes_failure(
        self,
        file_sink_config: ModelPanicsConfig,
        panic_log_dir: Path,
    ) -> None:
        """Test that SIGUSR1 publishes the deployment failure message."""
        assert capture_bad_deployment() is True

        os.kill(os.getpid(), signal.SIGUSR1)

        log = _wait_for_log(panic_log_dir / "panics.log")
        assert log == f"[development] *{DEPLOYMENT_FAILURE_MESSAGE}*\r\n"
        assert DEPLOYMENT_FAILURE_MESSAGE == "Failed to deploy an application"

    def test_off_main_thread_not_started(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that starting from a worker thread is refused with a warning."""
        monkeypatch.setattr(service_deployment_listener, "_listener", None)
        results: list[bool] = []

        with caplog.at_level(logging.WARNING):
            thread = threading.Thread(
                target=lambda: results.append(capture_bad_deployment())
            )
            thread.start()
            thread.join(timeout=10.0)

        assert results == [False]
        assert service_deployment_listener._listener is None
        assert "must be started from the main thread" in caplog.text
