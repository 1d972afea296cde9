# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RecoveryScope, the shared recovery hook.

Tests cover:
- Clean exits and recovered faults
- Fault value normalisation via panic()
- Pass-through of framework and process-control exceptions
- The circuit breaker letting the fourth consecutive fault escape
- Detached breaker (dont_let_me_die)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from omnibase_panics.errors import BreakerOpenError, PanicError, panic
from omnibase_panics.handlers import RecoveryScope
from omnibase_panics.models import ModelPanicsConfig
from omnibase_panics.runtime import detach_circuit_breaker


class TestRecoveryScopeRecovery:
    """Tests for the normal recovery path."""

    def test_clean_exit(self) -> None:
        with RecoveryScope() as scope:
            pass

        assert scope.recovered is False
        assert scope.error is None
        assert scope.exc_info is None
        assert scope.message == ""

    def test_exception_recovered(self) -> None:
        original = RuntimeError("boom")

        with RecoveryScope() as scope:
            raise original

        assert scope.recovered is True
        assert scope.error is original
        assert scope.message == "boom"
        assert scope.exc_info is not None
        assert scope.exc_info[1] is original

    def test_string_panic(self) -> None:
        with RecoveryScope() as scope:
            panic("panic here")

        assert isinstance(scope.error, PanicError)
        assert scope.message == "panic here"

    def test_non_string_panic_is_unknown(self) -> None:
        with RecoveryScope() as scope:
            panic(42)

        assert scope.message == "Unknown error"

    def test_none_panic_still_recovered(self) -> None:
        with RecoveryScope() as scope:
            panic(None)

        assert scope.recovered is True

    def test_publishes_with_request_dump_and_stack(
        self,
        file_sink_config: ModelPanicsConfig,
        read_panic_log: Callable[[], str],
    ) -> None:
        """Test that the published stack contains the faulting frame."""

        def faulty_handler() -> None:
            raise ValueError("bad input")

        with RecoveryScope(request_dump=b"GET / HTTP/1.1"):
            faulty_handler()

        log = read_panic_log()
        assert log.startswith("[development] *bad input* ```GET / HTTP/1.1``` ```\n")
        assert "faulty_handler" in log

    def test_log_panic(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            with RecoveryScope(log_panic=True):
                raise RuntimeError("boom")

        assert "Panic: RuntimeError('boom')" in caplog.text

    @pytest.mark.asyncio
    async def test_async_context_manager(self) -> None:
        async with RecoveryScope() as scope:
            raise RuntimeError("async boom")

        assert scope.message == "async boom"


class TestRecoveryScopePassThrough:
    """Tests for exceptions the scope never absorbs."""

    def test_passthrough_types(self) -> None:
        with pytest.raises(KeyError):
            with RecoveryScope(passthrough=(KeyError,)):
                raise KeyError("intentional")

    def test_keyboard_interrupt(self) -> None:
        with pytest.raises(KeyboardInterrupt):
            with RecoveryScope():
                raise KeyboardInterrupt

    def test_hook_failure_surfaces_original(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that a failing hook lets the original fault escape."""

        def broken_publish(*args: object, **kwargs: object) -> None:
            raise RuntimeError("publisher broken")

        monkeypatch.setattr(
            "omnibase_panics.handlers.recovery_scope.publish_error", broken_publish
        )

        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError, match="original"):
                with RecoveryScope():
                    raise ValueError("original")

        assert "[panics] recovery hook failed" in caplog.text


class TestRecoveryScopeBreaker:
    """Tests for the circuit breaker guarding recovery."""

    def test_fourth_consecutive_fault_escapes(self) -> None:
        for _ in range(3):
            with RecoveryScope() as scope:
                raise RuntimeError("boom")
            assert scope.recovered

        with pytest.raises(RuntimeError, match="boom"):
            with RecoveryScope():
                raise RuntimeError("boom")

    def test_clean_exits_keep_breaker_closed(self) -> None:
        for _ in range(20):
            with RecoveryScope():
                pass

        with RecoveryScope() as scope:
            raise RuntimeError("boom")

        assert scope.recovered

    def test_detached_breaker_always_recovers(self) -> None:
        detach_circuit_breaker()

        for _ in range(10):
            with RecoveryScope() as scope:
                raise RuntimeError("boom")
            assert scope.recovered

    def test_ungated_scope_publishes_refusal(self) -> None:
        """Test that an ungated scope absorbs faults while the breaker is open."""
        for _ in range(3):
            with RecoveryScope():
                raise RuntimeError("boom")

        with RecoveryScope(gate_on_breaker=False) as scope:
            raise RuntimeError("boom")

        assert isinstance(scope.error, BreakerOpenError)
        assert scope.message == "circuit breaker is open"

    def test_ungated_clean_exit(self) -> None:
        for _ in range(3):
            with RecoveryScope():
                raise RuntimeError("boom")

        with RecoveryScope(gate_on_breaker=False) as scope:
            pass

        assert scope.recovered is False
