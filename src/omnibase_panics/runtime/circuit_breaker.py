# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Thread-safe circuit breaker guarding panic recovery.

The breaker is the safety valve that stops the library from masking a
genuinely unhealthy process forever. Every recovery runs through it; a
recovery that produces an error counts as a failure. Once enough failures
pile up the breaker opens, recoveries are refused, and the next fault is
allowed to kill the process.

Circuit Breaker States:
    - CLOSED: Work runs. Failures are counted inside a sliding window; the
      count resets when more than ``open_duration`` seconds have passed since
      the previous failure. Successes do not reset the count.
    - OPEN: Work is refused with BreakerOpenError until ``open_duration``
      seconds have elapsed, then the breaker turns HALF_OPEN.
    - HALF_OPEN: Work runs. The first failure re-opens the breaker;
      ``success_threshold`` successes close it.

State Transitions:
    CLOSED → OPEN: failures == error_threshold
    OPEN → HALF_OPEN: open_duration elapsed
    HALF_OPEN → CLOSED: successes == success_threshold
    HALF_OPEN → OPEN: any failure

Concurrency Safety:
    Host frameworks invoke decorated handlers from many threads, so state is
    guarded by a ``threading.Lock``. The work itself runs outside the lock.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from omnibase_panics.enums import EnumCircuitBreakerState
from omnibase_panics.errors import BreakerOpenError

logger = logging.getLogger(__name__)

# Recovery policy: 3 panics within the window open the breaker, 2 clean
# calls close it, and it stays open for one minute.
DEFAULT_ERROR_THRESHOLD: int = 3
DEFAULT_SUCCESS_THRESHOLD: int = 2
DEFAULT_OPEN_DURATION_SECONDS: float = 60.0


class PanicCircuitBreaker:
    """Three-state circuit breaker with consecutive-failure semantics.

    Attributes:
        error_threshold: Failures within the window that open the breaker.
        success_threshold: Half-open successes that close the breaker.
        open_duration: Seconds the breaker stays open, also the failure window.

    Example:
        >>> breaker = PanicCircuitBreaker()
        >>> breaker.run(lambda: None) is None
        True
        >>> breaker.state
        <EnumCircuitBreakerState.CLOSED: 'CLOSED'>
    """

    def __init__(
        self,
        error_threshold: int = DEFAULT_ERROR_THRESHOLD,
        success_threshold: int = DEFAULT_SUCCESS_THRESHOLD,
        open_duration: float = DEFAULT_OPEN_DURATION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the breaker in the CLOSED state.

        Args:
            error_threshold: Failures before opening (default: 3).
            success_threshold: Half-open successes before closing (default: 2).
            open_duration: Seconds to stay open (default: 60.0).
            clock: Monotonic time source, injectable for tests.

        Raises:
            ValueError: If a threshold is < 1 or open_duration < 0.
        """
        if error_threshold < 1:
            raise ValueError(f"error_threshold must be >= 1, got {error_threshold}")
        if success_threshold < 1:
            raise ValueError(
                f"success_threshold must be >= 1, got {success_threshold}"
            )
        if open_duration < 0:
            raise ValueError(f"open_duration must be >= 0, got {open_duration}")

        self.error_threshold = error_threshold
        self.success_threshold = success_threshold
        self.open_duration = open_duration
        self._clock = clock

        self._lock = threading.Lock()
        self._state = EnumCircuitBreakerState.CLOSED
        self._errors = 0
        self._successes = 0
        self._last_error_at = 0.0
        self._opened_at = 0.0

    @property
    def state(self) -> EnumCircuitBreakerState:
        """Current state, applying a due OPEN → HALF_OPEN transition."""
        with self._lock:
            return self._current_state_locked()

    def run(self, work: Callable[[], BaseException | None]) -> BaseException | None:
        """Run ``work`` through the breaker.

        The result counts as a failure when it is not None. If ``work`` raises,
        that counts as a failure and the exception propagates.

        Args:
            work: Callable returning an error or None.

        Returns:
            Whatever ``work`` returned.

        Raises:
            BreakerOpenError: If the breaker is open; ``work`` is not called.
        """
        with self._lock:
            if not self._current_state_locked().admits_work:
                retry_after = self._opened_at + self.open_duration - self._clock()
                raise BreakerOpenError(retry_after_seconds=max(retry_after, 0.0))

        try:
            result = work()
        except Exception:
            self._record(failed=True)
            raise
        self._record(failed=result is not None)
        return result

    def reset(self) -> None:
        """Force the breaker back to CLOSED with empty counters."""
        with self._lock:
            self._change_state_locked(EnumCircuitBreakerState.CLOSED)

    def _record(self, failed: bool) -> None:
        with self._lock:
            state = self._current_state_locked()
            if not failed:
                if state is EnumCircuitBreakerState.HALF_OPEN:
                    self._successes += 1
                    if self._successes >= self.success_threshold:
                        self._change_state_locked(EnumCircuitBreakerState.CLOSED)
                return

            now = self._clock()
            if self._errors > 0 and now > self._last_error_at + self.open_duration:
                self._errors = 0

            if state is EnumCircuitBreakerState.CLOSED:
                self._errors += 1
                if self._errors >= self.error_threshold:
                    self._change_state_locked(EnumCircuitBreakerState.OPEN)
                else:
                    self._last_error_at = now
            elif state is EnumCircuitBreakerState.HALF_OPEN:
                self._change_state_locked(EnumCircuitBreakerState.OPEN)

    def _current_state_locked(self) -> EnumCircuitBreakerState:
        """REQUIRES: self._lock must be held by caller."""
        if (
            self._state is EnumCircuitBreakerState.OPEN
            and self._clock() >= self._opened_at + self.open_duration
        ):
            self._change_state_locked(EnumCircuitBreakerState.HALF_OPEN)
        return self._state

    def _change_state_locked(self, new_state: EnumCircuitBreakerState) -> None:
        """REQUIRES: self._lock must be held by caller."""
        previous = self._state
        self._state = new_state
        self._errors = 0
        self._successes = 0
        if new_state is EnumCircuitBreakerState.OPEN:
            self._opened_at = self._clock()
            logger.warning(
                "[panics] circuit breaker opened, next panic will not be recovered",
                extra={
                    "previous_state": previous.value,
                    "open_duration": self.open_duration,
                },
            )
        elif previous is not new_state:
            logger.info(
                f"[panics] circuit breaker {previous.value.lower()} -> {new_state.value.lower()}",
                extra={"previous_state": previous.value, "state": new_state.value},
            )


__all__ = [
    "DEFAULT_ERROR_THRESHOLD",
    "DEFAULT_OPEN_DURATION_SECONDS",
    "DEFAULT_SUCCESS_THRESHOLD",
    "PanicCircuitBreaker",
]
