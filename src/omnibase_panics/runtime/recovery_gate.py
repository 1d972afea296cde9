# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process-wide recovery gate.

Holds the shared circuit breaker and exposes the two calls every recovery
hook makes on its exit path: ``is_tripped()`` first, then
``attempt_recovery()`` on the recovered value. Both go through the same
breaker, so a clean exit counts as two successes and a fault as one failure.

When the breaker is detached (``dont_let_me_die``), recovery is
unconditional.
"""

from __future__ import annotations

import logging
import threading

from omnibase_panics.errors import BreakerOpenError
from omnibase_panics.runtime.circuit_breaker import PanicCircuitBreaker
from omnibase_panics.utils.util_fault_normalization import normalize_fault

logger = logging.getLogger(__name__)

_breaker_lock = threading.Lock()
_breaker: PanicCircuitBreaker | None = PanicCircuitBreaker()


def get_circuit_breaker() -> PanicCircuitBreaker | None:
    """Return the shared breaker, or None when detached."""
    return _breaker


def detach_circuit_breaker() -> None:
    """Detach the breaker; every later fault is swallowed."""
    global _breaker
    with _breaker_lock:
        if _breaker is not None:
            logger.info("[panics] circuit breaker detached, faults will always be recovered")
        _breaker = None


def reset_circuit_breaker(breaker: PanicCircuitBreaker | None = None) -> PanicCircuitBreaker:
    """Attach a fresh breaker (or ``breaker``) and return it."""
    global _breaker
    with _breaker_lock:
        _breaker = breaker if breaker is not None else PanicCircuitBreaker()
        return _breaker


def attempt_recovery(value: object) -> BaseException | None:
    """Normalise ``value`` through the breaker.

    Args:
        value: The recovered fault value, or None on a clean exit.

    Returns:
        The normalised error, or None when there was nothing to recover.

    Raises:
        BreakerOpenError: If the breaker refuses; the caller must let the
            original fault escape.
    """
    breaker = _breaker
    if breaker is None:
        return normalize_fault(value)
    return breaker.run(lambda: normalize_fault(value))


def is_tripped() -> bool:
    """Return True iff the shared breaker is currently open."""
    breaker = _breaker
    if breaker is None:
        return False
    try:
        breaker.run(lambda: None)
    except BreakerOpenError:
        return True
    return False


__all__ = [
    "attempt_recovery",
    "detach_circuit_breaker",
    "get_circuit_breaker",
    "is_tripped",
    "reset_circuit_breaker",
]
