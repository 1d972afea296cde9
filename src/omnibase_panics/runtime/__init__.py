# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library runtime: configuration state and the recovery gate.

Exports:
    get_config: Current configuration snapshot
    PanicCircuitBreaker: Thread-safe recovery circuit breaker
    attempt_recovery: Normalise a recovered value through the breaker
    is_tripped: Whether the shared breaker is open
    detach_circuit_breaker: Always recover from now on
    reset_circuit_breaker: Attach a fresh breaker
    get_circuit_breaker: Shared breaker, or None when detached
"""

from omnibase_panics.runtime.circuit_breaker import (
    DEFAULT_ERROR_THRESHOLD,
    DEFAULT_OPEN_DURATION_SECONDS,
    DEFAULT_SUCCESS_THRESHOLD,
    PanicCircuitBreaker,
)
from omnibase_panics.runtime.panics_state import (
    ENV_VAR_ENVIRONMENT,
    get_config,
)
from omnibase_panics.runtime.recovery_gate import (
    attempt_recovery,
    detach_circuit_breaker,
    get_circuit_breaker,
    is_tripped,
    reset_circuit_breaker,
)

__all__: list[str] = [
    "DEFAULT_ERROR_THRESHOLD",
    "DEFAULT_OPEN_DURATION_SECONDS",
    "DEFAULT_SUCCESS_THRESHOLD",
    "ENV_VAR_ENVIRONMENT",
    "PanicCircuitBreaker",
    "attempt_recovery",
    "detach_circuit_breaker",
    "get_circuit_breaker",
    "get_config",
    "is_tripped",
    "reset_circuit_breaker",
]
