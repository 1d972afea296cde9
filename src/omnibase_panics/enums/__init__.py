# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library enumerations.

Exports:
    EnumCircuitBreakerState: Circuit breaker state (CLOSED, HALF_OPEN, OPEN)
"""

from omnibase_panics.enums.enum_circuit_breaker_state import EnumCircuitBreakerState

__all__: list[str] = ["EnumCircuitBreakerState"]
