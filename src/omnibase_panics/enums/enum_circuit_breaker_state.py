# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""States of the circuit breaker guarding panic recovery."""

from enum import Enum


class EnumCircuitBreakerState(str, Enum):
    """Where the recovery breaker stands.

    Members:
        CLOSED: Faults are recovered and counted.
        HALF_OPEN: Probing after the open period; one fault re-opens.
        OPEN: Recovery refused, faults escape and may kill the process.
    """

    CLOSED = "CLOSED"
    HALF_OPEN = "HALF_OPEN"
    OPEN = "OPEN"

    @property
    def admits_work(self) -> bool:
        """Whether guarded work (a recovery) is allowed to run."""
        return self is not EnumCircuitBreakerState.OPEN
