# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library errors.

Exports:
    PanicsError: Base error class for the library
    PanicError: Normalised fault with a message
    Panic: Carrier for arbitrary fault values raised via panic()
    BreakerOpenError: Circuit breaker refusal
    ERROR_PANIC: Global "Panic happened" sentinel error
    panic: Raise an arbitrary value as a fault
"""

from omnibase_panics.errors.panic_errors import (
    ERROR_PANIC,
    BreakerOpenError,
    Panic,
    PanicError,
    PanicsError,
    panic,
)

__all__: list[str] = [
    "ERROR_PANIC",
    "BreakerOpenError",
    "Panic",
    "PanicError",
    "PanicsError",
    "panic",
]
