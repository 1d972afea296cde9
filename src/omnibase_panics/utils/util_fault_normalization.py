# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fault normalisation.

Converts whatever a handler aborted with into an exception carrying a
message, so the publisher and the HTTP failure response only ever deal with
one shape.
"""

from __future__ import annotations

from omnibase_panics.errors import Panic, PanicError

UNKNOWN_ERROR_MESSAGE: str = "Unknown error"


def unwrap_fault(fault: BaseException) -> object:
    """Return the raw fault value, unwrapping ``Panic`` carriers."""
    if isinstance(fault, Panic):
        return fault.value
    return fault


def normalize_fault(value: object) -> BaseException | None:
    """Normalise a recovered value into an error.

    - None -> None
    - str -> PanicError with that message
    - exception -> returned unchanged
    - anything else -> PanicError("Unknown error")

    Example:
        >>> normalize_fault(None) is None
        True
        >>> str(normalize_fault("boom"))
        'boom'
        >>> str(normalize_fault(42))
        'Unknown error'
    """
    if value is None:
        return None
    if isinstance(value, str):
        return PanicError(value)
    if isinstance(value, BaseException):
        return value
    return PanicError(UNKNOWN_ERROR_MESSAGE)


def error_message(error: BaseException) -> str:
    """Message of a normalised error, falling back to its class name."""
    return str(error) or type(error).__name__


__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "error_message",
    "normalize_fault",
    "unwrap_fault",
]
