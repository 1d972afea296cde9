# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library error classes.

Error Hierarchy:
    Exception
    └── PanicsError (base library error)
        ├── PanicError (normalised fault built from a message)
        ├── Panic (carrier for arbitrary fault values raised via panic())
        └── BreakerOpenError (recovery gate refused to absorb a fault)

Python code raises exceptions, never bare values. ``panic()`` bridges the
gap for callers that want to abort with an arbitrary value: the recovery
hook unwraps ``Panic.value`` before normalisation, so ``panic("boom")`` is
reported as ``boom`` and ``panic(42)`` as ``Unknown error``.
"""

from __future__ import annotations

from typing import NoReturn


class PanicsError(Exception):
    """Base error class for the panic capture library."""


class PanicError(PanicsError):
    """A normalised fault with a human-readable message.

    Example:
        >>> err = PanicError("Failed to deploy an application")
        >>> str(err)
        'Failed to deploy an application'
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class Panic(PanicsError):
    """Carrier for a fault value that is not itself an exception.

    Attributes:
        value: The raw value passed to ``panic()``.
    """

    def __init__(self, value: object) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"panic: {self.value!r}"


class BreakerOpenError(PanicsError):
    """Raised when the circuit breaker is open and refuses to run work.

    The recovery hook treats this as "let the fault escape": the original
    fault is re-raised so the process can die instead of masking a
    genuinely unhealthy service forever.

    Attributes:
        retry_after_seconds: Seconds until the breaker becomes half-open.
    """

    def __init__(
        self,
        message: str = "circuit breaker is open",
        retry_after_seconds: float = 0.0,
    ) -> None:
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


# Global sentinel error, kept for callers that compare against it.
ERROR_PANIC = PanicError("Panic happened")


def panic(value: object) -> NoReturn:
    """Abort the current handler with an arbitrary fault value.

    Args:
        value: Any value. Strings become the published message, exceptions are
            re-raised as-is, anything else is reported as ``Unknown error``.

    Raises:
        BaseException: ``value`` itself when it is an exception instance.
        Panic: Wrapping ``value`` otherwise.
    """
    if isinstance(value, BaseException):
        raise value
    raise Panic(value)


__all__ = [
    "ERROR_PANIC",
    "BreakerOpenError",
    "Panic",
    "PanicError",
    "PanicsError",
    "panic",
]
