# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scoped recovery hook shared by every handler decorator.

``RecoveryScope`` is a context manager installed around a handler body. On
exit it runs the recovery protocol:

1. Ask the recovery gate whether the breaker is tripped. If it is, the
   fault (if any) propagates and the process is allowed to die.
2. Otherwise normalise the recovered value through the breaker. A breaker
   refusal also lets the original fault propagate.
   Scopes built with ``gate_on_breaker=False`` skip step 1 and publish the
   refusal itself instead, so the fault never escapes.
3. If an error emerges, capture the stack trace (still on the faulting
   thread), publish it, record it on the scope and suppress the fault.

Decorators then read ``scope.error`` to write a transport-appropriate
failure response.

Only ``Exception`` subclasses are recovered. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` always propagate, as do the
``passthrough`` exception types (framework control-flow exceptions such as
HTTP errors raised on purpose).

Example:
    >>> with RecoveryScope(request_dump=dump) as scope:
    ...     response = handler(request)
    >>> if scope.error is not None:
    ...     response = error_response(scope.message)
"""

from __future__ import annotations

import logging
import traceback
from types import TracebackType

from omnibase_panics.errors import BreakerOpenError
from omnibase_panics.runtime.recovery_gate import attempt_recovery, is_tripped
from omnibase_panics.services import publish_error
from omnibase_panics.utils.util_fault_normalization import error_message, unwrap_fault

logger = logging.getLogger(__name__)

ExcInfo = tuple[type[BaseException], BaseException, TracebackType | None]


class RecoveryScope:
    """Recovery hook around a single handler invocation.

    Attributes:
        request_dump: Request snapshot published with the fault, or None.
        with_stack_trace: Include the stack trace in the publication.
        log_panic: Log ``Panic: <fault>`` with the traceback before publishing.
        gate_on_breaker: Let faults escape while the breaker is open. When
            False the fault is always absorbed; a breaker refusal is published
            as the BreakerOpenError itself.
        error: Normalised error once a fault was recovered, else None.
        exc_info: The recovered fault's exc_info triple, else None.
    """

    def __init__(
        self,
        request_dump: bytes | None = None,
        with_stack_trace: bool = True,
        log_panic: bool = False,
        passthrough: tuple[type[BaseException], ...] = (),
        gate_on_breaker: bool = True,
    ) -> None:
        self.request_dump = request_dump
        self.with_stack_trace = with_stack_trace
        self.log_panic = log_panic
        self._passthrough = passthrough
        self.gate_on_breaker = gate_on_breaker
        self.error: BaseException | None = None
        self.exc_info: ExcInfo | None = None

    @property
    def recovered(self) -> bool:
        return self.error is not None

    @property
    def message(self) -> str:
        """Message of the recovered error, empty when nothing was recovered."""
        return error_message(self.error) if self.error is not None else ""

    def __enter__(self) -> RecoveryScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is not None and (
            not isinstance(exc, Exception) or isinstance(exc, self._passthrough)
        ):
            return False
        try:
            return self._recover(exc_type, exc, tb)
        except Exception:
            # Surface the original fault.
            logger.exception("[panics] recovery hook failed")
            return False

    async def __aenter__(self) -> RecoveryScope:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return self.__exit__(exc_type, exc, tb)

    @staticmethod
    def _fault_value(exc: BaseException | None) -> object:
        if exc is None:
            return None
        value = unwrap_fault(exc)
        # panic(None) is still a fault
        return exc if value is None else value

    def _recover(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if self.gate_on_breaker and is_tripped():
            return False

        try:
            error = attempt_recovery(self._fault_value(exc))
        except BreakerOpenError as refusal:
            if self.gate_on_breaker or exc is None:
                return False
            error = refusal
        if error is None or exc is None or exc_type is None:
            return False

        stack = "".join(traceback.format_exception(exc_type, exc, tb))
        if self.log_panic:
            logger.error(f"Panic: {exc!r}\n{stack}")

        publish_error(error, self.request_dump, self.with_stack_trace, stack=stack)
        self.error = error
        self.exc_info = (exc_type, exc, tb)
        return True


__all__ = ["RecoveryScope"]
