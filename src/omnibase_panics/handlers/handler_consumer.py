# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Recovery decorator for message-queue consumer callbacks.

The wrapped callback keeps its contract on the normal path: whatever it
returns (or a non-panic error result it returns) reaches the consumer loop
unchanged. After a recovered fault it returns None, so the loop keeps
consuming, even while the recovery breaker is open; the refusal is then
published in place of the fault. Both plain and ``async`` callbacks are
supported.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from omnibase_panics.handlers.recovery_scope import RecoveryScope

T = TypeVar("T")


def capture_consumer(handler: Callable[..., T]) -> Callable[..., T | None]:
    """Decorate a consumer callback with panic recovery.

    Example:
        >>> @capture_consumer
        ... async def on_message(message: ConsumerRecord) -> None:
        ...     await process(message.value)
    """
    if inspect.iscoroutinefunction(handler):
        async_handler: Callable[..., Awaitable[Any]] = handler

        @functools.wraps(handler)
        async def async_wrapper(message: Any) -> Any:
            with RecoveryScope(gate_on_breaker=False):
                return await async_handler(message)
            return None

        return async_wrapper

    @functools.wraps(handler)
    def wrapper(message: Any) -> T | None:
        with RecoveryScope(gate_on_breaker=False):
            return handler(message)
        return None

    return wrapper


__all__ = ["capture_consumer"]
