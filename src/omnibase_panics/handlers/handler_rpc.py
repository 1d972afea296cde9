# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unary RPC recovery interceptors.

Interceptors receive the call context, the request message, the method info
and the downstream handler, and call ``handler(context, request)``. On the
normal path the handler's result is returned untouched. A recovered fault is
logged, published, and the interceptor returns None.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from omnibase_panics.handlers.recovery_scope import RecoveryScope

UnaryHandler = Callable[[Any, Any], Any]
AsyncUnaryHandler = Callable[[Any, Any], Awaitable[Any]]


def unary_server_interceptor(
    context: Any, request: Any, info: Any, handler: UnaryHandler
) -> Any:
    """Run a unary RPC handler inside a recovery scope."""
    with RecoveryScope(log_panic=True):
        return handler(context, request)
    return None


async def async_unary_server_interceptor(
    context: Any, request: Any, info: Any, handler: AsyncUnaryHandler
) -> Any:
    """``async`` flavour of ``unary_server_interceptor``."""
    with RecoveryScope(log_panic=True):
        return await handler(context, request)
    return None


__all__ = ["async_unary_server_interceptor", "unary_server_interceptor"]
