# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic recovery decorators, one per host handler shape.

Exports:
    RecoveryScope: Scoped recovery hook shared by every decorator
    capture_handler: WSGI application decorator
    capture_chain_handler: Middleware-chain step forwarding to the next app
    RecoveryMiddleware: WSGI middleware object
    capture_router_handler: werkzeug routed endpoint decorator
    recovery_middleware: aiohttp middleware
    capture_consumer: Message-queue consumer callback decorator
    unary_server_interceptor: Unary RPC interceptor
    async_unary_server_interceptor: Unary RPC interceptor for async handlers
    capture_background: Background work with a recovery callback
"""

from omnibase_panics.handlers.handler_aiohttp import recovery_middleware
from omnibase_panics.handlers.handler_background import capture_background
from omnibase_panics.handlers.handler_consumer import capture_consumer
from omnibase_panics.handlers.handler_rpc import (
    async_unary_server_interceptor,
    unary_server_interceptor,
)
from omnibase_panics.handlers.handler_werkzeug import capture_router_handler
from omnibase_panics.handlers.handler_wsgi import (
    RecoveryMiddleware,
    capture_chain_handler,
    capture_handler,
)
from omnibase_panics.handlers.recovery_scope import RecoveryScope

__all__: list[str] = [
    "RecoveryMiddleware",
    "RecoveryScope",
    "async_unary_server_interceptor",
    "capture_background",
    "capture_chain_handler",
    "capture_consumer",
    "capture_handler",
    "capture_router_handler",
    "recovery_middleware",
    "unary_server_interceptor",
]
