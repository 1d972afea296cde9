# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""aiohttp recovery middleware.

aiohttp hands each middleware a single request object and the downstream
handler; awaiting the handler proceeds down the chain. Faults raised below
this middleware are recovered into a plain-text 500 response. Raised
``web.HTTPException`` responses are intentional and pass through.

Example:
    >>> app = web.Application(middlewares=[recovery_middleware])
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from aiohttp import web

from omnibase_panics.handlers.recovery_scope import RecoveryScope
from omnibase_panics.utils.util_request_dump import dump_aiohttp_request

AiohttpHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def recovery_middleware(
    request: web.Request, handler: AiohttpHandler
) -> web.StreamResponse:
    request_dump = await dump_aiohttp_request(request)
    with RecoveryScope(request_dump, passthrough=(web.HTTPException,)) as scope:
        return await handler(request)
    return web.Response(status=500, text=scope.message)


__all__ = ["recovery_middleware"]
