# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Recovery decorator for werkzeug routed endpoints.

Endpoints dispatched from a ``werkzeug.routing.Map`` receive the request
plus the rule's path parameters: ``endpoint(request, **values)``. The
decorator keeps that signature. Raised ``HTTPException`` responses are
intentional and pass through untouched.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from werkzeug import Request, Response
from werkzeug.exceptions import HTTPException

from omnibase_panics.handlers.recovery_scope import RecoveryScope
from omnibase_panics.utils.util_request_dump import dump_werkzeug_request

RoutedEndpoint = Callable[..., Response]


def capture_router_handler(endpoint: RoutedEndpoint) -> RoutedEndpoint:
    """Decorate a routed endpoint with panic recovery.

    Example:
        >>> @capture_router_handler
        ... def show_order(request: Request, order_id: int) -> Response:
        ...     return Response(f"order {order_id}")
    """

    @functools.wraps(endpoint)
    def wrapper(request: Request, **params: Any) -> Response:
        request_dump = dump_werkzeug_request(request)
        with RecoveryScope(request_dump, passthrough=(HTTPException,)) as scope:
            return endpoint(request, **params)
        return Response(scope.message, status=500, mimetype="text/plain")

    return wrapper


__all__ = ["capture_router_handler"]
