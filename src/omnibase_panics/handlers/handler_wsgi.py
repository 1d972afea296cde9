# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""WSGI recovery decorators.

Three shapes of the same protocol:

- ``capture_handler(app)``: decorate a WSGI application.
- ``capture_chain_handler(environ, start_response, next_app)``: a
  middleware-chain step that forwards to ``next_app``.
- ``RecoveryMiddleware(app)``: a middleware object that additionally logs
  ``Panic: <fault>`` with the traceback before publishing.

Each takes a request dump before the inner app runs and, after a recovered
fault, answers ``500 Internal Server Error`` with the error message as a
plain-text body.

The response is buffered: status, headers, ``write()`` output and the
returned iterable are collected inside the recovery scope, so a generator
app that faults halfway through its body still gets a clean 500. Nothing
reaches the server before the inner app finished.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any

from omnibase_panics.handlers.recovery_scope import RecoveryScope
from omnibase_panics.utils.util_request_dump import dump_wsgi_request

WSGIEnviron = dict[str, Any]
StartResponse = Callable[..., Callable[[bytes], object]]
WSGIApplication = Callable[[WSGIEnviron, StartResponse], Iterable[bytes]]

_ERROR_STATUS: str = "500 Internal Server Error"


def _serve(
    app: WSGIApplication,
    environ: WSGIEnviron,
    start_response: StartResponse,
    log_panic: bool = False,
) -> Iterable[bytes]:
    request_dump = dump_wsgi_request(environ)
    pending: list[tuple[str, list[tuple[str, str]]]] = []
    chunks: list[bytes] = []

    def buffering_start_response(
        status: str, headers: list[tuple[str, str]], exc_info: Any = None
    ) -> Callable[[bytes], object]:
        # Nothing was sent yet, so a repeated call just replaces the headers
        pending[:] = [(status, headers)]
        return chunks.append

    with RecoveryScope(request_dump, log_panic=log_panic) as scope:
        app_iter = app(environ, buffering_start_response)
        try:
            chunks.extend(app_iter)
        finally:
            close = getattr(app_iter, "close", None)
            if close is not None:
                close()
        if not pending:
            raise RuntimeError("WSGI application did not call start_response")
        status, headers = pending[0]
        start_response(status, headers)
        return chunks

    body = scope.message.encode("utf-8")
    start_response(
        _ERROR_STATUS,
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def capture_handler(app: WSGIApplication) -> WSGIApplication:
    """Decorate a WSGI application with panic recovery.

    Example:
        >>> @capture_handler
        ... def app(environ, start_response):
        ...     start_response("200 OK", [("Content-Type", "text/plain")])
        ...     return [b"ok"]
    """

    @functools.wraps(app)
    def wrapper(environ: WSGIEnviron, start_response: StartResponse) -> Iterable[bytes]:
        return _serve(app, environ, start_response)

    return wrapper


def capture_chain_handler(
    environ: WSGIEnviron,
    start_response: StartResponse,
    next_app: WSGIApplication,
) -> Iterable[bytes]:
    """Middleware-chain step: forward to ``next_app`` inside a recovery scope."""
    return _serve(next_app, environ, start_response)


class RecoveryMiddleware:
    """WSGI middleware recovering panics raised by the wrapped application.

    Example:
        >>> app.wsgi_app = RecoveryMiddleware(app.wsgi_app)
    """

    def __init__(self, app: WSGIApplication) -> None:
        self.app = app

    def __call__(
        self, environ: WSGIEnviron, start_response: StartResponse
    ) -> Iterable[bytes]:
        return _serve(self.app, environ, start_response, log_panic=True)


__all__ = ["RecoveryMiddleware", "capture_chain_handler", "capture_handler"]
