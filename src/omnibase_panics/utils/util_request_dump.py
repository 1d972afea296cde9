# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Inbound request snapshots.

HTTP decorators take a byte dump of the request before the inner handler
runs, so the published notification shows exactly what was sent even if the
handler consumed or mutated the request.

Dump Format (HTTP/1.1 wire layout):
    GET /orders/42?expand=1 HTTP/1.1\\r\\n
    Host: api.example.com\\r\\n
    Content-Type: application/json\\r\\n
    \\r\\n
    {"body": "bytes"}

Headers are sorted by name; ``Host`` is written first and
``Transfer-Encoding``/``Trailer`` are left out.
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import quote

from werkzeug import Request

if TYPE_CHECKING:
    from aiohttp import web

_EXCLUDED_HEADERS: frozenset[str] = frozenset({"host", "transfer-encoding", "trailer"})


def format_request_dump(
    method: str,
    uri: str,
    protocol: str,
    host: str,
    headers: Iterable[tuple[str, str]],
    body: bytes,
) -> bytes:
    """Render request parts into a wire-format dump."""
    lines = [f"{method} {uri} {protocol}\r\n", f"Host: {host}\r\n"]
    for name, value in sorted(headers, key=lambda item: item[0].lower()):
        if name.lower() in _EXCLUDED_HEADERS:
            continue
        lines.append(f"{name}: {value}\r\n")
    lines.append("\r\n")
    return "".join(lines).encode("latin-1", errors="replace") + body


def dump_werkzeug_request(request: Request) -> bytes:
    """Dump a werkzeug request. The body stays cached on ``request``."""
    uri = quote(request.root_path + request.path, safe="/;:@&=+$,%~")
    if request.query_string:
        uri = f"{uri}?{request.query_string.decode('latin-1')}"
    return format_request_dump(
        method=request.method,
        uri=uri,
        protocol=request.environ.get("SERVER_PROTOCOL", "HTTP/1.1"),
        host=request.host,
        headers=request.headers.items(),
        body=request.get_data(cache=True),
    )


def dump_wsgi_request(environ: dict[str, object]) -> bytes:
    """Dump a raw WSGI request and rewind its body for the inner app.

    The body is read from ``wsgi.input`` and replaced with an in-memory
    stream holding the same bytes.
    """
    request = Request(environ, populate_request=False)
    dump = dump_werkzeug_request(request)
    body = request.get_data(cache=True)
    environ["wsgi.input"] = io.BytesIO(body)
    if body or "CONTENT_LENGTH" in environ:
        environ["CONTENT_LENGTH"] = str(len(body))
    return dump


async def dump_aiohttp_request(request: web.Request) -> bytes:
    """Dump an aiohttp request. ``request.read()`` caches the body."""
    return format_request_dump(
        method=request.method,
        uri=request.raw_path,
        protocol=f"HTTP/{request.version.major}.{request.version.minor}",
        host=request.host,
        headers=request.headers.items(),
        body=await request.read(),
    )


__all__ = [
    "dump_aiohttp_request",
    "dump_werkzeug_request",
    "dump_wsgi_request",
    "format_request_dump",
]
