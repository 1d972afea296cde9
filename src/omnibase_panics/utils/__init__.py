# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library utilities.

Exports:
    normalize_fault: Map a recovered value onto an error
    unwrap_fault: Unwrap panic() carriers
    error_message: Message of a normalised error
    dump_wsgi_request: Snapshot a WSGI request and rewind its body
    dump_werkzeug_request: Snapshot a werkzeug request
    dump_aiohttp_request: Snapshot an aiohttp request
"""

from omnibase_panics.utils.util_fault_normalization import (
    UNKNOWN_ERROR_MESSAGE,
    error_message,
    normalize_fault,
    unwrap_fault,
)
from omnibase_panics.utils.util_request_dump import (
    dump_aiohttp_request,
    dump_werkzeug_request,
    dump_wsgi_request,
    format_request_dump,
)

__all__: list[str] = [
    "UNKNOWN_ERROR_MESSAGE",
    "dump_aiohttp_request",
    "dump_werkzeug_request",
    "dump_wsgi_request",
    "error_message",
    "format_request_dump",
    "normalize_fault",
    "unwrap_fault",
]
