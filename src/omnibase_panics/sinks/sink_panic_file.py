# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Append-only panic log file sink.

Each publication appends two records back-to-back to ``<dir>/panics.log``:
the primary text (no trailing newline), then the stack snippet followed by
``\\r\\n``. The file is opened per publication in append mode, so concurrent
appenders from several threads or processes interleave whole writes.

File Layout:
    [production] *boom* | `host: app-01` ```GET / HTTP/1.1...``` ```
    Traceback (most recent call last):
    ...```\\r\\n
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PANIC_LOG_FILENAME: str = "panics.log"
_PANIC_LOG_MODE: int = 0o666


def panic_log_path(filepath: str) -> Path:
    """Return the panic log path inside ``filepath``."""
    return Path(filepath) / PANIC_LOG_FILENAME


def write_panic_log(filepath: str, text: str, snip: str) -> bool:
    """Append one publication to the panic log.

    Args:
        filepath: Directory holding ``panics.log``.
        text: Primary message text.
        snip: Stack trace snippet (may be empty).

    Returns:
        True if both records were written.
    """
    path = panic_log_path(filepath)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, _PANIC_LOG_MODE)
    except OSError:
        logger.warning(f"[panics] failed to open file {path}")
        return False

    try:
        with os.fdopen(fd, "wb", buffering=0) as fh:
            fh.write(text.encode("utf-8"))
            fh.write((snip + "\r\n").encode("utf-8"))
    except OSError as e:
        logger.warning(
            f"[panics] failed to write file {path}",
            extra={"error_type": type(e).__name__},
        )
        return False
    return True


__all__: list[str] = ["PANIC_LOG_FILENAME", "panic_log_path", "write_panic_log"]
