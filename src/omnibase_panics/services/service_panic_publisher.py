# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic publisher - formats a captured fault and fans it out to sinks.

Message Format:
    ``[<env>] *<message>*``, then `` | <tags>`` when tags are configured, then
    ``\\n<banner>\\n`` when a custom banner is configured, then
    `` ```<request dump>``` `` when a request dump is present. The stack
    snippet is a separate fenced block: ``\\`\\`\\`\\n<stack>\\`\\`\\```.

Fan-out:
    Every enabled sink is dispatched on its own daemon thread, so a slow
    webhook never delays the failure response written to the caller. There is
    no ordering between sinks or between publications, no queue and no retry.

Error Handling:
    ``publish_error`` never raises. Anything unexpected is logged with the
    ``[panics]`` prefix and swallowed.
"""

from __future__ import annotations

import logging
import threading
import time
import traceback
from collections.abc import Callable

from omnibase_panics.errors import PanicError
from omnibase_panics.models import ModelPanicsConfig
from omnibase_panics.runtime.panics_state import get_config
from omnibase_panics.sinks import count_panic, post_to_slack, write_panic_log
from omnibase_panics.utils.util_fault_normalization import error_message

logger = logging.getLogger(__name__)

_inflight_lock = threading.Lock()
_inflight: set[threading.Thread] = set()


def format_primary_text(
    config: ModelPanicsConfig,
    message: str,
    request_dump: bytes | None = None,
) -> str:
    """Format the primary notification text.

    Example:
        >>> config = ModelPanicsConfig(env="development")
        >>> format_primary_text(config, "boom", b"payload")
        '[development] *boom* ```payload``` '
    """
    parts = [f"[{config.env}] *{message}*"]
    if config.tag_string:
        parts.append(" | " + config.tag_string)
    if config.custom_message:
        parts.append("\n" + config.custom_message + "\n")
    if request_dump is not None:
        parts.append(f" ```{request_dump.decode('utf-8', errors='replace')}``` ")
    return "".join(parts)


def format_stack_snippet(stack: str) -> str:
    """Fence a stack trace for Slack and the panic log."""
    return f"```\n{stack}```"


def capture_stack(error: BaseException | None = None) -> str:
    """Format the fault's own traceback, or the caller's stack when it has none."""
    if error is not None and error.__traceback__ is not None:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return "".join(traceback.format_stack()[:-1])


def publish_error(
    error: BaseException,
    request_dump: bytes | None = None,
    with_stack_trace: bool = False,
    stack: str | None = None,
) -> list[threading.Thread]:
    """Publish a fault to every enabled sink.

    Args:
        error: Normalised error; its message is the headline.
        request_dump: Raw request snapshot, or None. An empty dump still
            renders an empty fenced block.
        with_stack_trace: Include the stack snippet.
        stack: Pre-captured stack trace. Recovery hooks capture it on the
            faulting thread; when omitted it is captured here.

    Returns:
        The sink threads that were started.
    """
    try:
        config = get_config()
        text = format_primary_text(config, error_message(error), request_dump)
        snip = ""
        if with_stack_trace:
            snip = format_stack_snippet(stack if stack is not None else capture_stack(error))

        threads: list[threading.Thread] = []
        if config.slack_webhook_url:
            threads.append(_dispatch("slack", post_to_slack, text, snip, config))
        if config.filepath:
            threads.append(_dispatch("file", write_panic_log, config.filepath, text, snip))
        if config.metrics_client is not None:
            threads.append(
                _dispatch(
                    "metrics",
                    count_panic,
                    config.metrics_client,
                    config.service_name,
                    config.env,
                )
            )
        return threads
    except Exception:
        logger.exception("[panics] failed to publish error")
        return []


def _dispatch(sink: str, target: Callable[..., object], *args: object) -> threading.Thread:
    thread = threading.Thread(
        target=_run_sink,
        args=(sink, target, args),
        name=f"panics-{sink}",
        daemon=True,
    )
    # Started under the lock so flush() never sees an unstarted thread
    with _inflight_lock:
        _inflight.add(thread)
        thread.start()
    return thread


def _run_sink(sink: str, target: Callable[..., object], args: tuple[object, ...]) -> None:
    try:
        target(*args)
    except Exception:
        logger.exception(f"[panics] {sink} sink failed")
    finally:
        with _inflight_lock:
            _inflight.discard(threading.current_thread())


def flush(timeout: float | None = None) -> bool:
    """Wait for in-flight sink deliveries.

    Args:
        timeout: Overall deadline in seconds, or None to wait indefinitely.

    Returns:
        True if every sink thread finished.
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    with _inflight_lock:
        pending = list(_inflight)
    for thread in pending:
        remaining = None if deadline is None else max(deadline - time.monotonic(), 0.0)
        thread.join(remaining)
    with _inflight_lock:
        return not any(thread in _inflight for thread in pending)


def _join_details(details: tuple[str, ...]) -> bytes:
    return "\n\n".join(details).encode("utf-8")


def capture(message: str, *details: str) -> None:
    """Publish ``message`` without a stack trace.

    ``details`` are joined with blank lines and sent in the request dump slot.
    """
    publish_error(PanicError(message), _join_details(details), False)


def capture_with_stack_trace(message: str, *details: str) -> None:
    """Publish ``message`` with the caller's stack trace."""
    publish_error(
        PanicError(message),
        _join_details(details),
        True,
        stack="".join(traceback.format_stack()[:-1]),
    )


__all__ = [
    "capture",
    "capture_stack",
    "capture_with_stack_trace",
    "flush",
    "format_primary_text",
    "format_stack_snippet",
    "publish_error",
]
