# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Recovery decorator for background work."""

from __future__ import annotations

from collections.abc import Callable

from omnibase_panics.handlers.recovery_scope import RecoveryScope


def capture_background(
    handle_fn: Callable[[], object],
    recovery_fn: Callable[[], object],
) -> None:
    """Run ``handle_fn``; on a recovered fault log, publish, then call ``recovery_fn``.

    ``handle_fn`` is called exactly once, on the calling thread. Start a
    thread around ``capture_background`` to run it in the background.

    Args:
        handle_fn: Work executed on the normal path.
        recovery_fn: Called only when ``handle_fn`` raised and the fault was
            recovered, e.g. to restart a worker loop.

    Example:
        >>> threading.Thread(
        ...     target=capture_background, args=(consume_forever, restart_consumer)
        ... ).start()
    """
    with RecoveryScope(log_panic=True) as scope:
        handle_fn()
    if scope.recovered:
        recovery_fn()


__all__ = ["capture_background"]
