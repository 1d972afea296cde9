# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deployment failure listener.

Deployment tooling signals a failed rollout by sending ``SIGUSR1`` to the
service process. Each receipt publishes ``Failed to deploy an application``
with no request dump and no stack trace.

The Python signal handler only enqueues; a daemon thread drains the queue
and publishes, so no I/O happens inside the handler. The listener runs for
the lifetime of the process and has no shutdown path.

Signal handlers can only be installed from the main thread. When that is
not possible (or the platform has no ``SIGUSR1``) a warning is logged and
the listener stays unstarted, so a later install from the main thread can
still start it.
"""

from __future__ import annotations

import logging
import queue
import signal
import threading
from types import FrameType

from omnibase_panics.errors import PanicError
from omnibase_panics.services.service_panic_publisher import publish_error

logger = logging.getLogger(__name__)

DEPLOYMENT_FAILURE_MESSAGE: str = "Failed to deploy an application"


class DeploymentFailureListener:
    """Converts a process signal into a published error event.

    Attributes:
        signum: Signal number listened to.
    """

    def __init__(self, signum: int) -> None:
        self.signum = signum
        self._events: queue.SimpleQueue[int] = queue.SimpleQueue()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Install the signal handler and start the publishing thread.

        Raises:
            ValueError: If called outside the main thread.
        """
        signal.signal(self.signum, self._on_signal)
        self._thread = threading.Thread(
            target=self._run,
            name="panics-deployment-listener",
            daemon=True,
        )
        self._thread.start()
        logger.debug(
            "[panics] deployment failure listener started",
            extra={"signal": signal.Signals(self.signum).name},
        )

    def _on_signal(self, signum: int, frame: FrameType | None) -> None:
        self._events.put(signum)

    def _run(self) -> None:
        while True:
            self._events.get()
            publish_error(PanicError(DEPLOYMENT_FAILURE_MESSAGE), None, False)


_listener_lock = threading.Lock()
_listener: DeploymentFailureListener | None = None


def get_deployment_listener() -> DeploymentFailureListener | None:
    return _listener


def capture_bad_deployment() -> bool:
    """Start the process-wide deployment failure listener once.

    Safe to call repeatedly; only the first successful call starts a listener.

    Returns:
        True if the listener is running after the call.
    """
    global _listener
    with _listener_lock:
        if _listener is not None:
            return True

        signum = getattr(signal, "SIGUSR1", None)
        if signum is None:
            logger.warning("[panics] SIGUSR1 is not available, deployment failures will not be captured")
            return False

        listener = DeploymentFailureListener(signum)
        try:
            listener.start()
        except ValueError:
            logger.warning(
                "[panics] deployment failure listener must be started from the main thread"
            )
            return False
        _listener = listener
        return True


__all__ = [
    "DEPLOYMENT_FAILURE_MESSAGE",
    "DeploymentFailureListener",
    "capture_bad_deployment",
    "get_deployment_listener",
]
