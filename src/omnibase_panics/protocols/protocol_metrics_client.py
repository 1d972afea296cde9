# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the metrics capability used by the panic library.

The library only ever increments a single counter per publication, so the
capability it needs is a statsd-style ``count`` call. Any client exposing
that method (a DogStatsD client, ``PrometheusMetricsClient``, a test double)
can be installed through ``ModelPanicsOptions.metrics_client``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolMetricsClient(Protocol):
    """Protocol for counter-style metrics clients.

    Concurrency Safety:
        Implementations MUST be safe to call from multiple threads; the
        publisher invokes ``count`` from a detached sink thread.

    Example:
        >>> def on_panic(client: ProtocolMetricsClient) -> None:
        ...     client.count("panic.capture_panic", 1, ["env:prod"], 1.0)
    """

    def count(self, name: str, value: int, tags: list[str], rate: float) -> object:
        """Increment counter ``name`` by ``value``.

        Args:
            name: Metric name, e.g. ``panic.capture_panic``.
            value: Increment.
            tags: ``key:value`` tag strings.
            rate: Sample rate in ``(0, 1]``.

        Returns:
            Implementation-defined; the library ignores it.
        """
        ...


__all__ = ["ProtocolMetricsClient"]
