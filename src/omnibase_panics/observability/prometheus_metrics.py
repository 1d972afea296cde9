# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Prometheus metrics client for the panic library.

Adapts prometheus_client to the statsd-style ``count(name, value, tags, rate)``
capability the publisher uses, so services that expose a Prometheus endpoint
can install it as ``ModelPanicsOptions.metrics_client``:

- ``panic.capture_panic`` becomes the counter ``panic_capture_panic_total``
- ``key:value`` tags become labels
- sample rate is accepted and ignored (Prometheus counters are not sampled)
"""

from __future__ import annotations

import logging
import re
import threading

from prometheus_client import CollectorRegistry, Counter

logger = logging.getLogger(__name__)

_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_:]")


def sanitize_metric_name(name: str) -> str:
    """Map a dotted statsd metric name onto a valid Prometheus name."""
    sanitized = _INVALID_NAME_CHARS.sub("_", name)
    if sanitized and sanitized[0].isdigit():
        sanitized = f"_{sanitized}"
    return sanitized


def parse_tags(tags: list[str]) -> dict[str, str]:
    """Split ``key:value`` tags into a label mapping; bare tags get an empty value."""
    labels: dict[str, str] = {}
    for tag in tags:
        key, _, value = tag.partition(":")
        labels[sanitize_metric_name(key)] = value
    return labels


class PrometheusMetricsClient:
    """Counter client backed by a Prometheus registry.

    Counters are registered lazily, one per (metric name, label names) pair.
    """

    def __init__(
        self, registry: CollectorRegistry | None = None, namespace: str = ""
    ) -> None:
        """Initialize the client.

        Args:
            registry: Prometheus registry (a private one is created if None)
            namespace: Optional prefix for every metric name
        """
        self._registry = registry or CollectorRegistry()
        self._namespace = namespace
        self._counters: dict[tuple[str, tuple[str, ...]], Counter] = {}
        self._lock = threading.Lock()

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def count(self, name: str, value: int, tags: list[str], rate: float) -> None:
        """Increment counter ``name`` by ``value`` with labels parsed from ``tags``."""
        labels = parse_tags(tags)
        counter = self._get_counter(sanitize_metric_name(name), tuple(sorted(labels)))
        if labels:
            counter.labels(**labels).inc(value)
        else:
            counter.inc(value)

    def _get_counter(self, name: str, label_names: tuple[str, ...]) -> Counter:
        key = (name, label_names)
        with self._lock:
            counter = self._counters.get(key)
            if counter is None:
                counter = Counter(
                    name,
                    f"Panic library counter {name}",
                    list(label_names),
                    namespace=self._namespace,
                    registry=self._registry,
                )
                self._counters[key] = counter
                logger.debug(f"Registered metric: {name}")
            return counter


__all__ = ["PrometheusMetricsClient", "parse_tags", "sanitize_metric_name"]
