# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metrics counter sink: one ``panic.capture_panic`` increment per publication."""

from __future__ import annotations

import logging

from omnibase_panics.protocols import ProtocolMetricsClient

logger = logging.getLogger(__name__)

PANIC_METRIC_NAME: str = "panic.capture_panic"


def panic_metric_tags(service_name: str, env: str) -> list[str]:
    return [f"service:{service_name}", f"env:{env}"]


def count_panic(metrics_client: ProtocolMetricsClient, service_name: str, env: str) -> bool:
    """Increment the panic counter.

    Returns:
        True if the client accepted the increment.
    """
    try:
        metrics_client.count(
            PANIC_METRIC_NAME, 1, panic_metric_tags(service_name, env), 1.0
        )
    except Exception as e:
        logger.warning(
            f"[panics] failed to count {PANIC_METRIC_NAME}: {e}",
            extra={"error_type": type(e).__name__},
        )
        return False
    return True


__all__: list[str] = ["PANIC_METRIC_NAME", "count_panic", "panic_metric_tags"]
