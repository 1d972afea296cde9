# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library observability adapters.

Exports:
    PrometheusMetricsClient: prometheus_client adapter for ProtocolMetricsClient
"""

from omnibase_panics.observability.prometheus_metrics import PrometheusMetricsClient

__all__: list[str] = ["PrometheusMetricsClient"]
