# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library protocols.

Exports:
    ProtocolMetricsClient: Counter-style metrics capability
"""

from omnibase_panics.protocols.protocol_metrics_client import ProtocolMetricsClient

__all__: list[str] = ["ProtocolMetricsClient"]
