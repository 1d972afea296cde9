# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library installation options.

``ModelPanicsOptions`` is what applications hand to ``install()`` at startup.
It is validated once and rendered into an immutable ``ModelPanicsConfig``
snapshot that every recovery and publication reads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_panics.protocols import ProtocolMetricsClient


class ModelPanicsOptions(BaseModel):
    """Options accepted by ``install()``.

    Every sink is disabled by leaving its setting empty.

    Example:
        >>> options = ModelPanicsOptions(
        ...     env="production",
        ...     filepath="/var/log/myservice",
        ...     slack_webhook_url="https://hooks.slack.com/services/T00/B00/XXX",
        ...     tags={"host": "app-01", "team": "payments"},
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    env: str | None = Field(
        default=None,
        description="Environment label. None keeps the label seeded from TKPENV.",
    )
    filepath: str = Field(
        default="",
        description="Directory holding panics.log. Empty disables the file sink.",
    )
    slack_webhook_url: str = Field(
        default="",
        description="Slack incoming webhook URL. Empty disables the webhook sink.",
    )
    slack_channel: str = Field(
        default="",
        description="Optional channel override sent with every webhook payload.",
    )
    tags: dict[str, str] = Field(
        default_factory=dict,
        description="Tags rendered into every message as `key: value` entries.",
    )
    custom_message: str = Field(
        default="",
        description="Banner appended to every message, e.g. an on-call mention.",
    )
    dont_let_me_die: bool = Field(
        default=False,
        description="Detach the circuit breaker so faults are always swallowed.",
    )
    metrics_client: ProtocolMetricsClient | None = Field(
        default=None,
        description="Counter client incremented once per publication.",
    )
    service_name: str = Field(
        default="",
        description="Service name used in the metrics `service:` tag.",
    )


__all__ = ["ModelPanicsOptions"]
