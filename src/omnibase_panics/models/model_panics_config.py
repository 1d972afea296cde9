# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Installed panic library configuration snapshot.

The snapshot is immutable; ``install()`` replaces it wholesale so an
in-flight publication always sees one consistent configuration.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from omnibase_panics.models.model_panics_options import ModelPanicsOptions
from omnibase_panics.protocols import ProtocolMetricsClient


def render_tag_string(tags: Mapping[str, str]) -> str:
    """Render tags as `` `key: value` `` entries joined by ``" | "``.

    Example:
        >>> render_tag_string({"host": "app-01", "team": "payments"})
        '`host: app-01` | `team: payments`'
    """
    return " | ".join(f"`{key}: {value}`" for key, value in tags.items())


class ModelPanicsConfig(BaseModel):
    """Immutable configuration snapshot read by recoveries and publications.

    Attributes:
        env: Environment label shown as ``[env]`` in every message.
        filepath: Directory of the append-only ``panics.log`` (empty = disabled).
        slack_webhook_url: Webhook endpoint (empty = disabled).
        slack_channel: Optional channel override.
        tag_string: Pre-rendered tags.
        custom_message: Optional banner.
        metrics_client: Optional counter client.
        service_name: Service name for the metrics tag.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    env: str = ""
    filepath: str = ""
    slack_webhook_url: str = ""
    slack_channel: str = ""
    tag_string: str = ""
    custom_message: str = ""
    metrics_client: ProtocolMetricsClient | None = None
    service_name: str = ""

    @classmethod
    def from_options(
        cls, options: ModelPanicsOptions, default_env: str = ""
    ) -> ModelPanicsConfig:
        """Build a snapshot from installation options.

        Args:
            options: Options passed to ``install()``.
            default_env: Label used when ``options.env`` is None.
        """
        return cls(
            env=options.env if options.env is not None else default_env,
            filepath=options.filepath,
            slack_webhook_url=options.slack_webhook_url,
            slack_channel=options.slack_channel,
            tag_string=render_tag_string(options.tags),
            custom_message=options.custom_message,
            metrics_client=options.metrics_client,
            service_name=options.service_name,
        )


__all__ = ["ModelPanicsConfig", "render_tag_string"]
