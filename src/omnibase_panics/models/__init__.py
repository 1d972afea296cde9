# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library models.

Exports:
    ModelPanicsOptions: Options accepted by install()
    ModelPanicsConfig: Immutable installed configuration snapshot
    ModelSlackAttachment: Stack trace attachment of the webhook payload
    ModelSlackPanicPayload: Webhook body posted per publication
    render_tag_string: Tag mapping renderer
"""

from omnibase_panics.models.model_panics_config import (
    ModelPanicsConfig,
    render_tag_string,
)
from omnibase_panics.models.model_panics_options import ModelPanicsOptions
from omnibase_panics.models.model_slack_panic_payload import (
    ModelSlackAttachment,
    ModelSlackPanicPayload,
)

__all__: list[str] = [
    "ModelPanicsConfig",
    "ModelPanicsOptions",
    "ModelSlackAttachment",
    "ModelSlackPanicPayload",
    "render_tag_string",
]
