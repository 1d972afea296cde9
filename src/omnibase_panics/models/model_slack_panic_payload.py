# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack incoming-webhook payload for panic notifications."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Attachment color for the stack trace block
SLACK_ATTACHMENT_COLOR: str = "#e50606"


class ModelSlackAttachment(BaseModel):
    """Legacy Slack attachment carrying the stack trace snippet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str
    color: str = SLACK_ATTACHMENT_COLOR
    title: str = "Stack Trace"
    mrkdwn_in: list[str] = Field(default_factory=lambda: ["text"])


class ModelSlackPanicPayload(BaseModel):
    """Webhook body posted for every panic publication.

    ``channel`` is omitted from the serialised body when it is not set.

    Example:
        >>> payload = ModelSlackPanicPayload.build("[prod] *boom*", "```\\n...```")
        >>> payload.to_json_dict()["link_names"]
        1
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str
    # Lets Slack resolve @mentions in the custom banner
    link_names: int = 1
    attachments: list[ModelSlackAttachment] = Field(default_factory=list)
    channel: str | None = None

    @classmethod
    def build(cls, text: str, snip: str, channel: str = "") -> ModelSlackPanicPayload:
        return cls(
            text=text,
            attachments=[ModelSlackAttachment(text=snip)],
            channel=channel or None,
        )

    def to_json_dict(self) -> dict[str, object]:
        """Serialise for the webhook POST, dropping an unset channel."""
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["SLACK_ATTACHMENT_COLOR", "ModelSlackAttachment", "ModelSlackPanicPayload"]
