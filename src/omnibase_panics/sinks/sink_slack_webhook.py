# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack webhook sink.

Posts one incoming-webhook message per publication: the primary text, with
the stack trace snippet as a red "Stack Trace" attachment.

Delivery is best-effort. There is no retry; a transport error or a response
status >= 300 is written to the library log together with the full text and
snippet, so the notification is not lost entirely. Failures never re-enter
the recovery pipeline.
"""

from __future__ import annotations

import logging

import httpx

from omnibase_panics.models import ModelPanicsConfig, ModelSlackPanicPayload
from omnibase_panics.runtime.panics_state import get_config

logger = logging.getLogger(__name__)

_WEBHOOK_TIMEOUT_SECONDS: float = 5.0


def post_to_slack(
    text: str,
    snip: str,
    config: ModelPanicsConfig | None = None,
) -> bool:
    """Post a panic notification to the configured webhook.

    Args:
        text: Primary message text.
        snip: Stack trace snippet (may be empty).
        config: Snapshot to read the webhook URL and channel from. Defaults to
            the currently installed configuration.

    Returns:
        True if the webhook accepted the message.

    Note:
        This function does not raise. All errors are logged with the
        ``[panics]`` prefix.
    """
    config = config if config is not None else get_config()
    payload = ModelSlackPanicPayload.build(text, snip, channel=config.slack_channel)

    try:
        with httpx.Client(timeout=_WEBHOOK_TIMEOUT_SECONDS) as client:
            response = client.post(config.slack_webhook_url, json=payload.to_json_dict())
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(
            f"[panics] error on capturing error : {e} {text} {snip}",
            extra={"error_type": type(e).__name__},
        )
        return False

    if response.status_code >= 300:
        logger.warning(
            f"[panics] error on capturing error : {response.text} {text} {snip}",
            extra={"status_code": response.status_code},
        )
        return False

    logger.debug(
        "[panics] panic notification delivered to slack",
        extra={"status_code": response.status_code},
    )
    return True


__all__: list[str] = ["post_to_slack"]
