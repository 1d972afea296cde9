# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration installer - the single write path for library settings."""

from __future__ import annotations

import logging

from omnibase_panics.models import ModelPanicsConfig, ModelPanicsOptions
from omnibase_panics.runtime.panics_state import get_config, set_config
from omnibase_panics.runtime.recovery_gate import detach_circuit_breaker
from omnibase_panics.services.service_deployment_listener import capture_bad_deployment

logger = logging.getLogger(__name__)


def install(options: ModelPanicsOptions) -> ModelPanicsConfig:
    """Install process-wide panic library configuration.

    Replaces the configuration snapshot, detaches the circuit breaker when
    ``dont_let_me_die`` is set, and makes sure the deployment failure
    listener is running. Repeated installation is safe; the listener is
    never duplicated.

    Args:
        options: Installation options.

    Returns:
        The installed snapshot.

    Example:
        >>> install(ModelPanicsOptions(env="development", filepath="/tmp"))
        ModelPanicsConfig(env='development', filepath='/tmp', ...)
    """
    config = ModelPanicsConfig.from_options(options, default_env=get_config().env)
    set_config(config)

    if options.dont_let_me_die:
        detach_circuit_breaker()

    capture_bad_deployment()

    logger.info(
        "[panics] configuration installed",
        extra={
            "env": config.env,
            "file_sink": bool(config.filepath),
            "slack_sink": bool(config.slack_webhook_url),
            "metrics_sink": config.metrics_client is not None,
        },
    )
    return config


__all__ = ["install"]
