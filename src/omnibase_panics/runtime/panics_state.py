# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process-wide configuration snapshot holder.

Decorators are built before configuration is known, and the deployment
listener is process-wide, so the configuration lives here as a single
immutable ``ModelPanicsConfig`` that ``install()`` swaps atomically.

The environment label is seeded from ``TKPENV`` at first import.
"""

from __future__ import annotations

import os
import threading

from omnibase_panics.models import ModelPanicsConfig

ENV_VAR_ENVIRONMENT: str = "TKPENV"

_config_lock = threading.Lock()
_config: ModelPanicsConfig = ModelPanicsConfig(env=os.getenv(ENV_VAR_ENVIRONMENT, ""))


def get_config() -> ModelPanicsConfig:
    """Return the current snapshot. Read it once per operation."""
    return _config


def set_config(config: ModelPanicsConfig) -> ModelPanicsConfig:
    """Replace the snapshot and return the previous one.

    Applications go through ``install()``; this is its write path.
    """
    global _config
    with _config_lock:
        previous = _config
        _config = config
    return previous


__all__ = ["ENV_VAR_ENVIRONMENT", "get_config"]
