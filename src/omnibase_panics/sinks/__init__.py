# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic notification sinks.

Sinks receive a formatted publication and deliver it best-effort. None of
them raise; failures are logged with the ``[panics]`` prefix.

Sinks:
    - post_to_slack: Slack incoming webhook (5 second timeout)
    - write_panic_log: Append-only ``panics.log`` file
    - count_panic: ``panic.capture_panic`` metrics counter
"""

from omnibase_panics.sinks.sink_metrics_counter import (
    PANIC_METRIC_NAME,
    count_panic,
    panic_metric_tags,
)
from omnibase_panics.sinks.sink_panic_file import (
    PANIC_LOG_FILENAME,
    panic_log_path,
    write_panic_log,
)
from omnibase_panics.sinks.sink_slack_webhook import post_to_slack

__all__ = [
    "PANIC_LOG_FILENAME",
    "PANIC_METRIC_NAME",
    "count_panic",
    "panic_log_path",
    "panic_metric_tags",
    "post_to_slack",
    "write_panic_log",
]
