# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic library services.

Exports:
    publish_error: Format a fault and fan it out to every enabled sink
    capture: Publish a message without stack trace
    capture_with_stack_trace: Publish a message with the caller's stack trace
    flush: Wait for in-flight sink deliveries
    install: Install process-wide configuration
    capture_bad_deployment: Start the deployment failure listener once
    DeploymentFailureListener: SIGUSR1 to published error bridge
"""

from omnibase_panics.services.service_panic_publisher import (
    capture,
    capture_stack,
    capture_with_stack_trace,
    flush,
    format_primary_text,
    format_stack_snippet,
    publish_error,
)
from omnibase_panics.services.service_deployment_listener import (
    DEPLOYMENT_FAILURE_MESSAGE,
    DeploymentFailureListener,
    capture_bad_deployment,
    get_deployment_listener,
)
from omnibase_panics.services.service_installer import install

__all__: list[str] = [
    "DEPLOYMENT_FAILURE_MESSAGE",
    "DeploymentFailureListener",
    "capture",
    "capture_bad_deployment",
    "capture_stack",
    "capture_with_stack_trace",
    "flush",
    "format_primary_text",
    "format_stack_snippet",
    "get_deployment_listener",
    "install",
    "publish_error",
]
