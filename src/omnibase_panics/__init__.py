# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Panic capture and notification for long-running services.

Wraps request and message handlers so an uncaught fault does not take the
process down. The fault is recovered, contextualised with a request dump,
stack trace and deployment tags, fanned out to the configured sinks (Slack
webhook, local panic log, metrics counter) and a failure response is
returned to the caller.

A circuit breaker guards recovery: after repeated faults within a minute
recovery is refused and the process is allowed to die, unless
``dont_let_me_die`` is set.

Key Components:
    - install: Replace the process-wide configuration
    - capture / capture_with_stack_trace: Ad-hoc publication
    - Handler decorators: WSGI, werkzeug, aiohttp, consumers, RPC, background
    - capture_bad_deployment: SIGUSR1 deployment-failure listener

Example:
    >>> from omnibase_panics import ModelPanicsOptions, capture_handler, install
    >>> install(ModelPanicsOptions(env="production", filepath="/var/log/app"))
    >>> app = capture_handler(app)
"""

from omnibase_panics.errors import (
    ERROR_PANIC,
    BreakerOpenError,
    Panic,
    PanicError,
    PanicsError,
    panic,
)
from omnibase_panics.handlers import (
    RecoveryMiddleware,
    RecoveryScope,
    async_unary_server_interceptor,
    capture_background,
    capture_chain_handler,
    capture_consumer,
    capture_handler,
    capture_router_handler,
    recovery_middleware,
    unary_server_interceptor,
)
from omnibase_panics.models import ModelPanicsConfig, ModelPanicsOptions
from omnibase_panics.observability import PrometheusMetricsClient
from omnibase_panics.protocols import ProtocolMetricsClient
from omnibase_panics.runtime import (
    get_circuit_breaker,
    get_config,
    reset_circuit_breaker,
)
from omnibase_panics.services import (
    capture,
    capture_bad_deployment,
    capture_with_stack_trace,
    flush,
    install,
    publish_error,
)

__all__: list[str] = [
    "BreakerOpenError",
    "ERROR_PANIC",
    "ModelPanicsConfig",
    "ModelPanicsOptions",
    "Panic",
    "PanicError",
    "PanicsError",
    "PrometheusMetricsClient",
    "ProtocolMetricsClient",
    "RecoveryMiddleware",
    "RecoveryScope",
    "async_unary_server_interceptor",
    "capture",
    "capture_background",
    "capture_bad_deployment",
    "capture_chain_handler",
    "capture_consumer",
    "capture_handler",
    "capture_router_handler",
    "capture_with_stack_trace",
    "flush",
    "get_circuit_breaker",
    "get_config",
    "install",
    "panic",
    "publish_error",
    "recovery_middleware",
    "reset_circuit_breaker",
    "unary_server_interceptor",
]
