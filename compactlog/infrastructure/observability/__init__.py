"""Observability infrastructure for structured logging and correlation.

This module provides the structlog integration:
- configure_structlog: processor chain ending in compact JSON output
- CompactJsonRenderer: structlog renderer built on CompactJsonFormatter
- event_dict_to_log_event: structlog event dict to LogEvent mapping

Usage:
    from compactlog.infrastructure.observability import configure_structlog

    # At startup
    configure_structlog(environment="production")

    # In request handling
    set_correlation_id(request_correlation_id)
    structlog.get_logger().info("Order {OrderId} placed", OrderId=order_id)
"""

from compactlog.infrastructure.observability.logging import (
    build_renderer,
    configure_structlog,
    get_logger_for_service,
)
from compactlog.infrastructure.observability.structlog_bridge import (
    CompactJsonRenderer,
    event_dict_to_log_event,
    level_from_name,
)

__all__: list[str] = [
    "CompactJsonRenderer",
    "build_renderer",
    "configure_structlog",
    "event_dict_to_log_event",
    "get_logger_for_service",
    "level_from_name",
]
