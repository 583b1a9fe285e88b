"""Structured logging configuration with structlog.

This module wires compactlog into structlog, supporting both production
(compact JSON) and development (console) output modes.

Log Entry Format (production):
    {
        "Timestamp": "2024-01-01T00:00:00.0000000Z",
        "MessageTemplate": "User {Name} logged in",
        "Message": "User \\"Alice\\" logged in",
        "Name": "Alice",
        "CorrelationId": "uuid",
        ...additional context
    }

Usage:
    # At application startup
    from compactlog.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # Compact JSON output
    configure_structlog(environment="development")  # Console output

    # Then use structlog normally, with message templates as events
    import structlog
    log = structlog.get_logger()
    log.info("User {Name} logged in", Name="Alice")
"""

from __future__ import annotations

import logging

import structlog
from structlog.typing import Processor

from compactlog.config.logging_config import CompactLogConfig
from compactlog.infrastructure.enrichers.correlation_id import CorrelationIdEnricher
from compactlog.infrastructure.formatting.compact_json_formatter import (
    CompactJsonFormatter,
)
from compactlog.infrastructure.formatting.json_value_formatter import (
    JsonValueFormatter,
)
from compactlog.infrastructure.formatting.property_capture import (
    PropertyValueConverter,
)
from compactlog.infrastructure.observability.structlog_bridge import (
    CompactJsonRenderer,
)


def _get_log_level(config: CompactLogConfig) -> int:
    """Get the configured log level.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    return getattr(logging, config.log_level.upper(), logging.INFO)


def build_renderer(config: CompactLogConfig) -> CompactJsonRenderer:
    """Create the compact JSON renderer described by the config."""
    formatter = CompactJsonFormatter(
        JsonValueFormatter(type_tag_name=config.type_tag_name)
    )
    converter = PropertyValueConverter(max_depth=config.max_capture_depth)
    return CompactJsonRenderer(formatter=formatter, converter=converter)


def configure_structlog(
    environment: str | None = None,
    config: CompactLogConfig | None = None,
) -> None:
    """Configure structlog for the application.

    Should be called once at application startup.

    Args:
        environment: 'production' for compact JSON output, 'development'
                    for console. Overrides the config's environment.
        config: Settings to apply. Defaults to CompactLogConfig.from_environment().

    Configuration:
        Production:
            - One compact JSON line per event
            - Message templates rendered against event properties
            - CorrelationId attached to every event

        Development:
            - Colored console output for readability
            - CorrelationId attached to every event
    """
    config = config or CompactLogConfig.from_environment()
    if environment is not None and environment != config.environment:
        config = CompactLogConfig(
            environment=environment,
            log_level=config.log_level,
            type_tag_name=config.type_tag_name,
            max_capture_depth=config.max_capture_depth,
        )

    # Shared processors for all environments
    shared_processors: list[Processor] = [
        # Merge context from contextvars (async support)
        structlog.contextvars.merge_contextvars,
        # Add log level
        structlog.processors.add_log_level,
        # Add ISO 8601 timestamp
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        # Add correlation ID from context
        CorrelationIdEnricher(),
        # Handle stack traces nicely
        structlog.processors.StackInfoRenderer(),
        # Handle Unicode properly
        structlog.processors.UnicodeDecoder(),
    ]

    # Environment-specific final processor
    if config.environment == "production":
        final_processor: Processor = build_renderer(config)
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(config)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).debug(
        "compact_logging_configured",
        environment=config.environment,
        log_level=config.log_level,
    )


def get_logger_for_service(
    service_name: str, component: str = "compactlog"
) -> structlog.typing.FilteringBoundLogger:
    """Get a pre-bound logger for a service.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "compactlog").

    Returns:
        A logger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
