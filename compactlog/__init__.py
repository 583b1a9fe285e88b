"""
compactlog - compact JSON log records and correlation IDs for structlog.

Two pieces:
- CorrelationIdEnricher attaches a CorrelationId property to every event
- CompactJsonFormatter writes each event as one compact NDJSON line

Usage:
    from compactlog import configure_structlog, set_correlation_id

    configure_structlog(environment="production")
    set_correlation_id("7d1c...")
    structlog.get_logger().info("User {Name} logged in", Name="Alice")
"""

from compactlog.application.observability import (
    generate_correlation_id,
    get_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from compactlog.domain import (
    LogEvent,
    LogEventLevel,
    MessageTemplate,
    MissingArgumentError,
)
from compactlog.infrastructure.enrichers import CorrelationIdEnricher
from compactlog.infrastructure.formatting import (
    CompactJsonFormatter,
    JsonValueFormatter,
)
from compactlog.infrastructure.observability import (
    CompactJsonRenderer,
    configure_structlog,
)

__version__ = "0.1.0"
__all__ = [
    "CompactJsonFormatter",
    "CompactJsonRenderer",
    "CorrelationIdEnricher",
    "JsonValueFormatter",
    "LogEvent",
    "LogEventLevel",
    "MessageTemplate",
    "MissingArgumentError",
    "__version__",
    "configure_structlog",
    "generate_correlation_id",
    "get_correlation_id",
    "resolve_correlation_id",
    "set_correlation_id",
]
