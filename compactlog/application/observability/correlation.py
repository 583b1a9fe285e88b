"""Correlation ID management for distributed tracing.

This module keeps the current correlation ID in a context variable, so the
value follows a request across await points and stays isolated between
concurrent asyncio tasks and threads.

Usage:
    # In middleware (request start)
    correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()
    set_correlation_id(correlation_id)

    # Enrichers pick it up through the resolver signature
    enricher = CorrelationIdEnricher(resolver=resolve_correlation_id)
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Context variable for correlation ID
# Default is empty string to avoid None type issues
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4).

    Returns:
        A new UUID4 string suitable for correlation tracking.
    """
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID from context.

    Returns:
        The current correlation ID or empty string if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current context.

    This should be called at the start of each request to establish
    the correlation context for all downstream log events.

    Args:
        correlation_id: The correlation ID to set.
    """
    _correlation_id.set(correlation_id)


def resolve_correlation_id(context: Any) -> str:
    """Resolver entry point used by the correlation enricher.

    Args:
        context: The object asking for the ID (unused, kept for the
            resolver signature).

    Returns:
        The current correlation ID or empty string if not set.
    """
    return get_correlation_id()
