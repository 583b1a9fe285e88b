"""Correlation ID enricher.

Attaches the current correlation ID to every log event as the scalar
property ``CorrelationId``, replacing any value already present. The ID
comes from an injected resolver; by default the context-variable store in
compactlog.application.observability.

The enricher also works as a structlog processor:

    structlog.configure(processors=[..., CorrelationIdEnricher(), ...])
"""

from __future__ import annotations

from typing import Any

from compactlog.application.observability.correlation import resolve_correlation_id
from compactlog.application.ports.correlation_resolver import CorrelationIdResolver
from compactlog.application.ports.property_factory import LogEventPropertyFactory
from compactlog.domain.events import LogEvent
from compactlog.domain.values import LogEventProperty, ScalarValue

CORRELATION_ID_PROPERTY_NAME: str = "CorrelationId"


class CorrelationIdEnricher:
    """Adds the resolved correlation ID to log events.

    The resolved value is attached as-is, including None or an empty string.
    """

    def __init__(self, resolver: CorrelationIdResolver = resolve_correlation_id) -> None:
        self._resolver = resolver

    def enrich(
        self, log_event: LogEvent, property_factory: LogEventPropertyFactory
    ) -> None:
        """Add or replace the ``CorrelationId`` property on the event.

        Args:
            log_event: The event to enrich.
            property_factory: Unused; the property is always a plain scalar.
        """
        value = self._resolver(self)
        prop = LogEventProperty(CORRELATION_ID_PROPERTY_NAME, ScalarValue(value))
        log_event.add_or_update_property(prop)

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        """Structlog processor form of enrich().

        Args:
            logger: The logger instance (unused, required by structlog).
            method_name: The logging method name (unused, required by structlog).
            event_dict: The event dictionary to modify.

        Returns:
            The event dictionary with ``CorrelationId`` set.
        """
        event_dict[CORRELATION_ID_PROPERTY_NAME] = self._resolver(self)
        return event_dict
