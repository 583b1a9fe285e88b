"""Enricher port.

An enricher runs after a log event is built and before it is formatted.
It may add or replace properties on the event; it never removes the
event's template, level or timestamp.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from compactlog.application.ports.property_factory import (
        LogEventPropertyFactory,
    )
    from compactlog.domain.events import LogEvent


@runtime_checkable
class LogEventEnricher(Protocol):
    """Protocol for components that attach properties to log events."""

    def enrich(
        self, log_event: LogEvent, property_factory: LogEventPropertyFactory
    ) -> None:
        """Add or update properties on the event in place.

        Args:
            log_event: The event to enrich.
            property_factory: Factory for building properties from raw values.
        """
        ...
