"""Log event model.

A LogEvent is created once per logging call, passed through the enrichers
(which may add or replace properties) and then handed to a formatter.
Formatters only read it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

from compactlog.domain.templates import MessageTemplate
from compactlog.domain.values import LogEventProperty, LogEventPropertyValue


class LogEventLevel(IntEnum):
    """Event severity, from least to most severe."""

    VERBOSE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def display_name(self) -> str:
        """Name written to log output, e.g. ``Warning``."""
        return self.name.capitalize()


# Level assumed when none is written to the output
DEFAULT_LEVEL: LogEventLevel = LogEventLevel.INFORMATION


@dataclass
class LogEvent:
    """A single structured log record.

    Attributes:
        timestamp: When the event occurred. Naive datetimes are read as UTC.
        level: Event severity.
        message_template: Parsed template the message is rendered from.
        properties: Property values by name, in insertion order.
        exception: Error attached to the event, if any.
    """

    timestamp: datetime
    level: LogEventLevel
    message_template: MessageTemplate
    properties: dict[str, LogEventPropertyValue] = field(default_factory=dict)
    exception: BaseException | None = None

    def add_or_update_property(self, prop: LogEventProperty) -> None:
        """Add a property, replacing any existing property with the same name."""
        self.properties[prop.name] = prop.value

    def add_property_if_absent(self, prop: LogEventProperty) -> None:
        self.properties.setdefault(prop.name, prop.value)

    def remove_property_if_present(self, name: str) -> None:
        self.properties.pop(name, None)
