"""Bridge between structlog event dicts and compactlog log events.

structlog passes each log call through its processors as a plain dict.
The final processor here, CompactJsonRenderer, turns that dict into a
LogEvent and renders it with the CompactJsonFormatter:

    log.warning("Retry {Count:000}", Count=3)

    {"Timestamp":"...","MessageTemplate":"Retry {Count:000}",
     "Message":"Retry 003","Renderings":["003"],"Level":"Warning","Count":3}

Event dict mapping:
- ``event``: message template text
- ``level`` (or the logging method name): event level
- ``timestamp``: datetime, epoch seconds or ISO-8601 text; now when absent
- ``exc_info``: exception, ``sys.exc_info()`` tuple or True
- every other key becomes a property, in order
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from compactlog.domain.events import DEFAULT_LEVEL, LogEvent, LogEventLevel
from compactlog.domain.templates import Destructuring, parse_template
from compactlog.domain.values import LogEventPropertyValue
from compactlog.infrastructure.formatting.compact_json_formatter import (
    CompactJsonFormatter,
)
from compactlog.infrastructure.formatting.property_capture import (
    PropertyValueConverter,
)

EVENT_KEY = "event"
LEVEL_KEY = "level"
TIMESTAMP_KEY = "timestamp"
EXC_INFO_KEY = "exc_info"

# Keys structlog.stdlib.ProcessorFormatter adds for its own bookkeeping
_STRUCTLOG_INTERNAL_KEYS: frozenset[str] = frozenset({"_record", "_from_structlog"})

_LEVELS_BY_NAME: dict[str, LogEventLevel] = {
    "trace": LogEventLevel.VERBOSE,
    "verbose": LogEventLevel.VERBOSE,
    "debug": LogEventLevel.DEBUG,
    "info": LogEventLevel.INFORMATION,
    "information": LogEventLevel.INFORMATION,
    "msg": LogEventLevel.INFORMATION,
    "warn": LogEventLevel.WARNING,
    "warning": LogEventLevel.WARNING,
    "error": LogEventLevel.ERROR,
    "exception": LogEventLevel.ERROR,
    "critical": LogEventLevel.FATAL,
    "fatal": LogEventLevel.FATAL,
}


def level_from_name(name: Any) -> LogEventLevel:
    """Map a structlog/stdlib level name to a LogEventLevel.

    Unknown names map to Information.
    """
    if isinstance(name, LogEventLevel):
        return name
    if not isinstance(name, str):
        return DEFAULT_LEVEL
    return _LEVELS_BY_NAME.get(name.lower(), DEFAULT_LEVEL)


def _to_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            # Unparseable text is logged under the time it was rendered
            return datetime.now(timezone.utc)
    return datetime.now(timezone.utc)


def _to_exception(value: Any) -> BaseException | None:
    if isinstance(value, BaseException):
        return value
    if isinstance(value, tuple) and len(value) == 3:
        return value[1] if isinstance(value[1], BaseException) else None
    if value is True:
        return sys.exc_info()[1]
    return None


def event_dict_to_log_event(
    event_dict: Mapping[str, Any],
    converter: PropertyValueConverter | None = None,
    method_name: str | None = None,
) -> LogEvent:
    """Build a LogEvent from a structlog event dict.

    The event dict is not modified.

    Args:
        event_dict: The structlog event dictionary.
        converter: Property value converter. Defaults to a fresh converter.
        method_name: Logging method name, used as the level when the dict
            carries no ``level`` key.

    Returns:
        The equivalent LogEvent.
    """
    converter = converter or PropertyValueConverter()

    template_source = event_dict.get(EVENT_KEY)
    template = parse_template("" if template_source is None else str(template_source))
    level = level_from_name(event_dict.get(LEVEL_KEY, method_name))
    timestamp = _to_timestamp(event_dict.get(TIMESTAMP_KEY))
    exception = _to_exception(event_dict.get(EXC_INFO_KEY))

    hints = {
        token.property_name: token.destructuring for token in template.property_tokens
    }

    properties: dict[str, LogEventPropertyValue] = {}
    for key, value in event_dict.items():
        if key in (EVENT_KEY, LEVEL_KEY, TIMESTAMP_KEY, EXC_INFO_KEY):
            continue
        if key in _STRUCTLOG_INTERNAL_KEYS:
            continue
        name = str(key)
        if not name:
            continue
        properties[name] = converter.create_property_value(
            value, hints.get(name, Destructuring.DEFAULT)
        )

    return LogEvent(
        timestamp=timestamp,
        level=level,
        message_template=template,
        properties=properties,
        exception=exception,
    )


class CompactJsonRenderer:
    """Final structlog processor rendering compact JSON lines.

    Returns the JSON object without a trailing newline; structlog's loggers
    add the line terminator.
    """

    def __init__(
        self,
        formatter: CompactJsonFormatter | None = None,
        converter: PropertyValueConverter | None = None,
    ) -> None:
        self._formatter = formatter or CompactJsonFormatter()
        self._converter = converter or PropertyValueConverter()

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> str:
        log_event = event_dict_to_log_event(
            event_dict, self._converter, method_name=method_name
        )
        return self._formatter.format_to_string(log_event)
