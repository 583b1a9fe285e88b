"""Compact JSON formatter producing one NDJSON line per log event.

Line layout (key order is fixed, downstream parsers depend on it):

    {"Timestamp":"2024-01-01T12:00:00.1234560Z",
     "MessageTemplate":"Retry {Count:000}",
     "Message":"Retry 003",
     "Renderings":["003"],          <- only when a token carries a format
     "Level":"Warning",             <- omitted for Information
     "Count":3}                     <- one key per property, in order

Redundancy rules:
- MessageTemplate is written as "Exception" when the event carries an
  exception, or when an Error-level template contains the boilerplate that
  the API Gateway proxy function wraps unhandled request errors in.
- Message is the exception's message when there is one, and null when the
  template captures a structured object (``{@User}``), since the object
  already appears in full among the properties.
- A property name starting with ``@`` is written with the ``@`` doubled so
  it cannot be mistaken for a capture hint.

The whole line is built in memory and written with a single call, so a
failure never leaves a partial record on the sink.
"""

from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

from compactlog.application.ports.text_formatter import TextSink
from compactlog.domain.errors import MissingArgumentError
from compactlog.domain.events import DEFAULT_LEVEL, LogEvent, LogEventLevel
from compactlog.domain.templates import DESTRUCTURE_HINT
from compactlog.infrastructure.formatting.json_value_formatter import (
    DEFAULT_TYPE_TAG_NAME,
    JsonValueFormatter,
    format_round_trip,
)

# Wrapper text the API Gateway proxy function logs unhandled request errors with
UNHANDLED_REQUEST_ERROR_TEXT: str = "Unknown error responding to request:"

# Template text written in place of templates that repeat the error message
EXCEPTION_TEMPLATE_TEXT: str = "Exception"


class CompactJsonFormatter:
    """Formats log events as compact, newline-delimited JSON.

    Instances hold no per-event state; one formatter can be shared across
    threads as long as each thread writes to its own sink.
    """

    def __init__(self, value_formatter: JsonValueFormatter | None = None) -> None:
        """Create the formatter.

        Args:
            value_formatter: Formatter for property values. Defaults to a
                JsonValueFormatter writing type tags as ``$type``.
        """
        self._value_formatter = value_formatter or JsonValueFormatter(
            type_tag_name=DEFAULT_TYPE_TAG_NAME
        )

    @property
    def value_formatter(self) -> JsonValueFormatter:
        return self._value_formatter

    def format(self, log_event: LogEvent, output: TextSink) -> None:
        """Write the event followed by a newline.

        Args:
            log_event: The event to format.
            output: The sink to write to.

        Raises:
            MissingArgumentError: If the event or the output is None.
        """
        if log_event is None:
            raise MissingArgumentError("log_event")
        if output is None:
            raise MissingArgumentError("output")

        output.write(_render_event(log_event, self._value_formatter) + "\n")

    def format_to_string(self, log_event: LogEvent) -> str:
        """Return the event's JSON object without the trailing newline."""
        if log_event is None:
            raise MissingArgumentError("log_event")
        return _render_event(log_event, self._value_formatter)

    @staticmethod
    def format_event(
        log_event: LogEvent,
        output: TextSink,
        value_formatter: JsonValueFormatter,
    ) -> None:
        """Write the event's JSON object without the trailing newline.

        Args:
            log_event: The event to format.
            output: The sink to write to.
            value_formatter: Formatter for property values.

        Raises:
            MissingArgumentError: If any argument is None.
        """
        if log_event is None:
            raise MissingArgumentError("log_event")
        if output is None:
            raise MissingArgumentError("output")
        if value_formatter is None:
            raise MissingArgumentError("value_formatter")

        output.write(_render_event(log_event, value_formatter))


def _render_event(log_event: LogEvent, value_formatter: JsonValueFormatter) -> str:
    buffer = StringIO()
    _append_timestamp(log_event, buffer)
    _append_message_template(log_event, buffer)
    _append_message(log_event, buffer)
    _append_renderings(log_event, buffer)
    _append_level(log_event, buffer)

    for name, value in log_event.properties.items():
        if name.startswith(DESTRUCTURE_HINT):
            name = DESTRUCTURE_HINT + name

        buffer.write(",")
        JsonValueFormatter.write_quoted_json_string(name, buffer)
        buffer.write(":")
        value_formatter.format(value, buffer)

    buffer.write("}")
    return buffer.getvalue()


def format_timestamp(timestamp: datetime) -> str:
    """Format an instant as round-trip ISO-8601 UTC with seven fractional digits."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    utc = timestamp.astimezone(timezone.utc).replace(tzinfo=None)
    return format_round_trip(utc) + "Z"


def _append_timestamp(log_event: LogEvent, output: StringIO) -> None:
    output.write('{"Timestamp":"')
    output.write(format_timestamp(log_event.timestamp))
    output.write('"')


def _append_message_template(log_event: LogEvent, output: StringIO) -> None:
    output.write(',"MessageTemplate":')
    JsonValueFormatter.write_quoted_json_string(
        _non_redundant_template_text(log_event), output
    )


def _non_redundant_template_text(log_event: LogEvent) -> str:
    """Template text to write, replaced where it would repeat the error message."""
    template_text = log_event.message_template.text

    if log_event.exception is not None:
        return EXCEPTION_TEMPLATE_TEXT
    if log_event.level != LogEventLevel.ERROR:
        return template_text

    if UNHANDLED_REQUEST_ERROR_TEXT in template_text:
        return EXCEPTION_TEMPLATE_TEXT
    return template_text


def exception_message(exception: BaseException) -> str:
    """Message text of an exception.

    KeyError's str() is the repr of its key; the key itself is used instead.
    """
    if (
        isinstance(exception, KeyError)
        and len(exception.args) == 1
        and isinstance(exception.args[0], str)
    ):
        return exception.args[0]
    return str(exception)


def _append_message(log_event: LogEvent, output: StringIO) -> None:
    output.write(',"Message":')

    if log_event.exception is not None:
        JsonValueFormatter.write_quoted_json_string(
            exception_message(log_event.exception), output
        )
        return

    # Checks the token's raw text, so an '@' inside a format also counts
    has_serialized_fields = any(
        DESTRUCTURE_HINT in str(token)
        for token in log_event.message_template.property_tokens
    )
    message = (
        None
        if has_serialized_fields
        else log_event.message_template.render(log_event.properties)
    )
    JsonValueFormatter.write_quoted_json_string(message, output)


def _append_renderings(log_event: LogEvent, output: StringIO) -> None:
    tokens_with_format = [
        token
        for token in log_event.message_template.property_tokens
        if token.format is not None
    ]
    if not tokens_with_format:
        return

    output.write(',"Renderings":[')
    delimiter = ""
    for token in tokens_with_format:
        output.write(delimiter)
        delimiter = ","
        space = StringIO()
        token.render(log_event.properties, space)
        JsonValueFormatter.write_quoted_json_string(space.getvalue(), output)
    output.write("]")


def _append_level(log_event: LogEvent, output: StringIO) -> None:
    if log_event.level != DEFAULT_LEVEL:
        output.write(',"Level":"')
        output.write(log_event.level.display_name)
        output.write('"')

