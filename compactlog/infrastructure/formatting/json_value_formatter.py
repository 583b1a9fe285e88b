"""JSON rendering of log event property values.

Output is compact JSON with no insignificant whitespace:

    ScalarValue("Bob")                      -> "Bob"
    SequenceValue([1, 2])                   -> [1,2]
    StructureValue([Name="Bob"], "User")    -> {"Name":"Bob","$type":"User"}
    DictionaryValue([(1, "a")])             -> {"1":"a"}
"""

from __future__ import annotations

import json
import math
import re
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from compactlog.application.ports.text_formatter import TextSink
from compactlog.domain.values import (
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

DEFAULT_TYPE_TAG_NAME: str = "$type"

# Lone surrogates (surrogateescape-decoded names) cannot be encoded as UTF-8
_SURROGATE = re.compile("[\ud800-\udfff]")


class JsonValueFormatter:
    """Writes property values as JSON.

    Attributes:
        type_tag_name: Member name used to carry a structure's type tag,
            or None to leave type tags out.
    """

    def __init__(self, type_tag_name: str | None = DEFAULT_TYPE_TAG_NAME) -> None:
        self.type_tag_name = type_tag_name

    def format(self, value: LogEventPropertyValue, output: TextSink) -> None:
        """Write a property value as JSON.

        Raises:
            TypeError: If the value is not a known property value kind.
        """
        if isinstance(value, ScalarValue):
            self._format_scalar(value.value, output)
        elif isinstance(value, SequenceValue):
            self._format_sequence(value, output)
        elif isinstance(value, StructureValue):
            self._format_structure(value, output)
        elif isinstance(value, DictionaryValue):
            self._format_dictionary(value, output)
        else:
            raise TypeError(
                f"Cannot format property value of type {type(value).__name__}"
            )

    def _format_sequence(self, sequence: SequenceValue, output: TextSink) -> None:
        output.write("[")
        delimiter = ""
        for element in sequence.elements:
            output.write(delimiter)
            delimiter = ","
            self.format(element, output)
        output.write("]")

    def _format_structure(self, structure: StructureValue, output: TextSink) -> None:
        output.write("{")
        delimiter = ""
        for prop in structure.properties:
            output.write(delimiter)
            delimiter = ","
            self.write_quoted_json_string(prop.name, output)
            output.write(":")
            self.format(prop.value, output)

        if self.type_tag_name is not None and structure.type_tag is not None:
            output.write(delimiter)
            self.write_quoted_json_string(self.type_tag_name, output)
            output.write(":")
            self.write_quoted_json_string(structure.type_tag, output)

        output.write("}")

    def _format_dictionary(self, dictionary: DictionaryValue, output: TextSink) -> None:
        output.write("{")
        delimiter = ""
        for key, value in dictionary.elements:
            output.write(delimiter)
            delimiter = ","
            key_text = "null" if key.value is None else str(key.value)
            self.write_quoted_json_string(key_text, output)
            output.write(":")
            self.format(value, output)
        output.write("}")

    def _format_scalar(self, value: Any, output: TextSink) -> None:
        if value is None:
            output.write("null")
        elif isinstance(value, Enum):
            self.write_quoted_json_string(value.name, output)
        elif isinstance(value, bool):
            output.write("true" if value else "false")
        elif isinstance(value, int):
            output.write(str(value))
        elif isinstance(value, float):
            self._format_float(value, output)
        elif isinstance(value, Decimal):
            if value.is_finite():
                output.write(str(value))
            else:
                self.write_quoted_json_string(str(value), output)
        elif isinstance(value, datetime):
            self.write_quoted_json_string(format_round_trip(value), output)
        elif isinstance(value, (date, time)):
            self.write_quoted_json_string(value.isoformat(), output)
        elif isinstance(value, str):
            self.write_quoted_json_string(value, output)
        else:
            self.write_quoted_json_string(str(value), output)

    def _format_float(self, value: float, output: TextSink) -> None:
        if math.isnan(value):
            self.write_quoted_json_string("NaN", output)
        elif math.isinf(value):
            self.write_quoted_json_string(
                "Infinity" if value > 0 else "-Infinity", output
            )
        else:
            output.write(repr(value))

    @staticmethod
    def write_quoted_json_string(text: str | None, output: TextSink) -> None:
        """Write text as a JSON string literal, or ``null`` for None.

        Quotes, backslashes, control characters and lone surrogates are
        escaped; other non-ASCII characters are written as-is.
        """
        if text is None:
            output.write("null")
            return
        quoted = json.dumps(text, ensure_ascii=False)
        output.write(_SURROGATE.sub(_escape_code_point, quoted))


def _escape_code_point(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def format_round_trip(value: datetime) -> str:
    """Format a datetime as ISO-8601 with seven fractional digits.

    Aware values keep their UTC offset (``+02:00``); naive values get no
    suffix. Years are always four digits.
    """
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond:06d}0"
    )
    offset = value.utcoffset()
    if offset is None:
        return text
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"
