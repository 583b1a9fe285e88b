"""Property values carried by log events.

A property value is a small tagged union:

- ScalarValue: a single value (None, bool, number, string, datetime, ...)
- SequenceValue: an ordered list of property values
- StructureValue: named fields with an optional type tag
- DictionaryValue: scalar keys mapped to property values

Every value knows how to render its display form, which is what message
template rendering substitutes into the text. JSON output is the job of
the infrastructure value formatter, not of these classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, TextIO

from compactlog.domain.format_specs import format_scalar

# Format specifier that renders strings without surrounding quotes
LITERAL_FORMAT: str = "l"


class LogEventPropertyValue(ABC):
    """Base class for every property value kind."""

    @abstractmethod
    def render(self, output: TextIO, format_spec: str | None = None) -> None:
        """Write the display form of the value.

        Args:
            output: Text sink to write to.
            format_spec: Optional display-format specifier from the token.
        """

    def __str__(self) -> str:
        buffer = StringIO()
        self.render(buffer)
        return buffer.getvalue()


@dataclass(frozen=True)
class ScalarValue(LogEventPropertyValue):
    """A single value such as a number, string, boolean or None."""

    value: Any = None

    def render(self, output: TextIO, format_spec: str | None = None) -> None:
        value = self.value
        if value is None:
            output.write("null")
            return

        if isinstance(value, str):
            if format_spec != LITERAL_FORMAT:
                output.write('"')
                output.write(value.replace('"', '\\"'))
                output.write('"')
            else:
                output.write(value)
            return

        output.write(format_scalar(value, format_spec))


@dataclass(frozen=True)
class SequenceValue(LogEventPropertyValue):
    """An ordered sequence of property values."""

    elements: tuple[LogEventPropertyValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def render(self, output: TextIO, format_spec: str | None = None) -> None:
        output.write("[")
        delimiter = ""
        for element in self.elements:
            output.write(delimiter)
            delimiter = ", "
            element.render(output, format_spec)
        output.write("]")


@dataclass(frozen=True)
class LogEventProperty:
    """A named property value.

    Attributes:
        name: Property name, never empty.
        value: The property value.
    """

    name: str
    value: LogEventPropertyValue

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Property name must not be empty")


@dataclass(frozen=True)
class StructureValue(LogEventPropertyValue):
    """A captured object: ordered named fields plus an optional type tag."""

    properties: tuple[LogEventProperty, ...] = ()
    type_tag: str | None = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(self.properties))

    def render(self, output: TextIO, format_spec: str | None = None) -> None:
        if self.type_tag is not None:
            output.write(self.type_tag)
            output.write(" ")
        output.write("{ ")
        delimiter = ""
        for prop in self.properties:
            output.write(delimiter)
            delimiter = ", "
            output.write(prop.name)
            output.write(": ")
            prop.value.render(output, format_spec)
        output.write(" }")


@dataclass(frozen=True)
class DictionaryValue(LogEventPropertyValue):
    """Scalar keys mapped to property values, in insertion order."""

    elements: tuple[tuple[ScalarValue, LogEventPropertyValue], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def render(self, output: TextIO, format_spec: str | None = None) -> None:
        output.write("[")
        delimiter = ""
        for key, value in self.elements:
            output.write(delimiter)
            delimiter = ", "
            output.write("(")
            key.render(output)
            output.write(": ")
            value.render(output, format_spec)
            output.write(")")
        output.write("]")
