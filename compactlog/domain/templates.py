"""Message template parsing and rendering.

A message template is text with named placeholders:

    "User {Name} logged in from {@Location} after {Elapsed:0.00} ms"

Placeholder grammar:
    {[@|$]Name[,alignment][:format]}

- ``@`` asks for the argument to be captured as a structured object
- ``$`` asks for the argument to be captured as its string form
- ``alignment`` pads the rendered value (negative = left-aligned)
- ``format`` is a display-format specifier (see format_specs)
- ``{{`` and ``}}`` are literal braces

Parsing never fails: anything that is not a well-formed placeholder is
kept as text.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from io import StringIO
from typing import TextIO

from compactlog.domain.values import LogEventPropertyValue

DESTRUCTURE_HINT: str = "@"
STRINGIFY_HINT: str = "$"

# Upper bound on distinct template texts kept in the parse cache
TEMPLATE_CACHE_SIZE: int = 1000


class Destructuring(Enum):
    """How a token's argument should be captured."""

    DEFAULT = "default"
    STRINGIFY = "stringify"
    DESTRUCTURE = "destructure"


@dataclass(frozen=True)
class TextToken:
    """Literal text between placeholders (escaped braces already resolved)."""

    text: str
    start_index: int = 0

    def render(
        self, properties: Mapping[str, LogEventPropertyValue], output: TextIO
    ) -> None:
        output.write(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class PropertyToken:
    """A placeholder that substitutes a property value.

    Attributes:
        property_name: Name of the property, without any capture hint.
        raw_text: The placeholder exactly as written, braces included.
        format: Display-format specifier, or None.
        alignment: Pad width; negative values left-align. None for no padding.
        destructuring: Capture hint carried by the placeholder.
        start_index: Offset of the placeholder in the template text.
    """

    property_name: str
    raw_text: str
    format: str | None = None
    alignment: int | None = None
    destructuring: Destructuring = Destructuring.DEFAULT
    start_index: int = 0

    @property
    def is_positional(self) -> bool:
        return self.property_name.isdigit()

    def render(
        self, properties: Mapping[str, LogEventPropertyValue], output: TextIO
    ) -> None:
        """Write the property's display form, or the raw text if it is missing."""
        value = properties.get(self.property_name)
        if value is None:
            output.write(self.raw_text)
            return

        if self.alignment is None:
            value.render(output, self.format)
            return

        buffer = StringIO()
        value.render(buffer, self.format)
        rendered = buffer.getvalue()
        width = abs(self.alignment)
        if self.alignment < 0:
            output.write(rendered.ljust(width))
        else:
            output.write(rendered.rjust(width))

    def __str__(self) -> str:
        return self.raw_text


MessageTemplateToken = TextToken | PropertyToken


@dataclass(frozen=True)
class MessageTemplate:
    """A parsed message template."""

    text: str
    tokens: tuple[MessageTemplateToken, ...] = ()

    @classmethod
    def parse(cls, text: str) -> MessageTemplate:
        """Parse template text, reusing cached results for repeated text."""
        return parse_template(text)

    @property
    def property_tokens(self) -> Iterator[PropertyToken]:
        return (token for token in self.tokens if isinstance(token, PropertyToken))

    def render_to(
        self, properties: Mapping[str, LogEventPropertyValue], output: TextIO
    ) -> None:
        for token in self.tokens:
            token.render(properties, output)

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        """Substitute property values into the template.

        Args:
            properties: Property values keyed by name.

        Returns:
            The rendered message. Placeholders without a matching property
            keep their raw text.
        """
        buffer = StringIO()
        self.render_to(properties, buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.text


def _is_valid_in_property_name(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_valid_in_format(ch: str) -> bool:
    if ch == "}":
        return False
    category = unicodedata.category(ch)
    return ch == " " or ch.isalnum() or category[0] in ("P", "S")


def _is_valid_in_property_tag(ch: str) -> bool:
    return (
        ch in (DESTRUCTURE_HINT, STRINGIFY_HINT, ":")
        or _is_valid_in_property_name(ch)
        or _is_valid_in_format(ch)
    )


def _is_valid_in_alignment(ch: str) -> bool:
    return ch.isdigit() or ch == "-"


class MessageTemplateParser:
    """Splits template text into text and property tokens."""

    def parse(self, text: str) -> MessageTemplate:
        tokens: list[MessageTemplateToken] = []
        position = 0
        length = len(text)

        while position < length:
            text_token, position = self._parse_text_token(text, position)
            if text_token.text:
                tokens.append(text_token)
            if position >= length:
                break
            token, position = self._parse_property_token(text, position)
            tokens.append(token)

        return MessageTemplate(text=text, tokens=tuple(tokens))

    def _parse_text_token(self, text: str, start: int) -> tuple[TextToken, int]:
        accumulated: list[str] = []
        position = start
        length = len(text)

        while position < length:
            ch = text[position]
            if ch == "{":
                if position + 1 < length and text[position + 1] == "{":
                    accumulated.append(ch)
                    position += 1
                else:
                    break
            else:
                accumulated.append(ch)
                if ch == "}" and position + 1 < length and text[position + 1] == "}":
                    position += 1
            position += 1

        return TextToken("".join(accumulated), start), position

    def _parse_property_token(
        self, text: str, start: int
    ) -> tuple[MessageTemplateToken, int]:
        position = start + 1
        length = len(text)
        while position < length and _is_valid_in_property_tag(text[position]):
            position += 1

        if position == length or text[position] != "}":
            return TextToken(text[start:position], start), position

        end = position + 1
        raw_text = text[start:end]
        tag_content = raw_text[1:-1]
        as_text = TextToken(raw_text, start)

        if not tag_content:
            return as_text, end

        split = self._split_tag_content(tag_content)
        if split is None:
            return as_text, end
        name, format_spec, alignment_text = split

        destructuring = Destructuring.DEFAULT
        if name.startswith(DESTRUCTURE_HINT):
            destructuring = Destructuring.DESTRUCTURE
            name = name[1:]
        elif name.startswith(STRINGIFY_HINT):
            destructuring = Destructuring.STRINGIFY
            name = name[1:]

        if not name or not all(_is_valid_in_property_name(ch) for ch in name):
            return as_text, end

        if format_spec is not None and not all(
            _is_valid_in_format(ch) for ch in format_spec
        ):
            return as_text, end

        alignment: int | None = None
        if alignment_text is not None:
            alignment = self._parse_alignment(alignment_text)
            if alignment is None:
                return as_text, end

        token = PropertyToken(
            property_name=name,
            raw_text=raw_text,
            format=format_spec,
            alignment=alignment,
            destructuring=destructuring,
            start_index=start,
        )
        return token, end

    @staticmethod
    def _split_tag_content(
        content: str,
    ) -> tuple[str, str | None, str | None] | None:
        """Split ``name[,alignment][:format]`` into its parts.

        Returns:
            (name, format, alignment) or None when the content is malformed.
        """
        format_delim = content.find(":")
        alignment_delim = content.find(",")

        if format_delim == -1 and alignment_delim == -1:
            return content, None, None

        if alignment_delim == -1 or (
            format_delim != -1 and alignment_delim > format_delim
        ):
            name = content[:format_delim]
            format_spec = content[format_delim + 1 :] or None
            return name, format_spec, None

        name = content[:alignment_delim]
        if format_delim == -1:
            if alignment_delim == len(content) - 1:
                return None
            return name, None, content[alignment_delim + 1 :]

        if alignment_delim == format_delim - 1:
            return None
        alignment_text = content[alignment_delim + 1 : format_delim]
        format_spec = content[format_delim + 1 :] or None
        return name, format_spec, alignment_text

    @staticmethod
    def _parse_alignment(alignment_text: str) -> int | None:
        if not all(_is_valid_in_alignment(ch) for ch in alignment_text):
            return None
        if alignment_text.rfind("-") > 0:
            return None
        try:
            width = int(alignment_text)
        except ValueError:
            return None
        return width or None


_parser = MessageTemplateParser()


@lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def parse_template(text: str) -> MessageTemplate:
    """Parse template text with a bounded, thread-safe cache."""
    return _parser.parse(text)
