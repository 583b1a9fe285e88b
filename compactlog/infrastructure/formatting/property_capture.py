"""Capture of Python values as log event property values.

Conversion rules:
- None, bool, numbers, str, bytes, dates/times, UUID, Path and Enum
  members are scalars
- Mappings become DictionaryValue (keys captured as scalars)
- list, tuple, set and frozenset become SequenceValue
- With destructuring (``{@Name}``) dataclasses, objects exposing
  ``model_dump()`` and plain objects with ``__dict__`` become StructureValue
  tagged with their class name
- With stringification (``{$Name}``) any value becomes its ``str()``
- Everything else is captured as its ``str()``
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any
from uuid import UUID

from compactlog.domain.templates import Destructuring
from compactlog.domain.values import (
    DictionaryValue,
    LogEventProperty,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

DEFAULT_MAX_DEPTH: int = 10

_SCALAR_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    str,
    bytes,
    datetime,
    date,
    time,
    timedelta,
    UUID,
    PurePath,
    Enum,
)
_SEQUENCE_TYPES: tuple[type, ...] = (list, tuple, set, frozenset)


class PropertyValueConverter:
    """Turns arbitrary Python objects into property values.

    Attributes:
        max_depth: Nesting depth after which values are cut off as null.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth

    def create_property_value(
        self,
        value: Any,
        destructuring: Destructuring = Destructuring.DEFAULT,
    ) -> LogEventPropertyValue:
        """Capture a value.

        Args:
            value: The value to capture.
            destructuring: Capture hint from the template token, if any.

        Returns:
            The captured property value.
        """
        return self._capture(value, destructuring, depth=1)

    def _capture(
        self, value: Any, destructuring: Destructuring, depth: int
    ) -> LogEventPropertyValue:
        if isinstance(value, LogEventPropertyValue):
            return value
        if depth > self.max_depth:
            return ScalarValue(None)
        if value is None:
            return ScalarValue(None)
        if destructuring is Destructuring.STRINGIFY:
            return ScalarValue(str(value))
        if isinstance(value, _SCALAR_TYPES):
            return ScalarValue(value)

        if isinstance(value, Mapping):
            return DictionaryValue(
                tuple(
                    (
                        self._capture_key(key),
                        self._capture(item, destructuring, depth + 1),
                    )
                    for key, item in value.items()
                )
            )

        if isinstance(value, _SEQUENCE_TYPES):
            return SequenceValue(
                tuple(
                    self._capture(item, destructuring, depth + 1) for item in value
                )
            )

        if destructuring is Destructuring.DESTRUCTURE:
            fields = self._object_fields(value)
            if fields is not None:
                properties = tuple(
                    LogEventProperty(
                        name, self._capture(item, destructuring, depth + 1)
                    )
                    for name, item in fields.items()
                    if name
                )
                return StructureValue(properties, type_tag=type(value).__name__)

        return ScalarValue(str(value))

    @staticmethod
    def _capture_key(key: Any) -> ScalarValue:
        if key is None or isinstance(key, _SCALAR_TYPES):
            return ScalarValue(key)
        return ScalarValue(str(key))

    @staticmethod
    def _object_fields(value: Any) -> dict[str, Any] | None:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {
                field.name: getattr(value, field.name)
                for field in dataclasses.fields(value)
            }
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            dumped = model_dump()
            if isinstance(dumped, Mapping):
                return dict(dumped)
        attributes = getattr(value, "__dict__", None)
        if isinstance(attributes, dict):
            return {
                name: item
                for name, item in attributes.items()
                if not name.startswith("_")
            }
        return None


class DefaultPropertyFactory:
    """Property factory backed by a PropertyValueConverter."""

    def __init__(self, converter: PropertyValueConverter | None = None) -> None:
        self._converter = converter or PropertyValueConverter()

    def create_property(
        self, name: str, value: Any, destructure_objects: bool = False
    ) -> LogEventProperty:
        destructuring = (
            Destructuring.DESTRUCTURE if destructure_objects else Destructuring.DEFAULT
        )
        return LogEventProperty(
            name, self._converter.create_property_value(value, destructuring)
        )
