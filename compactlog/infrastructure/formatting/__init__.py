"""Log event formatting: JSON value rendering, compact records and capture."""

from compactlog.infrastructure.formatting.compact_json_formatter import (
    EXCEPTION_TEMPLATE_TEXT,
    UNHANDLED_REQUEST_ERROR_TEXT,
    CompactJsonFormatter,
    format_timestamp,
)
from compactlog.infrastructure.formatting.json_value_formatter import (
    DEFAULT_TYPE_TAG_NAME,
    JsonValueFormatter,
)
from compactlog.infrastructure.formatting.property_capture import (
    DefaultPropertyFactory,
    PropertyValueConverter,
)

__all__: list[str] = [
    "CompactJsonFormatter",
    "DEFAULT_TYPE_TAG_NAME",
    "DefaultPropertyFactory",
    "EXCEPTION_TEMPLATE_TEXT",
    "JsonValueFormatter",
    "PropertyValueConverter",
    "UNHANDLED_REQUEST_ERROR_TEXT",
    "format_timestamp",
]
