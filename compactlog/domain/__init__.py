"""
Domain layer - log event model for compactlog.

This layer contains:
- LogEvent and LogEventLevel
- The property value tagged union
- Message template parsing and rendering
- Domain errors

IMPORT RULES:
- Imports NOTHING from application, infrastructure or config
"""

from compactlog.domain.errors import CompactLogError, MissingArgumentError
from compactlog.domain.events import DEFAULT_LEVEL, LogEvent, LogEventLevel
from compactlog.domain.templates import (
    Destructuring,
    MessageTemplate,
    MessageTemplateParser,
    PropertyToken,
    TextToken,
    parse_template,
)
from compactlog.domain.values import (
    DictionaryValue,
    LogEventProperty,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

__all__: list[str] = [
    "CompactLogError",
    "DEFAULT_LEVEL",
    "Destructuring",
    "DictionaryValue",
    "LogEvent",
    "LogEventLevel",
    "LogEventProperty",
    "LogEventPropertyValue",
    "MessageTemplate",
    "MessageTemplateParser",
    "MissingArgumentError",
    "PropertyToken",
    "ScalarValue",
    "SequenceValue",
    "StructureValue",
    "TextToken",
    "parse_template",
]
