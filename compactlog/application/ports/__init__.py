"""Application ports (interfaces) implemented by infrastructure adapters."""

from compactlog.application.ports.correlation_resolver import CorrelationIdResolver
from compactlog.application.ports.enricher import LogEventEnricher
from compactlog.application.ports.property_factory import LogEventPropertyFactory
from compactlog.application.ports.text_formatter import TextFormatter, TextSink

__all__: list[str] = [
    "CorrelationIdResolver",
    "LogEventEnricher",
    "LogEventPropertyFactory",
    "TextFormatter",
    "TextSink",
]
