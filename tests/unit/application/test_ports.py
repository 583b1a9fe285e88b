"""Tests that adapters satisfy the application ports."""

from compactlog.application.ports import (
    LogEventEnricher,
    LogEventPropertyFactory,
    TextFormatter,
)
from compactlog.infrastructure.enrichers.correlation_id import CorrelationIdEnricher
from compactlog.infrastructure.formatting.compact_json_formatter import (
    CompactJsonFormatter,
)
from compactlog.infrastructure.formatting.property_capture import (
    DefaultPropertyFactory,
)


class TestPortConformance:
    """Runtime protocol checks for the shipped adapters."""

    def test_correlation_enricher_is_enricher(self) -> None:
        """CorrelationIdEnricher implements LogEventEnricher."""
        assert isinstance(CorrelationIdEnricher(), LogEventEnricher)

    def test_compact_formatter_is_text_formatter(self) -> None:
        """CompactJsonFormatter implements TextFormatter."""
        assert isinstance(CompactJsonFormatter(), TextFormatter)

    def test_default_factory_is_property_factory(self) -> None:
        """DefaultPropertyFactory implements LogEventPropertyFactory."""
        assert isinstance(DefaultPropertyFactory(), LogEventPropertyFactory)
