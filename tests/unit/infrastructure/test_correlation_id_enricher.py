"""Unit tests for CorrelationIdEnricher."""

import json
from typing import Any

import pytest

from compactlog.application.observability.correlation import set_correlation_id
from compactlog.domain.values import ScalarValue
from compactlog.infrastructure.enrichers.correlation_id import (
    CORRELATION_ID_PROPERTY_NAME,
    CorrelationIdEnricher,
)
from compactlog.infrastructure.formatting.compact_json_formatter import (
    CompactJsonFormatter,
)
from compactlog.infrastructure.formatting.property_capture import (
    DefaultPropertyFactory,
)
from tests.helpers import make_event


class TestEnrich:
    """Tests for enrich()."""

    def test_adds_resolved_id(self) -> None:
        """The resolved value is added as a scalar property."""
        enricher = CorrelationIdEnricher(resolver=lambda _: "abc-123")
        event = make_event("Hello")

        enricher.enrich(event, DefaultPropertyFactory())

        assert event.properties[CORRELATION_ID_PROPERTY_NAME] == ScalarValue("abc-123")

    def test_replaces_existing_id(self) -> None:
        """An existing CorrelationId is overwritten."""
        enricher = CorrelationIdEnricher(resolver=lambda _: "new")
        event = make_event("Hello", {"CorrelationId": "old"})

        enricher.enrich(event, DefaultPropertyFactory())

        assert event.properties["CorrelationId"] == ScalarValue("new")

    def test_resolver_receives_enricher(self) -> None:
        """The resolver is called with the enricher as its context."""
        seen: list[Any] = []

        def resolver(context: Any) -> str:
            seen.append(context)
            return "id"

        enricher = CorrelationIdEnricher(resolver=resolver)
        enricher.enrich(make_event("x"), DefaultPropertyFactory())

        assert seen == [enricher]

    @pytest.mark.parametrize("resolved", [None, ""])
    def test_empty_values_attached_as_is(self, resolved: str | None) -> None:
        """None and empty strings are still attached."""
        enricher = CorrelationIdEnricher(resolver=lambda _: resolved)
        event = make_event("x")

        enricher.enrich(event, DefaultPropertyFactory())

        assert event.properties["CorrelationId"] == ScalarValue(resolved)

    def test_other_properties_untouched(self) -> None:
        """Only CorrelationId changes."""
        enricher = CorrelationIdEnricher(resolver=lambda _: "id")
        event = make_event("x", {"A": 1})

        enricher.enrich(event, DefaultPropertyFactory())

        assert list(event.properties) == ["A", "CorrelationId"]
        assert event.properties["A"] == ScalarValue(1)

    def test_default_resolver_reads_context(self) -> None:
        """Without a resolver the context-variable store is used."""
        set_correlation_id("from-context")
        event = make_event("x")

        CorrelationIdEnricher().enrich(event, DefaultPropertyFactory())

        assert event.properties["CorrelationId"] == ScalarValue("from-context")

    def test_enriched_event_formats_with_correlation_id(self) -> None:
        """The enriched property shows up in the compact record."""
        event = make_event("Order {OrderId} placed", {"OrderId": 7})
        CorrelationIdEnricher(resolver=lambda _: "abc").enrich(
            event, DefaultPropertyFactory()
        )

        record = json.loads(CompactJsonFormatter().format_to_string(event))

        assert record["CorrelationId"] == "abc"
        assert record["OrderId"] == 7

    def test_null_id_formats_as_null(self) -> None:
        """A None correlation ID is written as JSON null."""
        event = make_event("x")
        CorrelationIdEnricher(resolver=lambda _: None).enrich(
            event, DefaultPropertyFactory()
        )

        assert '"CorrelationId":null' in CompactJsonFormatter().format_to_string(event)


class TestProcessor:
    """Tests for the structlog processor form."""

    @pytest.mark.asyncio
    async def test_processor_sets_correlation_id(self) -> None:
        """The processor writes the resolved ID into the event dict."""
        set_correlation_id("processor-test-id")
        event_dict: dict[str, Any] = {"event": "test_event", "key": "value"}

        result = CorrelationIdEnricher()(None, "info", event_dict)

        assert result["CorrelationId"] == "processor-test-id"
        assert result["event"] == "test_event"
        assert result["key"] == "value"

    @pytest.mark.asyncio
    async def test_processor_overwrites_existing_key(self) -> None:
        """A CorrelationId passed by the caller is replaced."""
        event_dict: dict[str, Any] = {"event": "x", "CorrelationId": "caller"}

        result = CorrelationIdEnricher(resolver=lambda _: "resolved")(
            None, "info", event_dict
        )

        assert result["CorrelationId"] == "resolved"

    @pytest.mark.asyncio
    async def test_processor_attaches_empty_id(self) -> None:
        """An unset context still produces the key."""
        result = CorrelationIdEnricher()(None, "info", {"event": "x"})

        assert result["CorrelationId"] == ""
