"""Log event enrichers."""

from compactlog.infrastructure.enrichers.correlation_id import (
    CORRELATION_ID_PROPERTY_NAME,
    CorrelationIdEnricher,
)

__all__: list[str] = ["CORRELATION_ID_PROPERTY_NAME", "CorrelationIdEnricher"]
