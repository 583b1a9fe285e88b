"""
Infrastructure layer - adapters for compactlog.

This layer contains:
- CorrelationIdEnricher (enricher port, structlog processor)
- CompactJsonFormatter and JsonValueFormatter (text formatter port)
- Property capture (property factory port)
- structlog configuration and rendering

IMPORT RULES:
- CAN import from: domain, application, config
"""
