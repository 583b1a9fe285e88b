"""
Application layer - ports and context for compactlog.

This layer contains:
- Ports (Protocols) for enrichers, formatters, property factories and
  correlation resolvers
- The context-variable correlation ID store

IMPORT RULES:
- CAN import from: domain
"""
