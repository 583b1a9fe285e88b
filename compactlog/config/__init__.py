"""Configuration module for compactlog.

Available Configurations:
- CompactLogConfig: structlog pipeline and formatter settings
"""

from compactlog.config.logging_config import (
    DEFAULT_COMPACT_LOG_CONFIG,
    DEVELOPMENT_COMPACT_LOG_CONFIG,
    CompactLogConfig,
)

__all__ = [
    "CompactLogConfig",
    "DEFAULT_COMPACT_LOG_CONFIG",
    "DEVELOPMENT_COMPACT_LOG_CONFIG",
]
