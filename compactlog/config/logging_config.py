"""Logging configuration for compactlog.

This module defines the settings used to wire compactlog into structlog,
with environment variable overrides for deployment tuning.

Environment Variables:
- LOG_ENVIRONMENT: "production" (compact JSON) or "development" (console)
  (default: production)
- LOG_LEVEL: Minimum level written (default: INFO)
- COMPACT_LOG_TYPE_TAG: JSON member carrying a structure's type tag
  (default: $type)
- COMPACT_LOG_MAX_DEPTH: Maximum nesting captured from property values
  (default: 10, min: 1)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})
LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)

DEFAULT_ENVIRONMENT = "production"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TYPE_TAG_NAME = "$type"
DEFAULT_MAX_CAPTURE_DEPTH = 10


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class CompactLogConfig:
    """Settings for the structlog pipeline and the compact JSON formatter.

    Attributes:
        environment: "production" renders compact JSON lines,
                    "development" renders colored console output.
        log_level: Minimum stdlib level name that is written.
        type_tag_name: JSON member name used for structure type tags.
        max_capture_depth: Nesting depth after which captured values are cut off.
    """

    environment: str = DEFAULT_ENVIRONMENT
    log_level: str = DEFAULT_LOG_LEVEL
    type_tag_name: str = DEFAULT_TYPE_TAG_NAME
    max_capture_depth: int = DEFAULT_MAX_CAPTURE_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {self.log_level!r}"
            )
        if not self.type_tag_name:
            raise ValueError("type_tag_name must not be empty")
        if self.max_capture_depth < 1:
            raise ValueError(
                f"max_capture_depth must be at least 1, got {self.max_capture_depth}"
            )

    @classmethod
    def from_environment(cls) -> CompactLogConfig:
        """Create config from environment variables with defaults.

        Environment Variables:
            LOG_ENVIRONMENT: Output mode (default: production)
            LOG_LEVEL: Minimum level (default: INFO)
            COMPACT_LOG_TYPE_TAG: Type tag member name (default: $type)
            COMPACT_LOG_MAX_DEPTH: Capture depth (default: 10)

        Returns:
            CompactLogConfig with values from environment or defaults.
        """
        return cls(
            environment=_get_str_env("LOG_ENVIRONMENT", DEFAULT_ENVIRONMENT).lower(),
            log_level=_get_str_env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            type_tag_name=_get_str_env("COMPACT_LOG_TYPE_TAG", DEFAULT_TYPE_TAG_NAME),
            max_capture_depth=_get_int_env(
                "COMPACT_LOG_MAX_DEPTH", DEFAULT_MAX_CAPTURE_DEPTH
            ),
        )


# Default production config
DEFAULT_COMPACT_LOG_CONFIG = CompactLogConfig()

# Development config with console output and debug logging
DEVELOPMENT_COMPACT_LOG_CONFIG = CompactLogConfig(
    environment="development",
    log_level="DEBUG",
)
