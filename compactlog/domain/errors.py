"""Domain errors for compactlog.

All package errors inherit from CompactLogError so callers can catch
everything raised by the formatters and enrichers with a single clause.
"""

from __future__ import annotations


class CompactLogError(Exception):
    """Base exception for all compactlog errors."""

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)


class MissingArgumentError(CompactLogError, ValueError):
    """Raised when a required argument is absent at call time.

    The formatter raises this before writing anything to the output, so a
    failed call never leaves a partial record on the sink.

    Usage:
        raise MissingArgumentError("log_event")
    """

    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Required argument '{argument_name}' is missing")
