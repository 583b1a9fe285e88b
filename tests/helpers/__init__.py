"""Test helpers for compactlog tests.

Helpers:
    make_event: LogEvent factory with a fixed timestamp
    FIXED_TIMESTAMP: The timestamp make_event uses by default

Usage:
    from tests.helpers import make_event
"""

from tests.helpers.log_events import FIXED_TIMESTAMP, FIXED_TIMESTAMP_TEXT, make_event

__all__ = ["FIXED_TIMESTAMP", "FIXED_TIMESTAMP_TEXT", "make_event"]
