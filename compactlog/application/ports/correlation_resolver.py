"""Correlation ID resolver port.

The correlation ID source (request headers, ambient context, tracing
metadata) lives outside compactlog. Enrichers receive it as a plain callable
taking an opaque context object and returning the current ID.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

CorrelationIdResolver = Callable[[Any], "str | None"]
