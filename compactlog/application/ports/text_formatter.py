"""Text formatter port.

Formatters turn one log event into text on an output sink. Sinks only need
a ``write(str)`` method, so files, ``sys.stdout`` and ``io.StringIO`` all work.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from compactlog.domain.events import LogEvent


class TextSink(Protocol):
    """Anything text can be written to."""

    def write(self, text: str, /) -> object: ...


@runtime_checkable
class TextFormatter(Protocol):
    """Protocol for log event formatters."""

    def format(self, log_event: LogEvent, output: TextSink) -> None:
        """Write the event to the output.

        Args:
            log_event: The event to format. Not modified.
            output: The sink to write to.
        """
        ...
