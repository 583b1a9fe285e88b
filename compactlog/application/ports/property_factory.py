"""Property factory port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from compactlog.domain.values import LogEventProperty


@runtime_checkable
class LogEventPropertyFactory(Protocol):
    """Builds log event properties from arbitrary Python values."""

    def create_property(
        self, name: str, value: Any, destructure_objects: bool = False
    ) -> LogEventProperty:
        """Create a property.

        Args:
            name: Property name, must not be empty.
            value: The raw value to capture.
            destructure_objects: Capture objects as structures rather than
                as their string form.

        Returns:
            The captured property.
        """
        ...
