"""Unit tests for the structlog event dict bridge."""

import copy
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import pytest

from compactlog.domain.events import LogEventLevel
from compactlog.domain.values import ScalarValue, StructureValue
from compactlog.infrastructure.formatting.compact_json_formatter import (
    CompactJsonFormatter,
)
from compactlog.infrastructure.formatting.json_value_formatter import (
    JsonValueFormatter,
)
from compactlog.infrastructure.observability.structlog_bridge import (
    CompactJsonRenderer,
    event_dict_to_log_event,
    level_from_name,
)


@dataclass
class Location:
    city: str


class TestLevelFromName:
    """Tests for level_from_name."""

    @pytest.mark.parametrize(
        ("name", "level"),
        [
            ("debug", LogEventLevel.DEBUG),
            ("info", LogEventLevel.INFORMATION),
            ("warn", LogEventLevel.WARNING),
            ("WARNING", LogEventLevel.WARNING),
            ("error", LogEventLevel.ERROR),
            ("exception", LogEventLevel.ERROR),
            ("critical", LogEventLevel.FATAL),
            ("trace", LogEventLevel.VERBOSE),
        ],
    )
    def test_known_names(self, name: str, level: LogEventLevel) -> None:
        """structlog and stdlib names map to levels."""
        assert level_from_name(name) is level

    @pytest.mark.parametrize("name", ["bogus", None, 42])
    def test_unknown_names_default_to_information(self, name: object) -> None:
        """Anything unrecognized is Information."""
        assert level_from_name(name) is LogEventLevel.INFORMATION


class TestEventDictToLogEvent:
    """Tests for event_dict_to_log_event."""

    def test_maps_reserved_keys(self) -> None:
        """event, level and timestamp become event fields."""
        event = event_dict_to_log_event(
            {
                "event": "User {Name}",
                "level": "warning",
                "timestamp": "2024-01-01T12:00:00.123456Z",
                "Name": "Alice",
            }
        )

        assert event.message_template.text == "User {Name}"
        assert event.level is LogEventLevel.WARNING
        assert event.timestamp == datetime(
            2024, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc
        )
        assert event.properties == {"Name": ScalarValue("Alice")}

    def test_does_not_modify_event_dict(self) -> None:
        """The input dict is only read."""
        event_dict: dict[str, Any] = {"event": "x", "level": "info", "A": [1, 2]}
        before = copy.deepcopy(event_dict)

        event_dict_to_log_event(event_dict)

        assert event_dict == before

    def test_method_name_used_without_level_key(self) -> None:
        """The logging method gives the level when none is recorded."""
        event = event_dict_to_log_event({"event": "x"}, method_name="error")

        assert event.level is LogEventLevel.ERROR

    def test_epoch_timestamp(self) -> None:
        """Numeric timestamps are epoch seconds."""
        event = event_dict_to_log_event({"event": "x", "timestamp": 0})

        assert event.timestamp == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_missing_timestamp_uses_now(self) -> None:
        """Events without a timestamp are stamped when converted."""
        before = datetime.now(timezone.utc)

        event = event_dict_to_log_event({"event": "x"})

        assert event.timestamp >= before

    def test_missing_event_is_empty_template(self) -> None:
        """A dict without an event key has an empty template."""
        assert event_dict_to_log_event({}).message_template.text == ""

    def test_exception_instance(self) -> None:
        """exc_info may carry the exception itself."""
        error = ValueError("boom")

        event = event_dict_to_log_event({"event": "x", "exc_info": error})

        assert event.exception is error

    def test_exc_info_tuple(self) -> None:
        """exc_info may be a sys.exc_info() tuple."""
        error = KeyError("k")

        event = event_dict_to_log_event(
            {"event": "x", "exc_info": (KeyError, error, None)}
        )

        assert event.exception is error

    def test_exc_info_true_reads_current_exception(self) -> None:
        """exc_info=True picks up the exception being handled."""
        try:
            raise RuntimeError("current")
        except RuntimeError as error:
            event = event_dict_to_log_event({"event": "x", "exc_info": True})
            assert event.exception is error

    def test_destructure_hint_captures_structure(self) -> None:
        """{@Name} in the template destructures the matching value."""
        event = event_dict_to_log_event(
            {"event": "Moved to {@Where}", "Where": Location("Oslo")}
        )

        captured = event.properties["Where"]
        assert isinstance(captured, StructureValue)
        assert captured.type_tag == "Location"

    def test_values_without_hint_are_stringified(self) -> None:
        """Objects not named with @ are captured by str()."""
        event = event_dict_to_log_event(
            {"event": "Moved", "Where": Location("Oslo")}
        )

        assert event.properties["Where"] == ScalarValue("Location(city='Oslo')")

    def test_structlog_internal_keys_skipped(self) -> None:
        """ProcessorFormatter bookkeeping keys are not properties."""
        event = event_dict_to_log_event(
            {"event": "x", "_record": object(), "_from_structlog": True, "A": 1}
        )

        assert list(event.properties) == ["A"]


class TestCompactJsonRenderer:
    """Tests for CompactJsonRenderer."""

    def test_renders_single_json_object(self) -> None:
        """The renderer returns the record without a newline."""
        rendered = CompactJsonRenderer()(
            None,
            "warning",
            {
                "event": "Retry {Count:000}",
                "timestamp": "2024-01-01T12:00:00.123456Z",
                "Count": 3,
            },
        )

        assert rendered == (
            '{"Timestamp":"2024-01-01T12:00:00.1234560Z",'
            '"MessageTemplate":"Retry {Count:000}",'
            '"Message":"Retry 003",'
            '"Renderings":["003"],'
            '"Level":"Warning",'
            '"Count":3}'
        )

    def test_level_key_wins_over_method_name(self) -> None:
        """add_log_level output is preferred to the method name."""
        rendered = CompactJsonRenderer()(
            None, "exception", {"event": "x", "level": "error"}
        )

        assert json.loads(rendered)["Level"] == "Error"

    def test_uses_configured_formatter(self) -> None:
        """A custom formatter controls the type tag member."""
        renderer = CompactJsonRenderer(
            formatter=CompactJsonFormatter(JsonValueFormatter(type_tag_name="_t"))
        )

        rendered = renderer(
            None, "info", {"event": "{@Where}", "Where": Location("Oslo")}
        )

        assert json.loads(rendered)["Where"] == {"city": "Oslo", "_t": "Location"}
