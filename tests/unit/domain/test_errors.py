"""Unit tests for domain errors."""

import pytest

from compactlog.domain.errors import CompactLogError, MissingArgumentError


class TestMissingArgumentError:
    """Tests for MissingArgumentError."""

    def test_carries_argument_name(self) -> None:
        """The missing argument is named on the error."""
        error = MissingArgumentError("output")

        assert error.argument_name == "output"
        assert str(error) == "Required argument 'output' is missing"

    def test_is_value_error_and_package_error(self) -> None:
        """Callers can catch it as ValueError or CompactLogError."""
        with pytest.raises(ValueError):
            raise MissingArgumentError("log_event")
        with pytest.raises(CompactLogError):
            raise MissingArgumentError("log_event")
