"""
Pytest configuration and shared fixtures for compactlog tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/, mirroring the package layers
- Integration tests go in tests/integration/
"""

from collections.abc import Iterator

import pytest
import structlog

from compactlog.application.observability.correlation import set_correlation_id


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from compactlog import __version__

    return __version__


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Clear correlation and structlog configuration between tests."""
    set_correlation_id("")
    yield
    set_correlation_id("")
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
