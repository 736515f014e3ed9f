import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the MEDIATYPE_* environment variables for tests.

    Keeps Settings instances created during a test independent of the
    developer's shell and .env file.
    """
    monkeypatch.setenv("MEDIATYPE_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("MEDIATYPE_DEFAULT_CONTENT_TYPE", "application/octet-stream")
    monkeypatch.setenv("MEDIATYPE_STRICT_CONTENT_TYPE", "true")

    yield


@pytest.fixture
def text_plain_utf8():
    """A media type with one parameter."""
    from mediatype import MediaType

    return MediaType("text", "plain", {"charset": "utf-8"})
