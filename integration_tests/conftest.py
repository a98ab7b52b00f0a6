"""Pytest configuration for integration tests."""

import tempfile
from pathlib import Path

import pytest

from fitcycle.config import get_settings


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(monkeypatch):
    """Fresh data directory shared by the CLI and the API in one test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("FITCYCLE_DATA_DIR", tmpdir)
        monkeypatch.setenv("FITCYCLE_LOG_LEVEL", "WARNING")
        get_settings.cache_clear()
        yield Path(tmpdir)
        get_settings.cache_clear()
