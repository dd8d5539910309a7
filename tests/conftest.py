"""Shared fixtures and markers for dollcode tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "exhaustive: sweeps a whole value range")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove DOLLCODE_* settings so defaults apply."""
    for name in ("DOLLCODE_LOG_LEVEL", "DOLLCODE_LOG_FORMAT", "DOLLCODE_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
