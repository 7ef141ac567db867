"""Shared fixtures and markers for the edgeauth test suite."""

import os

import pytest

from vectors import END, START, TEST_KEY


def pytest_configure(config):
    config.addinivalue_line("markers", "vectors: known-answer HMAC vectors shared with the edge")


@pytest.fixture
def fixed_window():
    """Config fragment for the fixed window used by the known-answer vectors."""
    return {"key": TEST_KEY, "start_time": START, "end_time": END}


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep EDGEAUTH_* variables and any local .env out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("EDGEAUTH_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
