"""Shared test fixtures for the Exa tool module test suite.

Keeps tests independent of the developer's environment and ``.env`` file.
"""

from __future__ import annotations

import pytest

from shared.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Provide a known EXA_API_KEY, no service token, and a fresh settings cache."""
    monkeypatch.setenv("EXA_API_KEY", "test-key")
    monkeypatch.delenv("SERVICE_AUTH_TOKEN", raising=False)
    monkeypatch.delenv("EXA_API_BASE", raising=False)
    monkeypatch.delenv("EXA_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
