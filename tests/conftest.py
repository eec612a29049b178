"""Shared fixtures for mockobject tests."""

import pytest

from mockobject import set_load_blocker
from mockobject.core.config import reset_config
from mockobject.registry import MockRegistry


@pytest.fixture(autouse=True)
def clean_globals(monkeypatch):
    """Isolate tests from config files, env overrides and load blockers."""
    monkeypatch.delenv("MOCKOBJECT_SUPPRESS_REAL_LOAD", raising=False)
    monkeypatch.delenv("MOCKOBJECT_FIXTURES", raising=False)
    reset_config()
    set_load_blocker(None)
    yield
    reset_config()
    set_load_blocker(None)


@pytest.fixture
def registry():
    """Fresh identity registry, independent of the global one."""
    return MockRegistry()
