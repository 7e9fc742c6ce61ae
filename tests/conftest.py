"""
Shared pytest fixtures and configuration for funspine tests.

This module provides:
- Automatic ``unit`` marking for unmarked tests
- Settings cache and structlog isolation so configuration never leaks
  between tests
- A fixture that turns on captured-failure logging
"""

from pathlib import Path

import pytest
import structlog

import funspine.settings as settings_module


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark all tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "slow"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Give every test a fresh settings cache and an empty working directory.

    Running from ``tmp_path`` keeps a developer's ``.env`` out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_module, "_settings", None)
    yield
    settings_module._settings = None
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def capture_failures(monkeypatch: pytest.MonkeyPatch):
    """Enable debug events for exceptions captured by Try and tasks."""
    monkeypatch.setenv("FUNSPINE_LOG_CAPTURED_FAILURES", "true")
    return settings_module.get_settings(force_reload=True)
