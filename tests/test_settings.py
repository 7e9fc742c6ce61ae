"""Tests for funspine.settings module.

Covers:
- FunSpineSettings instantiation with defaults
- Environment variable and .env overrides
- Log level validation
- Cached access through get_settings
"""

from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from funspine.settings import (
    FunSpineSettings,
    captured_failure_logging_enabled,
    configure_logging_from_settings,
    get_settings,
)


class TestFunSpineSettingsDefaults:
    def test_default_log_level(self):
        assert FunSpineSettings().log_level == "INFO"

    def test_default_log_json_auto(self):
        assert FunSpineSettings().log_json is None

    def test_default_service_name(self):
        assert FunSpineSettings().service_name == "funspine"

    def test_captured_failures_off(self):
        assert FunSpineSettings().log_captured_failures is False


class TestFunSpineSettingsEnvOverride:
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("FUNSPINE_LOG_LEVEL", "debug")
        assert FunSpineSettings().log_level == "DEBUG"

    def test_log_json_from_env(self, monkeypatch):
        monkeypatch.setenv("FUNSPINE_LOG_JSON", "false")
        assert FunSpineSettings().log_json is False

    def test_captured_failures_from_env(self, monkeypatch):
        monkeypatch.setenv("FUNSPINE_LOG_CAPTURED_FAILURES", "1")
        assert FunSpineSettings().log_captured_failures is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert FunSpineSettings().log_level == "INFO"

    def test_dotenv_file(self, tmp_path: Path):
        (tmp_path / ".env").write_text("FUNSPINE_SERVICE_NAME=from-dotenv\nUNRELATED=1\n")
        assert FunSpineSettings().service_name == "from-dotenv"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("FUNSPINE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            FunSpineSettings()


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FUNSPINE_SERVICE_NAME", "reloaded")
        second = get_settings(force_reload=True)
        assert second is not first
        assert second.service_name == "reloaded"

    def test_configure_logging_from_settings(self):
        settings = FunSpineSettings(log_level="WARNING", log_json=True, service_name="svc")
        configure_logging_from_settings(settings)
        assert structlog.is_configured()


class TestCapturedFailureLoggingEnabled:
    def test_off_by_default(self):
        assert captured_failure_logging_enabled() is False

    def test_on_from_env(self, monkeypatch):
        monkeypatch.setenv("FUNSPINE_LOG_CAPTURED_FAILURES", "true")
        assert captured_failure_logging_enabled() is True

    def test_invalid_settings_read_as_off(self, monkeypatch):
        monkeypatch.setenv("FUNSPINE_LOG_CAPTURED_FAILURES", "true")
        monkeypatch.setenv("FUNSPINE_LOG_LEVEL", "verbose")
        assert captured_failure_logging_enabled() is False
