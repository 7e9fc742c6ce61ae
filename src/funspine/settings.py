"""Runtime settings for funspine.

funspine has very little to configure: how its logging is rendered and
whether the fault barriers (``Try`` operations and the task combinators) log
the exceptions they capture. ``FunSpineSettings`` reads these from
``FUNSPINE_*`` environment variables and ``.env`` files.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads from env vars and .env files
    - **Sensible defaults:** Silent, INFO-level library out of the box

Examples:
    >>> from funspine.settings import get_settings
    >>> get_settings().log_captured_failures
    False

Tags:
    settings, configuration, pydantic, environment, funspine

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from funspine.logging import configure_logging


class FunSpineSettings(BaseSettings):
    """Settings shared by every funspine module.

    Fields
    ──────
    log_level             : Structlog log level
    log_json              : JSON output (None = auto-detect from tty)
    service_name          : ``service.name`` attached to every log event
    log_captured_failures : Emit a debug event when an exception becomes a Failure
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None
    service_name: str = "funspine"
    log_captured_failures: bool = Field(
        default=False,
        description="Log exceptions captured by Try and the task combinators",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


_settings: FunSpineSettings | None = None


def get_settings(*, force_reload: bool = False) -> FunSpineSettings:
    """Load and cache a :class:`FunSpineSettings` instance."""
    global _settings
    if _settings is None or force_reload:
        _settings = FunSpineSettings()
    return _settings


def captured_failure_logging_enabled() -> bool:
    """Whether captured failures should be logged.

    Invalid configuration reads as disabled, so fault barriers never raise a
    settings error in place of the failure they caught.
    """
    try:
        return get_settings().log_captured_failures
    except ValidationError:
        return False


def configure_logging_from_settings(settings: FunSpineSettings | None = None) -> None:
    """Apply the logging fields of ``settings`` (or the cached settings)."""
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service=settings.service_name,
    )


__all__ = [
    "FunSpineSettings",
    "get_settings",
    "captured_failure_logging_enabled",
    "configure_logging_from_settings",
]
