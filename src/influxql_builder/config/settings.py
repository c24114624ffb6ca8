"""Centralized builder settings loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Builder-wide configuration backed by environment variables.

    Field names are **lowercased** versions of the env-var names.
    ``pydantic-settings`` maps them automatically (case-insensitive).

    Example::

        settings = Settings()  # reads .env + real env
        days = settings.default_time_window_days
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Time filters ------------------------------------------------------

    default_time_window_days: int = 7
    """Length of the trailing window used when no start date is given."""

    # -- Rendering ---------------------------------------------------------

    validate_placeholders: bool = True
    """Fail on ``%{name}`` tokens that have no matching parameter."""

    escape_string_literals: bool = False
    """Backslash-escape quotes inside quoted condition values."""


def get_settings() -> Settings:
    """Return the process-wide ``Settings`` instance.

    Uses a module-level singleton so the ``.env`` file is read at most
    once per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()
