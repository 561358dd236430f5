"""
Configuration settings for the job board.

All settings are managed through environment variables with sensible defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any


class Config:
    """Centralized configuration with environment variable support."""

    # Validation Constants
    MIN_EQUITY: Decimal = Decimal("0")
    MAX_EQUITY: Decimal = Decimal("1")
    VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    # Paths
    JOBBOARD_DB_PATH: Path = Path(os.environ.get("JOBBOARD_DB_PATH", "./instance/jobboard.db"))

    # Logging
    JOBBOARD_LOG_LEVEL: str = os.environ.get("JOBBOARD_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Security - Flask
    SECRET_KEY: str = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key-change-in-production")

    # Flask settings
    DEBUG: bool = os.environ.get("FLASK_DEBUG", "false").lower() in ("true", "1", "yes")
    TESTING: bool = os.environ.get("FLASK_TESTING", "false").lower() in ("true", "1", "yes")

    @classmethod
    def _settings(cls, settings: Mapping[str, Any] | None) -> dict[str, Any]:
        """Resolve settings, falling back to the class attributes for missing keys."""
        keys = ("SECRET_KEY", "DEBUG", "TESTING", "JOBBOARD_LOG_LEVEL", "JOBBOARD_DB_PATH")
        resolved = {key: getattr(cls, key) for key in keys}
        if settings:
            resolved.update({key: settings[key] for key in keys if key in settings})
        return resolved

    @classmethod
    def validate(cls, settings: Mapping[str, Any] | None = None) -> list[str]:
        """Validate configuration and return list of errors.

        Args:
            settings: Resolved settings such as a Flask ``app.config``. If None,
                the class attributes are validated.

        Returns empty list if configuration is valid.
        """
        values = cls._settings(settings)
        errors: list[str] = []

        secret_key = values["SECRET_KEY"]
        if not secret_key or secret_key == "dev-secret-key-change-in-production":
            if not values["DEBUG"] and not values["TESTING"]:
                errors.append("FLASK_SECRET_KEY must be set in production")

        if str(values["JOBBOARD_LOG_LEVEL"]).upper() not in cls.VALID_LOG_LEVELS:
            errors.append(
                f"JOBBOARD_LOG_LEVEL must be one of {', '.join(cls.VALID_LOG_LEVELS)}"
            )

        db_dir = Path(values["JOBBOARD_DB_PATH"]).parent
        if not db_dir.exists():
            try:
                db_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                errors.append(f"Cannot create database directory {db_dir}: {e}")

        return errors

    @classmethod
    def ensure_directories(cls, settings: Mapping[str, Any] | None = None) -> None:
        """Ensure all required directories exist."""
        db_path = Path(cls._settings(settings)["JOBBOARD_DB_PATH"])
        db_path.parent.mkdir(parents=True, exist_ok=True)


def get_config() -> type[Config]:
    """Get the Config class."""
    return Config
