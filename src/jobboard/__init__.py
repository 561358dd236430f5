"""Application factory for Flask app creation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from flask import Flask

from .config import get_config
from .config.database import DatabaseConfig, close_db
from .models import SCHEMA_MODELS

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_format: str) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=log_format)


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Create and configure Flask application.

    Args:
        overrides: Config values applied on top of the environment settings.
    """
    app = Flask(__name__, instance_relative_config=True)

    config_class = get_config()
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["JOBBOARD_LOG_LEVEL"], app.config["LOG_FORMAT"])

    errors = config_class.validate(app.config)
    if errors:
        logger.warning("Configuration warnings: %s", errors)

    config_class.ensure_directories(app.config)

    db_path = Path(app.config["JOBBOARD_DB_PATH"])
    app.config["JOBBOARD_DB_PATH"] = str(db_path)

    app.teardown_appcontext(close_db)

    DatabaseConfig(db_path).initialize_schema(SCHEMA_MODELS)
    app.extensions.setdefault("initialized_db_schema_paths", set()).add(str(db_path))

    logger.info("Application created and configured")
    return app
