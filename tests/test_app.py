"""Tests for the application factory and per-context store handle."""

import logging
import os
from pathlib import Path

import pytest
from flask import Flask, g

from jobboard import create_app
from jobboard.config.database import close_db, get_db_config


def test_create_app(app, tmp_db_path: Path):
    """Test the app is configured and the schema is created."""
    assert isinstance(app, Flask)
    assert app.config["TESTING"] is True
    assert app.config["JOBBOARD_DB_PATH"] == str(tmp_db_path)
    assert tmp_db_path.exists()
    assert str(tmp_db_path) in app.extensions["initialized_db_schema_paths"]


def test_create_app_overrides(tmp_path: Path):
    """Test overrides take precedence over environment settings."""
    db_path = tmp_path / "other" / "jobs.db"

    app = create_app({"JOBBOARD_DB_PATH": str(db_path), "SECRET_KEY": "s"})

    assert app.config["SECRET_KEY"] == "s"
    assert db_path.exists()


def test_get_db_config_cached_per_context(app, tmp_db_path: Path):
    """Test one store handle per application context."""
    with app.app_context():
        first = get_db_config()
        assert get_db_config() is first
        assert first.db_path == tmp_db_path

        tables = first.execute_query(
            "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
        )
        assert {"companies", "jobs"} <= {row["name"] for row in tables}

    with app.app_context():
        assert get_db_config() is not first


def test_close_db(app):
    """Test the handle is dropped at teardown."""
    with app.app_context():
        get_db_config()
        close_db()
        assert "db_config" not in g


def test_create_app_uses_override_paths_only(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog):
    """Test settings passed as overrides drive validation and directory creation."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    db_path = tmp_path / "data" / "jobs.db"

    with caplog.at_level(logging.WARNING, logger="jobboard"):
        create_app({"JOBBOARD_DB_PATH": str(db_path), "TESTING": True, "SECRET_KEY": "s"})

    assert os.listdir(workdir) == []
    assert db_path.exists()
    assert "FLASK_SECRET_KEY" not in caplog.text
