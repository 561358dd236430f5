"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from jobboard.config.database import DatabaseConfig
from jobboard.models import SCHEMA_MODELS


@pytest.fixture
def tmp_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def db_config(tmp_db_path: Path) -> DatabaseConfig:
    """Database configuration with the schema in place and no rows."""
    config = DatabaseConfig(tmp_db_path)
    config.initialize_schema(SCHEMA_MODELS)
    return config


# ============================================================================
# Seed Data Fixtures
# ============================================================================

@pytest.fixture
def seeded_db(db_config: DatabaseConfig) -> DatabaseConfig:
    """Database with companies c1..c3 and one job each."""
    with db_config.get_connection() as conn:
        conn.executemany(
            "INSERT INTO companies (handle, name) VALUES (?, ?)",
            [("c1", "C1"), ("c2", "C2"), ("c3", "C3")],
        )
        conn.executemany(
            "INSERT INTO jobs (company_handle, title, salary, equity) VALUES (?, ?, ?, ?)",
            [
                ("c1", "engineer", 80000, "0"),
                ("c2", "doctor", 100000, "0.07"),
                ("c3", "lawyer", 120000, "0.893"),
            ],
        )
        conn.commit()
    return db_config


@pytest.fixture
def job_ids(seeded_db: DatabaseConfig) -> dict[str, int]:
    """Seeded job ids keyed by title."""
    rows = seeded_db.execute_query("SELECT id, title FROM jobs")
    return {row["title"]: row["id"] for row in rows}


@pytest.fixture
def job_repository(seeded_db: DatabaseConfig):
    """JobRepository over the seeded database."""
    from jobboard.repositories.job_repository import JobRepository

    return JobRepository(seeded_db)


# ============================================================================
# Flask App Fixtures
# ============================================================================

@pytest.fixture
def app_config_overrides() -> dict[str, str]:
    """Temporary config overrides for tests."""
    return {}


@pytest.fixture
def app(app_config_overrides: dict[str, str], tmp_db_path: Path):
    """Create Flask app for testing with test configuration."""
    from jobboard import create_app

    test_config = {
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
        "JOBBOARD_DB_PATH": str(tmp_db_path),
    }
    test_config.update(app_config_overrides)

    app = create_app(test_config)

    yield app

    if tmp_db_path.exists():
        tmp_db_path.unlink()
