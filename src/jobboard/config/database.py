"""
Database configuration for the job board.

This module provides the store handle that repositories receive and the
Flask application-context helpers that hand one out per request.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from flask import current_app, g

from .settings import Config

logger = logging.getLogger(__name__)

_INDEX_NAME_RE = re.compile(
    r"CREATE\s+(?:UNIQUE\s+)?INDEX\s+IF\s+NOT\s+EXISTS\s+(\w+)", re.IGNORECASE
)


class DatabaseConfig:
    """Database configuration and connection management."""

    def __init__(self, db_path: Path | None = None) -> None:
        """Initialize database configuration.

        Args:
            db_path: Path to the SQLite database file. If None, uses Config.JOBBOARD_DB_PATH.
        """
        self.db_path = Path(db_path) if db_path else Config.JOBBOARD_DB_PATH
        self._ensure_db_directory()

    def _ensure_db_directory(self) -> None:
        """Ensure the database directory exists."""
        if self.db_path.parent:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection.

        Foreign key enforcement is switched on for every connection.

        Yields:
            SQLite database connection with row factory set to sqlite3.Row.
        """
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
        finally:
            conn.close()

    def execute_query(self, query: str, params: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        """Execute a query and return results.

        Args:
            query: SQL query to execute
            params: Parameters for the query

        Returns:
            List of dictionaries representing the result rows
        """
        with self.get_connection() as conn:
            cursor = conn.execute(query, params)
            return [dict(row) for row in cursor.fetchall()]

    def execute_update(self, query: str, params: tuple[Any, ...] = ()) -> int:
        """Execute an update/insert/delete query.

        Args:
            query: SQL query to execute
            params: Parameters for the query

        Returns:
            Number of rows affected
        """
        with self.get_connection() as conn:
            cursor = conn.execute(query, params)
            conn.commit()
            return cursor.rowcount

    def ensure_indexes(self, model_classes: list[type]) -> None:
        """Create any missing indexes for the given models.

        Args:
            model_classes: List of model classes to check/create indexes for.
        """
        with self.get_connection() as conn:
            for model_class in model_classes:
                table_name = model_class.get_table_name()
                index_sqls = model_class.get_indexes_sql()
                if not index_sqls:
                    continue

                existing = conn.execute(
                    "SELECT name FROM sqlite_master "
                    "WHERE type='index' AND tbl_name=? AND name LIKE 'idx_%'",
                    (table_name,),
                ).fetchall()
                existing_index_names = {row[0] for row in existing}

                for index_sql in index_sqls:
                    match = _INDEX_NAME_RE.search(index_sql)
                    index_name = match.group(1) if match else "unknown"
                    if index_name in existing_index_names:
                        logger.debug("Index exists: %s.%s", table_name, index_name)
                        continue
                    conn.execute(index_sql)
                    logger.debug("Created index: %s.%s", table_name, index_name)

            conn.commit()

    def initialize_schema(self, model_classes: list[type]) -> None:
        """Initialize database schema including tables and indexes.

        Tables are created in the order given, so referenced tables must
        come before the tables that reference them.

        Args:
            model_classes: List of model classes to initialize.
        """
        with self.get_connection() as conn:
            for model_class in model_classes:
                conn.execute(model_class.get_create_table_sql())
                logger.debug("Table ready: %s", model_class.get_table_name())
            conn.commit()

        self.ensure_indexes(model_classes)
        logger.info("Schema initialized at %s", self.db_path)

    def get_index_info(self, table_name: str) -> list[dict[str, Any]]:
        """Get information about indexes for a table.

        Args:
            table_name: Name of the table to get index info for.

        Returns:
            List of dictionaries containing index information.
        """
        return self.execute_query(
            "SELECT name, sql FROM sqlite_master "
            "WHERE type='index' AND tbl_name=? AND name LIKE 'idx_%' "
            "ORDER BY name",
            (table_name,),
        )


def get_db_config() -> DatabaseConfig:
    """Get the database configuration from Flask application context.

    Returns:
        DatabaseConfig instance from the current application context.

    Raises:
        RuntimeError: If called outside of an application context.
    """
    if "db_config" not in g:
        g.db_config = DatabaseConfig(Path(current_app.config["JOBBOARD_DB_PATH"]))

        initialized_paths = current_app.extensions.setdefault("initialized_db_schema_paths", set())
        db_path_str = str(g.db_config.db_path)
        if db_path_str not in initialized_paths:
            from ..models import SCHEMA_MODELS

            g.db_config.initialize_schema(SCHEMA_MODELS)
            initialized_paths.add(db_path_str)

    return g.db_config


def close_db(e: BaseException | None = None) -> None:
    """Drop the database configuration from Flask application context.

    Args:
        e: Exception that occurred during request handling (unused).
    """
    g.pop("db_config", None)
