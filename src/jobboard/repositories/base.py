"""
Base repository class for data access operations.

This module provides a base repository class with the common read and delete
operations shared by the job board repositories.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..config.database import DatabaseConfig
from ..models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Base repository class with common read and delete operations.

    The store handle is passed in explicitly; repositories hold no other state.
    """

    def __init__(self, model_class: type[T], db_config: DatabaseConfig) -> None:
        """Initialize the repository with a model class and database configuration.

        Args:
            model_class: The model class this repository manages.
            db_config: Store handle every operation runs against.
        """
        self.model_class = model_class
        self.db_config = db_config

    def get_by_id(self, model_id: Any) -> T | None:
        """Get a record by its primary key.

        Args:
            model_id: The primary key of the record to retrieve.

        Returns:
            The model instance if found, None otherwise.
        """
        sql = self.model_class.get_select_by_id_sql()
        results = self.db_config.execute_query(sql, (model_id,))

        if results:
            return self.model_class.from_dict(results[0])
        return None

    def get_all(self) -> list[T]:
        """Get all records from the table, in store order.

        Returns:
            List of model instances.
        """
        sql = (
            f"SELECT {', '.join(self.model_class.columns)} "
            f"FROM {self.model_class.get_table_name()}"
        )
        results = self.db_config.execute_query(sql)

        return [self.model_class.from_dict(result) for result in results]

    def delete_by_id(self, model_id: Any) -> bool:
        """Delete a record by its primary key.

        Args:
            model_id: The primary key of the record to delete.

        Returns:
            True if the record was deleted, False otherwise.
        """
        sql = self.model_class.get_delete_by_id_sql()

        rows_affected = self.db_config.execute_update(sql, (model_id,))
        return rows_affected > 0

    def exists(self, model_id: Any) -> bool:
        """Check if a record with the given primary key exists.

        Args:
            model_id: The primary key to check for existence.

        Returns:
            True if the record exists, False otherwise.
        """
        return self.get_by_id(model_id) is not None

    def find_by(self, **kwargs: Any) -> list[T]:
        """Find records whose columns equal the given values.

        Args:
            **kwargs: Column names and values to match.

        Returns:
            List of model instances matching the criteria.

        Raises:
            ValueError: If a keyword is not a column of the model.
        """
        unknown = sorted(set(kwargs) - set(self.model_class.columns))
        if unknown:
            raise ValueError(f"Unknown columns for {self.model_class.__name__}: {unknown}")

        where_clauses = []
        params = []

        for key, value in kwargs.items():
            where_clauses.append(f"{key} = ?")
            params.append(value)

        sql = (
            f"SELECT {', '.join(self.model_class.columns)} "
            f"FROM {self.model_class.get_table_name()} "
            f"WHERE {' AND '.join(where_clauses)}"
        )
        results = self.db_config.execute_query(sql, tuple(params))

        return [self.model_class.from_dict(result) for result in results]
