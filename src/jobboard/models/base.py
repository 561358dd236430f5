"""
Base model class for database entities.

This module provides a base model class with common functionality for all database entities.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

T = TypeVar("T", bound="BaseModel")


class BaseModel:
    """Base model class with common functionality for all database entities.

    Subclasses list their stored columns in ``columns``; the primary key is
    part of that list and comes first.
    """

    # Table name for the model (to be overridden by subclasses)
    table_name: ClassVar[str] = ""

    # Primary key field name
    primary_key: ClassVar[str] = "id"

    # Stored columns, in table order
    columns: ClassVar[tuple[str, ...]] = ("id",)

    # Index definitions
    indexes: ClassVar[list[dict[str, Any]]] = []

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the model with provided attributes.

        Args:
            **kwargs: Field values to set on the model instance.
        """
        for column in self.columns:
            setattr(self, column, kwargs.get(column))

    def to_dict(self, exclude: list[str] | None = None) -> dict[str, Any]:
        """Convert the model instance to a dictionary.

        Args:
            exclude: List of field names to exclude from the dictionary.

        Returns:
            Dictionary representation of the model instance.
        """
        exclude = exclude or []
        return {
            column: getattr(self, column) for column in self.columns if column not in exclude
        }

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Create a model instance from a dictionary or result row.

        Args:
            data: Dictionary containing field values.

        Returns:
            Model instance populated with data from the dictionary.
        """
        return cls(**{key: value for key, value in data.items() if key in cls.columns})

    def __repr__(self) -> str:
        """Return a string representation of the model."""
        class_name = self.__class__.__name__
        return f"<{class_name} {self.primary_key}={getattr(self, self.primary_key)}>"

    def __eq__(self, other: object) -> bool:
        """Check equality on all stored columns."""
        if not isinstance(other, self.__class__):
            return False
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        """Return hash based on primary key."""
        return hash(getattr(self, self.primary_key))

    @classmethod
    def get_table_name(cls) -> str:
        """Get the table name for this model.

        Returns:
            Table name for the model.
        """
        return cls.table_name

    @classmethod
    def get_create_table_sql(cls) -> str:
        """Get SQL statement to create the table for this model.

        Returns:
            SQL CREATE TABLE statement.
        """
        raise NotImplementedError(f"{cls.__name__} must define its table")

    @classmethod
    def get_indexes_sql(cls) -> list[str]:
        """Get CREATE INDEX statements for the model's index definitions.

        Each definition has ``name``, ``columns`` and ``unique``.

        Returns:
            List of SQL CREATE INDEX statements.
        """
        table_name = cls.get_table_name()
        statements = []

        for index in cls.indexes:
            columns = ", ".join(index["columns"])
            unique = "UNIQUE " if index.get("unique") else ""
            statements.append(
                f"CREATE {unique}INDEX IF NOT EXISTS {index['name']} "
                f"ON {table_name} ({columns})"
            )

        return statements

    @classmethod
    def get_select_by_id_sql(cls) -> str:
        """Get SQL statement for selecting a model by ID.

        Returns:
            SQL SELECT statement.
        """
        return f"""
        SELECT {', '.join(cls.columns)} FROM {cls.get_table_name()}
        WHERE {cls.primary_key} = ?
        """

    @classmethod
    def get_delete_by_id_sql(cls) -> str:
        """Get SQL statement for deleting a model by ID.

        Returns:
            SQL DELETE statement.
        """
        return f"""
        DELETE FROM {cls.get_table_name()}
        WHERE {cls.primary_key} = ?
        """
