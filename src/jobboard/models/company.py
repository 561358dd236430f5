"""
Company model for database entities.

Companies own jobs; only what the jobs table needs to reference them is kept.
"""

from __future__ import annotations

from typing import Any, ClassVar

from .base import BaseModel


class Company(BaseModel):
    """Company model keyed by its handle."""

    table_name = "companies"

    primary_key = "handle"

    columns = ("handle", "name")

    # Primary key is the only lookup
    indexes: ClassVar[list[dict[str, Any]]] = []

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.handle: str = kwargs.get("handle", "")
        self.name: str = kwargs.get("name", "")

    @classmethod
    def get_create_table_sql(cls) -> str:
        """Get SQL statement to create the companies table.

        Returns:
            SQL CREATE TABLE statement for companies table.
        """
        return """
        CREATE TABLE IF NOT EXISTS companies (
            handle TEXT PRIMARY KEY,
            name TEXT NOT NULL
        )
        """
