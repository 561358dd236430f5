"""
Company repository for database operations.

Only what job records need from companies lives here.
"""

from __future__ import annotations

from ..config.database import DatabaseConfig
from ..models.company import Company
from .base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    """Repository for companies that own jobs."""

    def __init__(self, db_config: DatabaseConfig) -> None:
        super().__init__(Company, db_config)

    def create_company(self, handle: str, name: str) -> Company:
        """Create a company.

        Args:
            handle: Unique company handle.
            name: Display name.

        Returns:
            The created company.
        """
        self.db_config.execute_update(
            "INSERT INTO companies (handle, name) VALUES (?, ?)", (handle, name)
        )
        return Company(handle=handle, name=name)
