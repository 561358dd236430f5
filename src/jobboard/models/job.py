"""
Job model for database entities.

This module provides the Job model class for managing job records in the database.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar

from ..config.settings import Config
from ..errors import BadRequestError
from .base import BaseModel

# Logical update field -> jobs column. Only these may appear in a SET clause.
JOB_FIELD_COLUMNS: dict[str, str] = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}


def normalize_equity(value: Any) -> str | None:
    """Convert an equity value to the fixed-point text stored in the jobs table.

    Args:
        value: None, or anything ``Decimal`` accepts (str, int, float, Decimal).

    Returns:
        Canonical decimal text such as ``"0.56"``, or None.

    Raises:
        BadRequestError: If the value is not a finite number, or falls
            outside MIN_EQUITY..MAX_EQUITY.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise BadRequestError(f"Invalid equity: {value!r}")

    try:
        # str() first so floats keep their short repr instead of binary noise
        equity = Decimal(str(value).strip())
    except InvalidOperation:
        raise BadRequestError(f"Invalid equity: {value!r}") from None

    if not equity.is_finite():
        raise BadRequestError(f"Invalid equity: {value!r}")

    if not Config.MIN_EQUITY <= equity <= Config.MAX_EQUITY:
        raise BadRequestError(
            f"Equity must be between {Config.MIN_EQUITY} and {Config.MAX_EQUITY}: {value!r}"
        )

    # "f" keeps small values like 0.0000001 out of exponent notation
    return format(equity, "f")


class Job(BaseModel):
    """Job model representing an open position at a company."""

    table_name = "jobs"

    columns = ("id", "title", "salary", "equity", "company_handle")

    indexes: ClassVar[list[dict[str, Any]]] = [
        {
            "columns": ["title"],
            "unique": False,
            "name": "idx_jobs_title",
        },
        {
            "columns": ["company_handle"],
            "unique": False,
            "name": "idx_jobs_company_handle",
        },
    ]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the Job model with provided attributes.

        Args:
            **kwargs: Field values to set on the model instance.
        """
        super().__init__(**kwargs)

        self.id: int | None = kwargs.get("id")
        self.title: str = kwargs.get("title", "")
        self.salary: int | None = kwargs.get("salary")
        self.equity: str | None = kwargs.get("equity")
        self.company_handle: str = kwargs.get("company_handle", "")

    @classmethod
    def get_create_table_sql(cls) -> str:
        """Get SQL statement to create the jobs table.

        Equity is stored as text so values like ``"0.56"`` round-trip exactly.

        Returns:
            SQL CREATE TABLE statement for jobs table.
        """
        return """
        CREATE TABLE IF NOT EXISTS jobs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            salary INTEGER CHECK (salary >= 0),
            equity TEXT CHECK (
                equity IS NULL
                OR (CAST(equity AS REAL) >= 0 AND CAST(equity AS REAL) <= 1)
            ),
            company_handle TEXT NOT NULL
                REFERENCES companies (handle) ON DELETE CASCADE
        )
        """

    @property
    def equity_value(self) -> Decimal | None:
        """Equity as a Decimal, or None when unset."""
        return Decimal(self.equity) if self.equity is not None else None

    def __repr__(self) -> str:
        """Return a string representation of the job."""
        return f"<Job id={self.id} title={self.title!r} company={self.company_handle}>"
