"""
Filter for job list queries.

Raw query parameters arrive as strings; they are parsed into a typed
``JobFilter`` once, and only the parsed form reaches the repository.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ..errors import BadRequestError
from .job import Job


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class JobFilter:
    """Optional predicates for listing jobs, combined with AND.

    Attributes:
        title: Case-insensitive substring the job title must contain.
        min_salary: Salary must be strictly greater than this.
        has_equity: When true, equity must be strictly greater than zero.
    """

    title: str | None = None
    min_salary: Decimal | int | None = None
    has_equity: bool = False

    @classmethod
    def from_query(cls, params: Mapping[str, Any] | None) -> JobFilter:
        """Parse query parameters into a filter.

        Recognized keys are ``title``, ``minSalary`` and ``hasEquity``;
        anything else is ignored. Empty strings count as absent.

        Args:
            params: String-keyed query parameters, or None.

        Returns:
            The parsed filter.

        Raises:
            BadRequestError: If ``minSalary`` is not a finite number.
        """
        if not params:
            return cls()

        title = params.get("title")
        title = None if _blank(title) else str(title)

        raw_min_salary = params.get("minSalary")
        min_salary = None
        if not _blank(raw_min_salary):
            if isinstance(raw_min_salary, bool):
                raise BadRequestError(f"Invalid minSalary: {raw_min_salary!r}")
            try:
                min_salary = Decimal(str(raw_min_salary).strip())
            except InvalidOperation:
                raise BadRequestError(f"Invalid minSalary: {raw_min_salary!r}") from None
            if not min_salary.is_finite():
                raise BadRequestError(f"Invalid minSalary: {raw_min_salary!r}")

        raw_has_equity = params.get("hasEquity")
        if isinstance(raw_has_equity, bool):
            has_equity = raw_has_equity
        else:
            has_equity = raw_has_equity == "true"

        return cls(title=title, min_salary=min_salary, has_equity=has_equity)

    @property
    def is_empty(self) -> bool:
        """True when no predicate is set."""
        return self.title is None and self.min_salary is None and not self.has_equity

    def matches(self, job: Job) -> bool:
        """Check a job against every set predicate.

        Jobs with no salary never pass a salary filter, and jobs with no
        equity never pass an equity filter.
        """
        if self.title is not None and self.title.lower() not in (job.title or "").lower():
            return False

        if self.min_salary is not None:
            if job.salary is None or job.salary <= self.min_salary:
                return False

        if self.has_equity:
            try:
                equity = job.equity_value
            except InvalidOperation:
                return False
            if equity is None or equity <= Decimal("0"):
                return False

        return True
