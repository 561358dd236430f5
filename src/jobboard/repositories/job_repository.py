"""
Job repository for database operations.

This module provides the JobRepository class for all job-related database operations.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config.database import DatabaseConfig
from ..errors import DuplicateEntityError, NotFoundError
from ..models.job import JOB_FIELD_COLUMNS, Job, normalize_equity
from ..models.job_filter import JobFilter
from .base import BaseRepository
from .partial_update import sql_for_partial_update


class JobRepository(BaseRepository[Job]):
    """Repository for job-related database operations.

    Errors from the store propagate unchanged. Domain failures are raised as
    ``DuplicateEntityError``, ``NotFoundError`` or ``BadRequestError``.
    """

    def __init__(self, db_config: DatabaseConfig) -> None:
        """Initialize the job repository.

        Args:
            db_config: Store handle every operation runs against.
        """
        super().__init__(Job, db_config)

    def create(
        self,
        company_handle: str,
        title: str,
        salary: int | None = None,
        equity: Any = None,
    ) -> Job:
        """Create a new job.

        The duplicate-title check and the insert share one transaction.

        Args:
            company_handle: Handle of the owning company.
            title: Job title, unique among jobs.
            salary: Optional salary.
            equity: Optional equity in [0, 1], as text or a number.

        Returns:
            The job as stored, including its assigned id.

        Raises:
            DuplicateEntityError: If a job with this title already exists.
            BadRequestError: If equity is not a number.
        """
        equity = normalize_equity(equity)

        with self.db_config.get_connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                duplicate = conn.execute(
                    "SELECT id FROM jobs WHERE title = ?", (title,)
                ).fetchone()
                if duplicate:
                    raise DuplicateEntityError(f"Duplicate job: {title}")

                cursor = conn.execute(
                    """
                    INSERT INTO jobs (company_handle, title, salary, equity)
                    VALUES (?, ?, ?, ?)
                    """,
                    (company_handle, title, salary, equity),
                )
                row = conn.execute(
                    Job.get_select_by_id_sql(), (cursor.lastrowid,)
                ).fetchone()
                conn.commit()
            except Exception:
                conn.rollback()
                raise

        return Job.from_dict(dict(row))

    def list_all(self, job_filter: JobFilter | None = None) -> list[Job]:
        """List jobs, optionally filtered.

        All rows are read in one query and filtered in memory. No sort is
        applied beyond the store's own order.

        Args:
            job_filter: Parsed filter; None or an empty filter returns every job.

        Returns:
            List of matching jobs.
        """
        jobs = self.get_all()
        if job_filter is None or job_filter.is_empty:
            return jobs
        return [job for job in jobs if job_filter.matches(job)]

    def get(self, job_id: int) -> Job:
        """Get a job by id.

        Raises:
            NotFoundError: If there is no such job.
        """
        job = self.get_by_id(job_id)
        if job is None:
            raise NotFoundError(f"No job: {job_id}")
        return job

    def get_by_company(self, company_handle: str) -> list[Job]:
        """Get every job owned by a company.

        Args:
            company_handle: Handle of the owning company.

        Returns:
            The company's jobs, never empty.

        Raises:
            NotFoundError: If the company has no jobs.
        """
        jobs = self.find_by(company_handle=company_handle)
        if not jobs:
            raise NotFoundError(f"No jobs for company: {company_handle}")
        return jobs

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partially update a job.

        Only the fields present in ``data`` are changed; a present field with
        value None is set to NULL.

        Args:
            job_id: Id of the job to update.
            data: Subset of ``title``, ``salary`` and ``equity``.

        Returns:
            ``{"title", "salary", "equity"}`` as stored after the update.

        Raises:
            BadRequestError: If ``data`` is empty or names another field.
            NotFoundError: If there is no such job.
        """
        if "equity" in data:
            data = {**data, "equity": normalize_equity(data["equity"])}

        set_cols, values = sql_for_partial_update(data, JOB_FIELD_COLUMNS)

        with self.db_config.get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE jobs SET {set_cols} WHERE id = ?", (*values, job_id)
            )
            if cursor.rowcount == 0:
                conn.rollback()
                raise NotFoundError(f"No job: {job_id}")

            row = conn.execute(
                "SELECT title, salary, equity FROM jobs WHERE id = ?", (job_id,)
            ).fetchone()
            conn.commit()

        return dict(row)

    def remove(self, job_id: int) -> None:
        """Delete a job.

        Raises:
            NotFoundError: If there is no such job.
        """
        if not self.delete_by_id(job_id):
            raise NotFoundError(f"No job: {job_id}")
