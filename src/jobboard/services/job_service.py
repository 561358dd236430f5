"""Job service for job record operations.

The request layer calls this service with raw payloads and query
parameters. Query parameters are parsed into a ``JobFilter`` here, once,
and domain errors are logged and re-raised unchanged for the caller to map.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config.database import get_db_config
from ..errors import BadRequestError, JobBoardError
from ..models.job import Job
from ..models.job_filter import JobFilter
from ..repositories.job_repository import JobRepository

logger = logging.getLogger(__name__)


class JobService:
    """Service for creating, listing, updating and deleting jobs."""

    def __init__(self, job_repository: JobRepository | None = None) -> None:
        """Initialize the job service.

        Args:
            job_repository: Repository for job operations. If None, one is
                built on the current application context's store handle.
        """
        self.job_repository = job_repository or JobRepository(get_db_config())

    def create_job(self, data: Mapping[str, Any]) -> Job:
        """Create a job from a create payload.

        Args:
            data: ``company_handle`` and ``title``, optionally ``salary`` and ``equity``.

        Returns:
            The created job instance

        Raises:
            BadRequestError: If ``company_handle`` or ``title`` is missing.
        """
        missing = [key for key in ("company_handle", "title") if not data.get(key)]
        if missing:
            logger.warning("Job not created, missing fields: %s", missing)
            raise BadRequestError(f"Missing fields: {', '.join(missing)}")

        try:
            job = self.job_repository.create(
                data["company_handle"],
                data["title"],
                data.get("salary"),
                data.get("equity"),
            )
        except JobBoardError as e:
            logger.warning("Job not created: %s", e.message)
            raise

        logger.info("Created job %s for company %s", job.id, job.company_handle)
        return job

    def list_jobs(self, params: Mapping[str, Any] | None = None) -> list[Job]:
        """List jobs matching raw query parameters.

        Args:
            params: Optional ``title``, ``minSalary`` and ``hasEquity`` strings

        Returns:
            List of matching jobs
        """
        try:
            job_filter = JobFilter.from_query(params)
        except JobBoardError as e:
            logger.warning("Rejected job filter: %s", e.message)
            raise

        return self.job_repository.list_all(job_filter)

    def get_job(self, job_id: int) -> Job:
        """Get a single job by ID."""
        return self.job_repository.get(job_id)

    def get_company_jobs(self, company_handle: str) -> list[Job]:
        """Get all jobs owned by a company."""
        return self.job_repository.get_by_company(company_handle)

    def update_job(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Apply a partial update to a job.

        Args:
            job_id: Job ID to update
            data: Subset of ``title``, ``salary`` and ``equity``

        Returns:
            The job's updatable fields as stored after the update
        """
        try:
            job = self.job_repository.update(job_id, data)
        except JobBoardError as e:
            logger.warning("Job %s not updated: %s", job_id, e.message)
            raise

        logger.info("Updated job %s with fields: %s", job_id, list(data.keys()))
        return job

    def delete_job(self, job_id: int) -> None:
        """Delete a job."""
        try:
            self.job_repository.remove(job_id)
        except JobBoardError as e:
            logger.warning("Job %s not deleted: %s", job_id, e.message)
            raise

        logger.info("Deleted job %s", job_id)
