"""
Repositories package for the job board.

This package provides the base repository class and the data access layer implementations.
"""

from .base import BaseRepository
from .company_repository import CompanyRepository
from .job_repository import JobRepository
from .partial_update import sql_for_partial_update

__all__ = ["BaseRepository", "CompanyRepository", "JobRepository", "sql_for_partial_update"]
