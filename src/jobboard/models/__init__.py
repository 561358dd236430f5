"""
Models package for the job board.

This package provides the database entity models and the list-query filter.
"""

from .base import BaseModel
from .company import Company
from .job import JOB_FIELD_COLUMNS, Job, normalize_equity
from .job_filter import JobFilter

# Referenced tables first
SCHEMA_MODELS: list[type[BaseModel]] = [Company, Job]

__all__ = [
    "BaseModel",
    "Company",
    "Job",
    "JobFilter",
    "JOB_FIELD_COLUMNS",
    "SCHEMA_MODELS",
    "normalize_equity",
]
