"""Services package for business logic layer.

This package provides service classes that sit between the request layer and
the repositories.
"""

from .job_service import JobService

__all__ = ["JobService"]
