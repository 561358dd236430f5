"""Error types raised by the job record layer."""

from __future__ import annotations


class JobBoardError(Exception):
    """Base class for errors raised by jobboard."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateEntityError(JobBoardError):
    """Raised when creating a job whose title already exists."""

    pass


class NotFoundError(JobBoardError):
    """Raised when no job matches the requested id or company."""

    pass


class BadRequestError(JobBoardError):
    """Raised when input cannot be turned into a valid operation."""

    pass
