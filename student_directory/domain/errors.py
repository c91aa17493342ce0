"""
Error kinds raised by the Student Directory client.

`ValidationFailed` never leaves the process; `RequestFailed` wraps any transport
error or non-2xx answer from the remote store.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from student_directory.domain.validation import FieldError


class StudentDirectoryError(Exception):
    """Base class for client errors."""


class ValidationFailed(StudentDirectoryError):
    """One or more draft fields failed local validation."""

    def __init__(self, errors: Dict[str, "FieldError"]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(self.errors)
        super().__init__(f"Validation failed for: {fields}")


class RequestFailed(StudentDirectoryError):
    """
    The remote store was unreachable or answered with a non-success status.

    `status_code` is kept for logging only; callers treat every failure alike.
    """

    def __init__(
        self, message: str, operation: str, status_code: Optional[int] = None
    ) -> None:
        self.message = message
        self.operation = operation
        self.status_code = status_code
        super().__init__(message)


__all__ = ["RequestFailed", "StudentDirectoryError", "ValidationFailed"]
