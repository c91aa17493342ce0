"""
Domain package for the Student Directory client.

Exports the record and draft models, the validation rules, and the error kinds.
Keep this package focused on data definitions and validation concerns.
"""

from student_directory.domain.errors import RequestFailed, StudentDirectoryError, ValidationFailed
from student_directory.domain.models import FORM_FIELDS, FormDraft, Record, RecordId
from student_directory.domain.validation import (
    ErrorKind,
    FieldError,
    ValidationErrors,
    check,
    validate,
)

__all__ = [
    "FORM_FIELDS",
    "ErrorKind",
    "FieldError",
    "FormDraft",
    "Record",
    "RecordId",
    "RequestFailed",
    "StudentDirectoryError",
    "ValidationErrors",
    "ValidationFailed",
    "check",
    "validate",
]
