"""
Field validation rules for student form drafts.

Every rule runs independently so that all failures are reported together.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Dict, NamedTuple

from student_directory.domain.errors import ValidationFailed
from student_directory.domain.models import FormDraft

_PHONE_PATTERN = re.compile(r"[0-9]{10}")

# Numeric text accepted for age: decimal with optional exponent, signed Infinity,
# or unsigned hex/binary/octal literals.
_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity)"
    r"|0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+"
)


class ErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_FIELD = "InvalidField"


class FieldError(NamedTuple):
    kind: ErrorKind
    message: str


ValidationErrors = Dict[str, FieldError]


def _is_number(text: str) -> bool:
    """Surrounding whitespace is ignored; whitespace alone converts to 0."""
    stripped = text.strip()
    return not stripped or _NUMBER_PATTERN.fullmatch(stripped) is not None


def validate(draft: FormDraft) -> ValidationErrors:
    """
    Check a draft and return a mapping of wire field name -> FieldError.

    An empty mapping means the draft may be submitted. Age only has to parse as a
    number: sign, range and integrality are not checked.
    """
    errors: ValidationErrors = {}
    if not draft.name:
        errors["name"] = FieldError(ErrorKind.MISSING_FIELD, "Name is required")
    if not draft.age or not _is_number(draft.age):
        errors["age"] = FieldError(ErrorKind.INVALID_FIELD, "Valid age is required")
    if not draft.class_name:
        errors["className"] = FieldError(ErrorKind.MISSING_FIELD, "Class is required")
    if not _PHONE_PATTERN.fullmatch(draft.phone_number):
        errors["phoneNumber"] = FieldError(
            ErrorKind.INVALID_FIELD, "Valid phone number is required"
        )
    return errors


def check(draft: FormDraft) -> None:
    """Raise ValidationFailed when `validate` reports anything."""
    errors = validate(draft)
    if errors:
        raise ValidationFailed(errors)


__all__ = ["ErrorKind", "FieldError", "ValidationErrors", "check", "validate"]
