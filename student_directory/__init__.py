"""
Student Directory - client for a remote student records REST API.

This package provides:

- A record controller that keeps an in-memory list in step with the remote store
- Client-side validation of student form drafts
- An async HTTP adapter for the list/insert/update/delete endpoints
- A command-line front end with rich table output

The controller never patches its cache locally: every successful write is
followed by a full refresh from the store.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from student_directory.config import Settings, get_settings
from student_directory.controller import (
    FormMode,
    LoggingNotifier,
    Notifier,
    RecordController,
    StudentStore,
)
from student_directory.domain import (
    ErrorKind,
    FieldError,
    FormDraft,
    Record,
    RequestFailed,
    StudentDirectoryError,
    ValidationFailed,
    validate,
)
from student_directory.infrastructure import StudentApiClient
from student_directory.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Controller
    "FormMode",
    "LoggingNotifier",
    "Notifier",
    "RecordController",
    "StudentStore",
    # Domain
    "ErrorKind",
    "FieldError",
    "FormDraft",
    "Record",
    "RequestFailed",
    "StudentDirectoryError",
    "ValidationFailed",
    "validate",
    # Infrastructure
    "StudentApiClient",
    # Logging
    "configure_logging",
    "get_logger",
]
