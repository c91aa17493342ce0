"""
Utilities package for the Student Directory client.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from student_directory.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
