"""
Infrastructure package for the Student Directory client.

Centralizes I/O against the remote student store. Keep this layer focused on
transport and wire-format concerns, decoupled from controller state.
"""

from student_directory.infrastructure.api_client import StudentApiClient

__all__ = [
    "StudentApiClient",
]
