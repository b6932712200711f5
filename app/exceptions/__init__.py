"""Exceptions package initializer.

Includes custom exceptions and their handlers for centralized error management.
"""

from .custom_exceptions import (
    DatabaseUnavailableError,
    InvalidRevisionError,
    ResourceNotFoundError,
    RevisionDecodeError,
)

__all__ = [
    "DatabaseUnavailableError",
    "InvalidRevisionError",
    "ResourceNotFoundError",
    "RevisionDecodeError",
]
