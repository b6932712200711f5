"""User Models package initializer.

This package contains ORM models representing the user data entities used in the
application.
"""

from .user import User

__all__ = [
    "User",
]
