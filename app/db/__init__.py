"""Database package initializer.

Provides the database models and session management modules for the application.
"""

from . import models, session

__all__ = [
    "models",
    "session",
]
