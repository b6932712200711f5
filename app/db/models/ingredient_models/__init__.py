"""Ingredient Models package initializer.

This package contains ORM models representing the ingredient data entities used in the
application.
"""

from .ingredient import Ingredient

__all__ = [
    "Ingredient",
]
