"""Models package initializer.

This package contains ORM models representing the data entities of the recipe manager
schema that revision tracking reads and writes: recipes, their ingredients and steps,
users, and recipe revisions.
"""

from . import ingredient_models, recipe_models, user_models

__all__ = (
    ingredient_models.__all__ + recipe_models.__all__ + user_models.__all__
)
