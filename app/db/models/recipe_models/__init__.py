"""Recipe Models package initializer.

This package contains ORM models representing the recipe data entities used in the
application.
"""

from .recipe import Recipe
from .recipe_ingredient import RecipeIngredient
from .recipe_revision import RecipeRevision
from .recipe_step import RecipeStep

__all__ = [
    "Recipe",
    "RecipeIngredient",
    "RecipeRevision",
    "RecipeStep",
]
