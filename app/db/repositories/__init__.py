"""Database repositories."""

from app.db.repositories.recipe_revision_repository import RecipeRevisionRepository

__all__ = ["RecipeRevisionRepository"]
