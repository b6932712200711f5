"""Recipe revision data repository.

Provides the data access layer for recipe revision rows and the existence checks
the revision history needs on recipes, recipe ingredients and recipe steps.
"""

from collections.abc import Collection

from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.db.models.ingredient_models.ingredient import Ingredient
from app.db.models.recipe_models.recipe import Recipe
from app.db.models.recipe_models.recipe_ingredient import RecipeIngredient
from app.db.models.recipe_models.recipe_revision import RecipeRevision
from app.db.models.recipe_models.recipe_step import RecipeStep
from app.enums.revision_category_enum import RevisionCategoryEnum

_log = get_logger(__name__)


class RecipeRevisionRepository:
    """Repository for recipe revision rows.

    Wraps a SQLAlchemy session owned by the caller. The repository never commits or
    rolls back; transaction boundaries belong to the service using it.
    """

    def __init__(self, db: Session) -> None:
        """Initialize the repository with a database session.

        Args:
            db: SQLAlchemy session used for every query.
        """
        self._db = db

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Load a recipe with its ingredients and steps.

        Args:
            recipe_id: The recipe's database ID.

        Returns:
            Recipe if found, None otherwise.
        """
        return self._db.query(Recipe).filter(Recipe.recipe_id == recipe_id).first()

    def get_ingredients(self, ingredient_ids: Collection[int]) -> list[Ingredient]:
        """Load shared ingredient rows by ID.

        Args:
            ingredient_ids: The ingredient IDs to load.

        Returns:
            The ingredients found. Unknown IDs are simply absent.
        """
        if not ingredient_ids:
            return []
        return (
            self._db.query(Ingredient)
            .filter(Ingredient.ingredient_id.in_(ingredient_ids))
            .all()
        )

    def recipe_exists(self, recipe_id: int) -> bool:
        """Check whether a recipe exists.

        Args:
            recipe_id: The recipe's database ID.

        Returns:
            True if the recipe exists.
        """
        row = (
            self._db.query(Recipe.recipe_id)
            .filter(Recipe.recipe_id == recipe_id)
            .first()
        )
        return row is not None

    def recipe_ingredient_exists(self, recipe_id: int, ingredient_id: int) -> bool:
        """Check whether an ingredient is used by a recipe.

        Args:
            recipe_id: The recipe's database ID.
            ingredient_id: The ingredient's database ID.

        Returns:
            True if the recipe uses the ingredient.
        """
        row = (
            self._db.query(RecipeIngredient.ingredient_id)
            .filter(
                RecipeIngredient.recipe_id == recipe_id,
                RecipeIngredient.ingredient_id == ingredient_id,
            )
            .first()
        )
        return row is not None

    def recipe_step_exists(self, recipe_id: int, step_id: int) -> bool:
        """Check whether a step belongs to a recipe.

        Args:
            recipe_id: The recipe's database ID.
            step_id: The step's database ID.

        Returns:
            True if the step belongs to the recipe.
        """
        row = (
            self._db.query(RecipeStep.step_id)
            .filter(RecipeStep.recipe_id == recipe_id, RecipeStep.step_id == step_id)
            .first()
        )
        return row is not None

    def find_by_recipe(
        self,
        recipe_id: int,
        category: RevisionCategoryEnum | None = None,
    ) -> list[RecipeRevision]:
        """Get the revisions of a recipe, newest first.

        Rows sharing a ``created_at`` value are ordered by descending revision ID,
        which follows the order they were written in.

        Args:
            recipe_id: The recipe's database ID.
            category: Only return revisions of this category when given.

        Returns:
            The matching revision rows, possibly empty.
        """
        query = self._db.query(RecipeRevision).filter(
            RecipeRevision.recipe_id == recipe_id,
        )
        if category is not None:
            query = query.filter(RecipeRevision.revision_category == category)

        revisions = query.order_by(
            RecipeRevision.created_at.desc(),
            RecipeRevision.revision_id.desc(),
        ).all()
        _log.debug(
            "Loaded {} revision row(s) for recipe {} (category={})",
            len(revisions),
            recipe_id,
            category,
        )
        return revisions

    def add(self, revision: RecipeRevision) -> RecipeRevision:
        """Stage a revision row and flush it so its identity is assigned.

        Args:
            revision: The new revision row.

        Returns:
            The same row, with ``revision_id`` populated.
        """
        self._db.add(revision)
        self._db.flush()
        return revision
