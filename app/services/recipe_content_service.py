"""Recipe content service module.

Replaces the ingredient or step list of a recipe and records the revisions describing
the change. The entity change and its revision rows are committed together.
"""

import uuid
from collections import Counter
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.v1.schemas.common.revision import RevisionRecord
from app.api.v1.schemas.request.replace_recipe_ingredients_request import (
    RecipeIngredientInput,
)
from app.api.v1.schemas.request.replace_recipe_steps_request import RecipeStepInput
from app.core.logging import get_logger
from app.db.models.recipe_models.recipe import Recipe
from app.db.models.recipe_models.recipe_ingredient import RecipeIngredient
from app.db.models.recipe_models.recipe_revision import RecipeRevision
from app.db.models.recipe_models.recipe_step import RecipeStep
from app.db.repositories.recipe_revision_repository import RecipeRevisionRepository
from app.exceptions.custom_exceptions import (
    DuplicateEntityError,
    ResourceNotFoundError,
)
from app.mappers.recipe_snapshot import (
    snapshot_recipe_ingredients,
    snapshot_recipe_steps,
)
from app.services.recipe_revision_service import (
    RecipeRevisionService,
    RepositoryFactory,
)
from app.utils.revision_diff import diff_ingredients, diff_steps

_log = get_logger(__name__)


def _reject_duplicates(ids: Sequence[int | None], label: str) -> None:
    duplicates = sorted(
        key for key, count in Counter(ids).items() if key is not None and count > 1
    )
    if duplicates:
        raise DuplicateEntityError(label, duplicates)


class RecipeContentService:
    """Service that changes a recipe's ingredients or steps and tracks the change.

    Attributes:
        revision_service (RecipeRevisionService): Records the revisions.
        repository_factory (RepositoryFactory): Builds the repository for a session.
    """

    def __init__(
        self,
        revision_service: RecipeRevisionService | None = None,
        repository_factory: RepositoryFactory = RecipeRevisionRepository,
    ) -> None:
        """Initialize the content service.

        Args:
            revision_service: Service recording revisions. Defaults to a new one
                sharing ``repository_factory``.
            repository_factory: Builds a repository from a session.
        """
        self.repository_factory = repository_factory
        self.revision_service = revision_service or RecipeRevisionService(
            repository_factory,
        )

    def replace_ingredients(
        self,
        recipe_id: int,
        user_id: uuid.UUID,
        ingredients: Sequence[RecipeIngredientInput],
        db: Session,
        change_comment: str | None = None,
    ) -> list[RecipeRevision]:
        """Replace the ingredient list of a recipe.

        Ingredients missing from ``ingredients`` are removed, new ones are added and
        the quantity, unit and optional flag of the others are updated.

        Args:
            recipe_id (int): The recipe to change.
            user_id (uuid.UUID): Author of the change.
            ingredients (Sequence[RecipeIngredientInput]): The full new list.
            db (Session): Database session for ORM operations.
            change_comment (str | None): Optional comment stored on every revision.

        Returns:
            list[RecipeRevision]: The recorded revision rows, empty for a no-op.

        Raises:
            ResourceNotFoundError: If the recipe or an ingredient does not exist.
            DuplicateEntityError: If an ingredient appears twice in ``ingredients``.
            InvalidRevisionError: If the change produces an invalid revision.
        """
        _log.info(
            "Replacing ingredients of recipe {} with {} item(s)",
            recipe_id,
            len(ingredients),
        )
        _reject_duplicates([item.ingredient_id for item in ingredients], "ingredient")

        repository = self.repository_factory(db)
        recipe = self._get_recipe(repository, recipe_id)

        current = {row.ingredient_id: row for row in recipe.ingredients}
        new_ids = [
            item.ingredient_id
            for item in ingredients
            if item.ingredient_id not in current
        ]
        known = {row.ingredient_id: row for row in repository.get_ingredients(new_ids)}
        for ingredient_id in new_ids:
            if ingredient_id not in known:
                _log.warning("Ingredient with ID {} not found", ingredient_id)
                raise ResourceNotFoundError("Ingredient", ingredient_id)

        before = snapshot_recipe_ingredients(recipe)
        try:
            requested_ids = {item.ingredient_id for item in ingredients}
            for ingredient_id, row in current.items():
                if ingredient_id not in requested_ids:
                    recipe.ingredients.remove(row)

            for item in ingredients:
                row = current.get(item.ingredient_id)
                if row is None:
                    recipe.ingredients.append(
                        RecipeIngredient(
                            ingredient_id=item.ingredient_id,
                            ingredient=known[item.ingredient_id],
                            quantity=item.quantity,
                            unit=item.unit,
                            is_optional=item.is_optional,
                        ),
                    )
                else:
                    row.quantity = item.quantity
                    row.unit = item.unit
                    row.is_optional = item.is_optional

            after = snapshot_recipe_ingredients(recipe)
            records = diff_ingredients(before, after)
            return self._commit_change(recipe, user_id, records, db, change_comment)
        except (SQLAlchemyError, ValueError):
            db.rollback()
            raise

    def replace_steps(
        self,
        recipe_id: int,
        user_id: uuid.UUID,
        steps: Sequence[RecipeStepInput],
        db: Session,
        change_comment: str | None = None,
    ) -> list[RecipeRevision]:
        """Replace the step list of a recipe.

        Steps missing from ``steps`` are removed, steps without an ID are created and
        the others are updated in place.

        Args:
            recipe_id (int): The recipe to change.
            user_id (uuid.UUID): Author of the change.
            steps (Sequence[RecipeStepInput]): The full new list.
            db (Session): Database session for ORM operations.
            change_comment (str | None): Optional comment stored on every revision.

        Returns:
            list[RecipeRevision]: The recorded revision rows, empty for a no-op.

        Raises:
            ResourceNotFoundError: If the recipe, or a referenced step of it, does not
                exist.
            DuplicateEntityError: If a step ID appears twice in ``steps``.
            InvalidRevisionError: If the change produces an invalid revision.
        """
        _log.info(
            "Replacing steps of recipe {} with {} item(s)",
            recipe_id,
            len(steps),
        )
        _reject_duplicates([item.step_id for item in steps], "step")

        repository = self.repository_factory(db)
        recipe = self._get_recipe(repository, recipe_id)

        current = {step.step_id: step for step in recipe.steps}
        for item in steps:
            if item.step_id is not None and item.step_id not in current:
                _log.warning(
                    "Step with ID {} not found in recipe {}",
                    item.step_id,
                    recipe_id,
                )
                raise ResourceNotFoundError("Step", item.step_id)

        before = snapshot_recipe_steps(recipe)
        try:
            requested_ids = {item.step_id for item in steps}
            for step_id, step in current.items():
                if step_id not in requested_ids:
                    recipe.steps.remove(step)

            for item in steps:
                if item.step_id is None:
                    recipe.steps.append(
                        RecipeStep(
                            step_number=item.step_number,
                            instruction=item.instruction,
                            optional=item.optional,
                            timer_seconds=item.timer_seconds,
                        ),
                    )
                else:
                    step = current[item.step_id]
                    step.step_number = item.step_number
                    step.instruction = item.instruction
                    step.optional = item.optional
                    step.timer_seconds = item.timer_seconds

            # New steps need their identities before they can be diffed.
            db.flush()

            after = snapshot_recipe_steps(recipe)
            records = diff_steps(before, after)
            return self._commit_change(recipe, user_id, records, db, change_comment)
        except (SQLAlchemyError, ValueError):
            db.rollback()
            raise

    def _get_recipe(
        self,
        repository: RecipeRevisionRepository,
        recipe_id: int,
    ) -> Recipe:
        recipe = repository.get_recipe(recipe_id)
        if recipe is None:
            _log.warning("Recipe with ID {} not found", recipe_id)
            raise ResourceNotFoundError("Recipe", recipe_id)
        return recipe

    def _commit_change(
        self,
        recipe: Recipe,
        user_id: uuid.UUID,
        records: list[RevisionRecord],
        db: Session,
        change_comment: str | None,
    ) -> list[RecipeRevision]:
        revisions = self.revision_service.record_change(
            recipe.recipe_id,
            user_id,
            records,
            db,
            change_comment,
            commit=False,
        )
        db.commit()
        _log.info(
            "Committed content change of recipe {} with {} revision(s)",
            recipe.recipe_id,
            len(revisions),
        )
        return revisions
