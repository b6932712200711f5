"""Recipe snapshot and revision entry mappers.

Snapshots are taken from ORM rows immediately before and after a mutation, so they
must copy every tracked value rather than reference the live rows.
"""

from typing import TYPE_CHECKING

from app.api.v1.schemas.common.recipe_revision_entry import RecipeRevisionEntry
from app.api.v1.schemas.common.snapshot import IngredientSnapshot, StepSnapshot

if TYPE_CHECKING:
    from app.api.v1.schemas.common.revision import RevisionRecord
    from app.db.models.recipe_models.recipe import Recipe
    from app.db.models.recipe_models.recipe_ingredient import RecipeIngredient
    from app.db.models.recipe_models.recipe_revision import RecipeRevision
    from app.db.models.recipe_models.recipe_step import RecipeStep


def ingredient_snapshot_from_row(
    recipe_ingredient: "RecipeIngredient",
) -> IngredientSnapshot:
    """Build an ingredient snapshot from a recipe ingredient row.

    Name and notes come from the shared ingredient row.

    Args:
        recipe_ingredient: The recipe ingredient row.

    Returns:
        The snapshot of the row's current state.
    """
    ingredient = recipe_ingredient.ingredient
    return IngredientSnapshot(
        ingredient_id=recipe_ingredient.ingredient_id,
        ingredient_name=ingredient.name if ingredient is not None else None,
        quantity=recipe_ingredient.quantity,
        unit=recipe_ingredient.unit,
        is_optional=bool(recipe_ingredient.is_optional),
        notes=ingredient.description if ingredient is not None else None,
    )


def step_snapshot_from_row(step: "RecipeStep") -> StepSnapshot:
    """Build a step snapshot from a recipe step row.

    Args:
        step: The recipe step row.

    Returns:
        The snapshot of the row's current state.
    """
    return StepSnapshot(
        step_id=step.step_id,
        step_number=step.step_number,
        instruction=step.instruction,
        optional=bool(step.optional),
        timer_seconds=step.timer_seconds,
    )


def snapshot_recipe_ingredients(recipe: "Recipe") -> list[IngredientSnapshot]:
    """Snapshot every ingredient of a recipe, ordered by ingredient ID."""
    return [
        ingredient_snapshot_from_row(row)
        for row in sorted(recipe.ingredients, key=lambda row: row.ingredient_id)
    ]


def snapshot_recipe_steps(recipe: "Recipe") -> list[StepSnapshot]:
    """Snapshot every step of a recipe, ordered by step number then step ID."""
    return [
        step_snapshot_from_row(step)
        for step in sorted(recipe.steps, key=lambda s: (s.step_number, s.step_id))
    ]


def build_revision_entry(
    revision: "RecipeRevision",
    record: "RevisionRecord",
) -> RecipeRevisionEntry:
    """Combine a revision row and its decoded record into a history entry.

    Args:
        revision: The stored revision row.
        record: The record decoded from the row's data.

    Returns:
        The history entry exposed by the API.
    """
    return RecipeRevisionEntry(
        revision_id=revision.revision_id,
        recipe_id=revision.recipe_id,
        user_id=revision.user_id,
        category=revision.revision_category,
        type=revision.revision_type,
        revision=record,
        change_comment=revision.change_comment,
        created_at=revision.created_at,
    )
