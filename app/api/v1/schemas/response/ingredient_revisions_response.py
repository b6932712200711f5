"""Response schema for the revision history of one recipe ingredient."""

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema
from app.api.v1.schemas.common.recipe_revision_entry import RecipeRevisionEntry


class IngredientRevisionsResponse(BaseSchema):
    """Response schema for the revision history of an ingredient within a recipe.

    Attributes:
        recipe_id (int): The unique identifier of the recipe.
        ingredient_id (int): The unique identifier of the ingredient.
        revisions (list[RecipeRevisionEntry]): Revisions, newest first.
        total_count (int): Number of revisions returned.
    """

    recipe_id: int = Field(..., description="The unique identifier of the recipe", gt=0)
    ingredient_id: int = Field(
        ...,
        description="The unique identifier of the ingredient",
        gt=0,
    )
    revisions: list[RecipeRevisionEntry] = Field(
        default_factory=list,
        description="Revisions of the ingredient, newest first",
    )
    total_count: int = Field(..., description="Number of revisions", ge=0)
