"""Response schema for the revision history of a whole recipe."""

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema
from app.api.v1.schemas.common.recipe_revision_entry import RecipeRevisionEntry


class RecipeRevisionsResponse(BaseSchema):
    """Response schema for the revision history of a recipe.

    Attributes:
        recipe_id (int): The unique identifier of the recipe.
        revisions (list[RecipeRevisionEntry]): Revisions, newest first.
        total_count (int): Number of revisions returned.
    """

    recipe_id: int = Field(..., description="The unique identifier of the recipe", gt=0)
    revisions: list[RecipeRevisionEntry] = Field(
        default_factory=list,
        description="Revisions of the recipe, newest first",
    )
    total_count: int = Field(..., description="Number of revisions", ge=0)
