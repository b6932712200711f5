"""Response schema for the revisions recorded by a recipe content change."""

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema
from app.api.v1.schemas.common.recipe_revision_entry import RecipeRevisionEntry


class RecordedRevisionsResponse(BaseSchema):
    """Response schema listing the revisions a content change produced.

    Attributes:
        recipe_id (int): The unique identifier of the recipe.
        revisions (list[RecipeRevisionEntry]): Revisions in the order they were
            recorded. Empty when the change was a no-op.
    """

    recipe_id: int = Field(..., description="The unique identifier of the recipe", gt=0)
    revisions: list[RecipeRevisionEntry] = Field(
        default_factory=list,
        description="Revisions recorded for the change, in order",
    )
