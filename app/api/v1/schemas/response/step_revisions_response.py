"""Response schema for the revision history of one recipe step."""

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema
from app.api.v1.schemas.common.recipe_revision_entry import RecipeRevisionEntry


class StepRevisionsResponse(BaseSchema):
    """Response schema for the revision history of a recipe step.

    Attributes:
        recipe_id (int): The unique identifier of the recipe.
        step_id (int): The unique identifier of the step.
        revisions (list[RecipeRevisionEntry]): Revisions, newest first.
        total_count (int): Number of revisions returned.
    """

    recipe_id: int = Field(..., description="The unique identifier of the recipe", gt=0)
    step_id: int = Field(..., description="The unique identifier of the step", gt=0)
    revisions: list[RecipeRevisionEntry] = Field(
        default_factory=list,
        description="Revisions of the step, newest first",
    )
    total_count: int = Field(..., description="Number of revisions", ge=0)
