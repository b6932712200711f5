"""Request schema for replacing the step list of a recipe."""

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema


class RecipeStepInput(BaseSchema):
    """One step in a replacement list.

    A step without ``step_id`` is created; a step with one updates that step.

    Attributes:
        step_id (int | None): An existing step of the recipe, or None for a new step.
        step_number (int): Position of the step.
        instruction (str): The instruction text.
        optional (bool): Whether the step is optional.
        timer_seconds (int | None): Optional timer for the step.
    """

    step_id: int | None = Field(None, description="The ID of an existing step", gt=0)
    step_number: int = Field(..., description="Position of the step", ge=1)
    instruction: str = Field(..., description="The step instruction", min_length=1)
    optional: bool = Field(default=False, description="Whether the step is optional")
    timer_seconds: int | None = Field(None, description="Step timer in seconds", ge=0)


class ReplaceRecipeStepsRequest(BaseSchema):
    """Request schema for replacing the full step list of a recipe.

    Attributes:
        steps (list[RecipeStepInput]): The complete new step list.
        change_comment (str | None): Optional comment stored with every revision.
    """

    steps: list[RecipeStepInput] = Field(
        ...,
        description="The complete step list of the recipe after the change",
    )
    change_comment: str | None = Field(
        None,
        description="Optional comment describing the change",
        max_length=1000,
    )
