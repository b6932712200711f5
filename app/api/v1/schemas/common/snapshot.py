"""Recipe content snapshot schemas.

A snapshot is the state of one recipe ingredient or step at a point in time. Lists of
snapshots taken before and after a mutation are the input of the revision diff engine.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.enums.ingredient_unit_enum import IngredientUnitEnum


class IngredientSnapshot(BaseModel):
    """State of a single recipe ingredient.

    Attributes:
        ingredient_id (int): Identity of the ingredient within the recipe.
        ingredient_name (str | None): Display name of the ingredient.
        quantity (Decimal | None): Exact quantity used by the recipe.
        unit (IngredientUnitEnum | None): Unit of the quantity.
        is_optional (bool): Whether the ingredient is optional.
        notes (str | None): Free-text notes about the ingredient.
    """

    model_config = ConfigDict(frozen=True)

    ingredient_id: int = Field(..., description="The ID of the ingredient", gt=0)
    ingredient_name: str | None = Field(None, description="Name of the ingredient")
    quantity: Decimal | None = Field(None, description="Ingredient quantity", ge=0)
    unit: IngredientUnitEnum | None = Field(None, description="Quantity unit")
    is_optional: bool = Field(
        default=False,
        description="Whether the ingredient is optional",
    )
    notes: str | None = Field(None, description="Notes about the ingredient")


class StepSnapshot(BaseModel):
    """State of a single recipe step.

    Attributes:
        step_id (int): Identity of the step.
        step_number (int): Position of the step within the recipe.
        instruction (str): The instruction text.
        optional (bool): Whether the step is optional.
        timer_seconds (int | None): Optional timer attached to the step.
    """

    model_config = ConfigDict(frozen=True)

    step_id: int = Field(..., description="The ID of the step", gt=0)
    step_number: int = Field(..., description="Position of the step", ge=1)
    instruction: str = Field(..., description="The step instruction")
    optional: bool = Field(default=False, description="Whether the step is optional")
    timer_seconds: int | None = Field(None, description="Step timer in seconds", ge=0)
