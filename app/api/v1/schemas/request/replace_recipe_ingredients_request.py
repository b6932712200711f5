"""Request schema for replacing the ingredient list of a recipe."""

from decimal import Decimal

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema
from app.enums.ingredient_unit_enum import IngredientUnitEnum


class RecipeIngredientInput(BaseSchema):
    """Recipe-level details of one ingredient in a replacement list.

    Attributes:
        ingredient_id (int): An existing ingredient.
        quantity (Decimal | None): Quantity used by the recipe.
        unit (IngredientUnitEnum | None): Unit of the quantity.
        is_optional (bool): Whether the ingredient is optional.
    """

    ingredient_id: int = Field(..., description="The ID of the ingredient", gt=0)
    quantity: Decimal | None = Field(
        None,
        description="Ingredient quantity",
        ge=0,
        max_digits=8,
        decimal_places=3,
    )
    unit: IngredientUnitEnum | None = Field(None, description="Quantity unit")
    is_optional: bool = Field(
        default=False,
        description="Whether the ingredient is optional",
    )


class ReplaceRecipeIngredientsRequest(BaseSchema):
    """Request schema for replacing the full ingredient list of a recipe.

    Attributes:
        ingredients (list[RecipeIngredientInput]): The complete new ingredient list.
        change_comment (str | None): Optional comment stored with every revision.
    """

    ingredients: list[RecipeIngredientInput] = Field(
        ...,
        description="The complete ingredient list of the recipe after the change",
    )
    change_comment: str | None = Field(
        None,
        description="Optional comment describing the change",
        max_length=1000,
    )
