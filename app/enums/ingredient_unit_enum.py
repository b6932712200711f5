"""Enum for ingredient units.

Defines the units of measurement a recipe ingredient can be quantified in. Unit values
show up both on recipe ingredient rows and inside stored ingredient revisions, so the
enum accepts the loose spellings found in older revision payloads.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

_UNIT_ALIASES = MappingProxyType(
    {
        "gram": "G",
        "grams": "G",
        "kilogram": "KG",
        "kilograms": "KG",
        "ounce": "OZ",
        "ounces": "OZ",
        "pound": "LB",
        "pounds": "LB",
        "milliliter": "ML",
        "milliliters": "ML",
        "liter": "L",
        "liters": "L",
        "cups": "CUP",
        "tbs": "TBSP",
        "tablespoon": "TBSP",
        "tablespoons": "TBSP",
        "teaspoon": "TSP",
        "teaspoons": "TSP",
        "pieces": "PIECE",
        "cloves": "CLOVE",
        "slices": "SLICE",
        "pinches": "PINCH",
        "cans": "CAN",
        "bottles": "BOTTLE",
        "packets": "PACKET",
        "units": "UNIT",
    },
)


class IngredientUnitEnum(str, Enum):
    """Units of measurement for recipe ingredients."""

    G = "G"
    KG = "KG"
    OZ = "OZ"
    LB = "LB"
    ML = "ML"
    L = "L"
    CUP = "CUP"
    TBSP = "TBSP"
    TSP = "TSP"
    PIECE = "PIECE"
    CLOVE = "CLOVE"
    SLICE = "SLICE"
    PINCH = "PINCH"
    CAN = "CAN"
    BOTTLE = "BOTTLE"
    PACKET = "PACKET"
    UNIT = "UNIT"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Get custom Pydantic v2 core schema for the enum.

        Lets schemas and revision payloads accept alias spellings such as ``"cups"``.

        Args:
            source_type: The source type being validated.
            handler: The core schema handler.

        Returns:
            CoreSchema: The core schema for validation.
        """
        return core_schema.no_info_before_validator_function(
            cls._validate_string,
            handler(cls),
        )

    @classmethod
    def _validate_string(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, cls):
            result = cls.from_string(value)
            if result is not None:
                return result
        return value

    @classmethod
    def from_string(cls, unit_str: str) -> "IngredientUnitEnum | None":
        """Convert a string to the matching unit, normalizing plural/long forms.

        Args:
            unit_str: Raw unit text, e.g. ``"cup"``, ``"Cups"`` or ``"TBSP"``.

        Returns:
            IngredientUnitEnum | None: The unit, or None when the text is unknown.
        """
        if not unit_str:
            return None
        key = unit_str.strip().lower()
        normalized = _UNIT_ALIASES.get(key, key.upper())
        try:
            return cls(normalized)
        except ValueError:
            return None
