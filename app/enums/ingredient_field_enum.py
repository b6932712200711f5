"""Enum for tracked recipe ingredient fields.

Declaration order is the order in which field-level ingredient updates are emitted.
"""

from enum import Enum


class IngredientFieldEnum(str, Enum):
    """Ingredient fields whose changes are recorded as individual revisions."""

    NAME = "NAME"
    QUANTITY = "QUANTITY"
    UNIT = "UNIT"
    OPTIONAL_STATUS = "OPTIONAL_STATUS"
    NOTES = "NOTES"
