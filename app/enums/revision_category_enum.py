"""Enum for revision categories.

This enum defines the recipe sub-entities that revisions can be recorded on.
"""

from enum import Enum


class RevisionCategoryEnum(str, Enum):
    """Recipe sub-entities that can be revised.

    Each member represents a category of recipe revision.
    """

    INGREDIENT = "INGREDIENT"
    STEP = "STEP"
