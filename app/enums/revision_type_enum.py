"""Enum for revision types.

This enum defines the kinds of change a recipe revision can record.
"""

from enum import Enum


class RevisionTypeEnum(str, Enum):
    """Kinds of change that can be recorded against a recipe.

    Each member represents a supported revision type.
    """

    ADD = "ADD"
    UPDATE = "UPDATE"
    REMOVE = "REMOVE"
