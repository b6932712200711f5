"""Factory configuration and exports.

This module exports all factories for convenient importing in tests.
"""

from tests.factories.revision import (
    IngredientAddRevisionFactory,
    StepAddRevisionFactory,
)
from tests.factories.snapshot import IngredientSnapshotFactory, StepSnapshotFactory


__all__ = [
    "IngredientAddRevisionFactory",
    "IngredientSnapshotFactory",
    "StepAddRevisionFactory",
    "StepSnapshotFactory",
]
