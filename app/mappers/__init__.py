"""Data mappers for transforming between ORM rows and revision schemas.

This package contains functions for mapping:
- Recipe ingredient and step rows to diff engine snapshots
- Revision rows and decoded records to history entries
"""

from app.mappers.recipe_snapshot import (
    build_revision_entry,
    snapshot_recipe_ingredients,
    snapshot_recipe_steps,
)

__all__ = [
    "build_revision_entry",
    "snapshot_recipe_ingredients",
    "snapshot_recipe_steps",
]
