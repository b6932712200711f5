"""Revision diff engine.

Compares the state of a recipe's ingredients or steps before and after a mutation and
produces the revision records describing the transition. Records come out as removes,
then updates, then adds. Updates are ordered by tracked field, then by ascending
identity, with one record per changed field.
"""

from collections.abc import Callable, Hashable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from app.api.v1.schemas.common.revision import (
    IngredientAddRevision,
    IngredientRemoveRevision,
    IngredientUpdateRevision,
    RevisionRecord,
    StepAddRevision,
    StepRemoveRevision,
    StepUpdateRevision,
)
from app.api.v1.schemas.common.snapshot import IngredientSnapshot, StepSnapshot
from app.core.logging import get_logger
from app.enums.ingredient_field_enum import IngredientFieldEnum
from app.enums.step_field_enum import StepFieldEnum

_log = get_logger(__name__)

_SnapshotT = TypeVar("_SnapshotT")

# Iteration order of these mappings is the order updates are emitted in.
_INGREDIENT_TRACKED_FIELDS: Mapping[IngredientFieldEnum, str] = MappingProxyType(
    {
        IngredientFieldEnum.NAME: "ingredient_name",
        IngredientFieldEnum.QUANTITY: "quantity",
        IngredientFieldEnum.UNIT: "unit",
        IngredientFieldEnum.OPTIONAL_STATUS: "is_optional",
        IngredientFieldEnum.NOTES: "notes",
    },
)

_STEP_TRACKED_FIELDS: Mapping[StepFieldEnum, str] = MappingProxyType(
    {
        StepFieldEnum.INSTRUCTION: "instruction",
        StepFieldEnum.STEP_NUMBER: "step_number",
        StepFieldEnum.OPTIONAL_STATUS: "optional",
        StepFieldEnum.TIMER: "timer_seconds",
    },
)


def _index_by_identity(
    snapshots: Sequence[_SnapshotT],
    identity: Callable[[_SnapshotT], Hashable],
    label: str,
) -> dict[Hashable, _SnapshotT]:
    indexed: dict[Hashable, _SnapshotT] = {}
    for snapshot in snapshots:
        key = identity(snapshot)
        if key in indexed:
            msg = f"Duplicate {label} id {key} in snapshot list"
            raise ValueError(msg)
        indexed[key] = snapshot
    return indexed


def _changed_fields(
    before: object,
    after: object,
    tracked_fields: Mapping[Any, str],
) -> list[tuple[Any, Any, Any]]:
    changes = []
    for field, attribute in tracked_fields.items():
        previous_value = getattr(before, attribute)
        new_value = getattr(after, attribute)
        if previous_value != new_value:
            changes.append((field, previous_value, new_value))
    return changes


def diff_ingredients(
    before: Sequence[IngredientSnapshot],
    after: Sequence[IngredientSnapshot],
) -> list[RevisionRecord]:
    """Compute the revisions turning one ingredient list into another.

    Ingredients are matched by ``ingredient_id``.

    Args:
        before (Sequence[IngredientSnapshot]): Ingredients before the mutation.
        after (Sequence[IngredientSnapshot]): Ingredients after the mutation.

    Returns:
        list[RevisionRecord]: Remove, update and add records, in that order.

    Raises:
        ValueError: If an ingredient id appears twice in either list.
    """
    before_by_id = _index_by_identity(before, lambda s: s.ingredient_id, "ingredient")
    after_by_id = _index_by_identity(after, lambda s: s.ingredient_id, "ingredient")

    removes: list[RevisionRecord] = [
        IngredientRemoveRevision(
            ingredient_id=snapshot.ingredient_id,
            ingredient_name=snapshot.ingredient_name,
            quantity=snapshot.quantity,
            unit=snapshot.unit,
            is_optional=snapshot.is_optional,
            description=snapshot.notes,
        )
        for snapshot in before
        if snapshot.ingredient_id not in after_by_id
    ]

    pending_updates: list[tuple[int, int, RevisionRecord]] = []
    field_order = {field: i for i, field in enumerate(_INGREDIENT_TRACKED_FIELDS)}
    for ingredient_id, old in before_by_id.items():
        new = after_by_id.get(ingredient_id)
        if new is None:
            continue
        for field, previous_value, new_value in _changed_fields(
            old,
            new,
            _INGREDIENT_TRACKED_FIELDS,
        ):
            update = IngredientUpdateRevision(
                ingredient_id=new.ingredient_id,
                ingredient_name=new.ingredient_name or old.ingredient_name,
                changed_field=field,
                previous_value=previous_value,
                new_value=new_value,
            )
            pending_updates.append((field_order[field], new.ingredient_id, update))

    adds: list[RevisionRecord] = [
        IngredientAddRevision(
            ingredient_id=snapshot.ingredient_id,
            ingredient_name=snapshot.ingredient_name,
            quantity=snapshot.quantity,
            unit=snapshot.unit,
            is_optional=snapshot.is_optional,
            description=snapshot.notes,
        )
        for snapshot in after
        if snapshot.ingredient_id not in before_by_id
    ]

    updates = [record for _, _, record in sorted(pending_updates, key=lambda u: u[:2])]
    _log.debug(
        "Ingredient diff: {} removed, {} updated, {} added",
        len(removes),
        len(updates),
        len(adds),
    )
    return removes + updates + adds


def diff_steps(
    before: Sequence[StepSnapshot],
    after: Sequence[StepSnapshot],
) -> list[RevisionRecord]:
    """Compute the revisions turning one step list into another.

    Steps are matched by ``step_id``. A field change with no value on one side (a
    timer set for the first time, or cleared) cannot be expressed as a step update
    and is left out.

    Args:
        before (Sequence[StepSnapshot]): Steps before the mutation.
        after (Sequence[StepSnapshot]): Steps after the mutation.

    Returns:
        list[RevisionRecord]: Remove, update and add records, in that order.

    Raises:
        ValueError: If a step id appears twice in either list.
    """
    before_by_id = _index_by_identity(before, lambda s: s.step_id, "step")
    after_by_id = _index_by_identity(after, lambda s: s.step_id, "step")

    removes: list[RevisionRecord] = [
        StepRemoveRevision(
            step_id=snapshot.step_id,
            step_number=snapshot.step_number,
            instruction=snapshot.instruction,
            optional=snapshot.optional,
            timer_seconds=snapshot.timer_seconds,
        )
        for snapshot in before
        if snapshot.step_id not in after_by_id
    ]

    pending_updates: list[tuple[int, int, RevisionRecord]] = []
    field_order = {field: i for i, field in enumerate(_STEP_TRACKED_FIELDS)}
    for step_id, old in before_by_id.items():
        new = after_by_id.get(step_id)
        if new is None:
            continue
        for field, previous_value, new_value in _changed_fields(
            old,
            new,
            _STEP_TRACKED_FIELDS,
        ):
            if previous_value is None or new_value is None:
                _log.debug(
                    "Skipping {} change on step {}: {} -> {}",
                    field.value,
                    step_id,
                    previous_value,
                    new_value,
                )
                continue
            update = StepUpdateRevision(
                step_id=new.step_id,
                step_number=new.step_number,
                changed_field=field,
                previous_value=previous_value,
                new_value=new_value,
            )
            pending_updates.append((field_order[field], new.step_id, update))

    adds: list[RevisionRecord] = [
        StepAddRevision(
            step_id=snapshot.step_id,
            step_number=snapshot.step_number,
            instruction=snapshot.instruction,
            optional=snapshot.optional,
            timer_seconds=snapshot.timer_seconds,
        )
        for snapshot in after
        if snapshot.step_id not in before_by_id
    ]

    updates = [record for _, _, record in sorted(pending_updates, key=lambda u: u[:2])]
    _log.debug(
        "Step diff: {} removed, {} updated, {} added",
        len(removes),
        len(updates),
        len(adds),
    )
    return removes + updates + adds
