"""Unit tests for the revision diff engine."""

from decimal import Decimal

import pytest

from app.api.v1.schemas.common.revision import (
    IngredientAddRevision,
    IngredientRemoveRevision,
    IngredientUpdateRevision,
    StepAddRevision,
    StepRemoveRevision,
    StepUpdateRevision,
)
from app.api.v1.schemas.common.snapshot import IngredientSnapshot, StepSnapshot
from app.enums.ingredient_field_enum import IngredientFieldEnum
from app.enums.ingredient_unit_enum import IngredientUnitEnum
from app.enums.step_field_enum import StepFieldEnum
from app.utils.revision_diff import diff_ingredients, diff_steps
from tests.factories.snapshot import IngredientSnapshotFactory, StepSnapshotFactory


class TestDiffIngredients:
    """Unit tests for diff_ingredients."""

    @pytest.mark.unit
    def test_flour_sugar_salt(
        self,
        ingredients_before: list[IngredientSnapshot],
        ingredients_after: list[IngredientSnapshot],
    ) -> None:
        """Test that exactly one remove, one update and one add are produced."""
        # Act
        records = diff_ingredients(ingredients_before, ingredients_after)

        # Assert
        assert len(records) == 3
        remove, update, add = records
        assert isinstance(remove, IngredientRemoveRevision)
        assert remove.ingredient_id == 2
        assert remove.ingredient_name == "Sugar"
        assert isinstance(update, IngredientUpdateRevision)
        assert update.ingredient_id == 1
        assert update.changed_field == IngredientFieldEnum.QUANTITY
        assert update.previous_value == Decimal(2)
        assert update.new_value == Decimal(3)
        assert isinstance(add, IngredientAddRevision)
        assert add.ingredient_id == 3
        assert add.ingredient_name == "Salt"
        assert add.quantity == Decimal("0.5")
        assert all(record.is_valid() for record in records)

    @pytest.mark.unit
    def test_identical_lists_produce_nothing(
        self,
        ingredients_before: list[IngredientSnapshot],
    ) -> None:
        """Test that an unchanged ingredient list yields no records."""
        # Act
        records = diff_ingredients(ingredients_before, list(ingredients_before))

        # Assert
        assert records == []

    @pytest.mark.unit
    def test_reordering_alone_produces_nothing(
        self,
        ingredients_before: list[IngredientSnapshot],
    ) -> None:
        """Test that ingredients are matched by ID, not by position."""
        # Act
        records = diff_ingredients(ingredients_before, ingredients_before[::-1])

        # Assert
        assert records == []

    @pytest.mark.unit
    def test_empty_before_gives_only_adds(self) -> None:
        """Test that every ingredient of a new list is an add, in list order."""
        # Arrange
        after = IngredientSnapshotFactory.many(3)

        # Act
        records = diff_ingredients([], after)

        # Assert
        assert [type(r) for r in records] == [IngredientAddRevision] * 3
        assert [r.entity_id for r in records] == [1, 2, 3]

    @pytest.mark.unit
    def test_empty_after_gives_only_removes_with_last_state(self) -> None:
        """Test that removes carry the removed ingredient's last state."""
        # Arrange
        before = [
            IngredientSnapshot(
                ingredient_id=5,
                ingredient_name="Butter",
                quantity=Decimal("0.25"),
                unit=IngredientUnitEnum.CUP,
                is_optional=True,
                notes="Softened",
            ),
        ]

        # Act
        records = diff_ingredients(before, [])

        # Assert
        assert records == [
            IngredientRemoveRevision(
                ingredient_id=5,
                ingredient_name="Butter",
                quantity=Decimal("0.25"),
                unit=IngredientUnitEnum.CUP,
                is_optional=True,
                description="Softened",
            ),
        ]

    @pytest.mark.unit
    def test_one_update_per_changed_field_in_field_then_id_order(self) -> None:
        """Test that updates are ordered by tracked field, then ingredient ID."""
        # Arrange
        before = [
            IngredientSnapshot(ingredient_id=2, ingredient_name="Milk", quantity=1),
            IngredientSnapshot(ingredient_id=1, ingredient_name="Egg", quantity=2),
        ]
        after = [
            IngredientSnapshot(
                ingredient_id=2,
                ingredient_name="Milk",
                quantity=2,
                is_optional=True,
            ),
            IngredientSnapshot(
                ingredient_id=1,
                ingredient_name="Egg",
                quantity=3,
                unit=IngredientUnitEnum.PIECE,
            ),
        ]

        # Act
        records = diff_ingredients(before, after)

        # Assert
        assert [(r.changed_field, r.ingredient_id) for r in records] == [
            (IngredientFieldEnum.QUANTITY, 1),
            (IngredientFieldEnum.QUANTITY, 2),
            (IngredientFieldEnum.UNIT, 1),
            (IngredientFieldEnum.OPTIONAL_STATUS, 2),
        ]

    @pytest.mark.unit
    def test_removes_then_updates_then_adds(self) -> None:
        """Test that the kinds of record come out in a fixed order."""
        # Arrange
        before = [
            IngredientSnapshot(ingredient_id=1, ingredient_name="A", quantity=1),
            IngredientSnapshot(ingredient_id=2, ingredient_name="B"),
        ]
        after = [
            IngredientSnapshot(ingredient_id=3, ingredient_name="C"),
            IngredientSnapshot(ingredient_id=1, ingredient_name="A", quantity=2),
        ]

        # Act
        records = diff_ingredients(before, after)

        # Assert
        assert [type(r) for r in records] == [
            IngredientRemoveRevision,
            IngredientUpdateRevision,
            IngredientAddRevision,
        ]

    @pytest.mark.unit
    def test_rename_keeps_new_name_for_display(self) -> None:
        """Test that a name change is an update labelled with the new name."""
        # Arrange
        before = [IngredientSnapshot(ingredient_id=1, ingredient_name="Flour")]
        after = [IngredientSnapshot(ingredient_id=1, ingredient_name="Bread flour")]

        # Act
        (record,) = diff_ingredients(before, after)

        # Assert
        assert record.changed_field == IngredientFieldEnum.NAME
        assert record.ingredient_name == "Bread flour"
        assert record.previous_value == "Flour"
        assert record.new_value == "Bread flour"

    @pytest.mark.unit
    def test_duplicate_ids_are_rejected(self) -> None:
        """Test that an ingredient listed twice raises ValueError."""
        # Arrange
        before = [
            IngredientSnapshot(ingredient_id=1, ingredient_name="Flour"),
            IngredientSnapshot(ingredient_id=1, ingredient_name="Flour"),
        ]

        # Act & Assert
        with pytest.raises(ValueError, match="Duplicate ingredient id 1"):
            diff_ingredients(before, [])


class TestDiffSteps:
    """Unit tests for diff_steps."""

    @pytest.mark.unit
    def test_add_update_and_remove(self, steps_before: list[StepSnapshot]) -> None:
        """Test a step edit that removes, rewrites and adds steps."""
        # Arrange
        after = [
            StepSnapshot(
                step_id=11,
                step_number=1,
                instruction="Bake",
                timer_seconds=1800,
            ),
            StepSnapshot(step_id=12, step_number=2, instruction="Cool"),
        ]

        # Act
        records = diff_steps(steps_before, after)

        # Assert
        assert [type(r) for r in records] == [
            StepRemoveRevision,
            StepUpdateRevision,
            StepAddRevision,
        ]
        remove, update, add = records
        assert remove.step_id == 10
        assert remove.instruction == "Mix the flour"
        assert update.step_id == 11
        assert update.step_number == 1
        assert update.changed_field == StepFieldEnum.STEP_NUMBER
        assert (update.previous_value, update.new_value) == (2, 1)
        assert add.step_id == 12
        assert all(record.is_valid() for record in records)

    @pytest.mark.unit
    def test_identical_lists_produce_nothing(
        self,
        steps_before: list[StepSnapshot],
    ) -> None:
        """Test that an unchanged step list yields no records."""
        # Act & Assert
        assert diff_steps(steps_before, list(steps_before)) == []

    @pytest.mark.unit
    def test_each_changed_field_is_its_own_update(self) -> None:
        """Test that two changes to one step give two updates in field order."""
        # Arrange
        before = [StepSnapshot(step_id=1, step_number=1, instruction="Mix")]
        after = [
            StepSnapshot(step_id=1, step_number=1, instruction="Stir", optional=True),
        ]

        # Act
        records = diff_steps(before, after)

        # Assert
        assert [r.changed_field for r in records] == [
            StepFieldEnum.INSTRUCTION,
            StepFieldEnum.OPTIONAL_STATUS,
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize(("old_timer", "new_timer"), [(None, 60), (60, None)])
    def test_timer_change_with_no_value_on_one_side_is_skipped(
        self,
        old_timer: int | None,
        new_timer: int | None,
    ) -> None:
        """Test that setting or clearing a timer produces no update."""
        # Arrange
        before = StepSnapshotFactory.many(1, timer_seconds=old_timer)
        after = StepSnapshotFactory.many(1, timer_seconds=new_timer)
        after = [after[0].model_copy(update={"instruction": before[0].instruction})]

        # Act
        records = diff_steps(before, after)

        # Assert
        assert records == []

    @pytest.mark.unit
    def test_duplicate_ids_are_rejected(self) -> None:
        """Test that a step listed twice raises ValueError."""
        # Arrange
        after = [
            StepSnapshot(step_id=3, step_number=1, instruction="Mix"),
            StepSnapshot(step_id=3, step_number=2, instruction="Mix"),
        ]

        # Act & Assert
        with pytest.raises(ValueError, match="Duplicate step id 3"):
            diff_steps([], after)
