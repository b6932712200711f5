"""Unit tests for the revision serializer."""

from decimal import Decimal

import orjson
import pytest

from app.api.v1.schemas.common.revision import (
    IngredientAddRevision,
    IngredientRemoveRevision,
    IngredientUpdateRevision,
    RevisionRecord,
    StepAddRevision,
    StepRemoveRevision,
    StepUpdateRevision,
)
from app.enums.ingredient_field_enum import IngredientFieldEnum
from app.enums.ingredient_unit_enum import IngredientUnitEnum
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.enums.revision_type_enum import RevisionTypeEnum
from app.enums.step_field_enum import StepFieldEnum
from app.exceptions.custom_exceptions import RevisionDecodeError
from app.utils.revision_serializer import (
    EMPTY_REVISION_DATA,
    decode_revision,
    decode_revision_pair,
    encode_revision,
    encode_revision_pair,
)

_RECORDS = [
    IngredientAddRevision(
        ingredient_id=3,
        ingredient_name="Salt",
        quantity=Decimal("2.5"),
        unit=IngredientUnitEnum.TSP,
        is_optional=False,
        description="Flaky",
    ),
    IngredientUpdateRevision(
        ingredient_id=1,
        ingredient_name="Flour",
        changed_field=IngredientFieldEnum.QUANTITY,
        previous_value=Decimal("2.5"),
        new_value=Decimal("2.75"),
    ),
    IngredientUpdateRevision(
        ingredient_id=1,
        ingredient_name="Flour",
        changed_field=IngredientFieldEnum.UNIT,
        previous_value=IngredientUnitEnum.CUP,
        new_value=IngredientUnitEnum.G,
    ),
    IngredientRemoveRevision(ingredient_id=2, ingredient_name="Sugar"),
    StepAddRevision(
        step_id=12,
        step_number=3,
        instruction="Rest the dough",
        optional=True,
    ),
    StepUpdateRevision(
        step_id=11,
        step_number=2,
        changed_field=StepFieldEnum.OPTIONAL_STATUS,
        previous_value=False,
        new_value=True,
    ),
    StepRemoveRevision(step_id=10, step_number=1, instruction="Mix", timer_seconds=60),
]


class TestEncodeRevision:
    """Unit tests for encode_revision."""

    @pytest.mark.unit
    def test_decimal_is_written_as_exact_string(self) -> None:
        """Test that quantities keep their exact decimal representation."""
        # Act
        payload = orjson.loads(encode_revision(_RECORDS[0]))

        # Assert
        assert payload["quantity"] == "2.5"
        assert payload["unit"] == "TSP"
        assert payload["category"] == "INGREDIENT"
        assert payload["type"] == "ADD"

    @pytest.mark.unit
    @pytest.mark.parametrize("record", _RECORDS, ids=lambda r: type(r).__name__)
    def test_round_trip_is_exact(self, record: RevisionRecord) -> None:
        """Test that decoding an encoded record gives back an equal record."""
        # Act
        decoded = decode_revision(
            encode_revision(record),
            record.category,
            record.type,
        )

        # Assert
        assert type(decoded) is type(record)
        assert decoded == record

    @pytest.mark.unit
    def test_round_trip_without_hint_uses_embedded_discriminator(self) -> None:
        """Test that the embedded category and type select the record class."""
        # Arrange
        record = _RECORDS[1]

        # Act
        decoded = decode_revision(encode_revision(record))

        # Assert
        assert isinstance(decoded, IngredientUpdateRevision)
        assert decoded.previous_value == Decimal("2.5")
        assert decoded.new_value == Decimal("2.75")


class TestDecodeRevision:
    """Unit tests for decode_revision failure modes."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", [None, "", "   ", EMPTY_REVISION_DATA, "[]"])
    def test_empty_data_is_rejected(self, text: str | None) -> None:
        """Test that blank text and the empty marker cannot be decoded."""
        # Act & Assert
        with pytest.raises(RevisionDecodeError):
            decode_revision(text, "INGREDIENT", "ADD")

    @pytest.mark.unit
    def test_malformed_json_is_rejected(self) -> None:
        """Test that malformed JSON raises RevisionDecodeError."""
        # Act & Assert
        with pytest.raises(RevisionDecodeError, match="Malformed revision JSON"):
            decode_revision('{"ingredient_id": 1', "INGREDIENT", "ADD")

    @pytest.mark.unit
    def test_unknown_pair_is_rejected(self) -> None:
        """Test that an unknown category/type pair raises RevisionDecodeError."""
        # Act & Assert
        with pytest.raises(RevisionDecodeError, match="Unknown revision"):
            decode_revision('{"ingredient_id": 1}', "INGREDIENT", "DELETE")

    @pytest.mark.unit
    def test_missing_discriminator_is_rejected(self) -> None:
        """Test that text without a hint or embedded discriminator is rejected."""
        # Act & Assert
        with pytest.raises(RevisionDecodeError, match="Unknown revision"):
            decode_revision('{"ingredient_id": 1}')

    @pytest.mark.unit
    def test_payload_of_wrong_shape_is_rejected(self) -> None:
        """Test that a payload not matching the stored variant is rejected."""
        # Arrange
        text = encode_revision(_RECORDS[4])

        # Act & Assert
        with pytest.raises(RevisionDecodeError, match="IngredientAddRevision"):
            decode_revision(text, "INGREDIENT", "ADD")

    @pytest.mark.unit
    def test_error_without_revision_id(self) -> None:
        """Test that decode errors raised here carry no row ID."""
        # Act
        with pytest.raises(RevisionDecodeError) as exc_info:
            decode_revision("not json", "STEP", "ADD")

        # Assert
        assert exc_info.value.get_revision_id() is None
        assert str(exc_info.value).startswith("Failed to decode revision: ")


class TestRevisionPair:
    """Unit tests for encode_revision_pair and decode_revision_pair."""

    @pytest.mark.unit
    def test_add_has_empty_previous_data(self) -> None:
        """Test that an add writes the empty marker before the change."""
        # Act
        previous_data, new_data = encode_revision_pair(_RECORDS[0])

        # Assert
        assert previous_data == EMPTY_REVISION_DATA
        assert new_data == encode_revision(_RECORDS[0])

    @pytest.mark.unit
    def test_remove_has_empty_new_data(self) -> None:
        """Test that a remove writes the empty marker after the change."""
        # Act
        previous_data, new_data = encode_revision_pair(_RECORDS[3])

        # Assert
        assert previous_data == encode_revision(_RECORDS[3])
        assert new_data == EMPTY_REVISION_DATA

    @pytest.mark.unit
    def test_update_writes_record_on_both_sides(self) -> None:
        """Test that an update writes the same record before and after."""
        # Act
        previous_data, new_data = encode_revision_pair(_RECORDS[5])

        # Assert
        assert previous_data == new_data == encode_revision(_RECORDS[5])

    @pytest.mark.unit
    @pytest.mark.parametrize("record", _RECORDS, ids=lambda r: type(r).__name__)
    def test_pair_round_trip(self, record: RevisionRecord) -> None:
        """Test that the stored pair decodes back into the record."""
        # Arrange
        previous_data, new_data = encode_revision_pair(record)

        # Act
        decoded = decode_revision_pair(
            previous_data,
            new_data,
            RevisionCategoryEnum(record.category),
            RevisionTypeEnum(record.type),
        )

        # Assert
        assert decoded == record

    @pytest.mark.unit
    def test_pair_with_unknown_type_is_rejected(self) -> None:
        """Test that an unknown stored type raises RevisionDecodeError."""
        # Act & Assert
        with pytest.raises(RevisionDecodeError):
            decode_revision_pair("{}", '{"step_id": 1}', "STEP", "MOVE")
