"""Recipe revision record schemas.

A revision record is the typed, in-memory form of a single change to a recipe's
ingredients or steps. The set of record types is closed: three ingredient variants and
three step variants, each bound to exactly one (category, type) pair. The pair is a
class constant rather than caller-supplied data, so an ``IngredientAddRevision`` is
always ``INGREDIENT``/``ADD``.

Records are immutable. ``is_valid()`` is the single authority consulted before a record
is persisted.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationInfo,
    computed_field,
    field_validator,
    model_validator,
)

from app.enums.ingredient_field_enum import IngredientFieldEnum
from app.enums.ingredient_unit_enum import IngredientUnitEnum
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.enums.revision_type_enum import RevisionTypeEnum
from app.enums.step_field_enum import StepFieldEnum

_INGREDIENT_VALUE_ADAPTERS: Mapping[IngredientFieldEnum, TypeAdapter[Any]] = (
    MappingProxyType(
        {
            IngredientFieldEnum.NAME: TypeAdapter(str),
            IngredientFieldEnum.QUANTITY: TypeAdapter(Decimal),
            IngredientFieldEnum.UNIT: TypeAdapter(IngredientUnitEnum),
            IngredientFieldEnum.OPTIONAL_STATUS: TypeAdapter(bool),
            IngredientFieldEnum.NOTES: TypeAdapter(str),
        },
    )
)

_STEP_VALUE_ADAPTERS: Mapping[StepFieldEnum, TypeAdapter[Any]] = MappingProxyType(
    {
        StepFieldEnum.INSTRUCTION: TypeAdapter(str),
        StepFieldEnum.STEP_NUMBER: TypeAdapter(int),
        StepFieldEnum.OPTIONAL_STATUS: TypeAdapter(bool),
        StepFieldEnum.TIMER: TypeAdapter(int),
    },
)


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


class RevisionRecord(BaseModel, ABC):
    """Base class for every revision record variant.

    Subclasses pin ``CATEGORY`` and ``TYPE``; both are exposed read-only as the
    ``category`` and ``type`` fields of the serialized record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    CATEGORY: ClassVar[RevisionCategoryEnum]
    TYPE: ClassVar[RevisionTypeEnum]

    @model_validator(mode="before")
    @classmethod
    def _check_discriminator(cls, data: Any) -> Any:
        """Drop the embedded discriminator after checking it matches this class."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        category = data.pop("category", None)
        revision_type = data.pop("type", None)
        if category is not None and category != cls.CATEGORY:
            msg = f"{cls.__name__} cannot carry category {category!r}"
            raise ValueError(msg)
        if revision_type is not None and revision_type != cls.TYPE:
            msg = f"{cls.__name__} cannot carry type {revision_type!r}"
            raise ValueError(msg)
        return data

    @computed_field  # type: ignore[prop-decorator]
    @property
    def category(self) -> RevisionCategoryEnum:
        """The recipe sub-entity this revision concerns."""
        return self.CATEGORY

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type(self) -> RevisionTypeEnum:
        """The kind of change this revision records."""
        return self.TYPE

    @property
    @abstractmethod
    def entity_id(self) -> int | None:
        """Identifier of the ingredient or step the revision concerns."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True when the record may be persisted."""


class IngredientRevision(RevisionRecord, ABC):
    """Base class for ingredient revisions."""

    CATEGORY: ClassVar[RevisionCategoryEnum] = RevisionCategoryEnum.INGREDIENT

    ingredient_id: int | None = Field(
        default=None,
        description="The ID of the ingredient the revision concerns",
    )

    @property
    def entity_id(self) -> int | None:
        return self.ingredient_id


class StepRevision(RevisionRecord, ABC):
    """Base class for step revisions."""

    CATEGORY: ClassVar[RevisionCategoryEnum] = RevisionCategoryEnum.STEP

    step_id: int | None = Field(
        default=None,
        description="The ID of the step the revision concerns",
    )
    step_number: int | None = Field(
        default=None,
        description="The position of the step within the recipe",
    )

    @property
    def entity_id(self) -> int | None:
        return self.step_id


class IngredientAddRevision(IngredientRevision):
    """An ingredient was added to the recipe."""

    TYPE: ClassVar[RevisionTypeEnum] = RevisionTypeEnum.ADD

    ingredient_name: str | None = Field(default=None, description="Ingredient name")
    quantity: Decimal | None = Field(default=None, description="Ingredient quantity")
    unit: IngredientUnitEnum | None = Field(default=None, description="Quantity unit")
    is_optional: bool | None = Field(
        default=None,
        description="Whether the ingredient is optional",
    )
    description: str | None = Field(default=None, description="Ingredient notes")

    def is_valid(self) -> bool:
        return self.ingredient_id is not None and _has_text(self.ingredient_name)


class IngredientUpdateRevision(IngredientRevision):
    """A single field of an existing recipe ingredient changed.

    ``previous_value`` and ``new_value`` are coerced to the type of ``changed_field``
    (``Decimal`` for quantities, ``IngredientUnitEnum`` for units, ``bool`` for the
    optional flag, ``str`` otherwise) so that decoded values compare equal to the
    values that were encoded.
    """

    TYPE: ClassVar[RevisionTypeEnum] = RevisionTypeEnum.UPDATE

    ingredient_name: str | None = Field(
        default=None,
        description="Ingredient name at the time of the change, for display",
    )
    changed_field: IngredientFieldEnum | None = Field(
        default=None,
        description="The ingredient field that changed",
    )
    previous_value: Any = Field(default=None, description="Value before the change")
    new_value: Any = Field(default=None, description="Value after the change")

    @field_validator("previous_value", "new_value")
    @classmethod
    def _coerce_value(cls, value: Any, info: ValidationInfo) -> Any:
        changed_field = info.data.get("changed_field")
        if value is None or changed_field is None:
            return value
        return _INGREDIENT_VALUE_ADAPTERS[changed_field].validate_python(value)

    def is_valid(self) -> bool:
        return (
            self.ingredient_id is not None
            and self.changed_field is not None
            and self.previous_value != self.new_value
        )


class IngredientRemoveRevision(IngredientRevision):
    """An ingredient was removed from the recipe.

    Besides the identity, the record may carry the ingredient's last state so the
    removal can be undone from history alone.
    """

    TYPE: ClassVar[RevisionTypeEnum] = RevisionTypeEnum.REMOVE

    ingredient_name: str | None = Field(default=None, description="Ingredient name")
    quantity: Decimal | None = Field(default=None, description="Last quantity")
    unit: IngredientUnitEnum | None = Field(default=None, description="Last unit")
    is_optional: bool | None = Field(default=None, description="Last optional flag")
    description: str | None = Field(default=None, description="Last notes")

    def is_valid(self) -> bool:
        return self.ingredient_id is not None


class StepAddRevision(StepRevision):
    """A step was added to the recipe."""

    TYPE: ClassVar[RevisionTypeEnum] = RevisionTypeEnum.ADD

    instruction: str | None = Field(default=None, description="Step instruction")
    optional: bool | None = Field(default=None, description="Whether step is optional")
    timer_seconds: int | None = Field(default=None, description="Step timer")

    def is_valid(self) -> bool:
        return (
            self.step_id is not None
            and self.step_number is not None
            and _has_text(self.instruction)
            and self.optional is not None
        )


class StepUpdateRevision(StepRevision):
    """A single field of an existing recipe step changed."""

    TYPE: ClassVar[RevisionTypeEnum] = RevisionTypeEnum.UPDATE

    changed_field: StepFieldEnum | None = Field(
        default=None,
        description="The step field that changed",
    )
    previous_value: Any = Field(default=None, description="Value before the change")
    new_value: Any = Field(default=None, description="Value after the change")

    @field_validator("previous_value", "new_value")
    @classmethod
    def _coerce_value(cls, value: Any, info: ValidationInfo) -> Any:
        changed_field = info.data.get("changed_field")
        if value is None or changed_field is None:
            return value
        return _STEP_VALUE_ADAPTERS[changed_field].validate_python(value)

    def is_valid(self) -> bool:
        return (
            self.step_id is not None
            and self.step_number is not None
            and self.changed_field is not None
            and self.previous_value is not None
            and self.new_value is not None
            and self.previous_value != self.new_value
        )


class StepRemoveRevision(StepRevision):
    """A step was removed from the recipe.

    Besides the identity, the record may carry the step's last state.
    """

    TYPE: ClassVar[RevisionTypeEnum] = RevisionTypeEnum.REMOVE

    instruction: str | None = Field(default=None, description="Last instruction")
    optional: bool | None = Field(default=None, description="Last optional flag")
    timer_seconds: int | None = Field(default=None, description="Last timer")

    def is_valid(self) -> bool:
        return self.step_id is not None


AnyRevisionRecord = (
    IngredientAddRevision
    | IngredientUpdateRevision
    | IngredientRemoveRevision
    | StepAddRevision
    | StepUpdateRevision
    | StepRemoveRevision
)

REVISION_RECORD_TYPES: Mapping[
    tuple[RevisionCategoryEnum, RevisionTypeEnum],
    type[RevisionRecord],
] = MappingProxyType(
    {
        (record_cls.CATEGORY, record_cls.TYPE): record_cls
        for record_cls in (
            IngredientAddRevision,
            IngredientUpdateRevision,
            IngredientRemoveRevision,
            StepAddRevision,
            StepUpdateRevision,
            StepRemoveRevision,
        )
    },
)
