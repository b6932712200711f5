"""Recipe Revision model definition.

A revision row records one change to a recipe's ingredients or steps. Rows are written
once and never updated. The payload columns hold JSON text whose shape depends on the
``(revision_category, revision_type)`` pair stored beside it.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Index, Text, func
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base_database_model import BaseDatabaseModel
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.enums.revision_type_enum import RevisionTypeEnum

if TYPE_CHECKING:
    from app.db.models.recipe_models.recipe import Recipe


class RecipeRevision(BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'recipe_revisions' table.

    Attributes:
        revision_id (int): Generated identity, also the tiebreaker for rows sharing a
            ``created_at`` value.
        recipe_id (int): Owning recipe.
        user_id (uuid.UUID): Author of the change.
        revision_category (RevisionCategoryEnum): Ingredient or step.
        revision_type (RevisionTypeEnum): Add, update or remove.
        previous_data (str): JSON text of the record before the change, ``"{}"`` for
            adds.
        new_data (str): JSON text of the record after the change, ``"{}"`` for
            removes.
        change_comment (str | None): Optional free text supplied by the author.
        created_at (datetime): Set by the database on insert.
    """

    __tablename__ = "recipe_revisions"
    __table_args__ = (
        Index("ix_recipe_revisions_recipe_id_created_at", "recipe_id", "created_at"),
        {"schema": "recipe_manager"},
    )

    revision_id: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=True,
    )
    recipe_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("recipe_manager.recipes.recipe_id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("recipe_manager.users.user_id"),
        nullable=False,
    )
    revision_category: Mapped[RevisionCategoryEnum] = mapped_column(
        SAEnum(
            RevisionCategoryEnum,
            name="revision_category_enum",
            schema="recipe_manager",
            native_enum=False,
            create_constraint=False,
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
    )
    revision_type: Mapped[RevisionTypeEnum] = mapped_column(
        SAEnum(
            RevisionTypeEnum,
            name="revision_type_enum",
            schema="recipe_manager",
            native_enum=False,
            create_constraint=False,
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
    )
    previous_data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    new_data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    change_comment: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    recipe: Mapped["Recipe"] = relationship(
        "Recipe",
        back_populates="revisions",
    )
