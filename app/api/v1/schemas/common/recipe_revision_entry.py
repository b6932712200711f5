"""Schema for one entry of a recipe's revision history."""

import uuid
from datetime import datetime

from pydantic import Field

from app.api.v1.schemas.base_schema import BaseSchema
from app.api.v1.schemas.common.revision import AnyRevisionRecord
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.enums.revision_type_enum import RevisionTypeEnum


class RecipeRevisionEntry(BaseSchema):
    """A decoded revision together with the metadata of the row it was stored in.

    Attributes:
        revision_id (int): Identity of the stored revision row.
        recipe_id (int): The recipe the revision belongs to.
        user_id (uuid.UUID): Author of the change.
        category (RevisionCategoryEnum): Ingredient or step.
        type (RevisionTypeEnum): Add, update or remove.
        revision (AnyRevisionRecord): The decoded revision record.
        change_comment (str | None): Optional comment supplied with the change.
        created_at (datetime): When the revision was recorded.
    """

    revision_id: int = Field(..., description="The ID of the revision row")
    recipe_id: int = Field(..., description="The ID of the recipe", gt=0)
    user_id: uuid.UUID = Field(..., description="The ID of the change's author")
    category: RevisionCategoryEnum = Field(..., description="Revision category")
    type: RevisionTypeEnum = Field(..., description="Revision type")
    revision: AnyRevisionRecord = Field(..., description="The decoded revision")
    change_comment: str | None = Field(None, description="Comment on the change")
    created_at: datetime = Field(..., description="When the revision was recorded")
