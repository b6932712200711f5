"""Recipe revision service module.

Records the revisions produced by a change to a recipe's ingredients or steps and reads
a recipe's revision history back, newest first.

Includes logging for traceability and debugging.
"""

import uuid
from collections.abc import Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.v1.schemas.common.recipe_revision_entry import RecipeRevisionEntry
from app.api.v1.schemas.common.revision import RevisionRecord
from app.api.v1.schemas.response.ingredient_revisions_response import (
    IngredientRevisionsResponse,
)
from app.api.v1.schemas.response.recipe_revisions_response import (
    RecipeRevisionsResponse,
)
from app.api.v1.schemas.response.step_revisions_response import (
    StepRevisionsResponse,
)
from app.core.logging import get_logger
from app.db.models.recipe_models.recipe_revision import RecipeRevision
from app.db.repositories.recipe_revision_repository import RecipeRevisionRepository
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.exceptions.custom_exceptions import (
    InvalidRevisionError,
    ResourceNotFoundError,
    RevisionDecodeError,
)
from app.mappers.recipe_snapshot import build_revision_entry
from app.utils.revision_serializer import decode_revision_pair, encode_revision_pair

_log = get_logger(__name__)

RepositoryFactory = Callable[[Session], RecipeRevisionRepository]


class RecipeRevisionService:
    """Service to record and read recipe revision history.

    Attributes:
        repository_factory (RepositoryFactory): Builds the repository used for a
            given session.
    """

    def __init__(
        self,
        repository_factory: RepositoryFactory = RecipeRevisionRepository,
    ) -> None:
        """Initialize the service.

        Args:
            repository_factory: Builds a revision repository from a session.
        """
        self.repository_factory = repository_factory

    def record_change(
        self,
        recipe_id: int,
        user_id: uuid.UUID,
        records: Sequence[RevisionRecord],
        db: Session,
        change_comment: str | None = None,
        *,
        commit: bool = True,
    ) -> list[RecipeRevision]:
        """Persist one revision row per record, all or nothing.

        Every record is validated before anything is written. Rows are flushed in the
        order given, so their identities follow that order.

        Args:
            recipe_id (int): The recipe that changed.
            user_id (uuid.UUID): Author of the change.
            records (Sequence[RevisionRecord]): The revisions describing the change.
            db (Session): Database session for ORM operations.
            change_comment (str | None): Optional comment stored on every row.
            commit (bool): Commit when done. Pass False when the caller owns the
                transaction, e.g. to commit the entity change in the same unit.

        Returns:
            list[RecipeRevision]: The new rows, in the order of ``records``.

        Raises:
            InvalidRevisionError: If any record fails validation. Nothing is written.
            SQLAlchemyError: If a row cannot be written. The session is rolled back.
        """
        invalid = [record for record in records if not record.is_valid()]
        if invalid:
            _log.warning(
                "Rejecting change set of {} revision(s) for recipe {}: {} invalid",
                len(records),
                recipe_id,
                len(invalid),
            )
            raise InvalidRevisionError(invalid)

        if not records:
            _log.debug("No revisions to record for recipe {}", recipe_id)
            return []

        repository = self.repository_factory(db)
        revisions: list[RecipeRevision] = []
        try:
            for record in records:
                previous_data, new_data = encode_revision_pair(record)
                revision = RecipeRevision(
                    recipe_id=recipe_id,
                    user_id=user_id,
                    revision_category=record.category,
                    revision_type=record.type,
                    previous_data=previous_data,
                    new_data=new_data,
                    change_comment=change_comment,
                )
                revisions.append(repository.add(revision))

            if commit:
                db.commit()
        except SQLAlchemyError:
            _log.exception(
                "Failed to record {} revision(s) for recipe {}, rolling back",
                len(records),
                recipe_id,
            )
            db.rollback()
            raise

        _log.info("Recorded {} revision(s) for recipe {}", len(revisions), recipe_id)
        return revisions

    def get_history(
        self,
        recipe_id: int,
        db: Session,
        entity_id: int | None = None,
        category: RevisionCategoryEnum | None = None,
    ) -> list[RecipeRevisionEntry]:
        """Get the decoded revision history of a recipe, newest first.

        Args:
            recipe_id (int): The recipe whose history is read.
            db (Session): Database session for ORM operations.
            entity_id (int | None): Only keep revisions of this ingredient or step.
                Requires ``category``.
            category (RevisionCategoryEnum | None): Only keep revisions of this
                category.

        Returns:
            list[RecipeRevisionEntry]: The history, empty when nothing was recorded.

        Raises:
            ValueError: If ``entity_id`` is given without ``category``.
            ResourceNotFoundError: If the recipe, or the filtered ingredient or step,
                does not exist.
            RevisionDecodeError: If any stored row cannot be decoded.
        """
        if entity_id is not None and category is None:
            msg = "Filtering revisions by entity requires a category"
            raise ValueError(msg)

        repository = self.repository_factory(db)

        if not repository.recipe_exists(recipe_id):
            _log.warning("Recipe with ID {} not found", recipe_id)
            raise ResourceNotFoundError("Recipe", recipe_id)

        if entity_id is not None:
            self._check_entity_exists(repository, recipe_id, entity_id, category)

        rows = repository.find_by_recipe(recipe_id, category)

        entries: list[RecipeRevisionEntry] = []
        for row in rows:
            record = self._decode_row(row)
            if entity_id is not None and record.entity_id != entity_id:
                continue
            entries.append(build_revision_entry(row, record))

        _log.debug(
            "Found {} revision(s) for recipe {} (category={}, entity={})",
            len(entries),
            recipe_id,
            category,
            entity_id,
        )
        return entries

    def get_recipe_revisions(
        self,
        recipe_id: int,
        db: Session,
        category: RevisionCategoryEnum | None = None,
    ) -> RecipeRevisionsResponse:
        """Get the revision history of a whole recipe.

        Args:
            recipe_id (int): The recipe whose history is read.
            db (Session): Database session for ORM operations.
            category (RevisionCategoryEnum | None): Optional category filter.

        Returns:
            RecipeRevisionsResponse: The history and its size.
        """
        _log.info("Getting revisions for recipe {}", recipe_id)
        revisions = self.get_history(recipe_id, db, category=category)
        return RecipeRevisionsResponse(
            recipe_id=recipe_id,
            revisions=revisions,
            total_count=len(revisions),
        )

    def get_ingredient_revisions(
        self,
        recipe_id: int,
        ingredient_id: int,
        db: Session,
    ) -> IngredientRevisionsResponse:
        """Get the revision history of one ingredient of a recipe.

        Args:
            recipe_id (int): The recipe whose history is read.
            ingredient_id (int): The ingredient to filter on.
            db (Session): Database session for ORM operations.

        Returns:
            IngredientRevisionsResponse: The history and its size.
        """
        _log.info(
            "Getting revisions for ingredient {} of recipe {}",
            ingredient_id,
            recipe_id,
        )
        revisions = self.get_history(
            recipe_id,
            db,
            entity_id=ingredient_id,
            category=RevisionCategoryEnum.INGREDIENT,
        )
        return IngredientRevisionsResponse(
            recipe_id=recipe_id,
            ingredient_id=ingredient_id,
            revisions=revisions,
            total_count=len(revisions),
        )

    def get_step_revisions(
        self,
        recipe_id: int,
        step_id: int,
        db: Session,
    ) -> StepRevisionsResponse:
        """Get the revision history of one step of a recipe.

        Args:
            recipe_id (int): The recipe whose history is read.
            step_id (int): The step to filter on.
            db (Session): Database session for ORM operations.

        Returns:
            StepRevisionsResponse: The history and its size.
        """
        _log.info("Getting revisions for step {} of recipe {}", step_id, recipe_id)
        revisions = self.get_history(
            recipe_id,
            db,
            entity_id=step_id,
            category=RevisionCategoryEnum.STEP,
        )
        return StepRevisionsResponse(
            recipe_id=recipe_id,
            step_id=step_id,
            revisions=revisions,
            total_count=len(revisions),
        )

    def _check_entity_exists(
        self,
        repository: RecipeRevisionRepository,
        recipe_id: int,
        entity_id: int,
        category: RevisionCategoryEnum | None,
    ) -> None:
        if category == RevisionCategoryEnum.INGREDIENT:
            exists = repository.recipe_ingredient_exists(recipe_id, entity_id)
            resource = "Ingredient"
        else:
            exists = repository.recipe_step_exists(recipe_id, entity_id)
            resource = "Step"

        if not exists:
            _log.warning(
                "{} with ID {} not found in recipe {}",
                resource,
                entity_id,
                recipe_id,
            )
            raise ResourceNotFoundError(resource, entity_id)

    def _decode_row(self, row: RecipeRevision) -> RevisionRecord:
        try:
            return decode_revision_pair(
                row.previous_data,
                row.new_data,
                row.revision_category,
                row.revision_type,
            )
        except RevisionDecodeError as e:
            _log.error(
                "Revision {} of recipe {} could not be decoded: {}",
                row.revision_id,
                row.recipe_id,
                e.get_reason(),
            )
            raise RevisionDecodeError(e.get_reason(), row.revision_id) from e
