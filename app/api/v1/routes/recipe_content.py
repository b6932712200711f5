"""Recipe content route handlers.

Contains API endpoints that replace a recipe's ingredient or step list. Every change is
recorded in the recipe's revision history in the same transaction.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.api.v1.schemas.request.replace_recipe_ingredients_request import (
    ReplaceRecipeIngredientsRequest,
)
from app.api.v1.schemas.request.replace_recipe_steps_request import (
    ReplaceRecipeStepsRequest,
)
from app.api.v1.schemas.response.recorded_revisions_response import (
    RecordedRevisionsResponse,
)
from app.core.logging import get_logger
from app.db.models.recipe_models.recipe_revision import RecipeRevision
from app.deps.db import DbSession
from app.deps.user import CurrentUserId
from app.exceptions.custom_exceptions import (
    DuplicateEntityError,
    InvalidRevisionError,
    ResourceNotFoundError,
)
from app.mappers.recipe_snapshot import build_revision_entry
from app.services.recipe_content_service import RecipeContentService
from app.utils.revision_serializer import decode_revision_pair

router = APIRouter()
_log = get_logger(__name__)

_CLIENT_ERRORS = (ResourceNotFoundError, DuplicateEntityError, InvalidRevisionError)


def get_recipe_content_service() -> RecipeContentService:
    """Dependency provider function to instantiate RecipeContentService.

    Returns:
        RecipeContentService: A new instance of RecipeContentService.
    """
    return RecipeContentService()


ContentServiceDep = Annotated[
    RecipeContentService,
    Depends(get_recipe_content_service),
]


def _build_response(
    recipe_id: int,
    revisions: list[RecipeRevision],
) -> RecordedRevisionsResponse:
    entries = [
        build_revision_entry(
            revision,
            decode_revision_pair(
                revision.previous_data,
                revision.new_data,
                revision.revision_category,
                revision.revision_type,
            ),
        )
        for revision in revisions
    ]
    return RecordedRevisionsResponse(recipe_id=recipe_id, revisions=entries)


def _to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, ResourceNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.put(
    "/recipe-management/recipes/{recipe_id}/ingredients",
    tags=["recipe-management"],
    summary="Replace the ingredients of a recipe",
    description="""
                Replaces the recipe's ingredient list with the given one. A revision is
                recorded for every ingredient removed or added and every field changed.
                """,
    response_model=RecordedRevisionsResponse,
    responses={
        400: {"description": "Duplicate ingredients or an invalid revision"},
        404: {"description": "Recipe or ingredient not found"},
    },
)
def replace_recipe_ingredients(
    service: ContentServiceDep,
    db: DbSession,
    user_id: CurrentUserId,
    recipe_id: Annotated[int, Path(gt=0, description="The ID of the recipe")],
    request: ReplaceRecipeIngredientsRequest,
) -> RecordedRevisionsResponse:
    """Replace the ingredient list of a recipe.

    Args:
        service (RecipeContentService): Content service.
        db (Session): Database session.
        user_id (uuid.UUID): The current user.
        recipe_id (int): The ID of the recipe.
        request (ReplaceRecipeIngredientsRequest): The new ingredient list.

    Returns:
        RecordedRevisionsResponse: The revisions recorded for the change.

    Raises:
        HTTPException: 404 if the recipe or an ingredient does not exist, 400 if the
            list has duplicates or would produce an invalid revision.
    """
    try:
        revisions = service.replace_ingredients(
            recipe_id,
            user_id,
            request.ingredients,
            db,
            request.change_comment,
        )
        return _build_response(recipe_id, revisions)
    except _CLIENT_ERRORS as e:
        _log.warning("Ingredient replacement for recipe {} rejected: {}", recipe_id, e)
        raise _to_http_exception(e) from e


@router.put(
    "/recipe-management/recipes/{recipe_id}/steps",
    tags=["recipe-management"],
    summary="Replace the steps of a recipe",
    description="""
                Replaces the recipe's step list with the given one. A revision is
                recorded for every step removed or added and every field changed. Steps
                without a `step_id` are created.
                """,
    response_model=RecordedRevisionsResponse,
    responses={
        400: {"description": "Duplicate steps or an invalid revision"},
        404: {"description": "Recipe or step not found"},
    },
)
def replace_recipe_steps(
    service: ContentServiceDep,
    db: DbSession,
    user_id: CurrentUserId,
    recipe_id: Annotated[int, Path(gt=0, description="The ID of the recipe")],
    request: ReplaceRecipeStepsRequest,
) -> RecordedRevisionsResponse:
    """Replace the step list of a recipe.

    Args:
        service (RecipeContentService): Content service.
        db (Session): Database session.
        user_id (uuid.UUID): The current user.
        recipe_id (int): The ID of the recipe.
        request (ReplaceRecipeStepsRequest): The new step list.

    Returns:
        RecordedRevisionsResponse: The revisions recorded for the change.

    Raises:
        HTTPException: 404 if the recipe or a step does not exist, 400 if the list
            has duplicates or would produce an invalid revision.
    """
    try:
        revisions = service.replace_steps(
            recipe_id,
            user_id,
            request.steps,
            db,
            request.change_comment,
        )
        return _build_response(recipe_id, revisions)
    except _CLIENT_ERRORS as e:
        _log.warning("Step replacement for recipe {} rejected: {}", recipe_id, e)
        raise _to_http_exception(e) from e
