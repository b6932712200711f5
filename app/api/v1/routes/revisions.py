"""Recipe revision route handlers.

Contains API endpoints for reading the revision history of a recipe, of one of its
ingredients, or of one of its steps.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from app.api.v1.schemas.response.ingredient_revisions_response import (
    IngredientRevisionsResponse,
)
from app.api.v1.schemas.response.recipe_revisions_response import (
    RecipeRevisionsResponse,
)
from app.api.v1.schemas.response.step_revisions_response import (
    StepRevisionsResponse,
)
from app.deps.db import DbSession
from app.enums.revision_category_enum import RevisionCategoryEnum
from app.exceptions.custom_exceptions import (
    ResourceNotFoundError,
    RevisionDecodeError,
)
from app.services.recipe_revision_service import RecipeRevisionService

router = APIRouter()


def get_recipe_revision_service() -> RecipeRevisionService:
    """Dependency provider function to instantiate RecipeRevisionService.

    Returns:
        RecipeRevisionService: A new instance of RecipeRevisionService.
    """
    return RecipeRevisionService()


RevisionServiceDep = Annotated[
    RecipeRevisionService,
    Depends(get_recipe_revision_service),
]

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {
        "description": "A stored revision could not be decoded",
        "content": {
            "application/json": {
                "example": {
                    "detail": (
                        "Failed to decode revision 42: Malformed revision JSON: "
                        "unexpected character"
                    ),
                },
            },
        },
    },
    404: {
        "description": "Recipe, ingredient or step not found",
        "content": {
            "application/json": {
                "example": {"detail": "Recipe with ID 123 not found"},
            },
        },
    },
}


def _to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, ResourceNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get(
    "/recipe-management/recipes/{recipe_id}/revisions",
    tags=["revisions", "recipe-management"],
    summary="Get the revision history of a recipe",
    description="""
                Returns every revision recorded for the recipe's ingredients and steps,
                newest first. Use `category` to restrict the history to ingredient or
                step revisions.
                """,
    response_model=RecipeRevisionsResponse,
    responses={
        200: {
            "description": "Revision history retrieved successfully",
            "content": {
                "application/json": {
                    "example": {
                        "recipe_id": 123,
                        "revisions": [
                            {
                                "revision_id": 7,
                                "recipe_id": 123,
                                "user_id": "4f9c2a1e-2d7b-4c1a-9b1e-0d7e5f6a8b9c",
                                "category": "INGREDIENT",
                                "type": "UPDATE",
                                "revision": {
                                    "category": "INGREDIENT",
                                    "type": "UPDATE",
                                    "ingredient_id": 1,
                                    "ingredient_name": "Flour",
                                    "changed_field": "QUANTITY",
                                    "previous_value": "2",
                                    "new_value": "3",
                                },
                                "change_comment": "More flour",
                                "created_at": "2025-01-01T12:00:00Z",
                            },
                        ],
                        "total_count": 1,
                    },
                },
            },
        },
        **_ERROR_RESPONSES,
    },
)
def get_recipe_revisions(
    service: RevisionServiceDep,
    db: DbSession,
    recipe_id: Annotated[int, Path(gt=0, description="The ID of the recipe")],
    category: Annotated[
        RevisionCategoryEnum | None,
        Query(description="Only return revisions of this category"),
    ] = None,
) -> RecipeRevisionsResponse:
    """Get the revision history of a recipe.

    Args:
        service (RecipeRevisionService): Revision service.
        db (Session): Database session.
        recipe_id (int): The ID of the recipe.
        category (RevisionCategoryEnum | None): Optional category filter.

    Returns:
        RecipeRevisionsResponse: The recipe's revisions, newest first.

    Raises:
        HTTPException: 404 if the recipe does not exist, 400 if a stored revision
            cannot be decoded.
    """
    try:
        return service.get_recipe_revisions(recipe_id, db, category)
    except (ResourceNotFoundError, RevisionDecodeError) as e:
        raise _to_http_exception(e) from e


@router.get(
    "/recipe-management/recipes/{recipe_id}/ingredients/{ingredient_id}/revisions",
    tags=["revisions", "recipe-management"],
    summary="Get the revision history of a recipe ingredient",
    description="Returns the revisions recorded for one ingredient, newest first.",
    response_model=IngredientRevisionsResponse,
    responses=_ERROR_RESPONSES,
)
def get_ingredient_revisions(
    service: RevisionServiceDep,
    db: DbSession,
    recipe_id: Annotated[int, Path(gt=0, description="The ID of the recipe")],
    ingredient_id: Annotated[int, Path(gt=0, description="The ID of the ingredient")],
) -> IngredientRevisionsResponse:
    """Get the revision history of one ingredient of a recipe.

    Args:
        service (RecipeRevisionService): Revision service.
        db (Session): Database session.
        recipe_id (int): The ID of the recipe.
        ingredient_id (int): The ID of the ingredient.

    Returns:
        IngredientRevisionsResponse: The ingredient's revisions, newest first.

    Raises:
        HTTPException: 404 if the recipe or ingredient does not exist, 400 if a
            stored revision cannot be decoded.
    """
    try:
        return service.get_ingredient_revisions(recipe_id, ingredient_id, db)
    except (ResourceNotFoundError, RevisionDecodeError) as e:
        raise _to_http_exception(e) from e


@router.get(
    "/recipe-management/recipes/{recipe_id}/steps/{step_id}/revisions",
    tags=["revisions", "recipe-management"],
    summary="Get the revision history of a recipe step",
    description="Returns the revisions recorded for one step, newest first.",
    response_model=StepRevisionsResponse,
    responses=_ERROR_RESPONSES,
)
def get_step_revisions(
    service: RevisionServiceDep,
    db: DbSession,
    recipe_id: Annotated[int, Path(gt=0, description="The ID of the recipe")],
    step_id: Annotated[int, Path(gt=0, description="The ID of the step")],
) -> StepRevisionsResponse:
    """Get the revision history of one step of a recipe.

    Args:
        service (RecipeRevisionService): Revision service.
        db (Session): Database session.
        recipe_id (int): The ID of the recipe.
        step_id (int): The ID of the step.

    Returns:
        StepRevisionsResponse: The step's revisions, newest first.

    Raises:
        HTTPException: 404 if the recipe or step does not exist, 400 if a stored
            revision cannot be decoded.
    """
    try:
        return service.get_step_revisions(recipe_id, step_id, db)
    except (ResourceNotFoundError, RevisionDecodeError) as e:
        raise _to_http_exception(e) from e
