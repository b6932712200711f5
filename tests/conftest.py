"""Shared test fixtures and configuration for the Recipe Revision service tests.

This module provides pytest fixtures that are used across multiple test modules,
including snapshot lists, mocked services and repositories, and revision rows.
"""

import os
from pathlib import Path

# Settings are read when the app package is imported, so the environment has to be
# in place before anything from app is imported below.
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("POSTGRES_DB", "recipe_manager_test")
os.environ.setdefault("RECIPE_MANAGER_DB_USER", "test_user")
os.environ.setdefault("RECIPE_MANAGER_DB_PASSWORD", "test_password")
os.environ.setdefault(
    "LOGGING_CONFIG_PATH",
    str(Path(__file__).parent / "fixtures" / "logging.json"),
)

from datetime import UTC, datetime, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402
from unittest.mock import Mock  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402

from app.api.v1.schemas.common.snapshot import (  # noqa: E402
    IngredientSnapshot,
    StepSnapshot,
)
from app.db.models.recipe_models.recipe_revision import RecipeRevision  # noqa: E402
from app.db.repositories.recipe_revision_repository import (  # noqa: E402
    RecipeRevisionRepository,
)
from app.enums.ingredient_unit_enum import IngredientUnitEnum  # noqa: E402
from app.enums.revision_category_enum import RevisionCategoryEnum  # noqa: E402
from app.enums.revision_type_enum import RevisionTypeEnum  # noqa: E402
from app.services.recipe_content_service import RecipeContentService  # noqa: E402
from app.services.recipe_revision_service import RecipeRevisionService  # noqa: E402


##########################
# Mocked Common Values   #
##########################
@pytest.fixture
def mock_user_id() -> UUID:
    """Fixture for a mocked user ID."""
    return UUID("12345678-1234-5678-1234-567812345678")


@pytest.fixture
def mock_datetime() -> datetime:
    """Fixture for a mocked datetime object."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


##########################
# Ingredient Snapshots   #
##########################
@pytest.fixture
def ingredients_before() -> list[IngredientSnapshot]:
    """Flour and sugar, as stored before an edit."""
    return [
        IngredientSnapshot(
            ingredient_id=1,
            ingredient_name="Flour",
            quantity=Decimal(2),
            unit=IngredientUnitEnum.CUP,
        ),
        IngredientSnapshot(
            ingredient_id=2,
            ingredient_name="Sugar",
            quantity=Decimal(1),
            unit=IngredientUnitEnum.CUP,
        ),
    ]


@pytest.fixture
def ingredients_after() -> list[IngredientSnapshot]:
    """More flour, no sugar, and a pinch of salt, after the edit."""
    return [
        IngredientSnapshot(
            ingredient_id=1,
            ingredient_name="Flour",
            quantity=Decimal(3),
            unit=IngredientUnitEnum.CUP,
        ),
        IngredientSnapshot(
            ingredient_id=3,
            ingredient_name="Salt",
            quantity=Decimal("0.5"),
            unit=IngredientUnitEnum.TSP,
        ),
    ]


@pytest.fixture
def steps_before() -> list[StepSnapshot]:
    """Two steps of a recipe before an edit."""
    return [
        StepSnapshot(step_id=10, step_number=1, instruction="Mix the flour"),
        StepSnapshot(
            step_id=11,
            step_number=2,
            instruction="Bake",
            timer_seconds=1800,
        ),
    ]


##########################
# Mocked Revision Rows   #
##########################
def build_revision_row(
    revision_id: int,
    category: RevisionCategoryEnum,
    revision_type: RevisionTypeEnum,
    previous_data: str,
    new_data: str,
    created_at: datetime,
    recipe_id: int = 1,
    user_id: UUID = UUID("12345678-1234-5678-1234-567812345678"),
    change_comment: str | None = None,
) -> RecipeRevision:
    """Build a detached revision row as it would come back from the database."""
    return RecipeRevision(
        revision_id=revision_id,
        recipe_id=recipe_id,
        user_id=user_id,
        revision_category=category,
        revision_type=revision_type,
        previous_data=previous_data,
        new_data=new_data,
        change_comment=change_comment,
        created_at=created_at,
    )


@pytest.fixture
def mock_revision_rows(mock_datetime: datetime) -> list[RecipeRevision]:
    """Three revision rows of recipe 1, newest first (T3, T2, T1)."""
    t1 = mock_datetime
    t2 = mock_datetime + timedelta(minutes=5)
    t3 = mock_datetime + timedelta(minutes=10)
    return [
        build_revision_row(
            3,
            RevisionCategoryEnum.STEP,
            RevisionTypeEnum.ADD,
            "{}",
            '{"step_id":12,"step_number":3,"instruction":"Rest","optional":true,'
            '"timer_seconds":null,"category":"STEP","type":"ADD"}',
            t3,
        ),
        build_revision_row(
            2,
            RevisionCategoryEnum.INGREDIENT,
            RevisionTypeEnum.UPDATE,
            '{"ingredient_id":1,"ingredient_name":"Flour","changed_field":"QUANTITY",'
            '"previous_value":"2","new_value":"3","category":"INGREDIENT",'
            '"type":"UPDATE"}',
            '{"ingredient_id":1,"ingredient_name":"Flour","changed_field":"QUANTITY",'
            '"previous_value":"2","new_value":"3","category":"INGREDIENT",'
            '"type":"UPDATE"}',
            t2,
        ),
        build_revision_row(
            1,
            RevisionCategoryEnum.INGREDIENT,
            RevisionTypeEnum.REMOVE,
            '{"ingredient_id":2,"ingredient_name":"Sugar","quantity":"1","unit":"CUP",'
            '"is_optional":false,"description":null,"category":"INGREDIENT",'
            '"type":"REMOVE"}',
            "{}",
            t1,
        ),
    ]


##########################
# Mocked Services        #
##########################
@pytest.fixture
def mock_db_session() -> Mock:
    """Create a mock database session for testing."""
    return Mock()


@pytest.fixture
def mock_repository() -> Mock:
    """Create a mock RecipeRevisionRepository for testing.

    ``add`` hands back the row it was given, like the real repository.
    """
    repository = Mock(spec=RecipeRevisionRepository)
    repository.add.side_effect = lambda revision: revision
    repository.recipe_exists.return_value = True
    repository.recipe_ingredient_exists.return_value = True
    repository.recipe_step_exists.return_value = True
    repository.find_by_recipe.return_value = []
    return repository


@pytest.fixture
def mock_recipe_revision_service() -> Mock:
    """Create a mock RecipeRevisionService for testing."""
    return Mock(spec=RecipeRevisionService)


@pytest.fixture
def mock_recipe_content_service() -> Mock:
    """Create a mock RecipeContentService for testing."""
    return Mock(spec=RecipeContentService)


class IsType:
    """Utility class for type checking in assertions."""

    def __init__(self, expected_type: type) -> None:
        """Initialize IsType with the expected type for type checking."""
        self.expected_type = expected_type

    def __eq__(self, other: object) -> bool:
        """Check if the other object is an instance of the expected type."""
        return isinstance(other, self.expected_type)

    def __hash__(self) -> int:
        """Return the hash based on the expected type."""
        return hash(self.expected_type)

    def __repr__(self) -> str:
        """Return the string representation of the IsType instance."""
        return f"IsType({self.expected_type.__name__})"
