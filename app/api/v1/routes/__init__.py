"""Routes package initializer.

Groups all route modules for API version 1.
"""

from fastapi import APIRouter

from . import health, recipe_content, revisions

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(recipe_content.router)
api_router.include_router(revisions.router)
