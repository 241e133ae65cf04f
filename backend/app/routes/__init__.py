"""API route registration."""

from fastapi import APIRouter
from .subjects import router as subjects_router
from .users import router as users_router


def register_all_routes(api_router: APIRouter):
    """Include all route modules on the main API router."""
    api_router.include_router(subjects_router)
    api_router.include_router(users_router)
