"""Main API router."""

from fastapi import APIRouter

from storebot.api.routes.test import router as test_router
from storebot.api.routes.webhook import router as webhook_router


def build_api_router(*, include_test_routes: bool) -> APIRouter:
    """Assemble routes; the preview endpoint stays out of production."""
    api_router = APIRouter()
    api_router.include_router(webhook_router, tags=["webhook"])
    if include_test_routes:
        api_router.include_router(test_router, tags=["test"])
    return api_router
