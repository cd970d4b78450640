"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from post_service.presentation.api.endpoints.health import router as health_router
from post_service.presentation.api.endpoints.moderation import router as moderation_router
from post_service.presentation.api.endpoints.posts import router as posts_router

router = APIRouter()
router.include_router(health_router)
router.include_router(posts_router)
router.include_router(moderation_router)
