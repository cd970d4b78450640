"""Liveness endpoint; also reports the schema revision applied at startup."""

from fastapi import APIRouter, Request

from post_service.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    settings = get_settings()
    # Unset until the lifespan has opened the database.
    started = getattr(request.app.state, "session_factory", None) is not None
    revision = getattr(request.app.state, "database_revision", None)
    return {
        "status": "healthy" if started else "starting",
        "version": settings.app_version,
        "environment": settings.app_env,
        "databaseRevision": revision,
    }
