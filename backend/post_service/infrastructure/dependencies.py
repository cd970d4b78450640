"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from post_service.config import Settings, get_settings
from post_service.application.services import ModerationService, PostService
from post_service.infrastructure.database.session import get_db_session
from post_service.infrastructure.database.repositories import SQLAlchemyPostRepository
from post_service.infrastructure.moderation import OpenAIModerationClient


async def get_post_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[PostService, None]:
    """Provides a PostService instance with its repository wired up."""
    repository = SQLAlchemyPostRepository(
        session,
        empty_list_is_not_found=settings.list_empty_as_not_found,
    )
    yield PostService(repository)


async def get_moderation_service(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[ModerationService, None]:
    """Provides a ModerationService backed by the OpenAI moderation API."""
    api_key = settings.moderation_api_key.strip()
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Moderation API key is not configured",
        )
    client = OpenAIModerationClient(api_key=api_key, base_url=settings.moderation_base_url)
    yield ModerationService(client)
