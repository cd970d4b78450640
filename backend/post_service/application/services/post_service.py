"""Application service (use case) for Post operations."""

import logging

from post_service.application.interfaces import PostRepository
from post_service.application.schemas import PostCreate, PostUpdate
from post_service.domain.entities import Post, PostChanges

logger = logging.getLogger(__name__)


class PostService:
    """Orchestrates post business logic. Depends on the repository port (DI).

    Update and delete fetch the post first so a missing id surfaces as
    ``EntityNotFoundError`` without any mutating call. The fetch and the
    mutation run as separate statements; a concurrent delete in between
    makes the second phase report not-found as well.
    """

    def __init__(self, repository: PostRepository):
        self._repository = repository

    async def get_post(self, post_id: int) -> Post:
        return await self._repository.get_by_id(post_id)

    async def list_posts(self) -> list[Post]:
        return await self._repository.get_all()

    async def create_post(self, data: PostCreate) -> Post:
        post = await self._repository.create(title=data.title, content=data.content)
        logger.info("Created post %s", post.id)
        return post

    async def update_post(self, post_id: int, data: PostUpdate) -> Post:
        existing = await self.get_post(post_id)
        changes = PostChanges.from_fields(title=data.title, content=data.content)
        if changes.is_empty():
            logger.debug("Post %s update has no field changes; refreshing updated_at only", post_id)
        return await self._repository.update_by_id(existing.id, changes)

    async def delete_post(self, post_id: int) -> None:
        existing = await self.get_post(post_id)
        await self._repository.delete(existing.id)
        logger.info("Deleted post %s", post_id)
