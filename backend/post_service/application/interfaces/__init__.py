from .post_repository import PostRepository
from .moderation_client import ModerationClient

__all__ = [
    "PostRepository",
    "ModerationClient",
]
