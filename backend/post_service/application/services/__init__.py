from .moderation_service import ModerationService
from .post_service import PostService

__all__ = [
    "ModerationService",
    "PostService",
]
