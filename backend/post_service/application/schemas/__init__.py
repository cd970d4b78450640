from .error import ErrorResponse
from .moderation import ModerationRequest, ModerationResponse
from .post import PostCreate, PostUpdate, PostResponse, to_post_responses

__all__ = [
    "ErrorResponse",
    "ModerationRequest",
    "ModerationResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "to_post_responses",
]
