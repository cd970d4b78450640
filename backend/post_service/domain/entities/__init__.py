from .post import Post, PostChanges

__all__ = [
    "Post",
    "PostChanges",
]
