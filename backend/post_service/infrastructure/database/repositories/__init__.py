from .post_repository import SQLAlchemyPostRepository

__all__ = [
    "SQLAlchemyPostRepository",
]
