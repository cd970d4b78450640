"""Pydantic DTOs (Data Transfer Objects) for the Post feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from post_service.domain.entities import Post

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class PostCreate(BaseModel):
    """Schema for creating a new post — both fields required and non-empty."""

    title: str = Field(..., min_length=1, examples=["Release notes"])
    content: str = Field(..., min_length=1, examples=["What changed this week."])


class PostUpdate(BaseModel):
    """Schema for updating a post — absent, null or empty fields are left unchanged."""

    title: str | None = None
    content: str | None = None


class PostResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    created_at: str = Field(..., examples=["2024-01-31 12:00:00"])
    updated_at: str = Field(..., examples=["2024-01-31 12:00:00"])

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            created_at=format_timestamp(post.created_at),
            updated_at=format_timestamp(post.updated_at),
        )


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def to_post_responses(posts: list[Post]) -> list[PostResponse]:
    """Map entities to responses, preserving order."""
    return [PostResponse.from_entity(post) for post in posts]
