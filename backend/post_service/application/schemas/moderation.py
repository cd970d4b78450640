"""Pydantic DTOs for the moderation check."""

from pydantic import BaseModel, Field


class ModerationRequest(BaseModel):
    text: str = Field(..., min_length=1, examples=["Is this safe to publish?"])


class ModerationResponse(BaseModel):
    flagged: bool
