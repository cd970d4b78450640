"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Post:
    """Core domain entity representing a published post."""

    title: str
    content: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class PostChanges:
    """Fields to replace on an existing post. ``None`` means unchanged."""

    title: str | None = None
    content: str | None = None

    @classmethod
    def from_fields(cls, title: str | None = None, content: str | None = None) -> "PostChanges":
        """Keep only non-empty values; empty strings leave the field as is."""
        return cls(title=title or None, content=content or None)

    def as_dict(self) -> dict[str, str]:
        values = {"title": self.title, "content": self.content}
        return {key: value for key, value in values.items() if value is not None}

    def is_empty(self) -> bool:
        return not self.as_dict()
