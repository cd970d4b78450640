"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from post_service.domain.entities import Post, PostChanges


class PostRepository(ABC):
    """Port for post persistence — implemented in the infrastructure layer.

    Implementations translate driver failures into ``StoreError`` subclasses
    and report missing rows with ``EntityNotFoundError``.
    """

    @abstractmethod
    async def create(self, title: str, content: str) -> Post:
        """Persist a new post; the store assigns the id and both timestamps."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Post]:
        """Retrieve every post."""
        ...

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Post:
        """Retrieve a single post by its ID."""
        ...

    @abstractmethod
    async def update_by_id(self, post_id: int, changes: PostChanges) -> Post:
        """Apply ``changes`` and refresh ``updated_at``, even when nothing changed."""
        ...

    @abstractmethod
    async def delete(self, post_id: int) -> None:
        """Hard-delete a post. Existence is not checked here."""
        ...
