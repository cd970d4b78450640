"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from post_service.application.interfaces import PostRepository
from post_service.domain.entities import Post, PostChanges
from post_service.domain.exceptions import (
    EntityNotFoundError,
    ModificationNotPermittedError,
    StoreConnectivityError,
    StoreError,
)
from post_service.infrastructure.database.models import PostModel

logger = logging.getLogger(__name__)

# PostgreSQL: modifying_sql_data_not_permitted
MODIFICATION_NOT_PERMITTED_SQLSTATE = "2F002"


def _sqlstate(exc: DBAPIError) -> str | None:
    """Extract the SQLSTATE from a wrapped driver error (asyncpg or psycopg)."""
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as domain store errors."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        logger.error("Database unavailable during %s: %s", operation, exc)
        raise StoreConnectivityError(str(exc)) from exc
    except DBAPIError as exc:
        if _sqlstate(exc) == MODIFICATION_NOT_PERMITTED_SQLSTATE:
            raise ModificationNotPermittedError(str(exc)) from exc
        logger.error("Database error during %s: %s", operation, exc)
        raise StoreError(str(exc)) from exc
    except SQLAlchemyError as exc:
        logger.error("Database error during %s: %s", operation, exc)
        raise StoreError(str(exc)) from exc


class SQLAlchemyPostRepository(PostRepository):
    """Implements the PostRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession, empty_list_is_not_found: bool = False):
        self._session = session
        self._empty_list_is_not_found = empty_list_is_not_found

    def _to_entity(self, model: PostModel) -> Post:
        """Map ORM model → domain entity."""
        return Post(
            id=model.id,
            title=model.title,
            content=model.content,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(self, title: str, content: str) -> Post:
        now = datetime.now(timezone.utc)
        model = PostModel(title=title, content=content, created_at=now, updated_at=now)
        with _translate_errors("create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def get_all(self) -> list[Post]:
        stmt = select(PostModel).order_by(PostModel.id)
        with _translate_errors("list"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        if not models and self._empty_list_is_not_found:
            raise EntityNotFoundError("Post")
        return [self._to_entity(row) for row in models]

    async def get_by_id(self, post_id: int) -> Post:
        with _translate_errors("get"):
            model = await self._session.get(PostModel, post_id)
        if model is None:
            raise EntityNotFoundError("Post", post_id)
        return self._to_entity(model)

    async def update_by_id(self, post_id: int, changes: PostChanges) -> Post:
        with _translate_errors("update"):
            model = await self._session.get(PostModel, post_id)
            if model is None:
                raise EntityNotFoundError("Post", post_id)
            for field_name, value in changes.as_dict().items():
                setattr(model, field_name, value)
            model.updated_at = datetime.now(timezone.utc)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, post_id: int) -> None:
        with _translate_errors("delete"):
            model = await self._session.get(PostModel, post_id)
            if model is None:
                return
            await self._session.delete(model)
            await self._session.flush()
