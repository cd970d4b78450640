"""Apply Alembic migrations at startup.

The ``alembic_version`` table is the version marker: when it already names
the head revision nothing runs.
"""

import logging

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


def build_alembic_config(script_location: str) -> Config:
    config = Config()
    config.set_main_option("script_location", script_location)
    return config


def _upgrade_to_head(connection: Connection, script_location: str) -> tuple[str | None, str | None]:
    config = build_alembic_config(script_location)
    head = ScriptDirectory.from_config(config).get_current_head()
    current = MigrationContext.configure(connection).get_current_revision()
    if current == head:
        return current, head

    config.attributes["connection"] = connection
    command.upgrade(config, "head")
    return current, head


async def run_migrations(engine: AsyncEngine, script_location: str) -> str | None:
    """Upgrade the database to the latest revision; returns that revision."""
    async with engine.begin() as connection:
        current, head = await connection.run_sync(_upgrade_to_head, script_location)

    if current == head:
        logger.info("Database already at version %s", head)
    else:
        logger.info("Database migrated from %s to %s", current or "<empty>", head)
    return head


async def current_revision(engine: AsyncEngine) -> str | None:
    async with engine.connect() as connection:
        return await connection.run_sync(
            lambda sync_conn: MigrationContext.configure(sync_conn).get_current_revision()
        )
