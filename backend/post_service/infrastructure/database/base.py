"""Declarative base; its metadata is also the Alembic autogenerate target."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
