from .base import Base
from .session import build_engine, build_session_factory, get_db_session
from .models import PostModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db_session",
    "PostModel",
]
