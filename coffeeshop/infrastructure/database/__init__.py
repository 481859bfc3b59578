"""Database engine and session management."""

from .config import (
    close_database,
    get_engine,
    get_session_factory,
    init_database,
)

__all__ = [
    "close_database",
    "get_engine",
    "get_session_factory",
    "init_database",
]
