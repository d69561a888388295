"""Database utilities - engine and session."""

from src.events_api.core.db.engine import create_tables, dispose_engine, get_engine
from src.events_api.core.db.session import get_session

__all__ = [
    "create_tables",
    "dispose_engine",
    "get_engine",
    "get_session",
]
