"""Database module."""

from .database import build_engine, build_session_factory, get_db, init_db, engine, SessionLocal
from .models import Base, KVEntry

__all__ = [
    "build_engine",
    "build_session_factory",
    "get_db",
    "init_db",
    "engine",
    "SessionLocal",
    "Base",
    "KVEntry",
]
