"""Engine and session handling for the key-value database."""

from contextlib import contextmanager
from typing import Any, Dict, Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from folio.config import get_settings

settings = get_settings()


def is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def build_engine(database_url: str, **kwargs: Any) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections are shared between the API's worker threads, so the
    driver's same-thread check is turned off. Other drivers get no extra
    connect arguments.
    """
    connect_args: Dict[str, Any] = {}
    if is_sqlite(database_url):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, **kwargs)


def build_session_factory(bind: Engine) -> sessionmaker:
    # Records stay readable after the session commits and closes
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = build_engine(settings.database_url)
SessionLocal = build_session_factory(engine)


@contextmanager
def get_db() -> Generator[Session, None, None]:
    """Session scope: commit on success, roll back on any error.

    Usage:
        with get_db() as db:
            SqlKeyValueStore(db).get("broker:demo-user-001:zerodha")
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db() -> None:
    """Create the key-value table if it does not exist."""
    from .models import Base

    Base.metadata.create_all(bind=engine)
