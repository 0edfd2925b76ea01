"""Per-user session context.

Callers that act on behalf of a user (the CLI, scripts) open a UserSession
instead of reaching for a global user id.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, Optional

from folio.core.brokers import BrokerProvider, BrokerSyncService
from folio.core.portfolio import PortfolioService
from folio.db.database import get_db
from folio.store import SqlKeyValueStore


@dataclass
class UserSession:
    """Services bound to one user and one database session."""

    user_id: str
    brokers: BrokerSyncService
    portfolio: PortfolioService


@contextmanager
def open_session(
    user_id: str,
    provider: Optional[BrokerProvider] = None,
) -> Generator[UserSession, None, None]:
    """Open a database session and bind the services to ``user_id``.

    Usage:
        with open_session("demo-user-001") as session:
            session.brokers.sync_broker(session.user_id, "zerodha")
    """
    with get_db() as db:
        store = SqlKeyValueStore(db)
        yield UserSession(
            user_id=user_id,
            brokers=BrokerSyncService(store, provider),
            portfolio=PortfolioService(store),
        )
