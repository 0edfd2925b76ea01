"""FastAPI dependencies."""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.orm import Session

from folio.db.database import get_db as db_context
from folio.core.brokers import BrokerProvider, BrokerSyncService, mock_provider
from folio.core.portfolio import PortfolioService
from folio.store import KeyValueStore, SqlKeyValueStore


def get_db() -> Generator[Session, None, None]:
    """Yield a database session."""
    with db_context() as db:
        yield db


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """Key-value store bound to the request's database session."""
    return SqlKeyValueStore(db)


def get_broker_provider() -> BrokerProvider:
    """Broker data source used for syncs."""
    return mock_provider


def get_broker_service(
    store: KeyValueStore = Depends(get_store),
    provider: BrokerProvider = Depends(get_broker_provider),
) -> BrokerSyncService:
    """Broker lifecycle service for the current request."""
    return BrokerSyncService(store, provider)


def get_portfolio_service(
    store: KeyValueStore = Depends(get_store),
) -> PortfolioService:
    """Portfolio read service for the current request."""
    return PortfolioService(store)


# Rate limiter - key by IP address
limiter = Limiter(key_func=get_remote_address)
