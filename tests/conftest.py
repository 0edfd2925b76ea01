"""Shared fixtures: in-memory database, store, services and API client."""

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from folio.api import deps
from folio.api.app import app
from folio.core.brokers import BrokerSyncService, MockBrokerProvider
from folio.core.portfolio import PortfolioService
from folio.db.database import build_engine, build_session_factory
from folio.db.models import Base
from folio.store import SqlKeyValueStore

USER_ID = "demo-user-001"


@pytest.fixture
def db():
    """Session on a fresh in-memory SQLite database."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(db):
    return SqlKeyValueStore(db)


@pytest.fixture
def provider():
    """Mock provider with the default dataset and no artificial delay."""
    return MockBrokerProvider(delay_seconds=0)


@pytest.fixture
def broker_service(store, provider):
    return BrokerSyncService(store, provider)


@pytest.fixture
def portfolio_service(store):
    return PortfolioService(store)


@pytest.fixture
def client(db, provider):
    """API client wired to the in-memory database and zero-delay provider."""

    def override_get_db():
        yield db
        db.commit()

    app.dependency_overrides[deps.get_db] = override_get_db
    app.dependency_overrides[deps.get_broker_provider] = lambda: provider
    deps.limiter.reset()
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def cli_db(db, provider, monkeypatch):
    """Point CLI sessions at the in-memory database and zero-delay provider."""

    @contextmanager
    def fake_get_db():
        yield db
        db.commit()

    monkeypatch.setattr("folio.core.session.get_db", fake_get_db)
    monkeypatch.setattr("folio.core.brokers.sync.mock_provider", provider)
    monkeypatch.setattr("folio.cli.main.init_db", lambda: None)
    return db
