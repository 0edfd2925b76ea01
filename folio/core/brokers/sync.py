"""Broker connection lifecycle and portfolio sync service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from folio.core.brokers.base import BrokerProvider
from folio.core.brokers.exceptions import BrokerNotFoundError, BrokerValidationError
from folio.core.brokers.mock_provider import mock_provider
from folio.core.brokers.models import BrokerConnection
from folio.core.brokers.repository import BrokerConnectionRepository
from folio.core.portfolio.models import PortfolioRecord
from folio.core.portfolio.repository import PortfolioRepository
from folio.store import KeyValueStore

logger = logging.getLogger(__name__)


def _require(**fields: Optional[str]) -> None:
    """Raise BrokerValidationError naming every blank field."""
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise BrokerValidationError(f"Missing required fields: {', '.join(missing)}")


class BrokerSyncService:
    """Service for connecting, syncing and disconnecting broker accounts.

    Connection and portfolio records live under separate keys. Operations
    that touch both write them one after the other; a failure in between
    can leave them out of step.
    """

    def __init__(self, store: KeyValueStore, provider: Optional[BrokerProvider] = None):
        self.connections = BrokerConnectionRepository(store)
        self.portfolios = PortfolioRepository(store)
        self.provider = provider or mock_provider

    def connect_broker(
        self,
        user_id: str,
        broker: str,
        client_id: str,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
    ) -> BrokerConnection:
        """Store a new connection to a broker.

        Connecting an already connected broker replaces the record, which
        also clears its last sync time.

        Raises:
            BrokerValidationError: If broker, client_id or user_id is blank
        """
        _require(broker=broker, clientId=client_id, userId=user_id)

        connection = BrokerConnection(
            broker=broker,
            client_id=client_id,
            api_key=api_key or None,
            api_secret=api_secret or None,
        )
        self.connections.save(user_id, connection)

        logger.info(f"Broker connected for user {user_id}: {broker}")
        return connection

    def list_connections(self, user_id: str) -> Dict[str, BrokerConnection]:
        """Get all connections of a user, keyed by storage key."""
        return self.connections.get_all(user_id)

    def sync_broker(self, user_id: str, broker: str) -> PortfolioRecord:
        """Fetch a broker's holdings and replace the stored portfolio.

        Nothing is written if the fetch fails.

        Raises:
            BrokerValidationError: If user_id or broker is blank
            BrokerNotFoundError: If the broker is not connected
        """
        _require(userId=user_id, broker=broker)

        connection = self.connections.get(user_id, broker)
        if connection is None:
            raise BrokerNotFoundError("Broker not connected")

        fetched = self.provider.fetch_portfolio(broker, connection)

        synced_at = datetime.now(timezone.utc)
        record = PortfolioRecord(
            broker=connection.broker,
            holdings=fetched.holdings,
            summary=fetched.summary,
            last_synced=synced_at,
        )
        self.portfolios.save(user_id, record)

        connection.last_synced = synced_at
        self.connections.save(user_id, connection)

        logger.info(
            f"Portfolio synced for user {user_id}: {broker} "
            f"({len(record.holdings)} holdings)"
        )
        return record

    def sync_all(self, user_id: str) -> List[PortfolioRecord]:
        """Sync every connected broker of a user, in key order."""
        return [
            self.sync_broker(user_id, connection.broker)
            for connection in self.list_connections(user_id).values()
        ]

    def disconnect_broker(self, user_id: str, broker: str) -> None:
        """Delete a broker's connection and portfolio records.

        Disconnecting a broker that is not connected is not an error.
        """
        self.connections.delete(user_id, broker)
        self.portfolios.delete(user_id, broker)
        logger.info(f"Broker disconnected for user {user_id}: {broker}")
