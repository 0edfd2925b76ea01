"""Broker connection repository over the key-value store."""

from __future__ import annotations

from typing import Dict, Optional

from folio.core.brokers.models import BrokerConnection
from folio.store import KeyValueStore, StorageKeys


class BrokerConnectionRepository:
    """Repository for BrokerConnection records."""

    def __init__(self, store: KeyValueStore):
        """Initialize repository with a key-value store."""
        self.store = store

    def get(self, user_id: str, broker: str) -> Optional[BrokerConnection]:
        """Get a user's connection to a broker, or None."""
        value = self.store.get(StorageKeys.broker(user_id, broker))
        if value is None:
            return None
        return BrokerConnection.model_validate(value)

    def get_all(self, user_id: str) -> Dict[str, BrokerConnection]:
        """Get all connections of a user, keyed by storage key."""
        entries = self.store.get_by_prefix(StorageKeys.broker_prefix(user_id))
        return {
            key: BrokerConnection.model_validate(value)
            for key, value in entries.items()
        }

    def save(self, user_id: str, connection: BrokerConnection) -> BrokerConnection:
        """Create or replace the connection record of ``connection.broker``."""
        self.store.set(
            StorageKeys.broker(user_id, connection.broker),
            connection.to_storage(),
        )
        return connection

    def delete(self, user_id: str, broker: str) -> None:
        """Delete a connection record, if any."""
        self.store.delete(StorageKeys.broker(user_id, broker))
