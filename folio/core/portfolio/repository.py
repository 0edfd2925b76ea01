"""Portfolio repository over the key-value store."""

from __future__ import annotations

from typing import List

from folio.core.portfolio.models import PortfolioRecord
from folio.store import KeyValueStore, StorageKeys


class PortfolioRepository:
    """Repository for per-broker portfolio records."""

    def __init__(self, store: KeyValueStore):
        """Initialize repository with a key-value store."""
        self.store = store

    def get_all(self, user_id: str) -> List[PortfolioRecord]:
        """Get every synced portfolio of a user, in key order."""
        entries = self.store.get_by_prefix(StorageKeys.portfolio_prefix(user_id))
        return [PortfolioRecord.model_validate(value) for value in entries.values()]

    def save(self, user_id: str, record: PortfolioRecord) -> PortfolioRecord:
        """Replace the stored portfolio of ``record.broker``."""
        self.store.set(
            StorageKeys.portfolio(user_id, record.broker),
            record.model_dump(mode="json", by_alias=True),
        )
        return record

    def delete(self, user_id: str, broker: str) -> None:
        """Delete the stored portfolio of one broker, if any."""
        self.store.delete(StorageKeys.portfolio(user_id, broker))
