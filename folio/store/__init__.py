"""Key-value storage for broker connections and synced portfolios.

Usage:
    from folio.store import SqlKeyValueStore, StorageKeys

    with get_db() as db:
        store = SqlKeyValueStore(db)
        store.set(StorageKeys.broker(user_id, "zerodha"), {...})
        connections = store.get_by_prefix(StorageKeys.broker_prefix(user_id))
"""

from folio.store.base import KeyValueStore
from folio.store.keys import StorageKeys
from folio.store.sql import SqlKeyValueStore

__all__ = [
    "KeyValueStore",
    "SqlKeyValueStore",
    "StorageKeys",
]
