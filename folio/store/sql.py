"""SQLAlchemy-backed key-value store."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from folio.db.models import KVEntry
from folio.store.base import KeyValueStore

logger = logging.getLogger(__name__)


class SqlKeyValueStore(KeyValueStore):
    """Key-value store on top of the ``kv_store`` table.

    Writes are flushed, not committed; the session owner commits.
    """

    def __init__(self, db: Session):
        """Initialize store with database session."""
        self.db = db

    def get(self, key: str) -> Optional[Any]:
        entry = self.db.query(KVEntry).filter_by(key=key).first()
        if entry is None:
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        entry = self.db.query(KVEntry).filter_by(key=key).first()
        if entry is None:
            self.db.add(KVEntry(key=key, value=value))
        else:
            entry.value = value
            flag_modified(entry, "value")
        self.db.flush()
        logger.debug(f"Stored {key}")

    def delete(self, key: str) -> None:
        deleted = self.db.query(KVEntry).filter_by(key=key).delete()
        self.db.flush()
        if deleted:
            logger.debug(f"Deleted {key}")

    def get_by_prefix(self, prefix: str) -> Dict[str, Any]:
        # autoescape keeps "_" and "%" in user ids from acting as wildcards
        entries = (
            self.db.query(KVEntry)
            .filter(KVEntry.key.startswith(prefix, autoescape=True))
            .order_by(KVEntry.key)
            .all()
        )
        return {entry.key: entry.value for entry in entries}
