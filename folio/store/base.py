"""Base key-value store abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class KeyValueStore(ABC):
    """Abstract key-value store.

    Each key is strongly consistent on its own. There are no transactions
    spanning several keys: two successive ``set`` calls can be separated by
    a crash, and callers must tolerate that.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under ``key``, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete ``key``. Deleting an absent key is not an error."""
        pass

    @abstractmethod
    def get_by_prefix(self, prefix: str) -> Dict[str, Any]:
        """Return every entry whose key starts with ``prefix``.

        Returns:
            Mapping of key to value, ordered by key
        """
        pass
