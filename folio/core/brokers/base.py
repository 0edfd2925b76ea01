"""Base broker provider abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from folio.core.brokers.models import BrokerConnection, BrokerPortfolio


class BrokerProvider(ABC):
    """Abstract base class for broker data sources.

    A provider turns a stored connection into the current holdings and
    summary of that broker account.
    """

    @property
    @abstractmethod
    def supported_brokers(self) -> List[str]:
        """Return the broker identifiers this provider has data for."""
        pass

    @abstractmethod
    def fetch_portfolio(self, broker: str, connection: BrokerConnection) -> BrokerPortfolio:
        """Fetch holdings and summary for a connected broker.

        Args:
            broker: Broker identifier (any case)
            connection: Stored connection with the user's credentials

        Returns:
            BrokerPortfolio, empty for brokers without data
        """
        pass
