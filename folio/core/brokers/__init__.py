"""Broker connections and portfolio sync.

Broker data is mocked: known brokers (zerodha, groww, upstox) return a
fixed dataset after a short artificial delay.

Usage:
    from folio.core.brokers import BrokerSyncService

    service = BrokerSyncService(store)
    service.connect_broker(user_id, "zerodha", client_id="ABC123")
    record = service.sync_broker(user_id, "zerodha")
"""

from folio.core.brokers.models import (
    BrokerConnection,
    BrokerPortfolio,
    ConnectionStatus,
)
from folio.core.brokers.exceptions import (
    BrokerError,
    BrokerNotFoundError,
    BrokerValidationError,
)
from folio.core.brokers.base import BrokerProvider
from folio.core.brokers.mock_provider import MockBrokerProvider, mock_provider
from folio.core.brokers.repository import BrokerConnectionRepository
from folio.core.brokers.sync import BrokerSyncService

__all__ = [
    # Models
    "BrokerConnection",
    "BrokerPortfolio",
    "ConnectionStatus",
    # Errors
    "BrokerError",
    "BrokerNotFoundError",
    "BrokerValidationError",
    # Providers
    "BrokerProvider",
    "MockBrokerProvider",
    "mock_provider",
    # Services
    "BrokerConnectionRepository",
    "BrokerSyncService",
]
