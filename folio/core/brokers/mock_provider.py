"""Mock broker provider.

No broker API is called. Known brokers return a fixed dataset after an
artificial delay that stands in for network latency; unknown brokers
return an empty portfolio after the same delay.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping, Optional

from folio.config import get_settings
from folio.core.brokers.base import BrokerProvider
from folio.core.brokers.mock_data import MOCK_PORTFOLIOS
from folio.core.brokers.models import BrokerConnection, BrokerPortfolio
from folio.core.portfolio.models import Holding, PortfolioSummary

logger = logging.getLogger(__name__)
settings = get_settings()


class MockBrokerProvider(BrokerProvider):
    """Serves canned holdings per broker.

    Args:
        dataset: Broker identifier -> {"holdings": [...], "summary": {...}}
        delay_seconds: Artificial latency applied to every fetch
    """

    def __init__(
        self,
        dataset: Optional[Mapping[str, Mapping[str, Any]]] = None,
        delay_seconds: float = 1.0,
    ):
        source = MOCK_PORTFOLIOS if dataset is None else dataset
        self.dataset: Dict[str, Mapping[str, Any]] = {
            broker.lower(): data for broker, data in source.items()
        }
        self.delay_seconds = delay_seconds

    @property
    def supported_brokers(self) -> List[str]:
        return list(self.dataset)

    def fetch_portfolio(self, broker: str, connection: BrokerConnection) -> BrokerPortfolio:
        """Return the canned portfolio of ``broker`` after the delay."""
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

        data = self.dataset.get(broker.lower())
        if data is None:
            logger.info(f"No mock data for broker {broker}, returning empty portfolio")
            return BrokerPortfolio()

        holdings = [
            Holding.model_validate({**raw, "broker": connection.broker})
            for raw in data.get("holdings", [])
        ]
        summary = PortfolioSummary.model_validate(data.get("summary") or {})

        return BrokerPortfolio(holdings=holdings, summary=summary)


# Singleton instance
mock_provider = MockBrokerProvider(delay_seconds=settings.broker_sync_delay_seconds)
