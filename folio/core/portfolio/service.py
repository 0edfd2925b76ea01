"""Portfolio read service."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from folio.core.portfolio.aggregation import aggregate_portfolios
from folio.core.portfolio.allocation import sector_allocation
from folio.core.portfolio.models import AggregatePortfolio
from folio.core.portfolio.repository import PortfolioRepository
from folio.store import KeyValueStore


class PortfolioService:
    """Builds the consolidated portfolio of a user from stored records."""

    def __init__(
        self,
        store: KeyValueStore,
        sector_map: Optional[Mapping[str, str]] = None,
    ):
        self.repo = PortfolioRepository(store)
        self.sector_map = sector_map

    def get_portfolio(self, user_id: str) -> AggregatePortfolio:
        """Aggregate all synced broker portfolios of a user."""
        return aggregate_portfolios(self.repo.get_all(user_id))

    def get_allocation(self, user_id: str) -> Dict[str, float]:
        """Sector percentages across all of a user's holdings."""
        portfolio = self.get_portfolio(user_id)
        return sector_allocation(portfolio.holdings, self.sector_map)
