"""Portfolio aggregation and allocation."""

from .models import (
    AggregatePortfolio,
    ApiModel,
    Holding,
    PortfolioRecord,
    PortfolioSummary,
)
from .aggregation import aggregate_portfolios, build_summary
from .allocation import (
    DEFAULT_SECTORS,
    OTHERS,
    SECTOR_MAP,
    build_sector_map,
    classify,
    sector_allocation,
    sector_values,
)
from .repository import PortfolioRepository
from .service import PortfolioService

__all__ = [
    "AggregatePortfolio",
    "ApiModel",
    "Holding",
    "PortfolioRecord",
    "PortfolioSummary",
    "aggregate_portfolios",
    "build_summary",
    "DEFAULT_SECTORS",
    "OTHERS",
    "SECTOR_MAP",
    "build_sector_map",
    "classify",
    "sector_allocation",
    "sector_values",
    "PortfolioRepository",
    "PortfolioService",
]
