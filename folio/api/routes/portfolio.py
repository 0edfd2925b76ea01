"""Portfolio API routes."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends

from folio.api.deps import get_portfolio_service
from folio.core.portfolio import (
    ApiModel,
    Holding,
    PortfolioRecord,
    PortfolioService,
    PortfolioSummary,
    sector_allocation,
)

router = APIRouter()


class PortfolioResponse(ApiModel):
    """Consolidated portfolio across all synced brokers."""

    success: bool = True
    summary: PortfolioSummary
    holdings: List[Holding]
    portfolios: List[PortfolioRecord]


class AllocationResponse(ApiModel):
    """Sector allocation; empty when there is nothing to allocate."""

    success: bool = True
    allocation: Dict[str, float]
    total_value: float


@router.get("/{user_id}", response_model=PortfolioResponse)
def get_portfolio(
    user_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Get the aggregate portfolio of a user."""
    portfolio = service.get_portfolio(user_id)
    return PortfolioResponse(
        summary=portfolio.summary,
        holdings=portfolio.holdings,
        portfolios=portfolio.portfolios,
    )


@router.get("/{user_id}/allocation", response_model=AllocationResponse)
def get_allocation(
    user_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """Get the sector allocation of a user's holdings."""
    portfolio = service.get_portfolio(user_id)
    return AllocationResponse(
        allocation=sector_allocation(portfolio.holdings, service.sector_map),
        total_value=sum(h.current_value for h in portfolio.holdings),
    )
