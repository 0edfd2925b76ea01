"""Consolidation of per-broker portfolios into a single view."""

from __future__ import annotations

from typing import List, Sequence

from folio.core.portfolio.models import (
    AggregatePortfolio,
    Holding,
    PortfolioRecord,
    PortfolioSummary,
)


def build_summary(invested: float, current_value: float) -> PortfolioSummary:
    """Derive returns from invested and current value.

    Returns percentage is rounded to 2 decimal places and is 0 when nothing
    is invested.
    """
    returns = current_value - invested
    if invested > 0:
        returns_percent = round((returns / invested) * 100, 2)
    else:
        returns_percent = 0.0

    return PortfolioSummary(
        invested=invested,
        current_value=current_value,
        returns=returns,
        returns_percent=returns_percent,
    )


def aggregate_portfolios(records: Sequence[PortfolioRecord]) -> AggregatePortfolio:
    """Merge per-broker records into one portfolio.

    Records without a summary contribute nothing to the totals. Holdings are
    concatenated in record order; the same symbol held at two brokers
    appears twice.

    Args:
        records: Per-broker portfolio records, in storage order

    Returns:
        AggregatePortfolio with totals, flat holdings and the input records
    """
    total_investment = 0.0
    total_current_value = 0.0
    all_holdings: List[Holding] = []

    for record in records:
        if record.summary is not None:
            total_investment += record.summary.invested
            total_current_value += record.summary.current_value
        all_holdings.extend(record.holdings)

    return AggregatePortfolio(
        summary=build_summary(total_investment, total_current_value),
        holdings=all_holdings,
        portfolios=list(records),
    )
