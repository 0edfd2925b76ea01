"""Sector allocation of holdings."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from folio.core.portfolio.models import Holding

OTHERS = "Others"

# =============================================================================
# SECTOR TABLE
# =============================================================================

DEFAULT_SECTORS: Dict[str, List[str]] = {
    "IT": ["TCS", "INFY", "WIPRO", "TECHM", "HCLTECH"],
    "Banking": ["HDFCBANK", "ICICIBANK", "SBIN", "KOTAKBANK", "AXISBANK"],
    "Energy": ["RELIANCE", "ONGC", "BPCL", "IOC"],
    "Telecom": ["BHARTIARTL", "IDEA"],
    "Consumer": ["ASIANPAINT", "NESTLEIND", "HINDUNILVR", "ITC", "BRITANNIA"],
    "Auto": ["MARUTI", "TATAMOTORS", "M&M", "BAJAJ-AUTO"],
}


def build_sector_map(sectors: Mapping[str, Iterable[str]]) -> Dict[str, str]:
    """Invert a sector -> symbols table into a symbol -> sector lookup."""
    return {
        symbol.upper(): sector
        for sector, symbols in sectors.items()
        for symbol in symbols
    }


SECTOR_MAP: Dict[str, str] = build_sector_map(DEFAULT_SECTORS)


def classify(symbol: str, sector_map: Optional[Mapping[str, str]] = None) -> str:
    """Return the sector of a symbol, or "Others" if it is not in the table."""
    lookup = SECTOR_MAP if sector_map is None else sector_map
    return lookup.get((symbol or "").upper(), OTHERS)


def sector_values(
    holdings: Sequence[Holding],
    sector_map: Optional[Mapping[str, str]] = None,
) -> Dict[str, float]:
    """Sum current value per sector, in order of first appearance."""
    totals: Dict[str, float] = {}
    for holding in holdings:
        sector = classify(holding.symbol, sector_map)
        totals[sector] = totals.get(sector, 0.0) + holding.current_value
    return totals


def sector_allocation(
    holdings: Sequence[Holding],
    sector_map: Optional[Mapping[str, str]] = None,
) -> Dict[str, float]:
    """Percentage share of total current value per sector.

    Percentages are rounded to 1 decimal place and keep first-appearance
    order, not size order. When the total value is zero the result is empty
    so callers can show a no-data state.

    Args:
        holdings: Flat list of holdings across brokers
        sector_map: Symbol -> sector lookup (defaults to SECTOR_MAP)

    Returns:
        Mapping of sector name to percentage
    """
    totals = sector_values(holdings, sector_map)
    grand_total = sum(totals.values())
    if grand_total == 0:
        return {}

    return {
        sector: round((value / grand_total) * 100, 1)
        for sector, value in totals.items()
    }
