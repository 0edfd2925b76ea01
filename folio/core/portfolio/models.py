"""Pydantic schemas for portfolio records."""

import math
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire and in storage."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Holding(ApiModel):
    """A single position within one broker account.

    ``invested_value`` and ``current_value`` are stored as given; they are
    not recomputed from quantity and prices.
    """

    symbol: str = Field(..., min_length=1)
    name: str = ""
    quantity: float = Field(0.0, ge=0)
    avg_price: float = Field(..., gt=0, description="Cost basis per unit")
    current_price: float = Field(0.0, ge=0)
    invested_value: float = 0.0
    current_value: float = 0.0
    broker: Optional[str] = None

    @field_validator("symbol")
    @classmethod
    def symbol_uppercase(cls, v: str) -> str:
        return v.upper().strip()


class PortfolioSummary(ApiModel):
    """Investment totals for one broker or for the whole portfolio."""

    invested: float = 0.0
    current_value: float = 0.0
    returns: float = 0.0
    returns_percent: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def missing_as_zero(cls, v: Any) -> float:
        """Absent or malformed figures count as zero."""
        if v is None or isinstance(v, bool):
            return 0.0
        try:
            number = float(v)
        except (TypeError, ValueError):
            return 0.0
        return number if math.isfinite(number) else 0.0


class PortfolioRecord(ApiModel):
    """Synced holdings and summary of one broker, as stored."""

    broker: str
    holdings: List[Holding] = Field(default_factory=list)
    summary: Optional[PortfolioSummary] = None
    last_synced: Optional[datetime] = None

    @field_validator("holdings", mode="before")
    @classmethod
    def missing_holdings_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class AggregatePortfolio(ApiModel):
    """Cross-broker view, computed on every read and never stored."""

    summary: PortfolioSummary
    holdings: List[Holding] = Field(default_factory=list)
    portfolios: List[PortfolioRecord] = Field(default_factory=list)
