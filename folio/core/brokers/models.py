"""Broker integration data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, SecretStr

from folio.core.portfolio.models import ApiModel, Holding, PortfolioSummary


def utcnow() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


class ConnectionStatus(str, Enum):
    """Broker connection states that are persisted."""

    CONNECTED = "connected"


class BrokerConnection(ApiModel):
    """A user's connection to one broker account.

    The API secret is kept as a SecretStr so it never shows up in reprs,
    logs or API responses; only ``to_storage`` reveals it.
    """

    broker: str
    client_id: str
    api_key: Optional[str] = None
    api_secret: Optional[SecretStr] = None
    status: ConnectionStatus = ConnectionStatus.CONNECTED
    connected_at: datetime = Field(default_factory=utcnow)
    last_synced: Optional[datetime] = None

    def to_storage(self) -> Dict[str, Any]:
        """Serialize for the key-value store, secret included."""
        data = self.model_dump(mode="json", by_alias=True)
        data["apiSecret"] = (
            self.api_secret.get_secret_value() if self.api_secret is not None else None
        )
        return data


@dataclass
class BrokerPortfolio:
    """Holdings and summary fetched from a broker."""

    holdings: List[Holding] = field(default_factory=list)
    summary: PortfolioSummary = field(default_factory=PortfolioSummary)
