"""Broker connection API routes."""

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from folio.api.deps import get_broker_service, get_db, limiter
from folio.config import get_settings
from folio.core.brokers import BrokerConnection, BrokerSyncService
from folio.core.portfolio import ApiModel, PortfolioRecord

settings = get_settings()

router = APIRouter(prefix="/brokers", tags=["brokers"])


# Request/Response Models

class ConnectBrokerRequest(ApiModel):
    """Request to connect a broker account.

    Fields are optional here so that missing values surface as a 400 with
    a readable message rather than a schema error.
    """

    broker: Optional[str] = None
    client_id: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    user_id: Optional[str] = None


class SyncBrokerRequest(ApiModel):
    """Request to sync a connected broker."""

    user_id: Optional[str] = None
    broker: Optional[str] = None


class ConnectBrokerResponse(ApiModel):
    """Response for a new connection."""

    success: bool = True
    message: str
    broker: BrokerConnection


class BrokerListResponse(ApiModel):
    """Connections of a user, keyed by storage key."""

    success: bool = True
    brokers: Dict[str, BrokerConnection]


class SyncBrokerResponse(ApiModel):
    """Response for a sync operation."""

    success: bool = True
    message: str
    data: PortfolioRecord


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    success: bool = True
    message: str


# Routes

@router.post("/connect", response_model=ConnectBrokerResponse)
def connect_broker(
    payload: ConnectBrokerRequest,
    service: BrokerSyncService = Depends(get_broker_service),
    db: Session = Depends(get_db),
):
    """Connect a broker account for a user."""
    connection = service.connect_broker(
        user_id=payload.user_id,
        broker=payload.broker,
        client_id=payload.client_id,
        api_key=payload.api_key,
        api_secret=payload.api_secret,
    )
    db.commit()

    return ConnectBrokerResponse(
        message="Broker connected successfully",
        broker=connection,
    )


@router.post("/sync", response_model=SyncBrokerResponse)
@limiter.limit(settings.sync_rate_limit)
def sync_broker(
    request: Request,
    payload: SyncBrokerRequest,
    service: BrokerSyncService = Depends(get_broker_service),
    db: Session = Depends(get_db),
):
    """Fetch holdings from a connected broker and store them."""
    record = service.sync_broker(user_id=payload.user_id, broker=payload.broker)
    db.commit()

    return SyncBrokerResponse(
        message="Portfolio synced successfully",
        data=record,
    )


@router.get("/{user_id}", response_model=BrokerListResponse)
def list_brokers(
    user_id: str,
    service: BrokerSyncService = Depends(get_broker_service),
):
    """List the connected brokers of a user."""
    return BrokerListResponse(brokers=service.list_connections(user_id))


@router.delete("/{user_id}/{broker}", response_model=MessageResponse)
def disconnect_broker(
    user_id: str,
    broker: str,
    service: BrokerSyncService = Depends(get_broker_service),
    db: Session = Depends(get_db),
):
    """Disconnect a broker and drop its synced portfolio."""
    service.disconnect_broker(user_id, broker)
    db.commit()

    return MessageResponse(message="Broker disconnected successfully")
