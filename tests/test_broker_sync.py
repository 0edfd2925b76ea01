"""Tests for BrokerSyncService and PortfolioService."""

import pytest
from datetime import timedelta
from unittest.mock import Mock

from folio.core.brokers import (
    BrokerNotFoundError,
    BrokerProvider,
    BrokerSyncService,
    BrokerValidationError,
    ConnectionStatus,
)
from folio.core.portfolio import PortfolioRecord
from folio.store import StorageKeys

USER_ID = "demo-user-001"


class TestConnectBroker:
    """Tests for connecting brokers."""

    def test_connect_stores_connected_record(self, broker_service, store):
        """Should store a connected record with no sync time."""
        connection = broker_service.connect_broker(USER_ID, "zerodha", "ABC123")

        assert connection.status == ConnectionStatus.CONNECTED
        assert connection.last_synced is None

        stored = store.get(StorageKeys.broker(USER_ID, "zerodha"))
        assert stored["broker"] == "zerodha"
        assert stored["clientId"] == "ABC123"
        assert stored["status"] == "connected"
        assert stored["lastSynced"] is None
        assert stored["connectedAt"]

    @pytest.mark.parametrize(
        "user_id,broker,client_id,missing",
        [
            (USER_ID, "", "ABC123", "broker"),
            (USER_ID, "zerodha", "", "clientId"),
            (USER_ID, "zerodha", None, "clientId"),
            ("", "zerodha", "ABC123", "userId"),
            (USER_ID, "   ", "ABC123", "broker"),
        ],
    )
    def test_connect_requires_fields(self, broker_service, store, user_id, broker, client_id, missing):
        """Should reject blank broker, client id or user id without writing."""
        with pytest.raises(BrokerValidationError) as exc_info:
            broker_service.connect_broker(user_id, broker, client_id)

        assert missing in str(exc_info.value)
        assert store.get_by_prefix("broker:") == {}

    def test_broker_key_is_lowercased(self, broker_service, store):
        """Should store the record under the lower-cased broker key."""
        broker_service.connect_broker(USER_ID, "Zerodha", "ABC123")

        assert store.get("broker:demo-user-001:zerodha")["broker"] == "Zerodha"

    def test_secret_persisted_but_masked(self, broker_service, store):
        """Should store the API secret but never show it in repr or dumps."""
        connection = broker_service.connect_broker(
            USER_ID, "zerodha", "ABC123", api_key="key-1", api_secret="s3cr3t"
        )

        assert store.get(StorageKeys.broker(USER_ID, "zerodha"))["apiSecret"] == "s3cr3t"
        assert "s3cr3t" not in repr(connection)
        assert "s3cr3t" not in connection.model_dump_json()

        reloaded = broker_service.list_connections(USER_ID)[StorageKeys.broker(USER_ID, "zerodha")]
        assert reloaded.api_key == "key-1"
        assert reloaded.api_secret.get_secret_value() == "s3cr3t"

    def test_reconnect_replaces_record(self, broker_service):
        """Should overwrite the record and clear the sync time."""
        broker_service.connect_broker(USER_ID, "zerodha", "OLD")
        broker_service.sync_broker(USER_ID, "zerodha")

        broker_service.connect_broker(USER_ID, "zerodha", "NEW")

        connections = broker_service.list_connections(USER_ID)
        assert len(connections) == 1
        connection = connections[StorageKeys.broker(USER_ID, "zerodha")]
        assert connection.client_id == "NEW"
        assert connection.last_synced is None


class TestListConnections:
    """Tests for listing connections."""

    def test_lists_only_own_connections(self, broker_service):
        """Should return the user's connections keyed by storage key."""
        broker_service.connect_broker(USER_ID, "zerodha", "A")
        broker_service.connect_broker(USER_ID, "groww", "B")
        broker_service.connect_broker("someone-else", "upstox", "C")

        connections = broker_service.list_connections(USER_ID)

        assert list(connections) == [
            "broker:demo-user-001:groww",
            "broker:demo-user-001:zerodha",
        ]

    def test_empty_for_new_user(self, broker_service):
        """Should return an empty mapping for a user with no connections."""
        assert broker_service.list_connections("new-user") == {}


class TestSyncBroker:
    """Tests for syncing brokers."""

    def test_sync_unconnected_broker_fails(self, broker_service, store):
        """Should raise not-found and write no portfolio record."""
        with pytest.raises(BrokerNotFoundError):
            broker_service.sync_broker(USER_ID, "zerodha")

        assert store.get(StorageKeys.portfolio(USER_ID, "zerodha")) is None

    def test_sync_requires_fields(self, broker_service):
        """Should reject a blank broker or user id."""
        with pytest.raises(BrokerValidationError):
            broker_service.sync_broker(USER_ID, "")
        with pytest.raises(BrokerValidationError):
            broker_service.sync_broker(None, "zerodha")

    def test_sync_stores_mock_portfolio(self, broker_service, store):
        """Should store the zerodha dataset and its summary."""
        broker_service.connect_broker(USER_ID, "zerodha", "ABC123")

        record = broker_service.sync_broker(USER_ID, "zerodha")

        assert record.summary.invested == 340600.00
        assert record.summary.current_value == 354964.00
        assert record.summary.returns == 14364.00
        assert record.summary.returns_percent == 4.22
        assert [h.symbol for h in record.holdings] == ["RELIANCE", "HDFCBANK", "BHARTIARTL"]
        assert all(h.broker == "zerodha" for h in record.holdings)

        stored = store.get(StorageKeys.portfolio(USER_ID, "zerodha"))
        assert stored["summary"]["invested"] == 340600.00
        assert stored["summary"]["returnsPercent"] == 4.22
        assert stored["lastSynced"]

    def test_sync_updates_last_synced(self, broker_service):
        """Should stamp the connection with the sync time."""
        broker_service.connect_broker(USER_ID, "zerodha", "ABC123")

        record = broker_service.sync_broker(USER_ID, "zerodha")

        connection = broker_service.list_connections(USER_ID)[StorageKeys.broker(USER_ID, "zerodha")]
        assert connection.last_synced == record.last_synced

    def test_sync_unknown_broker_stores_empty_portfolio(self, broker_service):
        """Should store an empty portfolio for a broker without data."""
        broker_service.connect_broker(USER_ID, "kite-clone", "X")

        record = broker_service.sync_broker(USER_ID, "kite-clone")

        assert record.holdings == []
        assert record.summary.invested == 0
        assert record.summary.returns_percent == 0

    def test_failed_fetch_leaves_previous_record(self, broker_service, store):
        """Should keep the previous portfolio when the fetch fails."""
        broker_service.connect_broker(USER_ID, "zerodha", "ABC123")
        first = broker_service.sync_broker(USER_ID, "zerodha")

        failing = Mock(spec=BrokerProvider)
        failing.fetch_portfolio.side_effect = RuntimeError("broker down")

        with pytest.raises(RuntimeError):
            BrokerSyncService(store, failing).sync_broker(USER_ID, "zerodha")

        stored = PortfolioRecord.model_validate(
            store.get(StorageKeys.portfolio(USER_ID, "zerodha"))
        )
        assert stored.last_synced == first.last_synced
        assert len(stored.holdings) == 3
        connection = broker_service.list_connections(USER_ID)[StorageKeys.broker(USER_ID, "zerodha")]
        assert connection.last_synced == first.last_synced

    def test_record_keeps_connected_casing(self, broker_service):
        """Should label the record and its holdings with the connected name."""
        broker_service.connect_broker(USER_ID, "Zerodha", "ABC123")

        record = broker_service.sync_broker(USER_ID, "ZERODHA")

        assert record.broker == "Zerodha"
        assert all(h.broker == "Zerodha" for h in record.holdings)

    def test_timestamps_are_utc_aware(self, broker_service):
        """Should stamp connect and sync times in UTC."""
        connection = broker_service.connect_broker(USER_ID, "zerodha", "ABC123")

        record = broker_service.sync_broker(USER_ID, "zerodha")

        assert connection.connected_at.utcoffset() == timedelta(0)
        assert record.last_synced.utcoffset() == timedelta(0)

    def test_sync_all(self, broker_service):
        """Should sync every connected broker in key order."""
        broker_service.connect_broker(USER_ID, "zerodha", "A")
        broker_service.connect_broker(USER_ID, "groww", "B")

        records = broker_service.sync_all(USER_ID)

        assert [r.broker for r in records] == ["groww", "zerodha"]


class TestDisconnectBroker:
    """Tests for disconnecting brokers."""

    def test_disconnect_removes_both_records(self, broker_service, portfolio_service, store):
        """Should delete the connection and its portfolio."""
        broker_service.connect_broker(USER_ID, "zerodha", "ABC123")
        broker_service.sync_broker(USER_ID, "zerodha")

        broker_service.disconnect_broker(USER_ID, "Zerodha")

        assert broker_service.list_connections(USER_ID) == {}
        assert store.get(StorageKeys.portfolio(USER_ID, "zerodha")) is None
        assert portfolio_service.get_portfolio(USER_ID).holdings == []

    def test_disconnect_is_idempotent(self, broker_service):
        """Should not fail when the broker is not connected."""
        broker_service.disconnect_broker(USER_ID, "zerodha")
        broker_service.disconnect_broker(USER_ID, "zerodha")


class TestPortfolioService:
    """Tests for the aggregate read path."""

    def test_aggregates_two_synced_brokers(self, broker_service, portfolio_service):
        """Should total zerodha and groww."""
        for broker in ("zerodha", "groww"):
            broker_service.connect_broker(USER_ID, broker, "ID")
            broker_service.sync_broker(USER_ID, broker)

        portfolio = portfolio_service.get_portfolio(USER_ID)

        assert portfolio.summary.invested == 605600.00
        assert portfolio.summary.current_value == 633577.00
        assert portfolio.summary.returns == 27977.00
        assert len(portfolio.holdings) == 6
        assert [p.broker for p in portfolio.portfolios] == ["groww", "zerodha"]

    def test_empty_portfolio(self, portfolio_service):
        """Should return zero totals for a user with nothing synced."""
        portfolio = portfolio_service.get_portfolio(USER_ID)

        assert portfolio.summary.invested == 0
        assert portfolio.summary.returns_percent == 0
        assert portfolio.holdings == []
        assert portfolio_service.get_allocation(USER_ID) == {}

    def test_allocation_over_all_brokers(self, broker_service, portfolio_service):
        """Should allocate across brokers in first-appearance order."""
        for broker in ("zerodha", "groww", "upstox"):
            broker_service.connect_broker(USER_ID, broker, "ID")
            broker_service.sync_broker(USER_ID, broker)

        allocation = portfolio_service.get_allocation(USER_ID)

        assert allocation == {
            "IT": 23.8,
            "Banking": 36.4,
            "Consumer": 16.6,
            "Energy": 14.8,
            "Telecom": 8.4,
        }

    def test_ignores_connected_but_unsynced(self, broker_service, portfolio_service):
        """Should only aggregate brokers that have been synced."""
        broker_service.connect_broker(USER_ID, "zerodha", "ID")

        assert portfolio_service.get_portfolio(USER_ID).portfolios == []
