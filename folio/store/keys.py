"""
Storage key generators.

All keys follow the convention: {domain}:{user_id}:{broker}

Broker identifiers are lower-cased so that "Zerodha" and "zerodha" address
the same records.
"""


class StorageKeys:
    """
    Key generators for broker connection and portfolio records.

    Examples:
        broker:demo-user-001:zerodha
        portfolio:demo-user-001:groww
    """

    BROKER = "broker"
    PORTFOLIO = "portfolio"

    @staticmethod
    def broker(user_id: str, broker: str) -> str:
        """Key of a user's connection record for one broker."""
        return f"{StorageKeys.BROKER}:{user_id}:{broker.lower()}"

    @staticmethod
    def portfolio(user_id: str, broker: str) -> str:
        """Key of a user's synced portfolio record for one broker."""
        return f"{StorageKeys.PORTFOLIO}:{user_id}:{broker.lower()}"

    @staticmethod
    def broker_prefix(user_id: str) -> str:
        """Prefix matching all of a user's connection records."""
        return f"{StorageKeys.BROKER}:{user_id}:"

    @staticmethod
    def portfolio_prefix(user_id: str) -> str:
        """Prefix matching all of a user's portfolio records."""
        return f"{StorageKeys.PORTFOLIO}:{user_id}:"
