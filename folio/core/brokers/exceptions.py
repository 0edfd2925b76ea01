"""Broker operation errors."""


class BrokerError(Exception):
    """Base class for expected broker operation failures."""


class BrokerValidationError(BrokerError, ValueError):
    """Required input is missing or invalid."""


class BrokerNotFoundError(BrokerError, LookupError):
    """The broker is not connected for this user."""
