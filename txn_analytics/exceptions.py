"""Custom exception hierarchy for txn-analytics."""


class TxnAnalyticsError(Exception):
    """Base exception for all txn-analytics errors."""


class ConfigurationError(TxnAnalyticsError):
    """Raised when configuration is invalid or missing."""


class InvalidTransactionError(TxnAnalyticsError):
    """Raised when a raw record cannot be turned into a Transaction."""


class LoaderError(TxnAnalyticsError):
    """Raised when the transaction source cannot be read or parsed."""


class SinkError(TxnAnalyticsError):
    """Raised when a sink operation fails."""
