"""Domain models for transaction analytics."""

from txn_analytics.models.transaction import Transaction

__all__ = ["Transaction"]
