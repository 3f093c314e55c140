"""In-memory transaction store and queries."""

from txn_analytics.store.transactions import TransactionAggregator, group_by

__all__ = ["TransactionAggregator", "group_by"]
