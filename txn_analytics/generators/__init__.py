"""Synthetic transaction generators."""

from txn_analytics.generators.transaction import TransactionGenerator

__all__ = ["TransactionGenerator"]
