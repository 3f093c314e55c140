"""Loaders that read transactions into memory."""

from txn_analytics.loaders.json_file import JsonFileLoader, load_transactions

__all__ = ["JsonFileLoader", "load_transactions"]
