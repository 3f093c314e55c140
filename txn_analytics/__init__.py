"""Analytical queries over an in-memory collection of transactions."""

__version__ = "0.1.0"
