"""JSON file loader for transaction datasets."""

import json
from pathlib import Path

from txn_analytics.exceptions import InvalidTransactionError, LoaderError
from txn_analytics.logging import get_logger
from txn_analytics.models import Transaction

logger = get_logger(__name__)


class JsonFileLoader:
    """Read a JSON array of transaction objects."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Transaction]:
        """Load all transactions in source order.

        Returns
        -------
        list[Transaction]
            Parsed transactions.

        Raises
        ------
        LoaderError
            If the file cannot be read, is not a JSON array, or contains
            a malformed transaction.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as exc:
            raise LoaderError(f"Cannot read {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise LoaderError(f"Invalid JSON in {self.path}: {exc}") from exc

        if not isinstance(raw, list):
            raise LoaderError(
                f"Expected a JSON array in {self.path}, got {type(raw).__name__}"
            )

        transactions = []
        for index, item in enumerate(raw):
            try:
                transactions.append(Transaction.from_dict(item))
            except InvalidTransactionError as exc:
                raise LoaderError(f"Malformed transaction at index {index} in {self.path}: {exc}") from exc

        logger.info("Loaded %d transactions from %s", len(transactions), self.path)
        return transactions


def load_transactions(path: str | Path) -> list[Transaction]:
    """Load transactions from a JSON file."""
    return JsonFileLoader(path).load()
