"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from txn_analytics.models import Transaction

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_data_file() -> Path:
    """Bundled sample dataset."""
    return DATA_DIR / "transactions.json"


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults."""

    def _make(
        mtn: int = 1,
        amount: float = 10.0,
        sender: str = "Alice",
        beneficiary: str = "Bob",
        issue_id: int | None = None,
        solved: bool = True,
        message: str | None = None,
    ) -> Transaction:
        return Transaction(
            mtn=mtn,
            amount=amount,
            sender_full_name=sender,
            sender_age=30,
            beneficiary_full_name=beneficiary,
            beneficiary_age=40,
            issue_id=issue_id,
            issue_solved=solved,
            issue_message=message,
        )

    return _make


@pytest.fixture
def case_transactions(make_transaction: Callable[..., Transaction]) -> list[Transaction]:
    """One case with a clean transaction and an unsolved issue."""
    return [
        make_transaction(mtn=1, amount=10.0, sender="A", beneficiary="B", solved=True),
        make_transaction(mtn=1, amount=20.0, sender="C", beneficiary="B", issue_id=5, solved=False),
    ]


@pytest.fixture
def sample_transaction_dict() -> dict:
    """A single transaction as it appears in the source JSON."""
    return {
        "mtn": 663458,
        "amount": 430.2,
        "senderFullName": "Tom Shelby",
        "senderAge": 22,
        "beneficiaryFullName": "Alfie Solomons",
        "beneficiaryAge": 33,
        "issueId": 1,
        "issueSolved": False,
        "issueMessage": "Looks like money laundering",
    }
