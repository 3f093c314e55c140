"""Tests for the Transaction model."""

import dataclasses

import pytest

from txn_analytics.exceptions import InvalidTransactionError
from txn_analytics.models import Transaction


class TestTransaction:
    """Tests for Transaction construction and behaviour."""

    def test_from_dict(self, sample_transaction_dict: dict) -> None:
        """Test parsing a full JSON object."""
        t = Transaction.from_dict(sample_transaction_dict)

        assert t.mtn == 663458
        assert t.amount == 430.2
        assert t.sender_full_name == "Tom Shelby"
        assert t.sender_age == 22
        assert t.beneficiary_full_name == "Alfie Solomons"
        assert t.beneficiary_age == 33
        assert t.issue_id == 1
        assert t.issue_solved is False
        assert t.issue_message == "Looks like money laundering"
        assert t.has_issue is True

    def test_null_optionals(self, sample_transaction_dict: dict) -> None:
        """Null issue fields become None."""
        data = {**sample_transaction_dict, "issueId": None, "issueMessage": None, "issueSolved": True}
        t = Transaction.from_dict(data)

        assert t.issue_id is None
        assert t.issue_message is None
        assert t.has_issue is False

    def test_missing_optionals_default(self) -> None:
        """Absent optional keys use defaults."""
        t = Transaction.from_dict({
            "mtn": 1,
            "amount": 5,
            "senderFullName": "A",
            "beneficiaryFullName": "B",
        })

        assert t.amount == 5.0
        assert isinstance(t.amount, float)
        assert t.sender_age == 0
        assert t.beneficiary_age == 0
        assert t.issue_id is None
        assert t.issue_solved is False
        assert t.issue_message is None

    def test_issue_message_without_issue_id(self, sample_transaction_dict: dict) -> None:
        data = {**sample_transaction_dict, "issueId": None}

        assert Transaction.from_dict(data).issue_message == "Looks like money laundering"

    @pytest.mark.parametrize("key", ["mtn", "amount", "senderFullName", "beneficiaryFullName"])
    def test_missing_required_field(self, sample_transaction_dict: dict, key: str) -> None:
        data = dict(sample_transaction_dict)
        del data[key]

        with pytest.raises(InvalidTransactionError, match=key):
            Transaction.from_dict(data)

    @pytest.mark.parametrize(
        "key,value",
        [
            ("mtn", True),
            ("mtn", 1.5),
            ("amount", "lots"),
            ("senderFullName", 42),
            ("issueSolved", "yes"),
        ],
    )
    def test_wrong_types(self, sample_transaction_dict: dict, key: str, value: object) -> None:
        data = {**sample_transaction_dict, key: value}

        with pytest.raises(InvalidTransactionError):
            Transaction.from_dict(data)

    def test_not_an_object(self) -> None:
        with pytest.raises(InvalidTransactionError, match="JSON object"):
            Transaction.from_dict(["not", "a", "dict"])  # type: ignore[arg-type]

    def test_frozen(self, sample_transaction_dict: dict) -> None:
        t = Transaction.from_dict(sample_transaction_dict)

        with pytest.raises(dataclasses.FrozenInstanceError):
            t.amount = 0.0  # type: ignore[misc]

    def test_equality_and_hash(self, sample_transaction_dict: dict) -> None:
        a = Transaction.from_dict(sample_transaction_dict)
        b = Transaction.from_dict(sample_transaction_dict)

        assert a == b
        assert len({a, b}) == 1

    def test_json_keys(self) -> None:
        assert Transaction.json_keys() == [
            "mtn",
            "amount",
            "senderFullName",
            "senderAge",
            "beneficiaryFullName",
            "beneficiaryAge",
            "issueId",
            "issueSolved",
            "issueMessage",
        ]
