"""Transaction model for money transfers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from txn_analytics.exceptions import InvalidTransactionError


def _key(json_key: str) -> dict[str, str]:
    return {"json_key": json_key}


@dataclass(frozen=True)
class Transaction:
    """Money transfer record, possibly carrying a compliance issue.

    Transactions sharing one ``mtn`` belong to the same case.
    ``issue_solved`` is taken as-is from the source data and means the
    transaction is not blocked by an unsolved issue, whether or not an
    ``issue_id`` is attached.
    """

    mtn: int = field(metadata=_key("mtn"))
    amount: float = field(metadata=_key("amount"))
    sender_full_name: str = field(metadata=_key("senderFullName"))
    sender_age: int = field(metadata=_key("senderAge"))
    beneficiary_full_name: str = field(metadata=_key("beneficiaryFullName"))
    beneficiary_age: int = field(metadata=_key("beneficiaryAge"))
    issue_id: int | None = field(default=None, metadata=_key("issueId"))
    issue_solved: bool = field(default=False, metadata=_key("issueSolved"))
    issue_message: str | None = field(default=None, metadata=_key("issueMessage"))

    REQUIRED_KEYS = ("mtn", "amount", "senderFullName", "beneficiaryFullName")

    @property
    def has_issue(self) -> bool:
        """Whether a compliance issue is attached."""
        return self.issue_id is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        """Build a transaction from one JSON object.

        Parameters
        ----------
        data : dict[str, Any]
            Mapping keyed by the JSON field names (``senderFullName`` etc.).

        Returns
        -------
        Transaction
            Parsed record.

        Raises
        ------
        InvalidTransactionError
            If a mandatory key is missing or a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise InvalidTransactionError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        missing = [key for key in cls.REQUIRED_KEYS if data.get(key) is None]
        if missing:
            raise InvalidTransactionError(f"Missing required fields: {', '.join(missing)}")

        try:
            issue_id = data.get("issueId")
            issue_message = data.get("issueMessage")
            return cls(
                mtn=_as_int(data["mtn"]),
                amount=_as_float(data["amount"]),
                sender_full_name=_as_str(data["senderFullName"]),
                sender_age=_as_int(data.get("senderAge") or 0),
                beneficiary_full_name=_as_str(data["beneficiaryFullName"]),
                beneficiary_age=_as_int(data.get("beneficiaryAge") or 0),
                issue_id=None if issue_id is None else _as_int(issue_id),
                issue_solved=_as_bool(data.get("issueSolved", False)),
                issue_message=None if issue_message is None else _as_str(issue_message),
            )
        except (TypeError, ValueError) as exc:
            raise InvalidTransactionError(str(exc)) from exc

    @classmethod
    def json_keys(cls) -> list[str]:
        """JSON field names in declaration order."""
        return [f.metadata["json_key"] for f in fields(cls)]


def _as_int(value: Any) -> int:
    # bool is an int subclass; reject it so ``true`` never becomes an mtn
    if isinstance(value, bool):
        raise TypeError(f"Expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Expected an integer, got {value!r}")
        return int(value)
    if isinstance(value, (int, str)):
        return int(value)
    raise TypeError(f"Expected an integer, got {value!r}")


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Expected a number, got {value!r}")
    return float(value)


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {value!r}")
    return value


def _as_bool(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"Expected a boolean, got {value!r}")
    return value
