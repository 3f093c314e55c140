"""Read-only queries over an in-memory transaction collection."""

from __future__ import annotations

import math
from typing import Callable, Hashable, Iterable, TypeVar

from txn_analytics.models import Transaction

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

TOP_N = 3


def group_by(
    items: Iterable[T],
    key: Callable[[T], K],
    group_filter: Callable[[list[T]], bool] | None = None,
) -> dict[K, list[T]]:
    """Group items by key, optionally keeping only matching groups.

    Keys appear in first-seen order and each group keeps the relative
    order of its items.

    Parameters
    ----------
    items : Iterable[T]
        Items to group.
    key : Callable[[T], K]
        Key selector.
    group_filter : Callable[[list[T]], bool] | None
        Predicate over a whole group; groups for which it is false are dropped.

    Returns
    -------
    dict[K, list[T]]
        Groups by key.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)

    if group_filter is None:
        return groups
    return {k: group for k, group in groups.items() if group_filter(group)}


def is_solved(transaction: Transaction) -> bool:
    """Whether the transaction is not blocked by an unsolved issue."""
    return transaction.issue_solved


def has_issue(transaction: Transaction) -> bool:
    """Whether the transaction carries a compliance issue."""
    return transaction.has_issue


def is_open_case(case: list[Transaction]) -> bool:
    """A case is open while none of its issues has been marked solved."""
    return not any(has_issue(t) and is_solved(t) for t in case)


class TransactionAggregator:
    """Analytical queries over a fixed collection of transactions.

    The collection is copied into a tuple at construction and never
    changes afterwards, so every query is a pure read and instances can
    be shared between threads.
    """

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        self._transactions: tuple[Transaction, ...] = tuple(transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def _solved(self) -> list[Transaction]:
        return [t for t in self._transactions if is_solved(t)]

    def _open_cases(self) -> dict[int, list[Transaction]]:
        return group_by(self._transactions, key=lambda t: t.mtn, group_filter=is_open_case)

    def total_transaction_amount(self) -> float:
        """Sum of amounts of all solved transactions."""
        return math.fsum(t.amount for t in self._solved())

    def total_transaction_amount_sent_by(self, sender_full_name: str) -> float:
        """Sum of amounts of solved transactions sent by the given client."""
        return math.fsum(
            t.amount for t in self._solved() if t.sender_full_name == sender_full_name
        )

    def max_transaction_amount(self) -> float:
        """Highest solved transaction amount, or 0.0 if there is none."""
        return max((t.amount for t in self._solved()), default=0.0)

    def count_unique_clients(self) -> int:
        """Number of distinct senders and beneficiaries in solved transactions."""
        clients: set[str] = set()
        for t in self._solved():
            clients.add(t.sender_full_name)
            clients.add(t.beneficiary_full_name)
        return len(clients)

    def has_open_compliance_issues(self, client_full_name: str) -> bool:
        """Whether the client sent a transaction with an issue in an open case.

        A case (transactions sharing one mtn) is open when none of its
        transactions has an issue marked as solved. A single solved issue
        therefore closes the whole case, including unsolved siblings.
        """
        return any(
            has_issue(t) and t.sender_full_name == client_full_name
            for case in self._open_cases().values()
            for t in case
        )

    def transactions_by_beneficiary_name(self) -> dict[str, list[Transaction]]:
        """All transactions indexed by beneficiary name."""
        return group_by(self._transactions, key=lambda t: t.beneficiary_full_name)

    def unsolved_issue_ids(self) -> set[int]:
        """Identifiers of all issues in open cases."""
        return {
            t.issue_id
            for case in self._open_cases().values()
            for t in case
            if t.issue_id is not None
        }

    def all_solved_issue_messages(self) -> list[str]:
        """Issue messages of solved transactions, in source order."""
        return [t.issue_message for t in self._solved() if t.issue_message is not None]

    def top3_transactions_by_amount(self) -> list[Transaction]:
        """The three highest solved transactions, amount descending.

        Equal amounts keep source order.
        """
        return sorted(self._solved(), key=lambda t: t.amount, reverse=True)[:TOP_N]

    def top_sender(self) -> str | None:
        """Sender with the highest total solved amount.

        Ties go to the alphabetically first name. Returns None when there
        are no solved transactions.
        """
        totals = {
            sender: math.fsum(t.amount for t in sent)
            for sender, sent in group_by(self._solved(), key=lambda t: t.sender_full_name).items()
        }
        if not totals:
            return None
        return min(totals, key=lambda sender: (-totals[sender], sender))

    def summary(self) -> dict[str, int]:
        """Return summary counts of the collection."""
        cases = group_by(self._transactions, key=lambda t: t.mtn)
        return {
            "transactions": len(self._transactions),
            "cases": len(cases),
            "issues": sum(1 for t in self._transactions if has_issue(t)),
            "open_cases": sum(1 for case in cases.values() if is_open_case(case)),
        }
