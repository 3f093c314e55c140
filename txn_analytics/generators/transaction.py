"""Transaction generator for sample datasets."""

from __future__ import annotations

import random
from typing import Iterator

from txn_analytics.generators.base import BaseGenerator
from txn_analytics.models import Transaction


class TransactionGenerator(BaseGenerator):
    """Generate cases of transactions between a fixed pool of clients."""

    ISSUE_MESSAGES = [
        "Looks like money laundering",
        "Don't have a clue what this transfer is for",
        "Beneficiary matches a sanctions list entry",
        "Amount exceeds the sender's declared income",
        "Sender identity could not be verified",
        "Unusual transfer pattern for this corridor",
    ]

    # Transactions per case
    CASE_SIZES = [1, 2, 3]
    CASE_SIZE_WEIGHTS = [0.6, 0.3, 0.1]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_GB",
        num_clients: int = 12,
        issue_rate: float = 0.4,
        solved_rate: float = 0.5,
    ) -> None:
        super().__init__(seed, locale)
        if num_clients < 2:
            raise ValueError("num_clients must be at least 2")
        self.issue_rate = issue_rate
        self.solved_rate = solved_rate
        self._clients = self._generate_clients(num_clients)
        self._next_issue_id = 1

    @property
    def clients(self) -> list[tuple[str, int]]:
        """(full name, age) pairs that transactions are drawn from."""
        return list(self._clients)

    def generate_case(self, mtn: int) -> list[Transaction]:
        """Generate the transactions of a single case.

        Parameters
        ----------
        mtn : int
            Transaction number shared by the case.

        Returns
        -------
        list[Transaction]
            One to three transactions with the given mtn.
        """
        size = random.choices(self.CASE_SIZES, weights=self.CASE_SIZE_WEIGHTS, k=1)[0]
        return [self._generate_one(mtn) for _ in range(size)]

    def generate_batch(self, num_cases: int, start_mtn: int = 663458) -> Iterator[Transaction]:
        """Generate transactions for consecutive cases.

        Parameters
        ----------
        num_cases : int
            Number of cases to generate.
        start_mtn : int
            Transaction number of the first case.

        Yields
        ------
        Transaction
            Generated transactions, case by case.
        """
        for offset in range(num_cases):
            yield from self.generate_case(start_mtn + offset)

    def _generate_one(self, mtn: int) -> Transaction:
        (sender, sender_age), (beneficiary, beneficiary_age) = random.sample(self._clients, 2)

        # Log-normal amounts, most transfers in the low hundreds
        amount = round(random.lognormvariate(mu=5.5, sigma=1.0), 2)

        if random.random() < self.issue_rate:
            issue_id = self._next_issue_id
            self._next_issue_id += 1
            return Transaction(
                mtn=mtn,
                amount=amount,
                sender_full_name=sender,
                sender_age=sender_age,
                beneficiary_full_name=beneficiary,
                beneficiary_age=beneficiary_age,
                issue_id=issue_id,
                issue_solved=random.random() < self.solved_rate,
                issue_message=random.choice(self.ISSUE_MESSAGES),
            )

        return Transaction(
            mtn=mtn,
            amount=amount,
            sender_full_name=sender,
            sender_age=sender_age,
            beneficiary_full_name=beneficiary,
            beneficiary_age=beneficiary_age,
            issue_solved=True,
        )

    def _generate_clients(self, count: int) -> list[tuple[str, int]]:
        names: list[str] = []
        while len(names) < count:
            name = self.fake.name()
            if name not in names:
                names.append(name)
        return [(name, random.randint(18, 80)) for name in names]
