"""Sample account generator backed by Faker."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from faker import Faker

from bank_accounts.models.account import Account, CurrentAccount, SavingsAccount


class SampleAccountGenerator:
    """Generate savings and current accounts with realistic holder names.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    OVERDRAFT_LIMITS = [Decimal("0"), Decimal("250"), Decimal("500"), Decimal("1000")]

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def generate_savings(self) -> SavingsAccount:
        """Generate a savings account holding at least the minimum balance."""
        balance = self._amount(float(SavingsAccount.MINIMUM_BALANCE), 5000.0)
        interest_rate = Decimal(str(round(random.uniform(0.005, 0.05), 4)))
        return SavingsAccount(
            account_id=f"S{self.fake.random_int(100, 999)}",
            holder=self.fake.name(),
            initial_balance=balance,
            interest_rate=interest_rate,
        )

    def generate_current(self) -> CurrentAccount:
        """Generate a current account with one of the standard overdraft limits."""
        return CurrentAccount(
            account_id=f"C{self.fake.random_int(100, 999)}",
            holder=self.fake.name(),
            initial_balance=self._amount(0.0, 5000.0),
            overdraft_limit=random.choice(self.OVERDRAFT_LIMITS),
        )

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate ``count`` accounts, alternating savings and current."""
        for i in range(count):
            if i % 2 == 0:
                yield self.generate_savings()
            else:
                yield self.generate_current()

    def _amount(self, low: float, high: float) -> Decimal:
        return Decimal(str(round(random.uniform(low, high), 2))).quantize(Decimal("0.01"))
