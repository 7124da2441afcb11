"""Account domain models."""

from bank_accounts.models.account import Account, CurrentAccount, SavingsAccount, to_decimal
from bank_accounts.models.enums import AccountKind

__all__ = ["Account", "AccountKind", "CurrentAccount", "SavingsAccount", "to_decimal"]
