"""Serialization of accounts to JSON-ready dictionaries."""

from decimal import Decimal
from enum import Enum
from typing import Any

from bank_accounts.models.account import Account, CurrentAccount, SavingsAccount


def account_to_dict(account: Account) -> dict[str, Any]:
    """Convert an account to a dictionary of JSON-compatible values.

    Parameters
    ----------
    account : Account
        Account of any kind.

    Returns
    -------
    dict
        ``account_id``, ``holder``, ``kind`` and ``balance``, plus
        ``interest_rate`` for savings or ``overdraft_limit`` for current
        accounts.
    """
    data: dict[str, Any] = {
        "account_id": account.account_id,
        "holder": account.holder,
        "kind": account.kind,
        "balance": account.balance,
    }
    if isinstance(account, SavingsAccount):
        data["interest_rate"] = account.interest_rate
    elif isinstance(account, CurrentAccount):
        data["overdraft_limit"] = account.overdraft_limit
    return {key: serialize_value(value) for key, value in data.items()}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    return value
