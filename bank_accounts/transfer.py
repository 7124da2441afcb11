"""Funds transfer from a savings account into a current account."""

import logging
from decimal import Decimal

from bank_accounts.models.account import Amount, CurrentAccount, SavingsAccount, to_decimal

logger = logging.getLogger(__name__)

TRANSFER_AMOUNT = Decimal("300")


def transfer(
    current: CurrentAccount,
    savings: SavingsAccount,
    amount: Amount = TRANSFER_AMOUNT,
) -> CurrentAccount:
    """Move ``amount`` from ``savings`` into ``current``.

    Nothing moves unless the savings balance covers the amount. Once it
    does, the current account is credited and the savings withdrawal is
    then subject to the savings minimum balance on its own; a rejected
    withdrawal leaves savings untouched but keeps the credit.

    Parameters
    ----------
    current : CurrentAccount
        Account receiving the funds.
    savings : SavingsAccount
        Account the funds are taken from.
    amount : Decimal | int | float | str
        Amount to move (default 300).

    Returns
    -------
    CurrentAccount
        The current account, credited unless savings could not cover the amount.
    """
    amount = to_decimal(amount)

    if savings.get_balance() < amount:
        print("Transfer not possible. Insufficient amount in savings account.")
        logger.warning(
            "Transfer of %s from %s to %s rejected: savings balance %s",
            amount,
            savings.account_id,
            current.account_id,
            savings.get_balance(),
        )
        return current

    current.deposit(amount)
    if savings.withdraw(amount):
        logger.info(
            "Transferred %s from %s to %s", amount, savings.account_id, current.account_id
        )
    else:
        logger.warning(
            "Credited %s to %s but %s was not debited", amount, current.account_id, savings.account_id
        )

    return current
