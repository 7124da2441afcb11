"""Account hierarchy: a generic account plus savings and current variants."""

import logging
from decimal import Decimal, InvalidOperation

from bank_accounts.exceptions import InvalidAmountError
from bank_accounts.models.enums import AccountKind

logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str


def to_decimal(value: Amount) -> Decimal:
    """Convert an amount to ``Decimal`` through its string form.

    Parameters
    ----------
    value : Decimal | int | float | str
        Amount to convert. Floats go through ``str`` so ``0.1`` becomes
        ``Decimal("0.1")`` rather than its binary expansion.

    Returns
    -------
    Decimal
        Converted amount.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidAmountError(f"Invalid amount: {value!r}") from e
    if not result.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return result


class Account:
    """Generic bank account.

    The balance is only changed through :meth:`deposit` and :meth:`withdraw`;
    ``balance`` is a read-only property.

    Parameters
    ----------
    account_id : str
        Account identifier (e.g. ``"S123"``).
    holder : str
        Account holder name.
    initial_balance : Decimal | int | float | str
        Opening balance.
    """

    kind = AccountKind.ACCOUNT

    def __init__(self, account_id: str, holder: str, initial_balance: Amount) -> None:
        self._account_id = account_id
        self._holder = holder
        self._balance = to_decimal(initial_balance)

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_balance(self) -> Decimal:
        """Return the current balance."""
        return self._balance

    def get_kind(self) -> str:
        """Return the account type label."""
        return self.kind.value

    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the balance.

        Negative amounts are not rejected.
        """
        amount = to_decimal(amount)
        self._balance += amount
        logger.debug("Deposited %s into %s, balance %s", amount, self._account_id, self._balance)

    def withdraw(self, amount: Amount) -> bool:
        """Take ``amount`` from the balance if it does not exceed it.

        Returns
        -------
        bool
            True when the withdrawal was applied.
        """
        amount = to_decimal(amount)
        if amount > self._balance:
            return self._reject("Amount greater than the balance!", amount)
        return self._apply_withdrawal(amount)

    def describe(self) -> str:
        """Return the detail block shown by :meth:`display_details`."""
        return "\n".join(self._detail_lines())

    def display_details(self) -> None:
        """Print the detail block to stdout."""
        print(self.describe())

    def _detail_lines(self) -> list[str]:
        return [
            f"Account Details for {self.get_kind()} (ID: {self._account_id}):",
            f"   Holder: {self._holder}",
            f"   Balance: ${self._balance:.2f}",
        ]

    def _apply_withdrawal(self, amount: Decimal) -> bool:
        self._balance -= amount
        logger.debug("Withdrew %s from %s, balance %s", amount, self._account_id, self._balance)
        return True

    def _reject(self, message: str, amount: Decimal) -> bool:
        print(message)
        logger.warning(
            "Withdrawal of %s from %s rejected: %s", amount, self._account_id, message
        )
        return False

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_id={self._account_id!r}, "
            f"holder={self._holder!r}, balance={self._balance!r})"
        )


class SavingsAccount(Account):
    """Savings account that keeps a minimum balance.

    A withdrawal is rejected when it would leave less than
    ``MINIMUM_BALANCE`` in the account.
    """

    kind = AccountKind.SAVINGS
    MINIMUM_BALANCE = Decimal("100")

    def __init__(
        self,
        account_id: str,
        holder: str,
        initial_balance: Amount,
        interest_rate: Amount,
    ) -> None:
        super().__init__(account_id, holder, initial_balance)
        self._interest_rate = to_decimal(interest_rate)

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def withdraw(self, amount: Amount) -> bool:
        amount = to_decimal(amount)
        if self._balance - amount < self.MINIMUM_BALANCE:
            return self._reject("Not possible. Minimum balance should be maintained.", amount)
        return self._apply_withdrawal(amount)

    def _detail_lines(self) -> list[str]:
        lines = super()._detail_lines()
        lines.append(f"   Interest Rate: {self._interest_rate * 100:.2f}%")
        return lines


class CurrentAccount(Account):
    """Current account that may go negative down to its overdraft limit."""

    kind = AccountKind.CURRENT

    def __init__(
        self,
        account_id: str,
        holder: str,
        initial_balance: Amount,
        overdraft_limit: Amount,
    ) -> None:
        super().__init__(account_id, holder, initial_balance)
        self._overdraft_limit = to_decimal(overdraft_limit)

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    def withdraw(self, amount: Amount) -> bool:
        amount = to_decimal(amount)
        if amount > self._balance + self._overdraft_limit:
            return self._reject("Not possible. Amount exceeds overdraft limit.", amount)
        return self._apply_withdrawal(amount)

    def _detail_lines(self) -> list[str]:
        lines = super()._detail_lines()
        lines.append(f"   Overdraft Limit: ${self._overdraft_limit:.2f}")
        return lines

    def __add__(self, other: "SavingsAccount") -> "CurrentAccount":
        """Move the fixed transfer amount from ``other`` into this account."""
        if not isinstance(other, SavingsAccount):
            return NotImplemented

        from bank_accounts.transfer import transfer

        return transfer(self, other)
