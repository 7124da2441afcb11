"""bank-accounts: account hierarchy with savings and current variants."""

from bank_accounts.models import Account, AccountKind, CurrentAccount, SavingsAccount
from bank_accounts.transfer import TRANSFER_AMOUNT, transfer

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountKind",
    "CurrentAccount",
    "SavingsAccount",
    "TRANSFER_AMOUNT",
    "__version__",
    "transfer",
]
