"""Demonstration run of the account hierarchy."""

import logging
import sys

from bank_accounts.config import BankAccountsConfig
from bank_accounts.logging import setup_logging
from bank_accounts.models import CurrentAccount, SavingsAccount

logger = logging.getLogger(__name__)


def run_demo() -> tuple[SavingsAccount, CurrentAccount]:
    """Run the fixed deposit, withdrawal and transfer sequence.

    Returns
    -------
    tuple[SavingsAccount, CurrentAccount]
        Both accounts in their final state.
    """
    savings = SavingsAccount("S123", "John Doe", 1000, 0.02)
    current = CurrentAccount("C456", "Jane Doe", 2000, 500)

    savings.display_details()
    current.display_details()

    savings.deposit(500)
    current.withdraw(1000)

    savings.display_details()
    current.display_details()

    current = current + savings

    savings.display_details()
    current.display_details()

    return savings, current


def main() -> int:
    config = BankAccountsConfig.from_env()
    # stdout carries the account output only
    setup_logging(
        level=config.logging.level,
        format_type=config.logging.format_type,
        stream=sys.stderr,
    )
    logger.info("Starting account demo")
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
