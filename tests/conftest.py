"""Pytest configuration and fixtures."""

import logging
from typing import Iterator

import pytest

from bank_accounts.models import Account, CurrentAccount, SavingsAccount


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def account() -> Account:
    """Generic account with a balance of 500."""
    return Account("A001", "Alex Smith", 500)


@pytest.fixture
def savings() -> SavingsAccount:
    """Savings account matching the demo's opening state."""
    return SavingsAccount("S123", "John Doe", 1000, 0.02)


@pytest.fixture
def current() -> CurrentAccount:
    """Current account matching the demo's opening state."""
    return CurrentAccount("C456", "Jane Doe", 2000, 500)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    package = logging.getLogger("bank_accounts")
    saved_handlers = list(root.handlers)
    saved_levels = (root.level, package.level)

    yield

    for handler in root.handlers[:]:
        if handler not in saved_handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(saved_levels[0])
    package.setLevel(saved_levels[1])
