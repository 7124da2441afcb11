"""Enumeration types for account entities."""

from enum import Enum


class AccountKind(str, Enum):
    ACCOUNT = "Account"
    SAVINGS = "Savings Account"
    CURRENT = "Current Account"
