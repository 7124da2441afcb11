"""Custom exception hierarchy for bank-accounts."""


class BankAccountsError(Exception):
    """Base exception for all bank-accounts errors."""


class InvalidAmountError(BankAccountsError, ValueError):
    """Raised when a monetary amount cannot be read as a decimal number."""


class ConfigurationError(BankAccountsError):
    """Raised when configuration is invalid or missing."""
