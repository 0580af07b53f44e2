"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a withdrawal would take the balance below the minimum."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., negative amount)."""
    pass


class DecodeError(BankError):
    """Raised when a persisted account record cannot be decoded."""
    pass


class NameFormatError(ValueError):
    """Raised when a first or last name has an invalid format.

    This is an input error rather than a business rule violation, so it is
    not a BankError. Front ends should report it the same way.
    """
    pass
