"""Data models for the banking system."""

from .account import MIN_BALANCE, Account
from .transaction import Transaction, TransactionType
from .exceptions import (
    BankError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    DecodeError,
    NameFormatError,
)

__all__ = [
    "MIN_BALANCE",
    "Account",
    "Transaction",
    "TransactionType",
    "BankError",
    "AccountNotFoundError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "DecodeError",
    "NameFormatError",
]
