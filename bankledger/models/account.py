"""Account data model."""

import logging
import re
import threading
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bankledger.models.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    NameFormatError,
)
from bankledger.models.transaction import Transaction

logger = logging.getLogger(__name__)

MIN_BALANCE = Decimal("500.00")

CENT = Decimal("0.01")

_NAME_PATTERN = re.compile(r"[A-Za-z \-']+")


def to_money(value) -> Decimal:
    """
    Convert a caller-supplied amount to a Decimal rounded to cents.

    Args:
        value: A Decimal, int, float or numeric string

    Returns:
        The amount quantized to two decimal places

    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if amount.is_finite():
            return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        pass
    raise InvalidAmountError(f"Invalid amount: {value!r}")


def validate_name(name: str) -> None:
    """Raise NameFormatError unless name is letters, spaces, hyphens and apostrophes."""
    if not isinstance(name, str) or not _NAME_PATTERN.fullmatch(name):
        raise NameFormatError("Invalid name format")


class Account:
    """
    Represents a bank account.

    The balance never drops below MIN_BALANCE and every successful mutation
    appends exactly one Transaction to the history. Deposits and withdrawals
    on the same instance are serialized by a per-account lock.
    """

    def __init__(
        self,
        account_number: int,
        first_name: str,
        last_name: str,
        balance,
        description: str,
    ):
        validate_name(first_name)
        validate_name(last_name)
        balance = to_money(balance)
        if balance < MIN_BALANCE:
            raise InvalidAmountError(f"Initial balance must be at least ${MIN_BALANCE}")

        self._account_number = account_number
        self._first_name = first_name
        self._last_name = last_name
        self._balance = balance
        self._history = [Transaction.account_creation(balance, description)]
        self._lock = threading.Lock()

    @classmethod
    def create(cls, account_number: int, first_name: str, last_name: str, initial_balance) -> "Account":
        """
        Open a brand new account.

        Args:
            account_number: The number assigned by the ledger
            first_name: Account holder's first name
            last_name: Account holder's last name
            initial_balance: Opening balance, at least MIN_BALANCE

        Returns:
            The new Account with its creation record logged

        Raises:
            NameFormatError: If either name has an invalid format
            InvalidAmountError: If the initial balance is below MIN_BALANCE
        """
        return cls(account_number, first_name, last_name, initial_balance, "Initial deposit")

    @classmethod
    def restore(cls, account_number: int, first_name: str, last_name: str, balance) -> "Account":
        """Rebuild an account read back from storage, keeping its number."""
        return cls(account_number, first_name, last_name, balance, "Loaded from file")

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    def deposit(self, amount) -> None:
        """
        Add funds to the account.

        Raises:
            InvalidAmountError: If the amount is not positive
        """
        amount = to_money(amount)
        if amount <= 0:
            raise InvalidAmountError("Deposit amount must be positive")

        with self._lock:
            self._balance += amount
            self._history.append(Transaction.deposit(amount))
        logger.debug("Deposited %s into account %d", amount, self._account_number)

    def withdraw(self, amount) -> None:
        """
        Take funds out of the account.

        Raises:
            InvalidAmountError: If the amount is not positive
            InsufficientFundsError: If the balance would fall below MIN_BALANCE
        """
        amount = to_money(amount)
        if amount <= 0:
            raise InvalidAmountError("Withdrawal amount must be positive")

        with self._lock:
            if self._balance - amount < MIN_BALANCE:
                raise InsufficientFundsError(
                    f"Insufficient funds. Minimum balance must be ${MIN_BALANCE}"
                )
            self._balance -= amount
            self._history.append(Transaction.withdrawal(amount))
        logger.debug("Withdrew %s from account %d", amount, self._account_number)

    def history(self) -> tuple[Transaction, ...]:
        """Return a snapshot of the transaction log, oldest first."""
        with self._lock:
            return tuple(self._history)

    def __repr__(self) -> str:
        return f"Account(account_number={self._account_number}, name={self.full_name!r}, balance={self._balance})"

    def __str__(self) -> str:
        return "Account Number: {}\nName: {} {}\nBalance: ${:.2f}".format(
            self._account_number, self._first_name, self._last_name, self._balance
        )
