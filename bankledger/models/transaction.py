"""Transaction data model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(Enum):
    """Kinds of entries in an account's transaction log."""

    ACCOUNT_CREATION = "ACCOUNT CREATION"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


@dataclass(frozen=True)
class Transaction:
    """Represents an immutable entry in an account's history."""

    type: TransactionType
    amount: Decimal
    description: str
    time: datetime = field(default_factory=datetime.now)

    @classmethod
    def account_creation(cls, balance: Decimal, description: str) -> "Transaction":
        """Create the opening record of an account."""
        return cls(type=TransactionType.ACCOUNT_CREATION, amount=balance, description=description)

    @classmethod
    def deposit(cls, amount: Decimal) -> "Transaction":
        """Create a deposit record with a positive amount."""
        return cls(type=TransactionType.DEPOSIT, amount=amount, description="Deposit to account")

    @classmethod
    def withdrawal(cls, amount: Decimal) -> "Transaction":
        """
        Create a withdrawal record.

        Args:
            amount: The positive amount taken out of the account

        Returns:
            A Transaction whose amount is the negated withdrawal amount
        """
        return cls(
            type=TransactionType.WITHDRAWAL,
            amount=-amount,
            description="Withdrawal from account",
        )

    def __str__(self) -> str:
        return "[{}] {}: ${:.2f} - {}".format(
            self.time.strftime("%Y-%m-%d %H:%M:%S"),
            self.type.value,
            self.amount,
            self.description,
        )
