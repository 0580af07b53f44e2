"""Tests for BankService withdraw operations."""

from decimal import Decimal

import pytest

from bankledger.models.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
)
from bankledger.models.transaction import TransactionType
from bankledger.repositories.account_store import AccountStore
from bankledger.services.bank_service import BankService


@pytest.fixture
def account_store(tmp_path):
    """Create an AccountStore backed by a fresh data file."""
    return AccountStore(tmp_path / "Bank.data")


@pytest.fixture
def bank_service(account_store):
    """Create a BankService with one funded account."""
    service = BankService(account_store)
    service.open_account("Jane", "Doe", Decimal("1200.00"))
    return service


def test_withdraw_success(bank_service, account_store):
    """Withdraw from funded account."""
    bank_service.withdraw(1, Decimal("500.00"))

    account = bank_service.get_account(1)
    assert account.balance == Decimal("700.00")
    last = account.history()[-1]
    assert last.type == TransactionType.WITHDRAWAL
    assert last.amount == Decimal("-500.00")
    assert account_store.read_lines() == ["1,Jane,Doe,700.00"]


def test_withdraw_account_not_found(bank_service):
    """Should raise AccountNotFoundError."""
    with pytest.raises(AccountNotFoundError):
        bank_service.withdraw(9, Decimal("100"))


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-100")])
def test_withdraw_not_positive(bank_service, account_store, amount):
    """Should raise InvalidAmountError with no change to balance or history."""
    with pytest.raises(InvalidAmountError) as exc_info:
        bank_service.withdraw(1, amount)

    assert "positive" in str(exc_info.value)
    account = bank_service.get_account(1)
    assert account.balance == Decimal("1200.00")
    assert len(account.history()) == 1
    assert account_store.read_lines() == ["1,Jane,Doe,1200.00"]


def test_withdraw_insufficient_funds(bank_service, account_store):
    """Should raise InsufficientFundsError and leave state unchanged."""
    with pytest.raises(InsufficientFundsError) as exc_info:
        bank_service.withdraw(1, Decimal("900.00"))

    assert "Minimum balance must be $500.00" in str(exc_info.value)
    account = bank_service.get_account(1)
    assert account.balance == Decimal("1200.00")
    assert len(account.history()) == 1
    assert account_store.read_lines() == ["1,Jane,Doe,1200.00"]


@pytest.mark.parametrize(
    "amount, allowed",
    [("699.99", True), ("700.00", True), ("700.01", False), ("5000", False)],
)
def test_withdraw_minimum_balance_boundary(bank_service, amount, allowed):
    """Withdrawals succeed only while the balance stays at or above 500.00."""
    if allowed:
        bank_service.withdraw(1, amount)
        assert bank_service.get_account(1).balance == Decimal("1200.00") - Decimal(amount)
    else:
        with pytest.raises(InsufficientFundsError):
            bank_service.withdraw(1, amount)
        assert bank_service.get_account(1).balance == Decimal("1200.00")


def test_account_lifecycle_scenario(account_store):
    """Open, deposit, failed and successful withdraw, then close."""
    bank_service = BankService(account_store)

    account = bank_service.open_account("Jane", "Doe", Decimal("1000.00"))
    assert account.account_number == 1
    assert account.balance == Decimal("1000.00")

    bank_service.deposit(1, Decimal("200.00"))
    assert account.balance == Decimal("1200.00")

    with pytest.raises(InsufficientFundsError):
        bank_service.withdraw(1, Decimal("900.00"))

    bank_service.withdraw(1, Decimal("500.00"))
    assert account.balance == Decimal("700.00")

    bank_service.close_account(1)
    with pytest.raises(AccountNotFoundError):
        bank_service.get_account(1)
    assert account_store.read_lines() == []
