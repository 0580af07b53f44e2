"""Tests for the text menu front end."""

from decimal import Decimal

import pytest

from bankledger.cli import BankMenu
from bankledger.repositories.account_store import AccountStore
from bankledger.services.bank_service import BankService


@pytest.fixture
def bank_service(tmp_path):
    """Create an empty BankService."""
    return BankService(AccountStore(tmp_path / "Bank.data"))


def run_menu(bank_service, answers):
    """Run the menu with scripted answers and return everything printed."""
    inputs = iter(answers)
    output = []

    def fake_input(prompt):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    BankMenu(bank_service, input_fn=fake_input, output_fn=output.append).run()
    return "\n".join(output)


def test_open_account(bank_service):
    out = run_menu(bank_service, ["1", "Jane", "Doe", "1000", "7"])

    assert "Account created successfully!" in out
    assert "Account Number: 1\nName: Jane Doe\nBalance: $1000.00" in out
    assert "Exiting system..." in out


def test_open_account_failures(bank_service):
    out = run_menu(bank_service, ["1", "Jane", "Doe", "100", "1", "J4ne", "Doe", "1000"])

    assert "Account creation failed: Initial balance must be at least $500.00" in out
    assert "Account creation failed: Invalid name format" in out
    assert bank_service.list_accounts() == []


def test_deposit_withdraw_and_enquiry(bank_service):
    bank_service.open_account("Jane", "Doe", Decimal("1000"))

    out = run_menu(bank_service, ["3", "1", "200", "4", "1", "900", "4", "1", "500", "2", "1"])

    assert "Deposit successful!" in out
    assert "Withdrawal failed: Insufficient funds. Minimum balance must be $500.00" in out
    assert "Withdrawal successful!" in out
    assert "Balance: $700.00" in out
    assert "ACCOUNT CREATION: $1000.00 - Initial deposit" in out
    assert "DEPOSIT: $200.00 - Deposit to account" in out
    assert "WITHDRAWAL: $-500.00 - Withdrawal from account" in out


def test_close_account(bank_service):
    bank_service.open_account("Jane", "Doe", Decimal("1000"))

    out = run_menu(bank_service, ["5", "1", "5", "1", "2", "1"])

    assert "Account closed successfully!" in out
    assert "Account closure failed: Account not found: 1" in out
    assert "Error: Account not found: 1" in out


def test_show_all(bank_service):
    bank_service.open_account("Jane", "Doe", Decimal("1000"))
    bank_service.open_account("John", "Smith", Decimal("650.5"))

    out = run_menu(bank_service, ["6"])

    assert "Jane Doe" in out
    assert "$650.50" in out


def test_invalid_input(bank_service):
    out = run_menu(bank_service, ["abc", "9", "3", "one"])

    assert out.count("Invalid input format!") == 2
    assert "Invalid choice!" in out
