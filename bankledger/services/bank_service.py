"""Bank service for business logic layer."""

import logging
import threading

from bankledger.models.account import Account
from bankledger.models.exceptions import (
    AccountNotFoundError,
    DecodeError,
    InvalidAmountError,
    NameFormatError,
)
from bankledger.repositories.account_store import AccountStore

logger = logging.getLogger(__name__)


class BankService:
    """
    Service layer for banking operations.

    Holds the registry of open accounts, assigns account numbers and writes
    a full-state checkpoint through the store after every successful
    mutation. Mutations and checkpoints are serialized by a single lock.
    """

    def __init__(self, store: AccountStore):
        """
        Initialize the BankService with an empty registry.

        Args:
            store: Store used to persist the accounts
        """
        self._store = store
        self._accounts: dict[int, Account] = {}
        self._last_account_number = 0
        self._lock = threading.RLock()

    @classmethod
    def from_store(cls, store: AccountStore) -> "BankService":
        """Create a BankService and load every account persisted in the store."""
        service = cls(store)
        service.restore_from_store(store.read_lines())
        return service

    @property
    def next_account_number(self) -> int:
        """The number the next opened account will receive."""
        return self._last_account_number + 1

    def open_account(self, first_name: str, last_name: str, initial_balance) -> Account:
        """
        Open a new account.

        Args:
            first_name: Account holder's first name
            last_name: Account holder's last name
            initial_balance: Opening balance (must be at least MIN_BALANCE)

        Returns:
            The created Account

        Raises:
            NameFormatError: If either name has an invalid format
            InvalidAmountError: If the initial balance is below the minimum
        """
        with self._lock:
            account = Account.create(self.next_account_number, first_name, last_name, initial_balance)
            self._last_account_number = account.account_number
            self._accounts[account.account_number] = account
            self.persist_to_store()
        logger.info("Opened account %d for %s", account.account_number, account.full_name)
        return account

    def get_account(self, account_number: int) -> Account:
        """
        Look up an open account.

        Raises:
            AccountNotFoundError: If no open account has this number
        """
        account = self._accounts.get(account_number)
        if account is None:
            raise AccountNotFoundError(f"Account not found: {account_number}")
        return account

    def deposit(self, account_number: int, amount) -> None:
        """
        Deposit funds into an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is not positive
        """
        with self._lock:
            self.get_account(account_number).deposit(amount)
            self.persist_to_store()

    def withdraw(self, account_number: int, amount) -> None:
        """
        Withdraw funds from an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is not positive
            InsufficientFundsError: If the balance would fall below the minimum
        """
        with self._lock:
            self.get_account(account_number).withdraw(amount)
            self.persist_to_store()

    def close_account(self, account_number: int) -> Account:
        """
        Remove an account from the registry.

        The account's number is never handed out again by this service.

        Returns:
            The removed Account

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        with self._lock:
            account = self._accounts.pop(account_number, None)
            if account is None:
                raise AccountNotFoundError(f"Account not found: {account_number}")
            self.persist_to_store()
        logger.info("Closed account %d", account_number)
        return account

    def list_accounts(self) -> list[Account]:
        """Return all open accounts ordered by account number."""
        with self._lock:
            return [self._accounts[n] for n in sorted(self._accounts)]

    def restore_from_store(self, lines) -> None:
        """
        Rebuild accounts from raw persisted lines.

        Lines that cannot be decoded or that describe an invalid account are
        logged and skipped. Afterwards the numbering resumes above the
        highest account number seen.

        Args:
            lines: Iterable of encoded lines as read from the store
        """
        with self._lock:
            max_number = 0
            loaded = 0
            for lineno, line in enumerate(lines, start=1):
                if not line.strip():
                    continue
                try:
                    number, first_name, last_name, balance = self._store.decode_line(line)
                    account = Account.restore(number, first_name, last_name, balance)
                except (DecodeError, InvalidAmountError, NameFormatError) as err:
                    logger.warning("Error loading account on line %d: %s", lineno, err)
                    continue

                if number in self._accounts:
                    logger.warning("Duplicate account %d on line %d skipped", number, lineno)
                    continue

                self._accounts[number] = account
                max_number = max(max_number, number)
                loaded += 1

            self._last_account_number = max(self._last_account_number, max_number)
        logger.info("Loaded %d account(s) from %s", loaded, self._store.path)

    def persist_to_store(self) -> None:
        """
        Write every open account to the store, replacing its previous contents.

        A failed encode or write is logged and otherwise ignored; the in-memory
        registry stays authoritative until the next successful checkpoint.
        """
        with self._lock:
            try:
                lines = [
                    self._store.encode_line(a.account_number, a.first_name, a.last_name, a.balance)
                    for a in self.list_accounts()
                ]
                self._store.write_lines(lines)
            except (OSError, ValueError):
                logger.exception("Error saving accounts to %s", self._store.path)
                return
        logger.debug("Saved %d account(s) to %s", len(lines), self._store.path)
