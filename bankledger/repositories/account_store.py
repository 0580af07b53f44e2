"""Account store for flat-file persistence."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bankledger.models.exceptions import DecodeError
from bankledger.repositories.ciphers import PlainCipher

logger = logging.getLogger(__name__)


class AccountStore:
    """
    Repository for the encoded account data file.

    Each line of the file holds one account record of the form
    ``number,first name,last name,balance`` passed through a reversible
    cipher. The store has no business rules of its own.
    """

    def __init__(self, path, cipher=None):
        """
        Initialize the store.

        Args:
            path: Location of the data file
            cipher: Object with encrypt/decrypt methods (default: PlainCipher)
        """
        self._path = Path(path)
        self._cipher = cipher if cipher is not None else PlainCipher()

    @property
    def path(self) -> Path:
        return self._path

    def encode_line(self, account_number: int, first_name: str, last_name: str, balance: Decimal) -> str:
        """Format and encrypt one account record."""
        data = "{:d},{},{},{:.2f}".format(account_number, first_name, last_name, balance)
        return self._cipher.encrypt(data)

    def decode_line(self, line: str) -> tuple[int, str, str, Decimal]:
        """
        Decrypt and parse one account record.

        Args:
            line: An encoded line without its line terminator

        Returns:
            A tuple of (account_number, first_name, last_name, balance)

        Raises:
            DecodeError: If the line cannot be decrypted or is not exactly
                four fields with a positive integer number and a decimal balance
        """
        parts = self._cipher.decrypt(line).split(",")
        if len(parts) != 4:
            raise DecodeError(f"Expected 4 fields, got {len(parts)}")

        number, first_name, last_name, balance = parts
        if not (number.isascii() and number.isdigit()) or int(number) == 0:
            raise DecodeError(f"Account number must be a positive integer: {number!r}")
        account_number = int(number)
        try:
            amount = Decimal(balance)
        except (ValueError, InvalidOperation) as err:
            raise DecodeError(f"Malformed account record: {err}") from err
        return account_number, first_name, last_name, amount

    def read_lines(self) -> list[str]:
        """
        Read every raw line of the data file.

        Returns:
            The lines without terminators, or an empty list if the file
            does not exist yet
        """
        try:
            with self._path.open("r", encoding="utf-8") as f:
                return f.read().splitlines()
        except FileNotFoundError:
            logger.info("No existing data file found at %s. Starting fresh.", self._path)
            return []

    def write_lines(self, lines) -> None:
        """
        Overwrite the data file with the given lines.

        The file is truncated and rewritten in place, so a crash part-way
        through can leave it incomplete.

        Raises:
            OSError: If the file cannot be written
        """
        with self._path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
