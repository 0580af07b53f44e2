"""Reversible line transforms applied to persisted account records.

These only obscure the data file; they provide no confidentiality.
"""

import base64
import binascii

from bankledger.models.exceptions import DecodeError


class PlainCipher:
    """Identity transform, records are stored as readable text."""

    def encrypt(self, text: str) -> str:
        return text

    def decrypt(self, text: str) -> str:
        return text


class XorCipher:
    """XOR each character with a repeating key, then base64 it onto one line."""

    def __init__(self, key: str):
        """
        Initialize the cipher.

        Args:
            key: Non-empty key string

        Raises:
            ValueError: If the key is empty or not valid UTF-8 text
        """
        if not key:
            raise ValueError("XOR cipher key must not be empty")
        try:
            key.encode("utf-8")
        except UnicodeEncodeError as err:
            raise ValueError("XOR cipher key must be valid UTF-8 text") from err
        self._key = key

    def _xor(self, text: str) -> str:
        key = self._key
        return "".join(chr(ord(c) ^ ord(key[i % len(key)])) for i, c in enumerate(text))

    def encrypt(self, text: str) -> str:
        raw = self._xor(text).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii")

    def decrypt(self, text: str) -> str:
        try:
            raw = base64.b64decode(text.encode("ascii"), altchars=b"-_", validate=True)
            return self._xor(raw.decode("utf-8"))
        except (binascii.Error, UnicodeError, ValueError) as err:
            raise DecodeError(f"Cannot decrypt record: {err}") from err


def make_cipher(name: str, key: str = ""):
    """
    Build a cipher by name.

    Args:
        name: 'plain' or 'xor'
        key: Key for the xor cipher

    Returns:
        A cipher object with encrypt/decrypt methods

    Raises:
        ValueError: If the name is unknown
    """
    name = name.lower()
    if name == "plain":
        return PlainCipher()
    if name == "xor":
        return XorCipher(key)
    raise ValueError(f"Unknown cipher: {name}")
