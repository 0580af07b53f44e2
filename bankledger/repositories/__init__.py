"""Storage access for the banking system."""

from .account_store import AccountStore
from .ciphers import PlainCipher, XorCipher, make_cipher

__all__ = ["AccountStore", "PlainCipher", "XorCipher", "make_cipher"]
