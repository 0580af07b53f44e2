"""Business logic for the banking system."""

from .bank_service import BankService

__all__ = ["BankService"]
