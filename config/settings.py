"""Configuration management for the bank ledger."""
import os
from dataclasses import dataclass

CIPHERS = ('plain', 'xor')


@dataclass
class Settings:
    """Configuration settings for the bank ledger.

    Covers where the account data file lives, how its records are
    obscured, and where the ledger writes its log.
    """

    # Storage Configuration
    data_file: str = 'Bank.data'
    cipher: str = 'xor'
    cipher_key: str = 'MySecretKey123'

    # Logging Configuration
    log_file: str = 'bank.log'
    log_level: str = 'INFO'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Unset variables fall back to the defaults above.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If the cipher is unknown or the xor cipher has no key.
        """
        defaults = cls()
        cipher = os.getenv('BANK_CIPHER', defaults.cipher).lower()
        cipher_key = os.getenv('BANK_CIPHER_KEY', defaults.cipher_key)

        if cipher not in CIPHERS:
            raise ValueError(f"BANK_CIPHER must be one of {', '.join(CIPHERS)}")
        if cipher == 'xor' and not cipher_key:
            raise ValueError("BANK_CIPHER_KEY is required for the xor cipher")

        return cls(
            data_file=os.getenv('BANK_DATA_FILE', defaults.data_file),
            cipher=cipher,
            cipher_key=cipher_key,
            log_file=os.getenv('BANK_LOG_FILE', defaults.log_file),
            log_level=os.getenv('BANK_LOG_LEVEL', defaults.log_level).upper(),
        )
