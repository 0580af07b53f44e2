"""Account ledger engine: accounts, transactions and file-backed persistence."""
