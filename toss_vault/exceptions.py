"""Domain-specific exceptions for loading toss data."""


class TossVaultError(Exception):
    """Base exception for Toss Vault failures."""

    pass


class DataLoadError(TossVaultError):
    """Raised when a data file is missing, unreadable, or in an unknown format."""

    pass


class ValidationError(TossVaultError):
    """Raised when a data row fails validation."""

    def __init__(self, table: str, row_number: int, message: str):
        self.table = table
        self.row_number = row_number
        super().__init__(f"{table} row {row_number}: {message}")
