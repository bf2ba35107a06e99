"""File ingestion for toss, game, and team tables."""

from toss_vault.ingestion.files import (
    TossDataset,
    find_table,
    load_dataset,
    load_table,
    read_rows,
    validate_rows,
)

__all__ = [
    "TossDataset",
    "find_table",
    "load_dataset",
    "load_table",
    "read_rows",
    "validate_rows",
]
