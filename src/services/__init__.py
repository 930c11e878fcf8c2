"""Services package."""

from src.services.store import (
    DuplicateError,
    InMemoryLedgerStore,
    LedgerStoreInterface,
    NotFoundError,
    ReadOnlyEntryError,
    StorageError,
)

__all__ = [
    "DuplicateError",
    "InMemoryLedgerStore",
    "LedgerStoreInterface",
    "NotFoundError",
    "ReadOnlyEntryError",
    "StorageError",
]
