"""
Session Store Package

Provides the abstract store interface the host implements, and an
in-memory implementation for sessions and tests.
"""

from src.services.store.interface import (
    DuplicateError,
    LedgerStoreInterface,
    NotFoundError,
    ReadOnlyEntryError,
    StorageError,
)
from src.services.store.memory import InMemoryLedgerStore

__all__ = [
    # Interface
    "LedgerStoreInterface",
    # Exceptions
    "DuplicateError",
    "NotFoundError",
    "ReadOnlyEntryError",
    "StorageError",
    # In-memory implementation
    "InMemoryLedgerStore",
]
