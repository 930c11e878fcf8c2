"""
Abstract Session Store Interface

DESIGN DECISION: The engine never persists anything. The host application
owns a session store and hands the engine a LedgerSnapshot on every call.
This interface pins down what that store must offer, so the engine facade
and the tests can work against any implementation.

Synced data (accounts, transactions) is replaced wholesale whenever the
aggregator delivers a new batch. Manual contributions are the only
activity a user may add, edit or delete.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.models import (
    Account,
    Goal,
    LedgerSnapshot,
    ManualContribution,
    SyncedTransaction,
)


class LedgerStoreInterface(ABC):
    """
    Abstract interface for the host's ledger state.

    Any store implementation (in-memory session, browser storage bridge,
    database) must implement these methods.
    """

    @abstractmethod
    def snapshot(self) -> LedgerSnapshot:
        """
        Current state of every collection.

        Returns:
            A snapshot the caller may read freely; later store mutations
            must not show through it.
        """
        pass

    @abstractmethod
    def replace_synced_data(
        self,
        accounts: list[Account],
        transactions: list[SyncedTransaction],
    ) -> None:
        """
        Replace accounts and synced transactions with a fresh aggregator batch.

        Manual contributions and goals are left untouched.
        """
        pass

    @abstractmethod
    def add_contribution(self, contribution: ManualContribution) -> ManualContribution:
        """
        Record a manual contribution.

        Raises:
            DuplicateError: If a contribution with the same id exists
        """
        pass

    @abstractmethod
    def update_contribution(self, entry_id: str, **changes) -> ManualContribution:
        """
        Edit a manual contribution.

        Args:
            entry_id: Contribution id, or its activity entry id
                      ("contribution-<id>")
            changes: Field values to replace

        Raises:
            ReadOnlyEntryError: If entry_id names a synced transaction
            NotFoundError: If no such contribution exists
        """
        pass

    @abstractmethod
    def delete_contribution(self, entry_id: str) -> bool:
        """
        Delete a manual contribution.

        Raises:
            ReadOnlyEntryError: If entry_id names a synced transaction
            NotFoundError: If no such contribution exists
        """
        pass

    @abstractmethod
    def save_goal(self, goal: Goal) -> Goal:
        """Insert a goal, or replace the goal with the same id."""
        pass

    @abstractmethod
    def get_goal(self, goal_id: str) -> Optional[Goal]:
        """The goal with this id, or None."""
        pass


class StorageError(Exception):
    """Base exception for store operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in the store."""
    pass


class DuplicateError(StorageError):
    """Attempted to insert a duplicate entity."""
    pass


class ReadOnlyEntryError(StorageError):
    """Attempted to edit or delete an aggregator-synced entry."""
    pass
