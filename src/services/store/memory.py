"""
In-Memory Session Store

The reference LedgerStoreInterface implementation: plain lists held for
the lifetime of a session. It does no locking; the host serializes writes
(e.g. a single UI state holder).
"""

from typing import Optional

from src.models import (
    CONTRIBUTION_ID_PREFIX,
    TRANSACTION_ID_PREFIX,
    Account,
    Goal,
    LedgerSnapshot,
    ManualContribution,
    SyncedTransaction,
)
from src.services.store.interface import (
    DuplicateError,
    LedgerStoreInterface,
    NotFoundError,
    ReadOnlyEntryError,
)
from src.telemetry import get_logger

logger = get_logger(__name__)


class InMemoryLedgerStore(LedgerStoreInterface):
    """Session store backed by Python lists."""

    def __init__(self, snapshot: Optional[LedgerSnapshot] = None):
        initial = snapshot or LedgerSnapshot()
        self._accounts = list(initial.accounts)
        self._transactions = list(initial.transactions)
        self._contributions = list(initial.contributions)
        self._goals = list(initial.goals)

    def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            accounts=list(self._accounts),
            transactions=list(self._transactions),
            contributions=list(self._contributions),
            goals=list(self._goals),
        )

    def replace_synced_data(
        self,
        accounts: list[Account],
        transactions: list[SyncedTransaction],
    ) -> None:
        self._accounts = list(accounts)
        self._transactions = list(transactions)
        logger.info(
            "synced_data_replaced",
            account_count=len(self._accounts),
            transaction_count=len(self._transactions),
        )

    def _contribution_id(self, entry_id: str) -> str:
        """Accept raw contribution ids and activity entry ids alike."""
        if entry_id.startswith(TRANSACTION_ID_PREFIX):
            raise ReadOnlyEntryError(
                f"Synced entry {entry_id} cannot be edited or deleted"
            )
        if entry_id.startswith(CONTRIBUTION_ID_PREFIX):
            return entry_id[len(CONTRIBUTION_ID_PREFIX):]
        return entry_id

    def _index_of(self, contribution_id: str) -> int:
        for index, contribution in enumerate(self._contributions):
            if contribution.id == contribution_id:
                return index
        raise NotFoundError(f"Contribution {contribution_id} not found")

    def add_contribution(self, contribution: ManualContribution) -> ManualContribution:
        if any(c.id == contribution.id for c in self._contributions):
            raise DuplicateError(f"Contribution {contribution.id} already exists")
        self._contributions.append(contribution)
        logger.info(
            "contribution_added",
            contribution_id=contribution.id,
            account_id=contribution.account_id,
            goal_id=contribution.goal_id,
        )
        return contribution

    def update_contribution(self, entry_id: str, **changes) -> ManualContribution:
        contribution_id = self._contribution_id(entry_id)
        index = self._index_of(contribution_id)

        changes.pop("id", None)
        # Re-validate through the model so edits obey the same schema
        updated = ManualContribution.model_validate(
            {**self._contributions[index].model_dump(), **changes}
        )
        self._contributions[index] = updated
        logger.info(
            "contribution_updated",
            contribution_id=contribution_id,
            fields=sorted(changes),
        )
        return updated

    def delete_contribution(self, entry_id: str) -> bool:
        contribution_id = self._contribution_id(entry_id)
        del self._contributions[self._index_of(contribution_id)]
        logger.info("contribution_deleted", contribution_id=contribution_id)
        return True

    def save_goal(self, goal: Goal) -> Goal:
        for index, existing in enumerate(self._goals):
            if existing.id == goal.id:
                self._goals[index] = goal
                logger.info("goal_updated", goal_id=goal.id)
                return goal
        self._goals.append(goal)
        logger.info("goal_created", goal_id=goal.id, goal_type=goal.type.value)
        return goal

    def get_goal(self, goal_id: str) -> Optional[Goal]:
        return next((g for g in self._goals if g.id == goal_id), None)
