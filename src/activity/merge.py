"""
Activity Merge Engine

Combines aggregator-synced transactions and manual contributions into one
chronological ledger, either for every account (global feed) or for a
single account (account detail view).

GUARANTEES:
- Every input movement becomes exactly one ActivityEntry
- Newest first; entries sharing a date keep input order, synced
  transactions ahead of manual contributions
- None or empty inputs yield an empty ledger, never an exception
- Inputs are never mutated
"""

from datetime import date
from typing import Iterable, Optional

from src.activity.formatting import describe_linked, describe_manual
from src.categories import CanonicalCategory, category_of
from src.config import LedgerSettings, get_settings
from src.models import (
    CONTRIBUTION_ID_PREFIX,
    TRANSACTION_ID_PREFIX,
    Account,
    ActivityEntry,
    ActivitySource,
    ManualContribution,
    SyncedTransaction,
)
from src.telemetry import get_logger

logger = get_logger(__name__)


# =============================================================================
# FILTERS
# =============================================================================

def transactions_for_account(
    transactions: Optional[Iterable[SyncedTransaction]],
    account_id: str,
) -> list[SyncedTransaction]:
    return [t for t in transactions or [] if t.account_id == account_id]


def contributions_for_account(
    contributions: Optional[Iterable[ManualContribution]],
    account_id: str,
) -> list[ManualContribution]:
    return [c for c in contributions or [] if c.account_id == account_id]


def contributions_for_goal(
    contributions: Optional[Iterable[ManualContribution]],
    goal_id: str,
) -> list[ManualContribution]:
    return [c for c in contributions or [] if c.goal_id == goal_id]


# =============================================================================
# ENTRY BUILDERS
# =============================================================================

def _linked_entry(transaction: SyncedTransaction, account_name: str) -> ActivityEntry:
    raw_description = transaction.description
    category = category_of(transaction.categories, raw_description)

    return ActivityEntry(
        id=f"{TRANSACTION_ID_PREFIX}{transaction.id}",
        date=transaction.date,
        description=describe_linked(raw_description, category),
        amount=transaction.amount,
        account_id=transaction.account_id,
        account_name=account_name,
        source=ActivitySource.LINKED,
        category=category,
    )


def _manual_entry(contribution: ManualContribution, account_name: str) -> ActivityEntry:
    return ActivityEntry(
        id=f"{CONTRIBUTION_ID_PREFIX}{contribution.id}",
        date=contribution.date,
        description=describe_manual(contribution.description),
        amount=contribution.amount,
        account_id=contribution.account_id,
        account_name=account_name,
        source=ActivitySource.MANUAL,
        category=CanonicalCategory.TRANSFER.value,
    )


def _newest_first(entries: list[ActivityEntry]) -> list[ActivityEntry]:
    # sorted() is stable with reverse=True, so same-day entries keep input order
    return sorted(entries, key=lambda e: e.date or date.min, reverse=True)


# =============================================================================
# MERGE OPERATIONS
# =============================================================================

def merge_activity(
    transactions: Optional[Iterable[SyncedTransaction]],
    contributions: Optional[Iterable[ManualContribution]],
    accounts: Optional[Iterable[Account]],
    settings: Optional[LedgerSettings] = None,
) -> list[ActivityEntry]:
    """
    Build the global activity feed across all accounts.

    Args:
        transactions: Synced transactions (any accounts)
        contributions: Manual contributions (any accounts)
        accounts: Accounts used to resolve display names
        settings: Ledger settings (placeholder name for unknown accounts)

    Returns:
        Entries newest first.
    """
    settings = settings or get_settings().ledger
    names = {account.id: account.name for account in accounts or []}

    def name_of(account_id: str) -> str:
        return names.get(account_id) or settings.unknown_account_name

    entries = [_linked_entry(t, name_of(t.account_id)) for t in transactions or []]
    entries += [_manual_entry(c, name_of(c.account_id)) for c in contributions or []]

    merged = _newest_first(entries)
    logger.debug("activity_merged", scope="global", entry_count=len(merged))
    return merged


def merge_account_activity(
    transactions: Optional[Iterable[SyncedTransaction]],
    contributions: Optional[Iterable[ManualContribution]],
    account_id: str,
    account_name: str,
) -> list[ActivityEntry]:
    """
    Build the ledger of a single account.

    Only movements owned by account_id are included. The result is the
    input expected by running_balances().
    """
    entries = [
        _linked_entry(t, account_name)
        for t in transactions_for_account(transactions, account_id)
    ]
    entries += [
        _manual_entry(c, account_name)
        for c in contributions_for_account(contributions, account_id)
    ]

    merged = _newest_first(entries)
    logger.debug(
        "activity_merged",
        scope="account",
        account_id=account_id,
        entry_count=len(merged),
    )
    return merged


def recent_activity(
    transactions: Optional[Iterable[SyncedTransaction]],
    contributions: Optional[Iterable[ManualContribution]],
    accounts: Optional[Iterable[Account]],
    limit: Optional[int] = None,
    settings: Optional[LedgerSettings] = None,
) -> list[ActivityEntry]:
    """The newest entries of the global feed (default limit from settings)."""
    settings = settings or get_settings().ledger
    limit = settings.recent_activity_limit if limit is None else limit
    return merge_activity(transactions, contributions, accounts, settings)[:max(0, limit)]
