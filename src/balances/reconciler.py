"""
Balance Reconciler

Two operations:
- account_balance: starting balance plus every known movement
- running_balances: the balance as of (and including) each ledger entry

Running balances are reconstructed from the one balance we trust, the
account's current balance. The balance before the oldest entry is the
current balance minus every entry amount; walking forward from there
lands exactly back on the current balance at the newest entry.
"""

import math
from typing import Iterable, Optional, Sequence

from src.models import ActivityEntry, ManualContribution, SyncedTransaction
from src.telemetry import get_logger

logger = get_logger(__name__)


def account_balance(
    transactions: Optional[Iterable[SyncedTransaction]],
    contributions: Optional[Iterable[ManualContribution]],
    starting_balance: float,
) -> float:
    """
    Reconcile a balance from a starting point and all known movements.

    Pure summation: no filtering by date, type or account. Callers pass
    the movements of the account they are reconciling.
    """
    transaction_total = sum(t.amount for t in transactions or [])
    contribution_total = sum(c.amount for c in contributions or [])
    return starting_balance + transaction_total + contribution_total


def opening_balance(entries: Sequence[ActivityEntry], current_balance: float) -> float:
    """Balance immediately before the oldest entry."""
    return current_balance - math.fsum(entry.amount for entry in entries)


def running_balances(
    entries: Sequence[ActivityEntry],
    current_balance: float,
) -> list[ActivityEntry]:
    """
    Annotate newest-first entries with their running balance.

    Args:
        entries: Single-account ledger, newest first
        current_balance: The account's balance today

    Returns:
        New entries in the same order, each with running_balance set.
        The newest entry's running balance equals current_balance.
    """
    if not entries:
        return []

    balance = opening_balance(entries, current_balance)

    annotated = []
    for entry in reversed(entries):
        balance += entry.amount
        annotated.append(entry.model_copy(update={"running_balance": balance}))
    annotated.reverse()

    logger.debug(
        "running_balances_computed",
        entry_count=len(annotated),
        current_balance=current_balance,
    )
    return annotated
