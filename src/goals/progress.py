"""
Goal Progress Engine

Computes current / target / percentage / remaining / completion for a goal
from the accounts, contributions and transactions the caller supplies.

Two goal classes with opposite senses:

DEBT GOALS (debt, debt_payoff)
    current   = amount already paid down
    remaining = balance still owed
    A target of 0 means the original debt is unknown and must be inferred
    as balance owed + payments made.

ACCUMULATION GOALS (savings, investing, emergency_fund, retirement, custom)
    current   = amount saved so far
    remaining = gap to target

Each class distinguishes one linked account, several linked accounts, and
no linked account (progress from manual contributions only). Linked ids
that do not resolve to a known account are ignored.
"""

from enum import Enum
from typing import Iterable, Optional, Sequence

from src.activity.merge import contributions_for_goal, transactions_for_account
from src.models import (
    Account,
    AccountKind,
    Goal,
    GoalProgress,
    ManualContribution,
    SyncedTransaction,
)
from src.telemetry import get_logger

logger = get_logger(__name__)


# =============================================================================
# PAYMENT SIGN CONVENTIONS
# =============================================================================

class PaymentSign(str, Enum):
    """Which transaction sign marks a payment toward a debt."""
    POSITIVE = "positive"
    NEGATIVE = "negative"


# Credit card feeds report payments as positive amounts, loan feeds as
# negative ones. Depository and investment accounts follow the loan rule.
PAYMENT_SIGN_BY_KIND: dict[AccountKind, PaymentSign] = {
    AccountKind.CREDIT: PaymentSign.POSITIVE,
    AccountKind.LOAN: PaymentSign.NEGATIVE,
    AccountKind.DEPOSITORY: PaymentSign.NEGATIVE,
    AccountKind.INVESTMENT: PaymentSign.NEGATIVE,
}


def is_debt_payment(amount: float, kind: AccountKind) -> bool:
    """True when a transaction of this amount pays down an account of this kind."""
    sign = PAYMENT_SIGN_BY_KIND[kind]
    if sign == PaymentSign.POSITIVE:
        return amount > 0
    return amount < 0


# =============================================================================
# LINKED ACCOUNTS
# =============================================================================

def linked_accounts(goal: Goal, accounts: Optional[Iterable[Account]]) -> list[Account]:
    """The goal's linked accounts that exist, in link order."""
    by_id = {account.id: account for account in accounts or []}
    return [by_id[i] for i in goal.linked_account_ids if i in by_id]


def linked_account(goal: Goal, accounts: Optional[Iterable[Account]]) -> Optional[Account]:
    """The first resolvable linked account, if any."""
    resolved = linked_accounts(goal, accounts)
    return resolved[0] if resolved else None


# =============================================================================
# DEBT GOALS
# =============================================================================

def _debt_progress(
    goal: Goal,
    linked: Sequence[Account],
    contributions: Sequence[ManualContribution],
    transactions: Sequence[SyncedTransaction],
) -> tuple[float, float, float]:
    """Returns (current, target, remaining) for a debt goal."""
    if not linked:
        account_ids = set(goal.linked_account_ids)
        current = sum(
            abs(c.amount) for c in contributions
            if c.amount < 0 and (c.goal_id == goal.id or c.account_id in account_ids)
        )
        return current, goal.target, max(0.0, goal.target - current)

    if len(linked) == 1:
        account = linked[0]
        balance = account.balance

        if goal.infers_original_debt:
            payments_made = sum(
                abs(t.amount)
                for t in transactions_for_account(transactions, account.id)
                if is_debt_payment(t.amount, account.kind)
            )
            original_debt = balance + payments_made
            return payments_made, original_debt, balance

        return max(0.0, goal.target - balance), goal.target, balance

    account_ids = {account.id for account in linked}
    total_balance = sum(account.balance for account in linked)

    if goal.infers_original_debt:
        payments_made = sum(
            abs(t.amount) for t in transactions
            if t.account_id in account_ids and t.amount < 0
        )
        original_debt = total_balance + payments_made
        return payments_made, original_debt, total_balance

    return max(0.0, goal.target - total_balance), goal.target, total_balance


# =============================================================================
# ACCUMULATION GOALS
# =============================================================================

def _accumulation_progress(
    goal: Goal,
    linked: Sequence[Account],
    contributions: Sequence[ManualContribution],
    transactions: Sequence[SyncedTransaction],
) -> tuple[float, float, float]:
    """Returns (current, target, remaining) for a savings-style goal."""
    if not linked:
        current = sum(c.amount for c in contributions_for_goal(contributions, goal.id))
    else:
        account_ids = {account.id for account in linked}
        balances = sum(account.balance for account in linked)
        deposits = sum(
            t.amount for t in transactions
            if t.account_id in account_ids and t.amount > 0
        )
        # Partial transaction history can understate the balance, and vice versa
        current = max(balances, deposits)

    return current, goal.target, max(0.0, goal.target - current)


# =============================================================================
# PUBLIC API
# =============================================================================

def percentage_of(current: float, target: float) -> float:
    """current as a percentage of target, clamped to 0-100; 0 when target <= 0."""
    if target <= 0:
        return 0.0
    return min(100.0, max(0.0, current / target * 100))


def compute_goal_progress(
    goal: Goal,
    accounts: Optional[Iterable[Account]] = None,
    contributions: Optional[Iterable[ManualContribution]] = None,
    transactions: Optional[Iterable[SyncedTransaction]] = None,
) -> GoalProgress:
    """
    Compute progress for one goal.

    Args:
        goal: The goal definition
        accounts: Known accounts (for linked balances)
        contributions: Manual contributions (for unlinked goals)
        transactions: Synced transactions (for payment / deposit history)

    Returns:
        GoalProgress. For debt goals with target 0, target is the inferred
        original debt.
    """
    linked = linked_accounts(goal, accounts)
    contributions = list(contributions or [])
    transactions = list(transactions or [])

    if goal.type.is_debt:
        current, target, remaining = _debt_progress(goal, linked, contributions, transactions)
    else:
        current, target, remaining = _accumulation_progress(goal, linked, contributions, transactions)

    progress = GoalProgress(
        current=current,
        target=target,
        percentage=percentage_of(current, target),
        remaining=remaining,
        is_complete=current >= target,
    )

    logger.debug(
        "goal_progress_computed",
        goal_id=goal.id,
        goal_type=goal.type.value,
        linked_account_count=len(linked),
        percentage=progress.percentage,
    )
    return progress
