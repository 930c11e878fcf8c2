"""
Ledger Engine Facade

This module ties the pure components together into the view models the
UI renders:
1. Account detail (account -> merged ledger -> running balances)
2. Goal detail (goal -> linked accounts -> progress -> contributions)
3. Activity feed (all accounts, newest first)
4. Goal board (explicit goals plus synthetic goals from accounts)

DESIGN DECISION: The facade holds settings, never data. Every call
receives the current LedgerSnapshot from the host's store and computes
from scratch, so repeated calls on an unchanged snapshot return the same
ledgers and progress. Lookups of unknown accounts or goals return None, the
"not found" view, rather than raising.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.activity import contributions_for_goal, merge_account_activity, recent_activity
from src.balances import running_balances
from src.config import LedgerSettings, get_settings
from src.goals import (
    compute_goal_progress,
    debt_goals_for_unpaid_accounts,
    goals_from_accounts,
    linked_accounts,
)
from src.models import (
    Account,
    ActivityEntry,
    Goal,
    GoalProgress,
    LedgerSnapshot,
    ManualContribution,
)
from src.telemetry import get_logger

logger = get_logger(__name__)


class AccountDetail(BaseModel):
    """An account with its ledger, newest first, running balances attached."""
    model_config = ConfigDict(frozen=True)

    account: Account
    activity: list[ActivityEntry]


class GoalDetail(BaseModel):
    """A goal with its progress, linked accounts and contributions."""
    model_config = ConfigDict(frozen=True)

    goal: Goal
    progress: GoalProgress
    linked_accounts: list[Account]
    contributions: list[ManualContribution]


class GoalCard(BaseModel):
    """A goal and its progress, as listed on the goal board."""
    model_config = ConfigDict(frozen=True)

    goal: Goal
    progress: GoalProgress
    synthetic: bool = False


class LedgerEngine:
    """
    Computes account, goal and activity views from a snapshot.

    Usage:
        engine = LedgerEngine()
        detail = engine.account_detail(store.snapshot(), "acc-1")
    """

    def __init__(self, settings: Optional[LedgerSettings] = None):
        self._settings = settings or get_settings().ledger

    def account_detail(self, snapshot: LedgerSnapshot, account_id: str) -> Optional[AccountDetail]:
        """Ledger of one account with running balances, or None if unknown."""
        account = snapshot.find_account(account_id)
        if account is None:
            logger.info("account_not_found", account_id=account_id)
            return None

        entries = merge_account_activity(
            snapshot.transactions,
            snapshot.contributions,
            account.id,
            account.name,
        )
        return AccountDetail(
            account=account,
            activity=running_balances(entries, account.balance),
        )

    def goal_detail(self, snapshot: LedgerSnapshot, goal_id: str) -> Optional[GoalDetail]:
        """Progress and context for one goal, or None if unknown."""
        goal = snapshot.find_goal(goal_id)
        if goal is None:
            logger.info("goal_not_found", goal_id=goal_id)
            return None

        return GoalDetail(
            goal=goal,
            progress=self.progress(snapshot, goal),
            linked_accounts=linked_accounts(goal, snapshot.accounts),
            contributions=contributions_for_goal(snapshot.contributions, goal.id),
        )

    def progress(self, snapshot: LedgerSnapshot, goal: Goal) -> GoalProgress:
        return compute_goal_progress(
            goal,
            snapshot.accounts,
            snapshot.contributions,
            snapshot.transactions,
        )

    def activity_feed(self, snapshot: LedgerSnapshot, limit: Optional[int] = None) -> list[ActivityEntry]:
        """Newest activity across all accounts."""
        return recent_activity(
            snapshot.transactions,
            snapshot.contributions,
            snapshot.accounts,
            limit=limit,
            settings=self._settings,
        )

    def all_goals(self, snapshot: LedgerSnapshot) -> list[GoalCard]:
        """
        Every goal worth showing.

        Explicit goals first, then goals implied by accounts carrying a
        goal target, then payoff goals for debt accounts nothing covers.
        """
        explicit = list(snapshot.goals)
        covered = {account_id for goal in explicit for account_id in goal.linked_account_ids}

        from_accounts = [
            goal for goal in goals_from_accounts(snapshot.accounts)
            if goal.account_id not in covered
        ]
        debts = debt_goals_for_unpaid_accounts(snapshot.accounts, explicit + from_accounts)

        cards = [GoalCard(goal=g, progress=self.progress(snapshot, g)) for g in explicit]
        cards += [
            GoalCard(goal=g, progress=self.progress(snapshot, g), synthetic=True)
            for g in from_accounts + debts
        ]

        logger.debug(
            "goal_board_built",
            explicit_count=len(explicit),
            synthetic_count=len(cards) - len(explicit),
        )
        return cards
