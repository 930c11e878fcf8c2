"""
Synthetic Goals

Some goals exist without an explicit Goal record:
- an account carrying goal_target is its own goal
- a debt account with a balance owed and no goal covering it implies a
  payoff goal whose original debt must be inferred (target 0)

These adapters turn accounts into Goal values so the progress engine only
ever sees goals. They never modify the accounts or the existing goals.
"""

from datetime import datetime
from typing import Iterable, Optional

from src.models import Account, AccountKind, AccountType, Goal, GoalType

ACCOUNT_GOAL_ID_PREFIX = "account-goal-"
DEBT_GOAL_ID_PREFIX = "debt-"

_GOAL_TYPE_BY_KIND = {
    AccountKind.DEPOSITORY: GoalType.SAVINGS,
    AccountKind.INVESTMENT: GoalType.INVESTING,
    AccountKind.CREDIT: GoalType.DEBT,
    AccountKind.LOAN: GoalType.DEBT,
}


def goal_from_account(account: Account, created_at: Optional[datetime] = None) -> Goal:
    """Goal for an account carrying goal_target."""
    return Goal(
        id=f"{ACCOUNT_GOAL_ID_PREFIX}{account.id}",
        name=account.name,
        type=_GOAL_TYPE_BY_KIND[account.kind],
        account_id=account.id,
        target=account.goal_target or 0.0,
        created_at=created_at or datetime.utcnow(),
    )


def goals_from_accounts(
    accounts: Optional[Iterable[Account]],
    created_at: Optional[datetime] = None,
) -> list[Goal]:
    """One goal per account that carries a goal_target."""
    return [
        goal_from_account(account, created_at)
        for account in accounts or []
        if account.goal_target is not None
    ]


def debt_goals_for_unpaid_accounts(
    accounts: Optional[Iterable[Account]],
    goals: Optional[Iterable[Goal]],
    created_at: Optional[datetime] = None,
) -> list[Goal]:
    """
    Payoff goals for debt accounts that still owe money and no goal links.

    The goals use target 0 so the original debt is inferred from the
    balance and payment history.
    """
    covered = set()
    for goal in goals or []:
        covered.update(goal.linked_account_ids)

    return [
        Goal(
            id=f"{DEBT_GOAL_ID_PREFIX}{account.id}",
            name=f"Pay off {account.name}" if account.name else "Pay off debt",
            type=GoalType.DEBT,
            account_id=account.id,
            target=0.0,
            created_at=created_at or datetime.utcnow(),
        )
        for account in accounts or []
        if account.is_debt and account.balance > 0 and account.id not in covered
    ]


def primary_goal(
    accounts: Optional[Iterable[Account]],
    primary_account_id: Optional[str] = None,
) -> Optional[Goal]:
    """
    The goal to feature on the dashboard.

    The account the user chose as primary wins when it carries a goal
    target; otherwise the first savings account with a positive target.
    """
    accounts = list(accounts or [])

    if primary_account_id:
        chosen = next((a for a in accounts if a.id == primary_account_id), None)
        if chosen is not None and chosen.goal_target is not None:
            return goal_from_account(chosen)

    fallback = next(
        (
            a for a in accounts
            if a.type == AccountType.SAVINGS and a.goal_target is not None and a.goal_target > 0
        ),
        None,
    )
    return goal_from_account(fallback) if fallback is not None else None
