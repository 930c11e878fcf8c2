"""Goal progress package."""

from src.goals.inference import (
    ACCOUNT_GOAL_ID_PREFIX,
    DEBT_GOAL_ID_PREFIX,
    debt_goals_for_unpaid_accounts,
    goal_from_account,
    goals_from_accounts,
    primary_goal,
)
from src.goals.progress import (
    PAYMENT_SIGN_BY_KIND,
    PaymentSign,
    compute_goal_progress,
    is_debt_payment,
    linked_account,
    linked_accounts,
    percentage_of,
)

__all__ = [
    "ACCOUNT_GOAL_ID_PREFIX",
    "DEBT_GOAL_ID_PREFIX",
    "PAYMENT_SIGN_BY_KIND",
    "PaymentSign",
    "compute_goal_progress",
    "debt_goals_for_unpaid_accounts",
    "goal_from_account",
    "goals_from_accounts",
    "is_debt_payment",
    "linked_account",
    "linked_accounts",
    "percentage_of",
    "primary_goal",
]
