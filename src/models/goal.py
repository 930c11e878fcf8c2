"""
Goal Models

A goal is a target the user tracks: paying a debt down, or accumulating
savings/investments. Progress is derived, never stored.

CRITICAL: Debt goals and accumulation goals measure progress in opposite
directions. For a debt goal "current" is the amount already paid down and
"remaining" is the balance still owed.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GoalType(str, Enum):
    """
    Supported goal types.

    DEBT/DEBT_PAYOFF and INVESTING/INVESTMENT are synonyms kept for
    compatibility with goals created by older clients.
    """
    SAVINGS = "savings"
    DEBT = "debt"
    INVESTING = "investing"
    DEBT_PAYOFF = "debt_payoff"
    EMERGENCY_FUND = "emergency_fund"
    RETIREMENT = "retirement"
    INVESTMENT = "investment"
    CUSTOM = "custom"

    @property
    def is_debt(self) -> bool:
        return self in (GoalType.DEBT, GoalType.DEBT_PAYOFF)


class GoalPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Goal(BaseModel):
    """
    A target to track.

    A goal may link one account (account_id), several (account_ids), or
    both; linked_account_ids reconciles them. A debt goal may store
    target = 0, meaning "infer the original debt from the current balance
    and payment history".
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Goal id"
    )
    name: str = Field(
        default="",
        description="Display name"
    )
    type: GoalType = Field(
        default=GoalType.CUSTOM,
        description="Goal type"
    )
    account_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("account_id", "accountId"),
        description="Primary linked account"
    )
    account_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("account_ids", "accountIds"),
        description="Additional linked accounts"
    )
    target: float = Field(
        default=0.0,
        description="Target amount (0 on a debt goal means infer the original debt)"
    )
    target_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices("target_date", "targetDate"),
    )
    monthly_contribution: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("monthly_contribution", "monthlyContribution"),
    )
    priority: Optional[GoalPriority] = None
    note: Optional[str] = Field(
        default=None,
        description="User's motivation"
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        validation_alias=AliasChoices("created_at", "createdAt"),
    )

    @property
    def linked_account_ids(self) -> list[str]:
        """account_ids followed by account_id, without duplicates or blanks."""
        ids: list[str] = []
        for account_id in [*self.account_ids, self.account_id]:
            if account_id and account_id not in ids:
                ids.append(account_id)
        return ids

    @property
    def infers_original_debt(self) -> bool:
        """True when target 0 on a debt goal stands for "derive it from history"."""
        return self.type.is_debt and self.target == 0


class GoalProgress(BaseModel):
    """
    Derived progress for one goal.

    For debt goals current is the amount paid down and remaining the
    balance still owed; for accumulation goals current is the amount
    saved and remaining the gap to target.
    """
    model_config = ConfigDict(frozen=True)

    current: float
    target: float
    percentage: float = Field(
        ...,
        ge=0.0,
        le=100.0,
    )
    remaining: float
    is_complete: bool
