"""
Ledger Models

Two sources of money movement feed the ledger:
- SyncedTransaction: reported by the bank-data aggregator, read-only
- ManualContribution: entered by the user, editable

Both are projected into ActivityEntry, the unified (derived, never
persisted) view rendered in activity feeds and account detail pages.

DESIGN DECISION: Aggregator payloads are accepted in the aggregator's own
key shape (account_id, name, category). Absent fields mean "no
information" and get neutral defaults instead of failing validation.
"""

from datetime import date as Date
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.models.account import Account
from src.models.goal import Goal


class ActivitySource(str, Enum):
    """Where an activity entry came from."""
    LINKED = "linked"   # aggregator-synced transaction
    MANUAL = "manual"   # user-entered contribution


# Activity ids are prefixed by source so both id spaces can share one feed
TRANSACTION_ID_PREFIX = "transaction-"
CONTRIBUTION_ID_PREFIX = "contribution-"


class SyncedTransaction(BaseModel):
    """
    One aggregator-reported movement.

    Sign convention depends on the account: depository outflows are
    negative, while credit card payments arrive as positive amounts.
    Callers must branch on the owning account's kind.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(
        ...,
        description="Aggregator transaction id"
    )
    account_id: str = Field(
        default="",
        description="Owning account id"
    )
    amount: float = Field(
        default=0.0,
        description="Signed amount"
    )
    date: Optional[Date] = Field(
        default=None,
        description="Calendar date of the movement"
    )
    name: str = Field(
        default="",
        description="Raw description reported by the aggregator"
    )
    merchant_name: Optional[str] = Field(
        default=None,
        description="Merchant name, when the aggregator resolved one"
    )
    categories: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("categories", "category"),
        description="Raw category tags, most general first"
    )

    @field_validator('categories', mode='before')
    @classmethod
    def none_means_no_tags(cls, v):
        return [] if v is None else v

    @field_validator('account_id', 'amount', 'name', mode='before')
    @classmethod
    def none_means_default(cls, v, info: ValidationInfo):
        return cls.model_fields[info.field_name].default if v is None else v

    @property
    def description(self) -> str:
        """Best available description text."""
        return self.name or self.merchant_name or "Transaction"


class ManualContribution(BaseModel):
    """
    A user-entered movement (deposit, payment, transfer).

    Optionally earmarked for a goal via goal_id.
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        description="Contribution id"
    )
    account_id: str = Field(
        default="",
        validation_alias=AliasChoices("account_id", "accountId"),
        description="Owning account id"
    )
    amount: float = Field(
        default=0.0,
        description="Signed amount"
    )
    date: Optional[Date] = Field(
        default=None,
        description="Calendar date entered by the user"
    )
    description: str = Field(
        default="",
        description="Free-text description"
    )
    goal_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("goal_id", "goalId"),
        description="Goal this contribution counts toward"
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        validation_alias=AliasChoices("created_at", "createdAt"),
        description="When the user recorded it"
    )

    @field_validator('account_id', 'amount', 'description', mode='before')
    @classmethod
    def none_means_default(cls, v, info: ValidationInfo):
        return cls.model_fields[info.field_name].default if v is None else v


class ActivityEntry(BaseModel):
    """
    Unified ledger row for either source.

    running_balance is only populated for single-account views,
    by the balance reconciler.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    date: Optional[Date] = None
    description: str = ""
    amount: float = 0.0
    account_id: str = ""
    account_name: str = ""
    source: ActivitySource
    category: str = "Other"
    running_balance: Optional[float] = None

    @property
    def is_editable(self) -> bool:
        """Only manual entries may be edited or deleted."""
        return self.source == ActivitySource.MANUAL


class LedgerSnapshot(BaseModel):
    """
    Everything the engine needs for one calculation.

    Supplied by the host's session store on every call.
    """

    accounts: list[Account] = Field(default_factory=list)
    transactions: list[SyncedTransaction] = Field(default_factory=list)
    contributions: list[ManualContribution] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)

    def find_account(self, account_id: Optional[str]) -> Optional[Account]:
        return next((a for a in self.accounts if a.id == account_id), None)

    def find_goal(self, goal_id: Optional[str]) -> Optional[Goal]:
        return next((g for g in self.goals if g.id == goal_id), None)
