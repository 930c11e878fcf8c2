"""
Data Models Package

This package contains all Pydantic models used by the ledger engine.
All data flowing through the engine must conform to these schemas.
"""

from src.models.account import (
    DEBT_KINDS,
    Account,
    AccountKind,
    AccountType,
    map_aggregator_account_type,
)
from src.models.goal import (
    Goal,
    GoalPriority,
    GoalProgress,
    GoalType,
)
from src.models.ledger import (
    CONTRIBUTION_ID_PREFIX,
    TRANSACTION_ID_PREFIX,
    ActivityEntry,
    ActivitySource,
    LedgerSnapshot,
    ManualContribution,
    SyncedTransaction,
)
from src.models.validation import (
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    # Account models
    "DEBT_KINDS",
    "Account",
    "AccountKind",
    "AccountType",
    "map_aggregator_account_type",
    # Goal models
    "Goal",
    "GoalPriority",
    "GoalProgress",
    "GoalType",
    # Ledger models
    "CONTRIBUTION_ID_PREFIX",
    "TRANSACTION_ID_PREFIX",
    "ActivityEntry",
    "ActivitySource",
    "LedgerSnapshot",
    "ManualContribution",
    "SyncedTransaction",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
]
