"""Activity merge package."""

from src.activity.formatting import (
    describe_linked,
    describe_manual,
    strip_redundant_terms,
    to_sentence_case,
    to_title_case,
)
from src.activity.merge import (
    contributions_for_account,
    contributions_for_goal,
    merge_account_activity,
    merge_activity,
    recent_activity,
    transactions_for_account,
)

__all__ = [
    "contributions_for_account",
    "contributions_for_goal",
    "describe_linked",
    "describe_manual",
    "merge_account_activity",
    "merge_activity",
    "recent_activity",
    "strip_redundant_terms",
    "to_sentence_case",
    "to_title_case",
    "transactions_for_account",
]
