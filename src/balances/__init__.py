"""Balance reconciliation package."""

from src.balances.reconciler import account_balance, opening_balance, running_balances
from src.balances.summary import (
    ASSET_KINDS,
    AccountHealth,
    NetWorth,
    NetWorthPoint,
    account_health,
    group_accounts_by_type,
    highest_apr,
    net_worth,
    net_worth_series,
    sum_balances,
)

__all__ = [
    "ASSET_KINDS",
    "AccountHealth",
    "NetWorth",
    "NetWorthPoint",
    "account_balance",
    "account_health",
    "group_accounts_by_type",
    "highest_apr",
    "net_worth",
    "net_worth_series",
    "opening_balance",
    "running_balances",
    "sum_balances",
]
