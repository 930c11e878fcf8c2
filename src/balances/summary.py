"""
Portfolio Summaries

Dashboard-level rollups over the account list: totals per account kind,
net worth and its daily series, and simple per-account health flags.
"""

from datetime import date as Date
from datetime import timedelta
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from src.config import LedgerSettings, get_settings
from src.models import DEBT_KINDS, Account, AccountKind, AccountType, SyncedTransaction

ASSET_KINDS = frozenset({AccountKind.DEPOSITORY, AccountKind.INVESTMENT})


class AccountHealth(str, Enum):
    OK = "ok"
    WARN = "warn"


class NetWorth(BaseModel):
    """Assets, debts and their difference."""
    model_config = ConfigDict(frozen=True)

    assets: float
    debts: float
    net: float


def sum_balances(accounts: Optional[Iterable[Account]], kinds: Iterable[AccountKind]) -> float:
    """Total balance of the accounts whose kind is in kinds."""
    wanted = set(kinds)
    return sum(a.balance for a in accounts or [] if a.kind in wanted)


def net_worth(accounts: Optional[Iterable[Account]]) -> NetWorth:
    accounts = list(accounts or [])
    assets = sum_balances(accounts, ASSET_KINDS)
    debts = sum_balances(accounts, DEBT_KINDS)
    return NetWorth(assets=assets, debts=debts, net=assets - debts)


class NetWorthPoint(BaseModel):
    """One day of the net worth chart."""
    model_config = ConfigDict(frozen=True)

    date: Date
    assets: float
    debts: float
    net: float


def net_worth_series(
    accounts: Optional[Iterable[Account]],
    transactions: Optional[Iterable[SyncedTransaction]] = None,
    days: int = 56,
    today: Optional[Date] = None,
) -> list[NetWorthPoint]:
    """
    Daily net worth, oldest first, for the dashboard chart.

    Starts flat at today's assets and debts. Each dated transaction then
    shifts assets by its amount on every day from its date onward; debts
    stay flat. Undated transactions are ignored.
    """
    accounts = list(accounts or [])
    today = today or Date.today()
    assets_now = sum_balances(accounts, ASSET_KINDS)
    debts_now = sum_balances(accounts, DEBT_KINDS)

    days_back = range(days - 1, -1, -1)
    dates = [today - timedelta(days=offset) for offset in days_back]
    assets = [assets_now] * len(dates)

    dated = sorted((t for t in transactions or [] if t.date is not None), key=lambda t: t.date)
    for transaction in dated:
        start = next((i for i, day in enumerate(dates) if day >= transaction.date), None)
        if start is None:
            continue
        for i in range(start, len(dates)):
            assets[i] += transaction.amount

    return [
        NetWorthPoint(date=day, assets=total, debts=debts_now, net=total - debts_now)
        for day, total in zip(dates, assets)
    ]


def group_accounts_by_type(
    accounts: Optional[Iterable[Account]],
) -> dict[AccountType, list[Account]]:
    """Accounts grouped by type, groups in first-seen order."""
    groups: dict[AccountType, list[Account]] = {}
    for account in accounts or []:
        groups.setdefault(account.type, []).append(account)
    return groups


def highest_apr(accounts: Optional[Iterable[Account]]) -> Optional[float]:
    """Highest APR among credit accounts, or None when none carries one."""
    aprs = [
        a.apr for a in accounts or []
        if a.kind == AccountKind.CREDIT and a.apr
    ]
    return max(aprs) if aprs else None


def account_health(
    account: Account,
    settings: Optional[LedgerSettings] = None,
) -> AccountHealth:
    """
    Flag accounts worth a second look.

    - credit with APR above the high-APR threshold
    - checking below the low-balance threshold
    - loan with a zero minimum payment
    """
    settings = settings or get_settings().ledger

    if account.kind == AccountKind.CREDIT and account.apr and account.apr > settings.high_apr_threshold:
        return AccountHealth.WARN
    if account.type == AccountType.CHECKING and account.balance < settings.low_checking_balance:
        return AccountHealth.WARN
    if account.kind == AccountKind.LOAN and account.min_payment == 0:
        return AccountHealth.WARN
    return AccountHealth.OK
