"""
Shared fixtures for the ledger engine tests.

All fixtures build plain in-memory values; nothing touches the network
or the filesystem.
"""

from datetime import date

import pytest

from src.config import LedgerSettings
from src.models import (
    Account,
    AccountType,
    Goal,
    GoalType,
    LedgerSnapshot,
    ManualContribution,
    SyncedTransaction,
)


@pytest.fixture
def ledger_settings():
    """Ledger settings with the documented defaults."""
    return LedgerSettings(
        unknown_account_name="Unknown Account",
        recent_activity_limit=10,
        currency_symbol="$",
    )


@pytest.fixture
def checking():
    return Account(id="acc-chk", name="Everyday Checking", type=AccountType.CHECKING, balance=1000.0)


@pytest.fixture
def savings():
    return Account(
        id="acc-sav",
        name="Rainy Day",
        type=AccountType.SAVINGS,
        balance=2000.0,
        goal_target=5000.0,
    )


@pytest.fixture
def credit_card():
    return Account(id="acc-cc", name="Visa", type=AccountType.CREDIT_CARD, balance=400.0, apr=24.99)


@pytest.fixture
def student_loan():
    return Account(id="acc-loan", name="Student Loan", type=AccountType.STUDENT, balance=9000.0, min_payment=150.0)


@pytest.fixture
def accounts(checking, savings, credit_card, student_loan):
    return [checking, savings, credit_card, student_loan]


@pytest.fixture
def grocery_purchase():
    """Outflow on checking, tagged Travel by the aggregator."""
    return SyncedTransaction(
        id="t1",
        account_id="acc-chk",
        amount=-50.0,
        date=date(2024, 1, 10),
        name="WHOLE FOODS #123",
        categories=["Travel"],
    )


@pytest.fixture
def birthday_deposit():
    return ManualContribution(
        id="c1",
        account_id="acc-chk",
        amount=200.0,
        date=date(2024, 1, 5),
        description="birthday money",
    )


@pytest.fixture
def card_debt_goal():
    return Goal(id="g-cc", name="Kill the Visa", type=GoalType.DEBT, account_id="acc-cc", target=1000.0)


@pytest.fixture
def snapshot(accounts, grocery_purchase, birthday_deposit, card_debt_goal):
    return LedgerSnapshot(
        accounts=accounts,
        transactions=[grocery_purchase],
        contributions=[birthday_deposit],
        goals=[card_debt_goal],
    )
