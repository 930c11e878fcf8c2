"""Tests for the balance reconciler and portfolio summaries."""

import pytest
from datetime import date

from src.activity import merge_account_activity
from src.balances import (
    AccountHealth,
    account_balance,
    account_health,
    group_accounts_by_type,
    highest_apr,
    net_worth,
    net_worth_series,
    opening_balance,
    running_balances,
    sum_balances,
)
from src.config import LedgerSettings
from src.models import (
    Account,
    AccountKind,
    AccountType,
    ActivityEntry,
    ActivitySource,
    ManualContribution,
    SyncedTransaction,
)


def _entry(entry_id, amount, day):
    return ActivityEntry(id=entry_id, amount=amount, date=day, source=ActivitySource.LINKED)


class TestAccountBalance:
    """Tests for account_balance."""

    def test_sums_all_movements(self, grocery_purchase, birthday_deposit):
        """Test starting balance plus transactions plus contributions."""
        assert account_balance([grocery_purchase], [birthday_deposit], 1000.0) == pytest.approx(1150.0)

    def test_no_movements(self):
        """Test that absent movements leave the starting balance."""
        assert account_balance(None, None, 42.0) == 42.0

    def test_negative_result_allowed(self):
        """Test that overdrawn balances are not clamped."""
        outflow = SyncedTransaction(id="t", amount=-80.0)
        assert account_balance([outflow], [], 50.0) == pytest.approx(-30.0)

    def test_no_filtering(self):
        """Test that movements are summed regardless of owner."""
        contributions = [
            ManualContribution(id="c1", account_id="a", amount=10.0),
            ManualContribution(id="c2", account_id="b", amount=5.0),
        ]
        assert account_balance([], contributions, 0.0) == pytest.approx(15.0)

    def test_repeated_calls_are_identical(self, grocery_purchase, birthday_deposit):
        """Test that reconciling twice with the same inputs gives the same balance."""
        first = account_balance([grocery_purchase], [birthday_deposit], 1000.0)
        second = account_balance([grocery_purchase], [birthday_deposit], 1000.0)
        assert first == second


class TestRunningBalances:
    """Tests for running_balances."""

    def test_end_to_end_account_ledger(self, grocery_purchase, birthday_deposit):
        """Test the checking ledger anchored on a 1000 balance."""
        entries = merge_account_activity(
            [grocery_purchase], [birthday_deposit], "acc-chk", "Everyday Checking"
        )
        annotated = running_balances(entries, 1000.0)

        assert [e.date for e in annotated] == [date(2024, 1, 10), date(2024, 1, 5)]
        assert [e.running_balance for e in annotated] == pytest.approx([1000.0, 1050.0])
        assert opening_balance(entries, 1000.0) == pytest.approx(850.0)

    def test_newest_entry_equals_current_balance(self):
        """Test balance closure on a longer ledger."""
        entries = [
            _entry("e1", 0.1, date(2024, 3, 3)),
            _entry("e2", -0.2, date(2024, 3, 2)),
            _entry("e3", 0.3, date(2024, 3, 1)),
        ]
        annotated = running_balances(entries, 10.0)
        assert annotated[0].running_balance == pytest.approx(10.0)

    def test_oldest_entry_minus_amount_is_opening(self):
        """Test that the walk starts from the opening balance."""
        entries = [_entry("e1", 25.0, date(2024, 3, 2)), _entry("e2", -75.0, date(2024, 3, 1))]
        annotated = running_balances(entries, 500.0)
        oldest = annotated[-1]
        assert oldest.running_balance - oldest.amount == pytest.approx(opening_balance(entries, 500.0))

    def test_consecutive_entries_differ_by_amount(self):
        """Test that each balance is the next older balance plus the entry."""
        entries = [
            _entry("e1", 40.0, date(2024, 3, 3)),
            _entry("e2", -15.0, date(2024, 3, 2)),
            _entry("e3", 100.0, date(2024, 3, 1)),
        ]
        annotated = running_balances(entries, 300.0)
        for newer, older in zip(annotated, annotated[1:]):
            assert newer.running_balance == pytest.approx(older.running_balance + newer.amount)

    def test_empty_ledger(self):
        """Test that no entries gives no balances."""
        assert running_balances([], 100.0) == []

    def test_inputs_not_mutated(self):
        """Test that new entries are returned and inputs keep no balance."""
        entries = [_entry("e1", 5.0, date(2024, 3, 1))]
        annotated = running_balances(entries, 5.0)
        assert entries[0].running_balance is None
        assert annotated[0].running_balance == pytest.approx(5.0)
        assert annotated[0].id == entries[0].id


class TestSummaries:
    """Tests for portfolio rollups and health flags."""

    def test_sum_balances_by_kind(self, accounts):
        """Test totals per kind."""
        assert sum_balances(accounts, [AccountKind.DEPOSITORY]) == pytest.approx(3000.0)
        assert sum_balances(accounts, [AccountKind.CREDIT, AccountKind.LOAN]) == pytest.approx(9400.0)
        assert sum_balances(None, [AccountKind.CREDIT]) == 0

    def test_net_worth(self, accounts):
        """Test assets minus debts."""
        worth = net_worth(accounts)
        assert worth.assets == pytest.approx(3000.0)
        assert worth.debts == pytest.approx(9400.0)
        assert worth.net == pytest.approx(-6400.0)

    def test_group_accounts_by_type(self, accounts, checking):
        """Test grouping in first-seen order."""
        second_checking = Account(id="acc-chk2", type=AccountType.CHECKING)
        groups = group_accounts_by_type(accounts + [second_checking])
        assert list(groups)[0] == AccountType.CHECKING
        assert [a.id for a in groups[AccountType.CHECKING]] == ["acc-chk", "acc-chk2"]

    def test_highest_apr(self, accounts):
        """Test that only credit accounts count toward highest APR."""
        loan_with_apr = Account(id="l", type=AccountType.MORTGAGE, apr=40.0)
        assert highest_apr(accounts + [loan_with_apr]) == pytest.approx(24.99)
        assert highest_apr([loan_with_apr]) is None

    def test_account_health(self, ledger_settings, credit_card, student_loan, savings):
        """Test the warning rules."""
        assert account_health(credit_card, ledger_settings) == AccountHealth.WARN
        assert account_health(student_loan, ledger_settings) == AccountHealth.OK
        assert account_health(savings, ledger_settings) == AccountHealth.OK

    def test_low_checking_balance(self, ledger_settings):
        """Test the low checking balance rule."""
        low = Account(id="c", type=AccountType.CHECKING, balance=20.0)
        assert account_health(low, ledger_settings) == AccountHealth.WARN

    def test_loan_without_minimum_payment(self, ledger_settings):
        """Test the zero minimum payment rule."""
        loan = Account(id="l", type=AccountType.AUTO, balance=5000.0, min_payment=0)
        assert account_health(loan, ledger_settings) == AccountHealth.WARN

    def test_thresholds_are_configurable(self, credit_card):
        """Test that the APR threshold comes from settings."""
        lenient = LedgerSettings(high_apr_threshold=30.0)
        assert account_health(credit_card, lenient) == AccountHealth.OK


class TestNetWorthSeries:
    """Tests for the daily net worth series."""

    def test_flat_series_without_transactions(self, accounts):
        """Test that the series starts flat at today's net worth."""
        series = net_worth_series(accounts, days=3, today=date(2024, 1, 10))

        assert [p.date for p in series] == [date(2024, 1, 8), date(2024, 1, 9), date(2024, 1, 10)]
        assert all(p.assets == pytest.approx(3000.0) for p in series)
        assert all(p.debts == pytest.approx(9400.0) for p in series)
        assert all(p.net == pytest.approx(-6400.0) for p in series)

    def test_transactions_shift_assets_from_their_date(self, checking, credit_card):
        """Test that each transaction moves assets from its date onward."""
        transactions = [
            SyncedTransaction(id="t1", amount=-50.0, date=date(2024, 1, 9)),
            SyncedTransaction(id="t2", amount=20.0, date=date(2023, 12, 1)),
            SyncedTransaction(id="t3", amount=99.0),
            SyncedTransaction(id="t4", amount=5.0, date=date(2024, 1, 11)),
        ]
        series = net_worth_series([checking, credit_card], transactions, days=3, today=date(2024, 1, 10))

        assert [p.assets for p in series] == pytest.approx([1020.0, 970.0, 970.0])
        assert [p.debts for p in series] == pytest.approx([400.0, 400.0, 400.0])
        assert [p.net for p in series] == pytest.approx([620.0, 570.0, 570.0])

    def test_default_length(self, accounts):
        """Test the default eight-week window."""
        assert len(net_worth_series(accounts)) == 56

    def test_no_accounts(self):
        """Test an empty portfolio."""
        series = net_worth_series(None, days=2, today=date(2024, 1, 2))
        assert [p.net for p in series] == [0, 0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
