"""
Tests for the activity merge engine and description formatting.

Test strategy:
1. Formatting helpers on their own
2. Global and single-account merges from fixture movements
3. Ordering rules (newest first, stable ties, missing dates last)
"""

import pytest
from datetime import date

from src.activity import (
    contributions_for_goal,
    describe_linked,
    describe_manual,
    merge_account_activity,
    merge_activity,
    recent_activity,
    strip_redundant_terms,
    to_sentence_case,
    to_title_case,
)
from src.config import LedgerSettings
from src.models import ActivitySource, ManualContribution, SyncedTransaction


class TestDescriptionFormatting:
    """Tests for casing and redundancy stripping."""

    def test_sentence_case(self):
        """Test that only the first word is capitalized."""
        assert to_sentence_case("COFFEE SHOP") == "Coffee shop"

    def test_sentence_case_strips_store_number_and_restores_brand(self):
        """Test store number removal and brand spelling."""
        assert to_sentence_case("WHOLE FOODS #123") == "Whole Foods"

    def test_title_case(self):
        """Test that every word is capitalized."""
        assert to_title_case("EMERGENCY FUND DEPOSIT") == "Emergency Fund Deposit"

    def test_empty_text(self):
        """Test that missing text formats to an empty string."""
        assert to_sentence_case(None) == ""
        assert to_title_case("") == ""

    def test_strip_redundant_terms(self):
        """Test that words repeating the category are removed."""
        assert strip_redundant_terms("Grocery outlet", "Groceries") == "Outlet"

    def test_strip_keeps_original_when_nothing_remains(self):
        """Test that a description made only of the category survives."""
        assert strip_redundant_terms("Groceries", "Groceries") == "Groceries"

    def test_strip_without_category(self):
        """Test that no category means no stripping."""
        assert strip_redundant_terms("Grocery outlet", None) == "Grocery outlet"

    def test_describe_linked_retirement_uses_title_case(self):
        """Test title case and spelling for retirement deposits."""
        assert describe_linked("ROTH IRA CONTRIBUTION", "Transfer") == "Roth IRA Contribution"

    def test_describe_linked_regular_uses_sentence_case(self):
        """Test sentence case for ordinary purchases."""
        assert describe_linked("WHOLE FOODS #123", "Groceries") == "Whole Foods"

    def test_describe_manual(self):
        """Test that manual descriptions are sentence-cased."""
        assert describe_manual("birthday money") == "Birthday money"


class TestMergeActivity:
    """Tests for the global activity feed."""

    def test_every_movement_becomes_one_entry(self, grocery_purchase, birthday_deposit, accounts, ledger_settings):
        """Test that entry count equals movement count."""
        entries = merge_activity([grocery_purchase], [birthday_deposit], accounts, ledger_settings)
        assert len(entries) == 2
        assert [e.id for e in entries] == ["transaction-t1", "contribution-c1"]

    def test_entry_fields(self, grocery_purchase, birthday_deposit, accounts, ledger_settings):
        """Test the projection of both sources."""
        linked, manual = merge_activity([grocery_purchase], [birthday_deposit], accounts, ledger_settings)

        assert linked.source == ActivitySource.LINKED
        assert linked.category == "Groceries"
        assert linked.description == "Whole Foods"
        assert linked.account_name == "Everyday Checking"
        assert linked.amount == -50.0

        assert manual.source == ActivitySource.MANUAL
        assert manual.category == "Transfer"
        assert manual.description == "Birthday money"
        assert manual.is_editable is True

    def test_unknown_account_gets_placeholder(self, ledger_settings):
        """Test that a missing account resolves to the placeholder name."""
        orphan = SyncedTransaction(id="t9", account_id="gone", amount=-5.0, date=date(2024, 2, 1))
        entries = merge_activity([orphan], [], [], ledger_settings)
        assert entries[0].account_name == "Unknown Account"

    def test_placeholder_is_configurable(self):
        """Test that the placeholder name comes from settings."""
        orphan = ManualContribution(id="c9", account_id="gone", amount=5.0)
        settings = LedgerSettings(unknown_account_name="(deleted)")
        entries = merge_activity([], [orphan], [], settings)
        assert entries[0].account_name == "(deleted)"

    def test_none_inputs(self, ledger_settings):
        """Test that absent inputs give an empty ledger."""
        assert merge_activity(None, None, None, ledger_settings) == []

    def test_idempotent(self, grocery_purchase, birthday_deposit, accounts, ledger_settings):
        """Test that merging twice gives equal results."""
        first = merge_activity([grocery_purchase], [birthday_deposit], accounts, ledger_settings)
        second = merge_activity([grocery_purchase], [birthday_deposit], accounts, ledger_settings)
        assert first == second


class TestOrdering:
    """Tests for newest-first ordering."""

    def test_newest_first(self, ledger_settings):
        """Test that entries are sorted by date descending."""
        transactions = [
            SyncedTransaction(id="old", account_id="a", date=date(2024, 1, 1)),
            SyncedTransaction(id="new", account_id="a", date=date(2024, 3, 1)),
            SyncedTransaction(id="mid", account_id="a", date=date(2024, 2, 1)),
        ]
        entries = merge_activity(transactions, [], [], ledger_settings)
        assert [e.id for e in entries] == ["transaction-new", "transaction-mid", "transaction-old"]

    def test_same_day_keeps_input_order_linked_first(self, ledger_settings):
        """Test stable ordering of same-day entries."""
        day = date(2024, 1, 1)
        transactions = [
            SyncedTransaction(id="t1", account_id="a", date=day),
            SyncedTransaction(id="t2", account_id="a", date=day),
        ]
        contributions = [ManualContribution(id="c1", account_id="a", date=day)]
        entries = merge_activity(transactions, contributions, [], ledger_settings)
        assert [e.id for e in entries] == ["transaction-t1", "transaction-t2", "contribution-c1"]

    def test_missing_dates_sort_last(self, ledger_settings):
        """Test that undated entries are treated as oldest."""
        transactions = [
            SyncedTransaction(id="undated", account_id="a"),
            SyncedTransaction(id="dated", account_id="a", date=date(2020, 1, 1)),
        ]
        entries = merge_activity(transactions, [], [], ledger_settings)
        assert [e.id for e in entries] == ["transaction-dated", "transaction-undated"]


class TestAccountActivity:
    """Tests for single-account merges and filters."""

    def test_only_owned_movements(self, grocery_purchase, birthday_deposit):
        """Test that other accounts' movements are excluded."""
        foreign = SyncedTransaction(id="t2", account_id="acc-cc", amount=25.0, date=date(2024, 1, 11))
        entries = merge_account_activity(
            [grocery_purchase, foreign], [birthday_deposit], "acc-chk", "Everyday Checking"
        )
        assert [e.id for e in entries] == ["transaction-t1", "contribution-c1"]
        assert all(e.account_name == "Everyday Checking" for e in entries)

    def test_contributions_for_goal(self):
        """Test filtering contributions by goal."""
        contributions = [
            ManualContribution(id="c1", goal_id="g1", amount=10),
            ManualContribution(id="c2", goal_id="g2", amount=20),
            ManualContribution(id="c3", amount=30),
        ]
        assert [c.id for c in contributions_for_goal(contributions, "g1")] == ["c1"]


class TestRecentActivity:
    """Tests for the truncated feed."""

    def _transactions(self, count):
        return [
            SyncedTransaction(id=f"t{i}", account_id="a", date=date(2024, 1, i + 1))
            for i in range(count)
        ]

    def test_explicit_limit(self, ledger_settings):
        """Test truncation to the newest entries."""
        entries = recent_activity(self._transactions(5), [], [], limit=2, settings=ledger_settings)
        assert [e.id for e in entries] == ["transaction-t4", "transaction-t3"]

    def test_default_limit_from_settings(self):
        """Test that the default limit comes from settings."""
        settings = LedgerSettings(recent_activity_limit=3)
        assert len(recent_activity(self._transactions(5), [], [], settings=settings)) == 3

    def test_zero_limit(self, ledger_settings):
        """Test that a zero limit gives an empty feed."""
        assert recent_activity(self._transactions(5), [], [], limit=0, settings=ledger_settings) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
