"""
Snapshot Validation

The engine itself never rejects input: missing accounts get a placeholder
name, zero targets give 0%, and so on. That keeps every view renderable,
but it also hides data problems. The validator surfaces them.

Checks:
- Structural: duplicate ids within a collection (error)
- Referential: movements or goals pointing at unknown accounts,
  contributions pointing at unknown goals (warning)
- Goal sanity: negative targets, zero-target accumulation goals, and
  debt goals with target 0 and no linked account, which cannot be told
  apart from "no goal configured" (warning)

IMPORTANT: Validation NEVER fixes issues. It reports them for the host
to show or log.
"""

from collections import Counter
from typing import Iterable

from src.models import (
    LedgerSnapshot,
    ValidationIssue,
    ValidationResult,
)
from src.telemetry import get_logger

logger = get_logger(__name__)


class SnapshotValidator:
    """Validates a ledger snapshot and reports what it finds."""

    def _check_duplicate_ids(self, snapshot: LedgerSnapshot) -> list[ValidationIssue]:
        issues = []
        collections: dict[str, Iterable[str]] = {
            "accounts": (a.id for a in snapshot.accounts),
            "transactions": (t.id for t in snapshot.transactions),
            "contributions": (c.id for c in snapshot.contributions),
            "goals": (g.id for g in snapshot.goals),
        }
        for name, ids in collections.items():
            for item_id, count in Counter(ids).items():
                if count > 1:
                    issues.append(ValidationIssue(
                        field=name,
                        issue_type="duplicate_id",
                        message=f"{count} {name} share the id '{item_id}'",
                        severity="error",
                        suggested_fix="Ids must be unique within a collection",
                    ))
        return issues

    def _check_references(self, snapshot: LedgerSnapshot) -> list[ValidationIssue]:
        issues = []
        account_ids = {a.id for a in snapshot.accounts}
        goal_ids = {g.id for g in snapshot.goals}

        for transaction in snapshot.transactions:
            if transaction.account_id not in account_ids:
                issues.append(ValidationIssue(
                    field=f"transactions[{transaction.id}].account_id",
                    issue_type="unknown_account",
                    message=f"Transaction {transaction.id} belongs to unknown account '{transaction.account_id}'",
                    severity="warning",
                    suggested_fix="Re-sync accounts from the aggregator",
                ))

        for contribution in snapshot.contributions:
            if contribution.account_id not in account_ids:
                issues.append(ValidationIssue(
                    field=f"contributions[{contribution.id}].account_id",
                    issue_type="unknown_account",
                    message=f"Contribution {contribution.id} belongs to unknown account '{contribution.account_id}'",
                    severity="warning",
                    suggested_fix="Move the contribution to an existing account",
                ))
            if contribution.goal_id and contribution.goal_id not in goal_ids:
                issues.append(ValidationIssue(
                    field=f"contributions[{contribution.id}].goal_id",
                    issue_type="unknown_goal",
                    message=f"Contribution {contribution.id} counts toward unknown goal '{contribution.goal_id}'",
                    severity="warning",
                ))

        for goal in snapshot.goals:
            for account_id in goal.linked_account_ids:
                if account_id not in account_ids:
                    issues.append(ValidationIssue(
                        field=f"goals[{goal.id}].account_ids",
                        issue_type="unknown_account",
                        message=f"Goal '{goal.name or goal.id}' links unknown account '{account_id}'",
                        severity="warning",
                        suggested_fix="Unlink the account or re-sync accounts",
                    ))

        return issues

    def _check_goals(self, snapshot: LedgerSnapshot) -> list[ValidationIssue]:
        issues = []
        for goal in snapshot.goals:
            label = goal.name or goal.id
            if goal.target < 0:
                issues.append(ValidationIssue(
                    field=f"goals[{goal.id}].target",
                    issue_type="negative_target",
                    message=f"Goal '{label}' has a negative target ({goal.target})",
                    severity="warning",
                    suggested_fix="Set a positive target amount",
                ))
            elif goal.infers_original_debt and not goal.linked_account_ids:
                issues.append(ValidationIssue(
                    field=f"goals[{goal.id}].target",
                    issue_type="ambiguous_target",
                    message=(
                        f"Debt goal '{label}' has no target and no linked account; "
                        "progress will show as 0%"
                    ),
                    severity="warning",
                    suggested_fix="Link the debt account or enter the original amount owed",
                ))
            elif goal.target == 0 and not goal.type.is_debt:
                issues.append(ValidationIssue(
                    field=f"goals[{goal.id}].target",
                    issue_type="missing_target",
                    message=f"Goal '{label}' has no target amount",
                    severity="warning",
                    suggested_fix="Set a target amount",
                ))
        return issues

    def validate(self, snapshot: LedgerSnapshot) -> ValidationResult:
        """
        Run every check against a snapshot.

        Returns:
            ValidationResult with all issues found
        """
        issues = []
        issues.extend(self._check_duplicate_ids(snapshot))
        issues.extend(self._check_references(snapshot))
        issues.extend(self._check_goals(snapshot))

        warnings = [issue.message for issue in issues if issue.severity == "warning"]
        is_valid = not any(issue.severity == "error" for issue in issues)

        if issues:
            logger.warning(
                "snapshot_validation_issues",
                issue_count=len(issues),
                error_count=sum(1 for i in issues if i.severity == "error"),
            )

        return ValidationResult(
            is_valid=is_valid,
            issues=issues,
            warnings=warnings,
        )

    def summary(self, result: ValidationResult) -> str:
        """User-facing summary of a validation result."""
        if not result.issues:
            return "All checks passed."

        lines = []

        if result.has_errors:
            lines.append("Some data is inconsistent:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"  - {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"    Fix: {issue.suggested_fix}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append("Please review:")
            for warning in result.warnings:
                lines.append(f"  - {warning}")

        return "\n".join(lines)
