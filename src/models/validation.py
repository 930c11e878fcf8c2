"""
Validation Result Models

Produced by the snapshot validator. Validation reports problems for the
host to surface; it never modifies or rejects the data it inspects.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single validation issue."""

    field: str = Field(
        ...,
        description="Which collection or field has the issue (e.g. 'goals[g1].target')"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (unknown_account, duplicate_id, ...)"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggestion for how to fix the issue"
    )


class ValidationResult(BaseModel):
    """Outcome of validating one ledger snapshot."""

    validated_at: datetime = Field(
        default_factory=datetime.utcnow
    )
    is_valid: bool = Field(
        ...,
        description="False when any error-level issue was found"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )

    # Warnings don't block but should be shown
    warnings: list[str] = Field(
        default_factory=list,
        description="Messages of warning-level issues"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")
