"""Validation data models: checks, issues, and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Number of compliance checks behind the completeness percentage
TOTAL_CHECKS = 5


class IssueSeverity(str, Enum):
    """Severity of a validation issue."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """A single issue found during validation."""

    check_id: str
    severity: IssueSeverity
    message: str
    section_key: str = ""
    actual_value: str = ""
    expected_hint: str = ""


@dataclass
class ValidationReport:
    """Aggregated result of running all compliance checks against a note.

    Derived per call and never persisted.  Only ERROR issues count against
    ``completeness_percent``; warnings are advisory.
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Error messages in the order the checks produced them."""
        return [i.message for i in self.issues if i.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[str]:
        return [i.message for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def completeness_percent(self) -> float:
        """``max(0, (5 - errors) / 5 * 100)``."""
        return max(0.0, (TOTAL_CHECKS - len(self.errors)) / TOTAL_CHECKS * 100)

    def issues_by_section(self) -> dict[str, list[ValidationIssue]]:
        """Group issues by section key (``""`` for whole-note issues)."""
        grouped: dict[str, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.section_key, []).append(issue)
        return grouped

    def to_dict(self) -> dict[str, object]:
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "completeness_percent": self.completeness_percent,
        }
