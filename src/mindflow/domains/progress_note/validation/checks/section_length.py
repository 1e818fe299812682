"""Section presence and length checks."""

from __future__ import annotations

from mindflow.domains.progress_note.models import ClassifiedDocument
from mindflow.domains.progress_note.section_rules import SectionRuleTable
from mindflow.validation.models import IssueSeverity, ValidationIssue


def check_section_lengths(doc: ClassifiedDocument, rules: SectionRuleTable) -> list[ValidationIssue]:
    """One error per section under its minimum; one warning per section over its maximum."""
    issues: list[ValidationIssue] = []
    for section, text in doc.items():
        rule = rules[section]
        length = len(text.strip())
        if length < rule.min_length:
            issues.append(
                ValidationIssue(
                    check_id="CV-001",
                    severity=IssueSeverity.ERROR,
                    message=(
                        f"{section.heading} section missing or too short "
                        f"({length} < {rule.min_length} characters)"
                    ),
                    section_key=section.value,
                    actual_value=str(length),
                    expected_hint=f">= {rule.min_length} characters",
                )
            )
        elif length > rule.max_length:
            issues.append(
                ValidationIssue(
                    check_id="CV-101",
                    severity=IssueSeverity.WARNING,
                    message=(
                        f"{section.heading} section exceeds recommended length "
                        f"({length} > {rule.max_length} characters)"
                    ),
                    section_key=section.value,
                    actual_value=str(length),
                    expected_hint=f"<= {rule.max_length} characters",
                )
            )
    return issues
