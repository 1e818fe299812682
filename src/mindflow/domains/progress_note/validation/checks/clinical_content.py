"""Regulatory content checks: ASAM reference, measurable outcome, goal reference."""

from __future__ import annotations

import re

from mindflow.domains.progress_note.models import ClassifiedDocument, Section
from mindflow.validation.models import IssueSeverity, ValidationIssue

ASAM_REFERENCE = re.compile(r"dimension\s+[1-6]|asam", re.IGNORECASE)

OUTCOME_WORDS: tuple[str, ...] = (
    "abstinent", "sober", "sobriety", "attended", "completed", "reduced", "increased",
    "decreased", "improved", "improvement", "consecutive", "daily", "weekly",
)
MEASURABLE_INDICATOR = re.compile(
    r"\d+|%|\bpercent\b|\b(?:" + "|".join(OUTCOME_WORDS) + r")\b",
    re.IGNORECASE,
)

GOAL_REFERENCE = re.compile(r"goal\s*#?\s*\d+|objective|treatment plan", re.IGNORECASE)


def check_asam_reference(doc: ClassifiedDocument) -> list[ValidationIssue]:
    """The note as a whole must cite an ASAM dimension or level."""
    if ASAM_REFERENCE.search(doc.serialize()):
        return []
    return [
        ValidationIssue(
            check_id="CV-002",
            severity=IssueSeverity.ERROR,
            message="Note must reference ASAM dimension",
            expected_hint="'Dimension 1'-'Dimension 6' or 'ASAM'",
        )
    ]


def check_measurable_indicator(doc: ClassifiedDocument) -> list[ValidationIssue]:
    """PROGRESS needs a number, a percentage, or an outcome word."""
    text = doc[Section.PROGRESS]
    if MEASURABLE_INDICATOR.search(text):
        return []
    return [
        ValidationIssue(
            check_id="CV-003",
            severity=IssueSeverity.ERROR,
            message="PROGRESS must include measurable indicator",
            section_key=Section.PROGRESS.value,
            actual_value=text[:80],
            expected_hint="A count, a percentage, or an outcome such as 'abstinent' or 'attended'",
        )
    ]


def check_goal_reference(doc: ClassifiedDocument) -> list[ValidationIssue]:
    """PROGRESS must tie back to the treatment plan."""
    text = doc[Section.PROGRESS]
    if GOAL_REFERENCE.search(text):
        return []
    return [
        ValidationIssue(
            check_id="CV-004",
            severity=IssueSeverity.ERROR,
            message="PROGRESS must reference treatment plan goal",
            section_key=Section.PROGRESS.value,
            actual_value=text[:80],
            expected_hint="'Goal #N', 'objective', or 'treatment plan'",
        )
    ]
