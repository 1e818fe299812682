"""Compliance validator: runs every check against a composed note."""

from __future__ import annotations

import logging

from mindflow.domains.progress_note.models import ClassifiedDocument
from mindflow.domains.progress_note.section_rules import SectionRuleTable
from mindflow.domains.progress_note.validation.checks import (
    check_asam_reference,
    check_goal_reference,
    check_measurable_indicator,
    check_section_lengths,
)
from mindflow.validation.models import ValidationReport

log = logging.getLogger(__name__)


class ComplianceValidator:
    """Validates a ClassifiedDocument against 245G documentation minimums.

    Validation is pure computation and advisory: the document is never
    modified, and callers decide what to do with a failing report.
    """

    def __init__(self, rules: SectionRuleTable | None = None) -> None:
        self._rules = rules or SectionRuleTable.default()

    def validate(self, doc: ClassifiedDocument) -> ValidationReport:
        report = ValidationReport()
        report.issues.extend(check_section_lengths(doc, self._rules))
        report.issues.extend(check_asam_reference(doc))
        report.issues.extend(check_measurable_indicator(doc))
        report.issues.extend(check_goal_reference(doc))

        if report.is_valid:
            log.debug("Note passed compliance (%d warnings)", len(report.warnings))
        else:
            log.info(
                "Note failed %d compliance checks, completeness %.0f%%",
                len(report.errors),
                report.completeness_percent,
            )
        return report
