"""Compliance check functions, one module per concern."""

from __future__ import annotations

from mindflow.domains.progress_note.validation.checks.clinical_content import (
    check_asam_reference,
    check_goal_reference,
    check_measurable_indicator,
)
from mindflow.domains.progress_note.validation.checks.section_length import check_section_lengths

__all__ = [
    "check_asam_reference",
    "check_goal_reference",
    "check_measurable_indicator",
    "check_section_lengths",
]
