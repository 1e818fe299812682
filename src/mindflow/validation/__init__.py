"""Validation models shared by the compliance engine and its callers.

The progress-note compliance engine and its checks live in
``domains.progress_note.validation``.
"""

from __future__ import annotations

from mindflow.validation.models import (
    TOTAL_CHECKS,
    IssueSeverity,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "TOTAL_CHECKS",
    "IssueSeverity",
    "ValidationIssue",
    "ValidationReport",
]
