"""Progress-note compliance validation.

Usage::

    from mindflow.domains.progress_note.validation import ComplianceValidator
    report = ComplianceValidator().validate(document)
    if not report.is_valid:
        print(report.errors)
"""

from __future__ import annotations

from mindflow.domains.progress_note.validation.engine import ComplianceValidator

__all__ = ["ComplianceValidator"]
