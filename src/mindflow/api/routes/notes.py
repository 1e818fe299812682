"""Progress-note endpoints: process a narrative, validate an edited note."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from mindflow.domains.progress_note.models import ProcessedNote, Section
from mindflow.services.note_parser import document_from_sections
from mindflow.validation.models import ValidationReport

router = APIRouter(tags=["notes"])


class NoteRequest(BaseModel):
    """A casual counselor narrative."""

    text: str = ""
    use_completion: bool = True


class ValidationIssueResponse(BaseModel):
    """A single compliance issue."""

    check_id: str
    severity: str
    message: str
    section_key: str = ""
    actual_value: str = ""
    expected_hint: str = ""


class ComplianceResponse(BaseModel):
    """Compliance report for a note."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    completeness_percent: float
    issues: list[ValidationIssueResponse] = Field(default_factory=list)


class NoteResponse(BaseModel):
    """A processed note."""

    sections: dict[str, str]
    formatted_note: str
    compliance: ComplianceResponse
    source: str = "pipeline"
    completion_error: str | None = None


class ValidateRequest(BaseModel):
    """Section text keyed by section value, e.g. ``{"plan": "..."}``."""

    sections: dict[Section, str] = Field(default_factory=dict)


def _compliance_response(report: ValidationReport) -> ComplianceResponse:
    return ComplianceResponse(
        is_valid=report.is_valid,
        errors=report.errors,
        warnings=report.warnings,
        completeness_percent=report.completeness_percent,
        issues=[
            ValidationIssueResponse(
                check_id=i.check_id,
                severity=i.severity.value,
                message=i.message,
                section_key=i.section_key,
                actual_value=i.actual_value,
                expected_hint=i.expected_hint,
            )
            for i in report.issues
        ],
    )


def _note_response(note: ProcessedNote, **extra: object) -> NoteResponse:
    return NoteResponse(
        sections=note.sections.to_dict(),
        formatted_note=note.formatted_note,
        compliance=_compliance_response(note.compliance),
        **extra,
    )


@router.post("/notes", response_model=NoteResponse)
async def create_note(request: NoteRequest, req: Request) -> NoteResponse:
    """Turn a casual narrative into a five-section progress note."""
    service = req.app.state.note_service
    result = await service.create_note(request.text, use_completion=request.use_completion)
    return _note_response(
        result.note,
        source=result.source,
        completion_error=result.completion_error,
    )


@router.post("/notes/validate", response_model=ComplianceResponse)
async def validate_note(request: ValidateRequest, req: Request) -> ComplianceResponse:
    """Check an externally edited note; absent sections are reported, not defaulted."""
    service = req.app.state.note_service
    document = document_from_sections(request.sections)
    return _compliance_response(service.pipeline.validator.validate(document))
