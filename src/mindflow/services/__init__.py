"""Application services built on the progress-note pipeline."""

from __future__ import annotations

from mindflow.services.completion_service import CompletionOutcome, CompletionService
from mindflow.services.note_parser import (
    FormatCheck,
    check_note_format,
    document_from_sections,
    parse_formatted_note,
)
from mindflow.services.note_service import NoteResult, NoteService, create_note_service

__all__ = [
    "CompletionOutcome",
    "CompletionService",
    "FormatCheck",
    "NoteResult",
    "NoteService",
    "check_note_format",
    "document_from_sections",
    "create_note_service",
    "parse_formatted_note",
]
