"""mindflow: casual counselor narratives to compliant five-section progress notes.

Usage::

    from mindflow import NotePipeline

    note = NotePipeline().process_input("Client was anxious. Worked on breathing.")
    print(note.formatted_note)
    print(note.compliance.completeness_percent)

With the optional completion collaborator::

    from mindflow import AppSettings, create_note_service

    service = create_note_service(AppSettings())
    result = await service.create_note(text)
"""

from __future__ import annotations

from mindflow.core.config import AppSettings
from mindflow.domains.progress_note import (
    ClassifiedDocument,
    ComplianceValidator,
    Lexicon,
    LexiconCategory,
    LexiconEntry,
    NotePipeline,
    ProcessedNote,
    Section,
    SectionClassifier,
    SectionComposer,
    SectionRuleTable,
    split_sentences,
)
from mindflow.exceptions import (
    CompletionError,
    ConfigurationError,
    LexiconConfigError,
    MindflowError,
    NoteFormatError,
    RuleTableError,
)
from mindflow.services import CompletionService, NoteResult, NoteService, create_note_service
from mindflow.validation import ValidationIssue, ValidationReport

__all__ = [
    # Settings
    "AppSettings",
    # Pipeline
    "NotePipeline",
    "Lexicon",
    "SectionClassifier",
    "SectionComposer",
    "ComplianceValidator",
    "SectionRuleTable",
    "split_sentences",
    # Models
    "Section",
    "LexiconCategory",
    "LexiconEntry",
    "ClassifiedDocument",
    "ProcessedNote",
    "ValidationIssue",
    "ValidationReport",
    # Services
    "CompletionService",
    "NoteService",
    "NoteResult",
    "create_note_service",
    # Errors
    "MindflowError",
    "ConfigurationError",
    "LexiconConfigError",
    "RuleTableError",
    "CompletionError",
    "NoteFormatError",
]
