"""Progress-note domain: lexicon, segmentation, classification, composition, validation.

- Enums: ``Section``, ``LexiconCategory``
- Models: ``LexiconEntry``, ``ClassifiedDocument``, ``ProcessedNote``
- Rule data: ``LEXICON_ENTRIES``, ``SectionRuleTable``
- Stages: ``Lexicon``, ``split_sentences``, ``SectionClassifier``,
  ``SectionComposer``, ``ComplianceValidator``
- Entry point: ``NotePipeline``
"""

from __future__ import annotations

from mindflow.domains.progress_note.classifier import SectionClassifier
from mindflow.domains.progress_note.composer import SectionComposer
from mindflow.domains.progress_note.lexicon import LEXICON_ENTRIES, Lexicon
from mindflow.domains.progress_note.models import (
    ClassifiedDocument,
    LexiconCategory,
    LexiconEntry,
    ProcessedNote,
    Section,
)
from mindflow.domains.progress_note.pipeline import NotePipeline
from mindflow.domains.progress_note.section_rules import SectionRule, SectionRuleTable
from mindflow.domains.progress_note.segmenter import SentenceSequence, split_sentences
from mindflow.domains.progress_note.validation import ComplianceValidator

__all__ = [
    # Enums
    "LexiconCategory",
    "Section",
    # Models
    "ClassifiedDocument",
    "LexiconEntry",
    "ProcessedNote",
    # Rule data
    "LEXICON_ENTRIES",
    "SectionRule",
    "SectionRuleTable",
    # Stages
    "ComplianceValidator",
    "Lexicon",
    "SectionClassifier",
    "SectionComposer",
    "SentenceSequence",
    "split_sentences",
    # Entry point
    "NotePipeline",
]
