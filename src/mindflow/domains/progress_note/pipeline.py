"""Note pipeline: raw narrative to a validated five-section progress note.

Stages run in a fixed order, each a pure function over immutable tables:
substitution, segmentation, classification, accumulation, composition,
validation, rendering.  Only the accumulation map is per-call state.
"""

from __future__ import annotations

import logging
from typing import Iterable

from mindflow.domains.progress_note.classifier import SectionClassifier
from mindflow.domains.progress_note.composer import SectionComposer, join_sentences
from mindflow.domains.progress_note.lexicon import Lexicon
from mindflow.domains.progress_note.models import ProcessedNote, Section
from mindflow.domains.progress_note.section_rules import SectionRuleTable
from mindflow.domains.progress_note.segmenter import split_sentences
from mindflow.domains.progress_note.validation import ComplianceValidator
from mindflow.formatters.text_formatter import render_note

log = logging.getLogger(__name__)


class NotePipeline:
    """Builds the lexicon and rule table once, then processes notes.

    Construction fails fast with a ``ConfigurationError`` subclass when a
    lexicon entry or the rule table is malformed; ``process_input`` itself
    never raises for any string input.
    """

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        rules: SectionRuleTable | None = None,
    ) -> None:
        self.lexicon = lexicon or Lexicon()
        self.rules = rules or SectionRuleTable.default()
        self.classifier = SectionClassifier(self.rules)
        self.composer = SectionComposer(self.rules)
        self.validator = ComplianceValidator(self.rules)

    def process_input(self, raw_text: str) -> ProcessedNote:
        """Transform a casual narrative into a compliant progress note."""
        enhanced = self.lexicon.apply_mappings(raw_text or "")
        accumulated = self.accumulate(split_sentences(enhanced))
        document = self.composer.compose(accumulated)
        compliance = self.validator.validate(document)
        return ProcessedNote(
            sections=document,
            formatted_note=render_note(document),
            compliance=compliance,
        )

    def accumulate(self, sentences: Iterable[str]) -> dict[Section, str]:
        """Classify each sentence and join them per section, in input order."""
        buckets: dict[Section, list[str]] = {section: [] for section in Section}
        for sentence in sentences:
            section, trigger = self.classifier.explain(sentence)
            log.debug("Classified as %s (trigger=%r): %s", section.value, trigger, sentence)
            buckets[section].append(sentence)

        log.debug(
            "Accumulated sentences: %s",
            {section.value: len(items) for section, items in buckets.items()},
        )
        return {section: join_sentences(items) for section, items in buckets.items()}
