"""Sentence-to-section classification by ordered trigger scan."""

from __future__ import annotations

from mindflow.domains.progress_note.models import Section
from mindflow.domains.progress_note.section_rules import SectionRuleTable


class SectionClassifier:
    """Assigns every sentence to exactly one section.

    Sections are tried in the table's priority order (PLAN, PROGRESS,
    INTERVENTIONS, CLIENT_RESPONSE, SERVICE_PROVIDED); the first whose
    trigger keyword appears as a case-insensitive substring wins.  A
    sentence matching nothing lands in the table's fallback section.
    """

    def __init__(self, rules: SectionRuleTable | None = None) -> None:
        self._rules = rules or SectionRuleTable.default()

    def classify(self, sentence: str) -> Section:
        section, _ = self.explain(sentence)
        return section

    def explain(self, sentence: str) -> tuple[Section, str | None]:
        """Return the section and the trigger that selected it (``None`` for the fallback)."""
        lower = sentence.lower()
        for section in self._rules.priority:
            for trigger in self._rules[section].triggers:
                if trigger in lower:
                    return section, trigger
        return self._rules.fallback, None
