"""Section composition: defaults, SERVICE PROVIDED template, and enhancements.

``SectionComposer.compose`` is total: any mapping of section text,
including empty strings or missing keys, yields a complete document.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Mapping

from mindflow.domains.progress_note.models import ClassifiedDocument, Section
from mindflow.domains.progress_note.section_rules import (
    ASAM_LEVEL_LOOKUP,
    MODALITY_LOOKUP,
    PROGRAM_BY_LEVEL,
    SERVICE_TEMPLATE,
    SESSION_TYPE_LOOKUP,
    SectionRuleTable,
)

log = logging.getLogger(__name__)

_WORD = re.compile(r"\w")
_WHITESPACE = re.compile(r"\s+")
_TRAILING_PUNCT = re.compile(r"[\s.!?]+$")

_DURATION_MINUTES = re.compile(r"(\d+)\s*(?:minute|min)", re.IGNORECASE)
_DURATION_HOURS = re.compile(r"(\d+(?:\.\d+)?)\s*(?:hour|hr)", re.IGNORECASE)
_DURATION_MIXED = re.compile(
    r"(\d+(?:\.\d+)?)\s*(?:hours?|hrs?)\b[\s,]*(?:and\s+)?(\d+)\s*(?:minute|min)",
    re.IGNORECASE,
)
_EXPLICIT_LEVEL = re.compile(r"\blevel\s*(\d\.\d)\b", re.IGNORECASE)
_TECHNIQUE = re.compile(r"\b(?:cbt|dbt|mi|motivational|cognitive|behavioral)\b", re.IGNORECASE)

ENGAGEMENT_SENTENCE = "Actively engaged in therapeutic discussion."
RECEPTIVENESS_SENTENCE = "Demonstrated receptiveness to therapeutic interventions."
DIMENSION_3_SENTENCE = (
    "Implemented evidence-based therapeutic interventions addressing Dimension 3 (Emotional/Behavioral)."
)
CBT_SENTENCE = "Utilized Cognitive Behavioral Therapy techniques to address treatment goals."
GOAL_PREFIX = "Progress toward Goal #1: "
DIMENSION_5_SENTENCE = (
    "Dimension 5 (Relapse Potential) risk being actively addressed through skill development."
)
CONTINUATION_SENTENCE = "Continue current treatment approach."


def has_content(text: str | None) -> bool:
    """True when *text* holds at least one word character."""
    return bool(text) and _WORD.search(text) is not None


def normalize_text(text: str) -> str:
    """Collapse whitespace, trim, and end with exactly one period."""
    collapsed = _WHITESPACE.sub(" ", text).strip()
    return _TRAILING_PUNCT.sub("", collapsed) + "."


def join_sentences(sentences: Iterable[str]) -> str:
    """Join classified sentences into one paragraph, capitalizing each."""
    cleaned = [_TRAILING_PUNCT.sub("", s.strip()) for s in sentences]
    cleaned = [s[:1].upper() + s[1:] for s in cleaned if has_content(s)]
    return ". ".join(cleaned) + "." if cleaned else ""


def _keyword_patterns(lookup: Mapping[str, str]) -> tuple[tuple[re.Pattern[str], str], ...]:
    return tuple(
        (re.compile(rf"(?<!\w){re.escape(key)}(?!\w)", re.IGNORECASE), value)
        for key, value in lookup.items()
    )


def _first_lookup(text: str, patterns: tuple[tuple[re.Pattern[str], str], ...]) -> str | None:
    for pattern, value in patterns:
        if pattern.search(text):
            return value
    return None


class SectionComposer:
    """Turns accumulated per-section text into the final five-section document."""

    def __init__(self, rules: SectionRuleTable | None = None) -> None:
        self._rules = rules or SectionRuleTable.default()
        self._session_types = _keyword_patterns(SESSION_TYPE_LOOKUP)
        self._modalities = _keyword_patterns(MODALITY_LOOKUP)
        self._levels = _keyword_patterns(ASAM_LEVEL_LOOKUP)
        self._enhancers: dict[Section, Callable[[str], str]] = {
            Section.SERVICE_PROVIDED: self.compose_service_provided,
            Section.CLIENT_RESPONSE: self.compose_client_response,
            Section.INTERVENTIONS: self.compose_interventions,
            Section.PROGRESS: self.compose_progress,
            Section.PLAN: self.compose_plan,
        }

    def compose(self, accumulated: Mapping[Section, str]) -> ClassifiedDocument:
        sections: dict[Section, str] = {}
        for section in Section:
            raw = accumulated.get(section) or ""
            if has_content(raw):
                text = self._enhancers[section](normalize_text(raw))
            else:
                text = self._rules[section].default_text
            sections[section] = normalize_text(text)
        return ClassifiedDocument(sections)

    # ── SERVICE PROVIDED ────────────────────────────────────────────

    def extract_duration(self, text: str) -> str | None:
        """Session length in minutes; "1 hour 30 minutes" adds up to 90."""
        mixed = _DURATION_MIXED.search(text)
        if mixed:
            return str(round(float(mixed.group(1)) * 60) + int(mixed.group(2)))
        minutes = _DURATION_MINUTES.search(text)
        if minutes:
            return minutes.group(1)
        hours = _DURATION_HOURS.search(text)
        if hours:
            return str(round(float(hours.group(1)) * 60))
        return None

    def extract_session_type(self, text: str) -> str | None:
        return _first_lookup(text, self._session_types)

    def extract_asam_level(self, text: str) -> str | None:
        explicit = _EXPLICIT_LEVEL.search(text)
        if explicit:
            return explicit.group(1)
        return _first_lookup(text, self._levels)

    def extract_modality(self, text: str) -> str | None:
        return _first_lookup(text, self._modalities)

    def compose_service_provided(self, text: str) -> str:
        defaults = self._rules.service_defaults
        level = self.extract_asam_level(text) or defaults.level
        fields = {
            "duration": self.extract_duration(text) or defaults.duration,
            "session_type": self.extract_session_type(text) or defaults.session_type,
            "level": level,
            "program": PROGRAM_BY_LEVEL.get(level, defaults.program),
            "modality": self.extract_modality(text) or defaults.modality,
        }
        log.debug("Service provided fields: %s", fields)
        return SERVICE_TEMPLATE.format(**fields)

    # ── Narrative sections ──────────────────────────────────────────

    @staticmethod
    def compose_client_response(text: str) -> str:
        lower = text.lower()
        if "engaged" not in lower and "participated" not in lower:
            text = f"{text} {ENGAGEMENT_SENTENCE}"
        if "demonstrated" not in lower and "exhibited" not in lower:
            text = f"{text} {RECEPTIVENESS_SENTENCE}"
        return text

    @staticmethod
    def compose_interventions(text: str) -> str:
        # Both checks look at the clinician's text, not the inserted dimension sentence
        lower = text.lower()
        if "dimension" not in lower:
            text = f"{DIMENSION_3_SENTENCE} {text}"
        if not _TECHNIQUE.search(lower):
            text = f"{text} {CBT_SENTENCE}"
        return text

    @staticmethod
    def compose_progress(text: str) -> str:
        lower = text.lower()
        if "goal" not in lower:
            text = f"{GOAL_PREFIX}{text}"
        if "dimension" not in lower:
            text = f"{text} {DIMENSION_5_SENTENCE}"
        return text

    @staticmethod
    def compose_plan(text: str) -> str:
        lower = text.lower()
        if "continue" not in lower and "next" not in lower:
            text = f"{CONTINUATION_SENTENCE} {text}"
        return text
