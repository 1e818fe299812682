"""Progress-note domain models: enums, rule entries, and composed documents.

This is the canonical location for the progress-note data structures.
The pipeline, validator, formatters and services import from here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from mindflow.validation.models import ValidationReport

# ── Sections ─────────────────────────────────────────────────────────


class Section(str, Enum):
    """The five sections of a compliant progress note, in document order."""

    SERVICE_PROVIDED = "service_provided"
    CLIENT_RESPONSE = "client_response"
    INTERVENTIONS = "interventions"
    PROGRESS = "progress"
    PLAN = "plan"

    @property
    def heading(self) -> str:
        """Heading used in the rendered note, e.g. ``SERVICE PROVIDED``."""
        return self.value.replace("_", " ").upper()

    @classmethod
    def from_heading(cls, heading: str) -> Section:
        """Resolve a rendered heading (any case, spaces or underscores)."""
        key = "_".join(heading.strip().lower().replace("_", " ").split())
        return cls(key)


# ── Lexicon ──────────────────────────────────────────────────────────


class LexiconCategory(str, Enum):
    """Semantic groups of casual-to-clinical substitutions."""

    EMOTIONAL = "emotional"
    PROGRESS = "progress"
    SUBSTANCE_USE = "substance_use"
    THERAPEUTIC_ACTION = "therapeutic_action"
    ENGAGEMENT = "engagement"
    RISK = "risk"
    COGNITIVE = "cognitive"
    SOCIAL = "social"
    MEDICAL = "medical"
    MEASUREMENT = "measurement"
    RECOVERY_TOOLS = "recovery_tools"


@dataclass(frozen=True)
class LexiconEntry:
    """A single casual phrase and the clinical phrase that replaces it."""

    pattern: str
    replacement: str
    category: LexiconCategory


# ── Composed output ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ClassifiedDocument:
    """Final text for each of the five sections.

    All five sections are always present; the composer guarantees each
    value is non-empty and ends in a single period.
    """

    sections: dict[Section, str]

    def __post_init__(self) -> None:
        missing = [s.value for s in Section if s not in self.sections]
        if missing:
            raise ValueError(f"ClassifiedDocument missing sections: {', '.join(missing)}")

    def __getitem__(self, section: Section) -> str:
        return self.sections[section]

    def __iter__(self) -> Iterator[Section]:
        return iter(Section)

    def __len__(self) -> int:
        return len(self.sections)

    def items(self) -> list[tuple[Section, str]]:
        """Sections and their text in document order."""
        return [(s, self.sections[s]) for s in Section]

    def serialize(self) -> str:
        """All section text joined in document order (used for whole-note checks)."""
        return " ".join(text for _, text in self.items())

    def to_dict(self) -> dict[str, str]:
        return {s.value: text for s, text in self.items()}


@dataclass(frozen=True)
class ProcessedNote:
    """Result of one ``process_input`` call."""

    sections: ClassifiedDocument
    formatted_note: str
    compliance: ValidationReport
