"""Per-section rule table: triggers, defaults, length limits, and lookups.

The table is a frozen value built once and handed to the classifier,
composer, and validator.  ``SectionRuleTable.default()`` is the 245G table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from mindflow.domains.progress_note.models import Section
from mindflow.exceptions import RuleTableError

# Most specific / override-prone sections first; first trigger hit wins
CLASSIFICATION_PRIORITY: tuple[Section, ...] = (
    Section.PLAN,
    Section.PROGRESS,
    Section.INTERVENTIONS,
    Section.CLIENT_RESPONSE,
    Section.SERVICE_PROVIDED,
)

FALLBACK_SECTION = Section.CLIENT_RESPONSE

SECTION_TRIGGERS: dict[Section, tuple[str, ...]] = {
    Section.PLAN: (
        "continue", "next", "homework", "schedule", "follow up", "follow-up",
        "see you", "see him", "see her", "see them", "assigned", "assignment",
        "plan to", "referral", "refer to", "will attend", "will complete",
    ),
    Section.PROGRESS: (
        "progress", "goal", "objective", "days", "weeks sober", "better", "worse",
        "improve", "decline", "deterioration", "decompensation", "abstinent",
        "sobriety", "meeting", "measurable", "relapse episode", "substance use episode",
    ),
    Section.INTERVENTIONS: (
        "worked on", "implemented", "intervention", "taught", "psychoeducation",
        "practiced", "skill rehearsal", "reviewed and reinforced", "discussed and processed",
        "facilitated", "clarified therapeutic", "therapeutic exploration", "cbt", "dbt",
        "therapy", "technique", "exercise", "role play", "role-play", "worksheet",
        "motivational",
    ),
    Section.CLIENT_RESPONSE: (
        "seemed", "appeared", "presented", "reported", "stated", "expressed",
        "displayed", "exhibited", "demonstrated", "affect", "mood", "engaged",
        "participated", "tearful", "eye contact",
    ),
    Section.SERVICE_PROVIDED: (
        "session", "provided", "minute", "hour", "telehealth", "in-person", "in person",
        "virtual", "zoom", "phone", "video", "individual", "group", "family",
        "one-on-one", "1:1", "iop", "asam", "level", "outpatient", "residential",
    ),
}

SECTION_DEFAULTS: dict[Section, str] = {
    Section.SERVICE_PROVIDED: (
        "Provided 50-minute individual substance use disorder counseling session "
        "at ASAM Level 2.1 intensive outpatient program via in-person service."
    ),
    Section.CLIENT_RESPONSE: "Client actively participated in session with appropriate engagement.",
    Section.INTERVENTIONS: (
        "Provided supportive counseling and therapeutic interventions addressing treatment goals."
    ),
    Section.PROGRESS: "Client maintaining progress toward treatment plan goals.",
    Section.PLAN: "Continue current treatment plan and session schedule.",
}

# (min, max) characters; max only produces advisory warnings
SECTION_LENGTH_LIMITS: dict[Section, tuple[int, int]] = {
    Section.SERVICE_PROVIDED: (50, 200),
    Section.CLIENT_RESPONSE: (100, 500),
    Section.INTERVENTIONS: (80, 400),
    Section.PROGRESS: (60, 300),
    Section.PLAN: (40, 200),
}

# Elements the regulatory template expects in each section
SECTION_REQUIRED_ELEMENTS: dict[Section, tuple[str, ...]] = {
    Section.SERVICE_PROVIDED: ("duration", "session_type", "asam_level", "modality"),
    Section.CLIENT_RESPONSE: ("engagement", "presentation"),
    Section.INTERVENTIONS: ("technique", "asam_dimension"),
    Section.PROGRESS: ("goal_reference", "measurable_outcome"),
    Section.PLAN: ("next_steps",),
}


# ── SERVICE PROVIDED template ───────────────────────────────────────

SERVICE_TEMPLATE = "Provided {duration}-minute {session_type} session at ASAM Level {level} {program} via {modality}."


@dataclass(frozen=True)
class ServiceDefaults:
    duration: str = "50"
    session_type: str = "individual substance use disorder counseling"
    level: str = "2.1"
    program: str = "intensive outpatient program"
    modality: str = "in-person service"


# Lookup tables are scanned in declaration order; first key found wins
SESSION_TYPE_LOOKUP: dict[str, str] = {
    "individual": "individual substance use disorder counseling",
    "group": "group therapy",
    "family": "family therapy",
    "one-on-one": "individual substance use disorder counseling",
    "1:1": "individual substance use disorder counseling",
    "iop": "intensive outpatient program group",
}

MODALITY_LOOKUP: dict[str, str] = {
    "telehealth": "telehealth platform",
    "phone": "telephone",
    "in-person": "in-person service",
    "in person": "in-person service",
    "virtual": "telehealth platform",
    "zoom": "video conferencing",
    "video": "video conferencing",
}

ASAM_LEVEL_LOOKUP: dict[str, str] = {
    "iop": "2.1",
    "intensive outpatient": "2.1",
    "outpatient": "1.0",
    "partial": "2.5",
    "residential": "3.5",
}

PROGRAM_BY_LEVEL: dict[str, str] = {
    "1.0": "outpatient program",
    "2.1": "intensive outpatient program",
    "2.5": "partial hospitalization program",
    "3.5": "residential program",
}


@dataclass(frozen=True)
class SectionRule:
    """Everything the pipeline knows about one section."""

    section: Section
    triggers: tuple[str, ...]
    default_text: str
    min_length: int
    max_length: int
    required_elements: tuple[str, ...] = ()


@dataclass(frozen=True)
class SectionRuleTable:
    """Immutable rule table for all five sections."""

    rules: Mapping[Section, SectionRule]
    priority: tuple[Section, ...] = CLASSIFICATION_PRIORITY
    fallback: Section = FALLBACK_SECTION
    service_defaults: ServiceDefaults = field(default_factory=ServiceDefaults)

    def __post_init__(self) -> None:
        missing = [s.value for s in Section if s not in self.rules]
        if missing:
            raise RuleTableError(f"Rule table missing sections: {', '.join(missing)}")
        if sorted(self.priority, key=list(Section).index) != list(Section):
            raise RuleTableError("Classification priority must list each section exactly once")
        for section, rule in self.rules.items():
            if rule.section != section:
                raise RuleTableError(f"Rule for {section.value} is keyed under {rule.section.value}")
            if not rule.default_text.strip():
                raise RuleTableError(f"Empty default text for {section.value}")
            if not rule.default_text.endswith(".") or rule.default_text.endswith(".."):
                raise RuleTableError(f"Default text for {section.value} must end with one period")
            if rule.min_length > rule.max_length:
                raise RuleTableError(f"min_length exceeds max_length for {section.value}")
            if any(t != t.lower() or not t.strip() for t in rule.triggers):
                raise RuleTableError(f"Triggers for {section.value} must be non-empty lowercase strings")
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def __getitem__(self, section: Section) -> SectionRule:
        return self.rules[section]

    @classmethod
    def default(cls) -> SectionRuleTable:
        """The 245G rule table."""
        return cls(
            rules={
                section: SectionRule(
                    section=section,
                    triggers=SECTION_TRIGGERS[section],
                    default_text=SECTION_DEFAULTS[section],
                    min_length=SECTION_LENGTH_LIMITS[section][0],
                    max_length=SECTION_LENGTH_LIMITS[section][1],
                    required_elements=SECTION_REQUIRED_ELEMENTS[section],
                )
                for section in Section
            }
        )
