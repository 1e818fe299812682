"""Casual-to-clinical phrase lexicon and the substitution engine.

Entries are applied longest pattern first (ties keep declaration order), so
"good mood" is rewritten before anything shorter could claim part of it.
Text inserted by a substitution is protected: later, shorter rules never
match inside it.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from mindflow.domains.progress_note.models import LexiconCategory, LexiconEntry
from mindflow.exceptions import LexiconConfigError

log = logging.getLogger(__name__)

_C = LexiconCategory

_CATEGORY_MAPPINGS: dict[LexiconCategory, dict[str, str]] = {
    _C.EMOTIONAL: {
        "upset": "exhibited emotional distress",
        "sad": "presented with depressed affect",
        "happy": "displayed euthymic mood",
        "angry": "demonstrated emotional dysregulation",
        "anxious": "presented with anxiety symptoms",
        "worried": "expressed anxiety regarding",
        "stressed": "reported elevated stress levels",
        "frustrated": "exhibited frustration tolerance difficulties",
        "crying": "displayed tearful affect",
        "laughing": "demonstrated appropriate affect",
        "scared": "expressed fear and apprehension",
        "nervous": "presented with observable anxiety",
        "calm": "appeared emotionally regulated",
        "mad": "expressed anger",
        "depressed": "exhibited depressive symptoms",
        "fine": "reported stable mood",
        "okay": "indicated baseline functioning",
        "irritable": "presented with irritable mood",
        "overwhelmed": "reported feeling overwhelmed by current stressors",
        "good mood": "presented with positive affect",
        "bad mood": "displayed dysphoric mood",
        "mood swings": "exhibited affective lability",
    },
    _C.PROGRESS: {
        "doing better": "demonstrating clinical improvement",
        "doing worse": "showing decompensation",
        "getting better": "exhibiting positive treatment response",
        "not doing well": "experiencing symptom exacerbation",
        "improved": "showed measurable progress",
        "declined": "demonstrated clinical decline",
        "stable": "maintained current functioning level",
        "worse": "exhibited symptom deterioration",
    },
    _C.SUBSTANCE_USE: {
        "clean": "abstinent from substances",
        "sober": "abstinent from substances",
        "using": "actively using substances",
        "relapsed": "experienced substance use episode",
        "slipped": "had a brief substance use episode",
        "drank": "consumed alcohol",
        "used": "engaged in substance use",
        "high": "under the influence of substances",
        "drunk": "intoxicated with alcohol",
        "cravings": "reported substance cravings",
        "craving": "reported substance cravings",
    },
    _C.THERAPEUTIC_ACTION: {
        "worked on": "implemented interventions targeting",
        "talked about": "discussed and processed",
        "practiced": "engaged in skill rehearsal",
        "went over": "reviewed and reinforced",
        "taught": "provided psychoeducation regarding",
        "explained": "clarified therapeutic concepts",
        "reviewed": "systematically examined",
        "explored": "conducted therapeutic exploration of",
        "processed": "facilitated processing of",
    },
    _C.ENGAGEMENT: {
        "participated": "actively engaged in therapeutic discussion",
        "cooperative": "demonstrated therapeutic cooperation",
        "resistant": "exhibited resistance to therapeutic interventions",
        "motivated": "displayed intrinsic motivation for change",
        "willing": "expressed willingness to engage",
        "reluctant": "showed reluctance to participate",
        "engaged": "actively participated in session activities",
    },
    _C.RISK: {
        "suicidal": "endorsed suicidal ideation",
        "wants to die": "endorsed passive death wishes",
        "hopeless": "expressed hopelessness",
        "self-harm": "reported self-injurious behavior",
        "unsafe": "reported safety concerns",
        "overdosed": "experienced an overdose event",
    },
    _C.COGNITIVE: {
        "confused": "presented with cognitive disorganization",
        "forgetful": "reported memory difficulties",
        "couldn't focus": "reported impaired concentration",
        "foggy": "reported cognitive clouding",
        "negative thoughts": "reported negative automatic thoughts",
        "all or nothing thinking": "exhibited dichotomous thinking patterns",
    },
    _C.SOCIAL: {
        "family problems": "reported family system conflict",
        "fighting with": "reported interpersonal conflict with",
        "lonely": "reported social isolation",
        "no friends": "reported limited social support",
        "kicked out": "experienced housing instability",
        "lost job": "experienced employment loss",
    },
    _C.MEDICAL: {
        "can't sleep": "reported sleep disturbance",
        "not sleeping": "reported sleep disturbance",
        "no appetite": "reported decreased appetite",
        "shaky": "presented with tremors",
        "sick": "reported physical illness",
        "meds": "medications",
    },
    _C.MEASUREMENT: {
        "a lot": "significantly",
        "a little": "minimally",
        "every day": "daily",
        "most days": "on the majority of days",
        "sometimes": "intermittently",
        "once a week": "weekly",
        "twice a week": "two times weekly",
        "about": "approximately",
        "out of 10": "on a 0-10 self-rating scale",
    },
    _C.RECOVERY_TOOLS: {
        "breathing exercises": "diaphragmatic breathing exercises",
        "breathing": "breathing exercises",
        "coping skills": "coping strategies",
        "triggers": "relapse triggers",
        "12-step meetings": "12-step support group meetings",
        "meetings": "support meetings",
        "sponsor": "12-step sponsor",
        "steps": "12-step program principles",
        "prayer": "spiritual practices",
        "meditation": "mindfulness practices",
    },
}

LEXICON_ENTRIES: tuple[LexiconEntry, ...] = tuple(
    LexiconEntry(pattern=pattern, replacement=replacement, category=category)
    for category, mappings in _CATEGORY_MAPPINGS.items()
    for pattern, replacement in mappings.items()
)


class Lexicon:
    """Immutable, pre-compiled substitution table.

    Built once per pipeline; safe to share between concurrent callers since
    nothing is mutated after construction.

    Raises:
        LexiconConfigError: If an entry is malformed, duplicated, or its
            pattern cannot be compiled.
    """

    def __init__(self, entries: Iterable[LexiconEntry] = LEXICON_ENTRIES) -> None:
        declared = tuple(entries)
        _check_entries(declared)
        # sorted() is stable, so equal lengths keep declaration order
        ordered = sorted(declared, key=lambda e: -len(e.pattern))
        self._rules: tuple[tuple[LexiconEntry, re.Pattern[str]], ...] = tuple(
            (entry, _compile(entry)) for entry in ordered
        )
        log.debug("Lexicon compiled with %d entries", len(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def entries(self) -> tuple[LexiconEntry, ...]:
        """Entries in application order (longest pattern first)."""
        return tuple(entry for entry, _ in self._rules)

    def by_category(self, category: LexiconCategory) -> tuple[LexiconEntry, ...]:
        return tuple(e for e in self.entries if e.category == category)

    def apply_mappings(self, text: str) -> str:
        """Replace every whole-word casual phrase with its clinical phrase."""
        protected: list[tuple[int, int]] = []
        for entry, pattern in self._rules:
            text, protected = _substitute(pattern, entry.replacement, text, protected)
        return text


def _check_entries(entries: tuple[LexiconEntry, ...]) -> None:
    seen: dict[str, LexiconEntry] = {}
    for entry in entries:
        if not isinstance(entry, LexiconEntry):
            raise LexiconConfigError(f"Not a LexiconEntry: {entry!r}")
        if not isinstance(entry.category, LexiconCategory):
            raise LexiconConfigError(f"Unknown lexicon category {entry.category!r} for {entry.pattern!r}")
        if not entry.pattern or not entry.pattern.strip():
            raise LexiconConfigError(f"Empty pattern in {entry.category.value} entry")
        if not entry.replacement or not entry.replacement.strip():
            raise LexiconConfigError(f"Empty replacement for pattern {entry.pattern!r}")
        key = entry.pattern.casefold()
        if key in seen:
            raise LexiconConfigError(
                f"Duplicate pattern {entry.pattern!r} "
                f"({seen[key].category.value} and {entry.category.value})"
            )
        seen[key] = entry


def _compile(entry: LexiconEntry) -> re.Pattern[str]:
    # Lookarounds instead of \b so patterns with non-word edges still anchor on words
    try:
        return re.compile(rf"(?<!\w){re.escape(entry.pattern)}(?!\w)", re.IGNORECASE)
    except re.error as exc:
        raise LexiconConfigError(f"Cannot compile pattern {entry.pattern!r}: {exc}") from exc


def _overlaps(start: int, end: int, spans: list[tuple[int, int]]) -> bool:
    return any(start < s_end and s_start < end for s_start, s_end in spans)


def _substitute(
    pattern: re.Pattern[str],
    replacement: str,
    text: str,
    protected: list[tuple[int, int]],
) -> tuple[str, list[tuple[int, int]]]:
    """One left-to-right pass of a single rule over the unprotected text.

    Returns the rewritten text and the protected spans re-based onto it.
    """
    matches: list[tuple[int, int]] = []
    pos = 0
    while pos <= len(text):
        match = pattern.search(text, pos)
        if match is None:
            break
        if _overlaps(match.start(), match.end(), protected):
            pos = match.start() + 1
            continue
        matches.append((match.start(), match.end()))
        pos = match.end()

    if not matches:
        return text, protected

    spans = sorted([(s, e, False) for s, e in protected] + [(s, e, True) for s, e in matches])
    out: list[str] = []
    rebased: list[tuple[int, int]] = []
    cursor = 0
    length = 0
    for start, end, replaced in spans:
        out.append(text[cursor:start])
        length += start - cursor
        chunk = replacement if replaced else text[start:end]
        rebased.append((length, length + len(chunk)))
        out.append(chunk)
        length += len(chunk)
        cursor = end
    out.append(text[cursor:])
    return "".join(out), rebased
