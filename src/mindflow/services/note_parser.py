"""Reading formatted notes back into sections.

Used to accept output from the completion collaborator and to validate
notes a counselor edited by hand.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from mindflow.domains.progress_note.composer import has_content, normalize_text
from mindflow.domains.progress_note.models import ClassifiedDocument, Section

# Heading at line start, optionally wrapped in markdown emphasis: "**PLAN:**", "## Plan:"
_HEADING = re.compile(
    r"^[ \t]*(?:[#*_]+[ \t]*)?("
    + "|".join(r"[ \t]+".join(map(re.escape, s.heading.split())) for s in Section)
    + r")[ \t]*(?:[*_]+[ \t]*)?:[ \t]*(?:[*_]+)?",
    re.IGNORECASE | re.MULTILINE,
)
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class FormatCheck:
    """Whether a note carries all five section headings, each with some text."""

    is_valid: bool
    missing_sections: tuple[Section, ...] = ()


def _headings_found(text: str) -> list[tuple[Section, re.Match[str]]]:
    return [(Section.from_heading(m.group(1)), m) for m in _HEADING.finditer(text)]


def check_note_format(text: str) -> FormatCheck:
    # A heading followed by no text counts as missing
    parsed = parse_formatted_note(text)
    missing = tuple(s for s in Section if not has_content(parsed[s]))
    return FormatCheck(is_valid=not missing, missing_sections=missing)


def parse_formatted_note(text: str) -> dict[Section, str]:
    """Split a formatted note on its headings.

    Every section is present in the result; headings that never appear map
    to ``""``.  A repeated heading appends to the earlier text.
    """
    text = text or ""
    parsed: dict[Section, list[str]] = {s: [] for s in Section}
    found = _headings_found(text)
    for index, (section, match) in enumerate(found):
        end = found[index + 1][1].start() if index + 1 < len(found) else len(text)
        body = _WHITESPACE.sub(" ", text[match.end():end]).strip()
        if body:
            parsed[section].append(body)
    return {s: " ".join(parts) for s, parts in parsed.items()}


def document_from_sections(sections: Mapping[Section, str]) -> ClassifiedDocument:
    """Normalize externally supplied section text without adding defaults.

    Missing or blank sections stay empty so the validator reports them.
    """
    return ClassifiedDocument(
        {
            s: normalize_text(sections[s]) if has_content(sections.get(s)) else ""
            for s in Section
        }
    )
