"""Plain-text progress note rendering."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mindflow.domains.progress_note.models import ClassifiedDocument, ProcessedNote


def render_note(document: ClassifiedDocument) -> str:
    """Render sections as ``"<HEADING>:\\n<text>\\n"`` blocks separated by blank lines."""
    return "\n".join(f"{section.heading}:\n{text}\n" for section, text in document.items())


class TextFormatter:
    """Renders a ProcessedNote as the plain-text note a clinician pastes into the EHR."""

    def format(self, note: ProcessedNote, **kwargs: Any) -> bytes:
        return note.formatted_note.encode("utf-8")

    def format_to_file(self, note: ProcessedNote, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(note, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/plain"
