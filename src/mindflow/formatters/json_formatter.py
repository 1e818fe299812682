"""JSON output formatter: companion for API responses and tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mindflow.domains.progress_note.models import ProcessedNote


class JSONFormatter:
    """Renders a ProcessedNote as indented JSON bytes."""

    def format(self, note: ProcessedNote, **kwargs: Any) -> bytes:
        """Serialize *note* to pretty-printed JSON bytes."""
        payload = {
            "sections": note.sections.to_dict(),
            "formatted_note": note.formatted_note,
            "compliance": note.compliance.to_dict(),
        }
        payload.update(kwargs.get("extra", {}))
        return json.dumps(payload, indent=2, default=str).encode()

    def format_to_file(self, note: ProcessedNote, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(note, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
