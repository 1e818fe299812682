"""Tests for output formatters."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mindflow.domains.progress_note import NotePipeline, ProcessedNote
from mindflow.formatters import IOutputFormatter, JSONFormatter, TextFormatter


@pytest.fixture
def note(pipeline: NotePipeline, scenario_text: str) -> ProcessedNote:
    return pipeline.process_input(scenario_text)


class TestProtocolCompliance:
    @pytest.mark.parametrize("formatter", [TextFormatter(), JSONFormatter()])
    def test_satisfies_protocol(self, formatter: object) -> None:
        assert isinstance(formatter, IOutputFormatter)


class TestTextFormatter:
    def test_format_returns_note_bytes(self, note: ProcessedNote) -> None:
        assert TextFormatter().format(note) == note.formatted_note.encode("utf-8")

    def test_content_type(self) -> None:
        assert TextFormatter().content_type == "text/plain"

    def test_format_to_file(self, note: ProcessedNote, tmp_path: Path) -> None:
        out = TextFormatter().format_to_file(note, tmp_path / "note.txt")
        assert out.read_text(encoding="utf-8") == note.formatted_note


class TestJSONFormatter:
    def test_payload(self, note: ProcessedNote) -> None:
        payload = json.loads(JSONFormatter().format(note))
        assert set(payload) == {"sections", "formatted_note", "compliance"}
        assert list(payload["sections"]) == [
            "service_provided",
            "client_response",
            "interventions",
            "progress",
            "plan",
        ]
        assert payload["compliance"]["completeness_percent"] == note.compliance.completeness_percent

    def test_extra_fields(self, note: ProcessedNote) -> None:
        payload = json.loads(JSONFormatter().format(note, extra={"source": "pipeline"}))
        assert payload["source"] == "pipeline"

    def test_content_type(self) -> None:
        assert JSONFormatter().content_type == "application/json"

    def test_format_to_file(self, note: ProcessedNote, tmp_path: Path) -> None:
        out = JSONFormatter().format_to_file(note, tmp_path / "note.json")
        assert json.loads(out.read_text())["formatted_note"] == note.formatted_note
