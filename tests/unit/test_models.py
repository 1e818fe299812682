"""Tests for progress-note domain models."""

from __future__ import annotations

import pytest

from mindflow.domains.progress_note.models import ClassifiedDocument, Section


class TestSection:
    def test_document_order(self) -> None:
        assert [s.heading for s in Section] == [
            "SERVICE PROVIDED",
            "CLIENT RESPONSE",
            "INTERVENTIONS",
            "PROGRESS",
            "PLAN",
        ]

    @pytest.mark.parametrize("heading", ["SERVICE PROVIDED", "service provided", "Service_Provided", " service   provided "])
    def test_from_heading(self, heading: str) -> None:
        assert Section.from_heading(heading) == Section.SERVICE_PROVIDED

    def test_from_unknown_heading(self) -> None:
        with pytest.raises(ValueError):
            Section.from_heading("SUMMARY")


class TestClassifiedDocument:
    def test_requires_all_sections(self) -> None:
        with pytest.raises(ValueError, match="missing sections: plan"):
            ClassifiedDocument({s: "x." for s in Section if s != Section.PLAN})

    def test_items_in_document_order(self) -> None:
        doc = ClassifiedDocument({s: s.value for s in reversed(list(Section))})
        assert [s for s, _ in doc.items()] == list(Section)
        assert list(doc) == list(Section)

    def test_serialize_and_to_dict(self) -> None:
        doc = ClassifiedDocument({s: f"{s.value}." for s in Section})
        assert doc.serialize() == "service_provided. client_response. interventions. progress. plan."
        assert doc.to_dict()["plan"] == "plan."
