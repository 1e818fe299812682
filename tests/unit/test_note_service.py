"""Tests for NoteService: completion first, deterministic pipeline as fallback."""

from __future__ import annotations

import logging

import pytest

from mindflow.core.config import AppSettings, LLMConfig
from mindflow.domains.progress_note import NotePipeline, Section
from mindflow.exceptions import CompletionError, NoteFormatError
from mindflow.services import CompletionService, NoteService, create_note_service
from tests.fakes.fake_inference import FakeInferenceBackend


def _service(
    pipeline: NotePipeline,
    llm_config: LLMConfig,
    backend: FakeInferenceBackend,
    fallback: bool = True,
) -> NoteService:
    completion = CompletionService(backend, llm_config, lexicon=pipeline.lexicon, rules=pipeline.rules)
    return NoteService(pipeline, completion=completion, fallback_to_pipeline=fallback)


class TestPipelineOnly:
    @pytest.mark.asyncio
    async def test_without_completion(self, pipeline: NotePipeline, scenario_text: str) -> None:
        result = await NoteService(pipeline).create_note(scenario_text)
        assert result.source == "pipeline"
        assert result.completion_error is None
        assert result.note.formatted_note == pipeline.process_input(scenario_text).formatted_note

    @pytest.mark.asyncio
    async def test_use_completion_false_skips_backend(
        self, pipeline: NotePipeline, llm_config: LLMConfig
    ) -> None:
        backend = FakeInferenceBackend()
        result = await _service(pipeline, llm_config, backend).create_note("x", use_completion=False)
        assert result.source == "pipeline"
        assert backend.calls == []


class TestCompletion:
    @pytest.mark.asyncio
    async def test_accepted_completion_is_validated(
        self, pipeline: NotePipeline, llm_config: LLMConfig, completed_note: str
    ) -> None:
        backend = FakeInferenceBackend(default_content=completed_note)
        result = await _service(pipeline, llm_config, backend).create_note("raw")
        assert result.source == "completion"
        assert result.attempts == 1
        assert result.note.compliance.is_valid
        assert result.note.sections[Section.PLAN].startswith("Continue weekly")
        assert result.note.formatted_note.startswith("SERVICE PROVIDED:\n")

    @pytest.mark.asyncio
    async def test_short_completion_sections_reported(
        self, pipeline: NotePipeline, llm_config: LLMConfig
    ) -> None:
        text = "\n".join(f"{s.heading}:\nok" for s in Section)
        backend = FakeInferenceBackend(default_content=text)
        result = await _service(pipeline, llm_config, backend).create_note("raw")
        assert result.source == "completion"
        assert not result.note.compliance.is_valid


class TestFallback:
    @pytest.mark.asyncio
    async def test_malformed_output_falls_back(
        self, pipeline: NotePipeline, llm_config: LLMConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        backend = FakeInferenceBackend(default_content="no headings")
        with caplog.at_level(logging.WARNING, logger="mindflow"):
            result = await _service(pipeline, llm_config, backend).create_note("Client was upset.")
        assert result.source == "pipeline"
        assert "missing sections" in (result.completion_error or "")
        assert result.attempts == 2
        assert any("Completion rejected" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_call_failure_falls_back(self, pipeline: NotePipeline, llm_config: LLMConfig) -> None:
        backend = FakeInferenceBackend(responses=[RuntimeError("a"), RuntimeError("b")])
        result = await _service(pipeline, llm_config, backend).create_note("Client was upset.")
        assert result.source == "pipeline"
        assert result.note.sections[Section.CLIENT_RESPONSE].startswith("Client was exhibited emotional distress")

    @pytest.mark.asyncio
    async def test_no_fallback_raises_completion_error(
        self, pipeline: NotePipeline, llm_config: LLMConfig
    ) -> None:
        backend = FakeInferenceBackend(responses=[RuntimeError("a"), RuntimeError("b")])
        with pytest.raises(CompletionError):
            await _service(pipeline, llm_config, backend, fallback=False).create_note("x")

    @pytest.mark.asyncio
    async def test_no_fallback_raises_note_format_error(
        self, pipeline: NotePipeline, llm_config: LLMConfig
    ) -> None:
        backend = FakeInferenceBackend(default_content="PLAN: only")
        with pytest.raises(NoteFormatError) as exc_info:
            await _service(pipeline, llm_config, backend, fallback=False).create_note("x")
        assert "SERVICE PROVIDED" in exc_info.value.missing_sections
        assert exc_info.value.raw_text == "PLAN: only"


class TestEmptySectionBody:
    @staticmethod
    def _empty_plan(completed_note: str) -> str:
        head, _, _ = completed_note.partition("PLAN:")
        return head + "PLAN:\n"

    @pytest.mark.asyncio
    async def test_empty_body_falls_back(
        self, pipeline: NotePipeline, llm_config: LLMConfig, completed_note: str
    ) -> None:
        backend = FakeInferenceBackend(default_content=self._empty_plan(completed_note))
        result = await _service(pipeline, llm_config, backend).create_note("Client was upset.")
        assert result.source == "pipeline"
        assert result.attempts == 2
        assert result.completion_error
        for section in Section:
            assert result.note.sections[section].endswith(".")

    @pytest.mark.asyncio
    async def test_empty_body_without_fallback_raises(
        self, pipeline: NotePipeline, llm_config: LLMConfig, completed_note: str
    ) -> None:
        backend = FakeInferenceBackend(default_content=self._empty_plan(completed_note))
        with pytest.raises(NoteFormatError) as exc_info:
            await _service(pipeline, llm_config, backend, fallback=False).create_note("x")
        assert exc_info.value.missing_sections == ["PLAN"]

    @pytest.mark.asyncio
    async def test_non_compliant_completion_logged(
        self, pipeline: NotePipeline, llm_config: LLMConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        text = "\n".join(f"{s.heading}:\nok" for s in Section)
        backend = FakeInferenceBackend(default_content=text)
        with caplog.at_level(logging.WARNING, logger="mindflow"):
            result = await _service(pipeline, llm_config, backend).create_note("raw")
        assert result.source == "completion"
        assert any("compliance errors" in r.getMessage() for r in caplog.records)


class TestValidateFormattedNote:
    def test_missing_sections_not_defaulted(self, pipeline: NotePipeline) -> None:
        note = NoteService(pipeline).validate_formatted_note("PLAN:\nContinue weekly sessions as scheduled with the client.")
        assert note.sections[Section.SERVICE_PROVIDED] == ""
        assert "SERVICE PROVIDED section missing or too short (0 < 50 characters)" in note.compliance.errors


class TestCreateNoteService:
    def test_disabled_llm_has_no_completion(self) -> None:
        service = create_note_service(AppSettings(llm=LLMConfig(enabled=False)))
        assert not service.completion_enabled

    def test_enabled_llm_wires_completion(self) -> None:
        settings = AppSettings(llm=LLMConfig(enabled=True, api_key="k", fallback_to_pipeline=False))
        service = create_note_service(settings)
        assert service.completion_enabled
        assert service.fallback_to_pipeline is False
