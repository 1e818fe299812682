"""Note service: the pipeline, optionally fronted by the completion collaborator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from mindflow.domains.progress_note.models import ProcessedNote
from mindflow.domains.progress_note.pipeline import NotePipeline
from mindflow.exceptions import CompletionError, NoteFormatError
from mindflow.formatters.text_formatter import render_note
from mindflow.services.completion_service import CompletionService
from mindflow.services.note_parser import document_from_sections, parse_formatted_note

if TYPE_CHECKING:
    from mindflow.core.config import AppSettings

log = logging.getLogger(__name__)

NoteSource = Literal["pipeline", "completion"]


@dataclass(frozen=True)
class NoteResult:
    """A processed note and where its text came from."""

    note: ProcessedNote
    source: NoteSource
    completion_error: str | None = None
    attempts: int = 0


class NoteService:
    """Produces notes, preferring the completion collaborator when configured.

    Completion output is never trusted blindly: it must carry all five
    headings and is re-validated with the pipeline's compliance validator.
    """

    def __init__(
        self,
        pipeline: NotePipeline | None = None,
        completion: CompletionService | None = None,
        fallback_to_pipeline: bool = True,
    ) -> None:
        self.pipeline = pipeline or NotePipeline()
        self.completion = completion
        self.fallback_to_pipeline = fallback_to_pipeline

    @property
    def completion_enabled(self) -> bool:
        return self.completion is not None

    async def create_note(self, raw_text: str, use_completion: bool = True) -> NoteResult:
        """Build a note from *raw_text*.

        Raises:
            CompletionError: Collaborator call failed and fallback is off.
            NoteFormatError: Collaborator output lacked a heading and fallback is off.
        """
        if not use_completion or self.completion is None:
            return NoteResult(note=self.pipeline.process_input(raw_text), source="pipeline")

        attempts = 0
        try:
            outcome = await self.completion.complete(raw_text)
            attempts = outcome.attempts
            if not outcome.format_check.is_valid:
                raise NoteFormatError(
                    "Completion output is missing sections",
                    missing_sections=[s.heading for s in outcome.format_check.missing_sections],
                    raw_text=outcome.text,
                )
        except (CompletionError, NoteFormatError) as e:
            log.warning("Completion rejected, fallback=%s: %s", self.fallback_to_pipeline, e)
            if not self.fallback_to_pipeline:
                raise
            return NoteResult(
                note=self.pipeline.process_input(raw_text),
                source="pipeline",
                completion_error=str(e),
                attempts=attempts,
            )

        note = self.validate_formatted_note(outcome.text)
        if not note.compliance.is_valid:
            log.warning(
                "Completion note accepted with %d compliance errors",
                len(note.compliance.errors),
            )
        return NoteResult(note=note, source="completion", attempts=attempts)

    def validate_formatted_note(self, formatted_note: str) -> ProcessedNote:
        """Parse, normalize and validate an already formatted note."""
        document = document_from_sections(parse_formatted_note(formatted_note))
        return ProcessedNote(
            sections=document,
            formatted_note=render_note(document),
            compliance=self.pipeline.validator.validate(document),
        )


def create_note_service(settings: AppSettings) -> NoteService:
    """Wire a :class:`NoteService` from settings.

    The completion collaborator is attached only when ``MINDFLOW_LLM_ENABLED``
    is set; otherwise every note comes from the pipeline.
    """
    pipeline = NotePipeline()
    completion: CompletionService | None = None
    if settings.llm.enabled:
        from mindflow.inference import create_inference_backend

        completion = CompletionService(
            create_inference_backend(settings),
            settings.llm,
            lexicon=pipeline.lexicon,
            rules=pipeline.rules,
        )
        log.info("Completion collaborator enabled (model=%s)", settings.llm.model)
    return NoteService(
        pipeline,
        completion=completion,
        fallback_to_pipeline=settings.llm.fallback_to_pipeline,
    )
