"""External completion collaborator: asks an LLM to write the note.

The deterministic pipeline stays the source of truth; this service only
produces candidate text and reports whether it has the five headings.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mindflow.domains.progress_note.lexicon import Lexicon
from mindflow.domains.progress_note.models import Section
from mindflow.domains.progress_note.section_rules import SERVICE_TEMPLATE, SectionRuleTable
from mindflow.exceptions import CompletionError
from mindflow.prompts import get_prompt
from mindflow.services.note_parser import FormatCheck, check_note_format

if TYPE_CHECKING:
    from mindflow.core.config import LLMConfig
    from mindflow.inference.protocols import IInferenceBackend

log = logging.getLogger(__name__)


@dataclass
class CompletionOutcome:
    """Text returned by the last completion attempt."""

    text: str
    format_check: FormatCheck
    attempts: int
    usage: dict[str, int] = field(default_factory=dict)


class CompletionService:
    """Builds the prompt and calls the inference backend with retries."""

    def __init__(
        self,
        backend: IInferenceBackend,
        llm_config: LLMConfig,
        lexicon: Lexicon | None = None,
        rules: SectionRuleTable | None = None,
    ) -> None:
        self._backend = backend
        self._config = llm_config
        self._lexicon = lexicon or Lexicon()
        self._rules = rules or SectionRuleTable.default()

    def build_messages(self, raw_text: str) -> list[dict[str, str]]:
        system = get_prompt("progress_note", "completion", "SYSTEM_PROMPT").format(
            headings="\n".join(f"- {s.heading}" for s in Section),
            mappings="\n".join(
                f'- "{e.pattern}" -> "{e.replacement}"' for e in self._lexicon.entries
            ),
            requirements="\n".join(self._requirement_lines()),
            service_template=SERVICE_TEMPLATE.format(
                duration="[DURATION]",
                session_type="[TYPE]",
                level="[LEVEL]",
                program="[PROGRAM]",
                modality="[MODALITY]",
            ),
            service_default=self._rules[Section.SERVICE_PROVIDED].default_text,
            format_example="\n\n".join(f"{s.heading}:\n[Content]" for s in Section),
        )
        user = get_prompt("progress_note", "completion", "USER_PROMPT").format(note=raw_text.strip())
        return [
            {"role": "system", "content": system.strip()},
            {"role": "user", "content": user.strip()},
        ]

    def _requirement_lines(self) -> list[str]:
        lines = []
        for section in Section:
            rule = self._rules[section]
            elements = ", ".join(e.replace("_", " ") for e in rule.required_elements)
            lines.append(
                f"- {section.heading}: {rule.min_length}-{rule.max_length} characters; "
                f"must include {elements}."
            )
        return lines

    async def complete(self, raw_text: str) -> CompletionOutcome:
        """Request a formatted note.

        Retries call failures and outputs missing a heading.  The outcome of
        the last attempt is returned even when its format check fails.

        Raises:
            CompletionError: If the final attempt's backend call fails.
        """
        messages = self.build_messages(raw_text)
        max_attempts = self._config.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                result = await self._backend.infer(
                    messages,
                    self._config.model,
                    temperature=self._config.temperature,
                    top_p=self._config.top_p,
                    max_tokens=self._config.max_tokens,
                )
            except Exception as e:
                log.warning("Completion attempt %d/%d failed: %s", attempt, max_attempts, e)
                if attempt == max_attempts:
                    raise CompletionError(
                        f"Completion failed after {max_attempts} attempts: {e}"
                    ) from e
                await asyncio.sleep(self._config.retry_delay_seconds)
                continue

            text = result.content.strip()
            outcome = CompletionOutcome(
                text=text,
                format_check=check_note_format(text),
                attempts=attempt,
                usage=result.usage,
            )
            if outcome.format_check.is_valid:
                log.info("Completion accepted on attempt %d", attempt)
                return outcome

            log.warning(
                "Completion attempt %d/%d missing sections: %s",
                attempt,
                max_attempts,
                ", ".join(s.heading for s in outcome.format_check.missing_sections),
            )
            if attempt == max_attempts:
                return outcome
            await asyncio.sleep(self._config.retry_delay_seconds)

        raise CompletionError(f"No completion attempts made (max_attempts={max_attempts})")
