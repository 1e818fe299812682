"""What the completion collaborator needs from a model provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass
class InferenceResult:
    """Raw reply to one note-writing request.

    ``content`` is the model's formatted note, still unchecked; the
    completion service decides whether its five headings are usable.
    ``finish_reason`` is ``"max_output_reached"`` when the reply was cut
    off, which usually means the PLAN section is missing.
    """

    content: str
    finish_reason: str = "finished"
    usage: dict[str, int] = field(default_factory=dict)


@runtime_checkable
class IInferenceBackend(Protocol):
    """Anything that can turn the note prompt into a reply.

    ``RealTimeBackend`` goes through litellm; tests and custom providers
    plug in via ``MINDFLOW_LLM_INFERENCE_BACKEND=module:Class``.
    """

    async def infer(
        self,
        messages: list[dict[str, Any]],
        model: str,
        **params: Any,
    ) -> InferenceResult:
        """Send the system and user prompt for one narrative.

        Args:
            messages: The note-writing prompt as chat messages (system rules,
                then the clinician's narrative).
            model: Model name, litellm provider prefix allowed.
            **params: Sampling settings from ``LLMConfig`` (temperature,
                top_p, max_tokens).

        Raises whatever the provider raises; the caller owns retries.
        """
        ...
