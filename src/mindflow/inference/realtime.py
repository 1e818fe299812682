"""Real-time inference backend: wraps litellm.acompletion()."""

from __future__ import annotations

import logging
from typing import Any

from mindflow.inference.protocols import InferenceResult

log = logging.getLogger(__name__)


class RealTimeBackend:
    """Single-request inference via litellm.acompletion().

    Connection details (``api_key``, ``api_base``, ``timeout``) are bound at
    construction and merged into every call.
    """

    def __init__(self, *, api_key: str = "", api_base: str = "", timeout: float = 60.0) -> None:
        self._connection: dict[str, Any] = {"timeout": timeout}
        if api_key and api_key != "no-key":
            self._connection["api_key"] = api_key
        if api_base:
            self._connection["api_base"] = api_base

    async def infer(
        self,
        messages: list[dict[str, Any]],
        model: str,
        **params: Any,
    ) -> InferenceResult:
        """Single inference call via litellm.acompletion()."""
        from litellm import acompletion

        kwargs: dict[str, Any] = {
            "model": model,
            "messages": messages,
            **self._connection,
            **params,
        }
        response = await acompletion(**kwargs)
        content = response.choices[0].message.content or ""
        reason = response.choices[0].finish_reason
        mapped_reason = "max_output_reached" if reason == "length" else "finished"

        usage: dict[str, int] = {}
        if hasattr(response, "usage") and response.usage:
            usage = {
                "prompt_tokens": getattr(response.usage, "prompt_tokens", 0),
                "completion_tokens": getattr(response.usage, "completion_tokens", 0),
                "total_tokens": getattr(response.usage, "total_tokens", 0),
            }
        log.debug("Completion finished (%s), usage=%s", mapped_reason, usage)

        return InferenceResult(
            content=content,
            finish_reason=mapped_reason,
            usage=usage,
        )
