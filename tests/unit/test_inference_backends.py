"""Tests for the pluggable inference backend layer."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mindflow.core.config import AppSettings, LLMConfig
from mindflow.inference.factory import create_inference_backend
from mindflow.inference.protocols import IInferenceBackend, InferenceResult
from mindflow.inference.realtime import RealTimeBackend
from tests.fakes.fake_inference import FakeInferenceBackend

# ── Protocol compliance ──────────────────────────────────────────────


class TestProtocolCompliance:
    def test_fake_backend_satisfies_protocol(self) -> None:
        assert isinstance(FakeInferenceBackend(), IInferenceBackend)

    def test_realtime_backend_satisfies_protocol(self) -> None:
        assert isinstance(RealTimeBackend(), IInferenceBackend)

    def test_inference_result_defaults(self) -> None:
        result = InferenceResult(content="hello")
        assert result.finish_reason == "finished"
        assert result.usage == {}


# ── RealTimeBackend ──────────────────────────────────────────────────


def _mock_response(content: str, finish_reason: str = "stop", usage: object = None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    response.choices[0].finish_reason = finish_reason
    response.usage = usage
    return response


class TestRealTimeBackend:
    @pytest.mark.asyncio
    async def test_infer_delegates_to_litellm(self) -> None:
        usage = MagicMock(prompt_tokens=10, completion_tokens=5, total_tokens=15)
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acomp:
            mock_acomp.return_value = _mock_response("test response", usage=usage)
            backend = RealTimeBackend(api_key="sk-1", api_base="http://llm:4000", timeout=5)
            result = await backend.infer(
                [{"role": "user", "content": "hi"}],
                "gpt-4o-mini",
                temperature=0.1,
            )

        assert result.content == "test response"
        assert result.finish_reason == "finished"
        assert result.usage["total_tokens"] == 15
        kwargs = mock_acomp.call_args.kwargs
        assert kwargs["api_key"] == "sk-1"
        assert kwargs["api_base"] == "http://llm:4000"
        assert kwargs["timeout"] == 5
        assert kwargs["temperature"] == 0.1

    @pytest.mark.asyncio
    async def test_placeholder_key_not_sent(self) -> None:
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acomp:
            mock_acomp.return_value = _mock_response("x")
            await RealTimeBackend(api_key="no-key").infer([], "m")
        assert "api_key" not in mock_acomp.call_args.kwargs

    @pytest.mark.asyncio
    async def test_infer_maps_length_finish_reason(self) -> None:
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acomp:
            mock_acomp.return_value = _mock_response("truncated", finish_reason="length")
            result = await RealTimeBackend().infer([], "gpt-4o-mini")

        assert result.finish_reason == "max_output_reached"
        assert result.usage == {}


# ── Factory ──────────────────────────────────────────────────────────


class TestInferenceFactory:
    def test_default_returns_realtime_backend(self) -> None:
        assert isinstance(create_inference_backend(AppSettings()), RealTimeBackend)

    def test_dotted_path_loads_external_class(self) -> None:
        settings = AppSettings(llm=LLMConfig(inference_backend="tests.fakes.fake_inference:FakeInferenceBackend"))
        with patch(
            "mindflow.inference.factory._import_dotted_path",
            return_value=lambda _settings: FakeInferenceBackend(),
        ):
            backend = create_inference_backend(settings)
        assert isinstance(backend, FakeInferenceBackend)

    def test_dotted_path_not_found_raises(self) -> None:
        settings = AppSettings(llm=LLMConfig(inference_backend="nonexistent.module:Missing"))
        with pytest.raises(ImportError):
            create_inference_backend(settings)

    def test_missing_attribute_raises(self) -> None:
        settings = AppSettings(llm=LLMConfig(inference_backend="mindflow.inference:Nope"))
        with pytest.raises(ImportError, match="no attribute"):
            create_inference_backend(settings)

    def test_path_without_attribute_raises(self) -> None:
        settings = AppSettings(llm=LLMConfig(inference_backend="mindflow.inference"))
        with pytest.raises(ImportError, match="module:attribute"):
            create_inference_backend(settings)

    def test_dotted_path_not_callable_raises(self) -> None:
        settings = AppSettings(llm=LLMConfig(inference_backend="some.module:NotCallable"))
        with patch(
            "mindflow.inference.factory._import_dotted_path",
            return_value="not_callable_string",
        ):
            with pytest.raises(TypeError, match="not callable"):
                create_inference_backend(settings)


# ── FakeInferenceBackend ─────────────────────────────────────────────


class TestFakeInferenceBackend:
    @pytest.mark.asyncio
    async def test_scripted_responses_then_default(self) -> None:
        backend = FakeInferenceBackend(default_content="done", responses=["first"])
        assert (await backend.infer([], "m")).content == "first"
        assert (await backend.infer([], "m")).content == "done"
        assert len(backend.calls) == 2

    @pytest.mark.asyncio
    async def test_scripted_exception(self) -> None:
        backend = FakeInferenceBackend(responses=[RuntimeError("boom")])
        with pytest.raises(RuntimeError, match="boom"):
            await backend.infer([], "m")
