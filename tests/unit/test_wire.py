"""Unit tests for the wire codec and its settings."""

import json

import pytest
from pydantic import ValidationError

from genai_types import CompletionRequest, JsonError, Message, ToolResultBlock, decode, encode, encode_json
from genai_types.config import Settings, get_settings
from genai_types.models import ModelInfo
from genai_types.proxy import ProxyErrorResponse, ProxyResponse
from genai_types.wire import _cached_adapter


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GENAI_TYPES_EXPLICIT_NULLS", raising=False)
        monkeypatch.delenv("GENAI_TYPES_ACCEPT_LEGACY_PROXY_TAGS", raising=False)
        assert get_settings() == Settings(explicit_nulls=False, accept_legacy_proxy_tags=True)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GENAI_TYPES_EXPLICIT_NULLS", "TRUE")
        monkeypatch.setenv("GENAI_TYPES_ACCEPT_LEGACY_PROXY_TAGS", "false")
        settings = get_settings()
        assert settings.explicit_nulls is True
        assert settings.accept_legacy_proxy_tags is False

    def test_cached(self):
        assert get_settings() is get_settings()


class TestExplicitNulls:
    """Tests for the null-emission switch."""

    @pytest.fixture
    def bare_request(self) -> CompletionRequest:
        return CompletionRequest(model="m", messages=(Message.user("hi"),), max_tokens=8)

    def test_per_call_explicit_nulls(self, bare_request):
        data = encode(bare_request, explicit_nulls=True)
        assert data["temperature"] is None
        assert data["tool_choice"] is None
        assert data["disable_parallel_tool_use"] is None

    def test_nested_blocks_follow_the_call(self):
        block = ToolResultBlock(tool_use_id="t", content=())
        request = CompletionRequest(model="m", messages=(Message.user([block]),), max_tokens=8)
        data = encode(request, explicit_nulls=True)
        assert data["messages"][0]["content"][0]["is_error"] is None

    def test_env_default(self, monkeypatch, bare_request):
        monkeypatch.setenv("GENAI_TYPES_EXPLICIT_NULLS", "true")
        assert "system" in encode(bare_request)
        assert "system" not in encode(bare_request, explicit_nulls=False)

    def test_explicit_nulls_decode_back(self, bare_request):
        assert decode(CompletionRequest, encode(bare_request, explicit_nulls=True)) == bare_request

    def test_json_text_matches_structure(self, bare_request):
        assert json.loads(encode_json(bare_request)) == encode(bare_request)


class TestDecode:
    """Tests for decode error wrapping."""

    def test_validation_error_wrapped(self):
        with pytest.raises(JsonError) as exc_info:
            decode(Message, {"role": "user"})
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.message == str(exc_info.value.__cause__)

    def test_decode_logs_failure(self, caplog):
        caplog.set_level("DEBUG", logger="genai_types.wire")
        with pytest.raises(JsonError):
            decode(Message, {"role": "user"})
        assert "Failed to decode Message" in caplog.text


class TestAdapterCache:
    """Tests for reuse of validators across decode calls."""

    def test_repeated_generic_target_reuses_adapter(self):
        _cached_adapter.cache_clear()
        for _ in range(50):
            assert decode(list[ModelInfo], []) == []
        info = _cached_adapter.cache_info()
        assert info.currsize == 1
        assert info.hits == 49

    def test_cache_is_bounded(self):
        assert _cached_adapter.cache_info().maxsize is not None

    def test_union_alias_decodes_repeatedly(self):
        for _ in range(3):
            assert isinstance(decode(ProxyResponse, {"type": "error", "error": "x"}), ProxyErrorResponse)
