"""Pytest fixtures for testing."""

from collections.abc import Generator
from typing import Any

import pytest

from genai_types import (
    CompletionRequest,
    CompletionResponse,
    Message,
    ModelInfo,
    ModelPricing,
    Role,
    StopReason,
    TextBlock,
    Tool,
    ToolChoiceTool,
    ToolResultBlock,
    ToolUseBlock,
    Usage,
)
from genai_types.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Re-read GENAI_TYPES_* settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def weather_tool() -> Tool:
    """A tool definition as supplied by the tool contract."""
    return Tool(
        name="get_weather",
        description="Current weather for a city",
        input_schema={
            "type": "object",
            "properties": {"city": {"type": "string"}},
            "required": ["city"],
        },
    )


@pytest.fixture
def tool_conversation() -> tuple[Message, ...]:
    """User question, assistant tool call, user tool result."""
    return (
        Message.user("What's the weather in Oslo?"),
        Message.assistant(
            [
                TextBlock(text="Let me check."),
                ToolUseBlock(id="toolu_01", name="get_weather", input={"city": "Oslo"}),
            ]
        ),
        Message(
            role=Role.user,
            content=(
                ToolResultBlock(
                    tool_use_id="toolu_01",
                    content=({"type": "text", "text": "4°C, light snow"},),
                ),
            ),
        ),
    )


@pytest.fixture
def full_request(tool_conversation: tuple[Message, ...], weather_tool: Tool) -> CompletionRequest:
    """Completion request with every optional field set."""
    return CompletionRequest(
        model="claude-x",
        messages=tool_conversation,
        max_tokens=1024,
        temperature=0.2,
        system="You are a concise assistant.",
        tools=(weather_tool,),
        tool_choice=ToolChoiceTool(name="get_weather"),
        disable_parallel_tool_use=True,
    )


@pytest.fixture
def response_payload() -> dict[str, Any]:
    """A completion response as it arrives on the wire."""
    return {
        "content": [
            {"type": "text", "text": "Checking the forecast."},
            {"type": "tool_use", "id": "toolu_02", "name": "get_weather", "input": {"city": "Bergen"}},
        ],
        "id": "msg_123",
        "model": "claude-x",
        "role": "assistant",
        "stop_reason": "tool_use",
        "stop_sequence": None,
        "type": "message",
        "usage": {"input_tokens": 42, "output_tokens": 17},
    }


@pytest.fixture
def completion() -> CompletionResponse:
    """A finished text completion."""
    return CompletionResponse(
        content=(TextBlock(text="Hello!"),),
        id="msg_456",
        model="claude-x",
        role=Role.assistant,
        stop_reason=StopReason.end_turn,
        message_type="message",
        usage=Usage(input_tokens=5, output_tokens=2),
    )


@pytest.fixture
def model_catalog() -> tuple[ModelInfo, ...]:
    """Two catalog entries, one without pricing."""
    return (
        ModelInfo(
            id="claude-x",
            display_name="Claude X",
            max_tokens=200000,
            provider="anthropic",
            pricing=ModelPricing(input_cost_per_million_tokens=3.0, output_cost_per_million_tokens=15.0),
        ),
        ModelInfo(
            id="claude-x-mini",
            display_name="Claude X Mini",
            max_tokens=100000,
            provider="anthropic",
        ),
    )
