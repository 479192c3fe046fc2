"""Message, request and response schemas for the completion API.

Content blocks are a closed union tagged by ``type`` (``text``, ``tool_use``,
``tool_result``). Roles are a closed enumeration. Stop reasons are the one
open enumeration: tokens outside the known set decode to ``OtherStopReason``
and are re-encoded verbatim.

Tool inputs and tool result items are opaque JSON values owned by the tool
contract; they are carried through untouched.

The named constructors (``Message.new_structured``, ``Message.user``,
``Message.assistant``) raise ``InvalidRoleError`` or ``JsonError``. Calling
a model class directly is plain pydantic and raises ``ValidationError``.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    ConfigDict,
    Field,
    JsonValue,
    RootModel,
    ValidationError,
    field_validator,
    model_validator,
)

from .errors import InvalidRoleError, JsonError
from .tool_choice import ToolChoice
from .wire import WireModel

logger = logging.getLogger(__name__)

# One item of a tool result, shaped by the tool contract (text, image, resource...)
ToolContent = JsonValue


class Role(str, Enum):
    """Role of the message sender."""

    user = "user"
    assistant = "assistant"
    system = "system"

    @classmethod
    def parse(cls, token: "str | Role") -> "Role":
        """Map a wire token to a Role.

        Raises:
            InvalidRoleError: The token is not user, assistant or system.
        """
        try:
            return cls(token)
        except ValueError as e:
            raise InvalidRoleError(str(token)) from e


# =============================================================================
# Content blocks
# =============================================================================


class TextBlock(WireModel):
    """Plain text content."""

    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(WireModel):
    """The model asks for a tool to be invoked with ``input``."""

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: JsonValue


class ToolResultBlock(WireModel):
    """Result of a tool invocation, sent back to the model.

    ``is_error`` keeps three states: absent (None), False and True. Whether
    absent means "not an error" is left to the consumer.
    """

    omit_if_none: ClassVar[frozenset[str]] = frozenset({"is_error"})

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: tuple[ToolContent, ...]
    is_error: bool | None = None


ContentBlock = Annotated[
    Union[TextBlock, ToolUseBlock, ToolResultBlock],
    Field(discriminator="type"),
]


def _as_blocks(content: "str | Sequence[ContentBlock]") -> tuple[ContentBlock, ...]:
    if isinstance(content, str):
        return (TextBlock(text=content),)
    return tuple(content)


class Message(WireModel):
    """A single message in a conversation. Block order is preserved."""

    role: Role
    content: tuple[ContentBlock, ...]

    @classmethod
    def new_structured(cls, role: "str | Role", content: Sequence[ContentBlock]) -> "Message":
        """Create a message from a role token and content blocks.

        Raises:
            InvalidRoleError: ``role`` is not user, assistant or system.
            JsonError: ``content`` holds something that is not a content block.
        """
        return _build_message(cls, Role.parse(role), tuple(content))

    @classmethod
    def user(cls, content: "str | Sequence[ContentBlock]") -> "Message":
        """User message from text or blocks."""
        return _build_message(cls, Role.user, _as_blocks(content))

    @classmethod
    def assistant(cls, content: "str | Sequence[ContentBlock]") -> "Message":
        """Assistant message from text or blocks."""
        return _build_message(cls, Role.assistant, _as_blocks(content))


def _build_message(cls: type[Message], role: Role, content: tuple[Any, ...]) -> Message:
    try:
        return cls(role=role, content=content)
    except ValidationError as e:
        raise JsonError.wrap(e) from e


# =============================================================================
# Request
# =============================================================================


class Tool(WireModel):
    """A tool the model may call.

    Defined by the tool contract; keys beyond the ones below are kept as-is.
    Tool contracts that spell the schema key ``inputSchema`` are accepted on
    decode; encoding always writes ``input_schema``, the completion API's key.
    """

    model_config = ConfigDict(extra="allow")
    omit_if_none: ClassVar[frozenset[str]] = frozenset({"description"})

    name: str
    description: str | None = None
    input_schema: JsonValue = Field(validation_alias=AliasChoices("input_schema", "inputSchema"))


class CompletionRequest(WireModel):
    """Request to generate a completion.

    ``temperature`` is advisory (nominally 0.0 to 1.0) and passed through
    unchecked; range validation belongs to the transport.
    """

    omit_if_none: ClassVar[frozenset[str]] = frozenset(
        {"temperature", "system", "tools", "tool_choice", "disable_parallel_tool_use"}
    )

    model: str
    messages: tuple[Message, ...]
    max_tokens: int = Field(ge=0, description="Maximum number of tokens to generate")
    temperature: float | None = None
    system: str | None = Field(default=None, description="System prompt")
    tools: tuple[Tool, ...] | None = None
    tool_choice: Optional[ToolChoice] = None
    disable_parallel_tool_use: bool | None = None


# =============================================================================
# Response
# =============================================================================


class StopReason(str, Enum):
    """Known reasons why generation stopped."""

    end_turn = "end_turn"
    max_tokens = "max_tokens"
    stop_sequence = "stop_sequence"
    tool_use = "tool_use"


_KNOWN_STOP_REASONS = frozenset(reason.value for reason in StopReason)


class OtherStopReason(RootModel[str]):
    """A stop reason this package does not know, kept verbatim."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def reject_known_token(cls, value: str) -> str:
        if value in _KNOWN_STOP_REASONS:
            raise ValueError(f"{value!r} is a known stop reason, use StopReason")
        return value

    @property
    def value(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root


AnyStopReason = Annotated[Union[StopReason, OtherStopReason], Field(union_mode="left_to_right")]


def parse_stop_reason(token: str) -> StopReason | OtherStopReason:
    """Map a wire token to a StopReason, falling back to OtherStopReason."""
    try:
        return StopReason(token)
    except ValueError:
        logger.debug("Unrecognized stop reason %r kept verbatim", token)
        return OtherStopReason(token)


class Usage(WireModel):
    """Token usage for one completion.

    Counts are non-negative by convention only. A negative count is logged
    as a protocol anomaly and kept.
    """

    input_tokens: int
    output_tokens: int

    @model_validator(mode="after")
    def flag_negative_counts(self) -> "Usage":
        if self.input_tokens < 0 or self.output_tokens < 0:
            logger.warning(
                "Negative token usage reported: input_tokens=%d output_tokens=%d",
                self.input_tokens,
                self.output_tokens,
            )
        return self


class CompletionResponse(WireModel):
    """Response from a completion request.

    ``stop_sequence`` is always emitted (as null when absent), matching the
    upstream response shape.
    """

    content: tuple[ContentBlock, ...]
    id: str
    model: str
    role: Role = Field(description="Always assistant in practice")
    stop_reason: AnyStopReason
    stop_sequence: str | None = None
    message_type: str = Field(alias="type", description="Object type, 'message'")
    usage: Usage

    @field_validator("stop_reason", mode="before")
    @classmethod
    def parse_stop_token(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, StopReason):
            return parse_stop_reason(value)
        return value

    @property
    def text(self) -> str:
        """Text blocks joined by newlines, empty if there are none."""
        return "\n".join(block.text for block in self.content if isinstance(block, TextBlock))

    @property
    def tool_uses(self) -> tuple[ToolUseBlock, ...]:
        """Tool invocations requested by the model, in order."""
        return tuple(block for block in self.content if isinstance(block, ToolUseBlock))
