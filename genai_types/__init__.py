"""Schemas for a generative completion API and its proxy envelope.

Pure data contract: pydantic models, their wire encoding and the error
kinds shared by the clients, proxies and runtimes that exchange them.
"""

from .config import Settings, get_settings
from .errors import (
    ApiError,
    AuthenticationError,
    GenAIError,
    HttpError,
    InvalidResponseError,
    InvalidRoleError,
    JsonError,
    NON_RETRYABLE_ERRORS,
    RateLimitExceeded,
    RETRYABLE_ERRORS,
    error_from_status,
    is_retryable,
)
from .messages import (
    AnyStopReason,
    CompletionRequest,
    CompletionResponse,
    ContentBlock,
    Message,
    OtherStopReason,
    Role,
    StopReason,
    TextBlock,
    Tool,
    ToolContent,
    ToolResultBlock,
    ToolUseBlock,
    Usage,
    parse_stop_reason,
)
from .models import ModelInfo, ModelPricing
from .proxy import (
    CompletionResult,
    GenerateCompletionRequest,
    ListModelsRequest,
    ListModelsResponse,
    ProxyErrorResponse,
    ProxyRequest,
    ProxyResponse,
)
from .tool_choice import ToolChoice, ToolChoiceAny, ToolChoiceAuto, ToolChoiceNone, ToolChoiceTool
from .wire import WireModel, decode, decode_json, encode, encode_json

__all__ = [
    # Codec
    "WireModel",
    "encode",
    "encode_json",
    "decode",
    "decode_json",
    "Settings",
    "get_settings",
    # Errors
    "GenAIError",
    "HttpError",
    "JsonError",
    "ApiError",
    "InvalidResponseError",
    "InvalidRoleError",
    "RateLimitExceeded",
    "AuthenticationError",
    "error_from_status",
    "is_retryable",
    "RETRYABLE_ERRORS",
    "NON_RETRYABLE_ERRORS",
    # Model catalog
    "ModelInfo",
    "ModelPricing",
    # Tool choice
    "ToolChoice",
    "ToolChoiceAuto",
    "ToolChoiceTool",
    "ToolChoiceAny",
    "ToolChoiceNone",
    # Messages
    "Role",
    "ContentBlock",
    "TextBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ToolContent",
    "Message",
    "Tool",
    "CompletionRequest",
    "CompletionResponse",
    "Usage",
    "StopReason",
    "OtherStopReason",
    "AnyStopReason",
    "parse_stop_reason",
    # Proxy
    "ProxyRequest",
    "ProxyResponse",
    "ListModelsRequest",
    "GenerateCompletionRequest",
    "ListModelsResponse",
    "CompletionResult",
    "ProxyErrorResponse",
]
