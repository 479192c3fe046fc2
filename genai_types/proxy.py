"""Envelope protocol for the completion proxy.

Requests and responses are unions tagged by ``type``:

- inbound: ``list_models``, ``generate_completion``
- outbound: ``list_models``, ``completion``, ``error``

The proxy flattens every failure into ``ProxyErrorResponse.error``, a plain
message string. Consumers must not parse structure back out of it.

Decoding also accepts the older externally-tagged envelope
(``"ListModels"``, ``{"GenerateCompletion": {"request": ...}}``,
``{"Error": {"error": ...}}``) unless GENAI_TYPES_ACCEPT_LEGACY_PROXY_TAGS
is false. Encoding always produces the ``type``-tagged form.
"""

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BeforeValidator, Field

from .config import get_settings
from .messages import CompletionRequest, CompletionResponse
from .models import ModelInfo
from .wire import WireModel

logger = logging.getLogger(__name__)


# =============================================================================
# Requests
# =============================================================================


class ListModelsRequest(WireModel):
    """Ask the proxy for the models it can serve."""

    type: Literal["list_models"] = "list_models"


class GenerateCompletionRequest(WireModel):
    """Forward a completion request upstream."""

    type: Literal["generate_completion"] = "generate_completion"
    request: CompletionRequest


# =============================================================================
# Responses
# =============================================================================


class ListModelsResponse(WireModel):
    """Models available through the proxy, in provider order."""

    type: Literal["list_models"] = "list_models"
    models: tuple[ModelInfo, ...]


class CompletionResult(WireModel):
    """A completion generated upstream."""

    type: Literal["completion"] = "completion"
    completion: CompletionResponse


class ProxyErrorResponse(WireModel):
    """Any failure, flattened to its message."""

    type: Literal["error"] = "error"
    error: str

    @classmethod
    def from_error(cls, error: BaseException) -> "ProxyErrorResponse":
        """Flatten an exception to its human-readable message.

        For ``ApiError`` this is ``"API error (<status>): <message>"``; the
        status does not survive as a separate field.
        """
        return cls(error=str(error))


# =============================================================================
# Legacy envelope
# =============================================================================

_LEGACY_REQUEST_TAGS = {
    "ListModels": "list_models",
    "GenerateCompletion": "generate_completion",
}

_LEGACY_RESPONSE_TAGS = {
    "ListModels": "list_models",
    "Completion": "completion",
    "Error": "error",
}


def _from_legacy(value: Any, tags: dict[str, str]) -> Any:
    """Rewrite an externally-tagged envelope into the ``type``-tagged form."""
    if not get_settings().accept_legacy_proxy_tags:
        return value
    if isinstance(value, str) and value in tags:
        logger.debug("Normalized legacy proxy envelope %r", value)
        return {"type": tags[value]}
    if isinstance(value, dict) and len(value) == 1:
        ((name, payload),) = value.items()
        if name in tags and isinstance(payload, dict):
            logger.debug("Normalized legacy proxy envelope %r", name)
            return {"type": tags[name], **payload}
    return value


def _legacy_request(value: Any) -> Any:
    return _from_legacy(value, _LEGACY_REQUEST_TAGS)


def _legacy_response(value: Any) -> Any:
    return _from_legacy(value, _LEGACY_RESPONSE_TAGS)


ProxyRequest = Annotated[
    Union[ListModelsRequest, GenerateCompletionRequest],
    Field(discriminator="type"),
    BeforeValidator(_legacy_request),
]

ProxyResponse = Annotated[
    Union[ListModelsResponse, CompletionResult, ProxyErrorResponse],
    Field(discriminator="type"),
    BeforeValidator(_legacy_response),
]
