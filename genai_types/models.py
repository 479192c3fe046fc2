"""Model catalog types.

Describes the models a provider exposes, as returned by the proxy's
list-models operation.
"""

from typing import ClassVar

from pydantic import Field

from .wire import WireModel


class ModelPricing(WireModel):
    """Pricing information for a model, in USD."""

    input_cost_per_million_tokens: float = Field(description="Cost per million input tokens")
    output_cost_per_million_tokens: float = Field(description="Cost per million output tokens")


class ModelInfo(WireModel):
    """Information about an available model."""

    omit_if_none: ClassVar[frozenset[str]] = frozenset({"pricing"})

    id: str = Field(description="Model identifier sent in completion requests")
    display_name: str
    max_tokens: int = Field(ge=0, description="Maximum context window size")
    provider: str = Field(description="Provider name, e.g. anthropic")
    pricing: ModelPricing | None = None
