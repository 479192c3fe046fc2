"""Tool choice policy.

Tagged by ``type``: ``auto``, ``tool`` (with the tool ``name``), ``any`` or
``none``. Unknown tags and a ``tool`` choice without a name fail to decode.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from .wire import WireModel


class ToolChoiceAuto(WireModel):
    """Model decides whether to use tools."""

    type: Literal["auto"] = "auto"


class ToolChoiceTool(WireModel):
    """Force the model to use a specific tool."""

    type: Literal["tool"] = "tool"
    name: str


class ToolChoiceAny(WireModel):
    """Force the model to use any available tool."""

    type: Literal["any"] = "any"


class ToolChoiceNone(WireModel):
    """Force the model not to use tools."""

    type: Literal["none"] = "none"


ToolChoice = Annotated[
    Union[ToolChoiceAuto, ToolChoiceTool, ToolChoiceAny, ToolChoiceNone],
    Field(discriminator="type"),
]
