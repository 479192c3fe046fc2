"""Wire codec shared by every schema in the package.

All schemas derive from ``WireModel``: frozen pydantic models that reject
unknown fields. Optional fields listed in ``omit_if_none`` are left out of
the encoded form while they hold None, unless the caller asks for explicit
nulls.

``encode``/``decode`` are the only entry points consumers need. Validation
failures come back as ``JsonError`` with the validator's text intact.

Which error to catch:

- ``decode``/``decode_json`` and the named constructors
  (``Message.new_structured``, ``Message.user``, ``Message.assistant``)
  raise ``GenAIError`` subclasses only.
- Calling a model class directly (``Message(...)``, ``ModelInfo(...)``) or
  assigning to a frozen field is plain pydantic and raises
  ``pydantic.ValidationError``.
"""

import logging
from functools import lru_cache
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    ValidationError,
    model_serializer,
)

from .config import get_settings
from .errors import JsonError

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Immutable schema with a per-field omission policy."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    # Optional fields dropped from the encoded form when they are None
    omit_if_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_wire(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        context = info.context or {}
        if context.get("explicit_nulls"):
            return data
        for name in self.omit_if_none:
            if name in data and data[name] is None:
                del data[name]
        return data


@lru_cache(maxsize=128)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        hash(target)
    except TypeError:
        # Unhashable metadata in an Annotated alias; build without caching
        return TypeAdapter(target)
    return _cached_adapter(target)


def _context(explicit_nulls: bool | None) -> dict[str, Any]:
    if explicit_nulls is None:
        explicit_nulls = get_settings().explicit_nulls
    return {"explicit_nulls": explicit_nulls}


def encode(value: BaseModel, *, explicit_nulls: bool | None = None) -> Any:
    """Encode a schema instance to a JSON-compatible structure.

    Args:
        value: Any model from this package.
        explicit_nulls: Emit absent optionals as None. Defaults to the
            GENAI_TYPES_EXPLICIT_NULLS setting.
    """
    return value.model_dump(mode="json", by_alias=True, context=_context(explicit_nulls))


def encode_json(value: BaseModel, *, explicit_nulls: bool | None = None) -> str:
    """Encode a schema instance to JSON text."""
    return value.model_dump_json(by_alias=True, context=_context(explicit_nulls))


def decode(target: Any, data: Any) -> Any:
    """Decode a JSON-compatible structure into ``target``.

    Args:
        target: A model class or a union alias such as ``ContentBlock``.
        data: Parsed JSON (dicts, lists, scalars).

    Raises:
        JsonError: The data does not match ``target``.
    """
    try:
        return _adapter_for(target).validate_python(data)
    except ValidationError as e:
        logger.debug("Failed to decode %s: %s", _type_name(target), e)
        raise JsonError.wrap(e) from e


def decode_json(target: Any, text: str | bytes) -> Any:
    """Decode JSON text into ``target``; malformed JSON is a JsonError too."""
    try:
        return _adapter_for(target).validate_json(text)
    except ValidationError as e:
        logger.debug("Failed to decode %s from JSON: %s", _type_name(target), e)
        raise JsonError.wrap(e) from e


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)
