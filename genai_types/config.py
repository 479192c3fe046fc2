"""Environment-driven settings for the wire codec.

Settings are read once and cached. Tests (or long-running hosts that change
their environment) call ``get_settings.cache_clear()`` to re-read them.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_flag(name: str, default: bool) -> bool:
    return os.environ.get(name, "true" if default else "false").lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Codec settings.

    Attributes:
        explicit_nulls: Emit absent optional fields as ``null`` instead of
            leaving them out of the encoded form.
        accept_legacy_proxy_tags: Accept the externally-tagged proxy envelope
            (``"ListModels"``, ``{"GenerateCompletion": {...}}``) on decode.
    """

    explicit_nulls: bool = False
    accept_legacy_proxy_tags: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from GENAI_TYPES_* environment variables."""
    return Settings(
        explicit_nulls=_env_flag("GENAI_TYPES_EXPLICIT_NULLS", False),
        accept_legacy_proxy_tags=_env_flag("GENAI_TYPES_ACCEPT_LEGACY_PROXY_TAGS", True),
    )
