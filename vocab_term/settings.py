"""Settings for building vocabulary terms.

Settings can be built directly, from a plain dict (e.g. a loaded config
file), or from ``VOCAB_TERM_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Mapping

from .context import CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE
from .errors import ConfigurationError
from .store import KeyValueStore, get_local_store
from .types import ENGLISH

logger = logging.getLogger(__name__)

ENV_LOCALE = "VOCAB_TERM_LOCALE"
ENV_PREFERRED_FALLBACK = "VOCAB_TERM_PREFERRED_FALLBACK"
ENV_STRICT = "VOCAB_TERM_STRICT"
ENV_STORE_PATH = "VOCAB_TERM_STORE_PATH"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"Setting [{name}] expects a boolean, but got [{raw}].")


@dataclass
class Settings:
    """How terms are built: default locale, fallback, strictness and storage."""
    default_locale: str = ENGLISH
    preferred_fallback: str | None = None
    strict: bool = False
    store_path: str | None = None

    def __post_init__(self) -> None:
        if not self.default_locale:
            raise ConfigurationError("Settings *MUST* provide a default locale, but none was provided.")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        strict = data.get("strict", False)
        if isinstance(strict, str):
            strict = _parse_bool("strict", strict)
        return cls(
            default_locale=data.get("default_locale", ENGLISH),
            preferred_fallback=data.get("preferred_fallback"),
            strict=bool(strict),
            store_path=data.get("store_path"),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            default_locale=env.get(ENV_LOCALE, ENGLISH),
            preferred_fallback=env.get(ENV_PREFERRED_FALLBACK) or None,
            strict=_parse_bool(ENV_STRICT, env.get(ENV_STRICT, "")),
            store_path=env.get(ENV_STORE_PATH) or None,
        )

    def build_store(self) -> KeyValueStore:
        return get_local_store(self.store_path)

    def apply(self, store: KeyValueStore) -> KeyValueStore:
        """Write the preferred fallback language (if any) into ``store``."""
        if self.preferred_fallback:
            logger.debug(f"Preferred fallback language set to [{self.preferred_fallback}]")
            store.set(CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE, self.preferred_fallback)
        return store
