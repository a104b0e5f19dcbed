"""Locale context: the process-wide "current locale".

The current locale lives in the shared store under a well-known key (the
same key a browser-side language selector writes), so every context built
over the same store sees the same locale. Only the initial locale and the
creation time are private to each instance.
"""

from __future__ import annotations

import logging
import time

from .errors import ConfigurationError
from .store import KeyValueStore
from .types import ENGLISH

logger = logging.getLogger(__name__)

CONTEXT_KEY_LOCALE = "i18nextLng"

# A user-chosen second choice, consulted by the term registry before English.
CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE = "lang_preferred_fallback"


class LocaleContext:
    """Holder of the current locale, backed by a key/value store."""

    def __init__(self, locale: str, storage: KeyValueStore) -> None:
        if not locale:
            raise ConfigurationError(
                "A new context *MUST* be provided a locale, but none was provided."
            )
        # An empty store is falsy (it has a length), so test for absence only
        if storage is None:
            raise ConfigurationError(
                "A new context *MUST* be provided storage, but none was provided."
            )

        self._initial_locale = locale
        self._storage = storage
        self._storage.set(CONTEXT_KEY_LOCALE, locale)
        self._created_at = time.time()

    @property
    def storage(self) -> KeyValueStore:
        return self._storage

    def get_locale(self) -> str:
        """The stored locale, or the initial locale if the key was removed or emptied."""
        return self._storage.get(CONTEXT_KEY_LOCALE) or self._initial_locale

    def set_locale(self, locale: str) -> LocaleContext:
        logger.debug(f"Locale changed to [{locale}]")
        self._storage.set(CONTEXT_KEY_LOCALE, locale)
        return self

    def get_preferred_fallback(self) -> str:
        fallback = self._storage.get(CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE)
        return fallback if fallback is not None else ENGLISH

    def set_preferred_fallback(self, language: str) -> LocaleContext:
        self._storage.set(CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE, language)
        return self

    def get_initial_locale(self) -> str:
        return self._initial_locale

    def get_created_at(self) -> float:
        return self._created_at

    def __repr__(self) -> str:
        return f"LocaleContext({self.get_locale()!r}, initial={self._initial_locale!r})"
