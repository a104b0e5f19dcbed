"""Term registry: term metadata flattened into a string key/value store.

Each (term IRI, metadata kind, language) triple is one store entry under
the key ``{iri}-{kind}-{language}``. Lookups walk a fallback chain and never
raise: absence is a valid answer, since the registry backs best-effort
display rather than correctness-critical resolution.
"""

from __future__ import annotations

import logging

from .context import CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE
from .store import KeyValueStore
from .types import ENGLISH, NO_LANGUAGE_TAG, Language, MetadataKind, normalize_language

logger = logging.getLogger(__name__)


def registry_key(iri: str, kind: MetadataKind, language: Language) -> str:
    return f"{iri}-{kind.value}-{normalize_language(language)}"


class TermRegistry:
    """Persistent index of term labels, comments and messages by language."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def lookup_label(self, iri: str, language: Language) -> str | None:
        return self.lookup_item(iri, MetadataKind.LABEL, language)

    def update_label(self, iri: str, language: Language, value: str) -> None:
        self.update_item(iri, MetadataKind.LABEL, language, value)

    def lookup_comment(self, iri: str, language: Language) -> str | None:
        return self.lookup_item(iri, MetadataKind.COMMENT, language)

    def update_comment(self, iri: str, language: Language, value: str) -> None:
        self.update_item(iri, MetadataKind.COMMENT, language, value)

    def lookup_message(self, iri: str, language: Language) -> str | None:
        return self.lookup_item(iri, MetadataKind.MESSAGE, language)

    def update_message(self, iri: str, language: Language, value: str) -> None:
        self.update_item(iri, MetadataKind.MESSAGE, language, value)

    def update_item(self, iri: str, kind: MetadataKind, language: Language, value: str) -> None:
        self.store.set(registry_key(iri, kind, language), value)

    def fallback_chain(self, language: Language) -> list[Language]:
        """Languages to try, in order, without repeats.

        Requested language, then the preferred fallback (English if unset),
        then English, then no-language.
        """
        language = normalize_language(language)
        preferred = self.store.get(CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE) or ENGLISH
        chain: list[Language] = []
        for candidate in (language, preferred, ENGLISH, NO_LANGUAGE_TAG):
            if candidate not in chain:
                chain.append(candidate)
        return chain

    def lookup_item(self, iri: str, kind: MetadataKind, language: Language) -> str | None:
        language = normalize_language(language)
        for candidate in self.fallback_chain(language):
            value = self.store.get(registry_key(iri, kind, candidate))
            if value:
                if candidate != language:
                    logger.debug(f"[{iri}] {kind.value} not in [{language}], found in [{candidate}]")
                return value
        return None
