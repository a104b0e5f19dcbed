"""Vocabulary terms with multi-lingual metadata.

Gives machine-identified vocabulary terms (IRIs) human-readable labels,
comments and messages in any number of languages, resolved against a
process-wide locale with a fixed fallback order:

- MultiLingualLiteral: one text in N languages; requested language, then
  English, then the no-language value. Mandatory reads never fall back.
  Message templates take positional {{0}}, {{1}}, ... parameters.
- LocaleContext: the current locale, held in a shared key/value store.
- TermRegistry: term metadata flattened into the same store, with its own
  fallback chain (requested, preferred fallback, English, no-language).
- VocabTerm: one IRI with a label, comment and message literal, read via
  one-shot ``as_language()`` / ``mandatory`` modifiers or ``resolve()``.

The graph bridge (vocab_term.graph_bridge) moves term metadata in and out
of rdflib Graphs using rdfs:label, rdfs:comment and skos:definition.
"""

from .context import CONTEXT_KEY_LOCALE, CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE, LocaleContext
from .errors import (
    ArityError,
    ConfigurationError,
    ContextError,
    MalformedIriError,
    TermLookupError,
    ValidationError,
)
from .literal import MultiLingualLiteral, RdfFactory, RdflibFactory
from .registry import TermRegistry
from .settings import Settings
from .store import JsonFileStore, KeyValueStore, MemoryStore, build_store, get_local_store
from .term import VocabTerm, build_basic_term
from .types import NO_LANGUAGE_TAG, RDF_LANGSTRING, XSD_STRING, MetadataKind, Resolution

__all__ = [
    "ArityError",
    "CONTEXT_KEY_LOCALE",
    "CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE",
    "ConfigurationError",
    "ContextError",
    "JsonFileStore",
    "KeyValueStore",
    "LocaleContext",
    "MalformedIriError",
    "MemoryStore",
    "MetadataKind",
    "MultiLingualLiteral",
    "NO_LANGUAGE_TAG",
    "RDF_LANGSTRING",
    "RdfFactory",
    "RdflibFactory",
    "Resolution",
    "Settings",
    "TermLookupError",
    "TermRegistry",
    "ValidationError",
    "VocabTerm",
    "XSD_STRING",
    "build_basic_term",
    "build_store",
    "get_local_store",
]
