"""Core types for vocabulary term metadata.

A vocabulary term carries three kinds of human-readable metadata (label,
comment, message), each of which may be held in any number of languages.
Languages are plain BCP-47 tags, plus one reserved marker for values that
carry no language qualifier at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from rdflib import RDF, XSD


# ---------------------------------------------------------------------------
# NO_LANGUAGE_TAG: first-class "no language" marker
# ---------------------------------------------------------------------------

NO_LANGUAGE_TOKEN = "<No Language>"


class _NoLanguageType:
    """Sentinel for a value with no language qualifier (xsd:string semantics).

    Compares equal only to itself, so no real language tag can collide with
    it. Its string form is the token used in persisted store keys.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_LANGUAGE_TAG"

    def __str__(self) -> str:
        return NO_LANGUAGE_TOKEN

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _NoLanguageType)

    def __hash__(self) -> int:
        return hash(NO_LANGUAGE_TOKEN)


NO_LANGUAGE_TAG = _NoLanguageType()

Language = Union[str, _NoLanguageType]

ENGLISH = "en"

XSD_STRING = XSD.string
RDF_LANGSTRING = RDF.langString

# Tags rdflib accepts for language-tagged literals
LANGUAGE_TAG_PATTERN = re.compile(r"^[a-zA-Z]+(?:-[a-zA-Z0-9]+)*$")


def normalize_language(tag: Language | None) -> Language | None:
    """Map the empty string (and the persisted token) onto NO_LANGUAGE_TAG."""
    if tag is None or tag is NO_LANGUAGE_TAG:
        return tag
    if tag == "" or tag == NO_LANGUAGE_TOKEN:
        return NO_LANGUAGE_TAG
    return tag


def is_valid_language(tag: Language | None) -> bool:
    """True for NO_LANGUAGE_TAG and for any tag an RDF literal can carry."""
    tag = normalize_language(tag)
    if tag is NO_LANGUAGE_TAG:
        return True
    return isinstance(tag, str) and LANGUAGE_TAG_PATTERN.match(tag) is not None


def rdf_language(tag: Language | None) -> str:
    """The tag as it crosses into RDF: empty for no-language, else the raw tag."""
    if tag is None or tag is NO_LANGUAGE_TAG:
        return ""
    return tag


# ---------------------------------------------------------------------------
# MetadataKind: which piece of term metadata
# ---------------------------------------------------------------------------

class MetadataKind(Enum):
    """The three metadata slots of a vocabulary term."""
    LABEL = "label"
    COMMENT = "comment"
    MESSAGE = "message"


# ---------------------------------------------------------------------------
# Resolution: an immutable read request
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Resolution:
    """What to resolve: which language, and whether absence is an error.

    A ``language`` of None means no language has been selected at all.
    """
    language: Language | None = None
    mandatory: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", normalize_language(self.language))

    def with_language(self, language: Language | None) -> Resolution:
        return Resolution(language=language, mandatory=self.mandatory)

    def __repr__(self) -> str:
        flag = ", mandatory" if self.mandatory else ""
        return f"Resolution({self.language!r}{flag})"
