"""Multi-lingual literal: one piece of text held in any number of languages.

Resolution order for a requested language R (non-mandatory):

  1. the value tagged R
  2. the English value (the current language is reset to "en")
  3. the no-language value (the current language is reset to NO_LANGUAGE_TAG)

A mandatory read never falls back: a miss on R raises TermLookupError.

Values may be message templates with positional ``{{0}}``, ``{{1}}``, ...
placeholders, expanded by ``params()`` after an arity check.
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

from rdflib import Literal, URIRef

from .errors import ArityError, TermLookupError, ValidationError
from .types import (
    ENGLISH,
    NO_LANGUAGE_TAG,
    RDF_LANGSTRING,
    XSD_STRING,
    Language,
    Resolution,
    is_valid_language,
    normalize_language,
    rdf_language,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_MESSAGE = "<None provided>"

PLACEHOLDER_OPEN = "{{"


# ---------------------------------------------------------------------------
# RDF term factory
# ---------------------------------------------------------------------------

class RdfFactory(Protocol):
    """Builds the RDF terms handed back to callers."""

    def literal(self, text: str, language: str = "") -> Literal: ...

    def named_node(self, iri: str) -> URIRef: ...


class RdflibFactory:
    """RdfFactory producing rdflib terms.

    A literal without a language is typed xsd:string explicitly.
    """

    def literal(self, text: str, language: str = "") -> Literal:
        if language:
            return Literal(text, lang=language)
        return Literal(text, datatype=XSD_STRING)

    def named_node(self, iri: str) -> URIRef:
        return URIRef(iri)


# ---------------------------------------------------------------------------
# MultiLingualLiteral
# ---------------------------------------------------------------------------

class MultiLingualLiteral:
    """A literal with values in several languages and a sticky current language.

    ``as_language()`` and the fallback steps of ``lookup()`` change the
    current language, and the change persists until the next one.
    ``resolve()`` is the stateless form: it takes an explicit Resolution and
    leaves the current language alone.
    """

    def __init__(
        self,
        rdf_factory: RdfFactory,
        iri: URIRef | str,
        values: Mapping[Language, str] | None = None,
        context_message: str | None = None,
    ) -> None:
        self._rdf_factory = rdf_factory
        self._iri = iri
        self._context_message = context_message or DEFAULT_CONTEXT_MESSAGE
        self._values: dict[Language, str] = {}
        for language, text in (values or {}).items():
            self._values[self._checked_language(language, text)] = text
        self._language: Language | None = None

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------

    def get_iri(self) -> URIRef | str:
        return self._iri

    @property
    def context_message(self) -> str:
        return self._context_message

    @property
    def current_language(self) -> Language | None:
        return self._language

    def values(self) -> dict[Language, str]:
        """A copy of the stored values, keyed by language."""
        return dict(self._values)

    @property
    def value(self) -> str:
        literal = self.lookup(False)
        return str(literal) if literal is not None else ""

    @property
    def language(self) -> str:
        return rdf_language(self._language)

    @property
    def datatype(self) -> URIRef:
        return RDF_LANGSTRING if self.language else XSD_STRING

    def handle_no_language_tag(self) -> str:
        return rdf_language(self._language)

    def equals(self, other: object) -> bool:
        """True if ``other`` is a literal matching one of our stored values."""
        if not isinstance(other, Literal):
            return False
        language = normalize_language(other.language or "")
        return self._values.get(language) == str(other)

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def add_value(self, value: str, language: Language) -> MultiLingualLiteral:
        """Store ``value`` under ``language``.

        The first value added also becomes the current language, unless a
        language was already selected with ``as_language()``.
        """
        language = self._checked_language(language, value)
        if self._language is None:
            self._language = language
        self._values[language] = value
        return self

    def _checked_language(self, language: Language, value: str) -> Language:
        language = normalize_language(language)
        if not is_valid_language(language):
            raise ValidationError(
                f"Attempted to add the value [{value}] to MultiLingualLiteral with IRI "
                f"[{self._iri}] in language [{language}], which is not a valid language tag "
                f"(Context: [{self._context_message}])."
            )
        return language

    def as_language(self, tag: Language) -> MultiLingualLiteral:
        self._language = normalize_language(tag)
        return self

    @property
    def set_to_english(self) -> MultiLingualLiteral:
        return self.as_language(ENGLISH)

    # -----------------------------------------------------------------------
    # Resolution
    # -----------------------------------------------------------------------

    def resolve_text(self, request: Resolution) -> tuple[str | None, Language | None]:
        """Resolve the raw text for ``request``.

        Returns the text (None if nothing was found) and the language it was
        actually found under.
        """
        language = request.language
        if language is None:
            if request.mandatory:
                raise TermLookupError(
                    f"No value has been added to the literal with IRI [{self._iri}] "
                    f"(Context: [{self._context_message}])."
                )
            return None, None

        text = self._values.get(language)
        if text:
            return text, language

        if request.mandatory:
            raise TermLookupError(
                f"MultiLingualLiteral message with IRI [{self._iri}] required value in "
                f"language [{language}], but none found (Context: [{self._context_message}])."
            )

        text = self._values.get(ENGLISH)
        if text:
            logger.debug(f"[{self._iri}] no value in [{language}], using English")
            return text, ENGLISH

        logger.debug(f"[{self._iri}] no value in [{language}] or English, using no-language value")
        return self._values.get(NO_LANGUAGE_TAG), NO_LANGUAGE_TAG

    def resolve(self, request: Resolution) -> Literal | None:
        text, language = self.resolve_text(request)
        if text is None:
            return None
        return self._rdf_factory.literal(text, rdf_language(language))

    def expand(self, request: Resolution, *values: str) -> Literal | None:
        """Resolve ``request`` and fill the template's placeholders with ``values``."""
        text, language = self.resolve_text(request)
        if text is None:
            return None
        return self._rdf_factory.literal(self._substitute(text, language, values), rdf_language(language))

    def lookup(self, mandatory: bool) -> Literal | None:
        """Resolve in the current language, falling back as described above.

        On fallback the current language is reset to the language the value
        was found under, so the returned literal carries the right tag.
        """
        text, language = self.resolve_text(Resolution(self._language, mandatory))
        self._language = language
        if text is None:
            return None
        return self._rdf_factory.literal(text, self.handle_no_language_tag())

    def lookup_english(self, mandatory: bool) -> Literal | None:
        return self.as_language(ENGLISH).lookup(mandatory)

    def params(self, mandatory: bool, *values: str) -> Literal | None:
        """Like ``lookup()``, then expand ``{{n}}`` placeholders with ``values``.

        Only the first occurrence of each marker is replaced.
        """
        text, language = self.resolve_text(Resolution(self._language, mandatory))
        self._language = language
        if text is None:
            return None
        return self._rdf_factory.literal(
            self._substitute(text, language, values), self.handle_no_language_tag()
        )

    def _substitute(self, text: str, language: Language | None, values: tuple[str, ...]) -> str:
        required = text.count(PLACEHOLDER_OPEN)
        if required != len(values):
            raise ArityError(
                f"Setting parameters on MultiLingualLiteral with IRI [{self._iri}] and value "
                f"[{text}] in language [{language}], but it requires [{required}] params and "
                f"we received [{len(values)}] (Context: [{self._context_message}])."
            )
        for index, value in enumerate(values):
            text = text.replace("{{" + str(index) + "}}", value, 1)
        return text

    def __repr__(self) -> str:
        languages = ", ".join(sorted(str(language) for language in self._values))
        return f"MultiLingualLiteral({self._iri}, [{languages}])"
