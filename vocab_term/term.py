"""Vocabulary term: an IRI plus its label, comment and message in many languages.

This Turtle snippet illustrates the metadata a term carries:

    ex:name a rdf:Property ;
      rdfs:label "Name" ;
      rdfs:label "First name"@en ;
      rdfs:label "Nombre"@es ;
      rdfs:comment "A person's first name"@en .

    ex:errNameTooLong a rdfs:Literal ;
      skos:definition "Name must be less than {{0}}, but we got {{1}}"@en .

Reads use the current locale from a LocaleContext unless a language is
requested. Two one-shot modifiers configure the *next* read only:

    term.as_language("fr").label      # French, falling back to English
    term.mandatory.label              # raise instead of returning None

Both are cleared by every read, whether it returns or raises. ``resolve()``
is the stateless equivalent, taking an explicit Resolution.
"""

from __future__ import annotations

import logging

from rdflib import Literal, URIRef
from rdflib.term import Identifier

from .context import LocaleContext
from .errors import MalformedIriError, ValidationError
from .literal import MultiLingualLiteral, RdfFactory, RdflibFactory
from .registry import TermRegistry
from .settings import Settings
from .store import KeyValueStore
from .types import (
    ENGLISH,
    NO_LANGUAGE_TAG,
    Language,
    MetadataKind,
    Resolution,
    is_valid_language,
    normalize_language,
)

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = ENGLISH

LABEL_CONTEXT = "rdfs:label"
COMMENT_CONTEXT = "rdfs:comment"
MESSAGE_CONTEXT = "message (should be defined in RDF vocab using: skos:definition)"


class VocabTerm:
    """A vocabulary term: owns its IRI and three multi-lingual literals.

    Unless ``strict``, the label is seeded with the IRI's local name as a
    no-language value (e.g. 'name' for 'http://example.com/vocab#name'),
    which a later no-language label simply replaces.

    The locale context and registry are created over ``store`` unless shared
    instances are passed in. Note that creating a context writes ``locale``
    into the store as the current locale.
    """

    def __init__(
        self,
        iri: URIRef | str,
        rdf_factory: RdfFactory,
        store: KeyValueStore,
        strict: bool = False,
        *,
        locale: str = DEFAULT_LOCALE,
        context: LocaleContext | None = None,
        registry: TermRegistry | None = None,
    ) -> None:
        self.iri = iri if isinstance(iri, URIRef) else rdf_factory.named_node(iri)
        self.rdf_factory = rdf_factory
        self.strict = bool(strict)

        self._context = context if context is not None else LocaleContext(locale, store)
        self._registry = registry if registry is not None else TermRegistry(store)

        self._literals: dict[MetadataKind, MultiLingualLiteral] = {
            MetadataKind.LABEL: MultiLingualLiteral(rdf_factory, self.iri, context_message=LABEL_CONTEXT),
            MetadataKind.COMMENT: MultiLingualLiteral(rdf_factory, self.iri, context_message=COMMENT_CONTEXT),
            MetadataKind.MESSAGE: MultiLingualLiteral(rdf_factory, self.iri, context_message=MESSAGE_CONTEXT),
        }

        if not self.strict:
            self._literals[MetadataKind.LABEL].add_value(
                self.extract_iri_local_name(self.iri), NO_LANGUAGE_TAG
            )

        self._is_defined_by: URIRef | None = None
        self._see_also: set[URIRef] | None = None

        self._mandatory = False
        self._language_override: Language | None = None

    # -----------------------------------------------------------------------
    # Identity
    # -----------------------------------------------------------------------

    @property
    def value(self) -> str:
        return str(self.iri)

    @property
    def iri_as_string(self) -> str:
        return str(self.iri)

    def to_named_node(self) -> URIRef:
        return self.iri

    def __str__(self) -> str:
        return str(self.iri)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VocabTerm):
            return self.iri == other.iri
        if isinstance(other, Identifier):
            return self.iri == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.iri)

    def __repr__(self) -> str:
        return f"VocabTerm({self.iri})"

    @property
    def context(self) -> LocaleContext:
        return self._context

    @property
    def registry(self) -> TermRegistry:
        return self._registry

    def literal(self, kind: MetadataKind) -> MultiLingualLiteral:
        return self._literals[kind]

    # -----------------------------------------------------------------------
    # One-shot read modifiers
    # -----------------------------------------------------------------------

    @property
    def mandatory(self) -> VocabTerm:
        self._mandatory = True
        return self

    def as_language(self, language: Language | None) -> VocabTerm:
        # An empty language means no language
        self._language_override = normalize_language(language) or NO_LANGUAGE_TAG
        return self

    @property
    def as_english(self) -> VocabTerm:
        return self.as_language(ENGLISH)

    def reset_state(self) -> None:
        self._language_override = None
        self._mandatory = False

    def _pending_request(self) -> Resolution:
        language = self._language_override
        if language is None:
            language = self._context.get_locale()
        return Resolution(language=language, mandatory=self._mandatory)

    # -----------------------------------------------------------------------
    # Reads
    # -----------------------------------------------------------------------

    def resolve(self, kind: MetadataKind, request: Resolution | None = None) -> Literal | None:
        """Resolve one metadata kind for an explicit request.

        A request without a language uses the context's current locale. The
        one-shot modifiers are neither consulted nor cleared.
        """
        if request is None:
            request = Resolution()
        if request.language is None:
            request = request.with_language(self._context.get_locale())
        return self._literals[kind].resolve(request)

    def _read(self, kind: MetadataKind) -> Literal | None:
        try:
            return self.resolve(kind, self._pending_request())
        finally:
            self.reset_state()

    @property
    def label_literal(self) -> Literal | None:
        return self._read(MetadataKind.LABEL)

    @property
    def label(self) -> str | None:
        literal = self.label_literal
        return str(literal) if literal is not None else None

    @property
    def comment_literal(self) -> Literal | None:
        return self._read(MetadataKind.COMMENT)

    @property
    def comment(self) -> str | None:
        literal = self.comment_literal
        return str(literal) if literal is not None else None

    @property
    def message_literal(self) -> Literal | None:
        return self._read(MetadataKind.MESSAGE)

    @property
    def message(self) -> str | None:
        literal = self.message_literal
        return str(literal) if literal is not None else None

    def message_params_literal(self, *values: str) -> Literal | None:
        try:
            return self._literals[MetadataKind.MESSAGE].expand(self._pending_request(), *values)
        finally:
            self.reset_state()

    def message_params(self, *values: str) -> str | None:
        literal = self.message_params_literal(*values)
        return str(literal) if literal is not None else None

    # -----------------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------------

    def add_label(self, value: str, language: Language) -> VocabTerm:
        return self._add(MetadataKind.LABEL, value, language)

    def add_label_no_language(self, value: str) -> VocabTerm:
        return self.add_label(value, NO_LANGUAGE_TAG)

    def add_comment(self, value: str, language: Language) -> VocabTerm:
        return self._add(MetadataKind.COMMENT, value, language)

    def add_comment_no_language(self, value: str) -> VocabTerm:
        return self.add_comment(value, NO_LANGUAGE_TAG)

    def add_message(self, value: str, language: Language) -> VocabTerm:
        return self._add(MetadataKind.MESSAGE, value, language)

    def add_message_no_language(self, value: str) -> VocabTerm:
        return self.add_message(value, NO_LANGUAGE_TAG)

    def _add(self, kind: MetadataKind, value: str, language: Language) -> VocabTerm:
        self.validate_add_params(value, language, kind.value)
        self._literals[kind].add_value(value, language)
        self._registry.update_item(str(self.iri), kind, language, value)
        return self

    def validate_add_params(self, value: str | None, language: Language | None, what: str) -> VocabTerm:
        """Both a value (possibly empty) and a well-formed language tag must be given."""
        if value is None:
            raise ValidationError(
                f"Attempted to add a non-existent [{what}] value to vocab term [{self.iri}]",
                context=self._context,
            )
        if not language:
            raise ValidationError(
                f"Attempted to add the [{what}] value [{value}], but without specifying a language",
                context=self._context,
            )
        if not is_valid_language(language):
            raise ValidationError(
                f"Attempted to add the [{what}] value [{value}] to vocab term [{self.iri}] "
                f"in language [{language}], which is not a valid language tag",
                context=self._context,
            )
        return self

    def add_see_also(self, iri: URIRef) -> VocabTerm:
        if self._see_also is None:
            self._see_also = set()
        self._see_also.add(iri)
        return self

    @property
    def see_also(self) -> set[URIRef] | None:
        return self._see_also

    def add_is_defined_by(self, iri: URIRef) -> VocabTerm:
        self._is_defined_by = iri
        return self

    @property
    def is_defined_by(self) -> URIRef | None:
        return self._is_defined_by

    # -----------------------------------------------------------------------
    # IRI helpers
    # -----------------------------------------------------------------------

    @staticmethod
    def extract_iri_local_name(iri: URIRef | str) -> str:
        """The part after the last '#', else after the last path '/'."""
        iri = str(iri)
        hash_pos = iri.rfind("#")
        if hash_pos > -1:
            return iri[hash_pos + 1:]

        slash_pos = iri.rfind("/")
        lowered = iri.lower()
        scheme_end = 8 if lowered.startswith("https") else 7
        if slash_pos == -1 or (lowered.startswith("http") and slash_pos < scheme_end):
            raise MalformedIriError(
                f"Expected hash fragment ('#') or slash ('/') (other than 'https://...') in IRI [{iri}]"
            )
        return iri[slash_pos + 1:]

    @staticmethod
    def is_string(value: object) -> bool:
        """A plain string, as opposed to an RDF term."""
        return isinstance(value, str) and not isinstance(value, Identifier)

    @staticmethod
    def is_string_iri(value: object) -> bool:
        if not VocabTerm.is_string(value):
            return False
        lowered = value.lower()
        return lowered.startswith("http://") or lowered.startswith("https://")


def build_basic_term(
    iri: URIRef | str,
    store: KeyValueStore | None = None,
    strict: bool | None = None,
    settings: Settings | None = None,
) -> VocabTerm:
    """Build a VocabTerm over rdflib terms, configured from ``settings``."""
    settings = settings or Settings()
    if store is None:
        store = settings.build_store()
    settings.apply(store)
    return VocabTerm(
        iri,
        RdflibFactory(),
        store,
        settings.strict if strict is None else strict,
        locale=settings.default_locale,
    )
