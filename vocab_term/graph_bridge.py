"""Graph bridge: moves term metadata between VocabTerms and rdflib Graphs.

Metadata maps onto the usual vocabulary predicates:

  label      → rdfs:label
  comment    → rdfs:comment
  message    → skos:definition
  see also   → rdfs:seeAlso
  defined by → rdfs:isDefinedBy

No-language values become xsd:string literals; every other value keeps its
language tag. Reading back only consults an in-memory Graph; loading RDF
syntax into that Graph is the caller's business.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rdflib import Graph, Literal, RDFS, URIRef
from rdflib.namespace import SKOS

from .literal import RdflibFactory
from .store import KeyValueStore
from .term import VocabTerm
from .types import NO_LANGUAGE_TAG, XSD_STRING, MetadataKind, rdf_language

logger = logging.getLogger(__name__)


PREDICATES = {
    MetadataKind.LABEL: RDFS.label,
    MetadataKind.COMMENT: RDFS.comment,
    MetadataKind.MESSAGE: SKOS.definition,
}


# ---------------------------------------------------------------------------
# VocabTerm → Graph
# ---------------------------------------------------------------------------

def term_to_graph(term: VocabTerm, graph: Graph | None = None) -> Graph:
    """Add every stored value of ``term`` to ``graph`` (a new one if None)."""
    g = graph if graph is not None else _new_graph()
    subject = term.to_named_node()

    for kind, predicate in PREDICATES.items():
        for language, text in term.literal(kind).values().items():
            g.add((subject, predicate, _to_literal(text, language)))

    for other in sorted(term.see_also or ()):
        g.add((subject, RDFS.seeAlso, other))
    if term.is_defined_by is not None:
        g.add((subject, RDFS.isDefinedBy, term.is_defined_by))

    return g


def terms_to_graph(terms: Iterable[VocabTerm]) -> Graph:
    g = _new_graph()
    for term in terms:
        term_to_graph(term, g)
    return g


def _new_graph() -> Graph:
    g = Graph()
    g.bind("rdfs", RDFS)
    g.bind("skos", SKOS)
    return g


def _to_literal(text: str, language) -> Literal:
    tag = rdf_language(language)
    if tag:
        return Literal(text, lang=tag)
    return Literal(text, datatype=XSD_STRING)


# ---------------------------------------------------------------------------
# Graph → VocabTerm
# ---------------------------------------------------------------------------

def term_from_graph(
    graph: Graph,
    iri: URIRef | str,
    store: KeyValueStore,
    strict: bool = False,
) -> VocabTerm:
    """Build a VocabTerm for ``iri`` from the metadata triples in ``graph``.

    Literals without a language tag are added as no-language values.
    Non-literal objects of the metadata predicates are ignored.
    """
    subject = URIRef(str(iri))
    term = VocabTerm(subject, RdflibFactory(), store, strict)

    for kind, predicate in PREDICATES.items():
        for obj in graph.objects(subject, predicate):
            if not isinstance(obj, Literal):
                logger.debug(f"[{subject}] ignoring non-literal {kind.value} {obj}")
                continue
            language = obj.language or NO_LANGUAGE_TAG
            _add(term, kind, str(obj), language)

    for other in graph.objects(subject, RDFS.seeAlso):
        if isinstance(other, URIRef):
            term.add_see_also(other)
    defined_by = graph.value(subject, RDFS.isDefinedBy)
    if isinstance(defined_by, URIRef):
        term.add_is_defined_by(defined_by)

    return term


def _add(term: VocabTerm, kind: MetadataKind, text: str, language) -> None:
    if kind is MetadataKind.LABEL:
        term.add_label(text, language)
    elif kind is MetadataKind.COMMENT:
        term.add_comment(text, language)
    else:
        term.add_message(text, language)
