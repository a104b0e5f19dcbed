"""Tests for moving term metadata between VocabTerms and rdflib Graphs."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from rdflib import RDFS, Graph, Literal, Namespace, URIRef
from rdflib.namespace import SKOS, XSD

from vocab_term.graph_bridge import term_from_graph, term_to_graph, terms_to_graph
from vocab_term.literal import RdflibFactory
from vocab_term.store import MemoryStore
from vocab_term.term import VocabTerm

TEST = Namespace("https://test.com/vocab#")


@pytest.fixture
def store():
    return MemoryStore()


def _name_term(store) -> VocabTerm:
    return (
        VocabTerm(TEST.name, RdflibFactory(), store, strict=True)
        .add_label_no_language("Name")
        .add_label("First name", "en")
        .add_label("Prénom", "fr")
        .add_comment("A person's first name", "en")
        .add_message("Too long: {{0}}", "en")
        .add_see_also(URIRef("https://schema.org/givenName"))
        .add_is_defined_by(URIRef("https://test.com/vocab"))
    )


# ---------------------------------------------------------------------------
# VocabTerm → Graph
# ---------------------------------------------------------------------------

class TestTermToGraph:
    def test_labels(self, store):
        g = term_to_graph(_name_term(store))
        labels = set(g.objects(TEST.name, RDFS.label))
        assert labels == {
            Literal("Name", datatype=XSD.string),
            Literal("First name", lang="en"),
            Literal("Prénom", lang="fr"),
        }

    def test_comment_and_message(self, store):
        g = term_to_graph(_name_term(store))
        assert g.value(TEST.name, RDFS.comment) == Literal("A person's first name", lang="en")
        assert g.value(TEST.name, SKOS.definition) == Literal("Too long: {{0}}", lang="en")

    def test_links(self, store):
        g = term_to_graph(_name_term(store))
        assert g.value(TEST.name, RDFS.seeAlso) == URIRef("https://schema.org/givenName")
        assert g.value(TEST.name, RDFS.isDefinedBy) == URIRef("https://test.com/vocab")

    def test_non_strict_seed_exported_as_label(self, store):
        term = VocabTerm(TEST.familyName, RdflibFactory(), store)
        g = term_to_graph(term)
        assert g.value(TEST.familyName, RDFS.label) == Literal("familyName", datatype=XSD.string)

    def test_adds_to_existing_graph(self, store):
        g = Graph()
        assert term_to_graph(_name_term(store), g) is g
        assert len(g) == 7

    def test_terms_to_graph(self, store):
        other = VocabTerm(TEST.age, RdflibFactory(), store, strict=True).add_label("Age", "en")
        g = terms_to_graph([_name_term(store), other])
        assert g.value(TEST.age, RDFS.label) == Literal("Age", lang="en")
        assert len(set(g.subjects())) == 2

    def test_serializes_with_prefixes(self, store):
        turtle = terms_to_graph([_name_term(store)]).serialize(format="turtle")
        assert "rdfs:label" in turtle
        assert "skos:definition" in turtle


# ---------------------------------------------------------------------------
# Graph → VocabTerm
# ---------------------------------------------------------------------------

class TestTermFromGraph:
    def test_round_trip(self, store):
        g = term_to_graph(_name_term(store))
        term = term_from_graph(g, TEST.name, MemoryStore(), strict=True)

        assert term.label == "First name"
        assert term.as_language("fr").label == "Prénom"
        assert term.as_language("").label == "Name"
        assert term.comment == "A person's first name"
        assert term.message_params("10") == "Too long: 10"
        assert term.see_also == {URIRef("https://schema.org/givenName")}
        assert term.is_defined_by == URIRef("https://test.com/vocab")

    def test_plain_literal_is_no_language(self, store):
        g = Graph()
        g.add((TEST.age, RDFS.label, Literal("Age")))
        term = term_from_graph(g, str(TEST.age), store, strict=True)
        assert term.as_language("de").label_literal == Literal("Age", datatype=XSD.string)

    def test_non_literal_objects_ignored(self, store):
        g = Graph()
        g.add((TEST.age, RDFS.label, URIRef("https://example.com/not-a-label")))
        term = term_from_graph(g, TEST.age, store, strict=True)
        assert term.label is None

    def test_values_registered(self, store):
        g = Graph()
        g.add((TEST.age, RDFS.comment, Literal("Âge d'une personne", lang="fr")))
        term = term_from_graph(g, TEST.age, store)
        assert term.registry.lookup_comment(str(TEST.age), "fr") == "Âge d'une personne"

    def test_unknown_subject_gives_bare_term(self, store):
        term = term_from_graph(Graph(), TEST.missing, store)
        assert term.label == "missing"
        assert term.comment is None
