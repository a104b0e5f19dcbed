"""Person vocabulary: worked example terms.

The example vocabulary, in Turtle:

    prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#>
    prefix skos: <http://www.w3.org/2004/02/skos/core#>
    prefix test: <https://test.com/vocab#>

    test:name a rdf:Property ;
      rdfs:label "Name" ;
      rdfs:label "First name"@en ;
      rdfs:label "Prénom"@fr ;
      rdfs:comment "A person's first name"@en ,
                   "Nombre de una persona"@es ,
                   "Prénom d'une personne"@fr .

    test:errNameTooLong a rdfs:Literal ;
      skos:definition "Name must be less than {{0}}, but we got {{1}}"@en ,
                      "Le nom doit faire moins de {{0}}, mais nous avons {{1}}"@fr .

    test:familyName a rdf:Property .
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from rdflib import Namespace

from vocab_term.context import LocaleContext
from vocab_term.literal import RdflibFactory
from vocab_term.registry import TermRegistry
from vocab_term.store import KeyValueStore
from vocab_term.term import VocabTerm

TEST = Namespace("https://test.com/vocab#")


def build_vocabulary(store: KeyValueStore, locale: str = "en") -> dict[str, VocabTerm]:
    """Build the example terms over one shared store, context and registry.

    ``familyName`` is strict and has no metadata at all, to show the
    difference from a term that may fall back to its IRI's local name.
    """
    factory = RdflibFactory()
    context = LocaleContext(locale, store)
    registry = TermRegistry(store)

    def term(local_name: str, strict: bool = False) -> VocabTerm:
        return VocabTerm(TEST[local_name], factory, store, strict, context=context, registry=registry)

    name = (
        term("name")
        .add_label_no_language("Name")
        .add_label("First name", "en")
        .add_label("Prénom", "fr")
        .add_comment("A person's first name", "en")
        .add_comment("Nombre de una persona", "es")
        .add_comment("Prénom d'une personne", "fr")
    )

    err_name_too_long = (
        term("errNameTooLong", strict=True)
        .add_message("Name must be less than {{0}}, but we got {{1}}", "en")
        .add_message("Le nom doit faire moins de {{0}}, mais nous avons {{1}}", "fr")
    )

    family_name = term("familyName", strict=True)

    return {
        "name": name,
        "errNameTooLong": err_name_too_long,
        "familyName": family_name,
    }
