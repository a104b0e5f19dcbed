"""Person vocabulary: end-to-end demonstration.

Walks through the ways a renderer reads term metadata:

  1. Labels in the current locale, with English and no-language fallback
  2. One-shot modifiers: as_language(), as_english, mandatory
  3. Parameterized messages, and the arity check
  4. The term registry's own fallback chain (preferred fallback language)
  5. Exporting the vocabulary as an rdflib Graph

Run with:  python -m case_studies.person_vocab.run
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

import logging

from vocab_term.errors import ArityError, TermLookupError
from vocab_term.graph_bridge import terms_to_graph
from vocab_term.store import build_store

from .vocab import build_vocabulary


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def print_step(number: int, name: str) -> None:
    print(f"\n{'─' * 60}")
    print(f"  STEP {number}: {name}")
    print(f"{'─' * 60}")


def run_labels(terms, context):
    print_step(1, "Labels in the current locale")
    name = terms["name"]
    for locale in ("en", "fr", "de"):
        context.set_locale(locale)
        print(f"  locale={locale:<3} label={name.label!r:<16} literal={name.label_literal!r}")
    context.set_locale("en")


def run_modifiers(terms):
    print_step(2, "One-shot modifiers")
    name = terms["name"]
    family_name = terms["familyName"]
    print(f"  name.as_language('fr').label  -> {name.as_language('fr').label!r}")
    print(f"  name.as_english.comment       -> {name.as_english.comment!r}")
    print(f"  name.as_language('es').comment -> {name.as_language('es').comment!r}")
    print(f"  familyName.label (strict)     -> {family_name.label!r}")
    try:
        family_name.mandatory.label
    except TermLookupError as e:
        print(f"  familyName.mandatory.label    -> raised: {e.message}")
    print(f"  familyName.label (after raise) -> {family_name.label!r}")


def run_messages(terms):
    print_step(3, "Parameterized messages")
    err = terms["errNameTooLong"]
    print(f"  en: {err.message_params('10', '12')}")
    print(f"  fr: {err.as_language('fr').message_params('10', '12')}")
    try:
        err.message_params("10")
    except ArityError as e:
        print(f"  one parameter -> raised: {e.message}")


def run_registry(terms, context):
    print_step(4, "Term registry fallback")
    registry = terms["name"].registry
    iri = str(terms["name"].iri)
    print(f"  comment in [de]              -> {registry.lookup_comment(iri, 'de')!r}")
    context.set_preferred_fallback("es")
    print(f"  comment in [de], fallback es -> {registry.lookup_comment(iri, 'de')!r}")
    print(f"  label in [it], fallback es   -> {registry.lookup_label(iri, 'it')!r}")


def run_export(terms):
    print_step(5, "Export as RDF")
    graph = terms_to_graph(terms.values())
    print(graph.serialize(format="turtle"))


def main():
    logging.basicConfig(level=logging.INFO)
    print_header("Person Vocabulary Demonstration")

    store = build_store()
    terms = build_vocabulary(store)
    context = terms["name"].context

    run_labels(terms, context)
    run_modifiers(terms)
    run_messages(terms)
    run_registry(terms, context)
    run_export(terms)

    print(f"\n{'=' * 60}")
    print("  Demonstration Complete")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
