"""Tests for the no-language marker and resolution requests."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import dataclasses

import pytest

from vocab_term.types import (
    NO_LANGUAGE_TAG,
    NO_LANGUAGE_TOKEN,
    MetadataKind,
    Resolution,
    _NoLanguageType,
    is_valid_language,
    normalize_language,
    rdf_language,
)


class TestNoLanguageTag:
    def test_singleton(self):
        assert _NoLanguageType() is NO_LANGUAGE_TAG

    def test_never_equal_to_a_string(self):
        assert NO_LANGUAGE_TAG != NO_LANGUAGE_TOKEN
        assert NO_LANGUAGE_TAG != ""
        assert NO_LANGUAGE_TAG != "en"

    def test_distinct_dict_key(self):
        values = {NO_LANGUAGE_TOKEN: "a string key", NO_LANGUAGE_TAG: "sentinel key"}
        assert len(values) == 2
        assert values[NO_LANGUAGE_TAG] == "sentinel key"

    def test_string_form_is_store_token(self):
        assert str(NO_LANGUAGE_TAG) == "<No Language>"
        assert f"iri-label-{NO_LANGUAGE_TAG}" == "iri-label-<No Language>"

    def test_repr(self):
        assert repr(NO_LANGUAGE_TAG) == "NO_LANGUAGE_TAG"


class TestNormalizeLanguage:
    def test_empty_is_no_language(self):
        assert normalize_language("") is NO_LANGUAGE_TAG

    def test_token_is_no_language(self):
        assert normalize_language(NO_LANGUAGE_TOKEN) is NO_LANGUAGE_TAG

    def test_unset_stays_unset(self):
        assert normalize_language(None) is None

    def test_real_tag_unchanged(self):
        assert normalize_language("fr-CA") == "fr-CA"

    def test_rdf_language(self):
        assert rdf_language(NO_LANGUAGE_TAG) == ""
        assert rdf_language(None) == ""
        assert rdf_language("es") == "es"


class TestResolution:
    def test_defaults(self):
        request = Resolution()
        assert request.language is None
        assert request.mandatory is False

    def test_normalizes_language(self):
        assert Resolution("").language is NO_LANGUAGE_TAG

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Resolution("en").language = "fr"

    def test_with_language_keeps_mandatory(self):
        request = Resolution(mandatory=True).with_language("fr")
        assert request == Resolution("fr", mandatory=True)

    def test_metadata_kinds(self):
        assert [kind.value for kind in MetadataKind] == ["label", "comment", "message"]


class TestIsValidLanguage:
    @pytest.mark.parametrize("tag", ["en", "fr-CA", "zh-Hant-TW", "de-1996"])
    def test_valid(self, tag):
        assert is_valid_language(tag)

    @pytest.mark.parametrize("tag", ["en_US", "en US", "fr-", "-fr", "12", "en--GB"])
    def test_invalid(self, tag):
        assert not is_valid_language(tag)

    def test_no_language_is_valid(self):
        assert is_valid_language(NO_LANGUAGE_TAG)
        assert is_valid_language("")
