"""Tests for settings loading."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from vocab_term.context import CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE
from vocab_term.errors import ConfigurationError
from vocab_term.settings import (
    ENV_LOCALE,
    ENV_PREFERRED_FALLBACK,
    ENV_STORE_PATH,
    ENV_STRICT,
    Settings,
)
from vocab_term.store import JsonFileStore, MemoryStore


class TestDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.default_locale == "en"
        assert settings.preferred_fallback is None
        assert settings.strict is False
        assert settings.store_path is None

    def test_empty_locale_rejected(self):
        with pytest.raises(ConfigurationError, match="default locale"):
            Settings(default_locale="")


class TestDict:
    def test_round_trip(self):
        settings = Settings(default_locale="fr", preferred_fallback="es", strict=True)
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_partial_dict(self):
        settings = Settings.from_dict({"strict": "yes"})
        assert settings.strict is True
        assert settings.default_locale == "en"

    def test_bad_boolean(self):
        with pytest.raises(ConfigurationError, match="expects a boolean"):
            Settings.from_dict({"strict": "perhaps"})


class TestEnvironment:
    def test_from_env(self, tmp_path):
        settings = Settings.from_env({
            ENV_LOCALE: "de",
            ENV_PREFERRED_FALLBACK: "fr",
            ENV_STRICT: "true",
            ENV_STORE_PATH: str(tmp_path / "s.json"),
        })
        assert settings == Settings("de", "fr", True, str(tmp_path / "s.json"))

    def test_from_empty_env(self):
        assert Settings.from_env({}) == Settings()

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_LOCALE, "ga")
        monkeypatch.setenv(ENV_STRICT, "0")
        settings = Settings.from_env()
        assert settings.default_locale == "ga"
        assert settings.strict is False

    def test_bad_strict_value(self):
        with pytest.raises(ConfigurationError, match=ENV_STRICT):
            Settings.from_env({ENV_STRICT: "maybe"})


class TestStores:
    def test_build_memory_store(self):
        assert isinstance(Settings().build_store(), MemoryStore)

    def test_build_file_store(self, tmp_path):
        store = Settings(store_path=str(tmp_path / "s.json")).build_store()
        assert isinstance(store, JsonFileStore)

    def test_apply_preferred_fallback(self):
        store = MemoryStore()
        Settings(preferred_fallback="es").apply(store)
        assert store.get(CONTEXT_KEY_PREFERRED_FALLBACK_LANGUAGE) == "es"

    def test_apply_without_fallback_leaves_store_alone(self):
        store = MemoryStore()
        assert Settings().apply(store) is store
        assert store.size == 0
