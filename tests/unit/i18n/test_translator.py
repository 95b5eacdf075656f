"""Tests for localekit.i18n.translator module."""

from unittest.mock import Mock

import pytest

from localekit.i18n import (
    InMemoryTranslationStore,
    Renderer,
    Translator,
    YAMLTranslationLoader,
)
from tests.factories.i18n import make_store, make_translator


@pytest.mark.unit
class TestTranslator:
    """Tests for Translator service."""

    @pytest.fixture
    def translator(self):
        return make_translator(locale="fr", fallback="en")

    def test_translator_initialization(self):
        store = make_store()
        translator = Translator(store)
        assert translator.store is store
        assert isinstance(translator.renderer, Renderer)
        assert translator.renderer.identifiers == ("{", "}")

    def test_translate_active_locale(self, translator):
        assert translator.translate("hello", {"name": "Ana"}) == "Bonjour Ana"

    def test_translate_falls_back_per_key(self, translator):
        assert translator.translate("only_english") == "Only in English"

    def test_translate_unknown_key_returns_key(self, translator):
        assert translator.translate("missing.key") == "missing.key"

    def test_translate_unknown_key_is_rendered(self, translator):
        assert translator.translate("{n} left", {"n": 2}) == "2 left"

    def test_translate_pluralization(self, translator):
        assert translator.translate("car", plural_count=1) == "voiture"
        assert translator.translate("car", plural_count=0) == "voitures"
        assert translator.translate("car", plural_count=-1) == "voiture"

    def test_translate_substitution_and_pluralization(self):
        translator = make_translator()
        assert translator.translate("items", {"count": 5}, 5) == "5 items"
        assert translator.translate("items", {"count": 1}, 1) == "1 item"

    def test_translate_list(self):
        translator = make_translator()
        result = translator.translate("weekdays", {"a": "x", "b": "y"})
        assert result == ["Monday x", "Tuesday y"]

    def test_translate_follows_locale_changes(self, translator):
        translator.set_locale("en")
        assert translator.translate("goodbye") == "Goodbye"

    def test_translate_in_locale(self, translator):
        assert translator.translate_in_locale("en", "goodbye") == "Goodbye"

    def test_translate_in_unknown_locale_uses_fallback(self, translator):
        result = translator.translate_in_locale("de", "hello", {"name": "Jo"})
        assert result == "Hello Jo"

    def test_translate_in_locale_does_not_change_active_locale(self, translator):
        translator.translate_in_locale("en", "goodbye")
        assert translator.get_locale() == "fr"

    def test_custom_identifiers(self):
        translator = make_translator(
            translations={"en": {"hi": "Hi {{name}} {name}"}},
            identifiers=("{{", "}}"),
        )
        assert translator.translate("hi", {"name": "Al"}) == "Hi Al {name}"

    def test_key_exists(self, translator):
        assert translator.key_exists("hello") is True
        assert translator.key_exists("missing.key") is False

    def test_key_exists_ignores_fallback_for_loaded_locale(self, translator):
        """The fallback is not checked while the active locale is loaded."""
        assert translator.key_exists("only_english") is False
        assert translator.translate("only_english") == "Only in English"

    def test_key_exists_uses_fallback_for_unloaded_locale(self, translator):
        translator.set_locale("de")
        assert translator.key_exists("only_english") is True

    def test_locale_exists(self, translator):
        assert translator.locale_exists("fr") is True
        assert translator.locale_exists("de") is False

    def test_get_and_set_locale(self, translator):
        assert translator.get_locale() == "fr"
        translator.set_locale("en")
        assert translator.get_locale() == "en"
        assert translator.store.locale == "en"

    def test_set_fallback_locale(self, translator):
        translator.set_fallback_locale("fr")
        translator.set_locale("de")
        assert translator.translate("goodbye") == "Au revoir"

    def test_add_locale(self, translator):
        translator.add_locale("de", {"hello": "Hallo {name}"})
        assert translator.locale_exists("de")
        assert translator.translate_in_locale("de", "hello", {"name": "Jo"}) == (
            "Hallo Jo"
        )

    def test_remove_locale(self, translator):
        translator.remove_locale("fr")
        assert not translator.locale_exists("fr")
        assert translator.translate("goodbye") == "Goodbye"

    def test_remove_unknown_locale_not_forwarded(self):
        store = Mock(spec=InMemoryTranslationStore)
        store.locale = "en"
        store.fallback = "en"
        store.translations = {"en": {}}
        translator = Translator(store)

        translator.remove_locale("de")

        store.remove_locale.assert_not_called()

    def test_load_from(self, temp_translations_dir):
        translator = Translator(InMemoryTranslationStore(locale="fr"))
        translator.load_from(YAMLTranslationLoader(temp_translations_dir))

        assert translator.locale_exists("en")
        assert translator.locale_exists("fr")
        assert translator.translate("car", plural_count=2) == "voitures"
        assert translator.translate("menu.open") == "Open"

    def test_load_from_empty_directory_raises(self, tmp_path):
        translator = Translator(InMemoryTranslationStore())
        with pytest.raises(ValueError):
            translator.load_from(YAMLTranslationLoader(tmp_path))
