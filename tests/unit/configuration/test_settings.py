"""Unit tests for localekit.configuration."""

import pytest

from localekit.configuration import I18nSettings, Settings


@pytest.mark.unit
class TestI18nSettings:
    """Test suite for I18nSettings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "I18N_LOCALE",
            "I18N_FALLBACK_LOCALE",
            "I18N_IDENTIFIERS",
            "I18N_TRANSLATIONS_DIR",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = I18nSettings(_env_file=None)

        assert settings.I18N_LOCALE == "en"
        assert settings.I18N_FALLBACK_LOCALE == "en"
        assert settings.I18N_IDENTIFIERS == ["{", "}"]
        assert settings.I18N_TRANSLATIONS_DIR is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("I18N_LOCALE", "fr")
        monkeypatch.setenv("I18N_FALLBACK_LOCALE", "de")
        monkeypatch.setenv("I18N_IDENTIFIERS", '["{{", "}}"]')

        settings = I18nSettings(_env_file=None)

        assert settings.I18N_LOCALE == "fr"
        assert settings.I18N_FALLBACK_LOCALE == "de"
        assert settings.I18N_IDENTIFIERS == ["{{", "}}"]


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)

    def test_subsettings_override(self):
        i18n = I18nSettings(I18N_LOCALE="fr")
        settings = Settings(i18n=i18n)
        assert settings.i18n.I18N_LOCALE == "fr"

    def test_is_production_without_prefix(self):
        assert Settings(PREFIX="").is_production is True

    def test_is_not_production_with_prefix(self):
        assert Settings(PREFIX="dev-").is_production is False
