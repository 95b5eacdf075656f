"""Translation store interface and in-memory implementation.

The store owns the translation table and the locale state. Translators only
read from it and forward mutations to it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from localekit.i18n.models import LocaleBundle, LocaleState, TranslationTable
from localekit.logging import get_module_logger

logger = get_module_logger()


class TranslationStore(ABC):
    """Abstract base for translation stores.

    Implementations hold locale -> key -> template data together with the
    active and fallback locale identifiers.
    """

    @property
    @abstractmethod
    def locale(self) -> str:
        """Active locale identifier."""

    @property
    @abstractmethod
    def fallback(self) -> str:
        """Fallback locale identifier."""

    @property
    @abstractmethod
    def translations(self) -> TranslationTable:
        """Locale -> bundle mapping."""

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        """Set the active locale."""

    @abstractmethod
    def set_fallback_locale(self, locale: str) -> None:
        """Set the fallback locale."""

    @abstractmethod
    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Add or replace the bundle for a locale."""

    @abstractmethod
    def remove_locale(self, locale: str) -> None:
        """Remove the bundle for a locale."""


class InMemoryTranslationStore(TranslationStore):
    """Translation store backed by plain dictionaries.

    Attributes:
        state: Active and fallback locale identifiers.
    """

    def __init__(
        self,
        locale: str = "en",
        fallback: str = "en",
        translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ):
        self.state = LocaleState(locale=locale, fallback=fallback)
        self._translations: TranslationTable = {}
        for name, bundle in (translations or {}).items():
            self._translations[name] = _clean_bundle(bundle)

    @property
    def locale(self) -> str:
        return self.state.locale

    @property
    def fallback(self) -> str:
        return self.state.fallback

    @property
    def translations(self) -> TranslationTable:
        return self._translations

    def set_locale(self, locale: str) -> None:
        self.state.locale = locale
        logger.info("locale_set", locale=locale)

    def set_fallback_locale(self, locale: str) -> None:
        self.state.fallback = locale
        logger.info("fallback_locale_set", locale=locale)

    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Replace the bundle for locale with a copy of translations.

        Keys mapped to None are dropped so that a present key always holds a
        usable template.
        """
        self._translations[locale] = _clean_bundle(translations)
        logger.info(
            "locale_added",
            locale=locale,
            key_count=len(self._translations[locale]),
        )

    def remove_locale(self, locale: str) -> None:
        if self._translations.pop(locale, None) is not None:
            logger.info("locale_removed", locale=locale)


def _clean_bundle(translations: Mapping[str, Any]) -> LocaleBundle:
    bundle: Dict[str, Any] = {}
    for key, value in translations.items():
        if value is None:
            logger.warning("translation_value_missing", key=key)
            continue
        bundle[key] = value
    return bundle
