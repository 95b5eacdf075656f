"""Translation service for retrieving and rendering translated messages.

Reads locale state and bundles from a TranslationStore, resolves the template
with locale fallback, then renders placeholders and plural forms.
"""

from typing import Any, Mapping, Optional

from localekit.i18n import resolvers
from localekit.i18n.loader import TranslationLoader
from localekit.i18n.renderer import Rendered, Renderer
from localekit.i18n.store import TranslationStore
from localekit.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating keys in the active or a given locale.

    Never raises on the translate path: an unknown key renders as itself.

    Attributes:
        store: TranslationStore holding bundles and locale state.
        renderer: Renderer with the configured placeholder markers.
    """

    def __init__(
        self,
        store: TranslationStore,
        renderer: Optional[Renderer] = None,
    ):
        """Initialize Translator.

        Args:
            store: Store to read translations and locale state from.
            renderer: Renderer to use (default: "{" and "}" markers).
        """
        self.store = store
        self.renderer = renderer or Renderer()
        logger.info(
            "initialized_translator",
            locale=store.locale,
            fallback_locale=store.fallback,
            identifiers=list(self.renderer.identifiers),
        )

    def translate(
        self,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        plural_count: Optional[Any] = None,
    ) -> Rendered:
        """Translate key in the active locale.

        Args:
            key: Translation key.
            replacements: Placeholder name -> value.
            plural_count: Count selecting the singular or plural form.

        Returns:
            Rendered string, or list of strings for list translations.
        """
        return self.translate_in_locale(
            self.store.locale, key, replacements, plural_count
        )

    def translate_in_locale(
        self,
        locale: str,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        plural_count: Optional[Any] = None,
    ) -> Rendered:
        """Translate key in locale, falling back to the store's fallback locale.

        Args:
            locale: Locale to translate to.
            key: Translation key.
            replacements: Placeholder name -> value.
            plural_count: Count selecting the singular or plural form.

        Returns:
            Rendered string, or list of strings for list translations.
        """
        template = resolvers.resolve(
            locale, self.store.fallback, key, self.store.translations
        )
        return self.renderer.render(template, replacements, plural_count)

    def key_exists(self, key: str) -> bool:
        """Check if key exists for the active locale.

        The fallback locale is only checked when the active locale is not
        loaded at all.
        """
        return resolvers.key_exists(
            self.store.locale, self.store.fallback, key, self.store.translations
        )

    def locale_exists(self, locale: str) -> bool:
        """Check if a bundle is loaded for locale.

        Args:
            locale: Locale to check.

        Returns:
            True if the store holds a bundle for locale, False otherwise.
        """
        return resolvers.locale_exists(locale, self.store.translations)

    def get_locale(self) -> str:
        """Get the active locale of the store."""
        return self.store.locale

    def set_locale(self, locale: str) -> None:
        """Set the active locale used by translate()."""
        self.store.set_locale(locale)

    def set_fallback_locale(self, locale: str) -> None:
        """Set the locale consulted when a key or locale is missing."""
        self.store.set_fallback_locale(locale)

    def add_locale(self, locale: str, translations: Mapping[str, Any]) -> None:
        """Add or replace the bundle for locale.

        Args:
            locale: Locale identifier.
            translations: Key -> template mapping.
        """
        self.store.add_locale(locale, translations)

    def remove_locale(self, locale: str) -> None:
        """Remove locale from the store if it is loaded."""
        if self.locale_exists(locale):
            self.store.remove_locale(locale)

    def load_from(self, loader: TranslationLoader) -> None:
        """Add every bundle provided by loader to the store.

        Args:
            loader: TranslationLoader to read bundles from.

        Raises:
            ValueError: If the loader finds no translations.
        """
        bundles = loader.load_all()
        for locale, bundle in bundles.items():
            self.store.add_locale(locale, bundle)
        logger.info("loaded_all_translations", locale_count=len(bundles))
