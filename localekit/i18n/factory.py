"""Factory functions for creating i18n components.

Provides a convenience function for initializing a Translator from the
application settings.
"""

from pathlib import Path
from typing import Optional

import structlog

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings
from localekit.i18n.loader import YAMLTranslationLoader
from localekit.i18n.renderer import Renderer
from localekit.i18n.store import InMemoryTranslationStore, TranslationStore
from localekit.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    settings: Optional[Settings] = None,
    store: Optional[TranslationStore] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Path to YAML translation files
            (default: settings.i18n.I18N_TRANSLATIONS_DIR)
        settings: Settings to read locale state and markers from
            (default: module singleton)
        store: Store to use (default: new InMemoryTranslationStore)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        # Settings only, empty store
        translator = create_translator()

        # Custom translations directory
        translator = create_translator(translations_dir=Path("/custom/locales"))
    """
    settings = settings or default_settings
    i18n = settings.i18n

    if store is None:
        store = InMemoryTranslationStore(
            locale=i18n.I18N_LOCALE,
            fallback=i18n.I18N_FALLBACK_LOCALE,
        )

    translator = Translator(store=store, renderer=Renderer(i18n.I18N_IDENTIFIERS))

    if translations_dir is None and i18n.I18N_TRANSLATIONS_DIR:
        translations_dir = Path(i18n.I18N_TRANSLATIONS_DIR)

    if translations_dir is None:
        logger.info("translator_created_without_files")
        return translator

    translator.load_from(YAMLTranslationLoader(translations_dir=translations_dir))
    logger.info(
        "translator_created_with_files",
        translations_dir=str(translations_dir),
        locale_count=len(store.translations),
    )

    return translator
