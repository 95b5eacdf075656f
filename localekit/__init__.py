"""localekit - locale fallback, placeholder interpolation and pluralization."""

from localekit.i18n import (
    InMemoryTranslationStore,
    Renderer,
    Translator,
    YAMLTranslationLoader,
    create_translator,
)

__all__ = [
    "InMemoryTranslationStore",
    "Renderer",
    "Translator",
    "YAMLTranslationLoader",
    "create_translator",
]
