"""i18n system - translation lookup and rendering.

Resolves a key in the active locale (with fallback), substitutes named
placeholders and selects singular or plural forms.

Main components:
- models: SingleTemplate, ListTemplate, LocaleState, table type aliases
- resolvers: resolve, key_exists, locale_exists
- renderer: Renderer with placeholder substitution and pluralization
- store: TranslationStore and InMemoryTranslationStore
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service
- factory: create_translator
"""

from localekit.i18n.factory import create_translator
from localekit.i18n.loader import TranslationLoader, YAMLTranslationLoader
from localekit.i18n.models import (
    PLURAL_SEPARATOR,
    ListTemplate,
    LocaleBundle,
    LocaleState,
    SingleTemplate,
    Template,
    TranslationTable,
    as_template,
)
from localekit.i18n.renderer import Renderer
from localekit.i18n.resolvers import key_exists, locale_exists, resolve
from localekit.i18n.store import InMemoryTranslationStore, TranslationStore
from localekit.i18n.translator import Translator

__all__ = [
    "PLURAL_SEPARATOR",
    "SingleTemplate",
    "ListTemplate",
    "Template",
    "LocaleBundle",
    "LocaleState",
    "TranslationTable",
    "as_template",
    "resolve",
    "key_exists",
    "locale_exists",
    "Renderer",
    "TranslationStore",
    "InMemoryTranslationStore",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "create_translator",
]
