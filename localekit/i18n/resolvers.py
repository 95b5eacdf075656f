"""Template resolution with locale fallback.

Pure reads over a TranslationTable. Missing locales and keys are a normal
display case and never raise: the key itself becomes the template.
"""

import structlog

from localekit.i18n.models import (
    SingleTemplate,
    Template,
    TranslationTable,
    as_template,
)

logger = structlog.get_logger().bind(component="i18n.resolver")


def resolve(
    locale: str,
    fallback_locale: str,
    key: str,
    table: TranslationTable,
) -> Template:
    """Return the template to render for key.

    Resolution order:
    1. table[locale][key]
    2. table[fallback_locale][key]
    3. key itself

    Args:
        locale: Requested locale.
        fallback_locale: Locale consulted when locale lacks the key.
        key: Translation key.
        table: Locale -> bundle mapping.

    Returns:
        Resolved Template. Never raises.
    """
    bundle = table.get(locale)
    if bundle is not None and key in bundle:
        template = as_template(bundle[key])
        if template is not None:
            return template

    fallback_bundle = table.get(fallback_locale)
    if fallback_bundle is not None and key in fallback_bundle:
        template = as_template(fallback_bundle[key])
        if template is not None:
            logger.debug(
                "used_fallback_translation",
                key=key,
                requested_locale=locale,
                fallback_locale=fallback_locale,
            )
            return template

    logger.debug(
        "translation_not_found",
        key=key,
        locale=locale,
        fallback_locale=fallback_locale,
    )
    return SingleTemplate(key)


def key_exists(
    locale: str,
    fallback_locale: str,
    key: str,
    table: TranslationTable,
) -> bool:
    """Check whether key can be found for locale.

    The fallback bundle is consulted only when the locale bundle itself is
    missing. A loaded locale lacking the key yields False even if the
    fallback has it, unlike resolve().

    Args:
        locale: Requested locale.
        fallback_locale: Locale consulted when locale is not loaded.
        key: Translation key.
        table: Locale -> bundle mapping.

    Returns:
        True if the key is present in the bundle that was checked.
    """
    if locale in table:
        return key in table[locale]

    if fallback_locale in table:
        return key in table[fallback_locale]

    return False


def locale_exists(locale: str, table: TranslationTable) -> bool:
    """Check whether a bundle is loaded for locale."""
    return locale in table
