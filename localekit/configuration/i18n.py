"""Translation settings."""

from typing import List, Optional

from pydantic import Field

from localekit.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale state and placeholder syntax defaults.

    Environment Variables:
        I18N_LOCALE: Active locale on startup (default: en)
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing (default: en)
        I18N_IDENTIFIERS: JSON list with the open and close placeholder markers
            (default: ["{", "}"])
        I18N_TRANSLATIONS_DIR: Directory with YAML locale files (optional)

    Example:
        ```python
        from localekit.configuration import settings

        renderer = Renderer(settings.i18n.I18N_IDENTIFIERS)
        ```
    """

    I18N_LOCALE: str = Field(default="en", alias="I18N_LOCALE")
    I18N_FALLBACK_LOCALE: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")
    I18N_IDENTIFIERS: List[str] = Field(
        default_factory=lambda: ["{", "}"], alias="I18N_IDENTIFIERS"
    )
    I18N_TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
