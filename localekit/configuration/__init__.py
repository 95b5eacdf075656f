"""Configuration module - public API.

Centralized configuration for localekit using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings section

Example:
    ```python
    from localekit.configuration import settings

    locale = settings.i18n.I18N_LOCALE
    identifiers = settings.i18n.I18N_IDENTIFIERS

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
