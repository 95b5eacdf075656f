"""Translation loading interface and implementations.

Defines the contract for loading locale bundles and provides a YAML-based
loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import structlog
import yaml

from localekit.i18n.models import LocaleBundle, TranslationTable

logger = structlog.get_logger()

YAML_SUFFIXES = (".yml", ".yaml")


class TranslationYAMLLoader(yaml.SafeLoader):
    """SafeLoader that keeps yes/no/on/off and true/false as strings."""


TranslationYAMLLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:bool"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation sources
    for different locales.
    """

    @abstractmethod
    def load(self, locale: str) -> LocaleBundle:
        """Load the bundle for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            Flat key -> template mapping.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> TranslationTable:
        """Load bundles for all available locales.

        Returns:
            Dict mapping locale to its bundle.
        """


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named <locale>.yml or <domain>.<locale>.yml (.yaml is
    accepted too) in the translations directory. Nested mappings are
    flattened into dot-separated keys.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded bundles by locale.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded bundles in memory.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, LocaleBundle] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: str) -> LocaleBundle:
        """Load the bundle for a locale from YAML files.

        Merges all matching files in name order; later files override
        earlier keys.

        Args:
            locale: Locale to load.

        Returns:
            Flat key -> template mapping.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        bundle: LocaleBundle = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.load(f, Loader=TranslationYAMLLoader)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            self._merge_yaml_data(bundle, data, prefix="")

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            key_count=len(bundle),
        )

        if self.use_cache:
            self.cache[locale] = bundle

        return bundle

    def load_all(self) -> TranslationTable:
        """Load bundles for every locale found in the directory.

        Returns:
            Dict mapping each locale to its bundle.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = sorted(
            {self._locale_of(path) for path in self._yaml_files()}
        )
        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales_found}

    def clear_cache(self) -> None:
        """Clear all cached bundles."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _yaml_files(self) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.iterdir()
            if path.is_file() and path.suffix in YAML_SUFFIXES
        )

    def _files_for(self, locale: str) -> List[Path]:
        return [path for path in self._yaml_files() if self._locale_of(path) == locale]

    @staticmethod
    def _locale_of(path: Path) -> str:
        # "incident.en-US.yml" -> "en-US", "fr.yml" -> "fr"
        return path.stem.split(".")[-1]

    def _merge_yaml_data(self, bundle: LocaleBundle, data: Dict, prefix: str) -> None:
        """Flatten YAML data into bundle.

        Expected format:
        namespace:
          key1: message1
          key2: [item1, item2]
        """
        for name, value in data.items():
            key = f"{prefix}{name}"
            if isinstance(value, dict):
                self._merge_yaml_data(bundle, value, prefix=f"{key}.")
            elif _is_template_value(value):
                bundle[key] = value
            else:
                logger.warning(
                    "invalid_translation_value",
                    key=key,
                    expected="str or list of str",
                )


def _is_template_value(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(item, str) for item in value)
