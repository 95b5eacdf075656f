"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from localekit.i18n import Renderer, YAMLTranslationLoader


@pytest.fixture
def renderer():
    """Renderer with the default single-brace markers."""
    return Renderer()


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - menu.en.yml
    - fr.yml
    """
    en = {
        "hello": "Hello {name}",
        "car": "car:::cars",
        "weekdays": ["Monday", "Tuesday"],
    }
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f)

    en_menu = {
        "menu": {
            "open": "Open",
            "recent": {"clear": "Clear {count} files"},
        }
    }
    with open(tmp_path / "menu.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_menu, f)

    fr = {
        "hello": "Bonjour {name}",
        "car": "voiture:::voitures",
    }
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)
