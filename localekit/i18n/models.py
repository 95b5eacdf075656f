"""Translation models for the i18n system.

Defines the translation table shapes, the Template variant handed from the
resolver to the renderer, and the locale state owned by a store.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

PLURAL_SEPARATOR = ":::"
DEFAULT_IDENTIFIERS = ("{", "}")

LocaleBundle = Dict[str, Any]
TranslationTable = Dict[str, LocaleBundle]


@dataclass(frozen=True)
class SingleTemplate:
    """A single translation string.

    May encode a singular and a plural form separated by PLURAL_SEPARATOR,
    singular first.

    Attributes:
        text: Raw, unrendered template text.
    """

    text: str


@dataclass(frozen=True)
class ListTemplate:
    """An ordered list of translation strings rendered item by item.

    Attributes:
        items: Raw list items. Non-string items are carried as-is.
    """

    items: Tuple[Any, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.items)


Template = Union[SingleTemplate, ListTemplate]


def as_template(value: Any) -> Optional[Template]:
    """Classify a raw bundle value into a Template.

    Args:
        value: Raw value from a locale bundle, or an existing Template.

    Returns:
        SingleTemplate for strings, ListTemplate for lists and tuples, the
        value itself for Template instances, None for anything else.
    """
    if isinstance(value, (SingleTemplate, ListTemplate)):
        return value
    if isinstance(value, str):
        return SingleTemplate(value)
    if isinstance(value, (list, tuple)):
        return ListTemplate(tuple(value))
    return None


@dataclass
class LocaleState:
    """Active and fallback locale identifiers.

    Attributes:
        locale: Locale used by translate().
        fallback: Locale consulted when the active one lacks a key.
    """

    locale: str = "en"
    fallback: str = "en"
