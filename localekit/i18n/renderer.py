"""Placeholder substitution and plural form selection.

A Renderer is built once per delimiter pair. The placeholder pattern is
compiled in the constructor and reused by every render call.
"""

import numbers
import re
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from localekit.i18n.models import (
    DEFAULT_IDENTIFIERS,
    PLURAL_SEPARATOR,
    ListTemplate,
    SingleTemplate,
    as_template,
)
from localekit.logging import get_module_logger

logger = get_module_logger()

Rendered = Union[str, List[Any]]


def _normalize_identifiers(identifiers: Any) -> Tuple[str, str]:
    """Turn the configured markers into an (open, close) pair.

    Anything other than exactly two markers is logged and replaced on a best
    effort basis: the first two markers when more were given, the default
    pair otherwise.
    """
    try:
        markers = tuple(identifiers)
    except TypeError:
        markers = ()

    if len(markers) != 2:
        logger.warning(
            "invalid_placeholder_identifiers",
            identifiers=identifiers,
            expected_count=2,
        )
        if len(markers) < 2:
            return DEFAULT_IDENTIFIERS

    return str(markers[0]), str(markers[1])


def _is_countable(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


class Renderer:
    """Renders resolved templates into display strings.

    Attributes:
        identifiers: (open, close) placeholder markers, e.g. ("{", "}").
        pattern: Compiled placeholder pattern, fixed for the instance lifetime.
    """

    def __init__(self, identifiers: Sequence[str] = DEFAULT_IDENTIFIERS):
        """Initialize Renderer.

        Args:
            identifiers: Open and close markers around a placeholder name.
        """
        self._identifiers = _normalize_identifiers(identifiers)
        opening, closing = self._identifiers
        self._pattern = re.compile(
            re.escape(opening) + r"(\w+)" + re.escape(closing), re.ASCII
        )

    @property
    def identifiers(self) -> Tuple[str, str]:
        return self._identifiers

    @property
    def pattern(self) -> "re.Pattern[str]":
        return self._pattern

    def substitute(
        self,
        template: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        warn_on_missing: bool = True,
    ) -> Any:
        """Replace placeholders in template with values from replacements.

        Placeholders without a value are left untouched.

        Args:
            template: Template text. Non-string values are returned unchanged.
            replacements: Placeholder name -> value.
            warn_on_missing: Log a warning for each unresolved placeholder.

        Returns:
            Substituted text.
        """
        if not isinstance(template, str):
            return template

        replacements = replacements or {}

        def _replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name in replacements:
                return str(replacements[name])

            if warn_on_missing:
                logger.warning(
                    "placeholder_not_found",
                    text=template,
                    placeholder=match.group(0),
                )
            return match.group(0)

        return self._pattern.sub(_replace, template)

    def render(
        self,
        template: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        plural_count: Optional[Any] = None,
    ) -> Rendered:
        """Render a template for display.

        List templates are substituted item by item, without warnings and
        without pluralization. For string templates a plural_count of 1 or -1
        selects the singular form, any other number the plural form.

        Args:
            template: Template or raw bundle value.
            replacements: Placeholder name -> value.
            plural_count: Count selecting the plural form, None to skip.

        Returns:
            Rendered string, list of rendered items, or the unrenderable
            value unchanged.
        """
        replacements = replacements or {}
        resolved = as_template(template)

        if isinstance(resolved, ListTemplate):
            return [
                self.substitute(item, replacements, warn_on_missing=False)
                for item in resolved.items
            ]

        if not isinstance(resolved, SingleTemplate):
            return template

        rendered = self.substitute(resolved.text, replacements, warn_on_missing=True)

        if plural_count is None:
            return rendered

        if not _is_countable(plural_count):
            logger.warning(
                "plural_count_not_a_number",
                plural_count=repr(plural_count),
                text=resolved.text,
            )
            return rendered

        forms = rendered.split(PLURAL_SEPARATOR)

        # -1 selects the singular form as well
        if plural_count in (1, -1):
            return forms[0].strip()

        if len(forms) > 1:
            return forms[1].strip()

        logger.warning("pluralized_form_not_found", text=resolved.text)
        return forms[0].strip()
