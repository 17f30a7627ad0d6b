"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from icumessage.constants import MAX_LOCALE_CACHE_SIZE
from icumessage.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from .number_context import NumberContext, NumericValue

__all__ = ["BabelPluralizer", "select_plural_category"]

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _warn_unknown_locale(locale: str, reason: str) -> None:
    """Log the one/other fallback once per locale code."""
    logger.warning(
        "Unknown locale '%s' for plural rules: %s. Falling back to one/other rule.",
        locale,
        reason,
    )


def select_plural_category(n: NumericValue, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(0, "lv_LV")
        'zero'
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "ar_SA")
        'two'
        >>> select_plural_category(42, "ja_JP")
        'other'

    Architecture:
        Uses Babel's Locale.plural_form, which implements the CLDR operands
        (n, i, v, w, f, t, e). Decimal inputs keep their visible fraction
        digits, so Decimal("1.0") is "other" in English while 1 is "one".

        If locale parsing fails, falls back to a simple one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        _warn_unknown_locale(locale, str(e))
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"

    return locale_obj.plural_form(n)


@dataclass(frozen=True, slots=True)
class BabelPluralizer:
    """Pluralizer backed by Babel CLDR plural rules.

    Classifies the offset-adjusted value of a NumberContext.

    Example:
        >>> BabelPluralizer("pl").category(NumberContext.of(3))
        'few'
    """

    locale_code: str

    def category(self, number: NumberContext) -> str:
        """Return the plural category of number.value for this locale."""
        category = select_plural_category(number.value, self.locale_code)
        logger.debug("Plural category for %s in %s: %s", number.value, self.locale_code, category)
        return category
