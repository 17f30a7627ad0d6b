"""Locale context for thread-safe, formatter-scoped rendering.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant number, date and time formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Implements the FormatProvider protocol consumed by MessageFormatter
    - No dependency on Python's locale module (avoids global state)

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state)
    - Explicit error handling (FormattingError, no silent fallbacks)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from decimal import InvalidOperation
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from icumessage.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from icumessage.core.errors import FormattingError
from icumessage.diagnostics import ErrorTemplate
from icumessage.locale_utils import normalize_locale

from .number_context import NumericValue

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# Default decimal pattern: grouping, up to 3 fraction digits.
_DEFAULT_NUMBER_PATTERN = "#,##0.###"
_INTEGER_NUMBER_PATTERN = "#,##0"
_DEFAULT_DATE_STYLE = "medium"

_NUMBER_ERRORS = (ValueError, TypeError, InvalidOperation, AttributeError, KeyError)
_DATE_ERRORS = (ValueError, TypeError, OverflowError, AttributeError, KeyError)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances with validation and
    caching. Direct construction via __init__ bypasses both.

    Number styles (format_number):
        None        locale decimal format, grouping, up to 3 fraction digits
        "integer"   rounded, grouped integer
        "percent"   locale percent format
        "currency"  locale currency format (currency attribute, else territory default)
        other       Babel/CLDR number pattern, e.g. "#,##0.00"

    Date and time styles (format_date, format_time):
        None (medium), "short", "medium", "long", "full", or a CLDR pattern

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> LocaleContext.create('de-DE').format_number(1234.5)
        '1.234,5'

        >>> ctx.format_number(0.25, "percent")
        '25%'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    # Class-level LRU cache of instances, keyed by normalized locale code
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False
    currency: str | None = None

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with size, max_size and the cached locales (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US while preserving the requested locale_code. Concurrent calls
        with the same locale return the same instance.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            Cached LocaleContext instance
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_LOCALE,
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have created the entry meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            Uncached LocaleContext instance with a valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    def with_currency(self, currency: str) -> "LocaleContext":
        """Return an (uncached) copy using currency for the "currency" style.

        Args:
            currency: ISO 4217 code, e.g. "EUR"
        """
        return replace(self, currency=currency)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    def _default_currency(self) -> str:
        """Currency used by the "currency" style.

        Raises:
            FormattingError: If neither an explicit currency nor a territory
                default is available
        """
        if self.currency is not None:
            return self.currency
        territory = self._babel_locale.territory
        if territory:
            currencies = babel_numbers.get_territory_currencies(territory)
            if currencies:
                return str(currencies[0])
        raise FormattingError(
            ErrorTemplate.formatting_failed(
                "Currency", self.locale_code, "no currency configured for locale"
            )
        )

    def format_number(self, value: NumericValue, style: str | None = None) -> str:
        """Format number with locale-specific separators.

        Args:
            value: Number to format (int, float, or Decimal)
            style: None, "integer", "percent", "currency", or a number pattern

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If Babel cannot render the value

        Examples:
            >>> LocaleContext.create('en-US').format_number(1234.5)
            '1,234.5'
            >>> LocaleContext.create('lv-LV').format_number(1234.5)
            '1 234,5'
            >>> LocaleContext.create('en-US').format_number(2.5, "integer")
            '2'
        """
        try:
            match style:
                case None:
                    formatted = babel_numbers.format_decimal(
                        value, format=_DEFAULT_NUMBER_PATTERN, locale=self._babel_locale
                    )
                case "integer":
                    formatted = babel_numbers.format_decimal(
                        value, format=_INTEGER_NUMBER_PATTERN, locale=self._babel_locale
                    )
                case "percent":
                    formatted = babel_numbers.format_percent(value, locale=self._babel_locale)
                case "currency":
                    formatted = babel_numbers.format_currency(
                        value,
                        self._default_currency(),
                        locale=self._babel_locale,
                        currency_digits=True,
                    )
                case _:
                    formatted = babel_numbers.format_decimal(
                        value, format=style, locale=self._babel_locale
                    )
        except _NUMBER_ERRORS as e:
            raise FormattingError(ErrorTemplate.formatting_failed("Number", value, str(e))) from e
        return str(formatted)

    def format_date(self, value: date | datetime, style: str | None = None) -> str:
        """Format the date part of a value.

        Args:
            value: date or datetime
            style: None (medium), "short", "medium", "long", "full", or a pattern

        Returns:
            Formatted date string according to locale rules

        Raises:
            FormattingError: If Babel cannot render the value

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_date(date(2025, 10, 27), 'short')
            '10/27/25'
            >>> LocaleContext.create('de-DE').format_date(date(2025, 10, 27), 'short')
            '27.10.25'
            >>> ctx.format_date(date(2025, 10, 27), 'yyyy-MM-dd')
            '2025-10-27'
        """
        try:
            formatted = babel_dates.format_date(
                value, format=style or _DEFAULT_DATE_STYLE, locale=self._babel_locale
            )
        except _DATE_ERRORS as e:
            raise FormattingError(ErrorTemplate.formatting_failed("Date", value, str(e))) from e
        return str(formatted)

    def format_time(self, value: datetime | time, style: str | None = None) -> str:
        """Format the time part of a value.

        Naive values are rendered as-is (no timezone conversion).

        Args:
            value: datetime or time
            style: None (medium), "short", "medium", "long", "full", or a pattern

        Returns:
            Formatted time string according to locale rules

        Raises:
            FormattingError: If Babel cannot render the value

        Example:
            >>> LocaleContext.create('en-US').format_time(time(14, 30), 'HH:mm')
            '14:30'
        """
        try:
            formatted = babel_dates.format_time(
                value, format=style or _DEFAULT_DATE_STYLE, locale=self._babel_locale
            )
        except _DATE_ERRORS as e:
            raise FormattingError(ErrorTemplate.formatting_failed("Time", value, str(e))) from e
        return str(formatted)
