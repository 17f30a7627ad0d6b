"""Locale code normalization and system locale detection.

Locale codes reach the library in several spellings: BCP-47 tags from
callers ("pt-BR"), POSIX names from the environment ("pt_BR.UTF-8",
"de_DE@euro"). Everything is reduced to the bare POSIX form Babel parses,
which also serves as the cache key for LocaleContext and plural rules.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

from icumessage.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Environment variables consulted in POSIX precedence order
_LOCALE_VARIABLES: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# Pseudo-locales that carry no language information
_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Reduce a locale code to the POSIX form Babel expects.

    Hyphens become underscores; an encoding suffix (".UTF-8") and a
    modifier ("@euro") are dropped.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.split("@", 1)[0].split(".", 1)[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a Babel Locale, caching the result.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the code is malformed
    """
    # Babel loads CLDR data on import; defer until a locale is actually needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _os_locale() -> str | None:
    import locale  # noqa: PLC0415

    try:
        language_code, _ = locale.getlocale()
    except ValueError:
        # Unparsable LC_* values make getlocale() raise; the environment
        # variables are still consulted below.
        logger.debug("locale.getlocale() rejected the process locale")
        return None
    return language_code


def _candidate_locales() -> Iterator[str]:
    """Yield raw locale names from the OS first, then the environment."""
    os_locale = _os_locale()
    if os_locale:
        yield os_locale
    for variable in _LOCALE_VARIABLES:
        value = os.environ.get(variable)
        if value:
            yield value


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the user's locale.

    Consults locale.getlocale() and then LC_ALL, LC_MESSAGES and LANG, skipping
    the "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: Raise instead of returning DEFAULT_LOCALE when no
            usable locale is configured

    Returns:
        Normalized locale code

    Raises:
        RuntimeError: If raise_on_failure is set and detection fails
    """
    for candidate in _candidate_locales():
        code = normalize_locale(candidate)
        if code not in _PSEUDO_LOCALES:
            return code

    if raise_on_failure:
        msg = "Could not determine system locale; set LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)

    logger.debug("No system locale configured, using %s", DEFAULT_LOCALE)
    return DEFAULT_LOCALE
