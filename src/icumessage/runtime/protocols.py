"""Collaborator protocols consumed by the message formatter.

Structural typing (Protocol) rather than ABCs so callers can supply any
object with the right methods, e.g. a stub provider in tests.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .number_context import NumberContext, NumericValue

__all__ = ["FormatProvider", "Pluralizer"]


class FormatProvider(Protocol):
    """Locale-specific renderer for numbers, dates and times.

    Implementations must be deterministic for a fixed locale and safe to call
    concurrently.
    """

    def format_number(self, value: NumericValue, style: str | None = None) -> str:
        """Render a number; style None selects the locale default."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def format_date(self, value: date | datetime, style: str | None = None) -> str:
        """Render the date part of a value."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def format_time(self, value: datetime | time, style: str | None = None) -> str:
        """Render the time part of a value."""
        ...  # pragma: no cover  # Protocol stub - not executable


class Pluralizer(Protocol):
    """Locale-specific classifier of numbers into plural categories."""

    def category(self, number: NumberContext) -> str:
        """Return the plural category ("zero", "one", ..., "other") of number.value."""
        ...  # pragma: no cover  # Protocol stub - not executable
