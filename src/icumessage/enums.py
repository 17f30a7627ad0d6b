"""Enumerations for icumessage type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentKind(StrEnum):
    """Closed set of argument value kinds accepted by the formatter.

    Arguments are classified once, when they are bound into a
    MessageEnvironment, so component handlers only ever match on these kinds.
    """

    NUMBER = "number"
    """int (excluding bool), float, or Decimal"""

    DATETIME = "datetime"
    """datetime.datetime, datetime.date, or datetime.time"""

    TEXT = "text"
    """str"""

    RAW = "raw"
    """Any other non-None value, rendered via str()"""


class NumberKind(StrEnum):
    """Representation carried by a NumberContext."""

    INT = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    NUMERIC_STRING = "numeric_string"


class DateFormatKind(StrEnum):
    """Whether a DateFormat component renders the date or the time part.

    StrEnum provides automatic string conversion: str(DateFormatKind.DATE) == "date"
    """

    DATE = "date"
    """Date placeholder: {when, date, short}"""

    TIME = "time"
    """Time placeholder: {when, time, short}"""


class ComponentKind(StrEnum):
    """Name of a message component variant, used in error reporting."""

    TEXT = "Text"
    FORMAT = "Format"
    NUMBER_FORMAT = "NumberFormat"
    DATE_FORMAT = "DateFormat"
    PLURAL_FORMAT = "PluralFormat"
    SELECT_FORMAT = "SelectFormat"


__all__ = [
    "ArgumentKind",
    "ComponentKind",
    "DateFormatKind",
    "NumberKind",
]
