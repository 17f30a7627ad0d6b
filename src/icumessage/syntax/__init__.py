"""Message component model and template parser.

Provides the component tree the formatter walks and a parser for the ICU
MessageFormat subset that produces it.

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    Branch,
    DateFormat,
    Format,
    Message,
    MessageComponent,
    NumberFormat,
    PluralFormat,
    SelectFormat,
    Text,
)
from .cursor import Cursor
from .parser import MessageParser, parse

__all__ = [
    "Branch",
    "Cursor",
    "DateFormat",
    "Format",
    "Message",
    "MessageComponent",
    "MessageParser",
    "NumberFormat",
    "PluralFormat",
    "SelectFormat",
    "Text",
    "parse",
]
