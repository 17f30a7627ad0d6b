"""Message runtime package.

Provides the formatter, its environment and number model, and the
Babel-backed default collaborators. Depends on syntax package for the
component tree.

Python 3.13+.
"""

from .environment import ArgumentValue, MessageEnvironment
from .formatter import MessageFormatter
from .locale_context import LocaleContext
from .number_context import NumberContext, NumericValue
from .plural_rules import BabelPluralizer, select_plural_category
from .protocols import FormatProvider, Pluralizer

__all__ = [
    "ArgumentValue",
    "BabelPluralizer",
    "FormatProvider",
    "LocaleContext",
    "MessageEnvironment",
    "MessageFormatter",
    "NumberContext",
    "NumericValue",
    "Pluralizer",
    "select_plural_category",
]
