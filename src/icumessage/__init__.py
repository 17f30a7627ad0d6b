"""icumessage - locale-aware ICU-style message formatting.

Renders message component trees (text, arguments, numbers, dates, plural and
select branches) against named arguments, with CLDR number/date formatting
and plural rules supplied by Babel.

Public API:
    MessageFormatter - Renders messages; MessageFormatter.for_locale() for Babel defaults
    MessageEnvironment - Immutable argument snapshot for one formatting pass
    NumberContext - Numeric value with plural offset
    LocaleContext - Babel-backed number/date/time provider
    BabelPluralizer - Babel-backed plural category classifier
    LocalizedString - Persistent reference to a table path or literal value
    MessageTable - Immutable in-memory translation table
    Localizer - Resolve + parse + format a LocalizedString in one call
    parse_message - Parse template text to a component tree

Exceptions:
    MessageError - Base exception class
    MessageSyntaxError - Template parse errors
    MessageFormatError - Render-time errors (and subclasses)
    MessageNotFoundError - Table path not found by Localizer

Submodules:
    icumessage.syntax - Component model and template parser
    icumessage.runtime - Formatter, environment and Babel collaborators
    icumessage.localization - References, tables and the Localizer facade
    icumessage.diagnostics - Error types, diagnostic codes and formatting
"""

from .core import DepthLimitExceededError, FormattingError
from .diagnostics import (
    InvalidNumberFormatError,
    MessageError,
    MessageFormatError,
    MessageNotFoundError,
    MessageSyntaxError,
    MissingDefaultBranchError,
    UndefinedArgumentError,
    UnsupportedArgumentTypeError,
)
from .localization import LocalizedString, Localizer, MessageTable
from .runtime import (
    BabelPluralizer,
    LocaleContext,
    MessageEnvironment,
    MessageFormatter,
    NumberContext,
)
from .syntax import Message
from .syntax import parse as parse_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("icumessage")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelPluralizer",
    "DepthLimitExceededError",
    "FormattingError",
    "InvalidNumberFormatError",
    "LocaleContext",
    "LocalizedString",
    "Localizer",
    "Message",
    "MessageEnvironment",
    "MessageError",
    "MessageFormatError",
    "MessageFormatter",
    "MessageNotFoundError",
    "MessageSyntaxError",
    "MessageTable",
    "MissingDefaultBranchError",
    "NumberContext",
    "UndefinedArgumentError",
    "UnsupportedArgumentTypeError",
    "__version__",
    "parse_message",
]
