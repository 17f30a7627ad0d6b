"""Core error types shared across the syntax and runtime layers.

Python 3.13+.
"""

from icumessage.diagnostics import MessageFormatError

__all__ = ["FormattingError"]


class FormattingError(MessageFormatError):
    """Raised when locale-aware rendering of a number, date or time fails.

    Raised by the Babel-backed format provider. Like every other formatting
    error it aborts the current render; the caller decides whether to retry
    with a different locale.
    """
