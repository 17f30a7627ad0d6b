"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing arguments, missing table paths)
        2000-2999: Formatting errors (runtime evaluation failures)
        3000-3999: Syntax errors (template parser failures)
    """

    # Reference errors (1000-1999)
    UNDEFINED_ARGUMENT = 1001
    MESSAGE_NOT_FOUND = 1002

    # Formatting errors (2000-2999)
    UNSUPPORTED_ARGUMENT_TYPE = 2001
    INVALID_NUMBER_FORMAT = 2002
    MISSING_DEFAULT_BRANCH = 2003
    MAX_DEPTH_EXCEEDED = 2004
    FORMATTING_FAILED = 2005

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    EXPECTED_TOKEN = 3002
    UNKNOWN_PLACEHOLDER_TYPE = 3003
    INVALID_PLURAL_OFFSET = 3004
    INVALID_BRANCH_KEY = 3005
    DUPLICATE_BRANCH = 3006
    NO_BRANCHES = 3007
    PARSE_NESTING_DEPTH_EXCEEDED = 3008


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Template text location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a caller
    to identify the offending argument and component without parsing the
    message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Template location (syntax errors only)
        hint: Suggestion for fixing the error
        argument_name: Argument that caused the error (formatting errors)
        component: Component kind being rendered, e.g. "PluralFormat"
        expected_type: Expected argument kind (type errors)
        received_type: Python type actually received (type errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    argument_name: str | None = None
    component: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNSUPPORTED_ARGUMENT_TYPE]: Argument 'count' is not a number
              = component: NumberFormat
              = argument: count
              = expected: number
              = received: str
              = help: Pass an int, float, or Decimal value

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
