"""Diagnostic system for message errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    InvalidNumberFormatError,
    MessageError,
    MessageFormatError,
    MessageNotFoundError,
    MessageSyntaxError,
    MissingDefaultBranchError,
    UndefinedArgumentError,
    UnsupportedArgumentTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidNumberFormatError",
    "MessageError",
    "MessageFormatError",
    "MessageNotFoundError",
    "MessageSyntaxError",
    "MissingDefaultBranchError",
    "OutputFormat",
    "SourceSpan",
    "UndefinedArgumentError",
    "UnsupportedArgumentTypeError",
]
