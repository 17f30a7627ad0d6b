"""Core utilities shared across syntax and runtime layers.

Keeps the dependency graph clean:

    diagnostics <- core <- syntax <- runtime <- localization

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    FormattingError: Exception raised when locale formatting fails

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError
from .errors import FormattingError

__all__ = ["DepthGuard", "DepthLimitExceededError", "FormattingError"]
