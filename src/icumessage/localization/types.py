"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating table and reference call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MessagePath",
    "MessageTemplate",
]

type MessagePath = str
"""Table path of a translatable entry (e.g., 'menu.start', 'errors.not_found')."""

type MessageTemplate = str
"""Raw message template text as stored in a table."""
