"""Translation tables.

A table maps paths to raw message templates. Lookups report a boolean
found/not-found outcome instead of raising; callers decide whether a missing
path falls back to a literal or propagates.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Protocol

from .types import MessagePath, MessageTemplate

__all__ = ["MessageTable", "Table"]


class Table(Protocol):
    """Protocol for translation tables.

    This is a Protocol (structural typing) rather than ABC so callers can
    back a table with any store.

    Example:
        >>> class DictTable:
        ...     def __init__(self, entries: dict[str, str]) -> None:
        ...         self._entries = entries
        ...     def try_find(self, path: str) -> tuple[bool, str]:
        ...         if path in self._entries:
        ...             return True, self._entries[path]
        ...         return False, ""
    """

    def try_find(self, path: MessagePath) -> tuple[bool, MessageTemplate]:
        """Look up a template by path.

        Returns:
            (True, template) if found, (False, "") otherwise
        """
        ...  # pragma: no cover  # Protocol stub - not executable


class MessageTable:
    """Immutable in-memory table keyed by path.

    Example:
        >>> table = MessageTable({"greeting": "Hello, {name}!"})
        >>> table.try_find("greeting")
        (True, 'Hello, {name}!')
        >>> table.try_find("farewell")
        (False, '')
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[MessagePath, MessageTemplate] | None = None) -> None:
        self._entries: Mapping[MessagePath, MessageTemplate] = MappingProxyType(
            dict(entries or {})
        )

    def try_find(self, path: MessagePath) -> tuple[bool, MessageTemplate]:
        """Look up a template by path; never raises for a missing path."""
        template = self._entries.get(path)
        if template is None:
            return False, ""
        return True, template

    def with_entries(self, entries: Mapping[MessagePath, MessageTemplate]) -> MessageTable:
        """Return a new table with entries merged in (later keys overwrite)."""
        return MessageTable({**self._entries, **entries})

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[MessagePath]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MessageTable(entries={len(self._entries)})"
