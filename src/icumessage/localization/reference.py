"""Localized string references.

A LocalizedString names either a table path or a literal fallback value,
plus the named arguments supplied to the formatter when it is resolved.
References are persistent values: every mutator returns a new reference and
the receiver is never touched, so references may be cached, used as mapping
keys, and shared across threads freely.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from .types import MessagePath, MessageTemplate

if TYPE_CHECKING:
    from .table import Table

__all__ = ["LocalizedString"]


def _empty_arguments() -> Mapping[str, object]:
    return MappingProxyType({})


# Stand-in for leaf values that cannot be hashed; equal references still hash equal
_UNHASHABLE = object()


def _make_hashable(value: object) -> object:
    """Convert potentially unhashable value to hashable equivalent.

    Converts:
        - list, tuple -> tuple (recursively)
        - dict -> frozenset of key-value pairs (recursively; keys of mixed
          types need no ordering)
        - set -> frozenset (recursively)
        - bytearray -> bytes
        - Other unhashable values -> a shared placeholder
        - Other values -> unchanged
    """
    match value:
        case list() | tuple():
            return tuple(_make_hashable(v) for v in value)
        case dict():
            return frozenset((k, _make_hashable(v)) for k, v in value.items())
        case set():
            return frozenset(_make_hashable(v) for v in value)
        case bytearray():
            return bytes(value)
        case Hashable():
            return value
        case _:
            return _UNHASHABLE


@dataclass(frozen=True, slots=True, eq=False)
class LocalizedString:
    """Reference to a translatable string.

    At most one of path and value is active: with_path() clears the value
    and with_value() clears the path. Empty strings count as unset.

    Attributes:
        path: Table path, for localized references
        value: Literal text, for non-localized references
        arguments: Read-only mapping of named arguments

    Example:
        >>> ref = LocalizedString.from_path("inbox.count").with_argument("n", 3)
        >>> str(ref)
        'inbox.count with arguments {n = 3}'
        >>> ref.with_value("Inbox").path is None
        True
    """

    path: MessagePath | None = None
    value: str | None = None
    arguments: Mapping[str, object] = field(default_factory=_empty_arguments)

    def __post_init__(self) -> None:
        """Freeze the arguments and enforce a single active field.

        Raises:
            ValueError: If both path and value are non-empty
        """
        if self.path and self.value:
            msg = (
                "LocalizedString takes a path or a value, not both "
                f"(path={self.path!r}, value={self.value!r})"
            )
            raise ValueError(msg)
        if not isinstance(self.arguments, MappingProxyType):
            object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))

    @classmethod
    def of(cls, value: str) -> LocalizedString:
        """Create a non-localized reference from literal text."""
        return cls(value=value)

    @classmethod
    def from_path(cls, path: MessagePath) -> LocalizedString:
        """Create a localized reference to a table path."""
        return cls(path=path)

    @property
    def is_empty(self) -> bool:
        """True if neither a path nor a value is set."""
        return not self.path and not self.value

    # ------------------------------------------------------------------
    # Field management
    # ------------------------------------------------------------------

    def with_path(self, path: MessagePath) -> LocalizedString:
        """Return a copy resolving through path; clears any literal value."""
        return replace(self, path=path, value=None)

    def with_value(self, value: str) -> LocalizedString:
        """Return a copy resolving to literal value; clears any path."""
        return replace(self, path=None, value=value)

    def with_argument(self, name: str, value: object) -> LocalizedString:
        """Return a copy with one argument upserted."""
        return self.with_arguments({name: value})

    def with_arguments(self, arguments: Mapping[str, object]) -> LocalizedString:
        """Return a copy with arguments upserted (later keys overwrite)."""
        return replace(self, arguments=MappingProxyType({**self.arguments, **arguments}))

    def without_argument(self, name: str) -> LocalizedString:
        """Return a copy without the named argument; missing names are ignored."""
        return self.without_arguments((name,))

    def without_arguments(self, names: Iterable[str]) -> LocalizedString:
        """Return a copy without the named arguments; missing names are ignored."""
        removed = set(names)
        return replace(
            self,
            arguments=MappingProxyType(
                {k: v for k, v in self.arguments.items() if k not in removed}
            ),
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, table: Table) -> tuple[bool, MessageTemplate]:
        """Resolve the reference to a template or literal.

        With a path, the table's found/not-found outcome is returned as-is.
        Without a path the table is never consulted and the literal value
        (or "" when unset) is returned as found.

        Returns:
            (found, template_or_literal)
        """
        if self.path:
            return table.try_find(self.path)
        return True, self.value or ""

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalizedString):
            return NotImplemented
        return (
            self.path == other.path
            and self.value == other.value
            and dict(self.arguments) == dict(other.arguments)
        )

    def __hash__(self) -> int:
        return hash((self.path, self.value, _make_hashable(dict(self.arguments))))

    def __str__(self) -> str:
        text = self.path if self.path else f'<Non-Localized Value: "{self.value or ""}">'
        if self.arguments:
            pairs = ", ".join(f"{k} = {v}" for k, v in self.arguments.items())
            text += f" with arguments {{{pairs}}}"
        return text
