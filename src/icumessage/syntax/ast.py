"""Message component tree node definitions.

A parsed template is a Message: an ordered tuple of components drawn from a
closed set of variants (Text, Format, NumberFormat, DateFormat, PluralFormat,
SelectFormat). Plural and select components hold Branches whose values are
nested Messages.

All nodes are frozen, slotted dataclasses: trees are immutable, hashable and
safe to share between threads.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from icumessage.constants import EXACT_BRANCH_PREFIX, OTHER_BRANCH
from icumessage.enums import DateFormatKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Containers
    "Message",
    "Branch",
    # Components
    "Text",
    "Format",
    "NumberFormat",
    "DateFormat",
    "PluralFormat",
    "SelectFormat",
    # Type aliases
    "MessageComponent",
]


# ============================================================================
# LEAF COMPONENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text.

    May contain '#' placeholders (substituted inside plural branches) and
    "'#" escapes.

    Example:
        "You have " in: You have {count, number} items
    """

    text: str


@dataclass(frozen=True, slots=True)
class Format:
    """Plain argument placeholder.

    Example:
        {name}
    """

    name: str


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Number placeholder with an optional style.

    Style is None (locale default), "integer", "percent", "currency", or a
    CLDR number pattern.

    Examples:
        {amount, number}
        {ratio, number, percent}
        {price, number, #,##0.00}
    """

    name: str
    style: str | None = None


@dataclass(frozen=True, slots=True)
class DateFormat:
    """Date or time placeholder with an optional style.

    Style is None (medium), "short", "medium", "long", "full", or a CLDR
    date pattern.

    Examples:
        {when, date, short}
        {when, time, HH:mm}
    """

    name: str
    kind: DateFormatKind = DateFormatKind.DATE
    style: str | None = None


# ============================================================================
# BRANCHING COMPONENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Branch:
    """Named alternative of a plural or select component.

    Plural keys are either a plural category ("one", "few", "other") or an
    exact count written with a leading '=' ("=0", "=1.5").

    Attributes:
        key: Branch key as written in the template
        message: Sub-message rendered when the branch is selected
    """

    key: str
    message: "Message"

    @property
    def is_exact(self) -> bool:
        """True for exact-count keys such as "=0"."""
        return self.key.startswith(EXACT_BRANCH_PREFIX)

    @property
    def exact_value(self) -> Decimal | None:
        """Numeric value of an exact-count key, or None.

        Returns None for category keys and for exact keys whose remainder is
        not a finite number.
        """
        if not self.is_exact:
            return None
        try:
            value = Decimal(self.key[len(EXACT_BRANCH_PREFIX):])
        except InvalidOperation:
            return None
        return value if value.is_finite() else None


@dataclass(frozen=True, slots=True)
class PluralFormat:
    """Plural placeholder.

    Branch resolution: exact-count branch for the offset-adjusted value,
    then the branch named by the plural category, then "other".

    Example:
        {guests, plural, offset:1 =0 {nobody} one {{host} and # other} other {...}}
    """

    name: str
    branches: tuple[Branch, ...]
    offset: int = 0

    def branch(self, key: str) -> "Message | None":
        """Return the message of the branch with this exact key, if any."""
        for branch in self.branches:
            if branch.key == key:
                return branch.message
        return None

    @property
    def has_other(self) -> bool:
        """True if the component defines the mandatory 'other' branch."""
        return self.branch(OTHER_BRANCH) is not None


@dataclass(frozen=True, slots=True)
class SelectFormat:
    """Select placeholder keyed by arbitrary strings.

    Example:
        {gender, select, male {he} female {she} other {they}}
    """

    name: str
    branches: tuple[Branch, ...]

    def branch(self, key: str) -> "Message | None":
        """Return the message of the branch with this exact key, if any."""
        for branch in self.branches:
            if branch.key == key:
                return branch.message
        return None

    @property
    def has_other(self) -> bool:
        """True if the component defines the 'other' fallback branch."""
        return self.branch(OTHER_BRANCH) is not None


# ============================================================================
# MESSAGE
# ============================================================================

type MessageComponent = Text | Format | NumberFormat | DateFormat | PluralFormat | SelectFormat


@dataclass(frozen=True, slots=True)
class Message:
    """Ordered sequence of message components.

    An empty message is valid and renders to the empty string.
    """

    components: tuple[MessageComponent, ...] = ()

    @classmethod
    def of(cls, *components: MessageComponent | str) -> "Message":
        """Build a message, wrapping bare strings in Text components.

        Example:
            >>> Message.of("Hello, ", Format("name"), "!")
            Message(components=(Text(text='Hello, '), Format(name='name'), Text(text='!')))
        """
        return cls(tuple(Text(c) if isinstance(c, str) else c for c in components))

    def __iter__(self) -> Iterator[MessageComponent]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def argument_names(self) -> frozenset[str]:
        """Names of all arguments referenced anywhere in the tree."""
        names: set[str] = set()
        for component in self.components:
            match component:
                case Text():
                    pass
                case Format(name=name) | NumberFormat(name=name) | DateFormat(name=name):
                    names.add(name)
                case PluralFormat(name=name, branches=branches) | SelectFormat(
                    name=name, branches=branches
                ):
                    names.add(name)
                    for branch in branches:
                        names |= branch.message.argument_names
        return frozenset(names)
