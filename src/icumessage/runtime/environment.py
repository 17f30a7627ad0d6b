"""Formatting environment and argument classification.

Arguments are classified into the closed ArgumentKind set when they are bound
into an environment. Unbindable values are rejected at that boundary, so the
formatter never meets an unclassified value deep inside a tree.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from decimal import Decimal
from types import MappingProxyType

from icumessage.diagnostics import ErrorTemplate, UnsupportedArgumentTypeError
from icumessage.enums import ArgumentKind

from .number_context import NumberContext

__all__ = ["ArgumentValue", "MessageEnvironment"]


@dataclass(frozen=True, slots=True)
class ArgumentValue:
    """Argument value tagged with its kind.

    Attributes:
        kind: Classification used by component handlers
        value: The original Python value
    """

    kind: ArgumentKind
    value: object

    @classmethod
    def bind(cls, name: str, value: object) -> ArgumentValue:
        """Classify a value for binding under name.

        Args:
            name: Argument name (for error reporting)
            value: Any Python value

        Returns:
            ArgumentValue (returned unchanged if value is already one)

        Raises:
            UnsupportedArgumentTypeError: If value is None
        """
        match value:
            case ArgumentValue():
                return value
            case None:
                raise UnsupportedArgumentTypeError(
                    ErrorTemplate.unbindable_argument(name, type(value).__name__)
                )
            # bool is an int subclass but never a number here
            case bool():
                return cls(ArgumentKind.RAW, value)
            case int() | float() | Decimal():
                return cls(ArgumentKind.NUMBER, value)
            case datetime() | date() | time():
                return cls(ArgumentKind.DATETIME, value)
            case str():
                return cls(ArgumentKind.TEXT, value)
            case _:
                return cls(ArgumentKind.RAW, value)


def _empty_arguments() -> Mapping[str, ArgumentValue]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class MessageEnvironment:
    """Immutable snapshot of the arguments available during one formatting pass.

    Every operation returns a new environment; the formatter rebuilds the
    environment at each nesting level instead of mutating it.

    Attributes:
        arguments: Read-only mapping of argument name to classified value
        current_number: Numeric subject for '#' substitution, if any

    Example:
        >>> env = MessageEnvironment.of({"count": 3})
        >>> env.lookup("count").kind
        <ArgumentKind.NUMBER: 'number'>
        >>> env.with_number(NumberContext.of(3)).current_number.value
        3
    """

    arguments: Mapping[str, ArgumentValue] = field(default_factory=_empty_arguments)
    current_number: NumberContext | None = None

    @classmethod
    def of(cls, arguments: Mapping[str, object] | None = None) -> MessageEnvironment:
        """Create an environment binding the given arguments."""
        env = cls()
        return env.with_arguments(arguments) if arguments else env

    def with_arguments(self, arguments: Mapping[str, object]) -> MessageEnvironment:
        """Return a copy with arguments merged in (later keys overwrite).

        Raises:
            UnsupportedArgumentTypeError: If any value cannot be bound
        """
        merged = dict(self.arguments)
        for name, value in arguments.items():
            merged[name] = ArgumentValue.bind(name, value)
        return replace(self, arguments=MappingProxyType(merged))

    def with_argument(self, name: str, value: object) -> MessageEnvironment:
        """Return a copy with a single argument bound."""
        return self.with_arguments({name: value})

    def with_number(self, number: NumberContext) -> MessageEnvironment:
        """Return a copy with number as the current numeric subject."""
        return replace(self, current_number=number)

    def without_number(self) -> MessageEnvironment:
        """Return a copy with the numeric subject cleared."""
        return replace(self, current_number=None)

    def lookup(self, name: str) -> ArgumentValue | None:
        """Look up an argument by exact name."""
        return self.arguments.get(name)
