"""Message formatter - renders component trees to strings.

Walks a Message against a MessageEnvironment, dispatching on the closed set
of component variants, consulting a FormatProvider for numbers and dates and
a Pluralizer for plural categories, and recursing into selected branches.

Python 3.13+. Indirect dependency: Babel (via the default collaborators).

Thread Safety:
    The formatter holds only immutable references to its collaborators and
    rebuilds the environment at each nesting level, so one instance may
    serve concurrent format() calls if the collaborators are reentrant.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import assert_never, overload

from icumessage.constants import MAX_DEPTH, OTHER_BRANCH
from icumessage.core import DepthGuard
from icumessage.diagnostics import (
    ErrorTemplate,
    InvalidNumberFormatError,
    MissingDefaultBranchError,
    UndefinedArgumentError,
    UnsupportedArgumentTypeError,
)
from icumessage.enums import ArgumentKind, ComponentKind, DateFormatKind
from icumessage.locale_utils import get_system_locale
from icumessage.syntax import (
    DateFormat,
    Format,
    Message,
    MessageComponent,
    MessageParser,
    NumberFormat,
    PluralFormat,
    SelectFormat,
    Text,
)

from .environment import ArgumentValue, MessageEnvironment
from .locale_context import LocaleContext
from .number_context import NumberContext, NumericValue
from .plural_rules import BabelPluralizer
from .protocols import FormatProvider, Pluralizer

__all__ = ["MessageFormatter"]

logger = logging.getLogger(__name__)

# '#' optionally escaped by an immediately preceding apostrophe
_NUMBER_REPLACEMENT = re.compile(r"(?P<escaped>')?#")
_NUMBER_SIGN = "#"


class MessageFormatter:
    """Renders message component trees to strings.

    Failures are immediate: the first error aborts the whole render and no
    partial output is returned. Nothing is retried internally.

    Example:
        >>> formatter = MessageFormatter.for_locale("en_US")
        >>> formatter.format("{n, plural, =0 {no items} one {# item} other {# items}}", {"n": 3})
        '3 items'
    """

    __slots__ = ("_max_depth", "_parser", "pluralizer", "provider")

    def __init__(
        self,
        provider: FormatProvider,
        pluralizer: Pluralizer,
        *,
        parser: MessageParser | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize formatter.

        Args:
            provider: Renderer for numbers, dates and times
            pluralizer: Plural category classifier
            parser: Parser used by the template-text entry point (keyword-only)
            max_depth: Maximum plural/select nesting depth (keyword-only)
        """
        self.provider = provider
        self.pluralizer = pluralizer
        self._parser = parser if parser is not None else MessageParser(max_depth=max_depth)
        self._max_depth = max_depth

    @classmethod
    def for_locale(
        cls, locale_code: str | None = None, *, max_depth: int = MAX_DEPTH
    ) -> MessageFormatter:
        """Create a formatter using the Babel collaborators for a locale.

        Args:
            locale_code: BCP 47 or POSIX locale identifier; the system locale
                when omitted

        Returns:
            MessageFormatter with LocaleContext and BabelPluralizer
        """
        if locale_code is None:
            locale_code = get_system_locale()
        return cls(
            LocaleContext.create(locale_code),
            BabelPluralizer(locale_code),
            max_depth=max_depth,
        )

    @overload
    def format(self, message: Message, arguments: MessageEnvironment) -> str: ...

    @overload
    def format(
        self, message: Message | str, arguments: Mapping[str, object] | None = None
    ) -> str: ...

    def format(
        self,
        message: Message | str,
        arguments: MessageEnvironment | Mapping[str, object] | None = None,
    ) -> str:
        """Format a message.

        Args:
            message: Parsed component tree, or template text to parse
            arguments: Prepared environment, or a plain mapping of arguments

        Returns:
            Rendered string

        Raises:
            MessageSyntaxError: If template text cannot be parsed
            MessageFormatError: If rendering fails (undefined argument,
                unsupported type, invalid number, missing default branch)
        """
        if isinstance(message, str):
            message = self._parser.parse(message)

        match arguments:
            case MessageEnvironment():
                env = arguments
            case None:
                env = MessageEnvironment()
            case _:
                env = MessageEnvironment.of(arguments)

        return self._format_message(message, env, DepthGuard(max_depth=self._max_depth))

    # ------------------------------------------------------------------
    # Tree walk
    # ------------------------------------------------------------------

    def _format_message(self, message: Message, env: MessageEnvironment, guard: DepthGuard) -> str:
        """Format each component and concatenate the results."""
        with guard:
            return "".join(self._format_component(c, env, guard) for c in message)

    def _format_component(
        self, component: MessageComponent, env: MessageEnvironment, guard: DepthGuard
    ) -> str:
        """Dispatch on the component variant."""
        match component:
            case Text():
                return self._format_text(component, env)
            case Format():
                return self._format_argument(component, env)
            case NumberFormat():
                return self._format_number(component, env)
            case DateFormat():
                return self._format_date(component, env)
            case PluralFormat():
                return self._format_plural(component, env, guard)
            case SelectFormat():
                return self._format_select(component, env, guard)
            case _:
                assert_never(component)

    def _format_text(self, component: Text, env: MessageEnvironment) -> str:
        """Substitute '#' with the current number; "'#" renders a literal '#'.

        Without a current number the text is returned unchanged.
        """
        number = env.current_number
        if number is None or _NUMBER_SIGN not in component.text:
            return component.text

        formatted = self.provider.format_number(number.value)
        return _NUMBER_REPLACEMENT.sub(
            lambda m: _NUMBER_SIGN if m.group("escaped") else formatted,
            component.text,
        )

    def _format_argument(self, component: Format, env: MessageEnvironment) -> str:
        """Render an argument by its kind."""
        argument = self._lookup(env, component.name, ComponentKind.FORMAT)
        match argument.kind:
            case ArgumentKind.NUMBER:
                return self.provider.format_number(argument.value)  # type: ignore[arg-type]
            case ArgumentKind.DATETIME:
                if isinstance(argument.value, time):
                    return self.provider.format_time(argument.value)
                return self.provider.format_date(argument.value)  # type: ignore[arg-type]
            case ArgumentKind.TEXT | ArgumentKind.RAW:
                return _to_string(argument)
            case _:
                assert_never(argument.kind)

    def _format_number(self, component: NumberFormat, env: MessageEnvironment) -> str:
        """Render a numeric argument with the component's style."""
        argument = self._lookup(env, component.name, ComponentKind.NUMBER_FORMAT)
        if argument.kind is not ArgumentKind.NUMBER:
            raise UnsupportedArgumentTypeError(
                ErrorTemplate.unsupported_argument_type(
                    component.name,
                    ComponentKind.NUMBER_FORMAT,
                    type(argument.value).__name__,
                    ArgumentKind.NUMBER,
                )
            )
        value: NumericValue = argument.value  # type: ignore[assignment]
        return self.provider.format_number(value, component.style)

    def _format_date(self, component: DateFormat, env: MessageEnvironment) -> str:
        """Render a date/time argument as a date or a time."""
        argument = self._lookup(env, component.name, ComponentKind.DATE_FORMAT)
        value = argument.value
        if argument.kind is ArgumentKind.DATETIME:
            match component.kind:
                # datetime is a date subclass; a bare time has no date part
                case DateFormatKind.DATE if isinstance(value, date):
                    return self.provider.format_date(value, component.style)
                case DateFormatKind.TIME if isinstance(value, datetime | time):
                    return self.provider.format_time(value, component.style)

        raise UnsupportedArgumentTypeError(
            ErrorTemplate.unsupported_argument_type(
                component.name,
                ComponentKind.DATE_FORMAT,
                type(value).__name__,
                component.kind,
            )
        )

    def _format_plural(
        self, component: PluralFormat, env: MessageEnvironment, guard: DepthGuard
    ) -> str:
        """Select a plural branch and format it with the adjusted number in scope.

        Branch resolution order:
            1. Exact-count branch equal to the offset-adjusted value
            2. Branch named by the plural category of the adjusted value
            3. The 'other' branch
        """
        argument = self._lookup(env, component.name, ComponentKind.PLURAL_FORMAT)
        number = self._to_number(component.name, argument).with_offset(component.offset)

        branch = self._find_exact_branch(component, number)
        category = None
        if branch is None:
            category = self.pluralizer.category(number)
            branch = component.branch(category)
        if branch is None:
            branch = component.branch(OTHER_BRANCH)
        if branch is None:
            raise MissingDefaultBranchError(
                ErrorTemplate.missing_default_branch(
                    component.name, ComponentKind.PLURAL_FORMAT, str(category)
                )
            )

        logger.debug(
            "Plural '%s' = %s (offset %s): category %s",
            component.name,
            number.value,
            component.offset,
            category,
        )
        return self._format_message(branch, env.with_number(number), guard)

    def _format_select(
        self, component: SelectFormat, env: MessageEnvironment, guard: DepthGuard
    ) -> str:
        """Select a branch by exact string match, else 'other'.

        Select branches do not inherit the numeric subject.
        """
        argument = self._lookup(env, component.name, ComponentKind.SELECT_FORMAT)
        selector = _to_string(argument)

        branch = component.branch(selector)
        if branch is None:
            branch = component.branch(OTHER_BRANCH)
        if branch is None:
            raise MissingDefaultBranchError(
                ErrorTemplate.missing_default_branch(
                    component.name, ComponentKind.SELECT_FORMAT, selector
                )
            )
        return self._format_message(branch, env.without_number(), guard)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _lookup(env: MessageEnvironment, name: str, component: ComponentKind) -> ArgumentValue:
        """Look up an argument or raise UndefinedArgumentError."""
        argument = env.lookup(name)
        if argument is None:
            raise UndefinedArgumentError(ErrorTemplate.undefined_argument(name, component))
        return argument

    @staticmethod
    def _to_number(name: str, argument: ArgumentValue) -> NumberContext:
        """Coerce a plural selector into a NumberContext.

        Numbers and numeric strings are accepted; anything else is an
        InvalidNumberFormatError naming the argument.
        """
        diagnostic = ErrorTemplate.invalid_number_format(
            name, ComponentKind.PLURAL_FORMAT, argument.value
        )
        if argument.kind in (ArgumentKind.NUMBER, ArgumentKind.TEXT):
            try:
                return NumberContext.of(argument.value)
            except InvalidNumberFormatError as e:
                raise InvalidNumberFormatError(diagnostic) from e
        raise InvalidNumberFormatError(diagnostic)

    @staticmethod
    def _find_exact_branch(component: PluralFormat, number: NumberContext) -> Message | None:
        """Find the exact-count branch ("=N") matching number.value."""
        value = number.value
        # Decimal("0.1") != 0.1; compare floats by their shortest repr
        target = Decimal(str(value)) if isinstance(value, float) else value
        for branch in component.branches:
            exact = branch.exact_value
            if exact is not None and exact == target:
                return branch.message
        return None


def _to_string(argument: ArgumentValue) -> str:
    """String form of an argument for Format output and select matching.

    Booleans render as "true"/"false"; integral floats drop the ".0", so 1.0
    selects the "1" branch.
    """
    value = argument.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
