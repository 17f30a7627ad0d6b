"""Template parser producing message component trees.

Recognizes the ICU MessageFormat subset the formatter evaluates:

    Hello, {name}!
    {amount, number} / {amount, number, percent} / {amount, number, #,##0.00}
    {when, date} / {when, date, short} / {when, time, HH:mm}
    {count, plural, offset:1 =0 {none} one {# item} other {# items}}
    {gender, select, male {he} female {she} other {they}}

Quoting: an apostrophe immediately before '{' or '}' makes that brace literal.
Every other apostrophe, including "'#", is kept verbatim in the Text
component; '#' substitution and its escape are handled at render time.

Python 3.13+. Zero external dependencies.
"""

from icumessage.constants import EXACT_BRANCH_PREFIX, MAX_DEPTH
from icumessage.diagnostics import ErrorTemplate, MessageSyntaxError
from icumessage.enums import DateFormatKind

from .ast import (
    Branch,
    DateFormat,
    Format,
    Message,
    MessageComponent,
    NumberFormat,
    PluralFormat,
    SelectFormat,
    Text,
)
from .cursor import Cursor

__all__ = ["MessageParser", "parse"]

_QUOTE = "'"
_OPEN = "{"
_CLOSE = "}"
_SEPARATOR = ","
_OFFSET_PREFIX = "offset:"

# Characters that terminate an argument name or branch key.
_NAME_TERMINATORS = frozenset("{},'")


class MessageParser:
    """Recursive-descent parser for message templates.

    Stateless apart from configuration: one instance may parse many templates
    concurrently.

    Example:
        >>> parser = MessageParser()
        >>> parser.parse("Hi {name}")
        Message(components=(Text(text='Hi '), Format(name='name')))
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        """Initialize parser.

        Args:
            max_depth: Maximum nesting of plural/select branch messages
        """
        self._max_depth = max_depth

    def parse(self, source: str) -> Message:
        """Parse template text into a Message.

        Args:
            source: Template text

        Returns:
            Parsed component tree

        Raises:
            MessageSyntaxError: If the template is malformed
        """
        message, _ = self._parse_message(Cursor(source, 0), depth=0, nested=False)
        return message

    # ------------------------------------------------------------------
    # Messages and text
    # ------------------------------------------------------------------

    def _parse_message(
        self, cursor: Cursor, *, depth: int, nested: bool
    ) -> tuple[Message, Cursor]:
        """Parse components until EOF (top level) or an unmatched '}' (nested)."""
        if depth > self._max_depth:
            raise MessageSyntaxError(
                ErrorTemplate.parse_depth_exceeded(cursor.span(), self._max_depth)
            )

        components: list[MessageComponent] = []
        text: list[str] = []

        while not cursor.is_eof:
            char = cursor.current
            if char == _QUOTE and cursor.peek(1) in (_OPEN, _CLOSE):
                text.append(cursor.source[cursor.pos + 1])
                cursor = cursor.advance(2)
            elif char == _OPEN:
                if text:
                    components.append(Text("".join(text)))
                    text.clear()
                component, cursor = self._parse_placeholder(cursor.advance(), depth=depth)
                components.append(component)
            elif char == _CLOSE:
                if not nested:
                    raise MessageSyntaxError(
                        ErrorTemplate.expected_token(cursor.span(), "text or '{'", char)
                    )
                break
            else:
                text.append(char)
                cursor = cursor.advance()

        if nested and cursor.is_eof:
            raise MessageSyntaxError(ErrorTemplate.unexpected_eof(cursor.span(), "'}'"))

        if text:
            components.append(Text("".join(text)))
        return Message(tuple(components)), cursor

    # ------------------------------------------------------------------
    # Placeholders
    # ------------------------------------------------------------------

    def _parse_placeholder(self, cursor: Cursor, *, depth: int) -> tuple[MessageComponent, Cursor]:
        """Parse a placeholder body; cursor is positioned after the opening '{'."""
        name, cursor = self._parse_name(cursor.skip_whitespace(), "argument name")
        cursor = cursor.skip_whitespace()

        if self._at(cursor, _CLOSE):
            return Format(name), cursor.advance()

        cursor = self._expect(cursor, _SEPARATOR, "',' or '}'").skip_whitespace()
        type_start = cursor
        type_name, cursor = self._parse_name(cursor, "placeholder type")
        cursor = cursor.skip_whitespace()

        match type_name:
            case "number":
                style, cursor = self._parse_style(cursor)
                return NumberFormat(name, style), cursor
            case "date" | "time":
                style, cursor = self._parse_style(cursor)
                return DateFormat(name, DateFormatKind(type_name), style), cursor
            case "plural":
                cursor = self._expect(cursor, _SEPARATOR, "','").skip_whitespace()
                offset, cursor = self._parse_offset(cursor)
                branches, cursor = self._parse_branches(cursor, name, depth=depth, plural=True)
                return PluralFormat(name, branches, offset), cursor
            case "select":
                cursor = self._expect(cursor, _SEPARATOR, "','").skip_whitespace()
                branches, cursor = self._parse_branches(cursor, name, depth=depth, plural=False)
                return SelectFormat(name, branches), cursor
            case _:
                raise MessageSyntaxError(
                    ErrorTemplate.unknown_placeholder_type(
                        type_start.span(type_start.pos + len(type_name)), type_name
                    )
                )

    def _parse_style(self, cursor: Cursor) -> tuple[str | None, Cursor]:
        """Parse an optional ', style' suffix and the closing '}'."""
        if self._at(cursor, _CLOSE):
            return None, cursor.advance()

        cursor = self._expect(cursor, _SEPARATOR, "',' or '}'")
        start = cursor.pos
        while not cursor.is_eof and cursor.current != _CLOSE:
            cursor = cursor.advance()
        if cursor.is_eof:
            raise MessageSyntaxError(ErrorTemplate.unexpected_eof(cursor.span(), "'}'"))

        style = cursor.source[start : cursor.pos].strip()
        return (style or None), cursor.advance()

    def _parse_offset(self, cursor: Cursor) -> tuple[int, Cursor]:
        """Parse an optional 'offset:N' plural prefix."""
        if not cursor.startswith(_OFFSET_PREFIX):
            return 0, cursor

        cursor = cursor.advance(len(_OFFSET_PREFIX)).skip_whitespace()
        start = cursor
        while (
            not cursor.is_eof
            and not cursor.current.isspace()
            and cursor.current not in _NAME_TERMINATORS
        ):
            cursor = cursor.advance()
        text = start.slice_to(cursor.pos)
        try:
            offset = int(text)
        except ValueError:
            raise MessageSyntaxError(
                ErrorTemplate.invalid_plural_offset(start.span(cursor.pos), text)
            ) from None
        return offset, cursor.skip_whitespace()

    def _parse_branches(
        self, cursor: Cursor, name: str, *, depth: int, plural: bool
    ) -> tuple[tuple[Branch, ...], Cursor]:
        """Parse 'key {message}' pairs up to and including the closing '}'."""
        branches: list[Branch] = []
        seen: set[str] = set()

        while True:
            cursor = cursor.skip_whitespace()
            if cursor.is_eof:
                raise MessageSyntaxError(
                    ErrorTemplate.unexpected_eof(cursor.span(), "branch or '}'")
                )
            if cursor.current == _CLOSE:
                break

            key_start = cursor
            key, cursor = self._parse_name(cursor, "branch key")
            key_span = key_start.span(cursor.pos)
            if key in seen:
                raise MessageSyntaxError(ErrorTemplate.duplicate_branch(key_span, key))

            branch = Branch(key, Message())
            if key.startswith(EXACT_BRANCH_PREFIX) and (not plural or branch.exact_value is None):
                raise MessageSyntaxError(ErrorTemplate.invalid_branch_key(key_span, key))

            cursor = self._expect(cursor.skip_whitespace(), _OPEN, "'{'")
            message, cursor = self._parse_message(cursor, depth=depth + 1, nested=True)
            cursor = self._expect(cursor, _CLOSE, "'}'")

            seen.add(key)
            branches.append(Branch(key, message))

        if not branches:
            raise MessageSyntaxError(ErrorTemplate.no_branches(cursor.span(), name))
        return tuple(branches), cursor.advance()

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @staticmethod
    def _at(cursor: Cursor, char: str) -> bool:
        return not cursor.is_eof and cursor.current == char

    @staticmethod
    def _expect(cursor: Cursor, char: str, expected: str) -> Cursor:
        """Consume char or raise a syntax error describing what was expected."""
        if cursor.is_eof:
            raise MessageSyntaxError(ErrorTemplate.unexpected_eof(cursor.span(), expected))
        if cursor.current != char:
            raise MessageSyntaxError(
                ErrorTemplate.expected_token(cursor.span(cursor.pos + 1), expected, cursor.current)
            )
        return cursor.advance()

    @staticmethod
    def _parse_name(cursor: Cursor, expected: str) -> tuple[str, Cursor]:
        """Parse a run of non-whitespace, non-syntax characters."""
        start = cursor
        while (
            not cursor.is_eof
            and not cursor.current.isspace()
            and cursor.current not in _NAME_TERMINATORS
        ):
            cursor = cursor.advance()

        name = start.slice_to(cursor.pos)
        if not name:
            if cursor.is_eof:
                raise MessageSyntaxError(ErrorTemplate.unexpected_eof(cursor.span(), expected))
            raise MessageSyntaxError(
                ErrorTemplate.expected_token(cursor.span(cursor.pos + 1), expected, cursor.current)
            )
        return name, cursor


_DEFAULT_PARSER = MessageParser()


def parse(source: str) -> Message:
    """Parse template text into a Message using the default parser.

    Args:
        source: Template text

    Returns:
        Parsed component tree

    Raises:
        MessageSyntaxError: If the template is malformed

    Example:
        >>> parse("{n, plural, one {# item} other {# items}}").components[0].name
        'n'
    """
    return _DEFAULT_PARSER.parse(source)
