"""Tests for MessageFormatter rendering semantics.

Uses deterministic stub collaborators (tests.helpers.collaborators) so the
assertions pin down formatter behavior independently of CLDR data:

- '#' substitution and the "'#" escape
- per-component argument dispatch and type errors
- plural exact-match / category / 'other' resolution with offsets
- select resolution and numeric-subject scoping
- depth limiting
"""

from __future__ import annotations

from datetime import date, datetime, time

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icumessage import (
    DepthLimitExceededError,
    InvalidNumberFormatError,
    MessageSyntaxError,
    MissingDefaultBranchError,
    UndefinedArgumentError,
    UnsupportedArgumentTypeError,
)
from icumessage.runtime import MessageEnvironment, MessageFormatter, NumberContext
from icumessage.syntax import Branch, Message, SelectFormat, Text
from tests.helpers.collaborators import (
    EnglishLikePluralizer,
    FixedPluralizer,
    StubProvider,
    stub_formatter,
)
from tests.strategies import plain_text


class Token:
    def __str__(self) -> str:
        return "tok"


def _nested_selects(levels: int) -> Message:
    message = Message.of("x")
    for _ in range(levels):
        message = Message.of(SelectFormat("g", (Branch("other", message),)))
    return message


# ============================================================================
# Text and '#'
# ============================================================================


class TestTextRendering:
    """Literal text, '#' substitution and the "'#" escape."""

    def test_plain_text(self) -> None:
        assert stub_formatter().format(Message.of("plain"), MessageEnvironment()) == "plain"

    def test_empty_message_renders_empty_string(self) -> None:
        assert stub_formatter().format(Message(), MessageEnvironment()) == ""

    def test_hash_replaced_by_current_number(self) -> None:
        env = MessageEnvironment().with_number(NumberContext.of(5))
        assert stub_formatter().format(Message.of("Value: #"), env) == "Value: 5"

    def test_apostrophe_not_before_hash_is_not_an_escape(self) -> None:
        env = MessageEnvironment().with_number(NumberContext.of(3))
        assert stub_formatter().format(Message.of("It's a #"), env) == "It's a 3"

    def test_escaped_hash_renders_literal_hash(self) -> None:
        env = MessageEnvironment().with_number(NumberContext.of(3))
        assert stub_formatter().format(Message.of("Price '# #"), env) == "Price # 3"

    def test_without_number_text_passes_through(self) -> None:
        text = "Value: # and '#"
        assert stub_formatter().format(Message.of(text), MessageEnvironment()) == text

    def test_hash_uses_adjusted_value(self) -> None:
        env = MessageEnvironment().with_number(NumberContext.of(5).with_offset(2))
        assert stub_formatter().format(Message.of("#"), env) == "3"

    def test_number_formatted_once_per_text(self) -> None:
        formatter = stub_formatter()
        env = MessageEnvironment().with_number(NumberContext.of(7))
        assert formatter.format(Message.of("# + # = 2 x #"), env) == "7 + 7 = 2 x 7"
        assert formatter.provider.number_calls == [(7, None)]  # type: ignore[attr-defined]

    @given(text=plain_text, n=st.integers())
    def test_text_without_hash_is_identity(self, text: str, n: int) -> None:
        """PROPERTY: Text without '#' renders unchanged regardless of environment."""
        event("empty" if not text else "non-empty")
        formatter = stub_formatter()
        message = Message((Text(text),))
        assert formatter.format(message, MessageEnvironment()) == text
        env = MessageEnvironment.of({"n": n}).with_number(NumberContext.of(n))
        assert formatter.format(message, env) == text


# ============================================================================
# Format / NumberFormat / DateFormat
# ============================================================================


class TestArgumentRendering:
    """Format renders each argument kind through the right channel."""

    def test_number_uses_provider_default_style(self) -> None:
        formatter = stub_formatter()
        assert formatter.format("{n}", {"n": 3}) == "3"
        assert formatter.provider.number_calls == [(3, None)]  # type: ignore[attr-defined]

    def test_date(self) -> None:
        assert stub_formatter().format("{d}", {"d": date(2025, 10, 27)}) == "D(2025-10-27|None)"

    def test_datetime_renders_as_date(self) -> None:
        result = stub_formatter().format("{d}", {"d": datetime(2025, 10, 27, 14, 30)})
        assert result == "D(2025-10-27T14:30:00|None)"

    def test_time_renders_as_time(self) -> None:
        assert stub_formatter().format("{t}", {"t": time(14, 30)}) == "T(14:30:00|None)"

    def test_text(self) -> None:
        assert stub_formatter().format("Hi {name}", {"name": "Ana"}) == "Hi Ana"

    def test_raw_values_use_str(self) -> None:
        assert stub_formatter().format("{v}", {"v": Token()}) == "tok"

    def test_bool_renders_lowercase(self) -> None:
        assert stub_formatter().format("{a}/{b}", {"a": True, "b": False}) == "true/false"

    def test_undefined_argument(self) -> None:
        with pytest.raises(UndefinedArgumentError, match='Argument "name" is not defined'):
            stub_formatter().format("Hi {name}", {})


class TestNumberFormatRendering:
    """NumberFormat requires a NUMBER argument."""

    def test_style_is_passed_to_provider(self) -> None:
        assert stub_formatter().format("{r, number, percent}", {"r": 0.25}) == "0.25|percent"

    def test_no_style(self) -> None:
        assert stub_formatter().format("{r, number}", {"r": 12}) == "12"

    @pytest.mark.parametrize("value", ["12", True, date(2025, 1, 1)])
    def test_non_number_rejected(self, value: object) -> None:
        with pytest.raises(UnsupportedArgumentTypeError) as exc_info:
            stub_formatter().format("{r, number}", {"r": value})
        assert exc_info.value.argument_name == "r"
        assert exc_info.value.component == "NumberFormat"
        assert "is unsupported by the NumberFormat component" in str(exc_info.value)


class TestDateFormatRendering:
    """DateFormat requires a DATETIME argument with the needed part."""

    def test_date_with_style(self) -> None:
        result = stub_formatter().format("{d, date, short}", {"d": date(2025, 10, 27)})
        assert result == "D(2025-10-27|short)"

    def test_time_from_datetime(self) -> None:
        result = stub_formatter().format("{d, time, HH:mm}", {"d": datetime(2025, 10, 27, 14, 30)})
        assert result == "T(2025-10-27T14:30:00|HH:mm)"

    def test_time_value_as_time(self) -> None:
        assert stub_formatter().format("{t, time}", {"t": time(9, 5)}) == "T(09:05:00|None)"

    @pytest.mark.parametrize(
        ("template", "value"),
        [
            ("{d, time}", date(2025, 10, 27)),
            ("{d, date}", time(14, 30)),
            ("{d, date}", "2025-10-27"),
            ("{d, time}", 1700000000),
        ],
    )
    def test_incompatible_values_rejected(self, template: str, value: object) -> None:
        with pytest.raises(UnsupportedArgumentTypeError) as exc_info:
            stub_formatter().format(template, {"d": value})
        assert exc_info.value.component == "DateFormat"


class TestUndefinedArguments:
    """Every component kind reports the missing argument and itself."""

    @pytest.mark.parametrize(
        ("template", "component"),
        [
            ("{x}", "Format"),
            ("{x, number}", "NumberFormat"),
            ("{x, date}", "DateFormat"),
            ("{x, plural, other {#}}", "PluralFormat"),
            ("{x, select, other {y}}", "SelectFormat"),
        ],
    )
    def test_component_named_in_error(self, template: str, component: str) -> None:
        with pytest.raises(UndefinedArgumentError) as exc_info:
            stub_formatter().format(template, {"unrelated": 1})
        assert exc_info.value.argument_name == "x"
        assert exc_info.value.component == component

    def test_failure_returns_no_partial_output(self) -> None:
        with pytest.raises(UndefinedArgumentError):
            stub_formatter().format("{a} then {missing}", {"a": 1})


# ============================================================================
# PluralFormat
# ============================================================================

_ITEMS = "{n, plural, =0 {no items} one {one item} other {# items}}"


class TestPluralRendering:
    """Exact match, then category, then 'other'."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(0, "no items"), (1, "one item"), (5, "5 items"), (2.5, "2.5 items")],
    )
    def test_branch_selection(self, n: object, expected: str) -> None:
        assert stub_formatter().format(_ITEMS, {"n": n}) == expected

    def test_exact_match_before_category(self) -> None:
        template = "{n, plural, =1 {exactly one} one {category one} other {many}}"
        assert stub_formatter().format(template, {"n": 1}) == "exactly one"

    def test_exact_match_skips_pluralizer(self) -> None:
        pluralizer = EnglishLikePluralizer()
        formatter = MessageFormatter(StubProvider(), pluralizer)
        formatter.format(_ITEMS, {"n": 0})
        assert pluralizer.seen == []

    def test_offset_applied_to_hash(self) -> None:
        assert stub_formatter().format("{n, plural, offset:1 other {#}}", {"n": 5}) == "4"

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "just you"), (2, "you and 1 other"), (4, "you and 3 others")],
    )
    def test_exact_and_category_use_adjusted_value(self, n: int, expected: str) -> None:
        template = (
            "{n, plural, offset:1 =0 {just you} one {you and # other} other {you and # others}}"
        )
        assert stub_formatter().format(template, {"n": n}) == expected

    def test_pluralizer_sees_adjusted_value(self) -> None:
        pluralizer = EnglishLikePluralizer()
        formatter = MessageFormatter(StubProvider(), pluralizer)
        formatter.format("{n, plural, offset:1 other {#}}", {"n": 2})
        assert pluralizer.seen == [1]

    def test_numeric_string_selector(self) -> None:
        assert stub_formatter().format(_ITEMS, {"n": "3"}) == "3 items"

    def test_float_exact_key(self) -> None:
        template = "{n, plural, =0.1 {a tenth} other {#}}"
        assert stub_formatter().format(template, {"n": 0.1}) == "a tenth"

    @pytest.mark.parametrize("value", ["many", True, date(2025, 1, 1), Token()])
    def test_non_numeric_selector_rejected(self, value: object) -> None:
        with pytest.raises(InvalidNumberFormatError) as exc_info:
            stub_formatter().format(_ITEMS, {"n": value})
        assert exc_info.value.argument_name == "n"
        assert exc_info.value.component == "PluralFormat"

    def test_category_without_other(self) -> None:
        formatter = MessageFormatter(StubProvider(), FixedPluralizer("few"))
        assert formatter.format("{n, plural, few {some}}", {"n": 3}) == "some"

    def test_falls_back_to_other(self) -> None:
        formatter = MessageFormatter(StubProvider(), FixedPluralizer("few"))
        assert formatter.format("{n, plural, one {x} other {y}}", {"n": 3}) == "y"

    def test_missing_other_branch(self) -> None:
        with pytest.raises(MissingDefaultBranchError) as exc_info:
            stub_formatter().format("{n, plural, one {x}}", {"n": 5})
        assert exc_info.value.argument_name == "n"
        assert exc_info.value.component == "PluralFormat"
        assert 'is missing a default "other" keyword' in str(exc_info.value)

    def test_inner_plural_shadows_hash(self) -> None:
        template = "{a, plural, other {# and {b, plural, other {#}}}}"
        assert stub_formatter().format(template, {"a": 2, "b": 3}) == "2 and 3"

    def test_arguments_visible_inside_branch(self) -> None:
        template = "{n, plural, one {{who} has # cat} other {{who} has # cats}}"
        assert stub_formatter().format(template, {"n": 2, "who": "Ana"}) == "Ana has 2 cats"

    @given(n=st.integers(min_value=-(10**9), max_value=10**9), k=st.integers(0, 10))
    def test_hash_renders_offset_adjusted_value(self, n: int, k: int) -> None:
        """PROPERTY: '#' inside a plural branch renders n - offset."""
        template = "{n, plural, offset:" + str(k) + " other {#}}"
        assert stub_formatter().format(template, {"n": n}) == str(n - k)


# ============================================================================
# SelectFormat
# ============================================================================

_PRONOUN = "{g, select, male {he} other {they}}"


class TestSelectRendering:
    """Exact string match, else 'other'."""

    def test_exact_match(self) -> None:
        assert stub_formatter().format(_PRONOUN, {"g": "male"}) == "he"

    def test_falls_back_to_other(self) -> None:
        assert stub_formatter().format(_PRONOUN, {"g": "female"}) == "they"

    def test_missing_other_branch(self) -> None:
        with pytest.raises(MissingDefaultBranchError) as exc_info:
            stub_formatter().format("{g, select, male {he}}", {"g": "female"})
        assert exc_info.value.component == "SelectFormat"

    def test_bool_selector(self) -> None:
        template = "{flag, select, true {on} false {off} other {?}}"
        assert stub_formatter().format(template, {"flag": True}) == "on"
        assert stub_formatter().format(template, {"flag": False}) == "off"

    def test_number_selector_uses_string_form(self) -> None:
        assert stub_formatter().format("{n, select, 1 {one} other {x}}", {"n": 1}) == "one"

    @pytest.mark.parametrize(
        ("n", "expected"), [(1.0, "one"), (-2.0, "minus two"), (1.5, "one and a half"), (2.5, "x")]
    )
    def test_float_selector(self, n: float, expected: str) -> None:
        """Integral floats select the integer key; other floats use their repr."""
        template = "{n, select, 1 {one} -2 {minus two} 1.5 {one and a half} other {x}}"
        assert stub_formatter().format(template, {"n": n}) == expected

    def test_select_clears_numeric_subject(self) -> None:
        template = "{n, plural, other {# {g, select, other {#}}}}"
        assert stub_formatter().format(template, {"n": 3, "g": "x"}) == "3 #"


# ============================================================================
# Entry points and limits
# ============================================================================


class TestFormatEntryPoints:
    """format() accepts trees or template text, environments or mappings."""

    def test_message_with_mapping(self) -> None:
        message = Message.of("Hi ", SelectFormat("g", (Branch("other", Message.of("you")),)))
        assert stub_formatter().format(message, {"g": "x"}) == "Hi you"

    def test_template_without_arguments(self) -> None:
        assert stub_formatter().format("static") == "static"

    def test_environment_instance_used_as_is(self) -> None:
        env = MessageEnvironment.of({"n": 1}).with_number(NumberContext.of(9))
        assert stub_formatter().format("{n}:#", env) == "1:9"

    def test_syntax_errors_propagate(self) -> None:
        with pytest.raises(MessageSyntaxError):
            stub_formatter().format("{n, plural, other {#}", {"n": 1})

    def test_none_argument_rejected(self) -> None:
        with pytest.raises(UnsupportedArgumentTypeError):
            stub_formatter().format("{n}", {"n": None})


class TestDepthLimit:
    """Nesting beyond max_depth raises DepthLimitExceededError."""

    def test_within_limit(self) -> None:
        assert stub_formatter(max_depth=3).format(_nested_selects(2), {"g": "x"}) == "x"

    def test_exceeding_limit(self) -> None:
        with pytest.raises(DepthLimitExceededError):
            stub_formatter(max_depth=3).format(_nested_selects(3), {"g": "x"})

    def test_guard_is_per_call(self) -> None:
        formatter = stub_formatter(max_depth=3)
        with pytest.raises(DepthLimitExceededError):
            formatter.format(_nested_selects(3), {"g": "x"})
        assert formatter.format(_nested_selects(2), {"g": "x"}) == "x"

    def test_default_limit_handles_deep_trees(self) -> None:
        assert stub_formatter().format(_nested_selects(50), {"g": "x"}) == "x"
