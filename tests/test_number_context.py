"""Tests for NumberContext - tagged numeric values with plural offsets.

Covers kind inference, numeric string parsing, rejection of non-numeric and
non-finite input, offset arithmetic, and value-based equality and ordering.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icumessage.diagnostics import DiagnosticCode, InvalidNumberFormatError
from icumessage.enums import NumberKind
from icumessage.runtime import NumberContext
from tests.strategies import finite_numbers

# ============================================================================
# Construction
# ============================================================================


class TestNumberContextOf:
    """NumberContext.of() infers the kind from the Python type."""

    def test_int(self) -> None:
        ctx = NumberContext.of(42)
        assert ctx.kind is NumberKind.INT
        assert ctx.value == 42
        assert ctx.offset == 0

    def test_float(self) -> None:
        ctx = NumberContext.of(2.5)
        assert ctx.kind is NumberKind.FLOAT
        assert ctx.value == 2.5

    def test_decimal(self) -> None:
        ctx = NumberContext.of(Decimal("1.25"))
        assert ctx.kind is NumberKind.DECIMAL
        assert ctx.value == Decimal("1.25")

    def test_numeric_string_parses_to_decimal(self) -> None:
        """Visible fraction digits survive parsing."""
        ctx = NumberContext.of("1.50")
        assert ctx.kind is NumberKind.NUMERIC_STRING
        assert ctx.raw_value == "1.50"
        assert ctx.value == Decimal("1.50")
        assert str(ctx.value) == "1.50"

    def test_negative_numeric_string(self) -> None:
        assert NumberContext.of("-3").value == Decimal(-3)

    @pytest.mark.parametrize("text", ["many", "", "1,5", "12abc", "NaN", "Infinity", "-inf"])
    def test_unparsable_or_non_finite_string_rejected(self, text: str) -> None:
        with pytest.raises(InvalidNumberFormatError) as exc_info:
            NumberContext.of(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_NUMBER_FORMAT

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), Decimal("NaN")])
    def test_non_finite_numbers_rejected(self, value: object) -> None:
        with pytest.raises(InvalidNumberFormatError):
            NumberContext.of(value)

    @pytest.mark.parametrize("value", [True, False, None, [], object()])
    def test_non_numeric_types_rejected(self, value: object) -> None:
        """Booleans are not numbers even though bool subclasses int."""
        with pytest.raises(InvalidNumberFormatError):
            NumberContext.of(value)

    def test_kind_must_match_raw_type(self) -> None:
        with pytest.raises(InvalidNumberFormatError):
            NumberContext(NumberKind.INT, "5")

    def test_is_immutable(self) -> None:
        ctx = NumberContext.of(1)
        with pytest.raises(AttributeError):
            ctx.offset = 3  # type: ignore[misc]


# ============================================================================
# Offsets
# ============================================================================


class TestNumberContextOffset:
    """with_offset() returns a new context; the adjusted value is raw - offset."""

    def test_offset_subtracts(self) -> None:
        assert NumberContext.of(5).with_offset(1).value == 4

    def test_source_not_mutated(self) -> None:
        original = NumberContext.of(5)
        shifted = original.with_offset(2)
        assert original.value == 5
        assert original.offset == 0
        assert shifted.offset == 2

    def test_offsets_accumulate(self) -> None:
        ctx = NumberContext.of(10).with_offset(2).with_offset(3)
        assert ctx.offset == 5
        assert ctx.value == 5

    def test_numeric_string_offset(self) -> None:
        assert NumberContext.of("2.5").with_offset(1).value == Decimal("1.5")

    def test_float_with_decimal_offset_promotes_to_decimal(self) -> None:
        value = NumberContext.of(1.5).with_offset(Decimal("0.5")).value
        assert isinstance(value, Decimal)
        assert value == Decimal("1.0")

    def test_invalid_offset_rejected(self) -> None:
        with pytest.raises(InvalidNumberFormatError):
            NumberContext.of(1).with_offset(True)

    @given(
        n=finite_numbers,
        k=st.integers(min_value=-1000, max_value=1000),
    )
    def test_adjusted_value_is_raw_minus_offset(self, n: int | float | Decimal, k: int) -> None:
        """PROPERTY: of(n).with_offset(k).value == n - k."""
        event(f"type={type(n).__name__}")
        event("offset=0" if k == 0 else "offset!=0")
        assert NumberContext.of(n).with_offset(k).value == n - k


# ============================================================================
# Value semantics
# ============================================================================


class TestNumberContextComparison:
    """Equality, ordering and hashing use the adjusted value."""

    def test_equal_by_adjusted_value(self) -> None:
        assert NumberContext.of(5).with_offset(1) == NumberContext.of(4)

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(NumberContext.of(5).with_offset(1)) == hash(NumberContext.of(4))

    def test_numeric_string_equals_int(self) -> None:
        assert NumberContext.of("3") == NumberContext.of(3)
        assert len({NumberContext.of("3"), NumberContext.of(3)}) == 1

    def test_ordering(self) -> None:
        assert NumberContext.of(1) < NumberContext.of(2)
        assert NumberContext.of(Decimal("2.5")) > NumberContext.of(2)
        assert NumberContext.of(3).with_offset(2) <= NumberContext.of(1)

    def test_float_equals_matching_numeric_string(self) -> None:
        a = NumberContext.of(0.1)
        b = NumberContext.of("0.1")
        assert a == b
        assert hash(a) == hash(b)
        assert not a > b
        assert not b > a

    @given(a=finite_numbers, b=finite_numbers)
    def test_ordering_is_total(self, a: int | float | Decimal, b: int | float | Decimal) -> None:
        """PROPERTY: exactly one of <, ==, > holds for any two contexts."""
        left, right = NumberContext.of(a), NumberContext.of(b)
        outcomes = [left < right, left == right, left > right]
        event(f"outcome={outcomes.index(True)}")
        assert outcomes.count(True) == 1
        if left == right:
            assert hash(left) == hash(right)

    def test_not_equal_to_plain_number(self) -> None:
        assert NumberContext.of(1) != 1
