"""Numeric subject of plural classification and '#' substitution.

A NumberContext tags a numeric value with its representation (int, float,
Decimal, or numeric string) and carries an additive offset. The
offset-adjusted value is what plural rules classify and what '#' renders.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from icumessage.diagnostics import ErrorTemplate, InvalidNumberFormatError
from icumessage.enums import NumberKind

__all__ = ["NumberContext", "NumericValue"]

type NumericValue = int | float | Decimal


def _to_decimal(value: NumericValue) -> Decimal:
    # str() keeps the shortest float repr: Decimal(str(0.1)) == Decimal("0.1")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _subtract(value: NumericValue, offset: NumericValue) -> NumericValue:
    """Subtract offset from value, promoting to Decimal when mixing float and Decimal."""
    if isinstance(value, Decimal) or isinstance(offset, Decimal):
        if isinstance(value, float) or isinstance(offset, float):
            return _to_decimal(value) - _to_decimal(offset)
    return value - offset


def _add(left: NumericValue, right: NumericValue) -> NumericValue:
    if isinstance(left, Decimal) or isinstance(right, Decimal):
        if isinstance(left, float) or isinstance(right, float):
            return _to_decimal(left) + _to_decimal(right)
    return left + right


def _check_numeric(value: object) -> NumericValue:
    """Validate a numeric operand (offsets and raw values).

    Raises:
        InvalidNumberFormatError: For bools, non-numbers, NaN and infinities
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidNumberFormatError(ErrorTemplate.invalid_number_format(None, None, value))
    if isinstance(value, float | Decimal) and not _to_decimal(value).is_finite():
        raise InvalidNumberFormatError(ErrorTemplate.invalid_number_format(None, None, value))
    return value


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class NumberContext:
    """Tagged numeric value with an additive offset.

    Use NumberContext.of() to infer the kind from a Python value. Contexts are
    immutable: with_offset() returns a new context.

    Equality, ordering and hashing use the offset-adjusted value, so
    NumberContext.of(5).with_offset(1) == NumberContext.of(4).

    Attributes:
        kind: Representation of the raw value
        raw_value: Value as supplied by the caller
        offset: Amount subtracted from the raw value
        magnitude: Raw value as a number (numeric strings parsed to Decimal)

    Examples:
        >>> NumberContext.of(5).with_offset(1).value
        4
        >>> NumberContext.of("1.50").value
        Decimal('1.50')
        >>> NumberContext.of("many")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        InvalidNumberFormatError: Value 'many' has an invalid number format
    """

    kind: NumberKind
    raw_value: int | float | Decimal | str
    offset: NumericValue = 0
    magnitude: NumericValue = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Parse numeric strings and validate the raw value and offset.

        Raises:
            InvalidNumberFormatError: If the value is not a finite number of the
                declared kind, or a numeric string does not parse
        """
        match self.kind:
            case NumberKind.NUMERIC_STRING:
                magnitude = self._parse_numeric_string(self.raw_value)
            case NumberKind.INT if isinstance(self.raw_value, int):
                magnitude = _check_numeric(self.raw_value)
            case NumberKind.FLOAT if isinstance(self.raw_value, float):
                magnitude = _check_numeric(self.raw_value)
            case NumberKind.DECIMAL if isinstance(self.raw_value, Decimal):
                magnitude = _check_numeric(self.raw_value)
            case _:
                raise InvalidNumberFormatError(
                    ErrorTemplate.invalid_number_format(None, None, self.raw_value)
                )
        _check_numeric(self.offset)
        object.__setattr__(self, "magnitude", magnitude)

    @staticmethod
    def _parse_numeric_string(raw: object) -> Decimal:
        if not isinstance(raw, str):
            raise InvalidNumberFormatError(ErrorTemplate.invalid_number_format(None, None, raw))
        try:
            parsed = Decimal(raw)
        except InvalidOperation:
            raise InvalidNumberFormatError(
                ErrorTemplate.invalid_number_format(None, None, raw)
            ) from None
        if not parsed.is_finite():
            raise InvalidNumberFormatError(ErrorTemplate.invalid_number_format(None, None, raw))
        return parsed

    @classmethod
    def of(cls, value: object) -> NumberContext:
        """Create a context, inferring the kind from the value's type.

        Args:
            value: int, float, Decimal, or numeric string ("42", "-1.5")

        Returns:
            NumberContext with zero offset

        Raises:
            InvalidNumberFormatError: For bools, other types, non-finite
                values, and strings that do not parse as numbers
        """
        match value:
            case bool():
                raise InvalidNumberFormatError(
                    ErrorTemplate.invalid_number_format(None, None, value)
                )
            case int():
                return cls(NumberKind.INT, value)
            case float():
                return cls(NumberKind.FLOAT, value)
            case Decimal():
                return cls(NumberKind.DECIMAL, value)
            case str():
                return cls(NumberKind.NUMERIC_STRING, value)
            case _:
                raise InvalidNumberFormatError(
                    ErrorTemplate.invalid_number_format(None, None, value)
                )

    def with_offset(self, offset: NumericValue) -> NumberContext:
        """Return a new context whose offset is increased by offset.

        The receiver is not modified.
        """
        return NumberContext(self.kind, self.raw_value, _add(self.offset, _check_numeric(offset)))

    @property
    def value(self) -> NumericValue:
        """Offset-adjusted value used for classification and rendering."""
        if not self.offset:
            return self.magnitude
        return _subtract(self.magnitude, self.offset)

    @property
    def _key(self) -> Decimal:
        # Floats compare by shortest repr, so of(0.1) == of("0.1")
        return _to_decimal(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberContext):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NumberContext):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)
