"""
Arbitrary-precision decimal numbers for layout arithmetic.

Every coordinate and size in relsvg is a Number. Values are immutable
wrappers around :class:`decimal.Decimal`; derived values (quotients,
products, powers) are rounded according to a :class:`Precision` policy,
which is a plain configuration value rather than a subclass.

Example:
    >>> third = Number(1).divide(3, 10)
    >>> third.to_full_string()
    '0.3333333333'
    >>> Number("2.0") == Number("2.00")
    True
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import (
    ROUND_DOWN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import NamedTuple, Union

from .constants import COMPARISON_PLACES, OPERATIONS_PRECISION, SVG_DECIMAL_PLACES
from .errors import DivisionByZeroError, NumberFormatError


# =============================================================================
# PRECISION POLICY
# =============================================================================


@dataclass(frozen=True)
class Precision:
    """
    Rounding policy applied to derived values.

    Attributes:
        operations: Significant digits kept by add/subtract/multiply/divide
        comparisons: Fractional digits used by fuzzy comparison
        svg_places: Fractional digits written to SVG attributes
        rounding: A ``decimal`` rounding mode
    """

    operations: int = OPERATIONS_PRECISION
    comparisons: int = COMPARISON_PLACES
    svg_places: int = SVG_DECIMAL_PLACES
    rounding: str = ROUND_HALF_UP

    def __post_init__(self) -> None:
        if self.operations < 1:
            raise ValueError(f"operations precision must be at least 1, got {self.operations}")
        if self.comparisons < 0 or self.svg_places < 0:
            raise ValueError("decimal places cannot be negative")

    def operations_context(self) -> Context:
        """Decimal context for arithmetic under this policy."""
        return Context(prec=self.operations, rounding=self.rounding)

    def with_operations(self, digits: int) -> "Precision":
        """Return a copy of this policy with a different operations precision."""
        return replace(self, operations=digits)


DEFAULT_PRECISION = Precision()

# Either a policy or a bare digit count
PrecisionLike = Union[Precision, int, None]


def _operations_context(precision: PrecisionLike) -> Context:
    if precision is None:
        return DEFAULT_PRECISION.operations_context()
    if isinstance(precision, Precision):
        return precision.operations_context()
    return DEFAULT_PRECISION.with_operations(precision).operations_context()


def _comparison_places(precision: PrecisionLike) -> int:
    if precision is None:
        return DEFAULT_PRECISION.comparisons
    if isinstance(precision, Precision):
        return precision.comparisons
    return precision


def _svg_places(precision: PrecisionLike) -> int:
    if precision is None:
        return DEFAULT_PRECISION.svg_places
    if isinstance(precision, Precision):
        return precision.svg_places
    return precision


def _strip_fraction(text: str) -> str:
    """Drop trailing fractional zeros (and a bare point) from a plain decimal string."""
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


# =============================================================================
# NUMBER
# =============================================================================


class QuotientRemainder(NamedTuple):
    """Result of :meth:`Number.divide_with_remainder`."""

    quotient: "Number"
    remainder: "Number"


NumberLike = Union["Number", Decimal, int, float, str]

_ARITHMETIC_TYPES = (Decimal, int, float)


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, Number):
        return value.decimal
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # Shortest repr, so 0.1 becomes 0.1 rather than its binary expansion
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise NumberFormatError(f"Not a decimal number: {value!r}") from None
    else:
        raise NumberFormatError(f"Cannot convert {type(value).__name__} to Number")
    if not result.is_finite():
        raise NumberFormatError(f"Numbers must be finite, got {value!r}")
    return result


class Number:
    """
    Immutable decimal value used for every coordinate and size.

    Equality and ordering compare numeric values, ignoring representation
    (``Number("2.0") == Number("2.00")``), and equal values hash equal.
    Arithmetic never mutates; every operation returns a new Number.
    """

    __slots__ = ("_value",)

    def __init__(self, value: NumberLike = 0):
        object.__setattr__(self, "_value", _to_decimal(value))

    def __setattr__(self, name, value):
        raise AttributeError("Number is immutable")

    @classmethod
    def value_of(cls, value: NumberLike) -> "Number":
        """Convert ``value`` to a Number, returning Numbers unchanged."""
        if isinstance(value, Number):
            return value
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> "Number":
        """Parse a string produced by :meth:`to_full_string` (or any decimal literal)."""
        return cls(text)

    @property
    def decimal(self) -> Decimal:
        """The underlying Decimal."""
        return self._value

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: NumberLike, precision: PrecisionLike = None) -> "Number":
        ctx = _operations_context(precision)
        return Number(ctx.add(self._value, _to_decimal(other)))

    def subtract(self, other: NumberLike, precision: PrecisionLike = None) -> "Number":
        ctx = _operations_context(precision)
        return Number(ctx.subtract(self._value, _to_decimal(other)))

    def multiply(self, other: NumberLike, precision: PrecisionLike = None) -> "Number":
        ctx = _operations_context(precision)
        return Number(ctx.multiply(self._value, _to_decimal(other)))

    def divide(self, other: NumberLike, precision: PrecisionLike = None) -> "Number":
        """
        Divide by ``other``, rounding half-up to the requested significant digits.

        Args:
            other: Divisor
            precision: Significant digits (int) or a Precision policy

        Returns:
            The rounded quotient

        Raises:
            DivisionByZeroError: If ``other`` is zero
        """
        divisor = _to_decimal(other)
        if divisor.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self.to_full_string()} by zero")
        ctx = _operations_context(precision)
        return Number(ctx.divide(self._value, divisor))

    def divide_with_remainder(self, other: NumberLike) -> QuotientRemainder:
        """Integral quotient (truncated toward zero) and remainder."""
        divisor = _to_decimal(other)
        if divisor.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self.to_full_string()} by zero")
        ctx = _operations_context(None)
        quotient = ctx.divide_int(self._value, divisor)
        remainder = ctx.subtract(self._value, ctx.multiply(quotient, divisor))
        return QuotientRemainder(Number(quotient), Number(remainder))

    def abs(self) -> "Number":
        return Number(self._value.copy_abs())

    def negate(self) -> "Number":
        return Number(self._value.copy_negate())

    def pow(self, n: int, precision: PrecisionLike = None) -> "Number":
        """Raise to the integer power ``n``."""
        if n == 0:
            return ONE
        if self._value.is_zero() and n < 0:
            raise DivisionByZeroError("Cannot raise zero to a negative power")
        ctx = _operations_context(precision)
        return Number(ctx.power(self._value, Decimal(n)))

    def sqrt(self, precision: PrecisionLike = None) -> "Number":
        if self._value < 0:
            raise ValueError(f"Cannot take the square root of {self.to_full_string()}")
        ctx = _operations_context(precision)
        return Number(ctx.sqrt(self._value))

    def round(self, places: int) -> "Number":
        """Round half-up to ``places`` fractional digits."""
        if places < 0:
            raise ValueError(f"places must be >= 0, got {places}")
        return Number(self._quantize(places, ROUND_HALF_UP))

    def _quantize(self, places: int, rounding: str) -> Decimal:
        exponent = Decimal((0, (1,), -places))
        with localcontext() as ctx:
            ctx.prec = max(OPERATIONS_PRECISION, self._value.adjusted() + places + 2)
            return self._value.quantize(exponent, rounding=rounding)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: NumberLike) -> int:
        """Exact numeric ordering: -1, 0 or 1."""
        theirs = _to_decimal(other)
        return (self._value > theirs) - (self._value < theirs)

    def compare_to_fuzzy(self, other: NumberLike, precision: PrecisionLike = None) -> int:
        """
        Compare after rounding both operands to a shared number of fractional digits.

        Chained division and multiplication can leave two derivations of the
        same value differing in the last few digits; rounding both sides
        first makes them compare equal.

        Args:
            other: Value to compare against
            precision: Fractional digits (int) or a Precision policy whose
                ``comparisons`` field is used

        Returns:
            -1, 0 or 1
        """
        places = _comparison_places(precision)
        mine = self._quantize(places, ROUND_HALF_UP)
        theirs = Number.value_of(other)._quantize(places, ROUND_HALF_UP)
        return (mine > theirs) - (mine < theirs)

    def is_close_to(self, other: NumberLike, precision: PrecisionLike = None) -> bool:
        return self.compare_to_fuzzy(other, precision) == 0

    def is_integer_value(self) -> bool:
        return self._value == self._value.to_integral_value()

    def is_zero(self) -> bool:
        return self._value.is_zero()

    # -------------------------------------------------------------------------
    # String forms
    # -------------------------------------------------------------------------

    def to_full_string(self) -> str:
        """Plain notation with no exponent and no trailing zeros; parses back to an equal value."""
        return _strip_fraction(format(self._value, "f"))

    def to_fixed_decimal_string(self, n: int) -> str:
        """Exactly ``n`` fractional digits, zero-padded or truncated toward zero."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return format(self._quantize(n, ROUND_DOWN), "f")

    def to_svg(self, precision: PrecisionLike = None) -> str:
        """Attribute form: an integer when integral, else at most ``svg_places`` fractional digits."""
        if self.is_integer_value():
            return str(int(self._value))
        places = _svg_places(precision)
        return _strip_fraction(format(self._quantize(places, ROUND_HALF_UP), "f"))

    def __str__(self) -> str:
        return self.to_full_string()

    def __repr__(self) -> str:
        return f"Number('{self.to_full_string()}')"

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __bool__(self) -> bool:
        return not self._value.is_zero()

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self._value == other._value
        if isinstance(other, _ARITHMETIC_TYPES):
            return self.compare_to(other) == 0
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other: object) -> "Number":
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Number":
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "Number":
        if not isinstance(other, _ARITHMETIC_TYPES):
            return NotImplemented
        return Number(other).subtract(self)

    def __mul__(self, other: object) -> "Number":
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Number":
        if not isinstance(other, (Number, *_ARITHMETIC_TYPES)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "Number":
        if not isinstance(other, _ARITHMETIC_TYPES):
            return NotImplemented
        return Number(other).divide(self)

    def __neg__(self) -> "Number":
        return self.negate()

    def __abs__(self) -> "Number":
        return self.abs()


ZERO = Number(0)
ONE = Number(1)
TWO = Number(2)
