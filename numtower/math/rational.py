"""
Rational type: an exact fraction of two unbounded integers.

Rationals are immutable and are *not* reduced implicitly; arithmetic uses the
plain cross-multiplication formulas and returns whatever numerator and
denominator fall out. ``simplify`` produces the canonical form. Zero
denominators are never an error: ``n/0`` is an infinity (sign of ``n``) and
``0/0`` is NaN, and they flow through arithmetic like IEEE sentinels.

Ordering is total: NaN < -inf < finite values < +inf.
"""

from __future__ import annotations

import decimal
import fractions
import math
import operator
import sys
from decimal import Decimal
from typing import Any, Callable, ClassVar, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.config import get_settings
from ..core.errors import (
    DivideByZeroError,
    NumericError,
    NumericOverflowError,
    UnsupportedConversionError,
)
from ..core.logging import get_context_logger, get_logger
from .floating_point import decompose_decimal, decompose_double, decompose_single, fit_decimal128
from .helpers import (
    FLOAT32_EPSILON,
    digit_count,
    gcd,
    sign,
    ten_pow,
    truncate_divide,
    truncate_remainder,
    wrap_to_width,
)
from .parsing import NumberFormat, NumberStyles, parse_fraction
from .result import Err, Ok, Result
from .value import ExactNumber, TypePrecedence

logger = get_logger(__name__)
parse_logger = get_context_logger(__name__, operation="parse")

_INTEGRAL_TARGETS = (
    np.int8,
    np.uint8,
    np.int16,
    np.uint16,
    np.int32,
    np.uint32,
    np.int64,
    np.uint64,
    np.intp,
    np.uintp,
)


class Rational(BaseModel, ExactNumber):
    """
    Rational represents an exact number as numerator/denominator.

    Examples:
        >>> Rational(3, 4)
        Rational(3, 4)
        >>> Rational(6, 8) == Rational(3, 4)
        True
        >>> Rational(6, 8).simplify()
        Rational(3, 4)
        >>> Rational(1, 0).is_positive_infinity()
        True
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(description="The numerator")
    denominator: int = Field(description="The denominator")

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.RATIONAL

    ZERO: ClassVar[Rational]
    ONE: ClassVar[Rational]
    NEGATIVE_ONE: ClassVar[Rational]
    POSITIVE_INFINITY: ClassVar[Rational]
    NEGATIVE_INFINITY: ClassVar[Rational]
    NAN: ClassVar[Rational]
    MIN_VALUE: ClassVar[Rational]
    MAX_VALUE: ClassVar[Rational]

    def __init__(self, numerator: int = 0, denominator: int = 1, **kwargs):
        """
        Create a Rational without reducing it.

        Args:
            numerator: Integer numerator
            denominator: Integer denominator (zero is allowed)
        """
        super().__init__(
            numerator=operator.index(numerator),
            denominator=operator.index(denominator),
            **kwargs,
        )

    def as_tuple(self) -> tuple[int, int]:
        return self.numerator, self.denominator

    # Predicates

    def is_finite(self) -> bool:
        return self.denominator != 0

    def is_infinity(self) -> bool:
        return self.denominator == 0 and self.numerator != 0

    def is_positive_infinity(self) -> bool:
        return self.denominator == 0 and self.numerator > 0

    def is_negative_infinity(self) -> bool:
        return self.denominator == 0 and self.numerator < 0

    def is_nan(self) -> bool:
        return self.denominator == 0 and self.numerator == 0

    def is_zero(self) -> bool:
        return self.numerator == 0 and self.denominator != 0

    def is_integer(self) -> bool:
        """True for any finite value with no fractional part, reduced or not."""
        return self.denominator != 0 and self.numerator % self.denominator == 0

    def is_even_integer(self) -> bool:
        return self.is_integer() and (self.numerator // self.denominator) % 2 == 0

    def is_odd_integer(self) -> bool:
        return self.is_integer() and (self.numerator // self.denominator) % 2 != 0

    def sign(self) -> int:
        """-1, 0 or 1; NaN has sign 0."""
        if self.denominator == 0:
            return sign(self.numerator)
        return sign(self.numerator) * sign(self.denominator)

    def is_negative(self) -> bool:
        return self.sign() < 0

    def is_positive(self) -> bool:
        return self.sign() > 0

    # Canonical form

    def simplify(self) -> Rational:
        """
        Reduce to canonical form.

        Zero denominators collapse to NaN or a unit infinity, zero collapses
        to 0/1, and the sign always ends up on the numerator.
        """
        numerator, denominator = self.numerator, self.denominator

        if denominator == 0:
            if numerator == 0:
                return Rational.NAN
            return Rational.POSITIVE_INFINITY if numerator > 0 else Rational.NEGATIVE_INFINITY

        if numerator == 0:
            return Rational.ZERO

        if numerator == denominator:
            return Rational.ONE

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        if numerator in (1, -1) or denominator == 1:
            return Rational(numerator, denominator)

        divisor = gcd(numerator, denominator)
        if divisor != 1:
            numerator //= divisor
            denominator //= divisor
        return Rational(numerator, denominator)

    def is_simplified(self) -> bool:
        return self.as_tuple() == self.simplify().as_tuple()

    def reciprocal(self) -> Rational:
        """Swap numerator and denominator; the reciprocal of zero is an infinity."""
        return Rational(self.denominator, self.numerator)

    # Arithmetic (results are not reduced)

    def add(self, other: Rational) -> Rational:
        # a/b + c/d = (ad + bc)/(bd)
        return Rational(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: Rational) -> Rational:
        return Rational(
            self.numerator * other.denominator - self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: Rational) -> Rational:
        return Rational(self.numerator * other.numerator, self.denominator * other.denominator)

    def divide(self, other: Rational) -> Rational:
        # (a/b) / (c/d) = (ad)/(bc)
        return Rational(self.numerator * other.denominator, self.denominator * other.numerator)

    def mod(self, other: Rational) -> Rational:
        """
        Remainder of ``self / other`` truncated toward zero.

        ``(ad mod bc)/bd`` where the remainder takes the sign of ``ad``.
        Any zero divisor or non-finite operand yields NaN.
        """
        scaled = self.numerator * other.denominator
        divisor = self.denominator * other.numerator
        denominator = self.denominator * other.denominator
        if divisor == 0 or denominator == 0:
            return Rational.NAN
        return Rational(truncate_remainder(scaled, divisor), denominator)

    def negate(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def abs(self) -> Rational:
        return Rational(abs(self.numerator), abs(self.denominator))

    def increment(self) -> Rational:
        return self.add(Rational.ONE)

    def decrement(self) -> Rational:
        return self.subtract(Rational.ONE)

    @classmethod
    def max_magnitude(cls, x: Rational, y: Rational) -> Rational:
        ax, ay = x.abs(), y.abs()
        if ax > ay:
            return x
        if ax == ay:
            return y if x.is_negative() else x
        return y

    @classmethod
    def min_magnitude(cls, x: Rational, y: Rational) -> Rational:
        ax, ay = x.abs(), y.abs()
        if ax < ay:
            return x
        if ax == ay:
            return x if x.is_negative() else y
        return y

    def promote(self, other: ExactNumber) -> ExactNumber:
        """Rational is the top of the tower; it never promotes."""
        return self

    def _coerce(self, other: Any) -> Optional[Rational]:
        """Convert an arithmetic operand to Rational, or None if unsupported."""
        from .big_decimal import BigDecimal

        if isinstance(other, Rational):
            return other
        if isinstance(other, BigDecimal):
            _, promoted = self.promote_types(other)
            return promoted
        if isinstance(other, (int, np.integer)):
            return Rational(int(other), 1)
        if isinstance(other, np.float32):
            return Rational.from_float32(other)
        if isinstance(other, (float, np.floating)):
            return Rational.from_double(float(other))
        if isinstance(other, Decimal):
            return Rational.from_decimal(other)
        return None

    def __add__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return self.add(other_rational)

    def __radd__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return other_rational.add(self)

    def __sub__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return self.subtract(other_rational)

    def __rsub__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return other_rational.subtract(self)

    def __mul__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return self.multiply(other_rational)

    def __rmul__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return other_rational.multiply(self)

    def __truediv__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return self.divide(other_rational)

    def __rtruediv__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return other_rational.divide(self)

    def __mod__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return self.mod(other_rational)

    def __rmod__(self, other: Any) -> Rational:
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        return other_rational.mod(self)

    def __pow__(self, exponent: Any) -> Rational:
        """Integer powers only; a negative power of zero is an infinity."""
        if isinstance(exponent, Rational):
            if exponent.denominator != 1:
                return NotImplemented
            exponent = exponent.numerator
        try:
            power = operator.index(exponent)
        except TypeError:
            return NotImplemented
        if power >= 0:
            return Rational(self.numerator**power, self.denominator**power)
        return Rational(self.denominator ** (-power), self.numerator ** (-power))

    def __neg__(self) -> Rational:
        return self.negate()

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Ordering and equality

    def _rank(self) -> int:
        if self.is_nan():
            return 0
        if self.is_negative_infinity():
            return 1
        if self.is_positive_infinity():
            return 3
        return 2

    def _compare_rational(self, other: Rational) -> int:
        rank, other_rank = self._rank(), other._rank()
        if rank != other_rank or rank != 2:
            return sign(rank - other_rank)

        # cross multiplication, corrected for negative denominators
        left = self.numerator * other.denominator
        right = self.denominator * other.numerator
        return sign(left - right) * sign(self.denominator * other.denominator)

    def compare_to(self, other: Any) -> int:
        """
        Total-order comparison.

        Foreign operands are converted to Rational first; operands that cannot
        be converted sort before every Rational.
        """
        if isinstance(other, Rational):
            return self._compare_rational(other)
        converted = Rational.try_convert_from(other)
        if converted.is_error():
            return 1
        return self._compare_rational(converted.value)

    def equals_float(self, value: float, tolerance: Optional[float] = None) -> bool:
        """
        Tolerance-based equality against a binary float.

        NaN and the infinities match by predicate; finite values match when
        their distance is within ``tolerance`` (default: smallest subnormal).
        """
        if isinstance(value, np.float32):
            if tolerance is None:
                tolerance = FLOAT32_EPSILON
            mine = float(self.to_float32())
        else:
            if tolerance is None:
                tolerance = get_settings().DOUBLE_TOLERANCE
            mine = self.to_float()
        value = float(value)

        if math.isnan(value):
            return self.is_nan()
        if math.isinf(value):
            return self.is_positive_infinity() if value > 0 else self.is_negative_infinity()
        if not self.is_finite():
            return False
        return abs(mine - value) <= tolerance

    def __eq__(self, other: Any) -> bool:
        from .big_decimal import BigDecimal

        if isinstance(other, Rational):
            return self._compare_rational(other) == 0
        if isinstance(other, BigDecimal):
            return self._compare_rational(other.to_rational()) == 0
        if isinstance(other, (float, np.floating)):
            return self.equals_float(other)
        if isinstance(other, (int, np.integer)):
            return self.is_finite() and self.numerator == self.denominator * int(other)
        if isinstance(other, Decimal):
            return self._compare_rational(Rational.from_decimal(other)) == 0
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        """Numeric hash, shared with int, Fraction, Decimal and float of the same value."""
        if self.is_nan():
            return sys.hash_info.nan
        if self.is_infinity():
            return hash(math.inf) if self.numerator > 0 else hash(-math.inf)
        simplified = self.simplify()
        return hash(fractions.Fraction(simplified.numerator, simplified.denominator))

    # Construction from native values

    @classmethod
    def from_int(cls, value: int) -> Rational:
        return cls(int(value), 1)

    @classmethod
    def _best_approximation(
        cls,
        mantissa: int,
        exponent: int,
        is_negative: bool,
        is_close: Callable[[int, int], bool],
        max_denominator: int,
    ) -> Rational:
        """
        Continued-fraction expansion of ``mantissa * 2**exponent``.

        Walks the convergents with exact integer arithmetic, keeping the last
        one whose denominator fits ``max_denominator``, and stops as soon as a
        convergent is close enough.
        """
        remaining_num, remaining_den = mantissa, 1
        if exponent >= 0:
            remaining_num <<= exponent
        else:
            remaining_den <<= -exponent

        integral = remaining_num // remaining_den
        prev_num, prev_den = 1, 0
        best_num, best_den = integral, 1
        # Reciprocal of the fractional part
        remaining_num, remaining_den = remaining_den, remaining_num - integral * remaining_den

        reason = "exact"
        while remaining_den != 0:
            if is_close(best_num, best_den):
                reason = "within tolerance"
                break
            term = remaining_num // remaining_den
            next_num = term * best_num + prev_num
            next_den = term * best_den + prev_den
            if next_den > max_denominator:
                reason = "denominator bound"
                break
            prev_num, prev_den = best_num, best_den
            best_num, best_den = next_num, next_den
            remaining_num, remaining_den = remaining_den, remaining_num - term * remaining_den

        logger.debug("continued fraction stopped at %d/%d (%s)", best_num, best_den, reason)

        if is_negative:
            best_num = -best_num
        return cls(best_num, best_den)

    @classmethod
    def from_double(
        cls,
        value: float,
        tolerance: Optional[float] = None,
        max_denominator: Optional[int] = None,
    ) -> Rational:
        """
        Best rational approximation of a double.

        Args:
            value: The double to approximate
            tolerance: Stop once ``|n/d - value| <= tolerance`` (default: smallest subnormal)
            max_denominator: Never use a denominator above this (default 10**12)

        Examples:
            >>> Rational.from_double(0.75)
            Rational(3, 4)
            >>> Rational.from_double(0.1)
            Rational(1, 10)
        """
        config = get_settings()
        if tolerance is None:
            tolerance = config.DOUBLE_TOLERANCE
        if max_denominator is None:
            max_denominator = config.MAX_DENOMINATOR

        value = float(value)
        if math.isnan(value):
            return cls.NAN
        if math.isinf(value):
            return cls.POSITIVE_INFINITY if value > 0 else cls.NEGATIVE_INFINITY
        if value == 0.0 or abs(value) <= tolerance:
            return cls.ZERO
        if value.is_integer():
            return cls(int(value), 1)

        target = abs(value)
        info = decompose_double(value)
        return cls._best_approximation(
            info.mantissa,
            info.exponent,
            info.is_negative,
            lambda n, d: abs(n / d - target) <= tolerance,
            max_denominator,
        )

    @classmethod
    def from_float32(
        cls,
        value: Any,
        tolerance: Optional[float] = None,
        max_denominator: Optional[int] = None,
    ) -> Rational:
        """Best rational approximation of a single-precision float, judged in single precision."""
        if tolerance is None:
            tolerance = FLOAT32_EPSILON
        if max_denominator is None:
            max_denominator = get_settings().MAX_DENOMINATOR

        single = np.float32(value)
        as_double = float(single)
        if math.isnan(as_double):
            return cls.NAN
        if math.isinf(as_double):
            return cls.POSITIVE_INFINITY if as_double > 0 else cls.NEGATIVE_INFINITY
        if as_double == 0.0 or abs(as_double) <= tolerance:
            return cls.ZERO
        if as_double.is_integer():
            return cls(int(as_double), 1)

        target = abs(as_double)
        info = decompose_single(single)
        return cls._best_approximation(
            info.mantissa,
            info.exponent,
            info.is_negative,
            lambda n, d: abs(float(np.float32(n / d)) - target) <= tolerance,
            max_denominator,
        )

    @classmethod
    def from_decimal(cls, value: Decimal) -> Rational:
        """
        Exact Rational of a decimal.

        Decimals with at most 18 fractional digits take the fast path
        ``(value * 10**digits) / 10**digits``; longer ones are decoded from
        the native 96-bit layout. Decimal NaN and infinities map to the
        Rational sentinels.
        """
        if value.is_nan():
            return cls.NAN
        if value.is_infinite():
            return cls.NEGATIVE_INFINITY if value.is_signed() else cls.POSITIVE_INFINITY

        negative, digits, exponent = value.as_tuple()
        fractional_digits = max(0, -exponent)

        if fractional_digits <= get_settings().DECIMAL_FAST_PATH_DIGITS:
            coefficient = int("".join(map(str, digits))) if digits else 0
            if exponent > 0:
                coefficient *= ten_pow(exponent)
            if negative:
                coefficient = -coefficient
            return cls(coefficient, ten_pow(fractional_digits)).simplify()

        logger.debug("decoding %s through the 96-bit decimal layout", value)
        info = decompose_decimal(value)
        return cls(info.mantissa, ten_pow(info.exponent)).simplify()

    @classmethod
    def from_big_decimal(cls, value: Any) -> Rational:
        return value.to_rational()

    # Parsing

    @classmethod
    def try_parse(
        cls,
        text: Any,
        style: NumberStyles = NumberStyles.INTEGER,
        provider: Optional[NumberFormat] = None,
    ) -> Result[Rational]:
        """
        Parse ``"n/d"`` (whitespace allowed around each part) or a single
        vulgar-fraction glyph such as ``"¾"``.

        Examples:
            >>> Rational.try_parse("3 / 4")
            Ok(Rational(3, 4))
            >>> Rational.try_parse("1/0").value.is_positive_infinity()
            True
        """
        if not isinstance(text, str):
            return Err(UnsupportedConversionError(text, cls))
        try:
            numerator, denominator = parse_fraction(text, style, provider)
        except NumericError as e:
            parse_logger.debug("parse failed: %s", e.message, extra_data=e.details)
            return Err(e)
        return Ok(cls(numerator, denominator).simplify())

    @classmethod
    def parse(
        cls,
        text: str,
        style: NumberStyles = NumberStyles.INTEGER,
        provider: Optional[NumberFormat] = None,
    ) -> Rational:
        """Like ``try_parse`` but raises ``ParseError``."""
        return cls.try_parse(text, style, provider).unwrap()

    # Conversion to native values

    def to_float(self) -> float:
        """Nearest double; zero denominators map to inf/-inf/nan."""
        if self.denominator == 0:
            if self.numerator > 0:
                return math.inf
            if self.numerator < 0:
                return -math.inf
            return math.nan
        try:
            return self.numerator / self.denominator
        except OverflowError:
            return math.inf if self.is_positive() else -math.inf

    def to_float32(self) -> np.float32:
        with np.errstate(over="ignore"):
            return np.float32(self.to_float())

    def to_decimal(self) -> Decimal:
        """
        Decimal quotient rounded to 28 significant digits.

        Raises:
            DivideByZeroError: If the denominator is zero
            NumericOverflowError: If the value exceeds the 96-bit decimal range
        """
        if self.denominator == 0:
            raise DivideByZeroError("convert Rational to decimal", self)
        context = decimal.Context(prec=get_settings().DECIMAL_PRECISION, rounding=decimal.ROUND_HALF_EVEN)
        quotient = context.divide(Decimal(self.numerator), Decimal(self.denominator))
        return fit_decimal128(quotient)

    def to_int(self) -> int:
        """
        Integer part, truncated toward zero.

        Raises:
            DivideByZeroError: If the denominator is zero
        """
        if self.denominator == 0:
            raise DivideByZeroError("convert Rational to int", self)
        return truncate_divide(self.numerator, self.denominator)

    def to_big_decimal(self, precision: Optional[int] = None) -> Any:
        """
        BigDecimal of this value.

        Exact when the reduced denominator has no prime factors other than 2
        and 5; otherwise truncated to ``precision`` significant digits
        (default 64).

        Raises:
            DivideByZeroError: If the denominator is zero
        """
        from .big_decimal import BigDecimal

        if self.denominator == 0:
            raise DivideByZeroError("convert Rational to BigDecimal", self)

        numerator, denominator = self.simplify().as_tuple()

        twos = fives = 0
        rest = denominator
        while rest % 2 == 0:
            rest //= 2
            twos += 1
        while rest % 5 == 0:
            rest //= 5
            fives += 1

        if rest == 1:
            scale = max(twos, fives)
            return BigDecimal.normalized(numerator * ten_pow(scale) // denominator, -scale)

        if precision is None:
            precision = get_settings().BIG_DECIMAL_PRECISION
        scale = max(0, precision - digit_count(numerator) + digit_count(denominator) + 1)
        mantissa = truncate_divide(numerator * ten_pow(scale), denominator)
        return BigDecimal.normalized(mantissa, -scale).limit_precision(precision)

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    @classmethod
    def try_convert_from(cls, value: Any) -> Result[Rational]:
        """
        Convert any supported native value to a Rational.

        Supports ints (including numpy integers), float / numpy floats,
        Decimal, str (via ``try_parse``), BigDecimal and Rational.
        """
        from .big_decimal import BigDecimal

        try:
            if isinstance(value, Rational):
                return Ok(value)
            if isinstance(value, BigDecimal):
                return Ok(value.to_rational())
            if isinstance(value, (int, np.integer)):
                return Ok(cls(int(value), 1))
            if isinstance(value, np.float32):
                return Ok(cls.from_float32(value))
            if isinstance(value, (float, np.floating)):
                return Ok(cls.from_double(float(value)))
            if isinstance(value, Decimal):
                return Ok(cls.from_decimal(value))
            if isinstance(value, str):
                return cls.try_parse(value)
        except NumericError as e:
            return Err(e)
        return Err(UnsupportedConversionError(value, cls))

    @classmethod
    def convert_from(cls, value: Any) -> Rational:
        return cls.try_convert_from(value).unwrap()

    def try_convert_to(self, target: type, checked: bool = False) -> Result[Any]:
        """
        Convert to a native numeric type.

        Float, Decimal, str, Rational and BigDecimal targets always use their
        dedicated conversions. Integral targets (``int`` and the numpy
        integer types) require a denominator of exactly 1; with ``checked``
        an out-of-range numerator fails, otherwise it wraps like a native
        narrowing cast.
        """
        from .big_decimal import BigDecimal

        try:
            if target is float:
                return Ok(self.to_float())
            if target is np.float64:
                return Ok(np.float64(self.to_float()))
            if target is np.float32:
                return Ok(self.to_float32())
            if target is Decimal:
                return Ok(self.to_decimal())
            if target is str:
                return Ok(self.to_string())
            if target is Rational:
                return Ok(self)
            if target is BigDecimal:
                return Ok(self.to_big_decimal())
        except NumericError as e:
            return Err(e)

        if target is int or target in _INTEGRAL_TARGETS:
            if self.denominator != 1:
                return Err(UnsupportedConversionError(self, target))
            if target is int:
                return Ok(self.numerator)

            info = np.iinfo(target)
            if checked and not info.min <= self.numerator <= info.max:
                return Err(NumericOverflowError(self.numerator, target.__name__))
            return Ok(target(wrap_to_width(self.numerator, info.bits, info.kind == "i")))

        return Err(UnsupportedConversionError(self, target))

    def convert_to(self, target: type, checked: bool = False) -> Any:
        return self.try_convert_to(target, checked).unwrap()

    # Formatting

    def to_string(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def _to_mixed_string(self, spec: str) -> str:
        """Mixed number, e.g. ``"2 1/2"``; proper fractions stay as n/d."""
        if self.denominator == 0 or abs(self.numerator) < abs(self.denominator):
            return self.to_string()

        whole = truncate_divide(self.numerator, self.denominator)
        remainder = self.numerator - whole * self.denominator
        if remainder == 0:
            return format(whole, spec)
        return f"{format(whole, spec)} {abs(remainder)}/{abs(self.denominator)}"

    def __format__(self, format_spec: str) -> str:
        """
        Format codes:
            G / g: numerator/denominator, rest of the format spec applied to both
            M: mixed number
            N: numerator only
            D: denominator only
            d: as a double
            m: as a decimal
        """
        if not format_spec:
            return self.to_string()

        code, spec = format_spec[0], format_spec[1:]
        if code in ("G", "g"):
            return f"{format(self.numerator, spec)}/{format(self.denominator, spec)}"
        if code == "M":
            return self._to_mixed_string(spec)
        if code == "N":
            return format(self.numerator, spec)
        if code == "D":
            return format(self.denominator, spec)
        if code == "d":
            return format(self.to_float(), spec)
        if code == "m":
            return format(self.to_decimal(), spec)
        raise ValueError(f"Unknown format code {code!r} for Rational")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


Rational.ZERO = Rational(0, 1)
Rational.ONE = Rational(1, 1)
Rational.NEGATIVE_ONE = Rational(-1, 1)
Rational.POSITIVE_INFINITY = Rational(1, 0)
Rational.NEGATIVE_INFINITY = Rational(-1, 0)
Rational.NAN = Rational(0, 0)
Rational.MIN_VALUE = Rational.NEGATIVE_INFINITY
Rational.MAX_VALUE = Rational.POSITIVE_INFINITY
