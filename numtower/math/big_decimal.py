"""
BigDecimal type: ``mantissa * 10 ** exponent`` with an unbounded mantissa.

Values built through ``normalized`` (every factory and every arithmetic
result) have no trailing zeros in the mantissa, and zero is always ``0e0``.
The plain constructor stores what it is given; equality and ordering align
exponents first, so ``BigDecimal(120, 0) == BigDecimal(12, 1)``.

Division is the one lossy operation: mantissas are divided with truncation
toward zero, so ``BigDecimal.from_int(1) / 3 == 0``. Promote to Rational for
exact quotients.
"""

from __future__ import annotations

import operator
from decimal import Decimal
from typing import Any, ClassVar, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import DivideByZeroError, NumericError, UnsupportedConversionError
from ..core.logging import get_logger
from .floating_point import decompose_decimal, decompose_float, fit_decimal128
from .helpers import RADIX, digit_count, sign, ten_pow, trailing_zero_digits, truncate_divide
from .rational import Rational
from .result import Err, Ok, Result
from .value import ExactNumber, TypePrecedence

logger = get_logger(__name__)


class BigDecimal(BaseModel, ExactNumber):
    """
    Arbitrary-precision base-10 number.

    Examples:
        >>> BigDecimal.from_decimal(Decimal("1.230"))
        BigDecimal(123, -2)
        >>> str(BigDecimal(123, -2))
        '1.23'
        >>> BigDecimal.normalized(1200, 0)
        BigDecimal(12, 2)
    """

    model_config = ConfigDict(frozen=True)

    mantissa: int = Field(description="Signed integer significand")
    exponent: int = Field(description="Power of ten applied to the mantissa")

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.BIG_DECIMAL
    RADIX: ClassVar[int] = RADIX

    ZERO: ClassVar[BigDecimal]
    ONE: ClassVar[BigDecimal]
    NEGATIVE_ONE: ClassVar[BigDecimal]

    def __init__(self, mantissa: int = 0, exponent: int = 0, **kwargs):
        super().__init__(mantissa=operator.index(mantissa), exponent=operator.index(exponent), **kwargs)

    @classmethod
    def normalized(cls, mantissa: int, exponent: int) -> BigDecimal:
        """Build a BigDecimal with trailing zeros moved from the mantissa into the exponent."""
        if mantissa == 0:
            return cls(0, 0)
        zeros = trailing_zero_digits(mantissa)
        return cls(mantissa // ten_pow(zeros), exponent + zeros)

    @staticmethod
    def aligned(left: BigDecimal, right: BigDecimal) -> tuple[int, int, int]:
        """
        Rescale both mantissas to the smaller exponent.

        Returns:
            (left mantissa, right mantissa, common exponent)
        """
        if left.exponent == right.exponent:
            return left.mantissa, right.mantissa, left.exponent
        if left.exponent > right.exponent:
            return left.mantissa * ten_pow(left.exponent - right.exponent), right.mantissa, right.exponent
        return left.mantissa, right.mantissa * ten_pow(right.exponent - left.exponent), left.exponent

    # Predicates

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def is_negative(self) -> bool:
        return self.mantissa < 0

    def is_positive(self) -> bool:
        return self.mantissa > 0

    def is_integer(self) -> bool:
        normal = self.normalize()
        return normal.exponent >= 0

    def sign(self) -> int:
        return sign(self.mantissa)

    # Arithmetic

    def add(self, other: BigDecimal) -> BigDecimal:
        left, right, exponent = BigDecimal.aligned(self, other)
        return BigDecimal.normalized(left + right, exponent)

    def subtract(self, other: BigDecimal) -> BigDecimal:
        left, right, exponent = BigDecimal.aligned(self, other)
        return BigDecimal.normalized(left - right, exponent)

    def multiply(self, other: BigDecimal) -> BigDecimal:
        return BigDecimal.normalized(self.mantissa * other.mantissa, self.exponent + other.exponent)

    def divide(self, other: BigDecimal) -> BigDecimal:
        """
        Truncating division of the mantissas.

        Only the integer quotient of the two mantissas survives, so the
        result loses every digit the mantissa quotient would have carried
        after the point.

        Raises:
            DivideByZeroError: If ``other`` is zero
        """
        if other.mantissa == 0:
            raise DivideByZeroError("divide BigDecimal", self)
        return BigDecimal.normalized(
            truncate_divide(self.mantissa, other.mantissa),
            self.exponent - other.exponent,
        )

    def mod(self, other: BigDecimal) -> BigDecimal:
        """
        ``self - other * truncate(self / other)`` with an exact quotient.

        The remainder has the sign of ``self``.

        Raises:
            DivideByZeroError: If ``other`` is zero
        """
        if other.mantissa == 0:
            raise DivideByZeroError("mod BigDecimal", self)
        left, right, _ = BigDecimal.aligned(self, other)
        quotient = truncate_divide(left, right)
        return self.subtract(other.multiply(BigDecimal.from_int(quotient)))

    def negate(self) -> BigDecimal:
        return BigDecimal(-self.mantissa, self.exponent)

    def plus(self) -> BigDecimal:
        return self

    def abs(self) -> BigDecimal:
        return BigDecimal(abs(self.mantissa), self.exponent)

    def increment(self) -> BigDecimal:
        return self.add(BigDecimal.ONE)

    def decrement(self) -> BigDecimal:
        return self.subtract(BigDecimal.ONE)

    def normalize(self) -> BigDecimal:
        return BigDecimal.normalized(self.mantissa, self.exponent)

    def truncate(self) -> BigDecimal:
        """Integer part, rounding toward zero."""
        if self.exponent >= 0:
            return self.normalize()
        return BigDecimal.normalized(truncate_divide(self.mantissa, ten_pow(-self.exponent)), 0)

    def limit_precision(self, digits: int) -> BigDecimal:
        """Keep at most ``digits`` significant digits, truncating the rest."""
        if digits < 1:
            raise ValueError(f"digits must be positive, got {digits}")
        normal = self.normalize()
        excess = digit_count(normal.mantissa) - digits
        if excess <= 0:
            return normal
        return BigDecimal.normalized(
            truncate_divide(normal.mantissa, ten_pow(excess)),
            normal.exponent + excess,
        )

    def promote(self, other: ExactNumber) -> ExactNumber:
        if self.should_promote_to(type(other)):
            return self.to_rational()
        return self

    def _coerce(self, other: Any) -> Optional[BigDecimal]:
        """Convert an operand to BigDecimal; Rationals are left to Rational's operators."""
        if isinstance(other, BigDecimal):
            return other
        if isinstance(other, Rational):
            return None
        result = BigDecimal.try_convert_from(other)
        if result.is_error():
            return None
        return result.value

    def __add__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self.add(other_big)

    def __radd__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big.add(self)

    def __sub__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self.subtract(other_big)

    def __rsub__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big.subtract(self)

    def __mul__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self.multiply(other_big)

    def __rmul__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big.multiply(self)

    def __truediv__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self.divide(other_big)

    def __rtruediv__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big.divide(self)

    def __mod__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self.mod(other_big)

    def __rmod__(self, other: Any) -> BigDecimal:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big.mod(self)

    def __neg__(self) -> BigDecimal:
        return self.negate()

    def __pos__(self) -> BigDecimal:
        return self.plus()

    def __abs__(self) -> BigDecimal:
        return self.abs()

    def __bool__(self) -> bool:
        return self.mantissa != 0

    # Ordering and equality

    def _compare_big_decimal(self, other: BigDecimal) -> int:
        left, right, _ = BigDecimal.aligned(self, other)
        return sign(left - right)

    def compare_to(self, other: Any) -> int:
        """
        Compare by value.

        Rationals compare exactly in the Rational domain. Other operands are
        converted first; anything that cannot be converted sorts before every
        BigDecimal.
        """
        if isinstance(other, BigDecimal):
            return self._compare_big_decimal(other)
        if isinstance(other, Rational):
            return self.to_rational().compare_to(other)
        converted = BigDecimal.try_convert_from(other)
        if converted.is_error():
            return 1
        return self._compare_big_decimal(converted.value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, BigDecimal):
            return self._compare_big_decimal(other) == 0
        if isinstance(other, Rational):
            return self.to_rational() == other
        if isinstance(other, (int, float, Decimal, np.integer, np.floating)):
            converted = BigDecimal.try_convert_from(other)
            return converted.is_ok() and self._compare_big_decimal(converted.value) == 0
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.to_rational())

    # Construction

    @classmethod
    def from_int(cls, value: int) -> BigDecimal:
        return cls.normalized(int(value), 0)

    @classmethod
    def from_float(cls, value: Any) -> BigDecimal:
        """
        Exact value of a finite binary float.

        ``m * 2**-k`` is rewritten as ``(m * 5**k) * 10**-k``, so no digits
        are lost.

        Raises:
            UnsupportedConversionError: For NaN or infinities
        """
        if not np.isfinite(value):
            raise UnsupportedConversionError(value, cls)
        info = decompose_float(value)
        if info.exponent >= 0:
            mantissa, exponent = info.mantissa << info.exponent, 0
        else:
            mantissa, exponent = info.mantissa * 5 ** (-info.exponent), info.exponent
        if info.is_negative:
            mantissa = -mantissa
        return cls.normalized(mantissa, exponent)

    @classmethod
    def from_decimal(cls, value: Decimal) -> BigDecimal:
        """
        Exact value of a decimal, read from its native four-word layout.

        Raises:
            UnsupportedConversionError: For NaN or infinities
            NumericOverflowError: If the decimal does not fit the native layout
        """
        if not value.is_finite():
            raise UnsupportedConversionError(value, cls)
        info = decompose_decimal(value)
        return cls.normalized(info.mantissa, -info.exponent)

    @classmethod
    def from_rational(cls, value: Rational, precision: Optional[int] = None) -> BigDecimal:
        return value.to_big_decimal(precision)

    @classmethod
    def try_convert_from(cls, value: Any) -> Result[BigDecimal]:
        """Convert ints, floats, Decimals and Rationals to BigDecimal."""
        try:
            if isinstance(value, BigDecimal):
                return Ok(value)
            if isinstance(value, Rational):
                return Ok(value.to_big_decimal())
            if isinstance(value, (int, np.integer)):
                return Ok(cls.from_int(int(value)))
            if isinstance(value, (float, np.floating)):
                return Ok(cls.from_float(value))
            if isinstance(value, Decimal):
                return Ok(cls.from_decimal(value))
        except NumericError as e:
            logger.debug("BigDecimal conversion of %r failed: %s", value, e.message)
            return Err(e)
        return Err(UnsupportedConversionError(value, cls))

    @classmethod
    def convert_from(cls, value: Any) -> BigDecimal:
        return cls.try_convert_from(value).unwrap()

    # Conversion

    def to_rational(self) -> Rational:
        if self.exponent >= 0:
            return Rational(self.mantissa * ten_pow(self.exponent), 1)
        return Rational(self.mantissa, ten_pow(-self.exponent))

    def to_int(self) -> int:
        """Integer part, truncated toward zero."""
        if self.exponent >= 0:
            return self.mantissa * ten_pow(self.exponent)
        return truncate_divide(self.mantissa, ten_pow(-self.exponent))

    def to_float(self) -> float:
        return self.to_rational().to_float()

    def to_decimal(self) -> Decimal:
        """
        Decimal of this value, rounded to the native layout if needed.

        Raises:
            NumericOverflowError: If the integral part exceeds 96 bits
        """
        digits = tuple(int(d) for d in str(abs(self.mantissa)))
        return fit_decimal128(Decimal((int(self.mantissa < 0), digits, self.exponent)))

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    # Formatting

    def to_string(self) -> str:
        """
        Plain positional notation, e.g. ``"1.23"``, ``"-0.005"``, ``"1200"``.
        """
        digits = str(abs(self.mantissa))
        prefix = "-" if self.mantissa < 0 else ""

        if self.exponent >= 0:
            if self.mantissa == 0:
                return "0"
            return prefix + digits + "0" * self.exponent

        scale = -self.exponent
        if len(digits) <= scale:
            digits = "0" * (scale - len(digits) + 1) + digits
        return f"{prefix}{digits[:-scale]}.{digits[-scale:]}"

    def __format__(self, format_spec: str) -> str:
        """Empty spec gives ``to_string``; otherwise ``{mantissa}e{exponent}`` with the format spec applied to both."""
        if not format_spec:
            return self.to_string()
        return f"{format(self.mantissa, format_spec)}e{format(self.exponent, format_spec)}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigDecimal({self.mantissa}, {self.exponent})"


BigDecimal.ZERO = BigDecimal(0, 0)
BigDecimal.ONE = BigDecimal(1, 0)
BigDecimal.NEGATIVE_ONE = BigDecimal(-1, 0)
