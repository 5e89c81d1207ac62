"""
Integer helpers shared by Rational and BigDecimal.

Greatest common divisor, powers of ten, digit counting and truncating
division. Everything here works on unbounded Python ints.
"""

from __future__ import annotations

from functools import lru_cache

# Smallest positive subnormal single-precision float (``float.Epsilon``)
FLOAT32_EPSILON = 1.401298464324817e-45

# Layout limits of the native 128-bit decimal
DECIMAL_MAX_SCALE = 28
DECIMAL_MAX_COEFFICIENT = (1 << 96) - 1

RADIX = 10


def gcd(a: int, b: int) -> int:
    """
    Greatest Common Divisor.

    Always non-negative; ``gcd(0, 0) == 0``.
    """
    a, b = abs(a), abs(b)
    if a < b:
        a, b = b, a
    if b == 0:
        return a
    r = a % b
    while r != 0:
        a, b = b, r
        r = a % b
    return b


@lru_cache(maxsize=512)
def ten_pow(exponent: int) -> int:
    """10 ** exponent for a non-negative exponent."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return 10**exponent


def digit_count(value: int) -> int:
    """Number of base-10 digits in ``abs(value)``; zero has one digit."""
    return len(str(abs(value)))


def trailing_zero_digits(value: int) -> int:
    """Count of trailing zero base-10 digits; zero has none."""
    if value == 0:
        return 0
    count = 0
    value = abs(value)
    while value % 10 == 0:
        value //= 10
        count += 1
    return count


def sign(value: int) -> int:
    """-1, 0 or 1."""
    return (value > 0) - (value < 0)


def truncate_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (native BigInteger semantics)."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def truncate_remainder(dividend: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    return dividend - divisor * truncate_divide(dividend, divisor)


def wrap_to_width(value: int, bits: int, signed: bool) -> int:
    """
    Narrow ``value`` to ``bits`` wide two's complement, discarding high bits.

    This is what an unchecked native narrowing cast does.
    """
    mask = (1 << bits) - 1
    wrapped = value & mask
    if signed and wrapped >= 1 << (bits - 1):
        wrapped -= 1 << bits
    return wrapped
