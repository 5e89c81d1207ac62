"""
Bit-level decomposition of native floating representations.

Binary floats (``numpy.float32`` and ``float``/``numpy.float64``) decompose to
``value == (-1 if is_negative else 1) * mantissa * 2 ** exponent`` with an odd
mantissa (or zero). Decimals decompose from the native 128-bit decimal layout
to ``value == mantissa * 10 ** -exponent`` with a signed 96-bit mantissa and a
scale ``exponent`` in 0..28.

Python's ``decimal.Decimal`` has no fixed layout, so ``decimal_bits`` first
fits a Decimal into the 96-bit coefficient / 0..28 scale format and then
emits the four 32-bit words (lo, mid, hi, flags) the way ``GetBits`` does.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import NumericOverflowError
from .helpers import DECIMAL_MAX_COEFFICIENT, DECIMAL_MAX_SCALE

BinaryFloat = Union[float, np.floating]

# IEEE-754 binary64
_DOUBLE_MANTISSA_BITS = 52
_DOUBLE_EXPONENT_MASK = 0x7FF
_DOUBLE_BIAS = 1023

# IEEE-754 binary32
_SINGLE_MANTISSA_BITS = 23
_SINGLE_EXPONENT_MASK = 0xFF
_SINGLE_BIAS = 127

# decimal flags word: sign in bit 31, scale in bits 16..23
_DECIMAL_SIGN_FLAG = 0x8000
_DECIMAL_SCALE_MASK = 0xFF


class FloatingPointInfo(BaseModel):
    """
    (mantissa, sign, exponent) triple of a decomposed native value.

    ``radix`` is 2 for binary floats (the exponent is a power of two applied
    to an unsigned mantissa) and 10 for decimals (the exponent is the scale,
    the mantissa already carries the sign).
    """

    model_config = ConfigDict(frozen=True)

    mantissa: int = Field(description="Integer significand")
    is_negative: bool = Field(description="Sign bit of the source value")
    exponent: int = Field(description="Power of two, or base-10 scale for decimals")
    radix: int = Field(default=2, description="2 for binary floats, 10 for decimals")


def _decompose_binary(bits: int, mantissa_bits: int, exponent_mask: int, bias: int) -> FloatingPointInfo:
    is_negative = (bits >> (mantissa_bits + exponent_mask.bit_length())) & 1 == 1
    biased_exponent = (bits >> mantissa_bits) & exponent_mask
    mantissa = bits & ((1 << mantissa_bits) - 1)

    if biased_exponent == exponent_mask:
        raise ValueError("Cannot decompose a non-finite value")

    # Subnormal numbers: exponent is effectively one higher,
    # but there's no implicit leading bit in the mantissa
    if biased_exponent == 0:
        biased_exponent = 1
    else:
        mantissa |= 1 << mantissa_bits

    # The mantissa is treated as an integer m.0 rather than 1.m
    exponent = biased_exponent - bias - mantissa_bits

    if mantissa == 0:
        return FloatingPointInfo(mantissa=0, is_negative=is_negative, exponent=0)

    while mantissa & 1 == 0:
        mantissa >>= 1
        exponent += 1

    return FloatingPointInfo(mantissa=mantissa, is_negative=is_negative, exponent=exponent)


def decompose_double(value: BinaryFloat) -> FloatingPointInfo:
    """
    Decompose a finite double.

    Examples:
        >>> decompose_double(2.5)
        FloatingPointInfo(mantissa=5, is_negative=False, exponent=-1, radix=2)
    """
    bits = int(np.float64(value).view(np.uint64))
    return _decompose_binary(bits, _DOUBLE_MANTISSA_BITS, _DOUBLE_EXPONENT_MASK, _DOUBLE_BIAS)


def decompose_single(value: BinaryFloat) -> FloatingPointInfo:
    """Decompose a finite single-precision float."""
    bits = int(np.float32(value).view(np.uint32))
    return _decompose_binary(bits, _SINGLE_MANTISSA_BITS, _SINGLE_EXPONENT_MASK, _SINGLE_BIAS)


def decompose_float(value: BinaryFloat) -> FloatingPointInfo:
    """Decompose using the width of ``value``'s own type."""
    if isinstance(value, np.float32):
        return decompose_single(value)
    return decompose_double(value)


def fit_decimal128(value: Decimal) -> Decimal:
    """
    Fit ``value`` into the native decimal layout.

    Scales beyond 28 digits are rounded half-even, as is any scale that would
    push the coefficient past 96 bits. Raises ``NumericOverflowError`` when the
    integral part alone does not fit and ``ValueError`` for non-finite input.
    """
    if not value.is_finite():
        raise ValueError(f"Cannot represent {value} as a native decimal")

    sign, digits, exponent = value.as_tuple()
    coefficient = int("".join(map(str, digits))) if digits else 0

    if exponent > 0:
        coefficient *= 10**exponent
        exponent = 0
        if coefficient > DECIMAL_MAX_COEFFICIENT:
            raise NumericOverflowError(value, "decimal")
        return Decimal((sign, tuple(int(d) for d in str(coefficient)), 0))

    scale = -exponent
    if scale <= DECIMAL_MAX_SCALE and coefficient <= DECIMAL_MAX_COEFFICIENT:
        return value

    target_scale = min(scale, DECIMAL_MAX_SCALE)
    context = decimal.Context(prec=max(len(digits), 1) + 2, rounding=decimal.ROUND_HALF_EVEN)
    while target_scale >= 0:
        rounded = value.quantize(Decimal((0, (1,), -target_scale)), context=context)
        if abs(rounded.as_tuple().exponent) <= DECIMAL_MAX_SCALE and _coefficient(rounded) <= DECIMAL_MAX_COEFFICIENT:
            return rounded
        target_scale -= 1

    raise NumericOverflowError(value, "decimal")


def _coefficient(value: Decimal) -> int:
    digits = value.as_tuple().digits
    return int("".join(map(str, digits))) if digits else 0


def decimal_bits(value: Decimal) -> tuple[int, int, int, int]:
    """
    The four 32-bit words of the native decimal layout.

    Returns ``(lo, mid, hi, flags)``: the low three words hold the 96-bit
    coefficient little-endian, ``flags`` holds the sign in bit 31 and the
    scale in bits 16..23.
    """
    fitted = fit_decimal128(value)
    sign, _, exponent = fitted.as_tuple()
    coefficient = _coefficient(fitted)
    scale = -exponent

    lo = coefficient & 0xFFFFFFFF
    mid = (coefficient >> 32) & 0xFFFFFFFF
    hi = (coefficient >> 64) & 0xFFFFFFFF
    flags = (scale << 16) | (0x80000000 if sign else 0)
    return lo, mid, hi, flags


def decompose_decimal(value: Decimal) -> FloatingPointInfo:
    """
    Decompose a decimal from its four-word layout.

    Examples:
        >>> decompose_decimal(Decimal("-1.230"))
        FloatingPointInfo(mantissa=-1230, is_negative=True, exponent=3, radix=10)
    """
    lo, mid, hi, flags = decimal_bits(value)

    mantissa = lo | (mid << 32) | (hi << 64)

    # Highest 16 bits contain sign + scale
    info = flags >> 16
    is_negative = (info & _DECIMAL_SIGN_FLAG) != 0
    scale = info & _DECIMAL_SCALE_MASK

    if is_negative:
        mantissa = -mantissa

    return FloatingPointInfo(mantissa=mantissa, is_negative=is_negative, exponent=scale, radix=10)


def trailing_digit_count(value: Decimal) -> int:
    """Count of digits after the decimal point, read from the 96-bit layout.

    Public layout helper for callers working with the four-word form of
    :func:`decimal_bits`. Raises :class:`NumericOverflowError` for values
    the layout cannot hold.
    """
    _, _, _, flags = decimal_bits(value)
    return (flags >> 16) & _DECIMAL_SCALE_MASK

