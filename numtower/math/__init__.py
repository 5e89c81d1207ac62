"""
numtower.math - exact numeric value types

Exact number types with:
- Unbounded fractions with IEEE-style sentinels (Rational)
- Arbitrary-precision base-10 numbers (BigDecimal)
- Exact decomposition of native floats and decimals
- Ok/Err results for fallible parsing and conversion
"""

from .big_decimal import BigDecimal
from .floating_point import (
    FloatingPointInfo,
    decimal_bits,
    decompose_decimal,
    decompose_double,
    decompose_float,
    decompose_single,
    fit_decimal128,
    trailing_digit_count,
)
from .helpers import gcd, ten_pow, truncate_divide, truncate_remainder, wrap_to_width
from .parsing import NumberFormat, NumberStyles, parse_fraction
from .rational import Rational
from .result import Err, Ok, Result
from .value import ExactNumber, TypePrecedence

__all__ = [
    "ExactNumber",
    "TypePrecedence",
    "Rational",
    "BigDecimal",
    "FloatingPointInfo",
    "decompose_double",
    "decompose_single",
    "decompose_float",
    "decompose_decimal",
    "decimal_bits",
    "fit_decimal128",
    "trailing_digit_count",
    "NumberStyles",
    "NumberFormat",
    "parse_fraction",
    "Ok",
    "Err",
    "Result",
    "gcd",
    "ten_pow",
    "truncate_divide",
    "truncate_remainder",
    "wrap_to_width",
]
