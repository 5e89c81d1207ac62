"""Tests for BigDecimal."""

from decimal import Decimal

import numpy as np
import pytest
import sympy

from numtower.core.errors import DivideByZeroError, NumericOverflowError, UnsupportedConversionError
from numtower.math.big_decimal import BigDecimal
from numtower.math.rational import Rational
from numtower.math.value import TypePrecedence


class TestBigDecimalConstruction:
    """Test construction and the normalization gate."""

    def test_constructor_is_raw(self, assert_components):
        assert_components(BigDecimal(1200, 0), mantissa=1200, exponent=0)

    def test_normalized_strips_zeros(self, assert_components):
        assert_components(BigDecimal.normalized(1200, 0), mantissa=12, exponent=2)
        assert_components(BigDecimal.normalized(-1230, -3), mantissa=-123, exponent=-2)

    def test_normalized_zero(self, assert_components):
        assert_components(BigDecimal.normalized(0, -7), mantissa=0, exponent=0)

    def test_constants(self, assert_components):
        assert_components(BigDecimal.ZERO, mantissa=0, exponent=0)
        assert_components(BigDecimal.ONE, mantissa=1, exponent=0)
        assert_components(BigDecimal.NEGATIVE_ONE, mantissa=-1, exponent=0)
        assert BigDecimal.RADIX == 10
        assert BigDecimal.type_precedence == TypePrecedence.BIG_DECIMAL

    def test_serializable(self, assert_serializable):
        assert assert_serializable(BigDecimal(123, -2)) == BigDecimal(123, -2)

    def test_aligned(self):
        assert BigDecimal.aligned(BigDecimal(12, 1), BigDecimal(5, -1)) == (1200, 5, -1)
        assert BigDecimal.aligned(BigDecimal(5, -1), BigDecimal(12, 1)) == (5, 1200, -1)

    def test_scale_invariance(self):
        """Test values equal across representations of the same number."""
        assert BigDecimal(120, 0) == BigDecimal(12, 1)
        assert BigDecimal(1230, -3) == BigDecimal(123, -2)
        assert hash(BigDecimal(120, 0)) == hash(BigDecimal(12, 1))


class TestBigDecimalFactories:
    """Test conversion from native values."""

    def test_from_decimal(self, assert_components):
        """Test 1.230 becomes mantissa 123, exponent -2."""
        assert_components(BigDecimal.from_decimal(Decimal("1.230")), mantissa=123, exponent=-2)
        assert_components(BigDecimal.from_decimal(Decimal("-0.005")), mantissa=-5, exponent=-3)

    def test_from_decimal_non_finite(self):
        with pytest.raises(UnsupportedConversionError):
            BigDecimal.from_decimal(Decimal("NaN"))

    def test_from_int(self, assert_components):
        assert_components(BigDecimal.from_int(1500), mantissa=15, exponent=2)

    def test_from_float_is_exact(self, assert_components):
        assert_components(BigDecimal.from_float(2.5), mantissa=25, exponent=-1)
        assert_components(BigDecimal.from_float(-0.125), mantissa=-125, exponent=-3)
        assert_components(BigDecimal.from_float(1024.0), mantissa=1024, exponent=0)

    def test_from_float_one_tenth(self):
        """Test the binary value of 0.1 is reproduced digit for digit."""
        value = BigDecimal.from_float(0.1)
        assert value.to_rational() == Rational(*sympy.Rational(0.1).as_numer_denom())
        assert str(value) == "0.1000000000000000055511151231257827021181583404541015625"

    def test_from_float32(self):
        assert BigDecimal.from_float(np.float32(0.5)) == BigDecimal(5, -1)

    def test_from_float_non_finite(self):
        with pytest.raises(UnsupportedConversionError):
            BigDecimal.from_float(float("inf"))

    def test_from_rational(self):
        assert BigDecimal.from_rational(Rational(3, 8)) == BigDecimal(375, -3)
        assert BigDecimal.from_rational(Rational(1, 3), 3) == BigDecimal(333, -3)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (7, BigDecimal(7, 0)),
            (np.int64(-30), BigDecimal(-3, 1)),
            (0.5, BigDecimal(5, -1)),
            (Decimal("2.50"), BigDecimal(25, -1)),
            (Rational(1, 4), BigDecimal(25, -2)),
        ],
    )
    def test_try_convert_from(self, value, expected):
        assert BigDecimal.try_convert_from(value).unwrap() == expected

    def test_try_convert_from_failures(self):
        assert BigDecimal.try_convert_from(Rational.NAN).is_error()
        assert BigDecimal.try_convert_from(float("nan")).is_error()
        assert BigDecimal.try_convert_from(Decimal("1E+40")).is_error()
        assert isinstance(BigDecimal.try_convert_from("1.5").error, UnsupportedConversionError)

    def test_convert_from_raises(self):
        with pytest.raises(UnsupportedConversionError):
            BigDecimal.convert_from(object())


MIXED_TRIPLES = [
    (BigDecimal(15, -1), BigDecimal(-7, 3), BigDecimal(123, -5)),
    (BigDecimal(-25, -2), BigDecimal(4, 1), BigDecimal(-9, 0)),
    (BigDecimal(1, 10), BigDecimal(-1, -10), BigDecimal(3, -3)),
    (BigDecimal(1200, 0), BigDecimal(0, 0), BigDecimal(-5, -1)),
]


def _normalized_components(value: BigDecimal) -> tuple:
    normalized = value.normalize()
    return normalized.mantissa, normalized.exponent


class TestBigDecimalArithmetic:
    """Test arithmetic."""

    def test_add(self, assert_components):
        assert_components(BigDecimal(15, -1) + BigDecimal(25, -1), mantissa=4, exponent=0)
        assert_components(BigDecimal(1, 2) + BigDecimal(1, -2), mantissa=10001, exponent=-2)

    def test_subtract(self, assert_components):
        assert_components(BigDecimal(15, -1) - BigDecimal(5, -1), mantissa=1, exponent=0)
        assert (BigDecimal(5, -1) - BigDecimal(5, -1)) == BigDecimal.ZERO

    def test_multiply(self, assert_components):
        assert_components(BigDecimal(15, -1) * BigDecimal(4, 0), mantissa=6, exponent=0)

    @pytest.mark.parametrize("a, b, c", MIXED_TRIPLES)
    def test_add_associative_and_commutative(self, a, b, c):
        assert (a + b) + c == a + (b + c)
        assert _normalized_components((a + b) + c) == _normalized_components(a + (b + c))
        assert a + b == b + a
        assert _normalized_components(a + b) == _normalized_components(b + a)

    @pytest.mark.parametrize("a, b, c", MIXED_TRIPLES)
    def test_multiply_associative_and_commutative(self, a, b, c):
        assert (a * b) * c == a * (b * c)
        assert _normalized_components((a * b) * c) == _normalized_components(a * (b * c))
        assert a * b == b * a
        assert _normalized_components(a * b) == _normalized_components(b * a)

    @pytest.mark.parametrize("a, b, c", MIXED_TRIPLES)
    def test_identities(self, a, b, c):
        """Test Zero and One are the additive and multiplicative identities."""
        for value in (a, b, c):
            assert value + BigDecimal.ZERO == value
            assert _normalized_components(value + BigDecimal.ZERO) == _normalized_components(value)
            assert value * BigDecimal.ONE == value
            assert _normalized_components(value * BigDecimal.ONE) == _normalized_components(value)

    def test_distributes_over_add(self):
        a, b, c = MIXED_TRIPLES[0]
        assert a * (b + c) == a * b + a * c

    def test_divide_truncates_mantissas(self, assert_components):
        """Test division keeps only the integer quotient of the mantissas."""
        assert_components(BigDecimal(1, 0) / BigDecimal(3, 0), mantissa=0, exponent=0)
        assert_components(BigDecimal(10, 0) / BigDecimal(4, 0), mantissa=2, exponent=0)
        assert_components(BigDecimal(-7, 2) / BigDecimal(2, 0), mantissa=-3, exponent=2)

    def test_divide_by_zero(self):
        with pytest.raises(DivideByZeroError):
            BigDecimal.ONE / BigDecimal.ZERO

    def test_mod(self):
        assert BigDecimal(75, -1) % BigDecimal(2, 0) == BigDecimal(15, -1)
        assert BigDecimal(-75, -1) % BigDecimal(2, 0) == BigDecimal(-15, -1)
        assert BigDecimal(1, 0) % BigDecimal(3, -1) == BigDecimal(1, -1)

    def test_mod_by_zero(self):
        with pytest.raises(DivideByZeroError):
            BigDecimal.ONE % BigDecimal.ZERO

    def test_mixed_with_int_and_float(self):
        assert BigDecimal(5, -1) + 1 == BigDecimal(15, -1)
        assert 2 * BigDecimal(5, -1) == BigDecimal.ONE
        assert BigDecimal(5, -1) + 0.25 == BigDecimal(75, -2)

    def test_unary(self, assert_components):
        assert_components(-BigDecimal(5, -1), mantissa=-5, exponent=-1)
        assert_components(abs(BigDecimal(-5, -1)), mantissa=5, exponent=-1)
        assert +BigDecimal(5, -1) == BigDecimal(5, -1)
        assert BigDecimal(5, -1).plus() == BigDecimal(5, -1)

    def test_increment_decrement(self):
        assert BigDecimal(5, -1).increment() == BigDecimal(15, -1)
        assert BigDecimal(5, -1).decrement() == BigDecimal(-5, -1)

    def test_truncate(self, assert_components):
        assert_components(BigDecimal(1234, -2).truncate(), mantissa=12, exponent=0)
        assert_components(BigDecimal(-1234, -2).truncate(), mantissa=-12, exponent=0)
        assert_components(BigDecimal(12, 3).truncate(), mantissa=12, exponent=3)

    def test_limit_precision(self, assert_components):
        assert_components(BigDecimal(123456, -3).limit_precision(3), mantissa=123, exponent=0)
        assert_components(BigDecimal(-987, 0).limit_precision(2), mantissa=-98, exponent=1)
        assert_components(BigDecimal(12, 0).limit_precision(5), mantissa=12, exponent=0)

    def test_limit_precision_rejects_zero_digits(self):
        with pytest.raises(ValueError):
            BigDecimal.ONE.limit_precision(0)

    def test_predicates(self):
        assert BigDecimal(12, 1).is_integer()
        assert BigDecimal(120, -1).is_integer()
        assert not BigDecimal(5, -1).is_integer()
        assert BigDecimal(-5, -1).is_negative()
        assert BigDecimal.ZERO.is_zero()
        assert not BigDecimal.ZERO
        assert BigDecimal(-5, -1).sign() == -1


class TestBigDecimalOrdering:
    """Test comparison and equality."""

    def test_compare(self):
        assert BigDecimal(15, -1) < BigDecimal(2, 0)
        assert BigDecimal(-1, 3) < BigDecimal(-999, 0)
        assert BigDecimal(12, 1).compare_to(BigDecimal(120, 0)) == 0

    def test_compare_to_native(self):
        assert BigDecimal(15, -1) > 1
        assert BigDecimal(15, -1) == 1.5
        assert BigDecimal(15, -1) == Decimal("1.50")
        assert BigDecimal(15, -1) < np.float32(2.0)

    def test_compare_to_rational(self):
        assert BigDecimal(3, -1) < Rational(1, 3)
        assert BigDecimal(25, -2) == Rational(1, 4)

    def test_compare_to_unsupported_sorts_before(self):
        assert BigDecimal.ONE.compare_to("1") == 1
        assert BigDecimal.ONE.compare_to(float("nan")) == 1

    def test_not_equal_to_other_types(self):
        assert BigDecimal.ONE != "1"

    def test_hash_matches_rational(self):
        assert hash(BigDecimal(25, -2)) == hash(Rational(1, 4))
        assert hash(BigDecimal(2, 0)) == hash(2)

    def test_hash_matches_builtin_numbers(self):
        assert hash(BigDecimal(5, -1)) == hash(Decimal("0.5")) == hash(0.5)
        assert hash(BigDecimal(-125, -3)) == hash(Decimal("-0.125"))
        assert len({BigDecimal(50, -2), Decimal("0.5"), 0.5, Rational(1, 2)}) == 1


class TestBigDecimalConversion:
    """Test conversion to native values and text."""

    def test_to_rational(self, assert_components):
        assert_components(BigDecimal(125, -3).to_rational(), numerator=125, denominator=1000)
        assert_components(BigDecimal(12, 2).to_rational(), numerator=1200, denominator=1)

    def test_to_int(self):
        assert BigDecimal(1299, -2).to_int() == 12
        assert int(BigDecimal(-1299, -2)) == -12
        assert BigDecimal(3, 4).to_int() == 30000

    def test_to_float(self):
        assert BigDecimal(125, -3).to_float() == 0.125
        assert float(BigDecimal(-1, 1)) == -10.0

    def test_to_decimal(self):
        assert BigDecimal(123, -2).to_decimal() == Decimal("1.23")
        assert BigDecimal(-5, -3).to_decimal() == Decimal("-0.005")
        assert BigDecimal(12, 2).to_decimal() == Decimal(1200)

    def test_to_decimal_overflow(self):
        with pytest.raises(NumericOverflowError):
            BigDecimal(1, 40).to_decimal()

    @pytest.mark.parametrize(
        "value,text",
        [
            (BigDecimal(123, -2), "1.23"),
            (BigDecimal(-5, -3), "-0.005"),
            (BigDecimal(12, 2), "1200"),
            (BigDecimal(-12, 0), "-12"),
            (BigDecimal(5, -1), "0.5"),
            (BigDecimal(0, 0), "0"),
            (BigDecimal(1234, -4), "0.1234"),
        ],
    )
    def test_to_string(self, value, text):
        assert str(value) == text
        assert f"{value}" == text

    def test_format_spec(self):
        assert format(BigDecimal(123, -2), "d") == "123e-2"

    def test_repr(self):
        assert repr(BigDecimal(123, -2)) == "BigDecimal(123, -2)"
