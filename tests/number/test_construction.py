"""Tests for Number construction and narrowing."""

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from pydantic import ValidationError

from dynum.core.errors import InvalidStateError
from dynum.math import (
    ComplexNumber,
    FloatingNumber,
    IntegerNumber,
    Number,
    RationalNumber,
    Variant,
    from_complex,
    from_decimal,
    from_float,
    from_fraction,
    from_int,
    number,
)


class TestNarrowingFromDouble:
    """Test the double branch of the narrowing rule."""

    def test_integral_double_narrows_to_integer(self):
        """Test that 3.0 becomes Integer(3)."""
        n = number(3.0)
        assert isinstance(n, IntegerNumber)
        assert n.value == 3
        assert type(n.value) is int

    def test_negative_zero_narrows_to_integer_zero(self):
        """Test that -0.0 is integral and becomes Integer(0)."""
        n = number(-0.0)
        assert n.is_integer
        assert n.value == 0

    def test_large_integral_double_keeps_exact_value(self):
        """Test that 1e300 narrows to the exact integer the double holds."""
        n = from_float(1e300)
        assert n.is_integer
        assert n.value == int(1e300)

    def test_fractional_double_stays_floating(self):
        """Test that 2.5 stays Floating."""
        n = number(2.5)
        assert isinstance(n, FloatingNumber)
        assert n.value == 2.5

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinities_are_floating(self, value):
        """Test that the infinities are Floating, never Integer."""
        n = number(value)
        assert n.is_floating
        assert n.value == value

    def test_nan_is_floating(self):
        """Test that nan is Floating."""
        n = number(math.nan)
        assert n.is_floating
        assert math.isnan(n.value)


class TestNarrowingFromComplex:
    """Test the complex branch of the narrowing rule."""

    def test_zero_imaginary_integral_narrows_to_integer(self):
        """Test that 4+0j becomes Integer(4)."""
        n = number(complex(4.0, 0.0))
        assert isinstance(n, IntegerNumber)
        assert n.value == 4

    def test_zero_imaginary_fractional_narrows_to_floating(self):
        """Test that 2.5+0j becomes Floating(2.5)."""
        n = number(complex(2.5, 0.0))
        assert isinstance(n, FloatingNumber)
        assert n.value == 2.5

    def test_nan_real_with_zero_imaginary_is_floating(self):
        """Test that nan+0j becomes Floating(nan), never Integer."""
        n = number(complex(math.nan, 0.0))
        assert n.is_floating
        assert math.isnan(n.value)

    def test_infinite_real_with_zero_imaginary_is_floating(self):
        """Test that inf+0j becomes Floating(inf)."""
        n = from_complex(complex(math.inf, 0.0))
        assert n.is_floating
        assert n.value == math.inf

    def test_negative_zero_imaginary_still_narrows(self):
        """Test that an imaginary part of -0.0 counts as zero."""
        n = number(complex(7.0, -0.0))
        assert n.is_integer
        assert n.value == 7

    def test_nonzero_imaginary_stays_complex(self):
        """Test that 1+2j stays Complex."""
        n = number(1 + 2j)
        assert isinstance(n, ComplexNumber)
        assert n.value == 1 + 2j

    def test_nan_imaginary_stays_complex(self):
        """Test that a nan imaginary part is not zero."""
        n = number(complex(1.0, math.nan))
        assert n.is_complex


class TestNarrowingFromFraction:
    """Test the exact-fraction branch of the narrowing rule."""

    def test_whole_fraction_narrows_to_integer(self):
        """Test that 4/2 becomes Integer(2)."""
        n = from_fraction(Fraction(4, 2))
        assert isinstance(n, IntegerNumber)
        assert n.value == 2

    def test_proper_fraction_stays_rational(self):
        """Test that 1/3 stays Rational."""
        n = number(Fraction(1, 3))
        assert isinstance(n, RationalNumber)
        assert n.value == Fraction(1, 3)

    def test_fraction_is_kept_in_lowest_terms(self):
        """Test that the payload is reduced."""
        n = number(Fraction(6, -4))
        assert n.value.numerator == -3
        assert n.value.denominator == 2


class TestPrimitiveSources:
    """Test from_python with every supported primitive source."""

    def test_int(self):
        """Test that int is always Integer."""
        assert from_int(10 ** 50).value == 10 ** 50
        assert number(-3).is_integer

    def test_bool(self):
        """Test that bool goes through the integer branch."""
        n = number(True)
        assert n.is_integer
        assert n.value == 1
        assert type(n.value) is int

    @pytest.mark.parametrize(
        "value, expected_variant, expected",
        [
            pytest.param(Decimal("42.000"), Variant.INTEGER, 42, id="integral"),
            pytest.param(Decimal("1E+30"), Variant.INTEGER, 10 ** 30, id="large-integral-exact"),
            pytest.param(Decimal("2.5"), Variant.FLOATING, 2.5, id="fractional"),
            pytest.param(Decimal("-0.125"), Variant.FLOATING, -0.125, id="negative-fractional"),
        ],
    )
    def test_decimal(self, value, expected_variant, expected):
        """Test that Decimal goes through the integer or double branch."""
        n = from_decimal(value)
        assert n.variant is expected_variant
        assert n.to_python() == expected

    def test_decimal_nan_is_floating(self):
        """Test that Decimal NaN goes through the double branch."""
        n = number(Decimal("NaN"))
        assert n.is_floating
        assert math.isnan(n.value)

    @pytest.mark.parametrize("text", ["sNaN", "-sNaN", "-NaN"])
    def test_decimal_signaling_and_signed_nan_are_floating(self, text):
        """Test that every Decimal NaN becomes Floating(nan) without raising."""
        n = from_decimal(Decimal(text))
        assert n.is_floating
        assert math.isnan(n.value)

    def test_comparing_with_signaling_nan_is_false(self):
        """Test that equality against Decimal sNaN does not raise."""
        assert not (number(1) == Decimal("sNaN"))
        assert number(1) != Decimal("sNaN")

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(np.int8(-5), -5, id="int8"),
            pytest.param(np.int64(2 ** 62), 2 ** 62, id="int64"),
            pytest.param(np.uint32(4000000000), 4000000000, id="uint32"),
            pytest.param(np.uint64(2 ** 64 - 1), 2 ** 64 - 1, id="uint64"),
            pytest.param(np.bool_(True), 1, id="bool_"),
        ],
    )
    def test_numpy_integers(self, value, expected):
        """Test that fixed-width integers become Integer."""
        n = number(value)
        assert n.is_integer
        assert n.value == expected
        assert type(n.value) is int

    def test_numpy_float32_fraction(self):
        """Test that single precision widens to the exact double."""
        n = number(np.float32(0.1))
        assert n.is_floating
        assert n.value == float(np.float32(0.1))
        assert n.value != 0.1

    def test_numpy_float32_integral(self):
        """Test that integral single precision narrows to Integer."""
        n = number(np.float32(2.0))
        assert n.is_integer
        assert n.value == 2

    def test_numpy_complex(self):
        """Test that numpy complex scalars follow the complex branch."""
        assert number(np.complex128(3 + 0j)) == IntegerNumber(3)
        assert number(np.complex64(1 + 1j)).is_complex

    def test_number_passes_through(self):
        """Test that an existing Number is returned unchanged."""
        n = number(Fraction(1, 3))
        assert number(n) is n
        assert Number.from_python(n) is n

    @pytest.mark.parametrize("value", ["3", None, [1], object()])
    def test_unsupported_values_raise_type_error(self, value):
        """Test that non-numeric values are rejected."""
        with pytest.raises(TypeError):
            number(value)


class TestDirectConstruction:
    """Test building variants directly, bypassing the narrowing constructors."""

    def test_rational_with_denominator_one_is_invalid(self):
        """Test that Rational(2/1) fails fast."""
        with pytest.raises(InvalidStateError) as exc_info:
            RationalNumber(Fraction(4, 2))
        assert exc_info.value.details["variant"] == "Rational"

    def test_floating_with_integral_value_is_invalid(self):
        """Test that Floating(3.0) fails fast."""
        with pytest.raises(InvalidStateError):
            FloatingNumber(3.0)

    def test_complex_with_zero_imaginary_is_invalid(self):
        """Test that Complex(2+0j) fails fast."""
        with pytest.raises(InvalidStateError):
            ComplexNumber(complex(2, 0))

    def test_floating_accepts_non_finite(self):
        """Test that nan and inf are valid Floating payloads."""
        assert FloatingNumber(math.inf).value == math.inf
        assert math.isnan(FloatingNumber(math.nan).value)

    def test_integer_rejects_string(self, assert_validation_error):
        """Test that the integer payload is strictly typed."""
        assert_validation_error(IntegerNumber, {"value": "3"}, expected_field="value")

    def test_integer_rejects_bool(self, assert_validation_error):
        """Test that bool is not accepted as an integer payload."""
        assert_validation_error(IntegerNumber, {"value": True}, expected_field="value")

    def test_floating_rejects_string(self, assert_validation_error):
        """Test that the double payload is strictly typed."""
        assert_validation_error(FloatingNumber, {"value": "0.5"}, expected_field="value")

    def test_number_is_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Number()


class TestImmutability:
    """Test that Numbers are frozen values."""

    def test_assignment_is_rejected(self):
        """Test that the payload cannot be reassigned."""
        n = IntegerNumber(1)
        with pytest.raises(ValidationError):
            n.value = 2
        assert n.value == 1

    def test_operations_return_new_values(self):
        """Test that arithmetic leaves its operands untouched."""
        a = number(Fraction(1, 2))
        b = a + a
        assert a.value == Fraction(1, 2)
        assert b is not a


class TestVariantPredicates:
    """Test that each predicate reports the exact current tag."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(7, "is_integer", id="integer"),
            pytest.param(Fraction(1, 7), "is_rational", id="rational"),
            pytest.param(0.7, "is_floating", id="floating"),
            pytest.param(7j + 1, "is_complex", id="complex"),
        ],
    )
    def test_exactly_one_predicate_is_true(self, value, expected):
        """Test that one predicate holds and the other three do not."""
        n = number(value)
        predicates = ["is_integer", "is_rational", "is_floating", "is_complex"]
        for predicate in predicates:
            assert getattr(n, predicate) is (predicate == expected)

    def test_predicate_is_not_representability(self):
        """Test that an Integer is not reported as Rational or Floating."""
        n = number(2)
        assert not n.is_rational
        assert not n.is_floating
