"""
Number variants: Integer, Rational, Floating, Complex.

The four variants form a closed set. Each one is a frozen model whose only
field is its typed payload, and each validates that it holds the narrowest
representation of its value:

- Rational never has denominator 1
- Floating never holds a finite integral double
- Complex never has a zero imaginary part

Values should be built with the narrowing constructors at the bottom of this
module (or Number.from_python), which pick the variant from the value.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, ClassVar

import numpy as np
from pydantic import Field, model_validator

from ..core.errors import ConversionError, InvalidStateError, raise_error
from .arithmetic import (
    complex_divide,
    complex_magnitude,
    exact_reciprocal,
    float_divide,
    fraction_to_float,
    int_to_float,
    power_of_two,
    scale_complex,
    unscale_complex,
)
from .value import Number
from .variant import Variant


def _double_to_integer(value: float) -> int:
    if not math.isfinite(value):
        raise_error(ConversionError("integer", value))
    return math.trunc(value)


def _double_to_rational(value: float) -> Fraction:
    if not math.isfinite(value):
        raise_error(ConversionError("rational", value))
    return Fraction(value)


class IntegerNumber(Number):
    """
    Arbitrary-precision integer value.

    The narrowest variant: every exact integral value ends up here.
    """

    variant: ClassVar[Variant] = Variant.INTEGER

    value: int = Field(strict=True, description="The integer payload")

    def __init__(self, value: int, **kwargs):
        super().__init__(value=value, **kwargs)

    def to_integer(self) -> int:
        return self.value

    def to_rational(self) -> Fraction:
        return Fraction(self.value)

    def to_floating(self) -> float:
        return int_to_float(self.value)

    def to_complex(self) -> complex:
        return complex(int_to_float(self.value), 0.0)

    def to_python(self) -> int:
        return self.value

    def __neg__(self) -> Number:
        return from_int(-self.value)

    def __abs__(self) -> Number:
        return from_int(abs(self.value))

    def increment(self) -> Number:
        return from_int(self.value + 1)

    def decrement(self) -> Number:
        return from_int(self.value - 1)

    def inverse(self) -> Number:
        """Exact 1/value, a Rational unless value is 1 or -1."""
        return from_fraction(exact_reciprocal(self.value))

    def multiply_by_power_of_two(self, count: int) -> Number:
        return from_int(self.value << count)

    def divide_by_power_of_two(self, count: int) -> Number:
        # Exact, not a bit shift: 1 >> 1 is 1/2
        return from_fraction(Fraction(self.value, 1 << count))


class RationalNumber(Number):
    """
    Exact rational value with a denominator greater than one.

    Reference: fractions.Fraction keeps the payload in lowest terms.
    """

    variant: ClassVar[Variant] = Variant.RATIONAL

    value: Fraction = Field(description="The fraction payload, in lowest terms")

    def __init__(self, value: Fraction, **kwargs):
        super().__init__(value=value, **kwargs)

    @model_validator(mode="after")
    def check_narrowed(self) -> RationalNumber:
        if self.value.denominator == 1:
            raise_error(InvalidStateError("Rational", self.value, "denominator is 1"))
        return self

    def to_integer(self) -> int:
        return math.trunc(self.value)

    def to_rational(self) -> Fraction:
        return self.value

    def to_floating(self) -> float:
        return fraction_to_float(self.value)

    def to_complex(self) -> complex:
        return complex(fraction_to_float(self.value), 0.0)

    def to_python(self) -> Fraction:
        return self.value

    def __neg__(self) -> Number:
        return from_fraction(-self.value)

    def __abs__(self) -> Number:
        return from_fraction(abs(self.value))

    def increment(self) -> Number:
        return from_fraction(self.value + 1)

    def decrement(self) -> Number:
        return from_fraction(self.value - 1)

    def inverse(self) -> Number:
        return from_fraction(exact_reciprocal(self.value))

    def multiply_by_power_of_two(self, count: int) -> Number:
        return from_fraction(self.value * (1 << count))

    def divide_by_power_of_two(self, count: int) -> Number:
        return from_fraction(self.value / (1 << count))


class FloatingNumber(Number):
    """
    IEEE double value that is not a finite integer.

    Holds fractional doubles as well as nan and the infinities. Arithmetic
    follows IEEE-754 and never raises.
    """

    variant: ClassVar[Variant] = Variant.FLOATING

    value: float = Field(strict=True, description="The double payload")

    def __init__(self, value: float, **kwargs):
        super().__init__(value=value, **kwargs)

    @model_validator(mode="after")
    def check_narrowed(self) -> FloatingNumber:
        if math.isfinite(self.value) and self.value.is_integer():
            raise_error(InvalidStateError("Floating", self.value, "finite integral double"))
        return self

    def to_integer(self) -> int:
        """Truncate toward zero; nan and the infinities raise ConversionError."""
        return _double_to_integer(self.value)

    def to_rational(self) -> Fraction:
        """The exact binary value of the double; non-finite raises ConversionError."""
        return _double_to_rational(self.value)

    def to_floating(self) -> float:
        return self.value

    def to_complex(self) -> complex:
        return complex(self.value, 0.0)

    def to_python(self) -> float:
        return self.value

    def __neg__(self) -> Number:
        return from_float(-self.value)

    def __abs__(self) -> Number:
        return from_float(math.fabs(self.value))

    def increment(self) -> Number:
        return from_float(self.value + 1.0)

    def decrement(self) -> Number:
        return from_float(self.value - 1.0)

    def inverse(self) -> Number:
        """IEEE 1.0/value: inf for zero, nan for nan."""
        return from_float(float_divide(1.0, self.value))

    def multiply_by_power_of_two(self, count: int) -> Number:
        return from_float(self.value * power_of_two(count))

    def divide_by_power_of_two(self, count: int) -> Number:
        return from_float(self.value / power_of_two(count))


class ComplexNumber(Number):
    """
    Complex value with a nonzero imaginary part.

    Conversions to the real variants use the real part only.
    """

    variant: ClassVar[Variant] = Variant.COMPLEX

    value: complex = Field(description="The complex payload")

    def __init__(self, value: complex, **kwargs):
        super().__init__(value=value, **kwargs)

    @model_validator(mode="after")
    def check_narrowed(self) -> ComplexNumber:
        if self.value.imag == 0.0:
            raise_error(InvalidStateError("Complex", self.value, "imaginary part is zero"))
        return self

    def to_integer(self) -> int:
        return _double_to_integer(self.value.real)

    def to_rational(self) -> Fraction:
        return _double_to_rational(self.value.real)

    def to_floating(self) -> float:
        return self.value.real

    def to_complex(self) -> complex:
        return self.value

    def to_python(self) -> complex:
        return self.value

    def format_payload(self) -> str:
        return str(self.value).strip("()")

    def __neg__(self) -> Number:
        return from_complex(-self.value)

    def __abs__(self) -> Number:
        """The magnitude, narrowed as a double (never Complex)."""
        return from_float(complex_magnitude(self.value))

    def increment(self) -> Number:
        return from_complex(self.value + 1.0)

    def decrement(self) -> Number:
        return from_complex(self.value - 1.0)

    def inverse(self) -> Number:
        return from_complex(complex_divide(complex(1.0, 0.0), self.value))

    def multiply_by_power_of_two(self, count: int) -> Number:
        return from_complex(scale_complex(self.value, power_of_two(count)))

    def divide_by_power_of_two(self, count: int) -> Number:
        return from_complex(unscale_complex(self.value, power_of_two(count)))


# Narrowing constructors


def from_int(value: int) -> Number:
    """Integer, always."""
    return IntegerNumber(int(value))


def from_fraction(value: Fraction) -> Number:
    """Integer when the denominator is 1, else Rational."""
    if value.denominator == 1:
        return IntegerNumber(value.numerator)
    return RationalNumber(value)


def from_float(value: float) -> Number:
    """Integer for finite integral doubles, else Floating (including nan and inf)."""
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return IntegerNumber(int(value))
    return FloatingNumber(value)


def from_complex(value: complex) -> Number:
    """The real part's variant when the imaginary part is 0, else Complex."""
    value = complex(value)
    if value.imag == 0.0:
        return from_float(value.real)
    return ComplexNumber(value)


def from_decimal(value: Decimal) -> Number:
    """Integral finite decimals stay exact; anything else goes through a double."""
    # float() refuses signaling NaN
    if value.is_nan():
        return from_float(math.copysign(math.nan, -1.0 if value.is_signed() else 1.0))
    if value.is_finite() and value == value.to_integral_value():
        return from_int(int(value))
    return from_float(float(value))


def from_python(value: Any) -> Number:
    """
    Convert any supported numeric value to the narrowest Number.

    Args:
        value: Number, bool, int, Fraction, Decimal, float, complex,
            numpy scalar, or any numbers.Complex

    Returns:
        The Number of the narrowest exact variant

    Raises:
        TypeError: For non-numeric values, including strings
    """
    if isinstance(value, Number):
        return value

    # numpy fixed-width scalars
    elif isinstance(value, np.generic):
        if isinstance(value, (np.bool_, np.integer)):
            return from_int(int(value))
        elif isinstance(value, np.floating):
            return from_float(float(value))
        elif isinstance(value, np.complexfloating):
            return from_complex(complex(value))

    # bool is a subclass of int
    elif isinstance(value, numbers.Integral):
        return from_int(int(value))

    elif isinstance(value, Fraction):
        return from_fraction(value)

    elif isinstance(value, Decimal):
        return from_decimal(value)

    elif isinstance(value, numbers.Rational):
        return from_fraction(Fraction(value.numerator, value.denominator))

    elif isinstance(value, numbers.Real):
        return from_float(float(value))

    elif isinstance(value, numbers.Complex):
        return from_complex(complex(value))

    raise TypeError(f"Cannot convert {type(value).__name__} to Number")
