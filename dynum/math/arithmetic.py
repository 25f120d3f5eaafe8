"""
Arithmetic kernels on raw payloads.

These functions operate on plain ``int``, ``Fraction``, ``float`` and
``complex`` values, after the operands have been promoted to a common
representation. Exact kernels raise DivisionByZeroError on a zero divisor;
floating and complex kernels follow IEEE-754 and never raise.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Union

from ..core.errors import DivisionByZeroError, raise_error

Exact = Union[int, Fraction]


# Widening to double


def int_to_float(value: int) -> float:
    """Convert an int to the nearest double, saturating to +/-inf out of range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def fraction_to_float(value: Fraction) -> float:
    """Convert a Fraction to the nearest double, saturating to +/-inf out of range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# Exact kernels


def exact_divide(left: Exact, right: Exact) -> Fraction:
    """
    Exact quotient of two ints or Fractions.

    Int / int is never truncated: 6 / 4 is Fraction(3, 2).

    Raises:
        DivisionByZeroError: If right is zero
    """
    try:
        return Fraction(left) / Fraction(right)
    except ZeroDivisionError as exc:
        raise_error(DivisionByZeroError("division", left), exc)


def exact_remainder(left: Exact, right: Exact) -> Exact:
    """
    Truncated remainder ``left - right * trunc(left / right)``.

    The sign of a nonzero result follows the dividend: -7 % 2 is -1.

    Raises:
        DivisionByZeroError: If right is zero
    """
    try:
        quotient = Fraction(left) / Fraction(right)
    except ZeroDivisionError as exc:
        raise_error(DivisionByZeroError("remainder", left), exc)
    return left - right * math.trunc(quotient)


def exact_reciprocal(value: Exact) -> Fraction:
    """Exact 1 / value."""
    try:
        return 1 / Fraction(value)
    except ZeroDivisionError as exc:
        raise_error(DivisionByZeroError("inverse", 1), exc)


# IEEE kernels


def float_divide(left: float, right: float) -> float:
    """IEEE division: x / 0.0 is a signed infinity, 0 / 0 is nan."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def float_remainder(left: float, right: float) -> float:
    """C fmod semantics; nan where fmod is undefined instead of an error."""
    if right == 0.0 or math.isinf(left):
        return math.nan
    return math.fmod(left, right)


def truncate(value: float) -> float:
    """Round toward zero, leaving nan and infinities as they are."""
    if not math.isfinite(value):
        return value
    return float(math.trunc(value))


def complex_magnitude(value: complex) -> float:
    """|value|, or inf where the magnitude exceeds the double range."""
    try:
        return abs(value)
    except OverflowError:
        return math.inf


def complex_divide(left: complex, right: complex) -> complex:
    """Complex division; a zero divisor gives nan+nanj instead of an error."""
    if right == 0:
        return complex(math.nan, math.nan)
    return left / right


def complex_remainder(left: complex, right: complex) -> complex:
    """
    Complex remainder ``l - r * trunc(l / r)``.

    The quotient's real and imaginary parts are truncated toward zero
    independently, not by magnitude. (5+3j) % 2 is (1+1j).
    """
    quotient = complex_divide(left, right)
    truncated = complex(truncate(quotient.real), truncate(quotient.imag))
    return left - right * truncated


# Powers of two


def power_of_two(exponent: int) -> float:
    """The double 2**exponent, or inf when it exceeds the double range."""
    try:
        return math.ldexp(1.0, exponent)
    except OverflowError:
        return math.inf


def scale_complex(value: complex, factor: float) -> complex:
    """Multiply both components of a complex by a real factor."""
    return complex(value.real * factor, value.imag * factor)


def unscale_complex(value: complex, factor: float) -> complex:
    """Divide both components of a complex by a nonzero real factor."""
    return complex(value.real / factor, value.imag / factor)
