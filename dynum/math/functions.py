"""Free functions over Numbers and plain Python numbers."""

from __future__ import annotations

from typing import Any

from .value import Number


def absolute(value: Any) -> Number:
    """
    Absolute value of a Number or plain number.

    The magnitude of a complex value is a real result: Floating, or Integer
    when it is integral, e.g. absolute(3+4j) is Integer(5).
    """
    return abs(Number.from_python(value))


def inverse(value: Any) -> Number:
    """
    Reciprocal of a Number or plain number.

    Exact for Integer and Rational, raising DivisionByZeroError for zero.
    IEEE for Floating: inverse(0.5) is Integer(2), inverse(nan) is nan.
    """
    return Number.from_python(value).inverse()
