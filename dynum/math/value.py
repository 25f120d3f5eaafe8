"""
Base Number class for the dynum numeric algebra.

This module provides the foundation for self-narrowing numeric values with:
- Variant tags ordered by promotion precedence
- Operator overloading that promotes mixed-variant operands
- Structural equality and hashing on (variant, payload)
- A debug representation of the form ``Variant(payload)``

Concrete variants live in ``numeric.py``; every Number is one of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from fractions import Fraction
from numbers import Integral
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict

from .variant import Variant

Payload = Union[int, Fraction, float, complex]


class Number(BaseModel, ABC):
    """
    Base class for all Number variants.

    Provides:
    - Variant predicates
    - Widening conversions (to_integer, to_rational, to_floating, to_complex)
    - Operator overloading (+, -, *, /, %, <<, >>, unary +/-, abs)
    - Equality, hashing and debug representation

    Subclasses must implement:
    - variant: Class variable naming the representation
    - value: The typed payload field
    - All abstract methods

    Instances are frozen. A variant is only ever built holding the narrowest
    representation of its value, so a Number never needs re-checking after
    construction.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Representation tag (must be set by subclasses)
    variant: ClassVar[Variant]

    # Construction

    @classmethod
    def from_python(cls, value: Any) -> Number:
        """
        Convert a Python value to the narrowest Number representing it.

        Args:
            value: int, Fraction, float, complex, Decimal, numpy scalar or Number

        Returns:
            Number of the narrowest exact variant

        Raises:
            TypeError: If value is not a supported numeric type

        Example:
            Number.from_python(3.0) → Integer(3)
        """
        # Import here to avoid circular imports
        from .numeric import from_python

        return from_python(value)

    # Variant queries

    @property
    def is_integer(self) -> bool:
        """True if this Number holds an arbitrary-precision int."""
        return self.variant is Variant.INTEGER

    @property
    def is_rational(self) -> bool:
        """True if this Number holds a non-integral Fraction."""
        return self.variant is Variant.RATIONAL

    @property
    def is_floating(self) -> bool:
        """True if this Number holds a non-integral or non-finite double."""
        return self.variant is Variant.FLOATING

    @property
    def is_complex(self) -> bool:
        """True if this Number holds a complex with nonzero imaginary part."""
        return self.variant is Variant.COMPLEX

    # Widening conversions

    @abstractmethod
    def to_integer(self) -> int:
        """Truncate toward zero; complex values use their real part."""

    @abstractmethod
    def to_rational(self) -> Fraction:
        """Exact Fraction; a double converts to its exact binary value."""

    @abstractmethod
    def to_floating(self) -> float:
        """Nearest double; complex values use their real part."""

    @abstractmethod
    def to_complex(self) -> complex:
        """Complex with the value widened to doubles."""

    @abstractmethod
    def to_python(self) -> Payload:
        """The payload as a plain Python number."""

    def __int__(self) -> int:
        return self.to_integer()

    def __float__(self) -> float:
        return self.to_floating()

    def __complex__(self) -> complex:
        return self.to_complex()

    def __bool__(self) -> bool:
        return self.to_python() != 0

    # Per-variant operations

    @abstractmethod
    def __neg__(self) -> Number:
        """Unary negation: -self"""

    @abstractmethod
    def __abs__(self) -> Number:
        """Absolute value; the magnitude for complex values."""

    @abstractmethod
    def increment(self) -> Number:
        """self + 1, computed in this variant's representation."""

    @abstractmethod
    def decrement(self) -> Number:
        """self - 1, computed in this variant's representation."""

    @abstractmethod
    def inverse(self) -> Number:
        """Reciprocal; exact for Integer and Rational."""

    @abstractmethod
    def multiply_by_power_of_two(self, count: int) -> Number:
        """self * 2**count for count >= 0."""

    @abstractmethod
    def divide_by_power_of_two(self, count: int) -> Number:
        """self / 2**count for count >= 0, exact for Integer and Rational."""

    def __pos__(self) -> Number:
        """Unary positive: +self"""
        return self

    # Binary operators (promoted to the common variant)

    def __add__(self, other: Any) -> Number:
        """Addition: self + other"""
        return _dispatch("add", self, other)

    def __radd__(self, other: Any) -> Number:
        """Right addition: other + self"""
        return _dispatch("add", other, self)

    def __sub__(self, other: Any) -> Number:
        """Subtraction: self - other"""
        return _dispatch("subtract", self, other)

    def __rsub__(self, other: Any) -> Number:
        """Right subtraction: other - self"""
        return _dispatch("subtract", other, self)

    def __mul__(self, other: Any) -> Number:
        """Multiplication: self * other"""
        return _dispatch("multiply", self, other)

    def __rmul__(self, other: Any) -> Number:
        """Right multiplication: other * self"""
        return _dispatch("multiply", other, self)

    def __truediv__(self, other: Any) -> Number:
        """Division: self / other, exact for Integer and Rational operands"""
        return _dispatch("divide", self, other)

    def __rtruediv__(self, other: Any) -> Number:
        """Right division: other / self"""
        return _dispatch("divide", other, self)

    def __mod__(self, other: Any) -> Number:
        """Remainder: self % other, truncated toward zero"""
        return _dispatch("remainder", self, other)

    def __rmod__(self, other: Any) -> Number:
        """Right remainder: other % self"""
        return _dispatch("remainder", other, self)

    # Shifts (scaling by powers of two)

    def __lshift__(self, count: Any) -> Number:
        """self * 2**count; a negative count shifts right."""
        if isinstance(count, bool) or not isinstance(count, Integral):
            return NotImplemented
        count = int(count)
        if count < 0:
            return self.__rshift__(-count)
        return self.multiply_by_power_of_two(count)

    def __rshift__(self, count: Any) -> Number:
        """self / 2**count; a negative count shifts left."""
        if isinstance(count, bool) or not isinstance(count, Integral):
            return NotImplemented
        count = int(count)
        if count < 0:
            return self.__lshift__(-count)
        return self.divide_by_power_of_two(count)

    # Equality and hashing

    def __eq__(self, other: Any) -> bool:
        """Same variant and equal payload; plain numbers are narrowed first."""
        if not isinstance(other, Number):
            try:
                other = Number.from_python(other)
            except TypeError:
                return NotImplemented
        return self.variant is other.variant and self.to_python() == other.to_python()

    def __ne__(self, other: Any) -> bool:
        """Inequality."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.to_python())

    # String representations

    def format_payload(self) -> str:
        """Payload text used inside the debug representation."""
        return str(self.to_python())

    def to_string(self) -> str:
        """Debug representation, e.g. ``Rational(1/2)``."""
        return f"{self.variant.label}({self.format_payload()})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return self.to_string()


def _dispatch(operation: str, left: Any, right: Any) -> Number:
    # Import here to avoid circular imports
    from .promotion import Operation, apply

    return apply(Operation(operation), left, right)
