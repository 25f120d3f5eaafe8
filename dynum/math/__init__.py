"""
dynum.math - the Number algebra

One self-narrowing numeric value type over four representations:
- Integer (int), Rational (Fraction), Floating (float), Complex (complex)
- Narrowing to the most specific exact variant at every construction
- Promotion of mixed-variant operands to a common representation
- Exact division and power-of-two shifts for Integer and Rational
"""

from .constants import HALF, MINUS_HALF, MINUS_ONE, NAN, ONE, ZERO
from .functions import absolute, inverse
from .numeric import (
    ComplexNumber,
    FloatingNumber,
    IntegerNumber,
    RationalNumber,
    from_complex,
    from_decimal,
    from_float,
    from_fraction,
    from_int,
    from_python,
)
from .promotion import Operation, binary_operation, promote_types
from .value import Number
from .variant import Variant

number = from_python

__all__ = [
    "Number",
    "Variant",
    "IntegerNumber",
    "RationalNumber",
    "FloatingNumber",
    "ComplexNumber",
    "number",
    "from_python",
    "from_int",
    "from_fraction",
    "from_float",
    "from_complex",
    "from_decimal",
    "Operation",
    "binary_operation",
    "promote_types",
    "absolute",
    "inverse",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "HALF",
    "MINUS_HALF",
    "NAN",
]
