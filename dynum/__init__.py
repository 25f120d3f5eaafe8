"""dynum - a unified numeric value type.

Main namespace package:
- dynum.math: the Number algebra (variants, narrowing, promotion)
- dynum.core: configuration, logging and errors
"""

__version__ = "0.1.0"

from .core.errors import (
    ConversionError,
    DivisionByZeroError,
    InvalidStateError,
    NumberError,
)
from .math import (
    HALF,
    MINUS_HALF,
    MINUS_ONE,
    NAN,
    ONE,
    ZERO,
    ComplexNumber,
    FloatingNumber,
    IntegerNumber,
    Number,
    RationalNumber,
    Variant,
    absolute,
    inverse,
    number,
)

__all__ = [
    "Number",
    "Variant",
    "IntegerNumber",
    "RationalNumber",
    "FloatingNumber",
    "ComplexNumber",
    "number",
    "absolute",
    "inverse",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "HALF",
    "MINUS_HALF",
    "NAN",
    "NumberError",
    "InvalidStateError",
    "DivisionByZeroError",
    "ConversionError",
]
