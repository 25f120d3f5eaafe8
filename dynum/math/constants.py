"""Canonical Number constants, built once at import."""

import math
from fractions import Fraction

from .numeric import FloatingNumber, IntegerNumber, RationalNumber

ZERO = IntegerNumber(0)
ONE = IntegerNumber(1)
MINUS_ONE = IntegerNumber(-1)
HALF = RationalNumber(Fraction(1, 2))
MINUS_HALF = RationalNumber(Fraction(-1, 2))
NAN = FloatingNumber(math.nan)
