"""
Variant tags for Number values.

The tag identifies which representation a Number holds. Its integer value is
the promotion rank: a binary operator converts both operands to the variant
with the higher rank.
"""

from enum import IntEnum


class Variant(IntEnum):
    """
    Number representation tag, ordered by promotion precedence.

    Lower values promote to higher values.
    """

    INTEGER = 0  # Arbitrary-precision int
    RATIONAL = 1  # Exact Fraction
    FLOATING = 2  # IEEE double
    COMPLEX = 3  # Pair of doubles

    @property
    def label(self) -> str:
        """Name used in debug representations, e.g. ``Rational``."""
        return self.name.capitalize()

    @classmethod
    def common(cls, left: "Variant", right: "Variant") -> "Variant":
        """The variant both operands promote to."""
        return max(left, right)
