"""
Promotion-governed binary arithmetic.

Both operands are converted to the higher-ranked of their two variants
(Complex > Floating > Rational > Integer), the operation runs on the raw
payloads of that representation, and the raw result is narrowed again.
So Rational(1/2) + Rational(1/2) is Integer(1), and Integer(6) / Integer(4)
is Rational(3/2) rather than a truncated Integer(1).
"""

from __future__ import annotations

import operator
from enum import Enum
from operator import methodcaller
from typing import Any, Callable, Dict, Optional

from ..core.config import settings
from ..core.logging import get_context_logger
from .arithmetic import (
    complex_divide,
    complex_remainder,
    exact_divide,
    exact_remainder,
    float_divide,
    float_remainder,
)
from .numeric import from_python
from .value import Number
from .variant import Variant

logger = get_context_logger(__name__, component="promotion")


class Operation(str, Enum):
    """Binary operators sharing the promotion rule."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    REMAINDER = "remainder"


# Conversion used to bring an operand into each common variant
_CONVERSIONS: Dict[Variant, Callable[[Number], Any]] = {
    Variant.INTEGER: methodcaller("to_integer"),
    Variant.RATIONAL: methodcaller("to_rational"),
    Variant.FLOATING: methodcaller("to_floating"),
    Variant.COMPLEX: methodcaller("to_complex"),
}

_EXACT_KERNELS: Dict[Operation, Callable[[Any, Any], Any]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: exact_divide,
    Operation.REMAINDER: exact_remainder,
}

_KERNELS: Dict[Variant, Dict[Operation, Callable[[Any, Any], Any]]] = {
    Variant.INTEGER: _EXACT_KERNELS,
    Variant.RATIONAL: _EXACT_KERNELS,
    Variant.FLOATING: {
        Operation.ADD: operator.add,
        Operation.SUBTRACT: operator.sub,
        Operation.MULTIPLY: operator.mul,
        Operation.DIVIDE: float_divide,
        Operation.REMAINDER: float_remainder,
    },
    Variant.COMPLEX: {
        Operation.ADD: operator.add,
        Operation.SUBTRACT: operator.sub,
        Operation.MULTIPLY: operator.mul,
        Operation.DIVIDE: complex_divide,
        Operation.REMAINDER: complex_remainder,
    },
}


def promote_types(left: Number, right: Number) -> tuple[Variant, Any, Any]:
    """
    Convert both operands to their common representation.

    Returns:
        Tuple of (common variant, left payload, right payload)

    Example:
        promote_types(Integer(2), Floating(0.5)) → (FLOATING, 2.0, 0.5)
    """
    common = Variant.common(left.variant, right.variant)
    convert = _CONVERSIONS[common]
    return common, convert(left), convert(right)


def binary_operation(operation: Operation, left: Number, right: Number) -> Number:
    """Apply a binary operator to two Numbers and narrow the result."""
    common, left_payload, right_payload = promote_types(left, right)

    if settings.LOG_ARITHMETIC:
        logger.debug(
            f"{operation.value}: {left.variant.label} and {right.variant.label} "
            f"promoted to {common.label}",
            extra_data={
                "operation": operation.value,
                "left": left.variant.label,
                "right": right.variant.label,
                "common": common.label,
            }
        )

    result = _KERNELS[common][operation](left_payload, right_payload)
    return from_python(result)


def coerce(value: Any) -> Optional[Number]:
    """Narrow a plain Python number to a Number; None if it is not numeric."""
    if isinstance(value, Number):
        return value
    try:
        return from_python(value)
    except TypeError:
        return None


def apply(operation: Operation, left: Any, right: Any) -> Number:
    """
    Operator entry point accepting Numbers or plain Python numbers.

    Returns NotImplemented when either operand is not numeric, so Python
    raises the usual TypeError.
    """
    left_number = coerce(left)
    right_number = coerce(right)
    if left_number is None or right_number is None:
        return NotImplemented
    return binary_operation(operation, left_number, right_number)
