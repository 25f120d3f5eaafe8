"""
Number exceptions.

Defines the exception hierarchy raised by the Number algebra. Every error
carries a human-readable message and a details dict for structured logging.
"""

from typing import Any, Dict, NoReturn, Optional

from .logging import get_context_logger

logger = get_context_logger(__name__, component="errors")


# Custom Exceptions

class NumberError(Exception):
    """Base exception for Number errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidStateError(NumberError):
    """Raised when a variant holds a payload that breaks the narrowing rule"""

    def __init__(self, variant: str, payload: Any, reason: str):
        super().__init__(
            message=f"Invalid {variant} payload {payload!r}: {reason}",
            details={"variant": variant, "payload": repr(payload), "reason": reason}
        )


class DivisionByZeroError(NumberError, ZeroDivisionError):
    """Raised when an exact (Integer or Rational) division has a zero divisor"""

    def __init__(self, operation: str, dividend: Any):
        super().__init__(
            message=f"Exact {operation} of {dividend!r} by zero",
            details={"operation": operation, "dividend": repr(dividend)}
        )


class ConversionError(NumberError, ValueError):
    """Raised when a non-finite double cannot be converted to an exact value"""

    def __init__(self, target: str, value: Any):
        super().__init__(
            message=f"Cannot convert {value!r} to {target}",
            details={"target": target, "value": repr(value)}
        )


def raise_error(error: NumberError, cause: Optional[BaseException] = None) -> NoReturn:
    """Log an error at debug level and raise it, chained to its cause."""
    logger.debug(
        f"Raising {error.__class__.__name__}: {error.message}",
        extra_data={"error_type": error.__class__.__name__, **error.details}
    )
    raise error from cause
