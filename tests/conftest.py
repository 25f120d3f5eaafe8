"""
Shared pytest fixtures and utilities for testing the Number models.

This module provides:
- Sample Numbers of every variant
- Utilities for testing Pydantic validation
- A log capture helper for the dynum logger
"""

import math
from fractions import Fraction

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from dynum.math import ComplexNumber, FloatingNumber, IntegerNumber, RationalNumber


SAMPLE_PAYLOADS = {
    "integer": [0, 1, -1, 7, -12, 10 ** 30],
    "rational": [Fraction(1, 2), Fraction(-3, 4), Fraction(22, 7), Fraction(1, 10 ** 20)],
    "floating": [0.5, -2.25, 1e-300, math.inf, -math.inf],
    "complex": [complex(1, 1), complex(-2.5, 0.5), complex(0, 3), complex(4, -1)],
}


def sample_numbers():
    """One list of Numbers covering every variant, NaN excluded."""
    return (
        [IntegerNumber(v) for v in SAMPLE_PAYLOADS["integer"]]
        + [RationalNumber(v) for v in SAMPLE_PAYLOADS["rational"]]
        + [FloatingNumber(v) for v in SAMPLE_PAYLOADS["floating"]]
        + [ComplexNumber(v) for v in SAMPLE_PAYLOADS["complex"]]
    )


@pytest.fixture
def numbers_of_every_variant():
    """Numbers covering all four variants."""
    return sample_numbers()


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
        expected_type: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)
            expected_type: Expected error type (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        if expected_type:
            assert any(
                expected_type in str(e['type']).lower() for e in error.errors()
            ), f"Expected error type containing '{expected_type}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and rebuilt."""
    def _assert_serialization(model: BaseModel, model_class: Type[BaseModel]) -> BaseModel:
        """
        Assert that a model can be serialized to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump()
        reconstructed = model_class(**serialized)
        assert reconstructed.model_dump() == serialized
        return reconstructed

    return _assert_serialization


@pytest.fixture
def dynum_caplog(caplog):
    """caplog that sees records from the dynum logger at DEBUG level."""
    caplog.set_level("DEBUG", logger="dynum")
    return caplog
