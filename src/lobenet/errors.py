"""
Custom exception classes and validation utilities for lobenet.

This module provides:
1. Hierarchical exception classes for different error categories
2. Validation utilities that enforce lobe shape and range contracts
3. Consistent error message formatting across components

Exception Hierarchy:
====================
LobeError (base)
├── ConfigurationError - Invalid configuration parameters
├── ShapeMismatchError - Buffer or vector has the wrong length (also ValueError)
├── ColumnRangeError - Column index outside the lobe (also IndexError)
└── ParameterLayoutError - Unknown layout version or segment

Usage Examples:
===============
    # Validate a flat parameter vector before reconstruction
    validate_length(params, expected=layout.total_size, name="parameters")

    # Validate a column index
    validate_column(which, limit=lobe.width, name="threshold column")

All checks run unconditionally. Failing operations never mutate lobe state.

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

import math
from typing import Any, Optional


# =============================================================================
# Exception Hierarchy
# =============================================================================

class LobeError(Exception):
    """Base exception for all lobenet-specific errors.

    All custom exceptions in lobenet inherit from this class, enabling
    code to catch lobenet errors specifically:

        try:
            lobe = Lobe.from_parameters(dims, params)
        except LobeError as e:
            logger.error(f"Lobe error: {e}")
    """


class ConfigurationError(LobeError):
    """Invalid configuration parameters.

    Raised when configuration values are out of valid range or incompatible
    with each other.

    Example:
        raise ConfigurationError("breadth must be positive, got 0")
    """


class ShapeMismatchError(LobeError, ValueError):
    """A buffer or vector does not have the length the lobe requires.

    Args:
        name: What was being validated (e.g., "parameters", "input")
        expected: Required length
        actual: Length actually received

    Example:
        raise ShapeMismatchError("input", expected=8, actual=7)
    """

    def __init__(self, name: str, expected: int, actual: Any):
        super().__init__(
            f"{name} shape mismatch: expected length {expected}, got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class ColumnRangeError(LobeError, IndexError):
    """Column index at or beyond the number of columns in a buffer.

    Args:
        which: Requested column index
        limit: Largest valid index (inclusive)
        name: Which buffer was addressed
    """

    def __init__(self, which: int, limit: int, name: str = "column"):
        super().__init__(
            f"{name} index {which} out of range, valid range is 0..{limit}"
        )
        self.which = which
        self.limit = limit
        self.name = name


class ParameterLayoutError(LobeError):
    """Flat parameter layout cannot be interpreted.

    Raised for unsupported layout versions and unknown segment names.

    Example:
        raise ParameterLayoutError("Parameter layout version 2 not supported")
    """


# =============================================================================
# Validation Utilities
# =============================================================================

def validate_length(
    values: Any,
    expected: int,
    name: str = "values",
) -> None:
    """Validate that a 1-D vector has exactly ``expected`` elements.

    Accepts tensors, numpy arrays and plain sequences. Multi-dimensional
    tensors are rejected even when their element count matches.

    Args:
        values: Vector to check
        expected: Required number of elements
        name: Name for error messages

    Raises:
        ShapeMismatchError: If the length (or dimensionality) is wrong
    """
    shape = getattr(values, "shape", None)
    if shape is not None:
        if len(shape) != 1:
            raise ShapeMismatchError(name, expected, tuple(shape))
        actual = int(shape[0])
    else:
        actual = len(values)

    if actual != expected:
        raise ShapeMismatchError(name, expected, actual)


def validate_column(
    which: int,
    limit: int,
    name: str = "column",
) -> None:
    """Validate that ``0 <= which <= limit``.

    Raises:
        ColumnRangeError: If the index falls outside the range
    """
    if which < 0 or which > limit:
        raise ColumnRangeError(which, limit, name)


def validate_positive(
    value: int,
    name: str,
    allow_zero: bool = False,
) -> None:
    """Validate that a value is positive.

    Args:
        value: Value to check
        name: Parameter name for error messages
        allow_zero: Whether zero is acceptable (default: False)

    Raises:
        ConfigurationError: If value not positive
    """
    if allow_zero:
        if value < 0:
            raise ConfigurationError(f"{name} must be non-negative, got {value}")
    else:
        if value <= 0:
            raise ConfigurationError(f"{name} must be positive, got {value}")


def validate_finite(
    value: float,
    name: str,
    error: Optional[type] = None,
) -> None:
    """Validate that a scalar is neither NaN nor infinite.

    Raises:
        ConfigurationError: (or ``error`` if given) when the value is not finite
    """
    if not math.isfinite(float(value)):
        raise (error or ConfigurationError)(f"{name} must be finite, got {value}")


__all__ = [
    # Exception classes
    "LobeError",
    "ConfigurationError",
    "ShapeMismatchError",
    "ColumnRangeError",
    "ParameterLayoutError",
    # Validation utilities
    "validate_length",
    "validate_column",
    "validate_positive",
    "validate_finite",
]
