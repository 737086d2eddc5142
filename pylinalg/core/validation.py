"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion (except dtype/str -> numpy scalar type)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np

from pylinalg.core.categories import is_matrix_category, is_vector_category
from pylinalg.core.elements import is_matrix_element
from pylinalg.core.exceptions import (
    DimensionError,
    ElementTypeError,
    EngineTypeError,
    ExtentError,
    InvalidSizeError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_element_type(element_type: Any, name: str = 'element_type') -> type:
    """
    Validate an element type and normalize it to a Python type.

    ``numpy.dtype`` instances and dtype strings ('float32') are converted
    to their numpy scalar type; classes pass through unchanged.

    Args:
        element_type: Candidate element type
        name: Parameter name for error messages

    Returns:
        The normalized element type

    Raises:
        ElementTypeError: If the type is not a valid vector/matrix element
    """
    if isinstance(element_type, (np.dtype, str)):
        try:
            element_type = np.dtype(element_type).type
        except TypeError as e:
            raise ElementTypeError(
                f"{name}: cannot interpret {element_type!r} as a dtype: {e}",
                element_type=element_type,
            ) from e

    if not is_matrix_element(element_type):
        raise ElementTypeError(
            f"{name}: {element_type!r} is not a valid matrix element type "
            f"(must be numeric, default-constructible and support +, -, *)",
            element_type=element_type,
        )
    return element_type


def check_extent(value: Any, name: str) -> int:
    """
    Verify a fixed extent is a positive integer.

    Args:
        value: Extent to check
        name: Extent name for error messages ('N', 'R', 'C')

    Returns:
        The extent as a Python int

    Raises:
        ExtentError: If value is not an integer >= 1
    """
    if not _is_integer(value):
        raise ExtentError(
            f"{name}: fixed extent must be an integer, got {type(value).__name__} {value!r}",
            name=name,
            value=value,
        )
    if value < 1:
        raise ExtentError(
            f"{name}: fixed extent must be >= 1, got {value}",
            name=name,
            value=value,
        )
    return int(value)


def check_nonnegative(value: Any, name: str) -> int:
    """
    Verify a runtime size or capacity is a non-negative integer.

    Raises:
        DimensionError: If value is not an integer >= 0
    """
    if not _is_integer(value):
        raise DimensionError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise DimensionError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_size_match(expected: Any, actual: Any, name: str) -> None:
    """
    Verify a source size equals a fixed destination size.

    Args:
        expected: Destination size
        actual: Source size
        name: Parameter name for error messages

    Raises:
        InvalidSizeError: If sizes differ
    """
    if expected != actual:
        raise InvalidSizeError(
            f"{name}: invalid size, fixed destination has size {expected}, source has size {actual}",
            expected=expected,
            actual=actual,
        )


def check_same_type(engine: Any, expected: type, name: str) -> None:
    """
    Verify an engine has exactly the expected engine type.

    Raises:
        EngineTypeError: If type(engine) is not expected
    """
    if type(engine) is not expected:
        raise EngineTypeError(
            f"{name}: expected engine of type {expected.__name__}, "
            f"got {type(engine).__name__}",
            expected=expected,
            actual=type(engine),
        )


def check_vector_engine(engine: Any, name: str) -> None:
    """
    Verify an object publishes a vector category.

    Raises:
        EngineTypeError: If engine is not a vector engine
    """
    if not is_vector_category(getattr(engine, 'category', None)):
        raise EngineTypeError(
            f"{name}: expected a vector engine, got {type(engine).__name__}",
            actual=type(engine),
        )


def check_matrix_engine(engine: Any, name: str) -> None:
    """
    Verify an object publishes a matrix category.

    Raises:
        EngineTypeError: If engine is not a matrix engine
    """
    if not is_matrix_category(getattr(engine, 'category', None)):
        raise EngineTypeError(
            f"{name}: expected a matrix engine, got {type(engine).__name__}",
            actual=type(engine),
        )
