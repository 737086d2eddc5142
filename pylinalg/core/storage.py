"""
Dense element storage on numpy arrays.

Every dense engine keeps its elements in a flat, contiguous numpy array.
Numeric element types use their native dtype; any other element type
(Fraction, Decimal, user number classes) is stored in an object array.

Default initialization follows a deliberate asymmetry:
    - arithmetic element types are zero-filled
    - all other element types hold their own default value T()
"""

from copy import copy
from itertools import islice
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.defaults import NATIVE_DTYPES, OBJECT_DTYPE
from pylinalg.core.elements import is_arithmetic, is_numpy_native


def storage_dtype(element_type: type) -> np.dtype:
    """
    Get the numpy dtype used to store an element type.

    Args:
        element_type: A validated element type

    Returns:
        Native dtype for numeric types, object dtype otherwise
    """
    if element_type in NATIVE_DTYPES:
        return NATIVE_DTYPES[element_type]
    if is_numpy_native(element_type):
        return np.dtype(element_type)
    return OBJECT_DTYPE


def default_storage(element_type: type, count: int) -> NDArray[Any]:
    """
    Allocate ``count`` default-initialized elements.

    Args:
        element_type: A validated element type
        count: Number of elements

    Returns:
        Flat array of length ``count``
    """
    dtype = storage_dtype(element_type)
    if is_arithmetic(element_type):
        return np.zeros(count, dtype=dtype)

    buffer = np.empty(count, dtype=dtype)
    if dtype == OBJECT_DTYPE:
        # One instance per slot, so mutable element types never alias.
        for k in range(count):
            buffer[k] = element_type()
    else:
        buffer.fill(element_type())
    return buffer


def coerce(element_type: type, dtype: np.dtype, value: Any) -> Any:
    """Convert a value for storage; object storage holds instances of element_type."""
    if dtype == OBJECT_DTYPE and not isinstance(value, element_type):
        return element_type(value)
    return value


def fill_from(buffer: NDArray[Any], element_type: type, values: Iterable[Any]) -> int:
    """
    Copy leading values from an iterable into a flat buffer.

    At most ``buffer.size`` values are consumed; any remainder is left
    unread and silently discarded. Slots past the consumed values are
    not touched.

    Args:
        buffer: Flat destination array
        element_type: Element type used to convert values in object storage
        values: Source values, read lazily

    Returns:
        Number of values written
    """
    count = 0
    for value in islice(values, buffer.size):
        buffer[count] = coerce(element_type, buffer.dtype, value)
        count += 1
    return count


def copy_storage(buffer: NDArray[Any]) -> NDArray[Any]:
    """
    Copy a buffer so that no element is shared.

    Object arrays are copied element-by-element through ``copy.copy`` so
    that mutable element objects are not aliased between engines.
    """
    if buffer.dtype != OBJECT_DTYPE:
        return buffer.copy()
    result = np.empty(buffer.shape, dtype=OBJECT_DTYPE)
    flat_src = buffer.reshape(-1)
    flat_dst = result.reshape(-1)
    for k in range(flat_src.size):
        flat_dst[k] = copy(flat_src[k])
    return result


__all__ = [
    'storage_dtype',
    'default_storage',
    'coerce',
    'fill_from',
    'copy_storage',
]
