"""
Element type classification.

Predicates deciding which Python types may be stored in an engine and
how they behave on default construction:

    is_matrix_element: valid vector/matrix element (arithmetic-closed,
                       copyable, default-constructible)
    is_arithmetic:     real numeric type, zero-filled on default construction
    is_complex:        complex-valued type (selects conjugate transpose)
    is_numpy_native:   type has a native numpy storage dtype

All predicates accept any object and return False for non-types.
"""

import numpy as np

from pylinalg.core.defaults import NATIVE_DTYPES

_REQUIRED_OPERATORS = ('__add__', '__sub__', '__mul__')


def is_numpy_native(element_type: object) -> bool:
    if not isinstance(element_type, type):
        return False
    if element_type in NATIVE_DTYPES:
        return True
    if issubclass(element_type, np.timedelta64):
        # numpy files timedelta64 under signedinteger
        return False
    return issubclass(element_type, (np.number, np.bool_))


def is_arithmetic(element_type: object) -> bool:
    """
    Check for a real numeric type (bool, integer or floating point).

    Complex types are excluded: they are initialized by their own default
    constructor rather than explicitly zero-filled.
    """
    if not isinstance(element_type, type):
        return False
    if element_type in (bool, int, float):
        return True
    if issubclass(element_type, np.timedelta64):
        return False
    return issubclass(element_type, (np.integer, np.floating, np.bool_))


def is_complex(element_type: object) -> bool:
    if not isinstance(element_type, type):
        return False
    return issubclass(element_type, (complex, np.complexfloating))


def is_matrix_element(element_type: object) -> bool:
    """
    Check whether a type may be stored in a vector or matrix engine.

    numpy numeric scalar types and the builtins bool/int/float/complex are
    always valid. Any other class qualifies when it supports ``+``, ``-``
    and ``*`` and can be default-constructed (``Fraction``, ``Decimal``,
    user-defined number types). Text and byte types never qualify.

    Args:
        element_type: Candidate element type

    Returns:
        True if the type is a valid element type
    """
    if not isinstance(element_type, type):
        return False
    if issubclass(element_type, (str, bytes, bytearray)):
        return False
    if is_numpy_native(element_type):
        return True
    if issubclass(element_type, np.generic):
        # datetime64, timedelta64, str_, void ...
        return False
    if not all(hasattr(element_type, op) for op in _REQUIRED_OPERATORS):
        return False
    try:
        element_type()
    except (TypeError, ValueError):
        return False
    return True


__all__ = [
    'is_numpy_native',
    'is_arithmetic',
    'is_complex',
    'is_matrix_element',
]
