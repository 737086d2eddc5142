"""
Library-wide defaults.

Element type defaults and the mapping from Python scalar types to the
numpy dtypes used for their storage.
"""

import numpy as np


# Element type used when a caller does not name one
DEFAULT_ELEMENT_TYPE: type = np.float64

# Python builtins stored natively (everything else numeric comes from numpy)
NATIVE_DTYPES: dict[type, np.dtype] = {
    bool: np.dtype(np.bool_),
    int: np.dtype(np.int64),
    float: np.dtype(np.float64),
    complex: np.dtype(np.complex128),
}

# Storage dtype for user-defined element types (Fraction, Decimal, ...)
OBJECT_DTYPE: np.dtype = np.dtype(object)
