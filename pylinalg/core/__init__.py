"""
Core infrastructure for pylinalg.

This module provides the abstractions shared by every engine and facade.

Key components:
    protocols: engine contract (VectorEngine, MatrixEngine and their
               mutable/resizable refinements)
    categories: engine category tags
    elements: element type classification predicates
    storage: numpy-backed element storage
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pylinalg.core.protocols import (
    VectorEngine,
    MutableVectorEngine,
    ResizableVectorEngine,
    MatrixEngine,
    MutableMatrixEngine,
    ResizableMatrixEngine,
)
from pylinalg.core.elements import (
    is_arithmetic,
    is_complex,
    is_matrix_element,
)
from pylinalg.core.categories import is_resizable_engine
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    ExtentError,
    ElementTypeError,
    EngineTypeError,
    TraitsResolutionError,
    InvalidSizeError,
    CapabilityError,
)

__all__ = [
    # Protocols
    "VectorEngine",
    "MutableVectorEngine",
    "ResizableVectorEngine",
    "MatrixEngine",
    "MutableMatrixEngine",
    "ResizableMatrixEngine",
    # Classification
    "is_arithmetic",
    "is_complex",
    "is_matrix_element",
    "is_resizable_engine",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "ExtentError",
    "ElementTypeError",
    "EngineTypeError",
    "TraitsResolutionError",
    "InvalidSizeError",
    "CapabilityError",
]
