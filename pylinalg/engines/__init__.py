"""
Dense storage engines.

    FixedVectorEngine[T, N]        mutable, N elements
    FixedMatrixEngine[T, R, C]     mutable, R x C elements, row-major
    DynamicVectorEngine[T, A]      resizable, storage from allocator A
    DynamicMatrixEngine[T, A]      resizable, storage from allocator A

All engines satisfy the protocols in pylinalg.core.protocols.
"""

from pylinalg.engines.dynamic import DynamicMatrixEngine, DynamicVectorEngine
from pylinalg.engines.fixed import FixedMatrixEngine, FixedVectorEngine

__all__ = [
    "FixedVectorEngine",
    "FixedMatrixEngine",
    "DynamicVectorEngine",
    "DynamicMatrixEngine",
]
