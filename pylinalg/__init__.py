"""
pylinalg: vector and matrix value types over pluggable storage engines.

Engines own element storage; the facades layer value semantics on top;
operation traits decide result element and engine types through a
three-candidate resolution (override, computed default, fallback).

Submodules:
    core: engine contract, categories, element classification, exceptions
    traits: resolve(), allocators, operation traits and promotion
    engines: fixed-size and resizable dense engines
    objects: Vector and Matrix facades
"""

__version__ = "0.1.0"

from pylinalg import core
from pylinalg import traits
from pylinalg import engines
from pylinalg import objects
from pylinalg.engines import (
    DynamicMatrixEngine,
    DynamicVectorEngine,
    FixedMatrixEngine,
    FixedVectorEngine,
)
from pylinalg.objects import Matrix, ResultTypes, Vector, result_requires_resize
from pylinalg.traits import Allocator, rebind_alloc, resolve
from pylinalg.traits.promotion import (
    OperationTraits,
    promote_element,
    promote_engine,
    select_operation_traits,
)

__all__ = [
    "__version__",
    "core",
    "traits",
    "engines",
    "objects",
    "FixedVectorEngine",
    "FixedMatrixEngine",
    "DynamicVectorEngine",
    "DynamicMatrixEngine",
    "Vector",
    "Matrix",
    "ResultTypes",
    "result_requires_resize",
    "Allocator",
    "rebind_alloc",
    "resolve",
    "OperationTraits",
    "promote_element",
    "promote_engine",
    "select_operation_traits",
]
