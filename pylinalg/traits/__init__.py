"""
Type-level resolution for pylinalg.

Submodules:
    resolution: resolve() three-candidate precedence, rebind_alloc()
    allocators: Allocator[T] storage providers for resizable engines
    promotion:  OperationTraits and result element/engine promotion

promotion depends on the engine classes and is imported from
pylinalg.traits.promotion (or the top-level package) rather than here.
"""

from pylinalg.traits.allocators import Allocator
from pylinalg.traits.resolution import rebind_alloc, resolve

__all__ = [
    "Allocator",
    "rebind_alloc",
    "resolve",
]
