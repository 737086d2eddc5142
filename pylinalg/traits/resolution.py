"""
Three-candidate resolution and allocator rebinding.

resolve() is the precedence rule used everywhere the library has to pick
one type (or strategy) from an explicit override, a computed default and
a mandatory fallback:

    resolve(None, None, F) -> F
    resolve(None, C,    F) -> C
    resolve(T,    any,  any) -> T

Callers run it once, when a result type is first requested, and cache
the answer; it is never evaluated per element.
"""

from typing import TypeVar

from pylinalg.core.exceptions import TraitsResolutionError
from pylinalg.core.validation import check_element_type
from pylinalg.traits.allocators import Allocator

T = TypeVar('T')


def resolve(override: T | None, computed: T | None, fallback: T) -> T:
    """
    Pick the highest-precedence present candidate.

    Args:
        override: Explicit choice; wins unconditionally when present
        computed: Default derived from the operands, or None
        fallback: Library default; must never be None

    Returns:
        override if present, else computed if present, else fallback

    Raises:
        TraitsResolutionError: If fallback is None
    """
    if fallback is None:
        raise TraitsResolutionError(
            "resolve: fallback candidate is required, got None"
        )
    if override is not None:
        return override
    if computed is not None:
        return computed
    return fallback


def rebind_alloc(allocator_type: type, element_type: type) -> type:
    """
    Rebind an allocator type to a different element type.

    Args:
        allocator_type: A parameterized Allocator class, e.g. Allocator[float]
        element_type: Element type the result must supply storage for

    Returns:
        Allocator[element_type]

    Raises:
        TraitsResolutionError: If allocator_type is not a parameterized Allocator
        ElementTypeError: If element_type is not a valid element type
    """
    if not (isinstance(allocator_type, type)
            and issubclass(allocator_type, Allocator)
            and allocator_type.element_type is not None):
        raise TraitsResolutionError(
            f"rebind_alloc: expected a parameterized Allocator, got {allocator_type!r}"
        )
    element_type = check_element_type(element_type, 'rebind_alloc element_type')
    return allocator_type.rebind(element_type)


__all__ = ['resolve', 'rebind_alloc']
