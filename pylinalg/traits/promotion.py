"""
Operation traits and result-type promotion.

When two vectors or matrices interact, three questions decide the type of
the result:

    1. Whose operation traits govern?      select_operation_traits()
    2. Which element type does it hold?    promote_element()
    3. Which engine type stores it?        promote_engine()

Questions 2 and 3 go through resolve(): an override published by the
governing traits beats a default computed from the operands, which beats
the library fallback.

Customize by subclassing OperationTraits:

    class SinglePrecision(OperationTraits):
        @staticmethod
        def element_promotion(t1, t2):
            return np.float32

A hook returning None defers to the computed default for those operands.
Every answer is cached per argument tuple, so resolution runs once per
combination of types rather than once per operation.
"""

import warnings
from functools import lru_cache
from typing import Any

import numpy as np

from pylinalg.core.categories import (
    is_matrix_category,
    is_resizable_engine,
    is_vector_category,
)
from pylinalg.core.defaults import DEFAULT_ELEMENT_TYPE
from pylinalg.core.elements import is_matrix_element, is_numpy_native
from pylinalg.core.exceptions import TraitsResolutionError
from pylinalg.core.storage import storage_dtype
from pylinalg.core.validation import check_element_type
from pylinalg.engines.dynamic import DynamicMatrixEngine, DynamicVectorEngine
from pylinalg.engines.fixed import FixedMatrixEngine, FixedVectorEngine
from pylinalg.traits.resolution import rebind_alloc, resolve


class OperationTraits:
    """
    Default operation traits.

    Subclasses may define either hook as a staticmethod:

        element_promotion(t1, t2) -> type | None
        engine_promotion(e1, e2, element_type) -> type | None
    """

    element_promotion = None
    engine_promotion = None


def check_traits(traits: Any, name: str) -> None:
    """
    Verify traits is an OperationTraits subclass.

    Raises:
        TraitsResolutionError: If it is not
    """
    if not (isinstance(traits, type) and issubclass(traits, OperationTraits)):
        raise TraitsResolutionError(
            f"{name}: expected an OperationTraits subclass, got {traits!r}"
        )


@lru_cache(maxsize=None)
def select_operation_traits(t1: type, t2: type) -> type:
    """
    Choose the traits governing an interaction between two objects.

    Identical traits govern themselves; a custom traits class beats the
    default one.

    Raises:
        TraitsResolutionError: If both sides carry different custom traits
    """
    check_traits(t1, 't1')
    check_traits(t2, 't2')
    custom1 = None if t1 is OperationTraits else t1
    custom2 = None if t2 is OperationTraits else t2
    if custom1 is not None and custom2 is not None and custom1 is not custom2:
        raise TraitsResolutionError(
            f"incompatible operation traits: {t1.__name__} and {t2.__name__}"
        )
    return resolve(custom1, custom2, OperationTraits)


# ═══════════════════════════════════════════════════════════════════════
# Element promotion
# ═══════════════════════════════════════════════════════════════════════


def _numpy_promotion(t1: type, t2: type) -> type | None:
    if not (is_numpy_native(t1) and is_numpy_native(t2)):
        return None
    d1, d2 = storage_dtype(t1), storage_dtype(t2)
    promoted = np.result_type(d1, d2)
    # Prefer an operand's own type so float + float stays float.
    if promoted == d1:
        return t1
    if promoted == d2:
        return t2
    return promoted.type


def _python_promotion(t1: type, t2: type) -> type | None:
    try:
        promoted = type(t1() + t2())
    except (TypeError, ValueError, ArithmeticError):
        return None
    return promoted if is_matrix_element(promoted) else None


def _computed_element(t1: type, t2: type) -> type | None:
    if t1 is t2:
        return t1
    promoted = _numpy_promotion(t1, t2)
    if promoted is None:
        promoted = _python_promotion(t1, t2)
    return promoted


@lru_cache(maxsize=None)
def promote_element(traits: type, t1: Any, t2: Any) -> type:
    """
    Element type of a result combining elements of types t1 and t2.

    Precedence:
        1. traits.element_promotion(t1, t2), if it returns a type
        2. numpy promotion for numpy-native types, else type(t1() + t2())
        3. DEFAULT_ELEMENT_TYPE, with a warning

    Raises:
        TraitsResolutionError: If traits is not an OperationTraits subclass
        ElementTypeError: If an operand or the result is not a valid element type
    """
    check_traits(traits, 'traits')
    t1 = check_element_type(t1, 't1')
    t2 = check_element_type(t2, 't2')

    hook = traits.element_promotion
    override = hook(t1, t2) if hook is not None else None
    computed = _computed_element(t1, t2)

    if override is None and computed is None:
        warnings.warn(
            f"No common element type for {t1.__name__} and {t2.__name__}; "
            f"falling back to {DEFAULT_ELEMENT_TYPE.__name__}"
        )
    result = resolve(override, computed, DEFAULT_ELEMENT_TYPE)
    return check_element_type(result, 'promoted element type')


# ═══════════════════════════════════════════════════════════════════════
# Engine promotion
# ═══════════════════════════════════════════════════════════════════════


def _computed_engine(e1: type, e2: type, element_type: type, is_vector: bool) -> type | None:
    # A resizable operand decides, its allocator rebound to the new element.
    resizable = DynamicVectorEngine if is_vector else DynamicMatrixEngine
    for engine in (e1, e2):
        if is_resizable_engine(engine) and getattr(engine, 'allocator_type', None) is not None:
            return resizable[element_type, rebind_alloc(engine.allocator_type, element_type)]

    if is_vector:
        if (issubclass(e1, FixedVectorEngine) and issubclass(e2, FixedVectorEngine)
                and e1.extent == e2.extent):
            return FixedVectorEngine[element_type, e1.extent]
    elif (issubclass(e1, FixedMatrixEngine) and issubclass(e2, FixedMatrixEngine)
            and (e1.row_extent, e1.column_extent) == (e2.row_extent, e2.column_extent)):
        return FixedMatrixEngine[element_type, e1.row_extent, e1.column_extent]
    return None


@lru_cache(maxsize=None)
def promote_engine(traits: type, e1: type, e2: type) -> type:
    """
    Engine type of a result combining engines of types e1 and e2.

    Both engines must be vector engines or both matrix engines.

    Precedence:
        1. traits.engine_promotion(e1, e2, element_type), if it returns a type
        2. computed from the operands:
            - a resizable operand: its resizable engine with the allocator
              rebound to the promoted element type
            - two fixed engines of equal extents: the fixed engine of those
              extents over the promoted element type
        3. DynamicVectorEngine / DynamicMatrixEngine over the promoted
           element type with the default allocator

    Raises:
        TraitsResolutionError: If the engines are of different kinds or not
            engine classes
    """
    check_traits(traits, 'traits')
    for name, engine in (('e1', e1), ('e2', e2)):
        if not isinstance(engine, type):
            raise TraitsResolutionError(f"{name}: expected an engine class, got {engine!r}")

    c1 = getattr(e1, 'category', None)
    c2 = getattr(e2, 'category', None)
    if is_vector_category(c1) and is_vector_category(c2):
        is_vector = True
    elif is_matrix_category(c1) and is_matrix_category(c2):
        is_vector = False
    else:
        raise TraitsResolutionError(
            f"cannot promote engines of different kinds: {e1.__name__} ({c1}) "
            f"and {e2.__name__} ({c2})"
        )

    element_type = promote_element(traits, e1.element_type, e2.element_type)

    hook = traits.engine_promotion
    override = hook(e1, e2, element_type) if hook is not None else None
    computed = _computed_engine(e1, e2, element_type, is_vector)
    fallback = (DynamicVectorEngine if is_vector else DynamicMatrixEngine)[element_type]
    return resolve(override, computed, fallback)


__all__ = [
    'OperationTraits',
    'check_traits',
    'select_operation_traits',
    'promote_element',
    'promote_engine',
]
