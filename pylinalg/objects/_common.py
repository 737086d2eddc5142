"""
Shared pieces of the Vector and Matrix facades.

Contains capability gating, the ResultTypes payload and the result-type
queries built on operation-traits selection and promotion.
"""

from copy import copy
from dataclasses import dataclass
from typing import Any

from pylinalg.core.categories import is_mutable_category, is_resizable_engine, is_resizable_category
from pylinalg.core.exceptions import CapabilityError, EngineTypeError
from pylinalg.traits.promotion import promote_element, promote_engine, select_operation_traits


@dataclass(frozen=True)
class ResultTypes:
    """
    Types chosen for the result of combining two objects.

    Attributes:
        traits: Operation traits governing the interaction
        element_type: Promoted element type
        engine_type: Engine type the result is stored in
    """
    traits: type
    element_type: type
    engine_type: type


def require_mutable(engine: Any, operation: str) -> None:
    """
    Raises:
        CapabilityError: If the engine's category is read-only
    """
    category = getattr(engine, 'category', None)
    if not is_mutable_category(category):
        raise CapabilityError(
            f"{operation}: not supported by {type(engine).__name__} (category {category!r})",
            category=category,
            operation=operation,
        )


def require_resizable(engine: Any, operation: str) -> None:
    """
    Raises:
        CapabilityError: If the engine's category is not resizable
    """
    category = getattr(engine, 'category', None)
    if not is_resizable_category(category):
        raise CapabilityError(
            f"{operation}: requires a resizable engine, "
            f"{type(engine).__name__} has category {category!r}",
            category=category,
            operation=operation,
        )


def own_engine(engine: Any) -> Any:
    """
    Independent copy of an engine, so no two facades share one.

    Raises:
        EngineTypeError: If engine is an engine class rather than an instance
    """
    if isinstance(engine, type):
        raise EngineTypeError(
            f"engine: expected an engine instance, got the class {engine.__name__}; "
            f"construct it first or pass it as engine_type",
            actual=engine,
        )
    clone = getattr(engine, 'copy', None)
    return clone() if callable(clone) else copy(engine)


def engine_data(engine: Any) -> Any:
    """
    The engine's live element storage.

    Raises:
        CapabilityError: If the engine exposes no data() buffer
    """
    data = getattr(engine, 'data', None)
    if not callable(data):
        category = getattr(engine, 'category', None)
        raise CapabilityError(
            f"data: {type(engine).__name__} exposes no element buffer",
            category=category,
            operation='data',
        )
    return data()


def result_types(a: Any, b: Any) -> ResultTypes:
    """
    Resolve the result types for an interaction between two facades.

    Raises:
        TraitsResolutionError: If the traits are incompatible or the
            objects are of different kinds
    """
    traits = select_operation_traits(a.traits, b.traits)
    return ResultTypes(
        traits=traits,
        element_type=promote_element(traits, a.element_type, b.element_type),
        engine_type=promote_engine(traits, a.engine_type, b.engine_type),
    )


def result_requires_resize(obj: Any) -> bool:
    """True if results derived from obj are stored in a resizable engine."""
    return is_resizable_engine(obj.engine_type)
