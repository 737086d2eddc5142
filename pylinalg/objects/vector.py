"""
Vector facade.

A Vector owns exactly one vector engine plus the operation traits that
govern how it combines with other objects. Operations the engine's
category does not permit raise CapabilityError instead of being absent.

    >>> v = Vector.fixed(np.float32, 3, [1, 2])
    >>> v.to_numpy().tolist()
    [1.0, 2.0, 0.0]
    >>> w = Vector.dynamic(float, [1.0, 2.0])
    >>> w.resize(4)
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.categories import is_resizable_engine
from pylinalg.core.storage import storage_dtype
from pylinalg.core.validation import check_same_type, check_vector_engine
from pylinalg.engines._common import unwrap_engine
from pylinalg.engines.dynamic import DynamicVectorEngine
from pylinalg.engines.fixed import FixedVectorEngine
from pylinalg.objects._common import (
    ResultTypes,
    engine_data,
    own_engine,
    require_mutable,
    require_resizable,
    result_types,
)
from pylinalg.traits.promotion import OperationTraits, check_traits


class Vector:
    """
    Vector value type over a pluggable engine.

    Args:
        engine_type: A vector engine class, e.g. FixedVectorEngine[float, 3]
        values: Initial elements, passed to the engine constructor
        traits: OperationTraits subclass governing result types
        **engine_kwargs: Extra engine constructor arguments (size=, capacity=)

    Raises:
        EngineTypeError: If engine_type is not a vector engine
        TraitsResolutionError: If traits is not an OperationTraits subclass
    """

    def __init__(
        self,
        engine_type: type,
        values: Iterable[Any] | None = None,
        *,
        traits: type = OperationTraits,
        **engine_kwargs: Any,
    ):
        check_vector_engine(engine_type, 'engine_type')
        check_traits(traits, 'traits')
        if values is None:
            self._engine = engine_type(**engine_kwargs)
        else:
            self._engine = engine_type(values, **engine_kwargs)
        self._traits = traits

    # === Construction ===

    @classmethod
    def fixed(
        cls,
        element_type: Any,
        n: int,
        values: Iterable[Any] | None = None,
        *,
        traits: type = OperationTraits,
    ) -> Vector:
        """Vector on a FixedVectorEngine[element_type, n]."""
        return cls(FixedVectorEngine[element_type, n], values, traits=traits)

    @classmethod
    def dynamic(
        cls,
        element_type: Any,
        values: Iterable[Any] | None = None,
        *,
        size: int | None = None,
        capacity: int | None = None,
        traits: type = OperationTraits,
    ) -> Vector:
        """Vector on a DynamicVectorEngine[element_type]."""
        return cls(
            DynamicVectorEngine[element_type], values,
            traits=traits, size=size, capacity=capacity,
        )

    @classmethod
    def from_vector(
        cls,
        engine_type: type,
        source: Any,
        *,
        traits: type | None = None,
    ) -> Vector:
        """
        Vector on engine_type holding a converted copy of source.

        source may be a Vector or vector engine of any engine type; its
        traits carry over unless traits is given.

        Raises:
            CapabilityError: If engine_type is read-only
            InvalidSizeError: If engine_type is fixed-size and the sizes differ
        """
        check_vector_engine(engine_type, 'engine_type')
        require_mutable(engine_type, 'from_vector')
        if traits is None:
            traits = getattr(source, 'traits', OperationTraits)
        result = cls(engine_type, traits=traits)
        result.assign(source)
        return result

    @classmethod
    def from_engine(cls, engine: Any, *, traits: type = OperationTraits) -> Vector:
        """Vector owning a copy of an existing engine."""
        check_vector_engine(engine, 'engine')
        check_traits(traits, 'traits')
        result = cls.__new__(cls)
        result._engine = own_engine(engine)
        result._traits = traits
        return result

    # === Properties ===

    @property
    def engine(self) -> Any:
        return self._engine

    @property
    def engine_type(self) -> type:
        return type(self._engine)

    @property
    def traits(self) -> type:
        return self._traits

    @property
    def element_type(self) -> type:
        return self._engine.element_type

    @property
    def size(self) -> int:
        return self._engine.size()

    @property
    def capacity(self) -> int:
        return self._engine.capacity()

    @property
    def is_resizable(self) -> bool:
        return is_resizable_engine(self._engine)

    # === Element access ===

    def __getitem__(self, i: int) -> Any:
        return self._engine[i]

    def __setitem__(self, i: int, value: Any) -> None:
        require_mutable(self._engine, '__setitem__')
        self._engine[i] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._engine)

    def __len__(self) -> int:
        return self._engine.size()

    def data(self) -> Any:
        """Live element storage of the engine; writes go straight to it."""
        return engine_data(self._engine)

    # === Modifiers ===

    def swap_elements(self, i: int, j: int) -> None:
        require_mutable(self._engine, 'swap_elements')
        self._engine.swap_elements(i, j)

    def swap(self, other: Vector) -> None:
        """
        Exchange contents with another vector on the same engine type.

        Raises:
            CapabilityError: If the engine is read-only
            EngineTypeError: If the engine types differ
        """
        require_mutable(self._engine, 'swap')
        check_same_type(other.engine, type(self._engine), 'other')
        self._engine.swap(other.engine)

    def assign(self, source: Any) -> None:
        """
        Copy another vector (or vector engine) into this one.

        Raises:
            CapabilityError: If the engine is read-only
            InvalidSizeError: If this vector is fixed-size and sizes differ
        """
        require_mutable(self._engine, 'assign')
        self._engine.assign(unwrap_engine(source))

    def resize(self, size: int, capacity: int | None = None) -> None:
        """
        Change the number of elements, optionally growing capacity first.

        Raises:
            CapabilityError: If the engine is not resizable
        """
        require_resizable(self._engine, 'resize')
        if capacity is not None:
            self._engine.reserve(capacity)
        self._engine.resize(size)

    def reserve(self, capacity: int) -> None:
        require_resizable(self._engine, 'reserve')
        self._engine.reserve(capacity)

    # === Value semantics ===

    def copy(self) -> Vector:
        return type(self).from_engine(self._engine, traits=self._traits)

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._engine == other._engine

    __hash__ = None  # type: ignore[assignment]

    def to_numpy(self) -> NDArray[Any]:
        """Independent 1D numpy array of the elements."""
        return np.array(list(self._engine), dtype=storage_dtype(self.element_type))

    def result_types(self, other: Vector) -> ResultTypes:
        """Traits, element type and engine type for combining with other."""
        return result_types(self, other)

    def __repr__(self) -> str:
        return f"Vector({self._engine!r})"
