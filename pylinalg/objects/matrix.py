"""
Matrix facade.

A Matrix owns exactly one matrix engine plus the operation traits that
govern how it combines with other objects.

    >>> m = Matrix.fixed(float, 2, 3, [1, 2, 3, 4])
    >>> m.size
    (2, 3)
    >>> m.t().size
    (3, 2)
    >>> d = Matrix.dynamic(float, 2, 2)
    >>> d.assign(m)            # resizes d to 2 x 3
    >>> d.size
    (2, 3)

Transpose and Hermitian forms are materialized copies; h() conjugates
only when the element type is complex.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.categories import is_resizable_engine
from pylinalg.core.elements import is_complex
from pylinalg.core.storage import storage_dtype
from pylinalg.core.validation import check_matrix_engine, check_same_type
from pylinalg.engines._common import unwrap_engine
from pylinalg.engines.dynamic import DynamicMatrixEngine
from pylinalg.engines.fixed import FixedMatrixEngine
from pylinalg.objects._common import (
    ResultTypes,
    engine_data,
    own_engine,
    require_mutable,
    require_resizable,
    result_types,
)
from pylinalg.traits.promotion import OperationTraits, check_traits


class Matrix:
    """
    Matrix value type over a pluggable engine.

    Args:
        engine_type: A matrix engine class, e.g. FixedMatrixEngine[float, 2, 3]
        *engine_args: Positional engine constructor arguments
            (values for fixed engines; rows, columns, values for resizable ones)
        traits: OperationTraits subclass governing result types
        **engine_kwargs: Extra engine constructor arguments

    Raises:
        EngineTypeError: If engine_type is not a matrix engine
        TraitsResolutionError: If traits is not an OperationTraits subclass
    """

    def __init__(
        self,
        engine_type: type,
        *engine_args: Any,
        traits: type = OperationTraits,
        **engine_kwargs: Any,
    ):
        check_matrix_engine(engine_type, 'engine_type')
        check_traits(traits, 'traits')
        self._engine = engine_type(*engine_args, **engine_kwargs)
        self._traits = traits

    # === Construction ===

    @classmethod
    def fixed(
        cls,
        element_type: Any,
        rows: int,
        columns: int,
        values: Iterable[Any] | None = None,
        *,
        traits: type = OperationTraits,
    ) -> Matrix:
        """Matrix on a FixedMatrixEngine[element_type, rows, columns]."""
        return cls(FixedMatrixEngine[element_type, rows, columns], values, traits=traits)

    @classmethod
    def dynamic(
        cls,
        element_type: Any,
        rows: int = 0,
        columns: int = 0,
        values: Iterable[Any] | None = None,
        *,
        row_capacity: int | None = None,
        column_capacity: int | None = None,
        traits: type = OperationTraits,
    ) -> Matrix:
        """Matrix on a DynamicMatrixEngine[element_type]."""
        return cls(
            DynamicMatrixEngine[element_type], rows, columns, values,
            row_capacity=row_capacity, column_capacity=column_capacity, traits=traits,
        )

    @classmethod
    def from_matrix(
        cls,
        engine_type: type,
        source: Any,
        *,
        traits: type | None = None,
    ) -> Matrix:
        """
        Matrix on engine_type holding a converted copy of source.

        Args:
            engine_type: A mutable matrix engine class
            source: A Matrix or matrix engine of any engine type
            traits: Operation traits; defaults to the traits of source

        Raises:
            CapabilityError: If engine_type is read-only
            InvalidSizeError: If engine_type is fixed-size and the extents differ
        """
        check_matrix_engine(engine_type, 'engine_type')
        require_mutable(engine_type, 'from_matrix')
        if traits is None:
            traits = getattr(source, 'traits', OperationTraits)
        result = cls(engine_type, traits=traits)
        result.assign(source)
        return result

    @classmethod
    def from_engine(cls, engine: Any, *, traits: type = OperationTraits) -> Matrix:
        """Matrix owning a copy of an existing engine."""
        check_matrix_engine(engine, 'engine')
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
    def rows(self) -> int:
        return self._engine.rows()

    @property
    def columns(self) -> int:
        return self._engine.columns()

    @property
    def size(self) -> tuple[int, int]:
        return tuple(self._engine.size())

    @property
    def row_capacity(self) -> int:
        return self._engine.row_capacity()

    @property
    def column_capacity(self) -> int:
        return self._engine.column_capacity()

    @property
    def capacity(self) -> tuple[int, int]:
        return tuple(self._engine.capacity())

    @property
    def is_resizable(self) -> bool:
        return is_resizable_engine(self._engine)

    # === Element access ===

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._engine[index]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        require_mutable(self._engine, '__setitem__')
        self._engine[index] = value

    def data(self) -> Any:
        """
        Live element storage of the engine.

        Fixed engines return the flat row-major buffer, resizable engines a
        (rows, columns) view. Writes go straight to the engine.
        """
        return engine_data(self._engine)

    # === Transpose and Hermitian ===

    def _transposed(self, transform: Callable[[Any], Any] | None) -> Matrix:
        engine = self._engine
        rows, cols = engine.rows(), engine.columns()
        values = (engine[i, j] for j in range(cols) for i in range(rows))
        if transform is not None:
            values = (transform(v) for v in values)

        if hasattr(engine, 'transposed_type'):
            result_type = engine.transposed_type()
        else:
            result_type = DynamicMatrixEngine[engine.element_type]

        if is_resizable_engine(result_type):
            return type(self)(result_type, cols, rows, values, traits=self._traits)
        return type(self)(result_type, values, traits=self._traits)

    def t(self) -> Matrix:
        """Materialized transpose."""
        return self._transposed(None)

    def h(self) -> Matrix:
        """
        Materialized Hermitian (conjugate) transpose.

        Equal to t() for non-complex element types.
        """
        if is_complex(self.element_type):
            return self._transposed(lambda v: v.conjugate())
        return self._transposed(None)

    # === Modifiers ===

    def swap_rows(self, i1: int, i2: int) -> None:
        require_mutable(self._engine, 'swap_rows')
        self._engine.swap_rows(i1, i2)

    def swap_columns(self, j1: int, j2: int) -> None:
        require_mutable(self._engine, 'swap_columns')
        self._engine.swap_columns(j1, j2)

    def swap(self, other: Matrix) -> None:
        """
        Exchange contents with another matrix on the same engine type.

        Raises:
            CapabilityError: If the engine is read-only
            EngineTypeError: If the engine types differ
        """
        require_mutable(self._engine, 'swap')
        check_same_type(other.engine, type(self._engine), 'other')
        self._engine.swap(other.engine)

    def assign(self, source: Any) -> None:
        """
        Copy another matrix (or matrix engine) into this one.

        Fixed-size matrices require identical extents; resizable ones are
        resized to the source extents.

        Raises:
            CapabilityError: If the engine is read-only
            InvalidSizeError: If this matrix is fixed-size and extents differ
        """
        require_mutable(self._engine, 'assign')
        self._engine.assign(unwrap_engine(source))

    def resize(
        self,
        rows: int,
        columns: int,
        row_capacity: int | None = None,
        column_capacity: int | None = None,
    ) -> None:
        """
        Change the extents, optionally growing the capacities first.

        A capacity left as None keeps its current value.

        Raises:
            CapabilityError: If the engine is not resizable
        """
        require_resizable(self._engine, 'resize')
        engine = self._engine
        if row_capacity is not None or column_capacity is not None:
            engine.reserve(
                engine.row_capacity() if row_capacity is None else row_capacity,
                engine.column_capacity() if column_capacity is None else column_capacity,
            )
        engine.resize(rows, columns)

    def reserve(self, row_capacity: int, column_capacity: int) -> None:
        require_resizable(self._engine, 'reserve')
        self._engine.reserve(row_capacity, column_capacity)

    # === Value semantics ===

    def copy(self) -> Matrix:
        return type(self).from_engine(self._engine, traits=self._traits)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._engine == other._engine

    __hash__ = None  # type: ignore[assignment]

    def to_numpy(self) -> NDArray[Any]:
        """Independent (rows, columns) numpy array of the elements."""
        rows, cols = self.size
        result = np.empty((rows, cols), dtype=storage_dtype(self.element_type))
        for i in range(rows):
            for j in range(cols):
                result[i, j] = self._engine[i, j]
        return result

    def result_types(self, other: Matrix) -> ResultTypes:
        """Traits, element type and engine type for combining with other."""
        return result_types(self, other)

    def __repr__(self) -> str:
        return f"Matrix({self._engine!r})"
