"""
Resizable vector and matrix engines.

Sizes are runtime values; storage comes from the engine's allocator type:

    >>> E = DynamicVectorEngine[float]            # uses Allocator[float]
    >>> v = E([1.0, 2.0, 3.0])
    >>> v.resize(5)                               # new slots hold 0.0
    >>> M = DynamicMatrixEngine[np.float32, Allocator[np.float32]](2, 2)

Growing past capacity reallocates; capacity never shrinks. Slots that
become visible again after a shrink/grow cycle are reset to the element
default, never resurrected.

Cross-engine assignment resizes the destination to the source size
instead of failing.
"""

from functools import lru_cache
from typing import Any, Iterable, Iterator

from numpy.typing import NDArray

from pylinalg.core.categories import RESIZABLE_MATRIX, RESIZABLE_VECTOR
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.storage import coerce, copy_storage, fill_from
from pylinalg.core.validation import (
    check_element_type,
    check_matrix_engine,
    check_nonnegative,
    check_same_type,
    check_vector_engine,
)
from pylinalg.engines._common import DenseEngine, cell_index, type_label, unwrap_engine
from pylinalg.traits.allocators import Allocator


def _engine_params(params: Any, name: str) -> tuple[type, type]:
    """Split ``T`` or ``(T, A)`` and validate the allocator binding."""
    if isinstance(params, tuple):
        if len(params) != 2:
            raise ValidationError(
                f"{name} takes 1 or 2 type parameters, got {params!r}"
            )
        element_type, allocator_type = params
    else:
        element_type, allocator_type = params, None

    element_type = check_element_type(element_type)
    if allocator_type is None:
        return element_type, Allocator[element_type]

    if not (isinstance(allocator_type, type) and issubclass(allocator_type, Allocator)):
        raise ValidationError(
            f"{name}: allocator must be an Allocator type, got {allocator_type!r}"
        )
    if allocator_type.element_type is not element_type:
        raise ValidationError(
            f"{name}: allocator is bound to {allocator_type.element_type!r}, "
            f"engine element type is {element_type!r}"
        )
    return element_type, allocator_type


# ═══════════════════════════════════════════════════════════════════════
# Vector
# ═══════════════════════════════════════════════════════════════════════


class DynamicVectorEngine(DenseEngine):
    """
    Dense vector engine with runtime size and reserved capacity.

    Parameterize as ``DynamicVectorEngine[T]`` or
    ``DynamicVectorEngine[T, Allocator[T]]``.

    Args:
        values: Initial elements. Without ``size`` the engine takes all of
            them; with ``size`` it takes at most ``size`` values and
            default-fills the rest.
        size: Initial size
        capacity: Initial capacity (raised to size if smaller)
    """

    category = RESIZABLE_VECTOR
    allocator_type: type | None = None

    def __class_getitem__(cls, params: Any) -> type:
        return _dynamic_vector(*_engine_params(params, 'DynamicVectorEngine'))

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        *,
        size: int | None = None,
        capacity: int | None = None,
    ):
        self._check_parameterized()
        self._allocator = self.allocator_type()

        if values is not None and size is None:
            values = list(values)
            size = len(values)
        size = 0 if size is None else check_nonnegative(size, 'size')
        capacity = size if capacity is None else max(size, check_nonnegative(capacity, 'capacity'))

        self._buf = self._allocator.allocate(capacity)
        self._size = size
        if values is not None:
            fill_from(self._buf[:size], self.element_type, values)

    def _active(self) -> NDArray[Any]:
        return self._buf[:self._size]

    # === Element access ===

    def __getitem__(self, i: int) -> Any:
        return self._buf[:self._size][i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._buf[:self._size][i] = coerce(self.element_type, self._buf.dtype, value)

    def __iter__(self) -> Iterator[Any]:
        buf = self._buf
        for k in range(self._size):
            yield buf[k]

    def __len__(self) -> int:
        return self._size

    def data(self) -> NDArray[Any]:
        """Live view of the active elements."""
        return self._buf[:self._size]

    # === Size and capacity ===

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._buf.size

    def elements(self) -> int:
        return self._size

    def resize(self, size: int) -> None:
        """
        Change the number of elements.

        Existing elements in [0, min(old, new)) are kept; new slots hold
        the element default.
        """
        size = check_nonnegative(size, 'size')
        if size > self._buf.size:
            self._reallocate(size)
        elif size > self._size:
            self._buf[self._size:size] = self._allocator.allocate(size - self._size)
        self._size = size

    def reserve(self, capacity: int) -> None:
        """Grow capacity to at least ``capacity``; size is unchanged."""
        capacity = check_nonnegative(capacity, 'capacity')
        if capacity > self._buf.size:
            self._reallocate(capacity)

    def _reallocate(self, capacity: int) -> None:
        buf = self._allocator.allocate(capacity)
        buf[:self._size] = self._buf[:self._size]
        self._buf = buf

    # === Modifiers ===

    def swap_elements(self, i: int, j: int) -> None:
        if i != j:
            active = self._buf[:self._size]
            active[i], active[j] = active[j], active[i]

    def swap(self, other: 'DynamicVectorEngine') -> None:
        """
        Exchange contents with another engine of the same type.

        Raises:
            EngineTypeError: If other is a different engine type
        """
        check_same_type(other, type(self), 'other')
        if other is self:
            return
        self._buf, other._buf = other._buf, self._buf
        self._size, other._size = other._size, self._size

    def assign(self, source: Any) -> None:
        """
        Copy a vector engine of any size, resizing to match it.

        The copy is staged first, so on failure this engine is unchanged.

        Raises:
            EngineTypeError: If source is not a vector engine
        """
        source = unwrap_engine(source)
        check_vector_engine(source, 'source')
        n = source.size()
        staged = self._allocator.allocate(max(n, self._buf.size))
        fill_from(staged[:n], self.element_type, (source[i] for i in range(n)))
        self._buf = staged
        self._size = n

    def copy(self) -> 'DynamicVectorEngine':
        result = object.__new__(type(self))
        result._allocator = self._allocator
        result._buf = copy_storage(self._buf)
        result._size = self._size
        return result


@lru_cache(maxsize=None)
def _dynamic_vector(element_type: type, allocator_type: type) -> type:
    return type(
        f"DynamicVectorEngine[{type_label(element_type)}, {allocator_type.__name__}]",
        (DynamicVectorEngine,),
        {
            'element_type': element_type,
            'value_type': element_type,
            'allocator_type': allocator_type,
            '__module__': __name__,
        },
    )


# ═══════════════════════════════════════════════════════════════════════
# Matrix
# ═══════════════════════════════════════════════════════════════════════


class DynamicMatrixEngine(DenseEngine):
    """
    Dense matrix engine with runtime extents and independent row and
    column capacities.

    Elements are kept row-major inside a (row_capacity, column_capacity)
    grid; the active (rows, columns) block is its top-left corner.

    Parameterize as ``DynamicMatrixEngine[T]`` or
    ``DynamicMatrixEngine[T, Allocator[T]]``.

    Args:
        rows: Initial number of rows
        columns: Initial number of columns
        values: Initial elements in row-major order; at most rows*columns
            are taken and the remaining slots keep their default
        row_capacity: Initial row capacity (raised to rows if smaller)
        column_capacity: Initial column capacity (raised to columns if smaller)
    """

    category = RESIZABLE_MATRIX
    allocator_type: type | None = None

    def __class_getitem__(cls, params: Any) -> type:
        return _dynamic_matrix(*_engine_params(params, 'DynamicMatrixEngine'))

    def __init__(
        self,
        rows: int = 0,
        columns: int = 0,
        values: Iterable[Any] | None = None,
        *,
        row_capacity: int | None = None,
        column_capacity: int | None = None,
    ):
        self._check_parameterized()
        self._allocator = self.allocator_type()

        rows = check_nonnegative(rows, 'rows')
        columns = check_nonnegative(columns, 'columns')
        rowcap = rows if row_capacity is None else max(rows, check_nonnegative(row_capacity, 'row_capacity'))
        colcap = columns if column_capacity is None else max(columns, check_nonnegative(column_capacity, 'column_capacity'))

        self._grid = self._new_grid(rowcap, colcap)
        self._rows = rows
        self._cols = columns
        if values is not None:
            staged = self._allocator.allocate(rows * columns)
            fill_from(staged, self.element_type, values)
            self._grid[:rows, :columns] = staged.reshape(rows, columns)

    @classmethod
    def transposed_type(cls) -> type:
        return cls

    def _new_grid(self, row_capacity: int, column_capacity: int) -> NDArray[Any]:
        return self._allocator.allocate(row_capacity * column_capacity).reshape(
            row_capacity, column_capacity
        )

    def _active(self) -> NDArray[Any]:
        return self._grid[:self._rows, :self._cols]

    # === Element access ===

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._grid[:self._rows, :self._cols][cell_index(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self._grid[:self._rows, :self._cols][cell_index(index)] = coerce(
            self.element_type, self._grid.dtype, value
        )

    def data(self) -> NDArray[Any]:
        """Live (rows, columns) view of the active elements."""
        return self._grid[:self._rows, :self._cols]

    # === Size and capacity ===

    def rows(self) -> int:
        return self._rows

    def columns(self) -> int:
        return self._cols

    def size(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def row_capacity(self) -> int:
        return self._grid.shape[0]

    def column_capacity(self) -> int:
        return self._grid.shape[1]

    def capacity(self) -> tuple[int, int]:
        return self._grid.shape

    def resize(self, rows: int, columns: int) -> None:
        """
        Change the extents.

        Elements in the overlap of the old and new extents are kept; new
        slots hold the element default.
        """
        rows = check_nonnegative(rows, 'rows')
        columns = check_nonnegative(columns, 'columns')
        rowcap, colcap = self._grid.shape

        if rows > rowcap or columns > colcap:
            self._reallocate(max(rows, rowcap), max(columns, colcap))
        else:
            old_rows, old_cols = self._rows, self._cols
            if rows > old_rows:
                self._grid[old_rows:rows, :columns] = self._new_grid(rows - old_rows, columns)
            if columns > old_cols:
                kept = min(old_rows, rows)
                self._grid[:kept, old_cols:columns] = self._new_grid(kept, columns - old_cols)
        self._rows = rows
        self._cols = columns

    def reserve(self, row_capacity: int, column_capacity: int) -> None:
        """Grow capacities to at least the given values; extents are unchanged."""
        row_capacity = check_nonnegative(row_capacity, 'row_capacity')
        column_capacity = check_nonnegative(column_capacity, 'column_capacity')
        rowcap, colcap = self._grid.shape
        if row_capacity > rowcap or column_capacity > colcap:
            self._reallocate(max(row_capacity, rowcap), max(column_capacity, colcap))

    def _reallocate(self, row_capacity: int, column_capacity: int) -> None:
        grid = self._new_grid(row_capacity, column_capacity)
        rows, cols = self._rows, self._cols
        grid[:rows, :cols] = self._grid[:rows, :cols]
        self._grid = grid

    # === Modifiers ===

    def swap_rows(self, i1: int, i2: int) -> None:
        if i1 != i2:
            active = self._active()
            active[[i1, i2], :] = active[[i2, i1], :]

    def swap_columns(self, j1: int, j2: int) -> None:
        if j1 != j2:
            active = self._active()
            active[:, [j1, j2]] = active[:, [j2, j1]]

    def swap(self, other: 'DynamicMatrixEngine') -> None:
        """
        Exchange contents with another engine of the same type.

        Raises:
            EngineTypeError: If other is a different engine type
        """
        check_same_type(other, type(self), 'other')
        if other is self:
            return
        self._grid, other._grid = other._grid, self._grid
        self._rows, other._rows = other._rows, self._rows
        self._cols, other._cols = other._cols, self._cols

    def assign(self, source: Any) -> None:
        """
        Copy a matrix engine of any extents, resizing to match it.

        The copy is staged first, so on failure this engine is unchanged.

        Raises:
            EngineTypeError: If source is not a matrix engine
        """
        source = unwrap_engine(source)
        check_matrix_engine(source, 'source')
        rows, cols = source.size()
        rowcap, colcap = self._grid.shape
        staged = self._allocator.allocate(rows * cols)
        fill_from(
            staged,
            self.element_type,
            (source[i, j] for i in range(rows) for j in range(cols)),
        )
        grid = self._new_grid(max(rows, rowcap), max(cols, colcap))
        grid[:rows, :cols] = staged.reshape(rows, cols)
        self._grid = grid
        self._rows = rows
        self._cols = cols

    def copy(self) -> 'DynamicMatrixEngine':
        result = object.__new__(type(self))
        result._allocator = self._allocator
        result._grid = copy_storage(self._grid)
        result._rows = self._rows
        result._cols = self._cols
        return result


@lru_cache(maxsize=None)
def _dynamic_matrix(element_type: type, allocator_type: type) -> type:
    return type(
        f"DynamicMatrixEngine[{type_label(element_type)}, {allocator_type.__name__}]",
        (DynamicMatrixEngine,),
        {
            'element_type': element_type,
            'value_type': element_type,
            'allocator_type': allocator_type,
            '__module__': __name__,
        },
    )


__all__ = ['DynamicVectorEngine', 'DynamicMatrixEngine']
