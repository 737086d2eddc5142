"""
Fixed-size vector and matrix engines.

Fixed-size means the extents are part of the engine type: they are chosen
when the class is parameterized and never change afterwards.

    >>> E = FixedVectorEngine[np.float32, 3]
    >>> E().size(), E().capacity(), E().elements()
    (3, 3, 3)
    >>> M = FixedMatrixEngine[float, 2, 3]([1, 2, 3, 4])
    >>> M[1, 0], M[1, 2]
    (4.0, 0.0)

Parameterization validates the element type and extents, so a malformed
type such as ``FixedVectorEngine[float, 0]`` raises ExtentError before any
instance can exist. Parameterized classes are cached.

Construction from an initializer takes at most capacity values; extra
values are silently discarded, and slots past the supplied values keep
their default (zero for arithmetic element types, T() otherwise).

Indexed access is unchecked by the engine. The numpy buffer still raises
IndexError past the end, and negative indices wrap; callers must not
rely on either. Matrix engines accept only (i, j) integer pairs, so no
row view or slice of the storage is handed out (TypeError otherwise).
"""

from functools import lru_cache
from typing import Any, Iterable, Iterator

from numpy.typing import NDArray

from pylinalg.core.categories import MUTABLE_MATRIX, MUTABLE_VECTOR
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.storage import coerce, copy_storage, default_storage, fill_from
from pylinalg.core.validation import (
    check_element_type,
    check_extent,
    check_matrix_engine,
    check_same_type,
    check_size_match,
    check_vector_engine,
)
from pylinalg.engines._common import DenseEngine, cell_index, type_label, unwrap_engine


def _split_params(params: Any, expected: int, name: str) -> tuple[Any, ...]:
    if not isinstance(params, tuple) or len(params) != expected:
        raise ValidationError(
            f"{name} takes {expected} type parameters, got {params!r}"
        )
    return params


# ═══════════════════════════════════════════════════════════════════════
# Vector
# ═══════════════════════════════════════════════════════════════════════


class FixedVectorEngine(DenseEngine):
    """
    Dense vector engine owning exactly N contiguous elements.

    Parameterize as ``FixedVectorEngine[T, N]``.
    """

    category = MUTABLE_VECTOR
    extent: int | None = None

    def __class_getitem__(cls, params: Any) -> type:
        element_type, n = _split_params(params, 2, 'FixedVectorEngine')
        return _fixed_vector(check_element_type(element_type), check_extent(n, 'N'))

    def __init__(self, values: Iterable[Any] | None = None):
        self._check_parameterized()
        self._elems = default_storage(self.element_type, self.extent)
        if values is not None:
            fill_from(self._elems, self.element_type, values)

    def _active(self) -> NDArray[Any]:
        return self._elems

    # === Element access ===

    def __getitem__(self, i: int) -> Any:
        return self._elems[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._elems[i] = coerce(self.element_type, self._elems.dtype, value)

    def __iter__(self) -> Iterator[Any]:
        elems = self._elems
        for k in range(self.extent):
            yield elems[k]

    def __len__(self) -> int:
        return self.extent

    def data(self) -> NDArray[Any]:
        """The live contiguous element buffer."""
        return self._elems

    # === Size and capacity ===

    def size(self) -> int:
        return self.extent

    def capacity(self) -> int:
        return self.extent

    def elements(self) -> int:
        return self.extent

    # === Modifiers ===

    def swap_elements(self, i: int, j: int) -> None:
        if i != j:
            elems = self._elems
            elems[i], elems[j] = elems[j], elems[i]

    def swap(self, other: 'FixedVectorEngine') -> None:
        """
        Exchange all elements with another engine of the same type.

        Raises:
            EngineTypeError: If other is a different engine type
        """
        check_same_type(other, type(self), 'other')
        if other is self:
            return
        mine = self._elems.copy()
        self._elems[...] = other._elems
        other._elems[...] = mine

    def assign(self, source: Any) -> None:
        """
        Copy every element of a vector engine of the same size.

        The copy is staged first, so on failure this engine is unchanged.

        Raises:
            EngineTypeError: If source is not a vector engine
            InvalidSizeError: If source.size() != N
        """
        source = unwrap_engine(source)
        check_vector_engine(source, 'source')
        check_size_match(self.extent, source.size(), 'source')
        staged = default_storage(self.element_type, self.extent)
        fill_from(staged, self.element_type, (source[i] for i in range(self.extent)))
        self._elems[...] = staged

    def copy(self) -> 'FixedVectorEngine':
        result = object.__new__(type(self))
        result._elems = copy_storage(self._elems)
        return result


@lru_cache(maxsize=None)
def _fixed_vector(element_type: type, n: int) -> type:
    return type(
        f"FixedVectorEngine[{type_label(element_type)}, {n}]",
        (FixedVectorEngine,),
        {
            'element_type': element_type,
            'value_type': element_type,
            'extent': n,
            '__module__': __name__,
        },
    )


# ═══════════════════════════════════════════════════════════════════════
# Matrix
# ═══════════════════════════════════════════════════════════════════════


class FixedMatrixEngine(DenseEngine):
    """
    Dense matrix engine owning R x C elements in row-major order.

    Parameterize as ``FixedMatrixEngine[T, R, C]``. Element (i, j) lives at
    offset ``i*C + j`` of ``data()``.
    """

    category = MUTABLE_MATRIX
    row_extent: int | None = None
    column_extent: int | None = None

    def __class_getitem__(cls, params: Any) -> type:
        element_type, r, c = _split_params(params, 3, 'FixedMatrixEngine')
        return _fixed_matrix(
            check_element_type(element_type),
            check_extent(r, 'R'),
            check_extent(c, 'C'),
        )

    def __init__(self, values: Iterable[Any] | None = None):
        self._check_parameterized()
        self._elems = default_storage(self.element_type, self.row_extent * self.column_extent)
        if values is not None:
            fill_from(self._elems, self.element_type, values)
        self._grid = self._elems.reshape(self.row_extent, self.column_extent)

    @classmethod
    def transposed_type(cls) -> type:
        """Fixed engine type with rows and columns exchanged."""
        return FixedMatrixEngine[cls.element_type, cls.column_extent, cls.row_extent]

    def _active(self) -> NDArray[Any]:
        return self._grid

    # === Element access ===

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._grid[cell_index(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self._grid[cell_index(index)] = coerce(self.element_type, self._elems.dtype, value)

    def data(self) -> NDArray[Any]:
        """The live contiguous row-major element buffer."""
        return self._elems

    # === Size and capacity ===

    def rows(self) -> int:
        return self.row_extent

    def columns(self) -> int:
        return self.column_extent

    def size(self) -> tuple[int, int]:
        return (self.row_extent, self.column_extent)

    def row_capacity(self) -> int:
        return self.row_extent

    def column_capacity(self) -> int:
        return self.column_extent

    def capacity(self) -> tuple[int, int]:
        return (self.row_extent, self.column_extent)

    # === Modifiers ===

    def swap_rows(self, i1: int, i2: int) -> None:
        if i1 != i2:
            grid = self._grid
            grid[[i1, i2], :] = grid[[i2, i1], :]

    def swap_columns(self, j1: int, j2: int) -> None:
        if j1 != j2:
            grid = self._grid
            grid[:, [j1, j2]] = grid[:, [j2, j1]]

    def swap(self, other: 'FixedMatrixEngine') -> None:
        """
        Exchange all elements with another engine of the same type.

        Raises:
            EngineTypeError: If other is a different engine type
        """
        check_same_type(other, type(self), 'other')
        if other is self:
            return
        mine = self._elems.copy()
        self._elems[...] = other._elems
        other._elems[...] = mine

    def assign(self, source: Any) -> None:
        """
        Copy every element of a matrix engine with the same extents.

        The copy is staged first, so on failure this engine is unchanged.

        Raises:
            EngineTypeError: If source is not a matrix engine
            InvalidSizeError: If source.size() != (R, C)
        """
        source = unwrap_engine(source)
        check_matrix_engine(source, 'source')
        check_size_match(self.size(), tuple(source.size()), 'source')
        rows, cols = self.row_extent, self.column_extent
        staged = default_storage(self.element_type, rows * cols)
        fill_from(
            staged,
            self.element_type,
            (source[i, j] for i in range(rows) for j in range(cols)),
        )
        self._elems[...] = staged

    def copy(self) -> 'FixedMatrixEngine':
        result = object.__new__(type(self))
        result._elems = copy_storage(self._elems)
        result._grid = result._elems.reshape(self.row_extent, self.column_extent)
        return result


@lru_cache(maxsize=None)
def _fixed_matrix(element_type: type, r: int, c: int) -> type:
    return type(
        f"FixedMatrixEngine[{type_label(element_type)}, {r}, {c}]",
        (FixedMatrixEngine,),
        {
            'element_type': element_type,
            'value_type': element_type,
            'row_extent': r,
            'column_extent': c,
            '__module__': __name__,
        },
    )


__all__ = ['FixedVectorEngine', 'FixedMatrixEngine']
