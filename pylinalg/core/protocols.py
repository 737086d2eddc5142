"""
Storage engine contract for pylinalg.

These define the structural interfaces every engine must satisfy. We use
Protocol (structural typing) rather than ABC (nominal typing) so that
user-defined engines participate without inheriting from library classes.

The contract is split by capability rather than collected into one
interface with unsupported methods:

    VectorEngine          MatrixEngine            read access, size queries
        |                     |
    MutableVectorEngine   MutableMatrixEngine     writes, swaps, assignment
        |                     |
    ResizableVectorEngine ResizableMatrixEngine   resize, reserve

Each engine class publishes, as class attributes:
    category:        exactly one tag from pylinalg.core.categories
    element_type:    the stored scalar type
    value_type:      element_type without qualifiers
    size_type:       type of sizes and indices (int)
    difference_type: type of index differences (int)

Indexed access is unchecked: callers guarantee 0 <= i < size() (vectors)
and (i, j) in [0, rows()) x [0, columns()) (matrices).
"""

from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class VectorEngine(Protocol):
    """
    Read-only vector engine.

    Iteration yields exactly ``size()`` elements in index order and may
    be restarted any number of times.
    """

    category: str
    element_type: type
    value_type: type

    def __getitem__(self, i: int) -> Any: ...

    def __iter__(self) -> Iterator[Any]: ...

    def __len__(self) -> int: ...

    def size(self) -> int:
        """Number of elements currently held."""
        ...

    def capacity(self) -> int:
        """Number of elements storage is reserved for."""
        ...

    def elements(self) -> int:
        """Number of elements (equals size())."""
        ...


@runtime_checkable
class MutableVectorEngine(VectorEngine, Protocol):
    """Vector engine with element writes, swaps and assignment."""

    def __setitem__(self, i: int, value: Any) -> None: ...

    def swap_elements(self, i: int, j: int) -> None:
        """Exchange elements i and j. No-op when i == j."""
        ...

    def swap(self, other: Any) -> None:
        """Exchange contents with an engine of identical type. No-op on self."""
        ...

    def assign(self, source: Any) -> None:
        """
        Copy another vector engine into this one.

        Raises:
            InvalidSizeError: If this engine is fixed-size and the source
                size differs
        """
        ...


@runtime_checkable
class ResizableVectorEngine(MutableVectorEngine, Protocol):
    """Vector engine whose size may change at runtime."""

    def resize(self, size: int) -> None: ...

    def reserve(self, capacity: int) -> None: ...


@runtime_checkable
class MatrixEngine(Protocol):
    """Read-only matrix engine. Elements are addressed as engine[i, j]."""

    category: str
    element_type: type
    value_type: type

    def __getitem__(self, index: tuple[int, int]) -> Any: ...

    def rows(self) -> int: ...

    def columns(self) -> int: ...

    def size(self) -> tuple[int, int]:
        """(rows, columns)"""
        ...

    def row_capacity(self) -> int: ...

    def column_capacity(self) -> int: ...

    def capacity(self) -> tuple[int, int]:
        """(row_capacity, column_capacity)"""
        ...


@runtime_checkable
class MutableMatrixEngine(MatrixEngine, Protocol):
    """Matrix engine with element writes, row/column swaps and assignment."""

    def __setitem__(self, index: tuple[int, int], value: Any) -> None: ...

    def swap_rows(self, i1: int, i2: int) -> None:
        """Exchange rows i1 and i2. No-op when i1 == i2."""
        ...

    def swap_columns(self, j1: int, j2: int) -> None:
        """Exchange columns j1 and j2. No-op when j1 == j2."""
        ...

    def swap(self, other: Any) -> None: ...

    def assign(self, source: Any) -> None:
        """
        Copy another matrix engine into this one.

        Raises:
            InvalidSizeError: If this engine is fixed-size and the source
                size differs
        """
        ...


@runtime_checkable
class ResizableMatrixEngine(MutableMatrixEngine, Protocol):
    """Matrix engine whose extents may change at runtime."""

    def resize(self, rows: int, columns: int) -> None: ...

    def reserve(self, row_capacity: int, column_capacity: int) -> None: ...
