"""
Shared behavior for the dense engines.

Dense engines are value types: copies never share elements, equality is
element-wise, and nothing is hashable. Subclasses provide ``_active()``,
the live numpy view of the elements currently in use, and ``copy()``.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.storage import copy_storage


class DenseEngine:
    """Base class for the numpy-backed engines."""

    category: str | None = None
    element_type: type | None = None
    value_type: type | None = None
    size_type = int
    difference_type = int

    def _check_parameterized(self) -> None:
        if self.element_type is None:
            name = type(self).__name__
            raise ValidationError(
                f"{name} must be parameterized before use, e.g. {name}[float, ...]"
            )

    def _active(self) -> NDArray[Any]:
        raise NotImplementedError

    def copy(self) -> 'DenseEngine':
        raise NotImplementedError

    def to_numpy(self) -> NDArray[Any]:
        """Independent numpy copy of the active elements."""
        return copy_storage(self._active())

    def __copy__(self) -> 'DenseEngine':
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> 'DenseEngine':
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        mine, theirs = self._active(), other._active()
        return mine.shape == theirs.shape and bool(np.array_equal(mine, theirs))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._active().tolist()!r})"


def unwrap_engine(source: Any) -> Any:
    """Return the engine owned by a facade, or source itself."""
    return getattr(source, 'engine', source)


def type_label(element_type: type) -> str:
    """Short element type name used in parameterized class names."""
    return getattr(element_type, '__name__', repr(element_type))


def cell_index(index: Any) -> tuple[int, int]:
    """
    Validate a matrix element index.

    Matrix engines are addressed by (i, j) integer pairs only. Row indices,
    slices and arrays would hand out views into the engine's storage.

    Raises:
        TypeError: If index is not a pair of integers
    """
    if (not isinstance(index, tuple) or len(index) != 2
            or not all(isinstance(k, (int, np.integer)) for k in index)):
        raise TypeError(
            f"matrix engines are indexed by (i, j) integer pairs, got {index!r}"
        )
    return index
