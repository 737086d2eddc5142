"""
pytest configuration and shared fixtures.

Besides the library engines, the suite uses two small read-only engines
defined here. They implement only the read side of the engine contract,
which exercises category gating and the generic (non-numpy) code paths.
"""

import numpy as np
import pytest

from pylinalg.core.categories import CONSTANT_MATRIX, CONSTANT_VECTOR


class ReadOnlyVectorEngine:
    """Tuple-backed vector engine with the constant_vector category."""

    category = CONSTANT_VECTOR
    element_type = float
    value_type = float
    size_type = int
    difference_type = int

    def __init__(self, values=()):
        self._values = tuple(values)

    def __getitem__(self, i):
        return self._values[i]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def size(self):
        return len(self._values)

    capacity = size
    elements = size

    def copy(self):
        return ReadOnlyVectorEngine(self._values)


class ReadOnlyMatrixEngine:
    """Nested-tuple matrix engine with the constant_matrix category."""

    category = CONSTANT_MATRIX
    element_type = float
    value_type = float
    size_type = int
    difference_type = int

    def __init__(self, rows, columns, values=()):
        values = list(values) + [0.0] * (rows * columns - len(values))
        self._rows = tuple(
            tuple(values[i * columns:(i + 1) * columns]) for i in range(rows)
        )
        self._shape = (rows, columns)

    def __getitem__(self, index):
        i, j = index
        return self._rows[i][j]

    def rows(self):
        return self._shape[0]

    def columns(self):
        return self._shape[1]

    def size(self):
        return self._shape

    row_capacity = rows
    column_capacity = columns
    capacity = size

    def copy(self):
        rows, cols = self._shape
        return ReadOnlyMatrixEngine(rows, cols, [v for row in self._rows for v in row])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def readonly_vector_engine():
    """The read-only vector engine class."""
    return ReadOnlyVectorEngine


@pytest.fixture
def readonly_matrix_engine():
    """The read-only matrix engine class."""
    return ReadOnlyMatrixEngine
