"""
Tests for cross-engine assignment.

Validates:
    - Fixed destinations accept any engine of the same size, converting elements
    - Size mismatches raise InvalidSizeError and leave the destination unchanged
    - Failures part-way through conversion leave the destination unchanged
    - Resizable destinations resize to the source
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import EngineTypeError, InvalidSizeError
from pylinalg.engines import (
    DynamicMatrixEngine,
    DynamicVectorEngine,
    FixedMatrixEngine,
    FixedVectorEngine,
)


# ═══════════════════════════════════════════════════════════════════════
# Fixed destinations
# ═══════════════════════════════════════════════════════════════════════


class TestFixedVectorAssign:

    def test_from_dynamic(self):
        dst = FixedVectorEngine[float, 3]()
        dst.assign(DynamicVectorEngine[int]([1, 2, 3]))
        assert list(dst) == [1.0, 2.0, 3.0]

    def test_from_readonly(self, readonly_vector_engine):
        dst = FixedVectorEngine[Fraction, 2]()
        dst.assign(readonly_vector_engine([0.5, 0.25]))
        assert list(dst) == [Fraction(1, 2), Fraction(1, 4)]

    def test_size_mismatch(self):
        dst = FixedVectorEngine[float, 3]([1.0, 2.0, 3.0])
        with pytest.raises(InvalidSizeError) as info:
            dst.assign(FixedVectorEngine[float, 2]())
        assert info.value.kind == 'invalid-size'
        assert info.value.expected == 3
        assert info.value.actual == 2
        assert list(dst) == [1.0, 2.0, 3.0]

    def test_failed_conversion_leaves_destination(self, readonly_vector_engine):
        dst = FixedVectorEngine[float, 3]([1.0, 2.0, 3.0])
        with pytest.raises(ValueError):
            dst.assign(readonly_vector_engine([9.0, 'x', 9.0]))
        assert list(dst) == [1.0, 2.0, 3.0]

    def test_matrix_source_rejected(self):
        with pytest.raises(EngineTypeError):
            FixedVectorEngine[float, 4]().assign(FixedMatrixEngine[float, 2, 2]())


class TestFixedMatrixAssign:

    def test_from_dynamic(self):
        dst = FixedMatrixEngine[float, 2, 2]()
        dst.assign(DynamicMatrixEngine[int](2, 2, [1, 2, 3, 4]))
        np.testing.assert_array_equal(dst.to_numpy(), [[1.0, 2.0], [3.0, 4.0]])

    def test_from_readonly(self, readonly_matrix_engine):
        dst = FixedMatrixEngine[float, 2, 3]()
        dst.assign(readonly_matrix_engine(2, 3, [1, 2, 3, 4, 5, 6]))
        assert dst[1, 2] == 6.0
        assert dst.data()[5] == 6.0

    def test_extent_mismatch(self):
        dst = FixedMatrixEngine[int, 2, 2]([1, 2, 3, 4])
        with pytest.raises(InvalidSizeError) as info:
            dst.assign(DynamicMatrixEngine[int](2, 3))
        assert info.value.expected == (2, 2)
        assert info.value.actual == (2, 3)
        np.testing.assert_array_equal(dst.to_numpy(), [[1, 2], [3, 4]])

    def test_transposed_extents_rejected(self):
        with pytest.raises(InvalidSizeError):
            FixedMatrixEngine[int, 2, 3]().assign(FixedMatrixEngine[int, 3, 2]())

    def test_failed_conversion_leaves_destination(self, readonly_matrix_engine):
        dst = FixedMatrixEngine[float, 1, 2]([1.0, 2.0])
        with pytest.raises(ValueError):
            dst.assign(readonly_matrix_engine(1, 2, [5.0, 'x']))
        np.testing.assert_array_equal(dst.to_numpy(), [[1.0, 2.0]])


# ═══════════════════════════════════════════════════════════════════════
# Resizable destinations
# ═══════════════════════════════════════════════════════════════════════


class TestDynamicAssign:

    def test_vector_resizes(self):
        dst = DynamicVectorEngine[float]([1.0])
        dst.assign(FixedVectorEngine[int, 3]([4, 5, 6]))
        assert list(dst) == [4.0, 5.0, 6.0]
        assert dst.size() == 3

    def test_vector_shrinks(self):
        dst = DynamicVectorEngine[float]([1.0, 2.0, 3.0])
        dst.assign(DynamicVectorEngine[float]([7.0]))
        assert list(dst) == [7.0]
        assert dst.capacity() >= 3

    def test_vector_failed_conversion(self, readonly_vector_engine):
        dst = DynamicVectorEngine[float]([1.0, 2.0])
        with pytest.raises(ValueError):
            dst.assign(readonly_vector_engine(['x']))
        assert list(dst) == [1.0, 2.0]

    def test_matrix_resizes(self):
        dst = DynamicMatrixEngine[float](1, 1)
        dst.assign(FixedMatrixEngine[int, 2, 3]([1, 2, 3, 4, 5, 6]))
        assert dst.size() == (2, 3)
        np.testing.assert_array_equal(dst.to_numpy(), [[1, 2, 3], [4, 5, 6]])

    def test_matrix_keeps_capacity(self):
        dst = DynamicMatrixEngine[float](1, 1, row_capacity=5, column_capacity=5)
        dst.assign(FixedMatrixEngine[float, 2, 2]())
        assert dst.capacity() == (5, 5)

    def test_self_assignment(self):
        dst = DynamicMatrixEngine[int](2, 2, [1, 2, 3, 4])
        dst.assign(dst)
        np.testing.assert_array_equal(dst.to_numpy(), [[1, 2], [3, 4]])
