"""
Tests for numpy element storage.

Validates:
    - dtype selection per element type
    - Default initialization asymmetry (zeros vs T())
    - Lazy, truncating fill
    - Copies never share element objects
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.storage import (
    coerce,
    copy_storage,
    default_storage,
    fill_from,
    storage_dtype,
)


class Seven:
    """Element type whose default value is seven."""

    def __init__(self, value=7):
        self.value = value

    def __add__(self, other):
        return Seven(self.value + other.value)

    def __sub__(self, other):
        return Seven(self.value - other.value)

    def __mul__(self, other):
        return Seven(self.value * other.value)

    def __eq__(self, other):
        return isinstance(other, Seven) and self.value == other.value


# ═══════════════════════════════════════════════════════════════════════
# storage_dtype
# ═══════════════════════════════════════════════════════════════════════


class TestStorageDtype:

    @pytest.mark.parametrize("element_type, expected", [
        (float, np.float64),
        (int, np.int64),
        (bool, np.bool_),
        (complex, np.complex128),
        (np.float32, np.float32),
        (np.int16, np.int16),
        (Fraction, object),
    ])
    def test_dtype(self, element_type, expected):
        assert storage_dtype(element_type) == np.dtype(expected)


# ═══════════════════════════════════════════════════════════════════════
# default_storage
# ═══════════════════════════════════════════════════════════════════════


class TestDefaultStorage:
    """Arithmetic types are zeroed, others hold T()."""

    def test_float32_zeroed(self):
        buf = default_storage(np.float32, 3)
        assert buf.dtype == np.float32
        np.testing.assert_array_equal(buf, [0.0, 0.0, 0.0])

    def test_bool_false(self):
        assert not default_storage(bool, 4).any()

    def test_complex_default(self):
        buf = default_storage(complex, 2)
        assert buf.dtype == np.complex128
        assert list(buf) == [0j, 0j]

    def test_fraction_default(self):
        buf = default_storage(Fraction, 2)
        assert buf.dtype == object
        assert list(buf) == [Fraction(0), Fraction(0)]

    def test_user_type_holds_default_value(self):
        buf = default_storage(Seven, 3)
        assert all(v == Seven(7) for v in buf)

    def test_user_type_slots_not_aliased(self):
        buf = default_storage(Seven, 2)
        assert buf[0] is not buf[1]

    def test_zero_count(self):
        assert default_storage(float, 0).size == 0


# ═══════════════════════════════════════════════════════════════════════
# coerce / fill_from
# ═══════════════════════════════════════════════════════════════════════


class TestFill:

    def test_coerce_object_storage(self):
        value = coerce(Fraction, np.dtype(object), 3)
        assert isinstance(value, Fraction)
        assert value == 3

    def test_coerce_native_passthrough(self):
        assert coerce(float, np.dtype(np.float64), 3) == 3

    def test_partial_fill_keeps_defaults(self):
        buf = default_storage(float, 4)
        assert fill_from(buf, float, [1, 2]) == 2
        np.testing.assert_array_equal(buf, [1.0, 2.0, 0.0, 0.0])

    def test_excess_values_truncated(self):
        buf = default_storage(float, 2)
        assert fill_from(buf, float, [1, 2, 3, 4]) == 2
        np.testing.assert_array_equal(buf, [1.0, 2.0])

    def test_consumes_lazily(self):
        it = iter([1, 2, 3, 4])
        buf = default_storage(int, 3)
        fill_from(buf, int, it)
        assert next(it) == 4

    def test_object_fill_converts(self):
        buf = default_storage(Fraction, 2)
        fill_from(buf, Fraction, [1, 2])
        assert all(isinstance(v, Fraction) for v in buf)


# ═══════════════════════════════════════════════════════════════════════
# copy_storage
# ═══════════════════════════════════════════════════════════════════════


class TestCopyStorage:

    def test_native_copy_independent(self):
        buf = np.array([1.0, 2.0])
        dup = copy_storage(buf)
        dup[0] = 9.0
        assert buf[0] == 1.0

    def test_object_copy_not_aliased(self):
        buf = default_storage(Seven, 2)
        dup = copy_storage(buf)
        assert dup[0] is not buf[0]
        assert dup[0] == buf[0]

    def test_shape_preserved(self):
        buf = default_storage(Seven, 6).reshape(2, 3)
        assert copy_storage(buf).shape == (2, 3)
