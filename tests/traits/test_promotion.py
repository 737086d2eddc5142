"""
Tests for operation traits selection and result-type promotion.

Validates:
    - select_operation_traits: identical, default vs custom, conflicts
    - promote_element: hooks, numpy and Python promotion, fallback warning
    - promote_engine: resizable operands, equal fixed extents, fallback
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import ElementTypeError, TraitsResolutionError
from pylinalg.engines import (
    DynamicMatrixEngine,
    DynamicVectorEngine,
    FixedMatrixEngine,
    FixedVectorEngine,
)
from pylinalg.traits import Allocator
from pylinalg.traits.promotion import (
    OperationTraits,
    promote_element,
    promote_engine,
    select_operation_traits,
)


class SinglePrecision(OperationTraits):
    @staticmethod
    def element_promotion(t1, t2):
        return np.float32


class Deferring(OperationTraits):
    """Hooks that always defer to the computed default."""

    @staticmethod
    def element_promotion(t1, t2):
        return None

    @staticmethod
    def engine_promotion(e1, e2, element_type):
        return None


class AlwaysDynamic(OperationTraits):
    @staticmethod
    def engine_promotion(e1, e2, element_type):
        if e1.category.endswith('vector'):
            return DynamicVectorEngine[element_type]
        return DynamicMatrixEngine[element_type]


class PoolAllocator(Allocator):
    pass


# ═══════════════════════════════════════════════════════════════════════
# select_operation_traits
# ═══════════════════════════════════════════════════════════════════════


class TestSelectOperationTraits:

    def test_default_pair(self):
        assert select_operation_traits(OperationTraits, OperationTraits) is OperationTraits

    def test_identical_custom(self):
        assert select_operation_traits(SinglePrecision, SinglePrecision) is SinglePrecision

    def test_custom_wins_either_side(self):
        assert select_operation_traits(SinglePrecision, OperationTraits) is SinglePrecision
        assert select_operation_traits(OperationTraits, SinglePrecision) is SinglePrecision

    def test_conflicting_custom_traits(self):
        with pytest.raises(TraitsResolutionError, match="incompatible"):
            select_operation_traits(SinglePrecision, AlwaysDynamic)

    def test_non_traits_rejected(self):
        with pytest.raises(TraitsResolutionError):
            select_operation_traits(OperationTraits, float)


# ═══════════════════════════════════════════════════════════════════════
# promote_element
# ═══════════════════════════════════════════════════════════════════════


class TestPromoteElement:

    def test_same_type(self):
        assert promote_element(OperationTraits, Fraction, Fraction) is Fraction

    @pytest.mark.parametrize("t1, t2, expected", [
        (float, float, float),
        (int, float, float),
        (float, np.float32, float),
        (np.float32, np.float32, np.float32),
        (np.int32, np.float32, np.float64),
        (float, complex, complex),
        (bool, int, int),
    ])
    def test_numpy_promotion(self, t1, t2, expected):
        assert promote_element(OperationTraits, t1, t2) is expected

    def test_python_promotion(self):
        assert promote_element(OperationTraits, Fraction, int) is Fraction
        assert promote_element(OperationTraits, Fraction, float) is float

    def test_hook_overrides(self):
        assert promote_element(SinglePrecision, float, complex) is np.float32

    def test_hook_returning_none_defers(self):
        assert promote_element(Deferring, int, float) is float

    def test_dtype_strings_accepted(self):
        assert promote_element(OperationTraits, 'float32', 'float32') is np.float32

    def test_invalid_element_type(self):
        with pytest.raises(ElementTypeError):
            promote_element(OperationTraits, str, float)

    def test_fallback_warns(self):
        class Apples:
            def __add__(self, other):
                if not isinstance(other, Apples):
                    return NotImplemented
                return Apples()

            __sub__ = __add__
            __mul__ = __add__

        class Plums:
            def __add__(self, other):
                if not isinstance(other, Plums):
                    return NotImplemented
                return Plums()

            __sub__ = __add__
            __mul__ = __add__

        with pytest.warns(UserWarning, match="No common element type"):
            result = promote_element(OperationTraits, Apples, Plums)
        assert result is np.float64

    def test_decimal_float_falls_back(self):
        with pytest.warns(UserWarning):
            result = promote_element(Deferring, Decimal, float)
        assert result is np.float64


# ═══════════════════════════════════════════════════════════════════════
# promote_engine
# ═══════════════════════════════════════════════════════════════════════


class TestPromoteEngine:

    def test_equal_fixed_vectors(self):
        result = promote_engine(OperationTraits, FixedVectorEngine[int, 3], FixedVectorEngine[float, 3])
        assert result is FixedVectorEngine[float, 3]

    def test_unequal_fixed_vectors_fall_back(self):
        result = promote_engine(OperationTraits, FixedVectorEngine[float, 2], FixedVectorEngine[float, 3])
        assert result is DynamicVectorEngine[float]

    def test_equal_fixed_matrices(self):
        result = promote_engine(
            OperationTraits, FixedMatrixEngine[np.float32, 2, 3], FixedMatrixEngine[np.float32, 2, 3]
        )
        assert result is FixedMatrixEngine[np.float32, 2, 3]

    def test_unequal_fixed_matrices_fall_back(self):
        result = promote_engine(
            OperationTraits, FixedMatrixEngine[float, 2, 3], FixedMatrixEngine[float, 3, 2]
        )
        assert result is DynamicMatrixEngine[float]

    def test_resizable_operand_wins(self):
        result = promote_engine(OperationTraits, FixedVectorEngine[int, 3], DynamicVectorEngine[float])
        assert result is DynamicVectorEngine[float]

    def test_allocator_rebound(self):
        e1 = DynamicMatrixEngine[np.float32, PoolAllocator[np.float32]]
        e2 = FixedMatrixEngine[complex, 2, 2]
        result = promote_engine(OperationTraits, e1, e2)
        assert result.element_type is complex
        assert result.allocator_type is PoolAllocator[complex]
        assert issubclass(result, DynamicMatrixEngine)

    def test_hook_overrides(self):
        result = promote_engine(AlwaysDynamic, FixedVectorEngine[float, 3], FixedVectorEngine[float, 3])
        assert result is DynamicVectorEngine[float]

    def test_hook_returning_none_defers(self):
        result = promote_engine(Deferring, FixedVectorEngine[float, 3], FixedVectorEngine[float, 3])
        assert result is FixedVectorEngine[float, 3]

    def test_readonly_engines_fall_back(self, readonly_vector_engine):
        result = promote_engine(OperationTraits, readonly_vector_engine, readonly_vector_engine)
        assert result is DynamicVectorEngine[float]

    def test_mixed_kinds_rejected(self):
        with pytest.raises(TraitsResolutionError, match="different kinds"):
            promote_engine(OperationTraits, FixedVectorEngine[float, 2], FixedMatrixEngine[float, 2, 2])

    def test_non_classes_rejected(self):
        with pytest.raises(TraitsResolutionError, match="engine class"):
            promote_engine(OperationTraits, "FixedVectorEngine", FixedVectorEngine[float, 2])

    def test_cached(self):
        e1, e2 = FixedVectorEngine[int, 4], DynamicVectorEngine[float]
        assert promote_engine(OperationTraits, e1, e2) is promote_engine(OperationTraits, e1, e2)
