"""
Tests for three-candidate resolution and allocator rebinding.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import ElementTypeError, TraitsResolutionError
from pylinalg.traits import Allocator, rebind_alloc, resolve


class PoolAllocator(Allocator):
    """Allocator family used to check rebinding keeps the family."""
    pass


# ═══════════════════════════════════════════════════════════════════════
# resolve
# ═══════════════════════════════════════════════════════════════════════


class TestResolve:
    """Override beats computed beats fallback."""

    def test_only_fallback(self):
        assert resolve(None, None, float) is float

    def test_computed_beats_fallback(self):
        assert resolve(None, int, float) is int

    def test_override_beats_everything(self):
        assert resolve(complex, int, float) is complex
        assert resolve(complex, None, float) is complex

    def test_falsy_candidates_are_present(self):
        assert resolve(0, 1, 2) == 0
        assert resolve(None, 0, 2) == 0
        assert resolve(None, '', 'x') == ''

    def test_missing_fallback_rejected(self):
        with pytest.raises(TraitsResolutionError, match="fallback"):
            resolve(int, int, None)


# ═══════════════════════════════════════════════════════════════════════
# rebind_alloc
# ═══════════════════════════════════════════════════════════════════════


class TestRebindAlloc:
    """Rebinding gives the same family bound to another element type."""

    def test_default_family(self):
        assert rebind_alloc(Allocator[float], np.float32) is Allocator[np.float32]

    def test_same_type_identity(self):
        assert rebind_alloc(Allocator[float], float) is Allocator[float]

    def test_custom_family_preserved(self):
        rebound = rebind_alloc(PoolAllocator[float], Fraction)
        assert rebound is PoolAllocator[Fraction]
        assert issubclass(rebound, PoolAllocator)
        assert rebound.element_type is Fraction

    def test_dtype_string_element(self):
        assert rebind_alloc(Allocator[float], 'int32') is Allocator[np.int32]

    def test_unbound_allocator_rejected(self):
        with pytest.raises(TraitsResolutionError, match="parameterized Allocator"):
            rebind_alloc(Allocator, float)

    def test_non_allocator_rejected(self):
        with pytest.raises(TraitsResolutionError):
            rebind_alloc(float, int)

    def test_invalid_element_rejected(self):
        with pytest.raises(ElementTypeError):
            rebind_alloc(Allocator[float], str)
