"""
Tests that engines outside the library satisfy the engine contract
structurally, without inheriting from library classes.
"""

from pylinalg.core.protocols import (
    MatrixEngine,
    MutableMatrixEngine,
    MutableVectorEngine,
    VectorEngine,
)


class TestReadOnlyEngines:

    def test_vector_contract(self, readonly_vector_engine):
        engine = readonly_vector_engine([1.0, 2.0])
        assert isinstance(engine, VectorEngine)
        assert not isinstance(engine, MutableVectorEngine)
        assert engine.size() == engine.capacity() == engine.elements() == 2

    def test_matrix_contract(self, readonly_matrix_engine):
        engine = readonly_matrix_engine(2, 3, [1.0])
        assert isinstance(engine, MatrixEngine)
        assert not isinstance(engine, MutableMatrixEngine)
        assert engine.size() == (2, 3)
        assert engine[0, 0] == 1.0
        assert engine[1, 2] == 0.0

    def test_vector_is_not_matrix(self, readonly_vector_engine):
        assert not isinstance(readonly_vector_engine(), MatrixEngine)
