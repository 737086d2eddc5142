"""
Engine category tags for pylinalg.

This module is the SINGLE SOURCE OF TRUTH for category strings.
Import from here, never use raw strings.

Every engine class publishes exactly one tag as its ``category`` class
attribute. The set of tags is closed: consumers gate the operations they
offer strictly by tag.

Usage:
    from pylinalg.core.categories import MUTABLE_MATRIX, is_resizable_category

    if is_resizable_category(engine.category):
        engine.resize(rows, cols)
"""

# Read-only vector: element reads, size queries
CONSTANT_VECTOR = 'constant_vector'

# Vector with element writes and swaps, fixed size
MUTABLE_VECTOR = 'mutable_vector'

# Vector with element writes, swaps and resize/reserve
RESIZABLE_VECTOR = 'resizable_vector'

# Read-only matrix
CONSTANT_MATRIX = 'constant_matrix'

# Matrix with element writes and row/column swaps, fixed size
MUTABLE_MATRIX = 'mutable_matrix'

# Matrix with element writes, swaps and resize/reserve
RESIZABLE_MATRIX = 'resizable_matrix'

VECTOR_CATEGORIES = frozenset({CONSTANT_VECTOR, MUTABLE_VECTOR, RESIZABLE_VECTOR})

MATRIX_CATEGORIES = frozenset({CONSTANT_MATRIX, MUTABLE_MATRIX, RESIZABLE_MATRIX})

# Resizable implies mutable
MUTABLE_CATEGORIES = frozenset({
    MUTABLE_VECTOR,
    RESIZABLE_VECTOR,
    MUTABLE_MATRIX,
    RESIZABLE_MATRIX,
})

RESIZABLE_CATEGORIES = frozenset({RESIZABLE_VECTOR, RESIZABLE_MATRIX})

# All categories as a frozenset for validation
ALL_CATEGORIES = VECTOR_CATEGORIES | MATRIX_CATEGORIES


def is_vector_category(tag: str) -> bool:
    return tag in VECTOR_CATEGORIES


def is_matrix_category(tag: str) -> bool:
    return tag in MATRIX_CATEGORIES


def is_mutable_category(tag: str) -> bool:
    return tag in MUTABLE_CATEGORIES


def is_resizable_category(tag: str) -> bool:
    return tag in RESIZABLE_CATEGORIES


def is_resizable_engine(engine: object) -> bool:
    """
    Check whether an engine (class or instance) is resizable.

    Unknown objects MUST return False, never raise.
    """
    return getattr(engine, 'category', None) in RESIZABLE_CATEGORIES


__all__ = [
    'CONSTANT_VECTOR',
    'MUTABLE_VECTOR',
    'RESIZABLE_VECTOR',
    'CONSTANT_MATRIX',
    'MUTABLE_MATRIX',
    'RESIZABLE_MATRIX',
    'VECTOR_CATEGORIES',
    'MATRIX_CATEGORIES',
    'MUTABLE_CATEGORIES',
    'RESIZABLE_CATEGORIES',
    'ALL_CATEGORIES',
    'is_vector_category',
    'is_matrix_category',
    'is_mutable_category',
    'is_resizable_category',
    'is_resizable_engine',
]
