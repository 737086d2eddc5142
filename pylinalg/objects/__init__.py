"""
Vector and matrix value types.

Each facade owns one engine and one OperationTraits class; the engine's
category tag decides which modifiers are available.

Public API:
    Vector, Matrix
    ResultTypes, result_requires_resize
"""

from pylinalg.objects._common import ResultTypes, result_requires_resize
from pylinalg.objects.matrix import Matrix
from pylinalg.objects.vector import Vector

__all__ = [
    "Vector",
    "Matrix",
    "ResultTypes",
    "result_requires_resize",
]
