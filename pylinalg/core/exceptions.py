"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error.

Two tiers exist:
    - Definition-time errors (ExtentError, ElementTypeError,
      TraitsResolutionError) are raised while an engine class is being
      parameterized or a result type is being resolved, before any
      instance exists.
    - Runtime errors (InvalidSizeError, CapabilityError, EngineTypeError)
      are raised by operations on live objects.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Extents or sizes are incorrect or inconsistent.
    """
    pass


class ExtentError(DimensionError):
    """
    A fixed extent is malformed.

    Raised when a fixed-size engine is parameterized with an extent that
    is not a positive integer (N=0, R=0, C=0, negative or non-integer).

    Attributes:
        name: Extent name ('N', 'R' or 'C')
        value: The offending value
    """

    def __init__(self, message: str, name: str | None = None, value: Any = None):
        super().__init__(message)
        self.name = name
        self.value = value


class ElementTypeError(ValidationError):
    """
    Type is not a valid vector/matrix element.

    Attributes:
        element_type: The rejected type
    """

    def __init__(self, message: str, element_type: Any = None):
        super().__init__(message)
        self.element_type = element_type


class EngineTypeError(ValidationError):
    """
    Engine operands have incompatible types.

    Raised e.g. when swapping two engines whose types differ.

    Attributes:
        expected: Required engine type
        actual: Engine type that was supplied
    """

    def __init__(self, message: str, expected: type | None = None, actual: type | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class TraitsResolutionError(ValidationError):
    """
    Result-type resolution was given a malformed combination.

    Raised when two mutually incompatible operation traits meet, when a
    resolution has no fallback, or when operands of different kinds
    (vector vs matrix) are promoted together.
    """
    pass


class InvalidSizeError(DimensionError):
    """
    Source size does not fit a fixed-size destination.

    Raised by cross-engine assignment into a fixed-size engine when the
    source size differs from the destination's fixed size. The destination
    is left unmodified.

    Attributes:
        kind: Always 'invalid-size'
        expected: Destination size (int for vectors, (rows, cols) for matrices)
        actual: Source size
    """

    kind = 'invalid-size'

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CapabilityError(PyLinalgError):
    """
    Operation is not available for an engine's category.

    Attributes:
        category: Category tag of the engine
        operation: Name of the rejected operation
    """

    def __init__(self, message: str, category: str | None = None, operation: str | None = None):
        super().__init__(message)
        self.category = category
        self.operation = operation
