"""
Storage providers for resizable engines.

An Allocator is a stateless factory bound to one element type:

    >>> alloc = Allocator[np.float32]()
    >>> buf = alloc.allocate(8)        # 8 zeroed float32 slots

Allocator classes are cached per (family, element type), so
``Allocator[float] is Allocator[float]``. Subclasses form their own
family: rebinding a subclass yields the same subclass bound to the new
element type. Fixed-size engines do not use allocators.
"""

from functools import lru_cache
from typing import Any

from numpy.typing import NDArray

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.storage import default_storage
from pylinalg.core.validation import check_element_type, check_nonnegative


class Allocator:
    """Default storage provider backed by numpy arrays."""

    element_type: type | None = None
    _family: type | None = None

    def __class_getitem__(cls, element_type: Any) -> type:
        family = cls._family or cls
        return _bind(family, check_element_type(element_type))

    def __init__(self) -> None:
        if self.element_type is None:
            raise ValidationError(
                f"{type(self).__name__} must be bound to an element type, "
                f"e.g. {type(self).__name__}[float]"
            )

    @classmethod
    def rebind(cls, element_type: type) -> type:
        """Same allocator family bound to another element type."""
        return (cls._family or cls)[element_type]

    def allocate(self, count: int) -> NDArray[Any]:
        """
        Obtain ``count`` default-initialized elements.

        Args:
            count: Number of elements (>= 0)

        Returns:
            Flat numpy array of length ``count``
        """
        count = check_nonnegative(count, 'count')
        return default_storage(self.element_type, count)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@lru_cache(maxsize=None)
def _bind(family: type, element_type: type) -> type:
    name = getattr(element_type, '__name__', repr(element_type))
    return type(
        f"{family.__name__}[{name}]",
        (family,),
        {
            'element_type': element_type,
            '_family': family,
            '__module__': family.__module__,
        },
    )


__all__ = ['Allocator']
