"""A tagged union holding a value of one of a fixed list of types."""

from __future__ import annotations

import copy as _copy
from typing import Any, Callable, Iterable, Optional, Tuple, Type, TypeVar

__all__ = ["Variant"]

T = TypeVar("T")
R = TypeVar("R")


class Variant:
    """Holds at most one value whose type is exactly one of ``types``.

    The tag is the position of the active type in ``types``, or None when
    the variant is empty.
    """

    def __init__(self, types: Iterable[type], value: Any = None) -> None:
        self._types: Tuple[type, ...] = tuple(types)
        for t in self._types:
            if not isinstance(t, type):
                raise TypeError(f"variant member type must be a type, not {t!r}")
            if t is type(None):
                raise TypeError("variant member cannot be NoneType")
        self._tag: Optional[int] = None
        self._value: Any = None
        if value is not None:
            self.set(value)

    @property
    def types(self) -> Tuple[type, ...]:
        """The member types, in tag order."""
        return self._types

    def tag(self) -> Optional[int]:
        """Return the index of the active member type, or None if empty."""
        return self._tag

    def reset(self) -> None:
        """Clear the value."""
        self._tag = None
        self._value = None

    def set(self, value: T) -> T:
        """Store ``value`` as the member whose type is exactly its type."""
        for index, t in enumerate(self._types):
            if type(value) is t:
                self.reset()
                self._tag = index
                self._value = value
                return value
        raise TypeError("variant_t has no compatible variant member")

    def safe_get(self, type_: Type[T]) -> Optional[T]:
        """Return the value if its member type is ``type_`` or derives from it."""
        if self._tag is None:
            return None
        if issubclass(self._types[self._tag], type_):
            return self._value
        return None

    def get(self, type_: Type[T]) -> T:
        """Return the value, which must be held as ``type_`` or a subclass."""
        if self._tag is None or not issubclass(self._types[self._tag], type_):
            raise LookupError(f"variant does not hold a {type_.__name__}")
        return self._value

    def get_index(self, index: int) -> Any:
        """Return the value held as the member at ``index``."""
        if not 0 <= index < len(self._types):
            raise IndexError("variant ordinal is out of range")
        if self._tag != index:
            raise LookupError(f"variant member {index} is not active")
        return self._value

    def visit(self, func: Callable[[Any], R]) -> R:
        """Call ``func`` with the active value and return its result."""
        if self._tag is None:
            raise LookupError("cannot visit an empty variant")
        return func(self._value)

    def copy(self) -> "Variant":
        """Return an independent copy holding a copy of the value."""
        other = Variant(self._types)
        other._tag = self._tag
        other._value = _copy.deepcopy(self._value)
        return other

    def take(self) -> "Variant":
        """Move the value into a new variant, leaving this one empty."""
        other = Variant(self._types)
        other._tag = self._tag
        other._value = self._value
        self.reset()
        return other

    def __bool__(self) -> bool:
        return self._tag is not None

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._types)
        if self._tag is None:
            return f"Variant[{names}](<none>)"
        return f"Variant[{names}]({self._value!r})"