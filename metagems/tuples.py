"""Tuple types whose members are named ``_0``, ``_1``, ... by position."""

from __future__ import annotations

import dataclasses
import functools
from typing import Any, Iterable, List, Type

__all__ = [
    "make_tuple_type",
    "cir_tuple",
    "get",
    "stable_unique",
    "unique_tuple_type",
]


def _member_name(index: int) -> str:
    return f"_{index}"


@functools.lru_cache(maxsize=None)
def _tuple_type(types: tuple) -> type:
    fields = [
        (_member_name(i), t, dataclasses.field(default_factory=t))
        for i, t in enumerate(types)
    ]
    cls = dataclasses.make_dataclass("tuple_t", fields)
    cls.__doc__ = "A tuple of " + ", ".join(t.__name__ for t in types) + "."
    return cls


def make_tuple_type(*args: type) -> Type[Any]:
    """Return the tuple class with one member ``_i`` per type argument.

    The same type arguments always give the same class. Members left out
    of the constructor are default-constructed from their type.
    """
    for arg in args:
        if not isinstance(arg, type):
            raise TypeError(f"tuple member type must be a type, not {arg!r}")
    return _tuple_type(tuple(args))


def cir_tuple(*args: Any) -> Any:
    """Build a tuple whose member types are the types of the arguments."""
    cls = make_tuple_type(*(type(arg) for arg in args))
    return cls(*args)


def get(tuple_obj: Any, index: int) -> Any:
    """Return the member at position ``index`` of a tuple."""
    if index < 0:
        raise IndexError("tuple index out of range")
    if dataclasses.is_dataclass(tuple_obj) and not isinstance(tuple_obj, type):
        names = [f.name for f in dataclasses.fields(tuple_obj)]
        if index >= len(names):
            raise IndexError("tuple index out of range")
        return getattr(tuple_obj, names[index])
    if isinstance(tuple_obj, tuple):
        return tuple_obj[index]
    raise TypeError(f"{type(tuple_obj).__name__} is not a tuple")


def stable_unique(items: Iterable[Any]) -> List[Any]:
    """Return the items with later duplicates removed, keeping first order."""
    unique: List[Any] = []
    for item in items:
        if item not in unique:
            unique.append(item)
    return unique


def unique_tuple_type(*args: type) -> Type[Any]:
    """Return the tuple class over the distinct type arguments, in order."""
    return make_tuple_type(*stable_unique(args))