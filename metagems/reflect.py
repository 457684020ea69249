"""Inspecting the members of record types and building related types.

A record is a dataclass instance, a named tuple or a plain tuple; plain
tuple members are named ``_0``, ``_1`` and so on.
"""

from __future__ import annotations

import dataclasses
import functools
import sys
import typing
from typing import Any, List, Optional, Tuple

from metagems.serialize import stream_simple

__all__ = [
    "print_object",
    "describe_type",
    "struct_of_pointers",
    "struct_of_vectors",
    "member_sum",
]


def _type_name(t: Any) -> str:
    if typing.get_origin(t) is None and isinstance(t, type):
        return t.__name__
    if isinstance(t, str):
        return t
    return str(t).replace("typing.", "")


def _declared_types(cls: type) -> List[Tuple[str, Any]]:
    return [(f.name, f.type) for f in dataclasses.fields(cls)]


def _members(obj: Any) -> List[Tuple[str, Any, Any]]:
    """Return (name, declared type, value) for each member of a record."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [
            (name, t, getattr(obj, name)) for name, t in _declared_types(type(obj))
        ]
    if isinstance(obj, tuple):
        names = getattr(obj, "_fields", None)
        if names is None:
            names = [f"_{i}" for i in range(len(obj))]
        return [(name, type(value), value) for name, value in zip(names, obj)]
    raise TypeError(f"{type(obj).__name__} is not a record type")


def print_object(obj: Any) -> None:
    """Print one ``type name: value`` line for each member of ``obj``."""
    lines = [
        f"{_type_name(t)} {name}: {stream_simple(value)}\n"
        for name, t, value in _members(obj)
    ]
    sys.stdout.write("".join(lines))


def describe_type(cls: type) -> str:
    """Return the type's name followed by an indented line per member."""
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a record type")
    lines = [f"{cls.__name__}\n"]
    lines.extend(f"  {_type_name(t)} {name}\n" for name, t in _declared_types(cls))
    return "".join(lines)


def _derived(cls: type, template: str, wrap, field_for) -> type:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a record type")
    fields = [(name, wrap(t), field_for()) for name, t in _declared_types(cls)]
    derived = dataclasses.make_dataclass(template, fields)
    derived.__name__ = derived.__qualname__ = f"{template}[{cls.__name__}]"
    return derived


@functools.lru_cache(maxsize=None)
def struct_of_pointers(cls: type) -> type:
    """Return a record with an optional reference for each member of ``cls``."""
    return _derived(
        cls,
        "struct_of_pointers_t",
        lambda t: Optional[t] if not isinstance(t, str) else f"Optional[{t}]",
        lambda: dataclasses.field(default=None),
    )


@functools.lru_cache(maxsize=None)
def struct_of_vectors(cls: type) -> type:
    """Return a record with a list for each member of ``cls``."""
    return _derived(
        cls,
        "struct_of_vectors_t",
        lambda t: List[t] if not isinstance(t, str) else f"list[{t}]",
        lambda: dataclasses.field(default_factory=list),
    )


def member_sum(obj: Any) -> float:
    """Return the sum of all members of ``obj`` as a float."""
    total = 0.0
    for name, _, value in _members(obj):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"member {name} is not a number")
        total += value
    return total