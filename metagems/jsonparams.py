"""Looking up kernel parameters in JSON data by a key record.

The JSON data is a list (or an object, whose values are used) of items.
An item matches a key when every member of the key that the item mentions
has the same value in the item. The members of a value record are then read
from the matching item. Enumerations are read from their names and lists
element by element. Anything unexpected is reported on standard output and
the member keeps its default.
"""

import dataclasses
import enum
import typing
from typing import Any, Iterable, List, Mapping, Optional, Type, TypeVar

from metagems.cirformat import cirprint
from metagems.enums import enum_from_name

__all__ = [
    "KernelFlag",
    "KernelKey",
    "Params",
    "compare_key",
    "find_json_item",
    "read_json_value",
    "load_json_value",
    "find_json_value",
]

V = TypeVar("V")

_SIMPLE_TYPES = {"int": int, "float": float, "str": str, "bool": bool}


class KernelFlag(enum.Enum):
    """Options a kernel may be compiled with."""

    ldg = 0
    ftz = 1
    fast_math = 2


@dataclasses.dataclass
class KernelKey:
    """Selects a kernel by architecture and element type."""

    sm: int = 0
    type: str = ""


@dataclasses.dataclass
class Params:
    """Tuning parameters of a kernel."""

    bytes_per_lane: int = 0
    lanes_per_thread: int = 0
    flags: List[KernelFlag] = dataclasses.field(default_factory=list)


def _field_types(cls: type) -> List[tuple]:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a record type")
    return [
        (f.name, _SIMPLE_TYPES.get(f.type, f.type) if isinstance(f.type, str) else f.type)
        for f in dataclasses.fields(cls)
    ]


def _convert(value: Any, value_type: Any) -> Any:
    """Convert a JSON scalar to ``value_type``; raise TypeError if it cannot."""
    if value_type is bool:
        if isinstance(value, bool):
            return value
    elif value_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float):
            return int(value)
    elif value_type is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif value_type is str:
        if isinstance(value, str):
            return value
    elif isinstance(value_type, type) and isinstance(value, value_type):
        return value
    name = getattr(value_type, "__name__", str(value_type))
    raise TypeError(f"cannot read {type(value).__name__} {value!r} as {name}")


def compare_key(item: Any, key: Any) -> bool:
    """Tell whether every key member present in ``item`` has the key's value."""
    if not isinstance(item, Mapping):
        return True
    for name, member_type in _field_types(type(key)):
        if name in item:
            if getattr(key, name) != _convert(item[name], member_type):
                return False
    return True


def _items(data: Any) -> Iterable[Any]:
    if isinstance(data, Mapping):
        return data.values()
    return data


def find_json_item(items: Any, key: Any) -> Optional[Any]:
    """Return the first item matching ``key``, or None after reporting it."""
    for item in _items(items):
        if compare_key(item, key):
            return item
    cirprint("  **No JSON item matching key %\n", key)
    return None


def read_json_value(item: Any, value_type: Any, key: Any, name: str) -> Optional[Any]:
    """Read ``item`` as ``value_type``; report and return None on bad data."""
    if isinstance(value_type, type) and issubclass(value_type, enum.Enum):
        text = _convert(item, str)
        member = enum_from_name(value_type, text)
        if member is None:
            cirprint("  **Unrecognized enum '%' at '%' in %\n", text, name, key)
        return member

    if typing.get_origin(value_type) is list or value_type is list:
        if not isinstance(item, list):
            cirprint("  **Expected array at '%' in %\n", name, key)
            return None
        args = typing.get_args(value_type)
        if not args:
            return list(item)
        inner = args[0]
        values = []
        for element in item:
            value = read_json_value(element, inner, key, name)
            if value is not None:
                values.append(value)
        return values

    return _convert(item, value_type)


def load_json_value(item: Any, value_type: Type[V], key: Any) -> V:
    """Read every member of ``value_type`` from ``item``; report missing ones."""
    fields = _field_types(value_type)
    value = value_type()
    for name, member_type in fields:
        if isinstance(item, Mapping) and name in item:
            member = read_json_value(item[name], member_type, key, name)
            if member is not None:
                setattr(value, name, member)
        else:
            cirprint("  **No field '%' in %\n", name, key)
    return value


def find_json_value(items: Any, value_type: Type[V], key: Any) -> V:
    """Find the item matching ``key`` and read a ``value_type`` from it."""
    item = find_json_item(items, key)
    if item is not None:
        return load_json_value(item, value_type, key)
    return value_type()