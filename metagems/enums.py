"""Conversions between enumerators and their names, and flag-enum generation."""

from __future__ import annotations

import enum
import sys
from typing import Iterable, Optional, Sequence, Type, TypeVar

E = TypeVar("E", bound=enum.Enum)


class UnknownEnumeratorError(ValueError):
    """Raised when a name does not match any enumerator of an enumeration."""

    def __init__(self, enum_type: type, name: str) -> None:
        super().__init__(f"'{name}' is not an '{enum_type.__name__}'.")
        self.enum_type = enum_type
        self.name = name


class Shape(enum.Enum):
    """The shapes known to the command-line tool."""

    circle = 0
    square = 1
    rhombus = 2
    nonagon = 3
    water = 4


def _require_enum(enum_type: type) -> None:
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise TypeError(f"{enum_type!r} is not an enumeration type")


def name_from_enum(enum_type: Type[E], value: object) -> Optional[str]:
    """Return the name of the enumerator matching ``value``, or None."""
    _require_enum(enum_type)
    for member in enum_type:
        if member is value:
            return member.name
    if isinstance(value, enum.Enum):
        if not isinstance(value, enum_type):
            return None
        value = value.value
    for member in enum_type:
        if member.value == value and type(value) is not bool:
            return member.name
    return None


def enum_from_name(enum_type: Type[E], name: str) -> Optional[E]:
    """Return the enumerator of ``enum_type`` spelled ``name``, or None."""
    _require_enum(enum_type)
    for member in enum_type:
        if member.name == name:
            return member
    return None


def enum_from_name_error(enum_type: Type[E], name: str) -> E:
    """Return the enumerator spelled ``name``; raise if there is none."""
    member = enum_from_name(enum_type, name)
    if member is None:
        raise UnknownEnumeratorError(enum_type, name)
    return member


def define_flag_enum(name: str, flag_names: Iterable[str]) -> Type[enum.Flag]:
    """Create a flag enumeration whose i-th enumerator has the value 1 << i."""
    names: Sequence[str] = list(flag_names)
    if not name.isidentifier():
        raise ValueError(f"invalid enumeration name {name!r}")
    seen = set()
    for flag in names:
        if not isinstance(flag, str) or not flag.isidentifier():
            raise ValueError(f"invalid enumerator name {flag!r}")
        if flag in seen:
            raise ValueError(f"duplicate enumerator name {flag!r}")
        seen.add(flag)
    return enum.Flag(name, [(flag, 1 << i) for i, flag in enumerate(names)])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Report whether the single argument names a shape."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: enums shape-name")
        return 1
    shape = enum_from_name(Shape, args[0])
    if shape is not None:
        print(f"{name_from_enum(Shape, shape)} is a shape.")
    else:
        print(f"{args[0]} is not a shape.")
    return 0


if __name__ == "__main__":
    sys.exit(main())