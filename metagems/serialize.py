"""Rendering Python values as indented or single-line text.

Three renderings share the same rules for containers:

* :func:`stream` writes the type name before every value and puts each
  element of a container on its own indented line.
* :func:`stream_flat` writes the same type names but keeps everything on
  one line.
* :func:`stream_simple` writes neither type names nor quotes; it is the
  rendering used for format substitutions.

Lists are written as ``[ ... ]``, mappings as ``{ key : value, ... }`` with
their keys in sorted order, and dataclasses, named tuples and plain tuples as
``{ name : value, ... }``. Plain tuples name their members ``_0``, ``_1``
and so on. ``None`` stands for an empty optional and is written ``null``.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from metagems.enums import name_from_enum

__all__ = [
    "type_name",
    "stream",
    "stream_simple",
    "stream_flat",
    "describe_members",
]


def type_name(value: Any) -> str:
    """Return the name of the type of ``value``."""
    return type(value).__name__


def _members(obj: Any) -> Optional[List[Tuple[str, Any]]]:
    """Return the named members of a record-like value, or None."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    if isinstance(obj, tuple):
        field_names = getattr(obj, "_fields", None)
        if field_names is not None:
            return list(zip(field_names, obj))
        return [(f"_{i}", value) for i, value in enumerate(obj)]
    return None


def _scalar_text(obj: Any) -> str:
    if isinstance(obj, float):
        # Six significant digits, as a default-formatted output stream gives.
        return format(obj, "g")
    return str(obj)


def _enum_text(obj: enum.Enum) -> str:
    name = name_from_enum(type(obj), obj)
    return name if name is not None else _scalar_text(obj.value)


def _sorted_items(mapping: Mapping) -> Iterable[Tuple[Any, Any]]:
    try:
        return sorted(mapping.items(), key=lambda item: item[0])
    except TypeError:
        return list(mapping.items())


class _Writer:
    """Accumulates the text of one rendering."""

    def __init__(self, typed: bool, multiline: bool) -> None:
        self.typed = typed
        self.multiline = multiline
        self.parts: List[str] = []

    def text(self) -> str:
        return "".join(self.parts)

    def _child_indent(self, indent: int) -> int:
        return indent + 1

    def _open_item(self, indent: int, first: bool) -> None:
        if not first:
            self.parts.append(",")
        if self.multiline:
            self.parts.append("\n" + "  " * (indent + 1))
        else:
            self.parts.append(" ")

    def _close(self, indent: int, closer: str) -> None:
        if self.multiline:
            self.parts.append("\n" + "  " * indent + closer)
        else:
            self.parts.append(" " + closer)

    def _quoted(self, text: str) -> str:
        return f'"{text}"' if self.typed else text

    def write(self, obj: Any, indent: int) -> None:
        if obj is None:
            self.parts.append("null")
            return

        if self.typed:
            self.parts.append(type_name(obj) + " ")

        if isinstance(obj, enum.Enum):
            self.parts.append(self._quoted(_enum_text(obj)))
            return

        if isinstance(obj, str):
            self.parts.append(self._quoted(obj))
            return

        if isinstance(obj, Mapping):
            self.parts.append("{")
            for i, (key, value) in enumerate(_sorted_items(obj)):
                self._open_item(indent, i == 0)
                self.write(key, indent + 1)
                self.parts.append(" : ")
                self.write(value, indent + 1)
            self._close(indent, "}")
            return

        if isinstance(obj, list):
            self.parts.append("[")
            for i, value in enumerate(obj):
                self._open_item(indent, i == 0)
                self.write(value, indent + 1)
            self._close(indent, "]")
            return

        members = _members(obj)
        if members is not None:
            self.parts.append("{")
            for i, (name, value) in enumerate(members):
                self._open_item(indent, i == 0)
                self.parts.append(f"{name} : ")
                self.write(value, indent + 1)
            self._close(indent, "}")
            return

        self.parts.append(self._quoted(_scalar_text(obj)))


def stream(obj: Any, indent: int = 0) -> str:
    """Render ``obj`` with type names, one container element per line.

    ``indent`` is the nesting level the value starts at; every level adds
    two spaces before the lines of its elements.
    """
    if indent < 0:
        raise ValueError("indent must not be negative")
    writer = _Writer(typed=True, multiline=True)
    writer.write(obj, indent)
    return writer.text()


def stream_flat(obj: Any) -> str:
    """Render ``obj`` with type names on a single line."""
    writer = _Writer(typed=True, multiline=False)
    writer.write(obj, 0)
    return writer.text()


def stream_simple(obj: Any) -> str:
    """Render ``obj`` on a single line without type names or quotes."""
    writer = _Writer(typed=False, multiline=False)
    writer.write(obj, 0)
    return writer.text()


def describe_members(obj: Any) -> str:
    """List each member of a record with its type, name and quoted value."""
    members = _members(obj)
    if members is None:
        raise TypeError(
            f"describe_members requires a record type, not {type_name(obj)}"
        )
    lines = [f"{type_name(obj)} {{\n"]
    lines.extend(
        f'  {type_name(value)} {name}: "{stream_simple(value)}"\n'
        for name, value in members
    )
    lines.append("}\n")
    return "".join(lines)