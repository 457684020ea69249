"""Printf-like formatting where ``%`` stands for the next argument.

Every ``%`` in a format string is replaced by the single-line rendering of
the next argument; ``%%`` writes one ``%``. The format must use each
argument exactly once.

:func:`eprintf` accepts a format with the expressions written in braces,
``"x = {x}"``, and looks each expression up in a mapping of values.
"""

from __future__ import annotations

import re
import sys
from typing import Any, List, Mapping, TextIO, Tuple

from metagems.serialize import stream_simple

__all__ = [
    "FormatError",
    "cirformat",
    "fcirprint",
    "cirprint",
    "parse_braces",
    "transform_format",
    "eprintf",
]

_ESCAPE = re.compile(r"%%|%")


class FormatError(ValueError):
    """A format string does not match the arguments given for it."""


def cirformat(fmt: str, *args: Any) -> str:
    """Substitute each ``%`` in ``fmt`` with the next argument."""
    parts: List[str] = []
    used = 0
    pos = 0
    for match in _ESCAPE.finditer(fmt):
        parts.append(fmt[pos:match.start()])
        if match.group() == "%%":
            parts.append("%")
        else:
            if used >= len(args):
                raise FormatError("cirformat replacement is out-of-range")
            parts.append(stream_simple(args[used]))
            used += 1
        pos = match.end()
    parts.append(fmt[pos:])

    if used != len(args):
        raise FormatError("not all cirformat arguments used in format string")
    return "".join(parts)


def fcirprint(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream``; return its length."""
    text = cirformat(fmt, *args)
    stream.write(text)
    return len(text)


def cirprint(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    return fcirprint(sys.stdout, fmt, *args)


def parse_braces(text: str, start: int) -> int:
    """Return the index just past the ``}`` that closes a brace at ``start - 1``.

    A nested ``{`` hands the scan over to the inner brace, so the result is
    the index past the first ``}`` found after it.
    """
    for i in range(start, len(text)):
        c = text[i]
        if c == "{":
            return parse_braces(text, i + 1)
        if c == "}":
            return i + 1
    raise FormatError("mismatched { } in parse_braces")


def transform_format(fmt: str) -> Tuple[str, List[str]]:
    """Replace each ``{expr}`` with ``%`` and collect the expressions.

    ``%{`` writes a literal ``{`` and any other ``%`` is escaped as ``%%``.
    """
    out: List[str] = []
    names: List[str] = []
    i = 0
    while i < len(fmt):
        c = fmt[i]
        if c == "{":
            end = parse_braces(fmt, i + 1)
            names.append(fmt[i + 1:end - 1])
            out.append("%")
            i = end
        elif c == "%" and fmt[i + 1:i + 2] == "{":
            out.append("{")
            i += 2
        elif c == "%":
            out.append("%%")
            i += 1
        else:
            out.append(c)
            i += 1
    return "".join(out), names


def eprintf(fmt: str, values: Mapping[str, Any]) -> int:
    """Print ``fmt`` with each ``{expr}`` replaced by ``values[expr]``."""
    fmt2, names = transform_format(fmt)
    args = []
    for name in names:
        try:
            args.append(values[name])
        except KeyError:
            raise FormatError(f"no value for expression {name!r}") from None
    return cirprint(fmt2, *args)