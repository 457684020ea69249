"""Choosing a computation from three enumerators named on the command line."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from metagems.enums import UnknownEnumeratorError, enum_from_name_error

__all__ = ["Shape", "Color", "Fill", "ShapeComputer", "dispatch", "main"]


class Shape(enum.Enum):
    """Shapes, each with its value."""

    circle = 10.0
    square = 20.0
    octagon = 30.0


class Color(enum.Enum):
    """Colors, each with its value."""

    red = 1.0
    green = 2.0
    yellow = 3.0


class Fill(enum.Enum):
    """Fills, each with its value."""

    solid = 0.1
    hatch = 0.2
    halftone = 0.3


@dataclass(frozen=True)
class ShapeComputer:
    """Combines a shape, a color and a fill into one function of x."""

    shape: Shape
    color: Color
    fill: Fill

    def go(self, x: float) -> float:
        """Return (x * shape + color) * fill."""
        return (x * self.shape.value + self.color.value) * self.fill.value


def dispatch(key: Tuple[Shape, Color, Fill], x: float) -> float:
    """Evaluate the computer selected by ``key`` at ``x``."""
    shape, color, fill = key
    for value, kind in ((shape, Shape), (color, Color), (fill, Fill)):
        if not isinstance(value, kind):
            raise TypeError(f"expected a {kind.__name__}, got {value!r}")
    return ShapeComputer(shape, color, fill).go(x)


def _atof(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``dispatch shape-name color-name fill-name x``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print("Usage: dispatch shape-name color-name fill-name x")
        return 1
    try:
        shape = enum_from_name_error(Shape, args[0])
        color = enum_from_name_error(Color, args[1])
        fill = enum_from_name_error(Fill, args[2])
    except UnknownEnumeratorError as exc:
        print(exc, file=sys.stderr)
        return 1
    y = dispatch((shape, color, fill), _atof(args[3]))
    print(f"The dispatch result is {y:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())