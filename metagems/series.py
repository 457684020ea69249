"""Evaluating a power series whose coefficients are read from a file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

SERIES_FILE = "series.txt"


def read_file(path: Union[str, Path]) -> List[float]:
    """Read whitespace-separated numbers, stopping at the first non-number."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    values: List[float] = []
    for token in text.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def evaluate_series(coefficients: Iterable[float], x: float) -> float:
    """Return the sum of c_i * x**i over the coefficients."""
    power = 1.0
    total = 0.0
    for c in coefficients:
        total += power * c
        power *= x
    return total


def _atof(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate the series in ``series.txt`` at the given argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("expected 'x' argument to function\n")
        return 1
    x = _atof(args[0])
    y = evaluate_series(read_file(SERIES_FILE), x)
    print(f"f({x:f}) = {y:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())