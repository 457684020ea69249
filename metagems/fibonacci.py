"""Printing a table of Fibonacci numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence


def fib(count: int) -> List[int]:
    """Return the first ``count`` Fibonacci numbers; ``count`` must be >= 2."""
    if count < 2:
        raise ValueError("count must be at least 2")
    numbers = [0, 1]
    while len(numbers) < count:
        numbers.append(numbers[-2] + numbers[-1])
    return numbers


def format_numbers(count: int) -> str:
    """Return one numbered line per Fibonacci number."""
    return "".join(f"{i:3d}: {n:8d}\n" for i, n in enumerate(fib(count)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the Fibonacci table for the count given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: fibonacci count", file=sys.stderr)
        return 1
    try:
        count = int(args[0])
        table = format_numbers(count)
    except ValueError:
        print("count must be an integer >= 2", file=sys.stderr)
        return 1
    sys.stdout.write(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())