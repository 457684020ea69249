"""Copying a sequence in unrolled chunks, in the manner of Duff's device."""

from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T", bound=MutableSequence)


def duff_copy(dest: T, source: Sequence, count: int, unroll: int = 8) -> T:
    """Copy the first ``count`` items of ``source`` into the start of ``dest``.

    The first chunk holds ``count % unroll`` items (or ``unroll`` when that is
    zero); every later chunk holds ``unroll`` items.
    """
    if unroll <= 0:
        raise ValueError("unroll must be > 0")
    if count < 0:
        raise ValueError("count must not be negative")
    if count > len(source) or count > len(dest):
        raise ValueError("count exceeds the length of source or dest")

    pos = 0
    while remaining := count - pos:
        step = remaining % unroll or unroll
        dest[pos:pos + step] = source[pos:pos + step]
        pos += step
    return dest