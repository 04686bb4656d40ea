# costar/common/iter.py
from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


def chunked(it: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield lists of at most `size` items from an iterable (last chunk may be smaller)."""
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")
    buf: list[T] = []
    for x in it:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
