"""A buffer that pulls items from an iterator only when asked to."""

from __future__ import annotations

import itertools
from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """Hold the items read so far from an iterator and read more on demand.

    Once the iterator is exhausted it is never asked for another item.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Iterator[T] = iter(iterable)
        self._buffer: List[T] = []
        self._done = False

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        return self._buffer[index]

    def count(self) -> int:
        """Return the buffered count plus the items left in the iterator, consuming it."""
        remaining = 0 if self._done else sum(1 for _ in self._iter)
        self._done = True
        return len(self._buffer) + remaining

    def get_next(self) -> bool:
        """Read one more item into the buffer; return whether one was available."""
        if self._done:
            return False
        try:
            self._buffer.append(next(self._iter))
        except StopIteration:
            self._done = True
            return False
        return True

    def prefill(self, length: int) -> None:
        """Read items until the buffer holds ``length`` of them or the iterator ends."""
        delta = length - len(self._buffer)
        if delta <= 0 or self._done:
            return
        before = len(self._buffer)
        self._buffer.extend(itertools.islice(self._iter, delta))
        if len(self._buffer) - before < delta:
            self._done = True