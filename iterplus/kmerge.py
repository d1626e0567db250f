"""Merge any number of iterables into one, in ascending order."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


@dataclass
class _HeadTail:
    head: Any
    tail: Iterator[Any]


def _sift_down(heap: List[_HeadTail], index: int, less_than: Callable[[Any, Any], bool]) -> None:
    size = len(heap)
    pos = index
    child = 2 * pos + 1
    while child + 1 < size:
        if less_than(heap[child + 1].head, heap[child].head):
            child += 1
        if not less_than(heap[child].head, heap[pos].head):
            return
        heap[pos], heap[child] = heap[child], heap[pos]
        pos = child
        child = 2 * pos + 1
    if child + 1 == size and less_than(heap[child].head, heap[pos].head):
        heap[pos], heap[child] = heap[child], heap[pos]


def _heapify(heap: List[_HeadTail], less_than: Callable[[Any, Any], bool]) -> None:
    for index in reversed(range(len(heap) // 2)):
        _sift_down(heap, index, less_than)


class KMergeBy(Generic[T]):
    """Merge the iterables, always yielding the head that ``less_than`` ranks first.

    If every input is sorted with respect to ``less_than`` the output is too.
    """

    def __init__(self, iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]) -> None:
        self._less_than = less_than
        self._heap: List[_HeadTail] = []
        for iterable in iterables:
            tail = iter(iterable)
            try:
                head = next(tail)
            except StopIteration:
                continue
            self._heap.append(_HeadTail(head, tail))
        _heapify(self._heap, less_than)

    def __iter__(self) -> KMergeBy[T]:
        return self

    def __next__(self) -> T:
        heap = self._heap
        if not heap:
            raise StopIteration
        top = heap[0]
        try:
            following = next(top.tail)
        except StopIteration:
            result = top.head
            last = heap.pop()
            if heap:
                heap[0] = last
        else:
            result = top.head
            top.head = following
        _sift_down(heap, 0, self._less_than)
        return result

    def __length_hint__(self) -> int:
        return sum(1 + operator.length_hint(entry.tail) for entry in self._heap)


def kmerge(iterables: Iterable[Iterable[T]]) -> KMergeBy[T]:
    """Merge the iterables in ascending order using ``<``."""
    return KMergeBy(iterables, operator.lt)


def kmerge_by(iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]) -> KMergeBy[T]:
    """Merge the iterables using the ``less_than`` predicate."""
    return KMergeBy(iterables, less_than)