"""Insert a separator value between the elements of an iterable."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_EMPTY = object()


class IntersperseWith(Generic[T]):
    """Yield the items of ``iterable`` with ``element()`` called between each pair.

    The first item is pulled from the source when the adaptor is created.
    Once the source is exhausted it is never asked for another item.
    """

    def __init__(self, iterable: Iterable[T], element: Callable[[], T]) -> None:
        self._iter: Iterator[T] = iter(iterable)
        self._element = element
        self._done = False
        self._peek: object = self._pull()

    def _pull(self) -> object:
        if self._done:
            return _EMPTY
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _EMPTY

    def __iter__(self) -> IntersperseWith[T]:
        return self

    def __next__(self) -> T:
        if self._peek is not _EMPTY:
            item = self._peek
            self._peek = _EMPTY
            return item  # type: ignore[return-value]
        self._peek = self._pull()
        if self._peek is _EMPTY:
            raise StopIteration
        return self._element()

    def __length_hint__(self) -> int:
        has_peek = int(self._peek is not _EMPTY)
        if self._done:
            return has_peek
        return 2 * operator.length_hint(self._iter) + has_peek


def intersperse(iterable: Iterable[T], element: T) -> IntersperseWith[T]:
    """Yield the items of ``iterable`` with ``element`` between each pair."""
    return IntersperseWith(iterable, lambda: element)


def intersperse_with(iterable: Iterable[T], element: Callable[[], T]) -> IntersperseWith[T]:
    """Yield the items of ``iterable`` with a value made by ``element()`` between each pair."""
    return IntersperseWith(iterable, element)