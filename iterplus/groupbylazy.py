"""Lazy grouping of consecutive elements by key, and lazy fixed-size chunks.

Groups and chunks share one source iterator. Consuming them in order needs
no buffering; elements are buffered only when a later group is requested
while an earlier one is still alive and not yet exhausted.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_NONE: Any = object()


class _ChunkIndex:
    """Key function that numbers consecutive runs of ``size`` elements."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._index = 0
        self._key = 0

    def __call__(self, _item: Any) -> int:
        if self._index == self._size:
            self._key += 1
            self._index = 0
        self._index += 1
        return self._key


class _GroupInner:
    """Shared state behind every group (or chunk) of one grouping."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._key = key
        self._iter: Iterator[Any] = iter(iterable)
        self._current_key: Any = _NONE
        self._current_elt: Any = _NONE
        self._done = False
        # Index of the group currently being buffered or visited.
        self._top_group = 0
        # Least group index that may still have buffered elements.
        self._oldest_buffered_group = 0
        # Group index of ``_buffer[0]``.
        self._bottom_group = 0
        self._buffer: List[Deque[Any]] = []
        # Highest index of a closed group; -1 when none is closed.
        self._dropped_group = -1

    def step(self, client: int) -> Any:
        """Return the next element of group ``client``, or ``_NONE`` at its end."""
        if client < self._oldest_buffered_group:
            return _NONE
        if client < self._top_group or (
            client == self._top_group
            and len(self._buffer) > self._top_group - self._bottom_group
        ):
            return self._lookup_buffer(client)
        if self._done:
            return _NONE
        if client == self._top_group:
            return self._step_current()
        return self._step_buffering(client)

    def _lookup_buffer(self, client: int) -> Any:
        if client < self._oldest_buffered_group:
            return _NONE
        bufidx = client - self._bottom_group
        elt = _NONE
        if bufidx < len(self._buffer) and self._buffer[bufidx]:
            elt = self._buffer[bufidx].popleft()
        if elt is _NONE and client == self._oldest_buffered_group:
            self._oldest_buffered_group += 1
            while True:
                position = self._oldest_buffered_group - self._bottom_group
                if position < len(self._buffer) and not self._buffer[position]:
                    self._oldest_buffered_group += 1
                else:
                    break
            nclear = self._oldest_buffered_group - self._bottom_group
            if nclear > 0 and nclear >= len(self._buffer) // 2:
                del self._buffer[:nclear]
                self._bottom_group = self._oldest_buffered_group
        return elt

    def _next_element(self) -> Any:
        if self._done:
            return _NONE
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _NONE

    def _step_buffering(self, client: int) -> Any:
        # A later group was requested: walk through the current group and
        # buffer its elements unless that group has been closed.
        keep = self._top_group != self._dropped_group
        group: List[Any] = []
        if self._current_elt is not _NONE:
            elt = self._current_elt
            self._current_elt = _NONE
            if keep:
                group.append(elt)
        first_elt = _NONE
        while True:
            elt = self._next_element()
            if elt is _NONE:
                break
            key = self._key(elt)
            if self._current_key is not _NONE and self._current_key != key:
                self._current_key = key
                first_elt = elt
                break
            self._current_key = key
            if keep:
                group.append(elt)
        if keep:
            self._push_next_group(group)
        if first_elt is not _NONE:
            self._top_group += 1
        return first_elt

    def _push_next_group(self, group: List[Any]) -> None:
        while self._top_group - self._bottom_group > len(self._buffer):
            if not self._buffer:
                self._bottom_group += 1
                self._oldest_buffered_group += 1
            else:
                self._buffer.append(deque())
        self._buffer.append(deque(group))

    def _step_current(self) -> Any:
        if self._current_elt is not _NONE:
            elt = self._current_elt
            self._current_elt = _NONE
            return elt
        elt = self._next_element()
        if elt is _NONE:
            return _NONE
        key = self._key(elt)
        if self._current_key is not _NONE and self._current_key != key:
            self._current_key = key
            self._current_elt = elt
            self._top_group += 1
            return _NONE
        self._current_key = key
        return elt

    def group_key(self, client: int) -> Any:
        """Return the key of the group just started, reading one element ahead."""
        old_key = self._current_key
        self._current_key = _NONE
        elt = self._next_element()
        if elt is not _NONE:
            key = self._key(elt)
            if old_key != key:
                self._top_group += 1
            self._current_key = key
            self._current_elt = elt
        return old_key

    def drop_group(self, client: int) -> None:
        """Record that group ``client`` will not be read any more."""
        if client > self._dropped_group:
            self._dropped_group = client


class _LazyMember(Generic[T]):
    """Shared state of an iterator over one group of a shared grouping."""

    def __init__(self, inner: _GroupInner, index: int, first: T) -> None:
        self._inner = inner
        self._index = index
        self._first: Any = first
        self._closed = False

    def _advance(self) -> T:
        if self._closed:
            raise StopIteration
        if self._first is not _NONE:
            elt = self._first
            self._first = _NONE
            return elt
        elt = self._inner.step(self._index)
        if elt is _NONE:
            raise StopIteration
        return elt

    def _close(self) -> None:
        if not self._closed:
            self._closed = True
            self._first = _NONE
            self._inner.drop_group(self._index)

    def __del__(self) -> None:
        try:
            self._close()
        except Exception:
            pass


class Group(_LazyMember[T]):
    """The elements of one group produced by :class:`GroupBy`."""

    def __iter__(self) -> Group[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def close(self) -> None:
        """Stop this group; its remaining elements are no longer buffered."""
        self._close()


class Chunk(_LazyMember[T]):
    """The elements of one chunk produced by :class:`IntoChunks`."""

    def __iter__(self) -> Chunk[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def close(self) -> None:
        """Stop this chunk; its remaining elements are no longer buffered."""
        self._close()


class GroupBy(Generic[K, T]):
    """Group consecutive elements of ``iterable`` that share ``key(element)``.

    Iterating yields ``(key, Group)`` pairs. All iterations over one
    ``GroupBy`` share the same position.
    """

    def __init__(self, iterable: Iterable[T], key: Callable[[T], K]) -> None:
        self._inner = _GroupInner(iterable, key)
        self._index = 0

    def __iter__(self) -> Iterator[Tuple[K, Group[T]]]:
        inner = self._inner
        while True:
            index = self._index
            self._index += 1
            item = inner.step(index)
            if item is _NONE:
                return
            key = inner.group_key(index)
            yield key, Group(inner, index, item)


class IntoChunks(Generic[T]):
    """Split ``iterable`` into consecutive chunks of ``size`` elements.

    Iterating yields :class:`Chunk` iterators; the last chunk may be shorter.
    """

    def __init__(self, iterable: Iterable[T], size: int) -> None:
        if size < 1:
            raise ValueError("chunk size must be at least 1")
        self._inner = _GroupInner(iterable, _ChunkIndex(size))
        self._index = 0

    def __iter__(self) -> Iterator[Chunk[T]]:
        inner = self._inner
        while True:
            index = self._index
            self._index += 1
            item = inner.step(index)
            if item is _NONE:
                return
            yield Chunk(inner, index, item)


def group_by(iterable: Iterable[T], key: Callable[[T], K]) -> GroupBy[K, T]:
    """Group consecutive elements of ``iterable`` by ``key``."""
    return GroupBy(iterable, key)


def chunks(iterable: Iterable[T], size: int) -> IntoChunks[T]:
    """Split ``iterable`` into lazy chunks of ``size`` elements."""
    return IntoChunks(iterable, size)