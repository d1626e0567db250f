"""Group elements by key and fold each group in a single pass."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")

_MISSING: Any = object()


@dataclass(frozen=True)
class NoElements:
    """The group had no elements."""


@dataclass(frozen=True)
class OneElement(Generic[V]):
    """The group had exactly one element."""

    value: V


@dataclass(frozen=True)
class MinMax(Generic[V]):
    """The minimum and maximum of a group with two or more elements."""

    min: V
    max: V


MinMaxResult = Union[NoElements, OneElement[V], MinMax[V]]


def _natural_compare(_key: Any, first: Any, second: Any) -> int:
    if first < second:
        return -1
    if second < first:
        return 1
    return 0


def _key_compare(key: Callable[[Any, Any], Any]) -> Callable[[Any, Any, Any], int]:
    def compare(group_key: Any, first: Any, second: Any) -> int:
        return _natural_compare(group_key, key(group_key, first), key(group_key, second))

    return compare


def _add_to(collection: Any, value: Any) -> None:
    if hasattr(collection, "append"):
        collection.append(value)
    elif hasattr(collection, "add"):
        collection.add(value)
    elif hasattr(collection, "extend"):
        collection.extend([value])
    elif hasattr(collection, "update"):
        collection.update([value])
    else:
        raise TypeError(f"cannot add elements to {type(collection).__name__}")


class GroupingMap(Generic[K, V]):
    """Group ``(key, value)`` pairs by key and aggregate each group.

    Every operation reads the pairs once, so a grouping map can be
    consumed by only one operation.
    """

    def __init__(self, pairs: Iterable[Tuple[K, V]]) -> None:
        self._pairs: Iterator[Tuple[K, V]] = iter(pairs)

    def aggregate(self, operation: Callable[[Optional[R], K, V], Optional[R]]) -> Dict[K, R]:
        """Fold each group with ``operation(acc, key, value)``.

        ``acc`` is ``None`` for the first element of a group, or after the
        accumulator was discarded. Returning ``None`` discards the
        accumulator; a group whose last step discards it has no entry.
        """
        destination: Dict[K, R] = {}
        for key, value in self._pairs:
            acc = destination.pop(key, None)
            result = operation(acc, key, value)
            if result is not None:
                destination[key] = result
        return destination

    def fold(self, init: R, operation: Callable[[R, K, V], R]) -> Dict[K, R]:
        """Fold each group starting from a copy of ``init``."""
        destination: Dict[K, R] = {}
        for key, value in self._pairs:
            acc = destination.get(key, _MISSING)
            if acc is _MISSING:
                acc = copy.copy(init)
            destination[key] = operation(acc, key, value)
        return destination

    def fold_first(self, operation: Callable[[V, K, V], V]) -> Dict[K, V]:
        """Fold each group starting from its first element."""
        destination: Dict[K, V] = {}
        for key, value in self._pairs:
            acc = destination.get(key, _MISSING)
            destination[key] = value if acc is _MISSING else operation(acc, key, value)
        return destination

    def collect(self, factory: Callable[[], Any]) -> Dict[K, Any]:
        """Collect each group, in input order, into a collection made by ``factory()``."""
        destination: Dict[K, Any] = {}
        for key, value in self._pairs:
            collection = destination.get(key, _MISSING)
            if collection is _MISSING:
                collection = factory()
                destination[key] = collection
            _add_to(collection, value)
        return destination

    def max(self) -> Dict[K, V]:
        """Return the maximum of each group; the last of equal maxima wins."""
        return self.max_by(_natural_compare)

    def max_by(self, compare: Callable[[K, V, V], int]) -> Dict[K, V]:
        """Return the maximum of each group under ``compare(key, a, b)``.

        ``compare`` returns a negative, zero or positive number. The last of
        equal maxima wins.
        """
        return self.fold_first(
            lambda acc, key, value: acc if compare(key, acc, value) > 0 else value
        )

    def max_by_key(self, key: Callable[[K, V], Any]) -> Dict[K, V]:
        """Return the element of each group with the greatest ``key(group_key, value)``."""
        return self.max_by(_key_compare(key))

    def min(self) -> Dict[K, V]:
        """Return the minimum of each group; the first of equal minima wins."""
        return self.min_by(_natural_compare)

    def min_by(self, compare: Callable[[K, V, V], int]) -> Dict[K, V]:
        """Return the minimum of each group under ``compare(key, a, b)``.

        The first of equal minima wins.
        """
        return self.fold_first(
            lambda acc, key, value: value if compare(key, acc, value) > 0 else acc
        )

    def min_by_key(self, key: Callable[[K, V], Any]) -> Dict[K, V]:
        """Return the element of each group with the least ``key(group_key, value)``."""
        return self.min_by(_key_compare(key))

    def minmax(self) -> Dict[K, Union[OneElement[V], MinMax[V]]]:
        """Return the minimum and maximum of each group."""
        return self.minmax_by(_natural_compare)

    def minmax_by(
        self, compare: Callable[[K, V, V], int]
    ) -> Dict[K, Union[OneElement[V], MinMax[V]]]:
        """Return the minimum and maximum of each group under ``compare``.

        The first of equal minima and the last of equal maxima win. A group
        of one element gives :class:`OneElement`.
        """

        def step(acc: Any, key: K, value: V) -> Any:
            if acc is None:
                return OneElement(value)
            if isinstance(acc, OneElement):
                if compare(key, value, acc.value) < 0:
                    return MinMax(value, acc.value)
                return MinMax(acc.value, value)
            if compare(key, value, acc.min) < 0:
                return MinMax(value, acc.max)
            if compare(key, value, acc.max) >= 0:
                return MinMax(acc.min, value)
            return acc

        return self.aggregate(step)

    def minmax_by_key(
        self, key: Callable[[K, V], Any]
    ) -> Dict[K, Union[OneElement[V], MinMax[V]]]:
        """Return the elements of each group with the least and greatest ``key``."""
        return self.minmax_by(_key_compare(key))

    def sum(self) -> Dict[K, V]:
        """Add up the elements of each group with ``+``."""
        return self.fold_first(lambda acc, _key, value: acc + value)

    def product(self) -> Dict[K, V]:
        """Multiply the elements of each group with ``*``."""
        return self.fold_first(lambda acc, _key, value: acc * value)


def into_grouping_map(pairs: Iterable[Tuple[K, V]]) -> GroupingMap[K, V]:
    """Make a grouping map from ``(key, value)`` pairs."""
    return GroupingMap(pairs)


def into_grouping_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> GroupingMap[K, V]:
    """Make a grouping map keying each value by ``key(value)``."""
    return GroupingMap((key(value), value) for value in iterable)