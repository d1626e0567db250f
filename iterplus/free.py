"""Free functions over any iterable."""

from __future__ import annotations

import builtins
import copy
import functools
import itertools
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")
B = TypeVar("B")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def enumerate(iterable: Iterable[T]) -> Iterator[Tuple[int, T]]:
    """Iterate ``iterable`` with a running index."""
    return builtins.enumerate(iterable)


def rev(iterable: Iterable[T]) -> Iterator[T]:
    """Iterate a reversible ``iterable`` backwards."""
    return builtins.reversed(iterable)  # type: ignore[call-overload]


def chain(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Iterate ``first`` and then ``second``."""
    return itertools.chain(first, second)


def cloned(iterable: Iterable[T]) -> Iterator[T]:
    """Yield a shallow copy of each element."""
    return builtins.map(copy.copy, iterable)


def fold(iterable: Iterable[T], init: B, function: Callable[[B, T], B]) -> B:
    """Fold ``iterable`` into one value, starting from ``init``."""
    return functools.reduce(function, iterable, init)


def all(iterable: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for every element."""
    return builtins.all(predicate(item) for item in iterable)


def any(iterable: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for some element."""
    return builtins.any(predicate(item) for item in iterable)


def max(iterable: Iterable[T]) -> Optional[T]:
    """Return the greatest element, the last of equal ones, or ``None`` if empty."""
    best: Any = None
    first = True
    for item in iterable:
        if first or not item < best:
            best = item
            first = False
    return best


def min(iterable: Iterable[T]) -> Optional[T]:
    """Return the least element, the first of equal ones, or ``None`` if empty."""
    best: Any = None
    first = True
    for item in iterable:
        if first or item < best:
            best = item
            first = False
    return best


def join(iterable: Iterable[Any], sep: str) -> str:
    """Join the string forms of the elements with ``sep``."""
    return sep.join(builtins.map(str, iterable))


def sorted(iterable: Iterable[T]) -> List[T]:
    """Return the elements in ascending order."""
    return builtins.sorted(iterable)  # type: ignore[type-var]


def into_group_map(pairs: Iterable[Tuple[K, V]]) -> Dict[K, List[V]]:
    """Map each key to the list of values paired with it, in input order."""
    lookup: Dict[K, List[V]] = {}
    for key, value in pairs:
        lookup.setdefault(key, []).append(value)
    return lookup


def into_group_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> Dict[K, List[V]]:
    """Map ``key(value)`` to the list of values giving it, in input order."""
    return into_group_map((key(value), value) for value in iterable)