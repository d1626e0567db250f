import functools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterplus.intersperse import IntersperseWith, intersperse, intersperse_with


class _Resuming:
    """An iterator that raises StopIteration at ``None`` and then carries on."""

    def __init__(self, items):
        self._items = list(items)

    def __iter__(self):
        return self

    def __next__(self):
        if not self._items:
            raise StopIteration
        item = self._items.pop(0)
        if item is None:
            raise StopIteration
        return item


def test_intersperse_strings():
    xs = ["a", "", "b", "c"]
    text = "".join(intersperse(xs, ", "))
    assert text == "a, , b, c"


def test_intersperse_empty():
    sentinel = object()
    it = intersperse([], 1)
    assert next(it, sentinel) is sentinel
    assert list(intersperse([], 1)) == []


def test_intersperse_range():
    assert list(intersperse(range(3), 8)) == [0, 8, 1, 8, 2]


def test_intersperse_with_counter():
    state = {"i": 10}

    def make():
        state["i"] -= 1
        return state["i"]

    assert list(intersperse_with(range(3), make)) == [0, 9, 1, 8, 2]
    assert state["i"] == 8


def test_intersperse_is_fused():
    it = intersperse(_Resuming([1, None, 2]), 0)
    assert list(it) == [1]
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_intersperse_with_class_directly():
    it = IntersperseWith("abc", lambda: "-")
    assert "".join(it) == "a-b-c"


@given(st.lists(st.integers(min_value=0, max_value=255)))
def test_intersperse_shape(v):
    result = list(intersperse(v, 0))
    assert len(result) == max(0, 2 * len(v) - 1)
    assert result[::2] == v
    assert all(x == 0 for x in result[1::2])


@given(st.lists(st.integers(min_value=0, max_value=255)))
def test_intersperse_fold_matches_collect(v):
    folded = functools.reduce(lambda acc, x: acc + [x], intersperse(v, 0), [])
    assert folded == list(intersperse(v, 0))


@given(st.lists(st.integers(min_value=0, max_value=255)))
def test_intersperse_length_hint_is_exact_for_lists(v):
    it = intersperse(v, 0)
    total = len(list(intersperse(v, 0)))
    for consumed in range(total + 1):
        assert it.__length_hint__() == total - consumed
        next(it, None)