import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterplus.k_smallest import k_smallest


@st.composite
def _shuffled_range(draw):
    n = draw(st.integers(min_value=0, max_value=10_000))
    m = draw(st.integers(min_value=0, max_value=200))
    perm = draw(st.permutations(list(range(n, n + m))))
    return n, m, perm


@given(_shuffled_range(), st.integers(min_value=0, max_value=300))
def test_k_smallest_range(data, k):
    n, m, perm = data
    assert k_smallest(iter(perm), k) == list(range(n, n + min(k, m)))


@given(st.lists(st.integers(min_value=-128, max_value=127)), st.integers(min_value=0, max_value=50))
def test_k_smallest_sort(xs, k):
    assert k_smallest(iter(xs), k) == sorted(xs)[:k]


def test_k_zero_does_not_read():
    it = iter([3, 1, 2])
    assert k_smallest(it, 0) == []
    assert next(it) == 3


def test_negative_k_rejected():
    with pytest.raises(ValueError):
        k_smallest([1, 2], -1)