import pytest

from iterplus import free


class _Val:
    """Equality uses both fields, ordering only the first."""

    def __init__(self, a, b):
        self.a = a
        self.b = b

    def __lt__(self, other):
        return self.a < other.a

    def __eq__(self, other):
        return (self.a, self.b) == (other.a, other.b)


def test_enumerate():
    assert list(free.enumerate([1, 2, 3])) == [(0, 1), (1, 2), (2, 3)]


def test_rev():
    assert list(free.rev([1, 2, 3])) == [3, 2, 1]


def test_rev_requires_reversible():
    with pytest.raises(TypeError):
        free.rev(iter([1, 2, 3]))


def test_chain():
    assert list(free.chain([1, 2, 3], [4])) == [1, 2, 3, 4]


def test_cloned_bytes():
    assert next(free.cloned(b"abc")) == ord("a")


def test_cloned_makes_copies():
    data = [[1], [2]]
    copies = list(free.cloned(data))
    assert copies == data
    assert copies[0] is not data[0]


def test_fold():
    assert free.fold([1.0, 2.0, 3.0], 0.0, max) == 3.0


def test_all_and_any():
    assert free.all([1, 2, 3], lambda x: x > 0) is True
    assert free.any([0, -1, 2], lambda x: x > 0) is True
    assert free.all([0, -1, 2], lambda x: x > 0) is False


def test_max_min():
    assert free.max(range(10)) == 9
    assert free.min(range(10)) == 0
    assert free.max([]) is None
    assert free.min([]) is None


def test_max_picks_last_min_picks_first():
    data = [_Val(1, 0), _Val(1, 1), _Val(0, 5), _Val(0, 6)]
    assert free.max(data) == _Val(1, 1)
    assert free.min(data) == _Val(0, 5)


def test_join():
    assert free.join([1, 2, 3], ", ") == "1, 2, 3"
    assert free.join([1], ", ") == "1"
    assert free.join([], ", ") == ""


def test_sorted():
    assert free.sorted("rust") == list("rstu")


def test_into_group_map():
    pairs = [("a", 1), ("b", 2), ("a", 3)]
    assert free.into_group_map(pairs) == {"a": [1, 3], "b": [2]}


def test_into_group_map_by():
    data = [2, 8, 5, 7, 9, 0, 4, 10]
    grouped = free.into_group_map_by(data, lambda n: n % 4)
    assert grouped == {2: [2, 10], 0: [8, 0, 4], 1: [5, 9], 3: [7]}
    assert sorted(v for vs in grouped.values() for v in vs) == sorted(data)