# iterplus

Extra iterator building blocks for Python. Every function takes any iterable
and returns either a lazy iterator or a plain Python container. The package has
no dependencies outside the standard library.

## Installation

```
pip install iterplus
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "iterplus[test]"
pytest
```

## Modules

### `iterplus.intersperse`

`intersperse(iterable, element)` puts `element` between each pair of
neighbouring items. `intersperse_with(iterable, element)` does the same, but
calls `element()` to make each separator. Both return an `IntersperseWith`
iterator. It reads the first item from the source when it is created, and it
stops asking the source for items once the source is exhausted.

```python
from iterplus.intersperse import intersperse

list(intersperse(range(3), 8))   # [0, 8, 1, 8, 2]
```

### `iterplus.kmerge`

`kmerge(iterables)` merges any number of iterables into one stream, comparing
their current heads with `<`. If every input is already sorted, the output is
sorted too. `kmerge_by(iterables, less_than)` merges using a two-argument
"is less than" predicate that you supply. Both return a `KMergeBy` iterator.
Empty inputs are skipped.

```python
from iterplus.kmerge import kmerge

list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))   # [0, 1, 2, 3, 4, 5, 6, 7]
```

### `iterplus.k_smallest`

`k_smallest(iterable, k)` returns a list of the `k` smallest items in
ascending order. It holds at most `k` items at a time. When `k` is zero the
iterable is not read, and a negative `k` raises `ValueError`.

```python
from iterplus.k_smallest import k_smallest

k_smallest([5, 1, 4, 2, 3], 2)   # [1, 2]
```

### `iterplus.groupbylazy`

`group_by(iterable, key)` groups runs of consecutive items that share the same
key. Iterating the `GroupBy` it returns gives `(key, group)` pairs, where each
group is a `Group` iterator.

`chunks(iterable, size)` splits the input into pieces of `size` items; the
last piece may be shorter. Iterating the `IntoChunks` it returns gives one
`Chunk` iterator per piece. A `size` below 1 raises `ValueError`.

All groups (or chunks) of one grouping share a single pass over the source.
Reading them in order needs no buffering. Items are buffered only when you
keep an earlier group and read it after later groups have been produced. Call
`close()` on a `Group` or `Chunk` you are done with, so the items it still
holds are not buffered.

```python
from iterplus.groupbylazy import group_by, chunks

for key, group in group_by("AABBBC", lambda c: c):
    print(key, "".join(group))

[list(c) for c in chunks(range(7), 3)]   # [[0, 1, 2], [3, 4, 5], [6]]
```

### `iterplus.grouping_map`

`into_grouping_map(pairs)` takes `(key, value)` pairs.
`into_grouping_map_by(iterable, key)` takes plain values and computes each key
with `key(value)`. Both return a `GroupingMap`, which groups and folds in a
single pass over its input, so each map can be used for one operation only.
The operations, each returning a `dict`, are:

- `aggregate(operation)`: `operation(acc, key, value)` with `acc` `None` at
  the start of a group; returning `None` discards the accumulator.
- `fold(init, operation)`: each group starts from a copy of `init`.
- `fold_first(operation)`: each group starts from its first element.
- `collect(factory)`: collects each group into a collection made by
  `factory()` (for example `list` or `set`).
- `max`, `max_by(compare)`, `max_by_key(key)`: the last of equal maxima wins.
- `min`, `min_by(compare)`, `min_by_key(key)`: the first of equal minima wins.
- `minmax`, `minmax_by(compare)`, `minmax_by_key(key)`: each value is
  `OneElement(value)` for a one-element group, otherwise `MinMax(min, max)`.
- `sum` and `product`: combine each group with `+` or `*`.

`compare(group_key, a, b)` returns a negative, zero or positive number;
`key(group_key, value)` returns the value to compare by. The module also
defines a `NoElements` result class.

```python
from iterplus.grouping_map import into_grouping_map_by

into_grouping_map_by(range(1, 8), lambda n: n % 3).sum()
# {1: 12, 2: 7, 0: 9}
```

### `iterplus.free`

Free-function helpers that accept any iterable:

- `enumerate`, `rev`, `chain`, `cloned` (shallow copy of each element)
- `fold(iterable, init, function)`
- `all(iterable, predicate)`, `any(iterable, predicate)`
- `max` and `min`, which return `None` for an empty iterable; `max` picks the
  last of equal greatest items, `min` the first of equal least ones
- `join(iterable, sep)`, which joins the `str` of each item
- `sorted`, which returns a list
- `into_group_map(pairs)` and `into_group_map_by(iterable, key)`, which map
  each key to the list of its values in input order

Several of these share names with built-ins, so import the module rather than
its names with `*`.

```python
from iterplus.free import join, into_group_map

join([1, 2, 3], ", ")                              # "1, 2, 3"
into_group_map([("a", 1), ("b", 2), ("a", 3)])     # {"a": [1, 3], "b": [2]}
```

### `iterplus.lazy_buffer`

`LazyBuffer(iterable)` pulls items from the iterator only when asked and keeps
the ones already pulled. `len()` and indexing see the buffered items.
`get_next()` reads one more item and reports whether there was one,
`prefill(length)` reads until `length` items are buffered or the iterator
ends, and `count()` consumes the rest of the iterator and returns the total
number of items.