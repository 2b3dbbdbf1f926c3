# distinctgrid

Find the largest-area submatrix of an integer matrix in which every element
is distinct.

Given an `n × m` matrix (`1 ≤ n, m ≤ 400`), `distinctgrid` computes the
maximum area of a rectangular block that contains no repeated value, along
with the coordinates of one such block. The algorithm runs in `O(n² · m)`
time.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Input format

The number of rows `n` and columns `m`, followed by the `n * m` entries in
row order, all separated by whitespace:

```
3 3
1 3 1
4 5 6
2 6 1
```

## Command line

```
distinctgrid [path]
```

The `distinctgrid` command reads a matrix from the file at `path`, or from
standard input when `path` is omitted or is `-`:

```
$ printf '3 3\n1 3 1\n4 5 6\n2 6 1\n' | distinctgrid
```

It prints two lines: the 1-based coordinates of the best rectangle
(`top-row left-column bottom-row right-column`), then its area. If the file
cannot be read or the input is malformed (too few entries, a non-integer
token, dimensions outside `[1, 400]`), it prints a message prefixed with
`distinctgrid:` to standard error and exits with status 1.

## Library use

The solver lives in `distinctgrid.submatrix`:

```python
from distinctgrid.submatrix import largest_distinct_submatrix, parse_matrix, solve

matrix = parse_matrix("3 3\n1 3 1\n4 5 6\n2 6 1\n")
result = largest_distinct_submatrix(matrix)
print(result.area)   # 6
print(result.rect)   # the rectangle with 1-based corners

# Or straight from text in the same format:
print(solve("2 2\n1 2\n3 4\n").area)  # 4
```

- `parse_matrix(text)` returns the matrix as a list of rows and raises
  `ValueError` on malformed input.
- `largest_distinct_submatrix(matrix)` accepts any rectangular sequence of
  rows of hashable values; it raises `ValueError` if the rows differ in
  length or the dimensions are outside `[1, 400]`.
- `solve(text)` combines the two.

Results are `SubmatrixResult(area, rect)`, where `rect` is a frozen
`Rect(r1, c1, r2, c2)` with inclusive 1-based corners; `Rect.area()` gives
its area.

### FastVersionedMap

`distinctgrid.versioned_map.FastVersionedMap` is a mapping over integer keys
in a fixed range `[0, size)` that can be cleared in constant time. The
default size is `401 * 401`.

```python
from distinctgrid.versioned_map import FastVersionedMap

seen = FastVersionedMap(1000)
seen[5] = 42
assert 5 in seen and seen[5] == 42
seen.reset()          # O(1): every key becomes absent
assert 5 not in seen
seen[7] = 1
seen.remove(7)
assert 7 not in seen
```

Reading an absent key raises `KeyError`; reading, writing or removing a key
outside `[0, size)` raises `IndexError`. Membership tests never raise. The
`size` property reports how many keys the map can hold.