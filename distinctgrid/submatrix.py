"""Largest submatrix whose elements are all distinct."""

from __future__ import annotations

from dataclasses import dataclass

from .versioned_map import FastVersionedMap

MAX_ROWS = 400
MAX_COLS = 400


@dataclass(frozen=True)
class Rect:
    """Inclusive rectangle with 1-based corners (r1, c1) and (r2, c2)."""

    r1: int
    c1: int
    r2: int
    c2: int

    def area(self):
        return (self.r2 - self.r1 + 1) * (self.c2 - self.c1 + 1)


@dataclass(frozen=True)
class SubmatrixResult:
    """Area of the best submatrix and the rectangle where it lies."""

    area: int
    rect: Rect


def parse_matrix(text):
    """Read ``n m`` followed by ``n*m`` integers, returning a list of rows."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("input must start with the dimensions n and m")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"input holds a non-integer token: {exc}") from None
    n, m = numbers[0], numbers[1]
    _check_dimensions(n, m)
    cells = numbers[2:]
    if len(cells) < n * m:
        raise ValueError(f"expected {n * m} matrix entries, got {len(cells)}")
    return [cells[i * m:(i + 1) * m] for i in range(n)]


def _check_dimensions(n, m):
    if not 1 <= n <= MAX_ROWS:
        raise ValueError(f"row count {n} outside [1, {MAX_ROWS}]")
    if not 1 <= m <= MAX_COLS:
        raise ValueError(f"column count {m} outside [1, {MAX_COLS}]")


def _right_limits(rows, width, seen):
    """For each start column, the furthest end column keeping ``rows`` distinct."""
    seen.reset()
    limit = width - 1
    limits = [0] * width
    for c in reversed(range(width)):
        for row in rows:
            value = row[c]
            if value in seen:
                limit = min(limit, seen[value] - 1)
            seen[value] = c
        limits[c] = limit
    return limits


def largest_distinct_submatrix(matrix):
    """Find the largest-area submatrix whose entries are pairwise distinct."""
    rows = [list(row) for row in matrix]
    n = len(rows)
    m = len(rows[0]) if rows else 0
    _check_dimensions(n, m)
    if any(len(row) != m for row in rows):
        raise ValueError("matrix rows must all have the same length")

    codes = {value: i for i, value in enumerate(dict.fromkeys(v for row in rows for v in row))}
    coded = [[codes[v] for v in row] for row in rows]
    seen = FastVersionedMap(len(codes))

    best_area = 0
    best_rect = Rect(1, 1, 1, 1)
    below = {}
    for r1 in reversed(range(n)):
        current = {}
        for r2 in range(r1, n):
            pair = (coded[r1],) if r1 == r2 else (coded[r1], coded[r2])
            limits = _right_limits(pair, m, seen)
            height = r2 - r1 + 1
            for c in reversed(range(m)):
                best = limits[c]
                if r1 < r2:
                    best = min(best, below[r2][c], current[r2 - 1][c])
                if c < m - 1:
                    best = min(best, limits[c + 1])
                limits[c] = best
                width = best - c + 1
                if width > 0 and width * height > best_area:
                    best_area = width * height
                    best_rect = Rect(r1 + 1, c + 1, r2 + 1, best + 1)
            current[r2] = limits
        below = current
    return SubmatrixResult(best_area, best_rect)


def solve(text):
    """Parse a problem instance from text and solve it."""
    return largest_distinct_submatrix(parse_matrix(text))