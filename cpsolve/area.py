"""Largest all-ones rectangle in a 0/1 matrix."""

from __future__ import annotations

import fileinput
from collections.abc import Iterable, Sequence


def _nearest_lower(heights: Sequence[int], order: Iterable[int], missing: int) -> dict[int, int]:
    """Map each index to the nearest earlier index in ``order`` with a strictly lower height."""
    bounds: dict[int, int] = {}
    stack: list[int] = []
    for i in order:
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        bounds[i] = stack[-1] if stack else missing
        stack.append(i)
    return bounds


def largest_rectangle(matrix: Iterable[Iterable[object]]) -> int:
    """Return the area of the largest rectangle made only of truthy cells.

    Raises ``ValueError`` when the rows differ in length.
    """
    rows = [[bool(cell) for cell in row] for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")

    size = len(rows)
    heights = [0] * size
    best = 0
    for column in zip(*rows):
        heights = [h + 1 if cell else 0 for h, cell in zip(heights, column)]
        left = _nearest_lower(heights, range(size), -1)
        right = _nearest_lower(heights, reversed(range(size)), size)
        best = max(best, *(h * (right[i] - left[i] - 1) for i, h in enumerate(heights)))
    return best


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and the 0/1 cells; print the largest rectangle area."""
    n, m, *cells = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(cells) < n * m or any(cell not in (0, 1) for cell in cells[:n * m]):
        raise ValueError("expected n * m cells of 0 or 1")
    print(largest_rectangle(cells[row * m:(row + 1) * m] for row in range(n)))


if __name__ == "__main__":
    main()