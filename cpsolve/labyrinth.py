"""Shortest path from A to B through a grid labyrinth."""

from __future__ import annotations

import fileinput
from collections import deque
from collections.abc import Iterable

_MOVES = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))


def _locate(rows: list[str], mark: str) -> tuple[int, int]:
    found = [(i, j) for i, row in enumerate(rows) for j, tile in enumerate(row) if tile == mark]
    if not found:
        raise ValueError(f"grid has no {mark!r} tile")
    return found[-1]


def find_path(grid: Iterable[str]) -> str | None:
    """Return the moves (``U``, ``D``, ``L``, ``R``) of a shortest path from A to B.

    Walls are ``#``. Returns ``None`` when B cannot be reached.
    """
    rows = list(grid)
    start, end = _locate(rows, "A"), _locate(rows, "B")

    came_from: dict[tuple[int, int], tuple[tuple[int, int], str] | None] = {start: None}
    queue = deque([start])
    while queue:
        i, j = queue.popleft()
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if not (0 <= ni < len(rows) and 0 <= nj < len(rows[ni])):
                continue
            if rows[ni][nj] == "#" or (ni, nj) in came_from:
                continue
            came_from[(ni, nj)] = ((i, j), letter)
            queue.append((ni, nj))

    if end not in came_from:
        return None
    moves = []
    step = came_from[end]
    while step is not None:
        previous, letter = step
        moves.append(letter)
        step = came_from[previous]
    return "".join(reversed(moves))


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and the grid; print NO, or YES, the length and the moves."""
    n, m, *rows = (tok for line in fileinput.input(argv) for tok in line.split())
    n, m = int(n), int(m)
    if len(rows) < n:
        raise ValueError("not enough grid rows in input")
    path = find_path(row[:m] for row in rows[:n])
    if path is None:
        print("NO")
    else:
        print("YES", len(path), path, sep="\n")


if __name__ == "__main__":
    main()