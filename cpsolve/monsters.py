"""Escape a grid to its border before any monster can get there."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable

_MOVES = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))

Cell = tuple[int, int]


def _bfs(rows: list[str], sources: list[Cell]) -> tuple[dict[Cell, int], dict[Cell, tuple[Cell, str]]]:
    dist = {cell: 0 for cell in sources}
    came_from: dict[Cell, tuple[Cell, str]] = {}
    queue = deque(sources)
    while queue:
        i, j = queue.popleft()
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if not (0 <= ni < len(rows) and 0 <= nj < len(rows[ni])):
                continue
            if rows[ni][nj] == "#" or (ni, nj) in dist:
                continue
            came_from[(ni, nj)] = ((i, j), letter)
            dist[(ni, nj)] = dist[(i, j)] + 1
            queue.append((ni, nj))
    return dist, came_from


def escape_route(grid: Iterable[str]) -> str | None:
    """Return the moves that take A safely to the border, or ``None``.

    A border tile is safe when A reaches it strictly before every monster
    ``M``. An empty string means A already stands on the border.
    """
    rows = list(grid)
    start = None
    monsters = []
    for i, row in enumerate(rows):
        for j, tile in enumerate(row):
            if tile == "A":
                start = (i, j)
            elif tile == "M":
                monsters.append((i, j))
    if start is None:
        raise ValueError("grid has no 'A' tile")

    monster_dist, _ = _bfs(rows, monsters)
    player_dist, came_from = _bfs(rows, [start])

    last_row = len(rows) - 1
    for i, row in enumerate(rows):
        for j in range(len(row)):
            if i not in (0, last_row) and j not in (0, len(row) - 1):
                continue
            reach = player_dist.get((i, j))
            if reach is None:
                continue
            danger = monster_dist.get((i, j))
            if danger is not None and danger <= reach:
                continue
            moves = []
            cell = (i, j)
            while cell != start:
                cell, letter = came_from[cell]
                moves.append(letter)
            return "".join(reversed(moves))
    return None


def _read_grid(argv: list[str] | None) -> list[str]:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default="-")
    args = parser.parse_args(argv)
    text = args.input.read()
    if args.input is not sys.stdin:
        args.input.close()
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected n and m")
    n, m = int(tokens[0]), int(tokens[1])
    rows = [row[:m] for row in tokens[2:2 + n]]
    if len(rows) != n:
        raise ValueError("not enough grid rows in input")
    return rows


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and the grid; print NO, or YES, the length and the moves."""
    route = escape_route(_read_grid(argv))
    if route is None:
        print("NO")
        return
    print("YES")
    print(len(route))
    print(route)


if __name__ == "__main__":
    main()