"""Fewest towers for a sequence of cubes, each placed on a strictly larger one."""

from __future__ import annotations

import bisect
import fileinput
from collections.abc import Iterable


def count_towers(cubes: Iterable[int]) -> int:
    """Return the least number of towers needed, placing cubes in order.

    A cube may go on top of a tower whose top cube is strictly larger.
    """
    tops: list[int] = []
    for cube in cubes:
        if not tops or tops[-1] <= cube:
            tops.append(cube)
        else:
            tops[bisect.bisect_right(tops, cube)] = cube
    return len(tops)


def main(argv: list[str] | None = None) -> None:
    """Read ``n`` and the cube sizes; print the number of towers."""
    n, *cubes = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(cubes) < n:
        raise ValueError("not enough cubes in input")
    print(count_towers(cubes[:n]))


if __name__ == "__main__":
    main()