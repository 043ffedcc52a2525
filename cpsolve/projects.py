"""Choose non-overlapping projects for the largest total reward."""

from __future__ import annotations

import fileinput
from collections.abc import Iterable

_START, _END = 0, 1


def max_reward(projects: Iterable[tuple[int, int, int]]) -> int:
    """Return the best total reward from projects ``(start, end, reward)``.

    Chosen projects may not share a day: one ending on day ``t`` cannot be
    followed by one starting on day ``t``.
    """
    projects = list(projects)
    events = sorted(
        ((day, kind, index) for index, (start, end, _) in enumerate(projects)
         for day, kind in ((start, _START), (end, _END))),
        key=lambda event: event[:2],
    )
    best = 0
    finishing: dict[int, int] = {}
    for _, kind, index in events:
        if kind == _START:
            finishing[index] = best + projects[index][2]
        else:
            best = max(best, finishing[index])
    return best


def main(argv: list[str] | None = None) -> None:
    """Read ``n`` and the projects; print the best total reward."""
    n, *flat = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(flat) < 3 * n:
        raise ValueError("not enough projects in input")
    flat = flat[:3 * n]
    print(max_reward(zip(flat[0::3], flat[1::3], flat[2::3])))


if __name__ == "__main__":
    main()