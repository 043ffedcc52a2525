"""Longest run of consecutive songs with no repeats."""

from __future__ import annotations

import fileinput
from collections.abc import Hashable, Iterable


def longest_unique_run(songs: Iterable[Hashable]) -> int:
    """Return the length of the longest stretch of distinct consecutive songs."""
    songs = list(songs)
    window: set[Hashable] = set()
    left = best = 0
    for right, song in enumerate(songs):
        while song in window:
            window.discard(songs[left])
            left += 1
        window.add(song)
        best = max(best, right - left + 1)
    return best


def main(argv: list[str] | None = None) -> None:
    """Read ``n`` and the song ids; print the longest unique run."""
    n, *songs = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(songs) < n:
        raise ValueError("not enough songs in input")
    print(longest_unique_run(songs[:n]))


if __name__ == "__main__":
    main()