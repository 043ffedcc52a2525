"""Letters of a string doubled by appending its X/Y complement."""

from __future__ import annotations

import fileinput


def letter_at(n: int, k: int) -> str:
    """Return the ``k``-th letter (1-based) of generation ``n``.

    Generation 1 is ``"X"``; each next one is the previous followed by its
    copy with X and Y swapped, so generation ``n`` has ``2 ** (n - 1)`` letters.
    """
    if n < 1 or not 1 <= k <= 1 << (n - 1):
        raise ValueError("need n >= 1 and 1 <= k <= 2 ** (n - 1)")
    # Each step into the second half flips the letter.
    flips = sum(1 for level in range(n - 2, -1, -1) if (k - 1) >> level & 1)
    return "Y" if flips % 2 else "X"


def main(argv: list[str] | None = None) -> None:
    """Read ``t`` queries ``n k``; print one letter per query."""
    t, *flat = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(flat) < 2 * t:
        raise ValueError("not enough queries in input")
    flat = flat[:2 * t]
    for n, k in zip(flat[0::2], flat[1::2]):
        print(letter_at(n, k))


if __name__ == "__main__":
    main()