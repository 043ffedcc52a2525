"""Count rows of flowers whose neighbours follow fixed adjacency rules."""

from __future__ import annotations

import fileinput

MOD = 10**9 + 7

# Flowers: 0 Hong, 1 Li, 2 Mai, 3 Lan, 4 Tulip.
# TRANSITIONS[i][j] is 1 when flower i may follow flower j.
TRANSITIONS: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0),
    (1, 0, 1, 0, 0),
    (1, 1, 0, 1, 1),
    (0, 0, 1, 0, 1),
    (1, 0, 0, 0, 0),
)

Matrix = list[list[int]]


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % MOD for col in columns] for row in a]


def count_arrangements(n: int) -> int:
    """Return the number of valid rows of ``n`` flowers, modulo 10**9 + 7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    base = [list(row) for row in TRANSITIONS]
    result = [[int(i == j) for j in range(len(base))] for i in range(len(base))]
    exponent = n - 1
    while exponent:
        if exponent % 2:
            result = _multiply(result, base)
        base = _multiply(base, base)
        exponent //= 2
    return sum(map(sum, result)) % MOD


def main(argv: list[str] | None = None) -> None:
    """Read ``n``; print the number of arrangements."""
    n, *_ = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    print(count_arrangements(n))


if __name__ == "__main__":
    main()