"""Best sum of chosen values with no more than ``k`` chosen in a row."""

from __future__ import annotations

import fileinput
from collections import deque
from collections.abc import Iterable
from itertools import accumulate


def max_selected_sum(values: Iterable[int], k: int) -> int:
    """Return the largest sum of values chosen so no ``k + 1`` are consecutive.

    With ``k <= 0`` nothing can be chosen and the result is 0.
    """
    if k <= 0:
        return 0
    prefix = [0, *accumulate(values)]
    best = [0] * len(prefix)
    # (r, best[r - 1] - prefix[r]) with decreasing values: element r skipped,
    # a run of chosen values starting right after it.
    window: deque[tuple[int, int]] = deque()
    for r in range(1, len(prefix)):
        candidate = best[r - 1] - prefix[r]
        while window and window[-1][1] <= candidate:
            window.pop()
        window.append((r, candidate))
        while window[0][0] < r - k:
            window.popleft()
        best[r] = max(best[r - 1], prefix[r] + window[0][1])
        if r <= k:
            best[r] = max(best[r], prefix[r])
    return best[-1]


def main(argv: list[str] | None = None) -> None:
    """Read ``n k`` and the values; print the best sum."""
    n, k, *values = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if k > 0 and len(values) < n:
        raise ValueError("not enough values in input")
    print(max_selected_sum(values[:n], k))


if __name__ == "__main__":
    main()