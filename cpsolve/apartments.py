"""Match applicants to apartments whose size is close enough to what they want."""

from __future__ import annotations

import fileinput
from collections.abc import Iterable


def count_matches(desired: Iterable[int], sizes: Iterable[int], k: int) -> int:
    """Return the largest number of applicants that get an apartment.

    An applicant wanting size ``x`` accepts any apartment of size in
    ``[x - k, x + k]``; each apartment goes to at most one applicant.
    """
    apartments = sorted(sizes)
    matched = j = 0
    for want in sorted(desired):
        while j < len(apartments) and apartments[j] < want - k:
            j += 1
        if j == len(apartments):
            break
        if apartments[j] <= want + k:
            matched += 1
            j += 1
    return matched


def main(argv: list[str] | None = None) -> None:
    """Read ``n m k``, the desired sizes and the apartment sizes; print the count."""
    n, m, k, *rest = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(rest) < n + m:
        raise ValueError("not enough sizes in input")
    print(count_matches(rest[:n], rest[n:n + m], k))


if __name__ == "__main__":
    main()