"""Fewest extra edges needed to connect an undirected graph."""

from __future__ import annotations

import fileinput
from collections.abc import Iterable


def edges_to_connect(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return how many edges must be rewired to connect nodes ``0 .. n-1``.

    Returns ``-1`` when there are fewer than ``n - 1`` edges; otherwise the
    number of connected components minus one.
    """
    edges = list(edges)
    if len(edges) < n - 1:
        return -1

    parent = list(range(n))

    def find(node: int) -> int:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    components = n
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a node outside 0..{n - 1}")
        ru, rv = find(u), find(v)
        if ru != rv:
            parent[ru] = rv
            components -= 1
    return components - 1


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``m`` edges; print the number of edges to move."""
    n, m, *flat = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if m >= n - 1 and len(flat) < 2 * m:
        raise ValueError("not enough edges in input")
    flat = flat[:2 * m] if m >= n - 1 else []
    print(edges_to_connect(n, zip(flat[0::2], flat[1::2])))


if __name__ == "__main__":
    main()