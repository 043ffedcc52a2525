"""Shortest flight routes: length, count, and fewest and most flights."""

from __future__ import annotations

import fileinput
import heapq
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

MOD = 10**9 + 7


@dataclass(frozen=True)
class RouteSummary:
    """Facts about the cheapest routes from city 1 to city n."""

    distance: int
    routes: int
    min_flights: int
    max_flights: int


def investigate(n: int, edges: Iterable[tuple[int, int, int]]) -> RouteSummary:
    """Summarise the cheapest routes from city 1 to city ``n``.

    ``edges`` holds one-way flights ``(u, v, w)``. The route count is taken
    modulo 10**9 + 7. Raises ``ValueError`` when city ``n`` is unreachable.
    """
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w in edges:
        adjacency[u].append((v, w))

    dist, routes, fewest, most = {1: 0}, {1: 1}, {1: 0}, {1: 0}
    heap = [(0, 1)]
    while heap:
        du, u = heapq.heappop(heap)
        if du != dist[u]:
            continue
        for v, w in adjacency[u]:
            dv = du + w
            known = dist.get(v)
            if known is not None and dv > known:
                continue
            if dv == known:
                routes[v] = (routes[v] + routes[u]) % MOD
                fewest[v] = min(fewest[v], fewest[u] + 1)
                most[v] = max(most[v], most[u] + 1)
                continue
            dist[v], routes[v] = dv, routes[u]
            fewest[v], most[v] = fewest[u] + 1, most[u] + 1
            heapq.heappush(heap, (dv, v))

    if n not in dist:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return RouteSummary(dist[n], routes[n], fewest[n], most[n])


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``m`` flights; print the four route figures."""
    n, m, *flat = (int(tok) for line in fileinput.input(argv) for tok in line.split())
    if len(flat) < 3 * m:
        raise ValueError("not enough flights in input")
    flat = flat[:3 * m]
    summary = investigate(n, zip(flat[0::3], flat[1::3], flat[2::3]))
    print(summary.distance, summary.routes, summary.min_flights, summary.max_flights)


if __name__ == "__main__":
    main()