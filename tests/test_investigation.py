import pytest

from cpsolve.investigation import MOD, RouteSummary, investigate, main

EXAMPLE = [(1, 4, 5), (1, 2, 4), (2, 4, 5), (1, 3, 2), (3, 4, 3)]


def test_worked_example():
    assert investigate(4, EXAMPLE) == RouteSummary(5, 2, 1, 2)


def test_single_chain():
    edges = [(1, 2, 3), (2, 3, 4), (3, 4, 10)]
    summary = investigate(4, edges)
    assert summary.distance == sum(w for _, _, w in edges)
    assert summary.routes == 1
    assert summary.min_flights == summary.max_flights == len(edges)


def test_start_is_destination():
    assert investigate(1, []) == RouteSummary(0, 1, 0, 0)


def test_unreachable_destination():
    with pytest.raises(ValueError):
        investigate(3, [(1, 2, 1)])


def test_route_count_wraps_modulo():
    layers = 30
    edges = []
    for u in range(1, layers + 1):
        edges.append((u, u + 1, 1))
        edges.append((u, u + 1, 1))
    summary = investigate(layers + 1, edges)
    assert summary.routes == pow(2, layers, MOD)
    assert summary.distance == layers


def test_min_not_greater_than_max():
    summary = investigate(4, EXAMPLE)
    assert summary.min_flights <= summary.max_flights


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    lines = ["4 5"] + [" ".join(map(str, e)) for e in EXAMPLE]
    path.write_text("\n".join(lines) + "\n")
    main([str(path)])
    s = investigate(4, EXAMPLE)
    expected = f"{s.distance} {s.routes} {s.min_flights} {s.max_flights}"
    assert capsys.readouterr().out.strip() == expected