import pytest

from cpsolve.connection import edges_to_connect, main


@pytest.mark.parametrize(
    "n, edges, expected",
    [
        (4, [(0, 1), (1, 2), (2, 3)], 0),
        (4, [(0, 1)], -1),
        (4, [(0, 1), (0, 1), (2, 3)], 1),
        (5, [(0, 1), (1, 2), (0, 2), (1, 0)], 2),
        (1, [], 0),
        (4, [(0, 1), (2, 3), (2, 3), (1, 2)], 0),
    ],
)
def test_edges_to_connect(n, edges, expected):
    assert edges_to_connect(n, edges) == expected


def test_node_out_of_range():
    with pytest.raises(ValueError):
        edges_to_connect(2, [(0, 5)])


@pytest.mark.parametrize(
    "text, expected",
    [("4 3\n0 1\n0 1\n2 3\n", "1"), ("5 1\n0 1\n", "-1")],
)
def test_main(tmp_path, capsys, text, expected):
    path = tmp_path / "in.txt"
    path.write_text(text)
    main([str(path)])
    assert capsys.readouterr().out.strip() == expected