import pytest

from cpsolve.projects import main, max_reward

EXAMPLE = [(2, 4, 4), (3, 6, 6), (6, 8, 2), (5, 7, 3)]


@pytest.mark.parametrize(
    "projects, expected",
    [
        (EXAMPLE, 7),
        (list(reversed(EXAMPLE)), 7),
        ([], 0),
        ([(1, 2, 5), (3, 4, 7), (10, 20, 1)], 13),
        ([(1, 2, 5), (2, 3, 7)], 7),
    ],
)
def test_max_reward(projects, expected):
    assert max_reward(projects) == expected


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("4\n2 4 4\n3 6 6\n6 8 2\n5 7 3\n")
    main([str(path)])
    assert capsys.readouterr().out.strip() == "7"


def test_main_short_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("2\n1 2 3\n")
    with pytest.raises(ValueError):
        main([str(path)])