import pytest

from cpsolve.flowers import MOD, count_arrangements, main


@pytest.mark.parametrize("n, expected", [(1, 5), (2, 10), (3, 19)])
def test_small_counts(n, expected):
    assert count_arrangements(n) == expected


def test_counts_grow_while_small():
    counts = [count_arrangements(n) for n in range(1, 21)]
    assert all(a < b for a, b in zip(counts, counts[1:]))


def test_huge_n_stays_in_range():
    assert 0 <= count_arrangements(10**18) < MOD


def test_rejects_non_positive():
    with pytest.raises(ValueError):
        count_arrangements(0)


def test_main(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("3\n")
    main([str(path)])
    assert capsys.readouterr().out.strip() == "19"