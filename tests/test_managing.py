import pytest

from cpsolve.managing import main, max_selected_sum

SAMPLE = [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "values, k, expected",
    [
        (SAMPLE, 2, 12),
        (SAMPLE, 5, 15),
        (SAMPLE, 0, 0),
        (SAMPLE, -3, 0),
        ([], 3, 0),
        ([10, 10, 10, 10], 1, 20),
    ],
)
def test_max_selected_sum(values, k, expected):
    assert max_selected_sum(values, k) == expected


def test_never_exceeds_sum_of_positives():
    values = [5, -2, 7, 3, 8, -1, 4]
    assert max_selected_sum(values, 2) <= sum(v for v in values if v > 0)


@pytest.mark.parametrize("values", [[3, 1, 4, 1, 5, 9, 2, 6], [7, 7, 7, 7]])
def test_larger_k_never_worse(values):
    results = [max_selected_sum(values, k) for k in range(1, len(values) + 1)]
    assert results == sorted(results)


def test_main(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("5 2\n1\n2\n3\n4\n5\n")
    main([str(path)])
    assert capsys.readouterr().out.strip() == "12"


def test_main_short_input(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("5 2\n1 2\n")
    with pytest.raises(ValueError):
        main([str(path)])