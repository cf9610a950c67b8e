import random

import pytest

from drillbook.arrays import (
    count_digits,
    main,
    matrix_text,
    min_max,
    random_values,
    reverse_string,
    sort_report,
)


def test_reverse_string():
    assert reverse_string("abc") == "cba"
    assert reverse_string("") == ""


@pytest.mark.parametrize("text", ["hello", "a", "racecar", "HELLO WORLD!"])
def test_reverse_round_trip(text):
    result = reverse_string(text)
    assert reverse_string(result) == text
    assert sorted(result) == sorted(text)
    assert result[:1] == text[-1:]


@pytest.mark.parametrize("power", range(0, 10))
def test_count_digits_powers(power):
    assert count_digits(10 ** power) == power + 1
    assert count_digits(-(10 ** power)) == power + 1
    assert count_digits(10 ** power - 1 if power else 0) == max(power, 1)


@pytest.mark.parametrize("width, height", [(3, 3), (5, 2), (11, 11), (1, 4)])
def test_matrix_cells(width, height):
    rows = matrix_text(width, height).splitlines()
    assert len(rows) == height
    widths = {len(row) for row in rows}
    assert len(widths) == 1
    for y, row in enumerate(rows):
        assert [int(cell) for cell in row.split()] == [x * y for x in range(width)]


def test_sort_report_lines():
    values = [42, 7, 100, -3, 15]
    unsorted_line, sorted_line = sort_report(values).splitlines()
    assert unsorted_line.startswith("Unsorted :")
    assert sorted_line.startswith("Sorted   :")
    assert [int(v) for v in unsorted_line[len("Unsorted :"):].split()] == values
    assert [int(v) for v in sorted_line[len("Sorted   :"):].split()] == sorted(values)
    assert len(unsorted_line) == len(sorted_line)


def test_random_values_in_range():
    values = random_values(50, 1, 6, rng=random.Random(3))
    assert len(values) == 50
    assert all(1 <= v <= 6 for v in values)


def test_random_values_rejects_bad_arguments():
    with pytest.raises(ValueError):
        random_values(5, 10, 1)
    with pytest.raises(ValueError):
        random_values(-1)


def test_min_max():
    assert min_max([3, 1, 2]) == (1, 3)
    assert min_max([5]) == (5, 5)
    assert min_max([9, -4, 9, 0]) == (-4, 9)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])