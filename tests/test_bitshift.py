import pytest

from drillbook.bitshift import check_n_shift, describe, main, to_bits


@pytest.mark.parametrize("value", [0, 2, 4, 6, 100, 1024, 12345678])
def test_even_non_negative_shifts_left(value):
    result = check_n_shift(value)
    assert result // 4 == value
    assert result % 4 == 0


@pytest.mark.parametrize("value", [1, 3, 99, 12345679, -1, -8, -1001])
def test_odd_or_negative_shifts_right(value):
    result = check_n_shift(value)
    assert result * 4 <= value < result * 4 + 4


def test_custom_shift_amount():
    assert check_n_shift(6, 1) == 12
    assert check_n_shift(7, 1) == 3


def test_left_shift_wraps_to_32_bits():
    assert check_n_shift(1 << 30) == 0
    assert check_n_shift(1 << 29) == -(1 << 31)


def test_to_bits():
    assert to_bits(-1) == "1" * 32
    assert to_bits(5, 8) == "00000101"
    assert len(to_bits(123)) == 32
    assert int(to_bits(123), 2) == 123


@pytest.mark.parametrize(
    "value, text",
    [
        (3, "Value is odd and positive."),
        (4, "Value is even and positive."),
        (-3, "Value is odd and negative."),
        (-4, "Value is even and negative."),
        (0, "Value is even and positive."),
    ],
)
def test_describe(value, text):
    assert describe(value) == text


def test_main_stops_at_zero(capsys):
    assert main(["5", "0", "7"]) == 0
    out = capsys.readouterr().out
    assert "Value is odd and positive." in out
    assert out.count("Given value is") == 2
    assert "Enter value : 7" not in out