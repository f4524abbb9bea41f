import pytest

from dsakit.three_ints import main, three_ints_avg, three_ints_sum


@pytest.mark.parametrize(
    ("args", "expected"),
    [((10, 5, 6), 21), ((-10, 0, 6), -4)],
)
def test_sum(args, expected):
    assert three_ints_sum(*args) == expected


def test_avg_positive():
    assert three_ints_avg(10, 5, 6) == 7


def test_avg_truncates_toward_zero_for_negative_total():
    assert three_ints_avg(-10, 0, 6) == -1


@pytest.mark.parametrize("value", [-7, 0, 4, 123])
def test_avg_of_equal_values_is_the_value(value):
    assert three_ints_avg(value, value, value) == value


def test_avg_is_symmetric():
    assert three_ints_avg(1, 2, 9) == three_ints_avg(9, 1, 2) == three_ints_avg(2, 9, 1)


def test_main_prints_results(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Testing three int sum and three int avg function on 5, 10, 20"
    assert lines[1] == str(three_ints_sum(5, 10, 20))
    assert lines[2] == str(three_ints_avg(5, 10, 20))