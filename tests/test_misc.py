import pytest

from dsakit.misc import printed_width_sum


def test_worked_example():
    assert printed_width_sum(3, 4) == 7


@pytest.mark.parametrize("x, y", [(1, 1), (5, 9), (12, 30), (100, 1)])
def test_positive_widths_add(x, y):
    assert printed_width_sum(x, y) == x + y


def test_zero_width_prints_one_character():
    assert printed_width_sum(0, 0) == 2


def test_negative_width_matches_positive():
    assert printed_width_sum(-3, 2) == printed_width_sum(3, 2)
    assert printed_width_sum(4, -6) == printed_width_sum(4, 6)


def test_symmetric():
    assert printed_width_sum(8, 13) == printed_width_sum(13, 8)