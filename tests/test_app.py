import pytest

from llcmerge.app import _percent


def test_percent_complete():
    assert _percent(7, 7) == 100


def test_percent_truncates():
    assert _percent(3, 1) == 33


def test_percent_no_files():
    assert _percent(0, 0) == 0


@pytest.mark.parametrize("total", [1, 5, 13, 200])
def test_percent_monotonic(total):
    values = [_percent(total, n) for n in range(total + 1)]
    assert values == sorted(values)
    assert values[-1] == 100