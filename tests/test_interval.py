import sys

import pytest

from npputils.interval import Interval

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def test_positive_finite():
    i = Interval(32, 64)
    assert i.is_finite()
    assert i.length() == 33
    assert all(i.contains(j) for j in range(32, 65))
    assert not i.contains(31)
    assert not i.contains(65)
    assert str(i) == "[32, 64]"
    assert i == Interval(32, 64)
    assert i != Interval(32, None)


def test_negative_and_positive_finite():
    i = Interval(-16, 64)
    assert i.is_finite()
    assert i.length() == 81
    assert not i.contains(-17)
    assert not i.contains(65)
    assert all(j in i for j in range(-16, 65))
    assert str(i) == "[-16, 64]"


def test_negatively_infinite():
    i = Interval(None, 64)
    assert not i.is_finite()
    assert i.length() is None
    assert i.contains(INT_MIN)
    assert i.contains(-128)
    assert i.contains(0)
    assert i.contains(64)
    assert not i.contains(65)
    assert str(i) == "[-inf, 64]"


def test_positively_infinite():
    i = Interval(-2, None)
    assert not i.is_finite()
    assert i.length() is None
    assert not i.contains(-3)
    assert i.contains(-2)
    assert i.contains(0)
    assert i.contains(4096)
    assert i.contains(INT_MAX)
    assert str(i) == "[-2, +inf]"


def test_dual_infinite():
    i = Interval(None, None)
    assert not i.is_finite()
    assert i.length() is None
    assert i.contains(INT_MIN)
    assert i.contains(-1024)
    assert i.contains(0)
    assert i.contains(1024)
    assert i.contains(sys.maxsize)
    assert str(i) == "[-inf, +inf]"


def test_reversed_bounds_rejected():
    with pytest.raises(ValueError, match="Bad interval"):
        Interval(5, 4)