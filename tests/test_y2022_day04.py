import pytest

from aocsolutions.y2022.day04 import Day04, Pair

SAMPLE_INPUT = """2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8"""


def test_a():
    assert Day04().solve_a(SAMPLE_INPUT) == 2


def test_b():
    assert Day04().solve_b(SAMPLE_INPUT) == 4


def test_parse_pair():
    assert Pair.parse("2-4") == Pair(2, 4)


def test_contains_and_overlap():
    outer, inner, apart = Pair(2, 8), Pair(3, 7), Pair(9, 10)
    assert outer.fully_contains(inner)
    assert not inner.fully_contains(outer)
    assert outer.overlaps(inner)
    assert not outer.overlaps(apart)
    assert Pair(5, 7).overlaps(Pair(7, 9))


def test_bad_number_raises():
    with pytest.raises(ValueError):
        Pair.parse("a-4")