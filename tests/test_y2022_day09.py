import pytest

from aocsolutions.y2022.day09 import Day09, parse, simulate

SAMPLE_INPUT = """R 4
U 4
L 3
D 1
R 4
D 1
L 5
R 2"""

LARGER_INPUT = """R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20"""


def test_a():
    assert Day09().solve_a(SAMPLE_INPUT) == 13


def test_b():
    assert Day09().solve_b(SAMPLE_INPUT) == 1
    assert Day09().solve_b(LARGER_INPUT) == 36


def test_parse():
    assert [(m.name, n) for m, n in parse("R 4\nU 2\nL 1\nD 3")] == [
        ("RIGHT", 4),
        ("UP", 2),
        ("LEFT", 1),
        ("DOWN", 3),
    ]


def test_single_knot_visits_every_head_position():
    assert simulate(parse("R 4"), 1) == 4


def test_longer_rope_visits_no_more():
    moves = parse(LARGER_INPUT)
    assert simulate(moves, 10) <= simulate(moves, 2)


def test_zero_knots_raises():
    with pytest.raises(ValueError):
        simulate(parse("R 1"), 0)


def test_invalid_direction_raises():
    with pytest.raises(ValueError):
        parse("X 4")


def test_missing_amount_raises():
    with pytest.raises(ValueError):
        parse("R")


def test_non_numeric_amount_raises():
    with pytest.raises(ValueError):
        parse("R four")