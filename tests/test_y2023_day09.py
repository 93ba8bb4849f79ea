from aocsolutions.y2023.day09 import Day09, parse_line

INPUT = """0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45
"""


def test_a():
    assert Day09().solve_a(INPUT) == 114


def test_b():
    assert Day09().solve_b(INPUT) == 2


def test_parse_line_keeps_negatives():
    assert parse_line("0 3 -6 x 4") == [0, 3, -6, 4]


def test_single_lines():
    assert Day09().solve_a("10 13 16 21 30 45") == 68
    assert Day09().solve_b("10 13 16 21 30 45") == 5


def test_all_zero_sequence():
    assert Day09().solve_a("0 0 0") == 0
    assert Day09().solve_b("0 0 0") == 0