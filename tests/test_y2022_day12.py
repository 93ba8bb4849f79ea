import pytest

from aocsolutions.y2022.day12 import Day12, parse, search_distance

RIDGE = "SabcdefghijklmnopqrstuvwxyE"


def test_parse_marks_start_end_and_lowest():
    heights, start, end, lowest = parse("Sbc\nazE\n")
    assert heights == [[0, 1, 2], [0, 25, 25]]
    assert start == (0, 0)
    assert end == (1, 2)
    assert lowest == [(0, 0), (1, 0)]


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse("Sab\naE")


def test_start_equal_to_end_is_zero_steps():
    heights, start, _, _ = parse("SbE")
    assert search_distance([start], start, heights) == 0


def test_no_starts_gives_none():
    heights, _, end, _ = parse("SbE")
    assert search_distance([], end, heights) is None


def test_ridge_distances():
    day = Day12()
    assert day.solve_b(RIDGE) == 25
    assert day.solve_a(RIDGE) == day.solve_b(RIDGE) + 1


def test_unreachable_end():
    assert Day12().solve_a("SzE") is None
    assert Day12().solve_b("SzE") is None


def test_part_b_never_longer_than_part_a():
    text = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi"
    day = Day12()
    a, b = day.solve_a(text), day.solve_b(text)
    assert a is not None and b is not None
    assert b <= a