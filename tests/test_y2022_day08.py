import pytest

from aocsolutions.y2022.day08 import Day08, parse, scenic_score

SAMPLE_INPUT = """30373
25512
65332
33549
35390"""


def test_a():
    assert Day08().solve_a(SAMPLE_INPUT) == 21


def test_b():
    assert Day08().solve_b(SAMPLE_INPUT) == 8


def test_parse():
    forest = parse(SAMPLE_INPUT)
    assert forest[0] == [3, 0, 3, 7, 3]
    assert len(forest) == 5


def test_scenic_score_best_tree():
    assert scenic_score(parse(SAMPLE_INPUT), 3, 2) == 8


@pytest.mark.parametrize("row,col", [(0, 0), (0, 2), (4, 4), (2, 0)])
def test_edge_trees_score_zero(row, col):
    assert scenic_score(parse(SAMPLE_INPUT), row, col) == 0


def test_scenic_score_never_exceeds_best():
    forest = parse(SAMPLE_INPUT)
    best = Day08().solve_b(SAMPLE_INPUT)
    assert all(
        scenic_score(forest, r, c) <= best for r in range(5) for c in range(5)
    )


def test_non_digit_raises():
    with pytest.raises(ValueError):
        parse("12\n3x")


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        parse("123\n45")