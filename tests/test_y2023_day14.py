import pytest

from aocsolutions.y2023.day14 import Day14, cycle, parse_world

INPUT = """O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
"""


def _positions(world, symbol):
    return {
        (r, c)
        for r, row in enumerate(world)
        for c, ch in enumerate(row)
        if ch == symbol
    }


def test_a():
    assert Day14().solve_a(INPUT) == 136


def test_b():
    assert Day14().solve_b(INPUT) == 64


def test_parse_world():
    world = parse_world(INPUT)
    assert len(world) == 10
    assert world[0] == "O....#...."


def test_parse_world_invalid_character():
    with pytest.raises(ValueError):
        parse_world("O.\n.X")


def test_cycle_keeps_cubes_and_rock_count():
    world = parse_world(INPUT)
    after = cycle(world)
    assert _positions(after, "#") == _positions(world, "#")
    assert len(_positions(after, "O")) == len(_positions(world, "O"))


def test_cycle_moves_rocks_east_last():
    after = cycle(parse_world("O.\n.."))
    assert after == (
        "..",
        ".O",
    )


def test_cycle_needs_square():
    with pytest.raises(ValueError):
        cycle(("O..", "..."))