import pytest

from aocsolutions.y2023.day02 import CubeSet, Day02, parse_game

INPUT = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


def test_a():
    assert Day02().solve_a(INPUT) == 8


def test_b():
    assert Day02().solve_b(INPUT) == 2286


def test_parse_game():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game == (
        1,
        [
            CubeSet(red=4, blue=3),
            CubeSet(red=1, green=2, blue=6),
            CubeSet(green=2),
        ],
    )


def test_parse_game_without_colon():
    assert parse_game("Game 1 3 blue") is None


def test_parse_game_invalid_header():
    with pytest.raises(ValueError):
        parse_game("Round 1: 3 blue")


def test_is_within():
    assert CubeSet(red=1, blue=2, green=3).is_within(CubeSet(red=1, blue=2, green=3))
    assert not CubeSet(red=2).is_within(CubeSet(red=1, blue=5, green=5))


def test_minimum_containing_set_and_power():
    a = CubeSet(red=4, blue=3)
    b = CubeSet(red=1, green=2, blue=6)
    minimal = a.minimum_containing_set(b)
    assert minimal == CubeSet(red=4, green=2, blue=6)
    assert minimal.power() == 48