import pytest

from aocsolutions.y2022.day05 import Day05, parse

SAMPLE_INPUT = """    [D]
[N] [C]
[Z] [M] [P]
 1   2   3

move 1 from 2 to 1
move 3 from 1 to 3
move 2 from 2 to 1
move 1 from 1 to 2"""


def test_a():
    assert Day05().solve_a(SAMPLE_INPUT) == "CMZ"


def test_b():
    assert Day05().solve_b(SAMPLE_INPUT) == "MCD"


def test_parse_stacks_and_commands():
    stacks, commands = parse(SAMPLE_INPUT)
    assert stacks == {1: ["Z", "N"], 2: ["M", "C", "D"], 3: ["P"]}
    assert commands[0] == (1, 2, 1)
    assert commands[1].amount == 3
    assert len(commands) == 4


def test_moving_too_many_crates_raises():
    text = "[A]\n 1   2\n\nmove 2 from 1 to 2"
    with pytest.raises((ValueError, KeyError)):
        Day05().solve_a(text)