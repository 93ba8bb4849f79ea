import pytest

from aocsolutions.y2023.day08 import Day08, parse


def _document(path, nodes):
    lines = [f"{node} = ({left}, {right})" for node, left, right in nodes]
    return path + "\n\n" + "\n".join(lines) + "\n"


NODES_A = [
    ("AAA", "BBB", "BBB"),
    ("BBB", "AAA", "ZZZ"),
    ("ZZZ", "ZZZ", "ZZZ"),
]

NODES_B = [
    ("11A", "11B", "XXX"),
    ("11B", "XXX", "11Z"),
    ("11Z", "11B", "XXX"),
    ("22A", "22B", "XXX"),
    ("22B", "22C", "22C"),
    ("22C", "22Z", "22Z"),
    ("22Z", "22B", "22B"),
    ("XXX", "XXX", "XXX"),
]

INPUT = _document("LLR", NODES_A)
INPUT_B = _document("LR", NODES_B)


def test_a():
    assert Day08().solve_a(INPUT) == 6


def test_b():
    assert Day08().solve_b(INPUT_B) == 6


def test_parse():
    path, network = parse(INPUT)
    assert path == "LLR"
    assert network == {
        "AAA": ("BBB", "BBB"),
        "BBB": ("AAA", "ZZZ"),
        "ZZZ": ("ZZZ", "ZZZ"),
    }


def test_missing_start_raises():
    with pytest.raises(ValueError):
        Day08().solve_a("L\n\nBBB = (BBB, BBB)\n")


def test_no_starting_positions_raises():
    with pytest.raises(ValueError):
        Day08().solve_b("L\n\nBBB = (BBB, BBB)\n")


def test_missing_blank_line_raises():
    with pytest.raises(ValueError):
        parse("LR\nAAA = (BBB, BBB)\n")