import pytest

from aocsolutions.y2023.day15 import Day15, LensBoxes, holiday_hash

INPUT = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"


@pytest.mark.parametrize("s, expected", [("HASH", 52)])
def test_hash(s, expected):
    assert holiday_hash(s) == expected


def test_hash_in_byte_range():
    assert all(0 <= holiday_hash(step) < 256 for step in INPUT.split(","))


def test_a():
    assert Day15().solve_a(INPUT) == 1320


def test_b():
    assert Day15().solve_b(INPUT) == 145


def test_insert_replaces_in_place():
    boxes = LensBoxes()
    boxes.insert("rn", 1)
    boxes.insert("cm", 2)
    boxes.insert("rn", 5)
    assert list(boxes.boxes[holiday_hash("rn")].items()) == [("rn", 5), ("cm", 2)]


def test_remove_then_empty_power():
    boxes = LensBoxes()
    boxes.insert("qp", 3)
    boxes.remove("qp")
    boxes.remove("absent")
    assert boxes.focusing_power() == 0


def test_invalid_instruction():
    with pytest.raises(ValueError):
        Day15().solve_b("abc")