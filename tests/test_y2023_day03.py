from aocsolutions.y2023.day03 import Day03

INPUT = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_a():
    assert Day03().solve_a(INPUT) == 4361


def test_b():
    assert Day03().solve_b(INPUT) == 467835


def test_a_without_symbols():
    assert Day03().solve_a("467..114..") == 0


def test_b_gear_with_one_number():
    assert Day03().solve_b("12*...\n......") == 0


def test_b_gear_with_two_numbers():
    assert Day03().solve_b("12*3..") == 36