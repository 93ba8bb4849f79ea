import pytest

from aocsolutions.y2023.day05 import Day05, map_ranges

SEEDS = [79, 14, 55, 13]

MAPS = [
    ("seed", "soil", [(50, 98, 2), (52, 50, 48)]),
    ("soil", "fertilizer", [(0, 15, 37), (37, 52, 2), (39, 0, 15)]),
    ("fertilizer", "water", [(49, 53, 8), (0, 11, 42), (42, 0, 7), (57, 7, 4)]),
    ("water", "light", [(88, 18, 7), (18, 25, 70)]),
    ("light", "temperature", [(45, 77, 23), (81, 45, 19), (68, 64, 13)]),
    ("temperature", "humidity", [(0, 69, 1), (1, 0, 69)]),
    ("humidity", "location", [(60, 56, 37), (56, 93, 4)]),
]


def _almanac(seeds, maps):
    blocks = ["seeds: " + " ".join(str(s) for s in seeds)]
    for source, target, entries in maps:
        lines = [f"{source}-to-{target} map:"]
        lines.extend(f"{d} {s} {n}" for d, s, n in entries)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


INPUT = _almanac(SEEDS, MAPS)


def test_a():
    assert Day05().solve_a(INPUT) == 35


def test_b():
    assert Day05().solve_b(INPUT) == 46


def test_map_ranges_splits_around_mapping():
    result = map_ranges([range(0, 10)], [(range(5, 8), 100)])
    assert sorted(result, key=lambda r: r.start) == [
        range(0, 5),
        range(8, 10),
        range(105, 108),
    ]


def test_map_ranges_passes_through_unmapped():
    assert map_ranges([range(20, 30)], [(range(0, 10), 5)]) == [range(20, 30)]


def test_missing_seed_list_raises():
    with pytest.raises(ValueError):
        Day05().solve_a("soil: 1 2\n\nseed-to-soil map:\n1 2 3\n")


def test_odd_seed_count_raises():
    with pytest.raises(ValueError):
        Day05().solve_b("seeds: 1 2 3\n\nseed-to-soil map:\n1 2 3\n")