from aocsolutions.iterutil import take_until_inclusive


def test_always_true_yields_first_only():
    it = take_until_inclusive([0, 1, 2], lambda _: True)
    assert next(it) == 0
    assert list(it) == []


def test_includes_matching_item():
    assert list(take_until_inclusive([1, 2, 3, 4, 5], lambda x: x >= 3)) == [1, 2, 3]


def test_no_match_yields_everything():
    assert list(take_until_inclusive([1, 2, 3], lambda x: x > 10)) == [1, 2, 3]


def test_empty_input():
    assert list(take_until_inclusive([], lambda x: True)) == []


def test_does_not_consume_past_match():
    source = iter([1, 2, 3, 4])
    assert list(take_until_inclusive(source, lambda x: x == 2)) == [1, 2]
    assert list(source) == [3, 4]