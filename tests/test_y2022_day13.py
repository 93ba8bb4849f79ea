import pytest

from aocsolutions.y2022.day13 import Day13, is_in_right_order, parse_packet

PACKETS = ["[1,1,3,1,1]", "[[1],[2,3,4]]", "[[[]]]", "[1,[2,[3,[4,[5,6,7]]]],8,9]", "[]"]


def test_parse_packet_nested():
    assert parse_packet("[1,[2,3]]") == ["[", 1, "[", 2, 3, "]", "]"]


def test_parse_packet_multi_digit():
    assert parse_packet("[10,[]]") == ["[", 10, "[", "]", "]"]


def test_parse_packet_rejects_other_characters():
    with pytest.raises(ValueError):
        parse_packet("[a]")


@pytest.mark.parametrize("packet", PACKETS)
def test_packet_in_order_with_itself(packet):
    tokens = parse_packet(packet)
    assert is_in_right_order(tokens, tokens)


def test_smaller_value_first():
    assert is_in_right_order(parse_packet("[1]"), parse_packet("[2]"))
    assert not is_in_right_order(parse_packet("[2]"), parse_packet("[1]"))


def test_shorter_list_first():
    assert is_in_right_order(parse_packet("[]"), parse_packet("[3]"))
    assert not is_in_right_order(parse_packet("[3]"), parse_packet("[]"))


def test_mixed_list_and_value():
    assert is_in_right_order(parse_packet("[[1]]"), parse_packet("[2]"))
    assert not is_in_right_order(parse_packet("[[3]]"), parse_packet("[2]"))


def test_solve_a_and_b():
    text = "[1]\n[2]\n\n[2]\n[1]"
    assert Day13().solve_a(text) == 1
    assert Day13().solve_b(text) == 30


def test_incomplete_pair_raises():
    with pytest.raises(ValueError):
        Day13().solve_a("[1]")