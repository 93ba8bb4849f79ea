"""Distress signal: compare nested list packets."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Token = int | str
OPEN = "["
CLOSE = "]"

_DIVIDER_1 = "[[2]]"
_DIVIDER_2 = "[[6]]"


def parse_packet(line: str) -> list[Token]:
    """Flatten a packet into tokens: ``'['``, ``']'`` and integer values."""
    packet: list[Token] = []
    digits = ""
    for symbol in line:
        if symbol.isdigit():
            digits += symbol
            continue
        if digits:
            value = int(digits)
            if value > 255:
                raise ValueError(f"packet value too large: {value}")
            packet.append(value)
            digits = ""
        if symbol in (OPEN, CLOSE):
            packet.append(symbol)
        elif symbol != ",":
            raise ValueError(f"unexpected character in packet: {symbol!r}")
    return packet


def is_in_right_order(left: Sequence[Token], right: Sequence[Token]) -> bool:
    """Whether ``left`` sorts no later than ``right``."""
    lhs = deque(left)
    rhs = deque(right)
    while rhs and lhs:
        l_token = lhs.popleft()
        r_token = rhs.popleft()
        if l_token == OPEN:
            if r_token == CLOSE:
                return False
            if r_token != OPEN:
                rhs.appendleft(CLOSE)
                rhs.appendleft(r_token)
        elif l_token == CLOSE:
            if r_token != CLOSE:
                return True
        else:
            if r_token == OPEN:
                lhs.appendleft(CLOSE)
                lhs.appendleft(l_token)
            elif r_token == CLOSE:
                return False
            elif l_token < r_token:
                return True
            elif l_token > r_token:
                return False
    return True


def _parse(text: str) -> list[tuple[list[Token], list[Token]]]:
    pairs = []
    for block in text.split("\n\n"):
        lines = block.split("\n")
        if len(lines) < 2:
            raise ValueError("packet pair is incomplete")
        pairs.append((parse_packet(lines[0]), parse_packet(lines[1])))
    return pairs


class Day13:
    def solve_a(self, text: str) -> int:
        """Sum of the one-based indices of pairs already in the right order."""
        return sum(
            index
            for index, (left, right) in enumerate(_parse(text), start=1)
            if is_in_right_order(left, right)
        )

    def solve_b(self, text: str) -> int:
        """Product of the positions the two divider packets take when sorted."""
        packets = [packet for pair in _parse(text) for packet in pair]
        first = parse_packet(_DIVIDER_1)
        second = parse_packet(_DIVIDER_2)
        before_first = sum(1 for p in packets if is_in_right_order(p, first))
        before_second = sum(1 for p in packets if is_in_right_order(p, second))
        return (before_first + 1) * (before_second + 2)