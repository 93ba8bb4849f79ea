"""Camel cards: rank poker-like hands and total the winnings."""

from __future__ import annotations

from collections import Counter
from enum import IntEnum

_JOKER = "X"
_VALUES = {card: rank for rank, card in enumerate("X23456789TJQKA")}


class CardType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6

    @classmethod
    def of_hand(cls, hand: str) -> CardType:
        """Type of ``hand``; ``X`` marks a joker that takes the best role."""
        counts = Counter(hand)
        jokers = counts.get(_JOKER, 0)
        best = max((n for card, n in counts.items() if card != _JOKER), default=0)
        two_pairs = sum(1 for n in counts.values() if n == 2) == 2
        has_pair = any(n == 2 for n in counts.values())

        pair = (best, jokers)
        if pair in ((5, 0), (4, 1), (3, 2), (2, 3), (1, 4), (0, 5)):
            return cls.FIVE_OF_A_KIND
        if pair in ((4, 0), (3, 1), (2, 2), (1, 3), (0, 4)):
            return cls.FOUR_OF_A_KIND
        if pair == (3, 0):
            return cls.FULL_HOUSE if has_pair else cls.THREE_OF_A_KIND
        if pair == (2, 1):
            return cls.FULL_HOUSE if two_pairs else cls.THREE_OF_A_KIND
        if pair == (2, 0):
            return cls.TWO_PAIR if two_pairs else cls.ONE_PAIR
        if pair == (1, 2):
            return cls.THREE_OF_A_KIND
        if pair == (1, 1):
            return cls.ONE_PAIR
        if pair == (1, 0):
            return cls.HIGH_CARD
        raise ValueError(f"cannot classify hand {hand!r}")


def _sort_key(hand: str) -> tuple[CardType, tuple[int, ...]]:
    try:
        values = tuple(_VALUES[card] for card in hand)
    except KeyError as error:
        raise ValueError(f"invalid card {error.args[0]!r} in {hand!r}") from None
    return CardType.of_hand(hand), values


def total_winnings(text: str, jokers: bool) -> int:
    """Sum of rank times bid; with ``jokers`` every ``J`` is a joker."""
    cards = []
    for line in text.strip().splitlines():
        hand, sep, bid = line.partition(" ")
        if not sep:
            continue
        if jokers:
            hand = hand.replace("J", _JOKER)
        cards.append((_sort_key(hand), int(bid)))
    cards.sort(key=lambda card: card[0])
    return sum(rank * bid for rank, (_, bid) in enumerate(cards, start=1))


class Day07:
    def solve_a(self, text: str) -> int:
        """Total winnings with ``J`` as jacks."""
        return total_winnings(text, jokers=False)

    def solve_b(self, text: str) -> int:
        """Total winnings with ``J`` as jokers."""
        return total_winnings(text, jokers=True)