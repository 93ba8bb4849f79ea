"""Rock, paper, scissors strategy guide scoring."""

from __future__ import annotations

from enum import Enum


class Outcome(Enum):
    WIN = 6
    DRAW = 3
    LOSS = 0

    def score(self) -> int:
        """Points awarded for this outcome."""
        return self.value


class Hand(Enum):
    ROCK = 1
    PAPER = 2
    SCISSOR = 3

    def score(self) -> int:
        """Points awarded for playing this hand."""
        return self.value

    def wins_over(self, opponent: Hand) -> Outcome:
        """Outcome of playing this hand against ``opponent``."""
        if self is Hand.ROCK and opponent is Hand.SCISSOR:
            return Outcome.WIN
        if self is Hand.SCISSOR and opponent is Hand.ROCK:
            return Outcome.LOSS
        if self.value < opponent.value:
            return Outcome.LOSS
        if self.value > opponent.value:
            return Outcome.WIN
        return Outcome.DRAW


_HAND_LETTERS = {
    "A": Hand.ROCK,
    "X": Hand.ROCK,
    "B": Hand.PAPER,
    "Y": Hand.PAPER,
    "C": Hand.SCISSOR,
    "Z": Hand.SCISSOR,
}

_OUTCOME_LETTERS = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}

# Each hand mapped to the hand it defeats.
_BEATS = {Hand.ROCK: Hand.SCISSOR, Hand.PAPER: Hand.ROCK, Hand.SCISSOR: Hand.PAPER}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


def _hand(letter: str) -> Hand:
    try:
        return _HAND_LETTERS[letter]
    except KeyError:
        raise ValueError(f"invalid hand character: {letter!r}") from None


def _outcome(letter: str) -> Outcome:
    try:
        return _OUTCOME_LETTERS[letter]
    except KeyError:
        raise ValueError(f"invalid outcome character: {letter!r}") from None


def hand_to_play(goal: Outcome, opponent: Hand) -> Hand:
    """The hand that reaches ``goal`` against ``opponent``."""
    if goal is Outcome.DRAW:
        return opponent
    if goal is Outcome.WIN:
        return _BEATEN_BY[opponent]
    return _BEATS[opponent]


def _rounds(text: str) -> list[tuple[str, str]]:
    rounds = []
    for line in text.rstrip().splitlines():
        first, second, *_ = line.split(" ")
        rounds.append((first, second))
    return rounds


class Day02:
    def solve_a(self, text: str) -> int:
        """Total score reading both columns as hands."""
        total = 0
        for other_letter, my_letter in _rounds(text):
            other, me = _hand(other_letter), _hand(my_letter)
            total += me.wins_over(other).score() + me.score()
        return total

    def solve_b(self, text: str) -> int:
        """Total score reading the second column as the desired outcome."""
        total = 0
        for other_letter, goal_letter in _rounds(text):
            opponent, goal = _hand(other_letter), _outcome(goal_letter)
            total += goal.score() + hand_to_play(goal, opponent).score()
        return total