"""Poker combination categories and the detector for each of them.

Every detector takes the merged hole + board cards, already sorted by
:meth:`Card.compare`, and reports whether its category is satisfied along
with the cards that substantiate it. Detectors are independent: a royal
flush also satisfies the straight flush and flush detectors.

Where several rank or suit groups qualify, the first group in
encounter order wins, not the highest one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Sequence

from .card import Card, Rank, Suit


class Combination(IntEnum):
    """Poker combinations from weakest to strongest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


_DESCRIPTIONS = {
    Combination.HIGH_CARD: "Highest card",
    Combination.ONE_PAIR: "Two cards of the same rank",
    Combination.TWO_PAIR: "Two sets of two cards of the same rank",
    Combination.THREE_OF_A_KIND: "Three cards of the same rank",
    Combination.STRAIGHT: "Five cards in sequence",
    Combination.FLUSH: "Five cards all of the same suit",
    Combination.FULL_HOUSE: "Three cards of one rank and two cards of another rank",
    Combination.FOUR_OF_A_KIND: "Four cards of the same rank",
    Combination.STRAIGHT_FLUSH: "Five cards in sequence, all of the same suit",
    Combination.ROYAL_FLUSH: "Ten, Jack, Queen, King and Ace of the same suit",
}

# Sequence categories need a full five-card hand.
_SEQUENCE_LENGTH = 5


@dataclass(frozen=True)
class Detection:
    """Result of one detector run."""

    satisfied: bool
    evidence: tuple[Card, ...] = ()

    def __bool__(self) -> bool:
        return self.satisfied


_MISS = Detection(False)


def _group_by(
    cards: Sequence[Card], key: Callable[[Card], Rank | Suit]
) -> dict[Rank | Suit, list[Card]]:
    """Group cards by key, keeping first-encounter key order."""
    groups: dict[Rank | Suit, list[Card]] = {}
    for c in cards:
        groups.setdefault(key(c), []).append(c)
    return groups


def _by_rank(cards: Sequence[Card]) -> dict[Rank | Suit, list[Card]]:
    return _group_by(cards, lambda c: c.rank)


def _first_group_of_at_least(cards: Sequence[Card], size: int) -> Detection:
    for group in _by_rank(cards).values():
        if len(group) >= size:
            return Detection(True, tuple(group))
    return _MISS


def _pairs(cards: Sequence[Card]) -> list[tuple[Card, Card]]:
    return list(zip(cards, cards[1:]))


def high_card(cards: Sequence[Card]) -> Detection:
    """Always satisfied; evidence is the highest-ranked card, if any."""
    if not cards:
        return Detection(True)
    return Detection(True, (max(cards, key=lambda c: c.rank),))


def one_pair(cards: Sequence[Card]) -> Detection:
    return _first_group_of_at_least(cards, 2)


def two_pair(cards: Sequence[Card]) -> Detection:
    """Exactly two rank groups with two or more cards."""
    groups = [g for g in _by_rank(cards).values() if len(g) >= 2]
    if len(groups) != 2:
        return _MISS
    return Detection(True, tuple(c for g in groups for c in g))


def three_of_a_kind(cards: Sequence[Card]) -> Detection:
    return _first_group_of_at_least(cards, 3)


def straight(cards: Sequence[Card]) -> Detection:
    """Every neighbour in sorted order is one rank step away. No ace-low wrap."""
    ordered = sorted(cards)
    if len(ordered) < _SEQUENCE_LENGTH:
        return _MISS
    if all(a.is_next_rank(b) for a, b in _pairs(ordered)):
        return Detection(True, tuple(ordered))
    return _MISS


def flush(cards: Sequence[Card]) -> Detection:
    """Exactly five cards share a suit."""
    for group in _group_by(cards, lambda c: c.suit).values():
        if len(group) == _SEQUENCE_LENGTH:
            return Detection(True, tuple(group))
    return _MISS


def full_house(cards: Sequence[Card]) -> Detection:
    """A rank group of exactly two plus a rank group of exactly three."""
    groups = list(_by_rank(cards).values())
    pair = next((g for g in groups if len(g) == 2), None)
    triple = next((g for g in groups if len(g) == 3), None)
    if pair is None or triple is None:
        return _MISS
    return Detection(True, tuple(pair + triple))


def four_of_a_kind(cards: Sequence[Card]) -> Detection:
    return _first_group_of_at_least(cards, 4)


def straight_flush(cards: Sequence[Card]) -> Detection:
    ordered = sorted(cards)
    if len(ordered) < _SEQUENCE_LENGTH:
        return _MISS
    if all(a.is_same_suit(b) and a.is_next_rank(b) for a, b in _pairs(ordered)):
        return Detection(True, tuple(ordered))
    return _MISS


def royal_flush(cards: Sequence[Card]) -> Detection:
    """One suit throughout, starting at a Ten and ending at an Ace."""
    ordered = sorted(cards)
    if len(ordered) < _SEQUENCE_LENGTH:
        return _MISS
    if (
        all(a.is_same_suit(b) for a, b in _pairs(ordered))
        and ordered[0].rank == Rank.TEN
        and ordered[-1].rank == Rank.ACE
    ):
        return Detection(True, tuple(ordered))
    return _MISS


def detect(combination: Combination, cards: Sequence[Card]) -> Detection:
    """Run the detector for a single combination."""
    if combination == Combination.HIGH_CARD:
        return high_card(cards)
    elif combination == Combination.ONE_PAIR:
        return one_pair(cards)
    elif combination == Combination.TWO_PAIR:
        return two_pair(cards)
    elif combination == Combination.THREE_OF_A_KIND:
        return three_of_a_kind(cards)
    elif combination == Combination.STRAIGHT:
        return straight(cards)
    elif combination == Combination.FLUSH:
        return flush(cards)
    elif combination == Combination.FULL_HOUSE:
        return full_house(cards)
    elif combination == Combination.FOUR_OF_A_KIND:
        return four_of_a_kind(cards)
    elif combination == Combination.STRAIGHT_FLUSH:
        return straight_flush(cards)
    elif combination == Combination.ROYAL_FLUSH:
        return royal_flush(cards)
    raise ValueError(f"Unknown combination: {combination!r}")
