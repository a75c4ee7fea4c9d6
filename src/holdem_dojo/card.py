"""Card representations as sent by the dojo game server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Self

from .exceptions import UnknownCardToken


class Suit(IntEnum):
    """Card suits. Declaration order is the card sort order."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def symbol(self) -> str:
        """Unicode glyph used on the wire."""
        return ["♠", "♥", "♦", "♣"][self.value]

    @classmethod
    def from_token(cls, token: str) -> Self:
        for suit in cls:
            if suit.symbol == token:
                return suit
        raise UnknownCardToken(token, "suit")

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Higher value = higher rank."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def token(self) -> str:
        """Wire token for the rank. The server spells Jack as "V"."""
        if self.value <= 10:
            return str(self.value)
        return {11: "V", 12: "Q", 13: "K", 14: "A"}[self.value]

    @classmethod
    def from_token(cls, token: str) -> Self:
        for rank in cls:
            if rank.token == token:
                return rank
        raise UnknownCardToken(token, "rank")

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card with rank and suit.

    Equality is by value. Ordering (``<``, ``sorted``) looks at the suit
    only, so cards of one suit keep their relative order under a stable sort.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.token}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self})"

    def __lt__(self, other: Card) -> bool:
        return self.compare(other) < 0

    def compare(self, other: Card) -> int:
        """Three-way comparison by suit declaration order."""
        return (self.suit > other.suit) - (self.suit < other.suit)

    def is_same_suit(self, other: Card) -> bool:
        return self.suit == other.suit

    def is_next_rank(self, other: Card) -> bool:
        """True if the two ranks are exactly one step apart, in either direction."""
        return abs(self.rank - other.rank) == 1

    @classmethod
    def from_tokens(cls, rank_token: str, suit_token: str) -> Self:
        """Build a card from the server's rank token and suit glyph."""
        return cls(rank=Rank.from_token(rank_token), suit=Suit.from_token(suit_token))

    def tokens(self) -> tuple[str, str]:
        """Inverse of from_tokens()."""
        return self.rank.token, self.suit.symbol

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a card from a string like '10♠', 'V♥', 'As' or 'qd'.

        Rank: 2-10, V (Jack), Q, K, A
        Suit: a glyph (♠ ♥ ♦ ♣) or a letter s(pades), h(earts), d(iamonds), c(lubs)
        """
        s = s.strip().upper()
        if len(s) < 2:
            raise UnknownCardToken(s)

        # Suit is the last character
        suit_char = s[-1]
        letters = {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}
        return cls.from_tokens(s[:-1], letters.get(suit_char, suit_char))


# Convenience function
def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)
