"""
Card model for the blackjack simulator.

A card is an immutable (rank, suit) pair. Ranks and suits are closed
enumerations so an out-of-range card cannot be built through the public API.
Cards also have a compact 16-bit form (rank in the high byte, suit in the
low byte) which is handy for debugging and logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


ACE_HIGH = 11
ACE_LOW = 1


def rank_name(rank: Rank) -> str:
    """Display name for a rank, e.g. Rank.QUEEN -> 'Queen'."""
    return Rank(rank).name.capitalize()


def suit_name(suit: Suit) -> str:
    """Display name for a suit, e.g. Suit.HEARTS -> 'Hearts'."""
    return Suit(suit).name.capitalize()


def decode_rank(bits: int) -> Rank:
    return Rank((bits >> 8) & 0xFF)


def decode_suit(bits: int) -> Suit:
    return Suit(bits & 0xFF)


@dataclass(frozen=True, order=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self):
        # Coerce plain ints; Rank()/Suit() raise ValueError when out of range
        object.__setattr__(self, 'rank', Rank(self.rank))
        object.__setattr__(self, 'suit', Suit(self.suit))

    def value(self, ace_high: bool = True) -> int:
        """Blackjack point value of this card.

        Number cards count their face value, tens and face cards count 10.
        An ace counts 11 unless the caller asks for the low value (1), which
        is how a hand demotes a soft ace.
        """
        if self.rank == Rank.ACE:
            return ACE_HIGH if ace_high else ACE_LOW
        if self.rank >= Rank.TEN:
            return 10
        return int(self.rank) + 2

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    def encode(self) -> int:
        return int(self.rank) << 8 | int(self.suit)

    @classmethod
    def decode(cls, bits: int) -> Card:
        return cls(decode_rank(bits), decode_suit(bits))

    def bits_str(self) -> str:
        """Encoded form as 4 hex digits, e.g. Ace of Spades -> '0c03'."""
        return f"{self.encode():04x}"

    def describe(self) -> str:
        return f"{rank_name(self.rank)} of {suit_name(self.suit)}"

    def __str__(self) -> str:
        return self.describe()
