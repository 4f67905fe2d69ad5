"""
Hand scoring for the blackjack simulator.
"""

from typing import Iterator, List, Tuple

from blackjack.cards import ACE_HIGH, ACE_LOW, Card

BLACKJACK = 21


class Hand:
    """Cards held by the player or the dealer.

    Cards are only ever appended. The total counts every ace as 11 and then
    demotes aces to 1, one at a time, while the hand would otherwise bust.
    """

    def __init__(self):
        self._cards: List[Card] = []

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def _score(self) -> Tuple[int, int]:
        """Return (total, number of aces still counted high)."""
        total = sum(card.value() for card in self._cards)
        soft_aces = sum(1 for card in self._cards if card.is_ace)
        while total > BLACKJACK and soft_aces:
            total -= ACE_HIGH - ACE_LOW
            soft_aces -= 1
        return total, soft_aces

    def value(self) -> int:
        return self._score()[0]

    @property
    def is_soft(self) -> bool:
        return self._score()[1] > 0

    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    def is_blackjack(self) -> bool:
        return len(self._cards) == 2 and self.value() == BLACKJACK

    def describe(self) -> str:
        return ", ".join(card.describe() for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand([{self.describe()}], value={self.value()})"
