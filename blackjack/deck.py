"""
Deck operations for the blackjack simulator.

The deck deals from the end of its card list, so the "top" of the deck is
the last element. Each deck owns its own random generator; tests pass a
seeded `random.Random` to get a reproducible order.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from blackjack.cards import Card, Rank, Suit

DEFAULT_SHUFFLE_ITERATIONS = 10


class DeckExhaustedError(RuntimeError):
    """Raised when a card is required but the deck has none left."""


def make_deck() -> List[Card]:
    """Create a standard 52-card deck in canonical order (suit by suit)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    INITIAL_SIZE = 52

    def __init__(self, rng: Optional[random.Random] = None):
        # A fresh Random() seeds itself from OS entropy, so two decks never
        # share one generator state
        self.rng = rng if rng is not None else random.Random()
        self._cards: List[Card] = make_deck()
        self._dealt_count = 0

    @classmethod
    def stacked(cls, top_cards: Iterable[Card], fill: bool = True,
                rng: Optional[random.Random] = None) -> "Deck":
        """Build a deck whose next deals are `top_cards`, in order.

        With `fill` the rest of the 52 cards sit underneath in canonical
        order; without it the deck holds only `top_cards` and counts the
        missing cards as already dealt.
        """
        top = list(top_cards)
        if len(set(top)) != len(top):
            raise ValueError("Stacked cards must be distinct")
        deck = cls(rng=rng)
        rest = [card for card in deck._cards if card not in top] if fill else []
        deck._cards = rest + top[::-1]
        deck._dealt_count = cls.INITIAL_SIZE - len(deck._cards)
        return deck

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Remaining cards, bottom first; the last one is dealt next."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    @property
    def dealt_count(self) -> int:
        return self._dealt_count

    def shuffle(self, iterations: int = DEFAULT_SHUFFLE_ITERATIONS) -> None:
        """Shuffle the remaining cards in place, `iterations` times.

        One pass of `random.shuffle` is already a uniform permutation; more
        passes do not make it any more random.
        """
        if iterations < 1:
            raise ValueError(f"Shuffle iterations must be at least 1, got {iterations}")
        for _ in range(iterations):
            self.rng.shuffle(self._cards)
        logging.debug(f"Deck shuffled {iterations}x, {len(self._cards)} cards remaining")

    def deal(self) -> Optional[Card]:
        """Deal the top card, or return None when the deck is empty."""
        if not self._cards:
            return None
        card = self._cards.pop()
        self._dealt_count += 1
        return card

    def draw(self) -> Card:
        """Deal the top card; raise DeckExhaustedError when the deck is empty."""
        card = self.deal()
        if card is None:
            raise DeckExhaustedError(f"Cannot draw from an empty deck ({self._dealt_count} cards dealt)")
        return card

    def describe(self) -> str:
        """Multi-line listing of the remaining cards and their values."""
        lines = ["DECK", f"Size: {len(self._cards)}", ""]
        for card in self._cards:
            lines.append(f"[ {card.describe()} ] {card.value()}")
        return "\n".join(lines)
