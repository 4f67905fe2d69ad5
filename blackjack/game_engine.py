"""
Core game engine for the blackjack simulator.

Owns the deck and both hands and knows how to deal. Turn order and outcome
decisions live in `blackjack.game`, `blackjack.dealer_engine` and
`blackjack.showdown_engine`.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from blackjack.cards import Card
from blackjack.deck import DEFAULT_SHUFFLE_ITERATIONS, Deck, DeckExhaustedError
from blackjack.hand import Hand
from blackjack.player import Player


class GameState(Enum):
    START = 'start'
    ACTIVE = 'active'
    PLAYER_BUST = 'player_bust'
    DEALER_BUST = 'dealer_bust'
    PLAYER_WIN = 'player_win'
    DEALER_WIN = 'dealer_win'
    PUSH = 'push'
    QUIT = 'quit'


# Outcomes: each one reports its result and then moves to QUIT
TERMINAL_STATES = frozenset({
    GameState.PLAYER_BUST,
    GameState.DEALER_BUST,
    GameState.PLAYER_WIN,
    GameState.DEALER_WIN,
    GameState.PUSH,
})


class GameEngine:
    """Deck, hands and dealing for a single round."""

    def __init__(self, player: Player, dealer: Player, deck: Optional[Deck] = None,
                 shuffle_iterations: int = DEFAULT_SHUFFLE_ITERATIONS):
        self.player = player
        self.dealer = dealer
        self.shuffle_iterations = shuffle_iterations
        # An injected deck is used as-is (unshuffled) for the next round;
        # otherwise reset_round() builds and shuffles one
        self._next_deck = deck
        self.deck: Optional[Deck] = None

    def reset_round(self):
        """Reset the deck and both hands for a new round."""
        if self._next_deck is not None:
            self.deck = self._next_deck
            self._next_deck = None
        else:
            self.deck = Deck()
            self.deck.shuffle(self.shuffle_iterations)
        self.player.reset_hand()
        self.dealer.reset_hand()
        logging.debug(f"Round reset, {self.deck.cards_remaining} cards in deck")

    def draw_to(self, hand: Hand) -> Optional[Card]:
        """Deal one card into `hand`; return None when the deck is exhausted."""
        card = self.deck.deal()
        if card is not None:
            hand.add_card(card)
        return card

    def deal_initial(self):
        """Deal two cards each, alternating player and dealer."""
        for _ in range(2):
            for participant in (self.player, self.dealer):
                card = self.draw_to(participant.hand)
                if card is None:
                    raise DeckExhaustedError(
                        f"Deck ran out during the initial deal ({self.deck.dealt_count} cards dealt)"
                    )
                logging.debug(f"Dealt {card.describe()} to {participant.name}")

    def get_public_state(self, reveal_dealer: bool = False) -> Dict[str, Any]:
        """Get the table as the player is allowed to see it."""
        player_hand = self.player.hand
        dealer_cards = list(self.dealer.hand.cards)
        state = {
            'player': self.player.name,
            'player_cards': list(player_hand.cards),
            'player_value': player_hand.value(),
            'player_soft': player_hand.is_soft,
            'dealer_upcard': dealer_cards[0] if dealer_cards else None,
            'dealer_cards': dealer_cards if reveal_dealer else dealer_cards[:1],
            'dealer_value': self.dealer.hand.value() if reveal_dealer else None,
            'dealer_hidden': 0 if reveal_dealer else max(len(dealer_cards) - 1, 0),
            'cards_remaining': self.deck.cards_remaining if self.deck is not None else 0,
        }
        return state
