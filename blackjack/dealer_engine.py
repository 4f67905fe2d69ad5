"""
Dealer strategy for the blackjack simulator.
"""

import logging

from blackjack.hand import Hand

DEALER_STANDS_ON = 17


def dealer_should_draw(hand: Hand) -> bool:
    """The dealer draws on anything below 17 and stands on 17 or more."""
    return hand.value() < DEALER_STANDS_ON


class DealerEngine:
    """Plays the dealer's hand. The dealer never makes a choice of its own."""

    def __init__(self, game_engine):
        self.game_engine = game_engine

    def play_turn(self) -> bool:
        """Draw until the dealer reaches 17. Returns True if the dealer busted."""
        hand = self.game_engine.dealer.hand
        while dealer_should_draw(hand):
            card = self.game_engine.draw_to(hand)
            if card is None:
                logging.warning(f"Deck exhausted during dealer turn, dealer stands on {hand.value()}")
                break
            logging.debug(f"Dealer draws {card.describe()}, total {hand.value()}")
        logging.info(f"Dealer finishes on {hand.value()}")
        return hand.is_bust()
