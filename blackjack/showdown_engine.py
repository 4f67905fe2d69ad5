"""
Outcome resolution for the blackjack simulator.
"""

import logging

from blackjack.game_engine import GameState


class ShowdownEngine:
    """Compares the final totals and words the result."""

    def __init__(self, game_engine):
        self.game_engine = game_engine

    def resolve(self) -> GameState:
        """Decide the outcome once neither side has busted."""
        player_value = self.game_engine.player.hand.value()
        dealer_value = self.game_engine.dealer.hand.value()
        if player_value > dealer_value:
            outcome = GameState.PLAYER_WIN
        elif player_value == dealer_value:
            outcome = GameState.PUSH
        else:
            outcome = GameState.DEALER_WIN
        logging.info(f"Showdown: player {player_value} vs dealer {dealer_value} -> {outcome.name}")
        return outcome

    def result_message(self, outcome: GameState) -> str:
        return result_message(outcome, self.game_engine)


def result_message(outcome: GameState, game_engine) -> str:
    """Text shown to the player for a finished game."""
    if outcome == GameState.PLAYER_BUST:
        return "You busted! Dealer wins."
    if outcome == GameState.DEALER_BUST:
        return "Dealer busted! You win."
    if outcome == GameState.PLAYER_WIN:
        return f"You won with: {game_engine.player.hand.value()}"
    if outcome == GameState.PUSH:
        return "It's a tie!"
    if outcome == GameState.DEALER_WIN:
        return f"Dealer wins with: {game_engine.dealer.hand.value()}"
    raise ValueError(f"{outcome} is not a finished game")
