"""
Automatic player for the blackjack simulator.

Plays a simplified basic strategy from the public table state, so games can
run unattended (`main.py --auto`) or be simulated in bulk.
"""

import logging
from typing import Any, Callable, Dict

from blackjack.cards import Card
from blackjack.player import Decision


class BlackjackAI:
    def __init__(self, player):
        self.player = player

    def decide(self, game_state: Dict[str, Any]) -> str:
        """Return 'h' to hit or 's' to stand."""
        total = game_state.get('player_value', 0)
        soft = game_state.get('player_soft', False)
        upcard = game_state.get('dealer_upcard')
        dealer_shows = upcard.value() if isinstance(upcard, Card) else 10

        if soft:
            hit = total <= 17
        elif total <= 11:
            hit = True
        elif total <= 16:
            # Stiff hand: only draw into a strong dealer card
            hit = dealer_shows >= 7
        else:
            hit = False

        decision = Decision.HIT if hit else Decision.STAND
        logging.debug(f"AI {self.player.name}: {total}{' soft' if soft else ''} vs {dealer_shows} -> {decision.name}")
        return decision.value

    def make_actor(self) -> Callable[[Dict[str, Any]], str]:
        return self.decide


def attach_ai(player) -> BlackjackAI:
    """Give `player` an automatic actor and mark it as AI controlled."""
    ai = BlackjackAI(player)
    player.actor = ai.make_actor()
    player.is_ai = True
    return ai
