"""
Blackjack game coordinator.

Brings the game engine, dealer engine and showdown engine together into a
small state machine:

    START -> ACTIVE -> (ACTIVE ...) -> outcome -> QUIT

where the outcome is one of PLAYER_BUST, DEALER_BUST, PLAYER_WIN,
DEALER_WIN or PUSH. Each call to `step()` performs exactly one transition,
so a single player decision is one ACTIVE step.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from blackjack.dealer_engine import DealerEngine
from blackjack.deck import DEFAULT_SHUFFLE_ITERATIONS, Deck
from blackjack.game_engine import TERMINAL_STATES, GameEngine, GameState
from blackjack.player import Decision, Player
from blackjack.showdown_engine import ShowdownEngine


class Game:
    """Main game coordinator that orchestrates all game components."""

    def __init__(self, player: Player, deck: Optional[Deck] = None,
                 output: Optional[Callable[[str], Any]] = None,
                 display: Optional[Callable[[Dict[str, Any]], Any]] = None,
                 shuffle_iterations: int = DEFAULT_SHUFFLE_ITERATIONS):
        self.player = player
        self.dealer = Player("Dealer", is_ai=True)
        # output(text) receives the running total and the result line;
        # display(state) receives the table for richer rendering
        self.output = output or (lambda text: None)
        self.display = display

        self.engine = GameEngine(player, self.dealer, deck, shuffle_iterations)
        self.dealer_engine = DealerEngine(self.engine)
        self.showdown = ShowdownEngine(self.engine)

        self.state = GameState.START
        self.outcome: Optional[GameState] = None
        self.result_message: Optional[str] = None
        self.history: List[GameState] = [self.state]

    @property
    def deck(self) -> Optional[Deck]:
        return self.engine.deck

    @property
    def is_over(self) -> bool:
        return self.state == GameState.QUIT

    def public_state(self) -> Dict[str, Any]:
        reveal = self.state != GameState.START and self.state != GameState.ACTIVE
        state = self.engine.get_public_state(reveal_dealer=reveal)
        state['state'] = self.state.value
        state['result'] = self.result_message
        return state

    def _transition(self, new_state: GameState) -> GameState:
        if self.state in TERMINAL_STATES and new_state != GameState.QUIT:
            raise RuntimeError(f"Cannot leave finished state {self.state.name} for {new_state.name}")
        if new_state != self.state:
            logging.debug(f"Game state {self.state.name} -> {new_state.name}")
        self.state = new_state
        self.history.append(new_state)
        return new_state

    def _show(self):
        if self.display is not None:
            self.display(self.public_state())

    def _finish_hand(self) -> GameState:
        """Dealer plays out, then the totals are compared."""
        if self.dealer_engine.play_turn():
            return GameState.DEALER_BUST
        return self.showdown.resolve()

    async def _player_turn(self) -> GameState:
        player_hand = self.player.hand
        dealer_hand = self.dealer.hand

        if player_hand.is_blackjack() and not dealer_hand.is_blackjack():
            logging.info(f"{self.player.name} has blackjack, skipping the decision")
            return self._finish_hand()

        self._show()
        self.output(f"PLAYER: {player_hand.value()}")
        decision = await self.player.decide(self.public_state())

        if decision == Decision.HIT:
            card = self.engine.draw_to(player_hand)
            if card is None:
                logging.warning("Deck exhausted on hit, standing instead")
                return self._finish_hand()
            logging.debug(f"{self.player.name} hits: {card.describe()}, total {player_hand.value()}")
            if player_hand.is_bust():
                return GameState.PLAYER_BUST
            return GameState.ACTIVE

        logging.debug(f"{self.player.name} stands on {player_hand.value()}")
        return self._finish_hand()

    async def step(self) -> GameState:
        """Perform one state transition and return the new state."""
        if self.state == GameState.START:
            self.engine.reset_round()
            self.engine.deal_initial()
            return self._transition(GameState.ACTIVE)

        if self.state == GameState.ACTIVE:
            return self._transition(await self._player_turn())

        if self.state in TERMINAL_STATES:
            self.outcome = self.state
            self.result_message = self.showdown.result_message(self.state)
            logging.info(f"Game over: {self.state.name} ({self.result_message})")
            self._show()
            self.output(self.result_message)
            return self._transition(GameState.QUIT)

        return self.state

    async def play(self) -> GameState:
        """Play from the current state until QUIT and return the outcome."""
        while not self.is_over:
            await self.step()
        return self.outcome
