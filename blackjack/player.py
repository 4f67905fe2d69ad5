"""
Player model for the blackjack simulator.

A Player holds a Hand and a pluggable `actor` callable that decides
between hitting and standing. The console front end sets `actor` to a
function that reads a key press; automatic play uses `blackjack.ai`.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Optional

from blackjack.hand import Hand


class Decision(Enum):
    HIT = 'h'
    STAND = 's'


def parse_decision(token: Any) -> Decision:
    """Map an actor's answer to a Decision.

    Only an answer starting with 'h' hits; anything else (including an
    empty answer) stands.
    """
    if isinstance(token, Decision):
        return token
    text = str(token or '').strip().lower()
    if text[:1] == Decision.HIT.value:
        return Decision.HIT
    return Decision.STAND


class Player:
    def __init__(self, name: str, is_ai: bool = False):
        self.name = name
        self.is_ai = is_ai
        self.hand = Hand()
        # actor(game_state) -> 'h' | 's'
        # actor may be sync or async; typing is broad to accept both.
        self.actor: Optional[Callable[[dict], Any]] = None

    def reset_hand(self) -> None:
        self.hand = Hand()

    async def take_action(self, game_state: dict) -> Any:
        if self.actor is None:
            raise NotImplementedError("No action actor set for player")
        result = self.actor(game_state)
        if asyncio.iscoroutine(result):
            result = await result
        logging.debug(f"Player {self.name} answered {result!r} at {game_state.get('player_value')}")
        return result

    async def decide(self, game_state: dict) -> Decision:
        return parse_decision(await self.take_action(game_state))

    def __repr__(self) -> str:
        return f"Player({self.name!r}, is_ai={self.is_ai}, hand={self.hand!r})"
