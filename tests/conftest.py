import random
from collections import deque
from typing import Any, Callable, Iterable, Optional

import pytest

from blackjack.cards import Card
from blackjack.deck import Deck
from blackjack.player import Player
from blackjack.ui.colors import Colors


class SequentialActor:
    """Callable helper which returns predetermined hit/stand answers."""

    def __init__(self, answers: Iterable[Any]):
        self._queue = deque(answers)
        self.calls = 0

    def next_answer(self, state):
        self.calls += 1
        if not self._queue:
            raise RuntimeError("No more scripted answers available")
        return self._queue.popleft()


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for creating Player objects with deterministic actors."""

    def _factory(name: str = "alice", answers: Optional[Iterable[Any]] = None, *, use_async: bool = True) -> Player:
        player = Player(name)
        if answers is not None:
            actor = SequentialActor(answers)
            player.scripted = actor

            if use_async:
                async def _actor_async(state):
                    return actor.next_answer(state)

                player.actor = _actor_async
            else:
                player.actor = actor.next_answer
        return player

    return _factory


@pytest.fixture
def stacked_deck() -> Callable[..., Deck]:
    """Build a full deck whose next deals are exactly the given cards, in order."""

    def _factory(*top_cards: Card) -> Deck:
        return Deck.stacked(top_cards, rng=random.Random(0))

    return _factory


@pytest.fixture
def restore_colors(monkeypatch):
    """Let a test call Colors.disable() without leaking into other tests."""
    for name in Colors._CODES:
        monkeypatch.setattr(Colors, name, getattr(Colors, name))
    yield Colors
