"""
Single-player blackjack against a dealer automaton.
"""

from blackjack.cards import Card, Rank, Suit
from blackjack.deck import Deck, DeckExhaustedError
from blackjack.game import Game
from blackjack.game_engine import GameState
from blackjack.hand import Hand
from blackjack.player import Decision, Player

__all__ = [
    'Card',
    'Deck',
    'DeckExhaustedError',
    'Decision',
    'Game',
    'GameState',
    'Hand',
    'Player',
    'Rank',
    'Suit',
]
