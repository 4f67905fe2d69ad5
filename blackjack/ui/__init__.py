"""
UI module for the blackjack simulator.
Provides terminal UI components for consistent presentation.
"""

from .colors import Colors
from .cards import card_art, cards_horizontal, hidden_card_art, SUIT_SYMBOLS, SUIT_COLORS

__all__ = ['Colors', 'card_art', 'cards_horizontal', 'hidden_card_art', 'SUIT_SYMBOLS', 'SUIT_COLORS']
