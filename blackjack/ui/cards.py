"""
Card rendering utilities for the blackjack terminal UI.
Handles ASCII art card visualization and layout.
"""

from blackjack.cards import Rank, Suit

from .colors import Colors


# Card suit symbols
SUIT_SYMBOLS = {
    Suit.HEARTS: '♥',
    Suit.DIAMONDS: '♦',
    Suit.CLUBS: '♣',
    Suit.SPADES: '♠',
}

# Card suit colors, by Colors attribute name so Colors.disable() applies
SUIT_COLORS = {
    Suit.HEARTS: 'RED',
    Suit.DIAMONDS: 'RED',
    Suit.CLUBS: 'BLACK',
    Suit.SPADES: 'BLACK',
}

RANK_LABELS = {Rank.JACK: 'J', Rank.QUEEN: 'Q', Rank.KING: 'K', Rank.ACE: 'A'}

CARD_HEIGHT = 5


def rank_label(rank: Rank) -> str:
    return RANK_LABELS.get(rank, str(int(rank) + 2))


def card_art(card):
    """Format a single card as ASCII art lines."""
    rank = rank_label(card.rank)
    symbol = SUIT_SYMBOLS[card.suit]
    color = getattr(Colors, SUIT_COLORS[card.suit])
    style = f"{Colors.BOLD}{Colors.BG_WHITE}{color}"

    # Ensure rank is always 2 characters wide
    rank_left = f"{rank:<2}"
    rank_right = f"{rank:>2}"

    return [
        f"{style}╭───╮{Colors.RESET}",
        f"{style}│{rank_left}{symbol}│{Colors.RESET}",
        f"{style}│   │{Colors.RESET}",
        f"{style}│{symbol}{rank_right}│{Colors.RESET}",
        f"{style}╰───╯{Colors.RESET}",
    ]


def hidden_card_art():
    """The dealer's face-down card."""
    style = f"{Colors.BOLD}{Colors.BG_BLUE}"
    return [
        f"{style}╭───╮{Colors.RESET}",
        f"{style}│░░░│{Colors.RESET}",
        f"{style}│░░░│{Colors.RESET}",
        f"{style}│░░░│{Colors.RESET}",
        f"{style}╰───╯{Colors.RESET}",
    ]


def cards_horizontal(cards, hidden: int = 0):
    """Render cards side-by-side, followed by `hidden` face-down cards."""
    card_lines = [card_art(card) for card in cards]
    card_lines.extend(hidden_card_art() for _ in range(hidden))
    if not card_lines:
        return ""

    result_lines = []
    for line_idx in range(CARD_HEIGHT):
        result_lines.append(" ".join(lines[line_idx] for lines in card_lines))

    return "\n".join(result_lines)
