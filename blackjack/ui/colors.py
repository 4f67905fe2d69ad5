"""
ANSI color codes for terminal output in the blackjack simulator.
Provides consistent color theming across the application.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    BLACK = '\033[30m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    GREY = '\033[90m'
    RESET = '\033[0m'
    BG_WHITE = '\033[47m'
    BG_BLUE = '\033[44m'
    CLEAR_SCREEN = '\033[2J\033[H'

    _CODES = ('RED', 'BLACK', 'GREEN', 'YELLOW', 'CYAN', 'BOLD', 'DIM',
              'GREY', 'RESET', 'BG_WHITE', 'BG_BLUE', 'CLEAR_SCREEN')

    @classmethod
    def disable(cls):
        """Blank every code, for terminals (or pipes) without ANSI support."""
        for name in cls._CODES:
            setattr(cls, name, '')
