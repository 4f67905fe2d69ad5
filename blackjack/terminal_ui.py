"""
Terminal UI renderer for the blackjack simulator with colours and cards.

This keeps presentation logic out of the engine: the game hands its public
state to `TerminalUI.render(game_state)` and prints the returned string.
"""

from typing import Any, Dict

# Import from the modular UI components
from .ui.colors import Colors
from .ui.cards import cards_horizontal

WIN_MESSAGES = ("Dealer busted! You win.",)


class TerminalUI:
    def __init__(self, player_name: str, clear_screen: bool = True):
        self.player_name = player_name
        self.clear_screen = clear_screen

    def _header(self):
        out = []
        if self.clear_screen:
            out.append(Colors.CLEAR_SCREEN)
        out.append(f"{Colors.BOLD}{Colors.YELLOW}🃏 BLACKJACK 🃏{Colors.RESET}")
        out.append("")
        return out

    def render(self, game_state: Dict[str, Any]) -> str:
        """Render the table: dealer on top, player below."""
        out = self._header()

        dealer_value = game_state.get('dealer_value')
        dealer_total = f" ({dealer_value})" if dealer_value is not None else ""
        out.append(f"{Colors.BOLD}{Colors.CYAN}Dealer{dealer_total}:{Colors.RESET}")
        out.append(cards_horizontal(game_state.get('dealer_cards', []),
                                    hidden=game_state.get('dealer_hidden', 0)))
        out.append("")

        player_value = game_state.get('player_value', 0)
        soft = " soft" if game_state.get('player_soft') and player_value < 21 else ""
        value_color = Colors.RED if player_value > 21 else Colors.GREEN
        out.append(f"{Colors.BOLD}{Colors.CYAN}{self.player_name} "
                   f"({value_color}{player_value}{soft}{Colors.CYAN}):{Colors.RESET}")
        out.append(cards_horizontal(game_state.get('player_cards', [])))
        out.append("")

        out.append(f"{Colors.DIM}Cards left in deck: {game_state.get('cards_remaining', 0)}{Colors.RESET}")
        return "\n".join(out)

    def render_result(self, message: str, game_state: Dict[str, Any]) -> str:
        """Final screen: the revealed table followed by the result line."""
        return "\n".join([self.render(game_state), "", self.render_message(message)])

    def render_message(self, message: str) -> str:
        """Colour a line of game output: running totals dim, results bold."""
        if message.startswith("PLAYER:"):
            return f"{Colors.DIM}{message}{Colors.RESET}"
        color = Colors.GREEN if message in WIN_MESSAGES or message.startswith("You won") else Colors.YELLOW
        return f"{Colors.BOLD}{color}{message}{Colors.RESET}"
