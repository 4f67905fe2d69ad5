"""
Entry point for the blackjack simulator.
Plays one or more games against the dealer in the terminal.
"""

import argparse
import asyncio
import logging
import random
import sys
from collections import Counter
from typing import Optional

from blackjack.ai import attach_ai
from blackjack.console import console_actor
from blackjack.deck import Deck, DeckExhaustedError
from blackjack.game import Game
from blackjack.game_engine import GameState
from blackjack.player import Player
from blackjack.settings import format_banner, get_settings
from blackjack.terminal_ui import Colors, TerminalUI

PLAYER_WINS = (GameState.PLAYER_WIN, GameState.DEALER_BUST)


def build_deck(seed: Optional[int], index: int, shuffle_iterations: int) -> Optional[Deck]:
    """Seeded runs get their own reproducible deck per game."""
    if seed is None:
        return None
    deck = Deck(rng=random.Random(seed + index))
    deck.shuffle(shuffle_iterations)
    return deck


async def play_games(rounds: int, auto: bool, seed: Optional[int], shuffle_iterations: int,
                     clear_screen: bool = True) -> Counter:
    player = Player("You")
    if auto:
        attach_ai(player)
    else:
        player.actor = console_actor

    ui = TerminalUI(player.name, clear_screen=clear_screen and not auto)
    tally: Counter = Counter()
    # Unattended multi-game runs only print result lines
    quiet = auto and rounds > 1

    def show_text(text):
        # With the table on screen the result line comes from render_result
        if quiet or text.startswith("PLAYER:"):
            print(ui.render_message(text))

    def show_table(state):
        if state.get('result'):
            print(ui.render_result(state['result'], state))
        else:
            print(ui.render(state))

    for index in range(rounds):
        game = Game(
            player,
            deck=build_deck(seed, index, shuffle_iterations),
            output=show_text,
            display=None if quiet else show_table,
            shuffle_iterations=shuffle_iterations,
        )
        outcome = await game.play()
        tally[outcome] += 1
        logging.debug(f"Game {index + 1}/{rounds} finished: {outcome.name}")

    return tally


def format_tally(tally: Counter) -> str:
    total = sum(tally.values())
    wins = sum(tally[state] for state in PLAYER_WINS)
    lines = [f"{Colors.BOLD}Results after {total} games:{Colors.RESET}"]
    for state in (GameState.PLAYER_WIN, GameState.DEALER_BUST, GameState.PUSH,
                  GameState.DEALER_WIN, GameState.PLAYER_BUST):
        lines.append(f"  {state.name.replace('_', ' ').title():<12} {tally[state]}")
    if total:
        lines.append(f"  Win rate     {wins / total:.1%}")
    return "\n".join(lines)


def main(argv=None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Play blackjack against the dealer")
    parser.add_argument("--seed", type=int, default=settings['seed'], help="Seed for a reproducible shuffle")
    parser.add_argument("--shuffles", type=int, default=settings['shuffle_iterations'],
                        help="Number of shuffle passes per deck")
    parser.add_argument("--rounds", type=int, default=1, help="Number of games to play")
    parser.add_argument("--auto", action="store_true", help="Let the computer make the decisions")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=getattr(logging, settings['log_level'], logging.INFO))

    if args.no_color or not settings['color']:
        Colors.disable()

    if args.shuffles < 1 or args.rounds < 1:
        parser.error("--shuffles and --rounds must be at least 1")

    settings['seed'] = args.seed
    print(format_banner(settings))

    try:
        tally = asyncio.run(play_games(args.rounds, args.auto, args.seed, args.shuffles))
    except (KeyboardInterrupt, EOFError):
        print("\n👋 Goodbye!")
        return 0
    except DeckExhaustedError as e:
        print(f"❌ Error: {e}")
        return 1

    if args.rounds > 1:
        print(format_tally(tally))
    return 0


if __name__ == "__main__":
    sys.exit(main())
