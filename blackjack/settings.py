"""
Settings for the blackjack simulator.
Values come from the process environment first, then from a .env file.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import dotenv_values

from .ui.colors import Colors
from .version import get_version_info

DEFAULTS = {
    'BLACKJACK_SHUFFLE_ITERATIONS': '10',
    'BLACKJACK_SEED': '',
    'BLACKJACK_COLOR': '1',
    'BLACKJACK_LOG_LEVEL': 'INFO',
}

_FALSE_VALUES = ('0', 'false', 'no', 'off')


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Load key/value pairs from a .env file; missing file gives {}."""
    if not os.path.exists(filepath):
        return {}
    return {key: value for key, value in dotenv_values(filepath).items() if value is not None}


def _lookup(key: str, env_vars: Dict[str, str]) -> str:
    return os.getenv(key) or env_vars.get(key) or DEFAULTS[key]


def get_settings(env_file: str = ".env") -> Dict[str, Any]:
    """Resolve all settings into typed values."""
    env_vars = load_env_file(env_file)

    raw_iterations = _lookup('BLACKJACK_SHUFFLE_ITERATIONS', env_vars)
    try:
        shuffle_iterations = int(raw_iterations)
    except ValueError:
        shuffle_iterations = 0
    if shuffle_iterations < 1:
        logging.warning(f"Invalid BLACKJACK_SHUFFLE_ITERATIONS={raw_iterations!r}, using default")
        shuffle_iterations = int(DEFAULTS['BLACKJACK_SHUFFLE_ITERATIONS'])

    raw_seed = _lookup('BLACKJACK_SEED', env_vars).strip()
    seed: Optional[int] = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            logging.warning(f"Invalid BLACKJACK_SEED={raw_seed!r}, shuffling unpredictably")

    color = _lookup('BLACKJACK_COLOR', env_vars).strip().lower() not in _FALSE_VALUES
    log_level = _lookup('BLACKJACK_LOG_LEVEL', env_vars).strip().upper()

    return {
        'shuffle_iterations': shuffle_iterations,
        'seed': seed,
        'color': color,
        'log_level': log_level,
        **get_version_info(),
    }


def format_banner(settings: Dict[str, Any]) -> str:
    """Format the start-up banner."""
    lines = [
        f"{Colors.BOLD}{Colors.YELLOW}🃏 Blackjack 🃏{Colors.RESET}",
        f"Dealer stands on 17. Press {Colors.BOLD}h{Colors.RESET} to hit, any other key to stand.",
    ]
    if settings.get('seed') is not None:
        lines.append(f"{Colors.DIM}Seed: {settings['seed']}{Colors.RESET}")
    lines.append(f"{Colors.DIM}Version {settings['version']} ({settings['build_date']}){Colors.RESET}")
    return "\n".join(lines)
