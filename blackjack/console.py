"""
Console input for the blackjack simulator.

Reads a single key press for the hit/stand decision. When stdin is a
terminal the key is read raw (no Enter needed); otherwise the first
character of the next line is used.
"""

import asyncio
import sys
from typing import Any, Dict, Optional, TextIO

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

PROMPT = "(h)it or (s)tand? "


def _read_raw_key(stream: TextIO) -> str:
    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
    if key in ('\x03', '\x04'):  # Ctrl-C / Ctrl-D
        raise KeyboardInterrupt
    return key


def read_key(prompt: str = PROMPT, stream: Optional[TextIO] = None,
             out: Optional[TextIO] = None) -> str:
    """Prompt and read one character. Returns '' at end of input."""
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    out.write(prompt)
    out.flush()

    if termios is not None and stream.isatty():
        key = _read_raw_key(stream)
        out.write(key + "\n")
        return key

    line = stream.readline()
    return line.strip()[:1]


async def console_actor(game_state: Dict[str, Any]) -> str:
    # The key read blocks, so it runs in a worker thread off the event loop
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, read_key)
