"""Single-keypress reader for the workbench screens.

Arrow keys and letter shortcuts are read without waiting for Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "randomize",
    "R": "randomize",
    "m": "direction",
    "M": "direction",
    "a": "algorithm",
    "A": "algorithm",
    "c": "compare",
    "C": "compare",
    "e": "edit",
    "E": "edit",
    "k": "rooms",
    "K": "rooms",
    "v": "solve",
    "V": "solve",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "left", "right"                - remove / add a column
        "up", "down", "+", "-"         - close more / fewer rooms
        "randomize"                    - r
        "direction"                    - m (maximize ↔ minimize)
        "algorithm"                    - a (dynamic ↔ backtracking)
        "compare"                      - c (run both algorithms)
        "edit"                         - e (type the room values)
        "rooms"                        - k (type the room count)
        "solve", "enter"               - v / Enter
        "quit"                         - q / Ctrl-C / Escape
        "<char>"                       - unmapped printable char
        ""                             - unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)
