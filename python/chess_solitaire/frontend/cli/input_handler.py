"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD move the cursor; letters map to puzzle actions.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


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


_ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "n": "hint",
    "v": "solve",
    "r": "reset",
    "l": "load",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROWS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action name, or ``""`` if unbound."""
    return _ACTIONS.get(ch.lower() if ch.isalpha() else ch, "")


def get_action() -> str:
    """Block for one keypress and return its action name.

    One of ``up``, ``down``, ``left``, ``right``, ``select``, ``hint``,
    ``solve``, ``reset``, ``load``, ``quit`` or ``""``.
    """
    ch = _getch()

    # ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROWS.get(_getch(), "")
        return "quit"

    return _resolve(ch)
