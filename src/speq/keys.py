"""KeyMap: vim-style key bindings for the browser.

Keys are identified by name: printable characters as themselves, control
characters as their raw value (e.g. ``"\\x04"`` for Ctrl-D), and special keys
by their curses name (e.g. ``"KEY_UP"``). Two-key sequences (``gg``, ``zo``,
``zc``, ``zR``, ``zM``) are resolved by remembering the first key; when the
second key does not complete a sequence it is handled as a single key.
"""

from __future__ import annotations

from speq.app import Command

__all__ = ["KeyMap"]

CTRL_C = "\x03"
CTRL_D = "\x04"
CTRL_U = "\x15"

_SEQUENCES: dict[tuple[str, str], Command] = {
    ("g", "g"): Command.GOTO_TOP,
    ("z", "o"): Command.EXPAND,
    ("z", "c"): Command.COLLAPSE,
    ("z", "R"): Command.EXPAND_ALL,
    ("z", "M"): Command.COLLAPSE_ALL,
}

_PREFIXES = frozenset(first for first, _ in _SEQUENCES)

_SINGLE: dict[str, Command] = {
    "q": Command.QUIT,
    CTRL_C: Command.QUIT,
    "j": Command.MOVE_DOWN,
    "KEY_DOWN": Command.MOVE_DOWN,
    "k": Command.MOVE_UP,
    "KEY_UP": Command.MOVE_UP,
    "G": Command.GOTO_BOTTOM,
    "l": Command.TOGGLE,
    "\n": Command.TOGGLE,
    "KEY_ENTER": Command.TOGGLE,
    "h": Command.COLLAPSE,
    "\t": Command.TOGGLE_PANE,
    CTRL_D: Command.SCROLL_DOWN,
    CTRL_U: Command.SCROLL_UP,
}


class KeyMap:
    """Translates a stream of key names into Commands.

    Example::

        keys = KeyMap()
        keys.feed("g")   # None, waiting for the second key
        keys.feed("g")   # Command.GOTO_TOP
    """

    def __init__(self) -> None:
        self.pending: str | None = None

    def feed(self, key: str) -> Command | None:
        """Consume one key and return the Command it completes, if any."""
        pending, self.pending = self.pending, None
        if pending is not None:
            command = _SEQUENCES.get((pending, key))
            if command is not None:
                return command

        if key in _PREFIXES:
            self.pending = key
            return None
        return _SINGLE.get(key)
