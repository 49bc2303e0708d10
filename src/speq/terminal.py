"""Terminal shell: curses lifecycle and the render/input loop.

``curses.wrapper`` owns terminal setup and guarantees the terminal is
restored on every exit path, including exceptions raised inside the loop.
The loop alternates one draw with one bounded wait for input; a quit command
ends it.
"""

from __future__ import annotations

import curses
import logging
from typing import Any

from speq.app import App
from speq.keys import KeyMap
from speq.ui import Renderer

__all__ = ["key_name", "run"]

logger = logging.getLogger(__name__)


def key_name(key: str | int) -> str:
    """Normalize a ``get_wch()`` result to a KeyMap key name.

    Characters are returned as-is; special key codes become their curses
    name, e.g. ``curses.KEY_UP`` -> ``"KEY_UP"``.
    """
    if isinstance(key, str):
        return key
    return curses.keyname(key).decode("ascii", errors="replace")


def _loop(screen: Any, app: App) -> None:
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("terminal cannot hide the cursor")
    screen.keypad(True)
    screen.timeout(app.config.poll_interval_ms)

    renderer = Renderer()
    keys = KeyMap()
    while not app.should_quit:
        renderer.draw(screen, app)
        try:
            key = screen.get_wch()
        except curses.error:
            # no input within the poll interval
            continue
        command = keys.feed(key_name(key))
        if command is not None:
            logger.debug("command %s", command)
            app.dispatch(command)


def run(app: App) -> None:
    """Run an interactive session until the user quits."""
    logger.debug("starting session for %r", app.spec.title)
    curses.wrapper(_loop, app)
    logger.debug("session ended")
