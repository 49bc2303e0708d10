"""Curses rendering of the browser: header, tree pane, detail pane, status bar.

The Renderer only reads application state, with one exception: the detail
scroll offset is clamped to the length of the selected node's content, so
scrolling back up starts moving immediately after overshooting the end.

Layout::

    +------------------------------------------------+
    | speq  title · version                          |  header
    +--------------+---------------------------------+
    | Schemas (N)  | Detail                          |  body
    +--------------+---------------------------------+
    | key hints                                      |  status bar
    +------------------------------------------------+
"""

from __future__ import annotations

import curses
from typing import Any

from speq.app import App, Pane
from speq.ui.detail import DetailCache, DetailLine, Style
from speq.ui.statusbar import BADGE, HINTS, header_text
from speq.ui.tree_list import row_text, visible_window

__all__ = ["Renderer"]

_PAIR_ACCENT = 1
_PAIR_REQUIRED = 2
_PAIR_BADGE = 3


def _init_colors() -> bool:
    if not curses.has_colors():
        return False
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    curses.init_pair(_PAIR_ACCENT, curses.COLOR_CYAN, background)
    curses.init_pair(_PAIR_REQUIRED, curses.COLOR_YELLOW, background)
    curses.init_pair(_PAIR_BADGE, curses.COLOR_BLACK, curses.COLOR_CYAN)
    return True


def _put(win: Any, y: int, x: int, text: str, width: int, attr: int = 0) -> None:
    if width <= 0:
        return
    try:
        win.addnstr(y, x, text, width, attr)
    except curses.error:
        # writing the bottom-right cell moves the cursor off-window
        pass


class Renderer:
    """Draws one frame of an App onto a curses screen.

    Must be created after curses has been initialised (colours are set up
    in the constructor). Keeps the tree pane's scroll offset and the detail
    line cache between frames.
    """

    def __init__(self) -> None:
        colors = _init_colors()
        accent = curses.color_pair(_PAIR_ACCENT) if colors else curses.A_BOLD
        self._badge = (
            curses.color_pair(_PAIR_BADGE) | curses.A_BOLD
            if colors
            else curses.A_REVERSE
        )
        self._focused = accent
        self._unfocused = curses.A_DIM
        self._styles: dict[Style, int] = {
            Style.PLAIN: curses.A_NORMAL,
            Style.TITLE: curses.A_BOLD,
            Style.TYPE: accent,
            Style.LABEL: curses.A_DIM,
            Style.VALUE: curses.A_NORMAL,
            Style.REQUIRED: (
                curses.color_pair(_PAIR_REQUIRED) if colors else curses.A_BOLD
            ),
            Style.MUTED: curses.A_DIM,
        }
        self._details = DetailCache()
        self._tree_offset = 0

    def draw(self, screen: Any, app: App) -> None:
        screen.erase()
        height, width = screen.getmaxyx()
        if height < 5 or width < 20:
            _put(screen, 0, 0, "terminal too small", width)
            screen.refresh()
            return

        _put(screen, 0, 0, BADGE, width, self._badge)
        _put(screen, 0, len(BADGE), header_text(app.spec), width - len(BADGE))

        body_height = height - 2
        tree_width = max(width * app.config.tree_pane_percent // 100, 10)
        self._draw_tree(screen, app, 1, 0, body_height, tree_width)
        self._draw_detail(
            screen, app, 1, tree_width, body_height, width - tree_width
        )

        _put(screen, height - 1, 0, HINTS, width - 1, curses.A_DIM)
        screen.refresh()

    # ------------------------------------------------------------------
    # Panes
    # ------------------------------------------------------------------

    def _box(
        self, screen: Any, y: int, x: int, h: int, w: int, title: str, focused: bool
    ) -> Any:
        win = screen.derwin(h, w, y, x)
        border = self._focused if focused else self._unfocused
        win.attron(border)
        win.box()
        win.attroff(border)
        _put(win, 0, 2, title, w - 4, border | (curses.A_BOLD if focused else 0))
        return win

    def _draw_tree(
        self, screen: Any, app: App, y: int, x: int, h: int, w: int
    ) -> None:
        title = f" Schemas ({len(app.spec.schema_names)}) "
        win = self._box(screen, y, x, h, w, title, app.focused_pane is Pane.TREE)

        rows = app.tree.flatten()
        inner_h, inner_w = h - 2, w - 2
        cursor = app.tree.cursor
        self._tree_offset = visible_window(
            cursor, self._tree_offset, len(rows), inner_h
        )
        for line, index in enumerate(
            range(self._tree_offset, min(self._tree_offset + inner_h, len(rows)))
        ):
            text = row_text(rows[index], app.config.indent_width)
            attr = curses.A_REVERSE | curses.A_BOLD if index == cursor else 0
            _put(win, line + 1, 1, text.ljust(inner_w), inner_w, attr)

    def _draw_detail(
        self, screen: Any, app: App, y: int, x: int, h: int, w: int
    ) -> None:
        win = self._box(
            screen, y, x, h, w, " Detail ", app.focused_pane is Pane.DETAIL
        )
        inner_h, inner_w = h - 2, w - 2

        node = app.tree.selected_node()
        if node is None:
            _put(win, 1, 1, "  No schema selected.", inner_w, curses.A_DIM)
            return

        lines = self._details.lines_for(node)
        app.detail_scroll = min(app.detail_scroll, max(len(lines) - inner_h, 0))
        for row, line in enumerate(
            lines[app.detail_scroll : app.detail_scroll + inner_h]
        ):
            self._draw_line(win, row + 1, 1, line, inner_w)

    def _draw_line(
        self, win: Any, y: int, x: int, line: DetailLine, width: int
    ) -> None:
        col = 0
        for span in line:
            if col >= width:
                break
            _put(win, y, x + col, span.text, width - col, self._styles[span.style])
            col += len(span.text)
