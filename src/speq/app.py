"""App: application state for one browsing session.

Composes the document summary, the TreeNavigator over its schema tree, and
UI-only state (focused pane, detail scroll offset, quit flag). Discrete
commands are translated into navigator calls. Every command that can change
the selection or the visible structure resets the detail scroll offset, so
the detail panel always opens at the top for the newly selected node.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, StrEnum, auto

from speq.config import ViewerConfig
from speq.spec import LoadedSpec
from speq.tree import TreeBuilder, TreeNavigator

__all__ = ["App", "Command", "Pane"]


class Pane(Enum):
    """Which pane currently has input focus."""

    TREE = auto()
    DETAIL = auto()


class Command(StrEnum):
    """Discrete user commands, independent of any key binding."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    GOTO_TOP = auto()
    GOTO_BOTTOM = auto()
    TOGGLE = auto()
    EXPAND = auto()
    COLLAPSE = auto()
    EXPAND_ALL = auto()
    COLLAPSE_ALL = auto()
    TOGGLE_PANE = auto()
    SCROLL_DOWN = auto()
    SCROLL_UP = auto()
    QUIT = auto()


class App:
    """Application state driven by Commands.

    Example::

        app = App.from_spec(load_spec("petstore.yaml"))
        app.dispatch(Command.TOGGLE)      # expand the first schema
        app.dispatch(Command.MOVE_DOWN)
        app.tree.selected_node()
    """

    def __init__(
        self,
        spec: LoadedSpec,
        tree: TreeNavigator,
        config: ViewerConfig | None = None,
    ) -> None:
        self.spec = spec
        self.tree = tree
        self.config: ViewerConfig = config if config is not None else ViewerConfig()
        self.focused_pane: Pane = Pane.TREE
        self.detail_scroll: int = 0
        self.should_quit: bool = False
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.MOVE_UP: self.move_up,
            Command.MOVE_DOWN: self.move_down,
            Command.GOTO_TOP: self.goto_top,
            Command.GOTO_BOTTOM: self.goto_bottom,
            Command.TOGGLE: self.toggle_expand,
            Command.EXPAND: self.expand_node,
            Command.COLLAPSE: self.collapse_node,
            Command.EXPAND_ALL: self.expand_all,
            Command.COLLAPSE_ALL: self.collapse_all,
            Command.TOGGLE_PANE: self.toggle_pane,
            Command.SCROLL_DOWN: self.scroll_detail_down,
            Command.SCROLL_UP: self.scroll_detail_up,
            Command.QUIT: self.quit,
        }

    @classmethod
    def from_spec(cls, spec: LoadedSpec, config: ViewerConfig | None = None) -> App:
        """Build the schema tree of ``spec`` and wrap it in a new App."""
        roots = TreeBuilder().build_roots(spec.schemas)
        return cls(spec, TreeNavigator(roots), config)

    def dispatch(self, command: Command) -> None:
        """Run the handler bound to ``command``."""
        self._handlers[command]()

    # ------------------------------------------------------------------
    # Navigation (resets the detail scroll)
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        self.tree.move_up()
        self.detail_scroll = 0

    def move_down(self) -> None:
        self.tree.move_down()
        self.detail_scroll = 0

    def goto_top(self) -> None:
        self.tree.goto_top()
        self.detail_scroll = 0

    def goto_bottom(self) -> None:
        self.tree.goto_bottom()
        self.detail_scroll = 0

    def toggle_expand(self) -> None:
        self.tree.toggle_at_cursor()
        self.detail_scroll = 0

    def expand_node(self) -> None:
        self.tree.expand_at_cursor()
        self.detail_scroll = 0

    def collapse_node(self) -> None:
        self.tree.collapse_at_cursor()
        self.detail_scroll = 0

    def expand_all(self) -> None:
        self.tree.expand_all()
        self.detail_scroll = 0

    def collapse_all(self) -> None:
        self.tree.collapse_all()
        self.detail_scroll = 0

    # ------------------------------------------------------------------
    # UI-only state
    # ------------------------------------------------------------------

    def toggle_pane(self) -> None:
        self.focused_pane = Pane.DETAIL if self.focused_pane is Pane.TREE else Pane.TREE

    def scroll_detail_down(self) -> None:
        self.detail_scroll += self.config.scroll_step

    def scroll_detail_up(self) -> None:
        self.detail_scroll = max(self.detail_scroll - self.config.scroll_step, 0)

    def quit(self) -> None:
        self.should_quit = True
