"""ViewerConfig: tunable parameters of the terminal browser.

ViewerConfig is a frozen (immutable) dataclass validated at construction.
It governs the shell and the application state only; the tree builder and
navigator take no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ViewerConfig"]


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Immutable configuration for the browsing session.

    Attributes:
        poll_interval_ms: How long the input step waits for a key before
            returning control to the render step (> 0).
        scroll_step: Lines the detail panel scrolls per command (> 0).
        tree_pane_percent: Width of the tree pane as a percentage of the
            screen, in [10, 90].  The detail pane takes the rest.
        indent_width: Columns of indentation per tree depth level (> 0).
    """

    poll_interval_ms: int = 16
    scroll_step: int = 5
    tree_pane_percent: int = 35
    indent_width: int = 2

    def __post_init__(self) -> None:
        if self.poll_interval_ms <= 0:
            msg = f"poll_interval_ms must be > 0, got {self.poll_interval_ms}"
            raise ValueError(msg)
        if self.scroll_step <= 0:
            msg = f"scroll_step must be > 0, got {self.scroll_step}"
            raise ValueError(msg)
        if not 10 <= self.tree_pane_percent <= 90:
            msg = f"tree_pane_percent must be in [10, 90], got {self.tree_pane_percent}"
            raise ValueError(msg)
        if self.indent_width <= 0:
            msg = f"indent_width must be > 0, got {self.indent_width}"
            raise ValueError(msg)
