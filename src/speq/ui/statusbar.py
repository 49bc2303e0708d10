"""Header and status bar text."""

from __future__ import annotations

from speq.spec import LoadedSpec

__all__ = ["HINTS", "header_text"]

BADGE = " speq "

HINTS = (
    " j/k navigate  ·  gg/G top/bottom  ·  l toggle  ·  h collapse"
    "  ·  zR/zM expand/collapse all  ·  Tab switch pane"
    "  ·  ^d/^u scroll  ·  q quit"
)


def header_text(spec: LoadedSpec) -> str:
    """Return the header text shown after the badge."""
    return f"  {spec.title}  ·  {spec.version.label()}"
