"""Tests for ViewerConfig validation."""

from __future__ import annotations

import dataclasses

import pytest

from speq.config import ViewerConfig


class TestDefaults:
    def test_values(self) -> None:
        config = ViewerConfig()
        assert config.poll_interval_ms == 16
        assert config.scroll_step == 5
        assert config.tree_pane_percent == 35
        assert config.indent_width == 2

    def test_frozen(self) -> None:
        config = ViewerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.scroll_step = 10  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"poll_interval_ms": 0}, "poll_interval_ms"),
            ({"scroll_step": -1}, "scroll_step"),
            ({"tree_pane_percent": 5}, "tree_pane_percent"),
            ({"tree_pane_percent": 95}, "tree_pane_percent"),
            ({"indent_width": 0}, "indent_width"),
        ],
    )
    def test_rejects_invalid(self, kwargs: dict[str, int], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            ViewerConfig(**kwargs)

    def test_bounds_inclusive(self) -> None:
        ViewerConfig(tree_pane_percent=10)
        ViewerConfig(tree_pane_percent=90)
