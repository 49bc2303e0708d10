"""Tests for App: command dispatch, pane focus and detail scrolling."""

from __future__ import annotations

import pytest

from speq.app import App, Command, Pane
from speq.config import ViewerConfig
from speq.spec import LoadedSpec
from speq.tree.navigator import TreeNavigator


@pytest.fixture
def app(petstore: LoadedSpec) -> App:
    return App.from_spec(petstore, ViewerConfig(scroll_step=3))


class TestFromSpec:
    def test_builds_sorted_roots(self, app: App) -> None:
        assert [r.name for r in app.tree.roots] == ["Error", "NewPet", "Pet", "Pets"]

    def test_initial_state(self, app: App) -> None:
        assert app.focused_pane is Pane.TREE
        assert app.detail_scroll == 0
        assert app.should_quit is False

    def test_default_config(self, petstore: LoadedSpec) -> None:
        app = App(petstore, TreeNavigator([]))
        assert app.config == ViewerConfig()


class TestDispatch:
    def test_every_command_has_a_handler(self, app: App) -> None:
        for command in Command:
            app.dispatch(command)
        assert app.should_quit is True

    def test_navigation(self, app: App) -> None:
        app.dispatch(Command.MOVE_DOWN)
        assert app.tree.cursor == 1
        app.dispatch(Command.GOTO_BOTTOM)
        assert app.tree.cursor == 3
        app.dispatch(Command.MOVE_UP)
        assert app.tree.cursor == 2
        app.dispatch(Command.GOTO_TOP)
        assert app.tree.cursor == 0

    def test_expand_collapse(self, app: App) -> None:
        app.dispatch(Command.TOGGLE)
        assert app.tree.visible_count() == 6
        app.dispatch(Command.COLLAPSE)
        assert app.tree.visible_count() == 4
        app.dispatch(Command.EXPAND)
        assert app.tree.visible_count() == 6
        app.dispatch(Command.EXPAND_ALL)
        assert app.tree.visible_count() == 12
        app.dispatch(Command.COLLAPSE_ALL)
        assert app.tree.visible_count() == 4

    def test_quit(self, app: App) -> None:
        app.dispatch(Command.QUIT)
        assert app.should_quit is True


class TestPane:
    def test_toggle_pane(self, app: App) -> None:
        app.toggle_pane()
        assert app.focused_pane is Pane.DETAIL
        app.toggle_pane()
        assert app.focused_pane is Pane.TREE


class TestDetailScroll:
    def test_scroll_by_configured_step(self, app: App) -> None:
        app.scroll_detail_down()
        app.scroll_detail_down()
        assert app.detail_scroll == 6
        app.scroll_detail_up()
        assert app.detail_scroll == 3

    def test_scroll_up_stops_at_zero(self, app: App) -> None:
        app.scroll_detail_down()
        app.scroll_detail_up()
        app.scroll_detail_up()
        assert app.detail_scroll == 0

    @pytest.mark.parametrize(
        "command",
        [
            Command.MOVE_UP,
            Command.MOVE_DOWN,
            Command.GOTO_TOP,
            Command.GOTO_BOTTOM,
            Command.TOGGLE,
            Command.EXPAND,
            Command.COLLAPSE,
            Command.EXPAND_ALL,
            Command.COLLAPSE_ALL,
        ],
    )
    def test_navigation_resets_scroll(self, app: App, command: Command) -> None:
        app.scroll_detail_down()
        app.dispatch(command)
        assert app.detail_scroll == 0

    def test_pane_switch_keeps_scroll(self, app: App) -> None:
        app.scroll_detail_down()
        app.dispatch(Command.TOGGLE_PANE)
        assert app.detail_scroll == 3
