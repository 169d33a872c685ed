"""
tests/test_switcher.py
───────────────────────
Tests for the language switcher state machine and controller.
"""
import pytest
from dash import html

from src.i18n.document import walk
from src.i18n.switcher import (
    SwitcherController,
    SwitcherEvent,
    SwitcherState,
    transition,
)
from src.layout.components.language_switcher import language_switcher

CLOSED, OPEN = SwitcherState.CLOSED, SwitcherState.OPEN


def active_options(root) -> list[str]:
    return [
        getattr(c, "data-lang")
        for c in walk(root)
        if getattr(c, "data-lang", None) and "is-active" in (c.className or "").split()
    ]


class TestTransition:
    def test_toggle_opens(self):
        result = transition(CLOSED, SwitcherEvent.TOGGLE)
        assert result.state is OPEN
        assert result.aria_expanded is True
        assert result.focus_toggle is False

    def test_toggle_closes(self):
        result = transition(OPEN, SwitcherEvent.TOGGLE)
        assert result.state is CLOSED
        assert result.aria_expanded is False

    @pytest.mark.parametrize("event", [SwitcherEvent.SELECT, SwitcherEvent.OUTSIDE_CLICK, SwitcherEvent.ESCAPE])
    @pytest.mark.parametrize("state", [CLOSED, OPEN])
    def test_dismiss_events_close(self, state, event):
        assert transition(state, event).state is CLOSED

    def test_escape_returns_focus(self):
        assert transition(OPEN, SwitcherEvent.ESCAPE).focus_toggle is True
        assert transition(OPEN, SwitcherEvent.OUTSIDE_CLICK).focus_toggle is False


class TestSwitcherController:
    @pytest.fixture
    def markup(self):
        return language_switcher("en")

    def test_initially_closed(self, markup):
        controller = SwitcherController(markup)
        assert controller.state is CLOSED
        assert controller.is_wired

    def test_toggle_updates_markup(self, markup):
        controller = SwitcherController(markup)
        controller.toggle()
        assert "is-open" in markup.className.split()
        assert getattr(controller.toggle_button, "aria-expanded") == "true"
        controller.toggle()
        assert "is-open" not in markup.className.split()
        assert getattr(controller.toggle_button, "aria-expanded") == "false"

    def test_outside_click_closes(self, markup):
        controller = SwitcherController(markup, state=OPEN)
        controller.click_outside()
        assert controller.state is CLOSED

    def test_escape_closes_and_requests_focus(self, markup):
        controller = SwitcherController(markup, state=OPEN)
        controller.escape()
        assert controller.state is CLOSED
        assert controller.focus_requested

    def test_select_switches_then_closes(self, markup):
        selected = []
        controller = SwitcherController(markup, on_select=selected.append, state=OPEN)
        controller.select("ro")
        assert selected == ["ro"]
        assert controller.state is CLOSED
        assert getattr(controller.toggle_button, "aria-expanded") == "false"

    def test_select_without_code_ignored(self, markup):
        selected = []
        controller = SwitcherController(markup, on_select=selected.append, state=OPEN)
        assert controller.select("") is None
        assert selected == []
        assert controller.state is OPEN

    def test_refresh_marks_exactly_one_option(self, markup):
        controller = SwitcherController(markup)
        controller.refresh("de")
        controller.refresh("ro")
        assert active_options(markup) == ["ro"]
        assert controller.current_label.children == "🇷🇴 Română"

    def test_missing_markup_is_harmless(self):
        controller = SwitcherController(html.Div("no switcher here"))
        assert not controller.is_wired
        assert controller.toggle() is None
        assert controller.escape() is None
        assert controller.select("de") is None
        controller.refresh("de")
        assert controller.state is CLOSED
