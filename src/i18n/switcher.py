"""
src/i18n/switcher.py
────────────────────
Language switcher dropdown: a two-state machine plus the controller that
mirrors it onto the switcher markup.

States:  closed (initial) ⇄ open
Events:  toggle          closed → open, open → closed
         select          → closed (after switching language)
         outside_click   → closed
         escape          → closed, focus returns to the toggle

Markup is located by structural class names:
    .language-switcher               root, gets "is-open" while open
    .language-switcher__toggle       button, carries aria-expanded
    .language-switcher__current      label with the active language name
    .language-switcher__dropdown     option list; options carry data-lang
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from config.languages import LANGUAGE_NAMES
from src.i18n.document import find_by_class, find_all_with_prop, get_prop, set_class, set_prop

logger = logging.getLogger(__name__)

ROOT_CLASS = "language-switcher"
TOGGLE_CLASS = "language-switcher__toggle"
CURRENT_CLASS = "language-switcher__current"
DROPDOWN_CLASS = "language-switcher__dropdown"
OPEN_CLASS = "is-open"
ACTIVE_CLASS = "is-active"
LANG_ATTRIBUTE = "data-lang"


class SwitcherState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class SwitcherEvent(str, Enum):
    TOGGLE = "toggle"
    SELECT = "select"
    OUTSIDE_CLICK = "outside_click"
    ESCAPE = "escape"


@dataclass(frozen=True)
class Transition:
    state: SwitcherState
    aria_expanded: bool
    focus_toggle: bool = False


def transition(state: SwitcherState, event: SwitcherEvent) -> Transition:
    if event is SwitcherEvent.TOGGLE and state is SwitcherState.CLOSED:
        new_state = SwitcherState.OPEN
    else:
        new_state = SwitcherState.CLOSED
    return Transition(
        state=new_state,
        aria_expanded=new_state is SwitcherState.OPEN,
        focus_toggle=event is SwitcherEvent.ESCAPE,
    )


def aria_flag(expanded: bool) -> str:
    return "true" if expanded else "false"


class SwitcherController:
    """
    Drives the switcher markup found under ``root``.

    Every operation is a silent no-op when the markup is absent.
    """

    def __init__(
        self,
        root,
        on_select: Callable[[str], None] | None = None,
        state: SwitcherState = SwitcherState.CLOSED,
    ):
        self.container = find_by_class(root, ROOT_CLASS)
        self.toggle_button = find_by_class(self.container, TOGGLE_CLASS)
        self.dropdown = find_by_class(self.container, DROPDOWN_CLASS)
        self.current_label = find_by_class(root, CURRENT_CLASS)
        self.on_select = on_select
        self.state = state
        self.focus_requested = False

    @property
    def is_wired(self) -> bool:
        return all(c is not None for c in (self.container, self.toggle_button, self.dropdown))

    @property
    def options(self) -> list:
        return find_all_with_prop(self.dropdown, LANG_ATTRIBUTE)

    # ── Events ────────────────────────────────────────────────────────────────
    def handle(self, event: SwitcherEvent) -> Transition | None:
        if not self.is_wired:
            return None
        result = transition(self.state, event)
        self.state = result.state
        self.focus_requested = result.focus_toggle
        set_class(self.container, OPEN_CLASS, result.state is SwitcherState.OPEN)
        set_prop(self.toggle_button, "aria-expanded", aria_flag(result.aria_expanded))
        return result

    def toggle(self) -> Transition | None:
        return self.handle(SwitcherEvent.TOGGLE)

    def click_outside(self) -> Transition | None:
        return self.handle(SwitcherEvent.OUTSIDE_CLICK)

    def escape(self) -> Transition | None:
        return self.handle(SwitcherEvent.ESCAPE)

    def select(self, code: str) -> Transition | None:
        if not self.is_wired or not code:
            return None
        logger.debug("Language option selected: %s", code)
        if self.on_select is not None:
            self.on_select(code)
        return self.handle(SwitcherEvent.SELECT)

    # ── Refresh ───────────────────────────────────────────────────────────────
    def refresh(self, language: str) -> None:
        """Show the active language's name and mark exactly its option active."""
        if self.current_label is not None:
            set_prop(self.current_label, "children", LANGUAGE_NAMES.get(language, language))
        if self.dropdown is None:
            return
        for option in self.options:
            set_class(option, ACTIVE_CLASS, get_prop(option, LANG_ATTRIBUTE) == language)
