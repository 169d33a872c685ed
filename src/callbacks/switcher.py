"""
src/callbacks/switcher.py — language switcher dropdown open/close.

The switcher markup is re-rendered from the state machine on every event;
an option click also posts a language request for the page callback.
"""
from __future__ import annotations

from dash import ALL, Input, Output, State, ctx, no_update
from dash.exceptions import PreventUpdate

from config.settings import settings
from src.i18n.models import LanguageCode
from src.i18n.switcher import OPEN_CLASS, SwitcherController, SwitcherEvent, SwitcherState
from src.layout.components.language_switcher import (
    OPTION_TYPE,
    SWITCHER_ID,
    TOGGLE_ID,
    language_switcher,
)
from src.layout.main import (
    BACKDROP_ID,
    ESCAPE_TRIGGER_ID,
    FOCUS_STORE_ID,
    LANG_REQUEST_STORE_ID,
    LANG_STORE_ID,
)

# Runs after the switcher markup is replaced, so the new toggle gets focus
FOCUS_TOGGLE_JS = """
function(request) {
    if (!request || !request.target) {
        return window.dash_clientside.no_update;
    }
    window.requestAnimationFrame(function() {
        var toggle = document.getElementById(request.target);
        if (toggle) {
            toggle.focus();
        }
    });
    return request.nonce;
}
"""

_EVENTS = {
    TOGGLE_ID: SwitcherEvent.TOGGLE,
    BACKDROP_ID: SwitcherEvent.OUTSIDE_CLICK,
    ESCAPE_TRIGGER_ID: SwitcherEvent.ESCAPE,
}


def event_for(trigger) -> SwitcherEvent | None:
    if isinstance(trigger, dict):
        return SwitcherEvent.SELECT if trigger.get("type") == OPTION_TYPE else None
    return _EVENTS.get(trigger)


def current_state(class_name: str | None) -> SwitcherState:
    return SwitcherState.OPEN if OPEN_CLASS in (class_name or "").split() else SwitcherState.CLOSED


def render_switcher(language: str | None, class_name: str | None, trigger):
    """
    Apply the event behind ``trigger`` to freshly rendered switcher markup.

    Returns:
        (switcher markup, controller, requested language or None)
    """
    language = (LanguageCode.parse(language) or LanguageCode(settings.DEFAULT_LANG)).value
    requested: list[str] = []

    markup = language_switcher(language)
    controller = SwitcherController(markup, on_select=requested.append, state=current_state(class_name))
    controller.refresh(language)

    event = event_for(trigger)
    if event is SwitcherEvent.SELECT:
        controller.select(trigger.get("lang"))
    elif event is not None:
        controller.handle(event)

    return markup, controller, (requested[-1] if requested else None)


def focus_request(controller: SwitcherController, nonce) -> dict | None:
    """Payload for the client-side focus hook, or None when focus stays put."""
    if not controller.focus_requested:
        return None
    return {"target": TOGGLE_ID, "nonce": nonce}


def register(app) -> None:
    """Register language switcher callbacks."""

    @app.callback(
        Output("language-switcher-slot", "children"),
        Output(BACKDROP_ID, "hidden"),
        Output(LANG_REQUEST_STORE_ID, "data"),
        Output(FOCUS_STORE_ID, "data"),
        Input(TOGGLE_ID, "n_clicks"),
        Input({"type": OPTION_TYPE, "lang": ALL}, "n_clicks"),
        Input(BACKDROP_ID, "n_clicks"),
        Input(ESCAPE_TRIGGER_ID, "n_clicks"),
        State(SWITCHER_ID, "className"),
        State(LANG_STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def update_switcher(toggle_clicks, option_clicks, backdrop_clicks, escape_clicks, class_name, language):
        # Freshly inserted markup fires with n_clicks 0/None; only real clicks count
        if not ctx.triggered or not ctx.triggered[0]["value"]:
            raise PreventUpdate

        markup, controller, requested = render_switcher(language, class_name, ctx.triggered_id)
        request = {"language": requested} if requested else no_update
        focus = focus_request(controller, escape_clicks) or no_update
        return markup, controller.state is SwitcherState.CLOSED, request, focus

    app.clientside_callback(
        FOCUS_TOGGLE_JS,
        Output("store-switcher-focused", "data"),
        Input(FOCUS_STORE_ID, "data"),
    )
