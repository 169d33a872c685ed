"""
src/callbacks/language.py — translated page rendering and language switches.

Each request runs one I18n session against a fresh page document: the
session starts from the visitor's persisted preference (localStorage) and
browser locale, exactly like a page load, then applies any requested switch.
"""
from __future__ import annotations

import logging

from dash import Input, Output, State, ctx, no_update

from src.i18n.models import LanguageChanged
from src.i18n.resolver import locale_from_request
from src.i18n.service import I18n
from src.i18n.storage import PreferenceStore
from src.layout.main import (
    HEAD_STORE_ID,
    LANG_EVENT_STORE_ID,
    LANG_REQUEST_STORE_ID,
    LANG_STORE_ID,
    PREFERENCE_STORE_ID,
    create_document,
)

logger = logging.getLogger(__name__)

# Writes the head payload into the live document
APPLY_HEAD_JS = """
function(head) {
    if (!head) {
        return window.dash_clientside.no_update;
    }
    if (head.title) {
        document.title = head.title;
    }
    document.documentElement.lang = head.lang;
    (head.meta || []).forEach(function(tag) {
        var selector = tag.name
            ? 'meta[name="' + tag.name + '"]'
            : 'meta[property="' + tag.property + '"]';
        var element = document.querySelector(selector);
        if (element) {
            element.setAttribute('content', tag.content);
        }
    });
    return head.lang;
}
"""


def render_page(preference: dict | None, requested: str | None = None, locale_tag: str | None = None):
    """
    Run an i18n session and return everything the page needs.

    Returns:
        (session, events) where ``events`` holds the language-changed
        notifications caused by ``requested`` (or by the initial detection
        when nothing was requested).
    """
    session = I18n(
        storage=PreferenceStore(dict(preference or {})),
        document=create_document(),
        locale_tag=locale_tag,
    )
    events: list[LanguageChanged] = []
    session.on_language_changed(events.append)
    session.init()

    if requested:
        del events[:]
        if session.switcher is not None and session.switcher.is_wired:
            session.switcher.select(requested)
        else:
            session.set_language(requested)

    return session, events


def register(app) -> None:
    """Register page rendering + head sync callbacks."""

    @app.callback(
        Output("page-content", "children"),
        Output(PREFERENCE_STORE_ID, "data"),
        Output(LANG_STORE_ID, "data"),
        Output(HEAD_STORE_ID, "data"),
        Output(LANG_EVENT_STORE_ID, "data"),
        Input("url", "pathname"),
        Input(LANG_REQUEST_STORE_ID, "data"),
        State(PREFERENCE_STORE_ID, "data"),
    )
    def update_page(pathname: str, lang_request: dict | None, preference: dict | None):
        requested = None
        if ctx.triggered_id == LANG_REQUEST_STORE_ID and lang_request:
            requested = lang_request.get("language")

        session, events = render_page(preference, requested, locale_from_request())
        document = session.document

        event = events[-1].model_dump(mode="json") if events else no_update
        return (
            document.body,
            session.storage.to_dict(),
            session.get_language(),
            document.head(),
            event,
        )

    app.clientside_callback(
        APPLY_HEAD_JS,
        Output("store-head-applied", "data"),
        Input(HEAD_STORE_ID, "data"),
    )
