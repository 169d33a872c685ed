"""
tests/test_callbacks.py
────────────────────────
Tests for the Dash callback helpers (no browser needed).
"""
import pytest

from src.callbacks.language import render_page
from src.callbacks.switcher import current_state, event_for, focus_request, render_switcher
from src.i18n.document import walk
from src.i18n.switcher import SwitcherEvent, SwitcherState

STORAGE_KEY = "essentialoils_language"


class TestRenderPage:
    def test_first_visit(self):
        session, events = render_page(None, locale_tag="de-CH")
        assert session.get_language() == "de"
        assert [e.language.value for e in events] == ["de"]
        assert session.storage.to_dict() == {STORAGE_KEY: "de"}

    def test_returning_visitor(self):
        session, _ = render_page({STORAGE_KEY: "ro"}, locale_tag="en-US")
        assert session.get_language() == "ro"
        assert session.document.lang == "ro"

    def test_requested_switch(self):
        session, events = render_page({STORAGE_KEY: "en"}, requested="es")
        assert session.get_language() == "es"
        assert [e.model_dump(mode="json") for e in events] == [{"language": "es"}]
        assert session.storage.to_dict() == {STORAGE_KEY: "es"}
        assert session.switcher.state is SwitcherState.CLOSED

    def test_request_for_active_language_emits_nothing(self):
        session, events = render_page({STORAGE_KEY: "fr"}, requested="fr")
        assert session.get_language() == "fr"
        assert events == []

    def test_unsupported_request_emits_nothing(self):
        session, events = render_page({STORAGE_KEY: "it"}, requested="xx")
        assert session.get_language() == "it"
        assert events == []

    def test_input_preference_not_mutated(self):
        preference = {STORAGE_KEY: "en"}
        render_page(preference, requested="de")
        assert preference == {STORAGE_KEY: "en"}

    def test_subscribe_placeholder_translated(self):
        session, _ = render_page(None, locale_tag="de-CH")
        email = next(c for c in walk(session.document.body) if getattr(c, "id", None) == "subscribe-email")
        assert email.placeholder == "Deine E-Mail-Adresse"

    def test_single_active_option_after_switch(self):
        session, _ = render_page({STORAGE_KEY: "en"}, requested="ro")
        active = [
            getattr(c, "data-lang")
            for c in walk(session.document.body)
            if getattr(c, "data-lang", None) and "is-active" in (c.className or "").split()
        ]
        assert active == ["ro"]


class TestSwitcherCallback:
    @pytest.mark.parametrize("trigger, expected", [
        ("language-switcher-toggle", SwitcherEvent.TOGGLE),
        ("language-switcher-backdrop", SwitcherEvent.OUTSIDE_CLICK),
        ("language-switcher-escape", SwitcherEvent.ESCAPE),
        ({"type": "language-option", "lang": "de"}, SwitcherEvent.SELECT),
        ("something-else", None),
        ({"type": "other"}, None),
    ])
    def test_event_for(self, trigger, expected):
        assert event_for(trigger) is expected

    def test_current_state(self):
        assert current_state("language-switcher is-open") is SwitcherState.OPEN
        assert current_state("language-switcher") is SwitcherState.CLOSED
        assert current_state(None) is SwitcherState.CLOSED

    def test_toggle_opens(self):
        markup, controller, requested = render_switcher("de", "language-switcher", "language-switcher-toggle")
        assert controller.state is SwitcherState.OPEN
        assert "is-open" in markup.className.split()
        assert requested is None
        assert controller.current_label.children == "🇩🇪 Deutsch"

    def test_backdrop_closes(self):
        _, controller, _ = render_switcher("de", "language-switcher is-open", "language-switcher-backdrop")
        assert controller.state is SwitcherState.CLOSED

    def test_option_requests_language(self):
        trigger = {"type": "language-option", "lang": "it"}
        markup, controller, requested = render_switcher("en", "language-switcher is-open", trigger)
        assert requested == "it"
        assert controller.state is SwitcherState.CLOSED
        assert "is-open" not in markup.className.split()

    def test_unknown_language_shows_default(self):
        _, controller, _ = render_switcher(None, None, "language-switcher-toggle")
        assert controller.current_label.children == "🇬🇧 English"

    def test_escape_requests_toggle_focus(self):
        _, controller, _ = render_switcher("de", "language-switcher is-open", "language-switcher-escape")
        assert controller.state is SwitcherState.CLOSED
        assert focus_request(controller, 3) == {"target": "language-switcher-toggle", "nonce": 3}

    @pytest.mark.parametrize("trigger", [
        "language-switcher-toggle",
        "language-switcher-backdrop",
        {"type": "language-option", "lang": "fr"},
    ])
    def test_other_events_leave_focus(self, trigger):
        _, controller, _ = render_switcher("de", "language-switcher is-open", trigger)
        assert focus_request(controller, 1) is None
