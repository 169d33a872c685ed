"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the i18n test suite.
"""
import os

import pytest
from dash import dcc, html

os.environ.setdefault("DEFAULT_LANG", "en")
os.environ.setdefault("STORAGE_KEY", "essentialoils_language")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

STORAGE_KEY = "essentialoils_language"


@pytest.fixture(scope="session")
def dictionary():
    """The shipped six-language dictionary."""
    from src.i18n.dictionary import TranslationDictionary
    return TranslationDictionary.from_directory()


@pytest.fixture
def small_dictionary():
    """Two hand-written trees, including an empty leaf and a line break."""
    from src.i18n.dictionary import TranslationDictionary
    return TranslationDictionary(
        {
            "en": {
                "meta": {"title": "Oils", "description": "All about oils", "ogTitle": "Oils OG"},
                "nav": {"home": "Home", "faq": "FAQ"},
                "hero": {"headline": "Feel<br>better", "empty": ""},
                "img": {"alt": "A bottle"},
                "links": {"terms": "/en/terms"},
                "form": {"email": "Your email"},
            },
            "de": {
                "meta": {"title": "Öle", "description": "Alles über Öle", "ogTitle": "Öle OG"},
                "nav": {"home": "Start", "faq": "FAQ"},
                "hero": {"headline": "Fühl dich<br>besser", "empty": ""},
                "img": {"alt": "Eine Flasche"},
                "links": {"terms": "/de/agb"},
                "form": {"email": "Deine E-Mail"},
            },
        },
        default="en",
    )


@pytest.fixture
def storage():
    from src.i18n.storage import PreferenceStore
    return PreferenceStore({}, key=STORAGE_KEY)


@pytest.fixture
def document():
    """A minimal page: markers, an untranslated element, meta tags and the switcher."""
    from src.i18n.document import Document
    from src.i18n.models import MetaTag
    from src.layout.components.language_switcher import language_switcher

    body = html.Div(
        [
            html.Nav(
                [
                    html.A("Home", id="home-link", href="#home", **{"data-i18n": "nav.home"}),
                    html.A("FAQ", id="faq-link", href="#faq", **{"data-i18n": "nav.faq", "data-i18n-title": "nav.faq"}),
                ]
            ),
            html.H1("Feel better", id="headline", **{"data-i18n": "hero.headline"}),
            html.P("Keep me", id="untranslated", **{"data-i18n": "hero.missing"}),
            html.P("Keep me too", id="empty", **{"data-i18n": "hero.empty"}),
            html.Img(id="bottle", src="/bottle.png", alt="A bottle", **{"data-i18n-alt": "img.alt"}),
            html.A("Terms", id="terms-link", href="/terms", **{"data-i18n-href": "links.terms"}),
            html.A("Privacy", id="privacy-link", href="/privacy", **{"data-i18n-href": "links.privacy"}),
            html.Meta(id="inline-description", content="source inline", **{"data-i18n-content": "meta.description"}),
            html.Meta(id="inline-keywords", content="oils, recipes", **{"data-i18n-content": "meta.keywords"}),
            html.Div(
                dcc.Input(id="email", type="email", placeholder="Email"),
                id="email-field",
                **{"data-i18n-placeholder": "form.email"},
            ),
            html.Div(language_switcher("en"), id="language-switcher-slot"),
        ],
        id="page",
    )
    return Document(
        body=body,
        title="Untranslated title",
        meta=[
            MetaTag(name="description", content="source description"),
            MetaTag(property="og:title", content="source og title"),
            MetaTag(name="viewport", content="width=device-width"),
        ],
    )


def find(root, component_id):
    from src.i18n.document import walk
    for component in walk(root):
        if getattr(component, "id", None) == component_id:
            return component
    raise LookupError(component_id)


@pytest.fixture
def by_id(document):
    return lambda component_id: find(document.body, component_id)
