"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Store for the persisted language preference (localStorage)
  - dcc.Store for the active language, head payload and change events
  - dcc.Location for the initial page load
  - Backdrop and escape trigger used to dismiss the language switcher,
    and a focus request store for returning focus to its toggle
  - Page content container, filled with the translated page by callback
"""
from dash import dcc, html

from config.site import META_TAGS, PAGE_TITLE
from src.i18n.document import Document
from src.i18n.models import MetaTag
from src.layout.footer import create_footer
from src.layout.navbar import create_navbar
from src.pages import home

PREFERENCE_STORE_ID = "store-preference"
LANG_STORE_ID = "store-lang"
LANG_REQUEST_STORE_ID = "store-lang-request"
LANG_EVENT_STORE_ID = "store-language-changed"
HEAD_STORE_ID = "store-head"
BACKDROP_ID = "language-switcher-backdrop"
ESCAPE_TRIGGER_ID = "language-switcher-escape"
FOCUS_STORE_ID = "store-switcher-focus"


def create_page() -> html.Div:
    """Untranslated page markup: navbar, landing page sections, footer."""
    return html.Div([create_navbar(), home.layout(), create_footer()], id="page")


def create_document() -> Document:
    """Fresh page document, ready to be bound to a language."""
    return Document(
        body=create_page(),
        title=PAGE_TITLE,
        meta=[MetaTag(**tag) for tag in META_TAGS],
    )


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Client-side state stores ──────────────────────────────────────
            dcc.Store(id=PREFERENCE_STORE_ID, storage_type="local"),
            dcc.Store(id=LANG_STORE_ID),
            dcc.Store(id=LANG_REQUEST_STORE_ID),
            dcc.Store(id=LANG_EVENT_STORE_ID),
            dcc.Store(id=HEAD_STORE_ID),
            dcc.Store(id="store-head-applied"),
            dcc.Store(id=FOCUS_STORE_ID),
            dcc.Store(id="store-switcher-focused"),

            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Switcher dismissal ────────────────────────────────────────────
            # Full-screen click catcher, visible only while the dropdown is open
            html.Div(id=BACKDROP_ID, n_clicks=0, hidden=True, className="language-switcher__backdrop"),
            # Clicked by assets/language_switcher.js on Escape
            html.Button(id=ESCAPE_TRIGGER_ID, n_clicks=0, hidden=True),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "100vh"},
            ),
        ],
        style={"backgroundColor": "#141c17", "minHeight": "100vh", "color": "#e6ede8"},
    )
