"""
src/layout/components/language_switcher.py
───────────────────────────────────────────
Language switcher dropdown markup.

Structure and class names are what src.i18n.switcher looks for; options are
pattern-matching buttons so one callback handles all of them.
"""
from dash import html

from config.languages import LANGUAGE_NAMES, SUPPORTED_LANGUAGES
from config.settings import settings
from src.i18n.switcher import (
    CURRENT_CLASS,
    DROPDOWN_CLASS,
    LANG_ATTRIBUTE,
    ROOT_CLASS,
    TOGGLE_CLASS,
)

SWITCHER_ID = "language-switcher"
TOGGLE_ID = "language-switcher-toggle"
OPTION_TYPE = "language-option"


def option_id(code: str) -> dict[str, str]:
    return {"type": OPTION_TYPE, "lang": code}


def language_switcher(language: str = settings.DEFAULT_LANG) -> html.Div:
    """Closed dropdown showing ``language`` as the current choice."""
    options = [
        html.Button(
            LANGUAGE_NAMES[code],
            id=option_id(code),
            n_clicks=0,
            className="language-switcher__option",
            role="option",
            **{LANG_ATTRIBUTE: code},
        )
        for code in SUPPORTED_LANGUAGES
    ]

    return html.Div(
        [
            html.Button(
                [
                    html.Span(LANGUAGE_NAMES.get(language, language), className=CURRENT_CLASS),
                    html.Span("▾", className="language-switcher__caret"),
                ],
                id=TOGGLE_ID,
                n_clicks=0,
                className=TOGGLE_CLASS,
                **{"aria-expanded": "false", "aria-haspopup": "listbox", "aria-label": "Language"},
            ),
            html.Div(options, className=DROPDOWN_CLASS, role="listbox"),
        ],
        id=SWITCHER_ID,
        className=ROOT_CLASS,
    )
