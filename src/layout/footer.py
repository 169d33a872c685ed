"""
src/layout/footer.py
─────────────────────
Site footer: about, site links, contact and legal disclaimers.
"""
import dash_bootstrap_components as dbc
from dash import html

from src.layout.components.markers import i18n

MUTED = "#9aa59d"

_SITE_LINKS = (
    ("home", "#home"),
    ("benefits", "#benefits"),
    ("health", "#health"),
    ("howToUse", "#how-to-use"),
    ("faq", "#faq"),
    ("download", "#download"),
    ("terms", "/terms"),
    ("privacy", "/privacy"),
)


def create_footer() -> html.Footer:
    return html.Footer(
        [
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.H4(**i18n("footer.about.title")),
                            html.P(**i18n("footer.about.description")),
                        ],
                        md=5,
                    ),
                    dbc.Col(
                        [
                            html.H4(**i18n("footer.siteLinks.title")),
                            html.Ul(
                                [
                                    html.Li(html.A(href=href, **i18n(f"footer.siteLinks.{name}")))
                                    for name, href in _SITE_LINKS
                                ]
                            ),
                        ],
                        md=3,
                    ),
                    dbc.Col(
                        [
                            html.H4(**i18n("footer.contact.title")),
                            html.P(**i18n("footer.contact.description")),
                            html.P(**i18n("footer.contact.help")),
                        ],
                        md=4,
                    ),
                ],
                className="g-4",
            ),
            html.Div(
                [
                    html.Span(**i18n("footer.copyright")),
                    html.Span(" · "),
                    html.Span(**i18n("footer.designBy")),
                ],
                className="footer__copyright",
            ),
            html.P(className="footer__disclaimer", **i18n("footer.disclaimer1")),
            html.P(className="footer__disclaimer", **i18n("footer.disclaimer2")),
        ],
        className="footer",
        style={
            "padding": "2rem 1.5rem 1rem",
            "fontSize": ".8rem",
            "color": MUTED,
            "borderTop": "1px solid #2f3d34",
            "marginTop": "2rem",
        },
    )
