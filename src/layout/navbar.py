"""
src/layout/navbar.py
─────────────────────
Navigation bar with section links, app download link and language switcher.
"""

import dash_bootstrap_components as dbc
from dash import html

from config.settings import settings
from config.site import APP_STORE_URL, SECTIONS
from src.layout.components.language_switcher import language_switcher
from src.layout.components.markers import i18n, i18n_attr

NAV_BG = "#1f2a24"
BORDER = "#2f3d34"
ACCENT = "#8bc34a"


def create_navbar() -> dbc.Navbar:
    links = [
        dbc.NavItem(dbc.NavLink(html.Span(**i18n(key_path)), href=f"#{section}", external_link=True))
        for section, key_path in SECTIONS.items()
    ]

    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    [
                        html.Span("🌿", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(settings.SITE_NAME, style={"fontWeight": "700", "letterSpacing": ".02em"}),
                    ],
                    href="#home",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            *links,
                            dbc.NavItem(
                                html.A(
                                    "Get The App",
                                    href=APP_STORE_URL,
                                    target="_blank",
                                    className="btn btn-success btn-sm ms-2",
                                    **i18n("nav.getTheApp"),
                                    **i18n_attr("title", "hero.downloadAppStore"),
                                )
                            ),
                            # Re-rendered by the switcher callback
                            dbc.NavItem(
                                html.Div(language_switcher(), id="language-switcher-slot"),
                                style={"marginLeft": "12px"},
                            ),
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
