"""
src/pages/home.py
──────────────────
Landing page sections.

Static structure; every visible string is bound to a dictionary key and
filled in by the binder for the active language.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.site import (
    APP_STORE_URL,
    BENEFIT_SECTIONS,
    FAQ_COUNT,
    GOOGLE_PLAY_URL,
    HEALTH_CARDS,
    USAGE_METHODS,
)
from src.layout.components.feature_card import faq_item, feature_card, section_header
from src.layout.components.markers import i18n, i18n_attr


def _hero() -> html.Section:
    return html.Section(
        [
            html.H1("Your Complete Guide to Natural Wellness", className="hero__headline", **i18n("hero.headline")),
            html.P(className="hero__subheadline", **i18n("hero.subheadline")),
            html.Div(
                [
                    html.A(
                        "Download Free on App Store",
                        href=APP_STORE_URL,
                        target="_blank",
                        className="btn btn-success btn-lg d-none d-md-inline-block",
                        **i18n("hero.downloadAppStore"),
                    ),
                    html.A(
                        className="btn btn-success d-md-none",
                        href=APP_STORE_URL,
                        target="_blank",
                        **i18n("hero.downloadAppStoreMobile"),
                    ),
                    html.A(
                        "Subscribe for Wellness Tips",
                        href="#subscribe",
                        className="btn btn-outline-light btn-lg d-none d-md-inline-block",
                        **i18n("hero.subscribeTips"),
                    ),
                    html.A(
                        className="btn btn-outline-light d-md-none",
                        href="#subscribe",
                        **i18n("hero.subscribeTipsMobile"),
                    ),
                ],
                className="hero__actions",
            ),
        ],
        id="home",
        className="section hero",
    )


def _benefits() -> html.Section:
    return html.Section(
        [feature_card(f"benefits.{name}", highlight=True) for name in BENEFIT_SECTIONS],
        id="benefits",
        className="section benefits",
    )


def _health() -> html.Section:
    return html.Section(
        [
            section_header("healthBenefits"),
            dbc.Row(
                [
                    dbc.Col(feature_card(f"healthBenefits.cards.{name}", icon=icon), md=4)
                    for name, icon in HEALTH_CARDS.items()
                ],
                className="g-3",
            ),
        ],
        id="health",
        className="section health",
    )


def _how_to_use() -> html.Section:
    return html.Section(
        [
            section_header("howToUse"),
            dbc.Row(
                [
                    dbc.Col(feature_card(f"howToUse.methods.{name}", icon=icon), md=3)
                    for name, icon in USAGE_METHODS.items()
                ],
                className="g-3",
            ),
        ],
        id="how-to-use",
        className="section how-to-use",
    )


def _faq() -> html.Section:
    return html.Section(
        [section_header("faq"), html.Div([faq_item(n) for n in range(1, FAQ_COUNT + 1)], className="faq")],
        id="faq",
        className="section faq-section",
    )


def _testimonials() -> html.Section:
    return html.Section(section_header("testimonials"), className="section testimonials")


def _download() -> html.Section:
    return html.Section(
        [
            section_header("download"),
            html.Div(
                [
                    html.A(
                        html.Img(
                            src="/assets/app-store-badge.svg",
                            alt="Download on App Store",
                            **i18n_attr("alt", "download.appStoreAlt"),
                            **i18n_attr("title", "download.button"),
                        ),
                        href=APP_STORE_URL,
                        target="_blank",
                        **i18n_attr("aria-label", "download.appStoreAlt"),
                    ),
                    html.A(
                        html.Img(
                            src="/assets/google-play-badge.svg",
                            alt="Get it on Google Play",
                            **i18n_attr("alt", "download.googlePlayAlt"),
                        ),
                        href=GOOGLE_PLAY_URL,
                        target="_blank",
                        **i18n_attr("aria-label", "download.googlePlayAlt"),
                    ),
                ],
                className="download__badges",
            ),
            html.P("Share with friends:", className="social-share__label", **i18n("socialShare.label")),
        ],
        id="download",
        className="section download",
    )


def _subscribe() -> html.Section:
    return html.Section(
        [
            section_header("subscribe"),
            html.Div(
                [
                    # dcc.Input takes no data-* props; the wrapper carries the marker
                    html.Div(
                        dcc.Input(
                            id="subscribe-email",
                            type="email",
                            placeholder="Your email address",
                            className="form-control",
                        ),
                        className="subscribe__field",
                        **i18n_attr("placeholder", "subscribe.emailPlaceholder"),
                    ),
                    html.P(className="subscribe__privacy", **i18n("subscribe.privacy")),
                ],
                className="subscribe__form",
            ),
        ],
        id="subscribe",
        className="section subscribe",
    )


def layout() -> html.Div:
    return html.Div(
        [
            _hero(),
            _benefits(),
            _health(),
            _how_to_use(),
            _faq(),
            _testimonials(),
            _download(),
            _subscribe(),
        ],
        className="page",
    )
