"""
src/layout/components/feature_card.py
──────────────────────────────────────
Reusable content cards for the landing page sections.
"""
from dash import html

from src.layout.components.markers import i18n


def feature_card(key_prefix: str, icon: str = "", highlight: bool = False) -> html.Div:
    """
    Icon + title + description card bound to ``<key_prefix>.title`` etc.

    Args:
        key_prefix: Dictionary node holding the card's strings
        icon: Optional single-char/emoji icon
        highlight: Also bind ``<key_prefix>.highlight`` as a closing line
    """
    children = []
    if icon:
        children.append(html.Div(icon, className="feature-card__icon"))
    children.append(html.H3(className="feature-card__title", **i18n(f"{key_prefix}.title")))
    children.append(html.P(className="feature-card__description", **i18n(f"{key_prefix}.description")))
    if highlight:
        children.append(html.P(className="feature-card__highlight", **i18n(f"{key_prefix}.highlight")))

    return html.Div(children, className="feature-card")


def faq_item(number: int) -> html.Details:
    """Collapsible question/answer pair bound to ``faq.q<number>``."""
    return html.Details(
        [
            html.Summary(className="faq__question", **i18n(f"faq.q{number}.question")),
            html.P(className="faq__answer", **i18n(f"faq.q{number}.answer")),
        ],
        className="faq__item",
    )


def section_header(key_prefix: str) -> html.Div:
    return html.Div(
        [
            html.H2(className="section__title", **i18n(f"{key_prefix}.title")),
            html.P(className="section__subtitle", **i18n(f"{key_prefix}.subtitle")),
        ],
        className="section__header",
    )
