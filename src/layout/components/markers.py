"""
src/layout/components/markers.py
─────────────────────────────────
Keyword helpers for the declarative translation markers.

    html.H2("Benefits", **i18n("nav.benefits"))
    html.Img(src=..., **i18n_attr("alt", "download.appStoreAlt"))
"""
from config.languages import TEXT_MARKER, attribute_marker


def i18n(key_path: str) -> dict[str, str]:
    return {TEXT_MARKER: key_path}


def i18n_attr(attribute: str, key_path: str) -> dict[str, str]:
    return {attribute_marker(attribute): key_path}
