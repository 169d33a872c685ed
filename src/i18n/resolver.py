"""
src/i18n/resolver.py
────────────────────
Language resolver.

Priority, first match wins:
  1. Persisted preference, if it is a supported code
  2. Browser locale tag: exact match in LOCALE_MAP, then its primary subtag
  3. Default language
"""
from __future__ import annotations

import logging

from flask import has_request_context, request

from config.languages import LOCALE_MAP, SUPPORTED_LANGUAGES
from config.settings import settings

logger = logging.getLogger(__name__)


def detect_language(
    stored: str | None = None,
    locale_tag: str | None = None,
    default: str = settings.DEFAULT_LANG,
    supported: tuple[str, ...] = SUPPORTED_LANGUAGES,
) -> str:
    """Pick the active language code. Never raises; always returns a supported code."""
    if stored and stored in supported:
        return stored

    if locale_tag:
        mapped = LOCALE_MAP.get(locale_tag)
        if mapped and mapped in supported:
            return mapped

        primary = locale_tag.split("-")[0]
        if primary in supported:
            return primary

    return default


def locale_from_request() -> str | None:
    """
    Best ``Accept-Language`` tag of the current Flask request.

    Returns None outside a request, when the header is absent, or when
    it only carries the "*" wildcard.
    """
    if not has_request_context():
        return None
    accepted = request.accept_languages
    if not accepted:
        return None
    # LanguageAccept is sorted by quality, highest first
    tag = accepted[0][0]
    logger.debug("Browser locale from Accept-Language: %s", tag)
    return tag if tag != "*" else None
