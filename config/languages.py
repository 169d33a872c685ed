"""
config/languages.py
───────────────────
Supported languages, display names and browser locale mapping.

Also holds the fixed key paths the binder writes into the document head,
and the attribute categories a page may mark for translation.
"""

# Display order of the language switcher
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "de", "fr", "it", "es", "ro")

LANGUAGE_NAMES: dict[str, str] = {
    "en": "🇬🇧 English",
    "de": "🇩🇪 Deutsch",
    "fr": "🇫🇷 Français",
    "it": "🇮🇹 Italiano",
    "es": "🇪🇸 Español",
    "ro": "🇷🇴 Română",
}

# ── Browser locale → supported language ──────────────────────────────────────
LOCALE_MAP: dict[str, str] = {
    "en": "en", "en-US": "en", "en-GB": "en", "en-AU": "en", "en-CA": "en",
    "de": "de", "de-DE": "de", "de-AT": "de", "de-CH": "de",
    "fr": "fr", "fr-FR": "fr", "fr-CA": "fr", "fr-CH": "fr", "fr-BE": "fr",
    "it": "it", "it-IT": "it", "it-CH": "it",
    "es": "es", "es-ES": "es", "es-MX": "es", "es-AR": "es", "es-CO": "es", "es-CL": "es",
    "ro": "ro", "ro-RO": "ro", "ro-MD": "ro",
}

# ── Document head ─────────────────────────────────────────────────────────────
TITLE_KEY = "meta.title"

# (attribute, value) of a <meta> tag → key path of its translated content
METADATA_TARGETS: tuple[tuple[str, str, str], ...] = (
    ("name", "description", "meta.description"),
    ("property", "og:title", "meta.ogTitle"),
    ("property", "og:description", "meta.ogDescription"),
    ("name", "twitter:title", "meta.twitterTitle"),
    ("name", "twitter:description", "meta.twitterDescription"),
)

# ── Declarative markers ───────────────────────────────────────────────────────
TEXT_MARKER = "data-i18n"
ATTRIBUTE_CATEGORIES: tuple[str, ...] = ("title", "alt", "placeholder", "aria-label", "href", "content")


def attribute_marker(attribute: str) -> str:
    return f"{TEXT_MARKER}-{attribute}"
