"""
config/site.py
──────────────
Static page metadata and section anchors.

META_TAGS is rendered into the index page by Dash and mirrored in the
server-side Document, where the binder translates the content of the
description / Open Graph / Twitter tags. English is the source text.
"""

PAGE_TITLE = "Essential Oils Guide & Recipes – Your Complete Natural Wellness Companion"

META_TAGS: list[dict[str, str]] = [
    {"name": "viewport", "content": "width=device-width, initial-scale=1"},
    {
        "name": "description",
        "content": "Discover 400+ health conditions, 140+ essential oils, and 100+ diffuser blends.",
    },
    {"property": "og:title", "content": PAGE_TITLE},
    {"property": "og:description", "content": "400+ health conditions • 140+ oils • 100+ blends."},
    {"property": "og:type", "content": "website"},
    {"name": "twitter:card", "content": "summary_large_image"},
    {"name": "twitter:title", "content": "Essential Oils Guide & Recipes App"},
    {"name": "twitter:description", "content": "400+ health conditions • 140+ oils • 100+ blends."},
]

APP_STORE_URL = "https://apps.apple.com/"
GOOGLE_PLAY_URL = "https://play.google.com/store/apps"

# Section id → nav key path
SECTIONS: dict[str, str] = {
    "home": "nav.home",
    "benefits": "nav.benefits",
    "health": "nav.health",
    "how-to-use": "nav.howToUse",
    "faq": "nav.faq",
    "download": "nav.download",
}

BENEFIT_SECTIONS = ("section1", "section2", "section3", "section4", "section5")
HEALTH_CARDS: dict[str, str] = {
    "sleep": "🌙",
    "stress": "🧘",
    "focus": "🎯",
    "immune": "🛡",
    "pain": "💆",
    "mood": "☀",
}
USAGE_METHODS: dict[str, str] = {
    "diffusion": "💨",
    "topical": "🤲",
    "inhalation": "👃",
    "bath": "🛁",
}
FAQ_COUNT = 15
