"""
app.py
──────
Essential Oils Guide & Recipes — marketing site entry point.

Startup sequence:
  1. Configure logging and load the translation dictionary
  2. Create Dash app with the page metadata and a Bootstrap theme
  3. Register all callbacks
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from config.site import META_TAGS, PAGE_TITLE
from src.i18n.dictionary import get_dictionary
from src.layout.main import create_layout

# ── 1. Logging + dictionary ───────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("essentialoils")

dictionary = get_dictionary()
logger.info("Translations loaded: %s", ", ".join(dictionary.languages))
for code, missing in dictionary.missing_keys().items():
    logger.warning("%s is missing %d key(s): %s", code, len(missing), ", ".join(missing[:5]))

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    suppress_callback_exceptions=True,
    meta_tags=META_TAGS,
    title=PAGE_TITLE,
    update_title=None,
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 3. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import language, navigation, switcher

language.register(app)
navigation.register(app)
switcher.register(app)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
