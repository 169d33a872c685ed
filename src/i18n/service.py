"""
src/i18n/service.py
───────────────────
Public i18n API for the site.

One I18n instance holds the active language and its translation tree
(replaced wholesale on every switch, never merged). The dictionary, the
preference storage and the page document are injected, so the whole flow
runs without a browser.

Usage:
    from src.i18n.service import I18n

    i18n = I18n(document=create_document(), locale_tag="fr-CA")
    i18n.init()                  # detect → apply → wire the switcher
    i18n.t("nav.home")           # → "Accueil"
    i18n.set_language("de")
    i18n.get_language()          # → "de"
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from config.languages import LANGUAGE_NAMES, SUPPORTED_LANGUAGES
from config.settings import settings
from src.i18n import binder
from src.i18n.dictionary import TranslationDictionary, TranslationTree, get_dictionary
from src.i18n.document import Document
from src.i18n.models import LanguageChanged, LanguageCode, SupportedLanguage
from src.i18n.resolver import detect_language
from src.i18n.storage import PreferenceStore
from src.i18n.switcher import SwitcherController
from src.i18n.translator import Translator

logger = logging.getLogger(__name__)

Listener = Callable[[LanguageChanged], None]


class I18n:
    def __init__(
        self,
        dictionary: TranslationDictionary | None = None,
        storage: PreferenceStore | None = None,
        document: Document | None = None,
        locale_tag: str | None = None,
        default: str = settings.DEFAULT_LANG,
    ):
        self.dictionary = dictionary if dictionary is not None else get_dictionary()
        self.storage = storage if storage is not None else PreferenceStore()
        self.document = document
        self.locale_tag = locale_tag
        self.default = default
        self.switcher: SwitcherController | None = None

        self._language = default
        self._translator = Translator()
        self._initialized = False
        self._listeners: list[Listener] = []

    # ── Lifecycle ─────────────────────────────────────────────────────────────
    def detect_language(self) -> str:
        return detect_language(self.storage.load(), self.locale_tag, self.default)

    def init(self) -> None:
        """Detect the language, apply it and wire up the switcher. Call once per page."""
        detected = self.detect_language()
        logger.debug("Detected language: %s", detected)

        if self.document is not None:
            self.switcher = SwitcherController(self.document.body, on_select=self.set_language)

        self.set_language(detected)
        self._initialized = True
        logger.info("i18n initialized with language: %s", self._language)

    # ── Lookup ────────────────────────────────────────────────────────────────
    def t(self, key_path: str, fallback: str = "") -> str:
        return self._translator.translate(key_path, fallback)

    def get_language(self) -> str:
        return self._language

    def get_translations(self) -> TranslationTree:
        return self._translator.tree

    def get_supported_languages(self) -> list[SupportedLanguage]:
        return [
            SupportedLanguage(code=code, display_name=LANGUAGE_NAMES[code])
            for code in SUPPORTED_LANGUAGES
        ]

    # ── Switching ─────────────────────────────────────────────────────────────
    def set_language(self, code: str) -> None:
        """
        Switch to ``code``: persist it, reload its tree, re-bind the page and
        notify listeners.

        Unsupported codes are logged and ignored. Asking for the active
        language after init() is a no-op.
        """
        language = LanguageCode.parse(code)
        if language is None:
            logger.warning("Unsupported language: %r", code)
            return

        if language.value == self._language and self._initialized:
            logger.debug("Language already set to %s, skipping", code)
            return

        self._language = language.value
        self.storage.save(language.value)
        self._translator = Translator(self.dictionary.load_tree(language.value))
        self.apply_translations()
        self._notify(LanguageChanged(language=language))

    def apply_translations(self) -> None:
        """Re-bind the page for the active language, e.g. after inserting content."""
        if self.document is None:
            return
        binder.apply_translations(self.document, self.t, self._language, self.switcher)

    # ── Notifications ─────────────────────────────────────────────────────────
    def on_language_changed(self, listener: Listener) -> Listener:
        """Subscribe to language switches. Usable as a decorator."""
        self._listeners.append(listener)
        return listener

    def _notify(self, event: LanguageChanged) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("languageChanged listener %r failed", listener)
