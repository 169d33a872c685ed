"""
src/i18n/translator.py
───────────────────────
Lookup engine: dot-separated key paths against one translation tree.

Usage:
    from src.i18n.translator import Translator

    translator = Translator(dictionary.load_tree("es"))
    translator.translate("nav.home")               # → "Inicio"
    translator.translate("nav.missing", "Home")    # → "Home"
    translator.translate("nav.missing")            # → "nav.missing"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from src.i18n.dictionary import EMPTY_TREE, TranslationTree

logger = logging.getLogger(__name__)


class Translator:
    def __init__(self, tree: TranslationTree = EMPTY_TREE):
        self.tree = tree

    def translate(self, key_path: str, fallback: str = "") -> str:
        """
        Translate a dot-separated key.

        Args:
            key_path: Dot-separated path, e.g. "nav.home" or "faq.q1.answer"
            fallback: Returned instead of the key when the lookup fails

        Returns:
            Translated string; else ``fallback`` if non-empty; else the key itself.
            Empty translations count as missing.
        """
        node: TranslationTree | str = self.tree
        for part in key_path.split("."):
            if isinstance(node, Mapping) and part in node:
                node = node[part]
            else:
                logger.warning("Translation key not found: %s", key_path)
                return fallback or key_path

        if isinstance(node, Mapping):
            # Path ends on a branch, not a leaf
            logger.warning("Translation key is not a leaf: %s", key_path)
            return fallback or key_path
        return node or fallback or key_path

    __call__ = translate
