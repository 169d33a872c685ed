"""
src/i18n/dictionary.py
──────────────────────
Dictionary store: the embedded translation content, one tree per language.

Each ``locales/<code>.json`` file is read once and frozen into nested
read-only mappings whose leaves are strings. Trees are never partially
loaded and never mutated afterwards.

Usage:
    from src.i18n.dictionary import get_dictionary

    dictionary = get_dictionary()
    dictionary.load_tree("de")["nav"]["home"]   # → "Start"
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from config.languages import SUPPORTED_LANGUAGES
from config.settings import settings

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"

TranslationTree = Mapping[str, "TranslationTree | str"]

EMPTY_TREE: TranslationTree = MappingProxyType({})


def freeze(node: Mapping) -> TranslationTree:
    """Recursively wrap a parsed JSON object into read-only mappings."""
    frozen = {}
    for key, value in node.items():
        if isinstance(value, Mapping):
            frozen[key] = freeze(value)
        else:
            frozen[key] = str(value)
    return MappingProxyType(frozen)


def key_paths(tree: TranslationTree, prefix: str = "") -> Iterator[str]:
    """Yield the dot-delimited path of every leaf in ``tree``."""
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            yield from key_paths(value, path)
        else:
            yield path


class TranslationDictionary:
    """Immutable language code → translation tree mapping."""

    def __init__(self, trees: Mapping[str, Mapping], default: str = settings.DEFAULT_LANG):
        self._trees = MappingProxyType({code: freeze(tree) for code, tree in trees.items()})
        self.default = default

    @classmethod
    def from_directory(
        cls,
        path: Path = LOCALES_DIR,
        languages: tuple[str, ...] = SUPPORTED_LANGUAGES,
        default: str = settings.DEFAULT_LANG,
    ) -> TranslationDictionary:
        trees = {}
        for code in languages:
            locale_file = path / f"{code}.json"
            if not locale_file.exists():
                logger.warning("No locale file for %r in %s", code, path)
                continue
            with open(locale_file, encoding="utf-8") as f:
                trees[code] = json.load(f)
        logger.debug("Loaded %d locale(s) from %s", len(trees), path)
        return cls(trees, default=default)

    def __contains__(self, code: object) -> bool:
        return code in self._trees

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._trees)

    def load_tree(self, code: str) -> TranslationTree:
        """
        Return the tree for ``code``.

        Falls back to the default language's tree when ``code`` has none,
        and to an empty tree when the default is missing as well (or was
        the language asked for).
        """
        tree = self._trees.get(code)
        if tree is not None:
            return tree
        if code != self.default and self.default in self._trees:
            logger.info("No translations for %r, falling back to %r", code, self.default)
            return self._trees[self.default]
        logger.warning("No translations for %r, using an empty dictionary", code)
        return EMPTY_TREE

    def missing_keys(self, reference: str | None = None) -> dict[str, list[str]]:
        """
        Content audit: key paths present in ``reference`` but absent per language.

        Languages with complete coverage are left out of the result.
        """
        reference = reference or self.default
        expected = set(key_paths(self.load_tree(reference)))
        report = {}
        for code, tree in self._trees.items():
            if code == reference:
                continue
            missing = sorted(expected - set(key_paths(tree)))
            if missing:
                report[code] = missing
        return report


@lru_cache(maxsize=1)
def get_dictionary() -> TranslationDictionary:
    """Application-wide dictionary, loaded on first use."""
    return TranslationDictionary.from_directory()
