"""
tests/test_translator.py
─────────────────────────
Tests for key path lookup and fallback.
"""
import logging

import pytest

from config.languages import SUPPORTED_LANGUAGES
from src.i18n.dictionary import key_paths
from src.i18n.translator import Translator


@pytest.fixture
def translator(small_dictionary):
    return Translator(small_dictionary.load_tree("de"))


class TestTranslate:
    def test_leaf(self, translator):
        assert translator.translate("nav.home") == "Start"

    def test_callable(self, translator):
        assert translator("meta.title") == "Öle"

    def test_missing_key_returns_key(self, translator):
        assert translator.translate("nav.missing") == "nav.missing"

    def test_missing_key_returns_fallback(self, translator):
        assert translator.translate("nav.missing", "Fallback") == "Fallback"

    def test_empty_fallback_returns_key(self, translator):
        assert translator.translate("nav.missing", "") == "nav.missing"

    def test_missing_top_level_segment(self, translator):
        assert translator.translate("footer.copyright", "©") == "©"

    def test_walk_through_a_leaf(self, translator):
        # "nav.home" is a string; it has no "extra" child
        assert translator.translate("nav.home.extra") == "nav.home.extra"

    def test_path_ending_on_branch(self, translator):
        assert translator.translate("nav", "x") == "x"
        assert translator.translate("nav") == "nav"

    def test_empty_leaf_treated_as_missing(self, translator):
        assert translator.translate("hero.empty") == "hero.empty"
        assert translator.translate("hero.empty", "Default") == "Default"

    def test_markup_returned_untouched(self, translator):
        assert translator.translate("hero.headline") == "Fühl dich<br>besser"

    def test_empty_tree(self):
        assert Translator().translate("nav.home", "Home") == "Home"


class TestDiagnostics:
    def test_missing_key_logs_warning(self, translator, caplog):
        with caplog.at_level(logging.WARNING, logger="src.i18n.translator"):
            translator.translate("nav.missing", "Fallback")
        assert "nav.missing" in caplog.text

    def test_hit_does_not_log(self, translator, caplog):
        with caplog.at_level(logging.WARNING, logger="src.i18n.translator"):
            translator.translate("nav.home")
        assert caplog.text == ""


class TestShippedDictionary:
    @pytest.mark.parametrize("code", SUPPORTED_LANGUAGES)
    def test_every_key_translates(self, dictionary, code):
        translator = Translator(dictionary.load_tree(code))
        for path in key_paths(dictionary.load_tree("en")):
            value = translator.translate(path)
            assert value and value != path, f"{code}: {path}"
