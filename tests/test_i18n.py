"""Tests for the translation table and language selection."""

import string

import pytest

from projkit import i18n


def _placeholders(template):
    return {name for _, name, _, _ in string.Formatter().parse(template) if name}


def test_languages_share_keys():
    assert set(i18n.TEXTS["en"]) == set(i18n.TEXTS["sv"])


@pytest.mark.parametrize("key", sorted(i18n.TEXTS["en"]))
def test_translations_use_same_placeholders(key):
    assert _placeholders(i18n.TEXTS["en"][key]) == _placeholders(i18n.TEXTS["sv"][key])


def test_translate_follows_language():
    i18n.set_language("sv")
    assert i18n._("run_failed") == "Installationen misslyckades."
    i18n.set_language("en")
    assert i18n.translate("run_failed") == "Setup failed."


def test_unknown_language_falls_back_to_english():
    assert i18n.set_language("fr") == "en"
    assert i18n.set_language(None) == "en"
    assert i18n.LANG == "en"


def test_unknown_key_returns_key():
    assert i18n.translate("no_such_key") == "no_such_key"
