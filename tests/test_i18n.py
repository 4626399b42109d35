from __future__ import annotations

import datetime as dt

from rdm.i18n import TRANSLATIONS, Translator, format_day_label


def test_languages_share_keys():
    assert set(TRANSLATIONS["id"]) == set(TRANSLATIONS["en"])


def test_translator_lookup_and_format():
    assert Translator("id")("actual_name") == "Aktual"
    assert Translator("en")("slider_caption", v=50) == "Input: 50 mm"
    assert Translator("en")("missing_key") == "missing_key"


def test_unknown_language_uses_default():
    assert Translator("xx").lang == "id"


def test_day_labels():
    d = dt.date(2024, 12, 25)
    assert format_day_label(d, "id") == "25 Des"
    assert format_day_label(d, "en") == "Dec 25"
    assert format_day_label(dt.date(2024, 5, 3), "xx") == "3 Mei"
