import logging

import pytest

from core.i18n import (
    browser_base_language,
    detect_language,
    normalize_language,
    presentation_config_for,
    translate,
)
from core.presentation import PresentationConfig

SUPPORTED = ["en", "fr", "gr", "dn"]

TRANSLATIONS = {
    "en": {
        "title": "Can I Get A...",
        "buttons": {"location": "Location"},
        "fontSizes": {"small": 18, "large": 29},
    },
    "gr": {
        "title": "Μπορώ να έχω ένα...",
        "fontSizes": {"small": 16, "large": 26},
    },
    "xx": {"fontSizes": {"small": "tiny", "large": 30}},
}


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [("fr-CA", "fr"), ("EN-us", "en"), ("gr", "gr"), ("", None), (None, None), ("undefined", None)],
)
def test_browser_base_language(raw, expected):
    assert browser_base_language(raw) == expected


@pytest.mark.unit
def test_url_parameter_wins():
    assert detect_language("gr", "fr", "dn-DK", SUPPORTED) == "gr"


@pytest.mark.unit
def test_saved_preference_beats_browser():
    assert detect_language(None, "fr", "dn-DK", SUPPORTED) == "fr"


@pytest.mark.unit
def test_browser_language_region_is_stripped():
    assert detect_language(None, None, "fr-CA", SUPPORTED) == "fr"


@pytest.mark.unit
def test_unsupported_values_fall_through():
    assert detect_language("de", "null", "es-ES", SUPPORTED) == "en"
    assert detect_language("de", "dn", None, SUPPORTED) == "dn"


@pytest.mark.unit
def test_custom_default():
    assert detect_language(None, None, None, SUPPORTED, default="fr") == "fr"


@pytest.mark.unit
def test_normalize_language_warns_on_fallback(caplog):
    assert normalize_language("gr", SUPPORTED) == "gr"
    with caplog.at_level(logging.WARNING, logger="core.i18n"):
        assert normalize_language("de", SUPPORTED) == "en"
    assert "not supported" in caplog.text


@pytest.mark.unit
def test_translate_dotted_keys():
    assert translate(TRANSLATIONS, "en", "title") == "Can I Get A..."
    assert translate(TRANSLATIONS, "en", "buttons.location") == "Location"


@pytest.mark.unit
def test_translate_missing_is_empty_and_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="core.i18n"):
        assert translate(TRANSLATIONS, "en", "buttons.word") == ""
        assert translate(TRANSLATIONS, "en", "title.deeper") == ""
        assert translate(TRANSLATIONS, "de", "title") == ""
    assert "Translation not found for language: de" in caplog.text
    assert "Translation key not found: buttons.word" in caplog.text


@pytest.mark.unit
def test_presentation_config_per_language():
    assert presentation_config_for(TRANSLATIONS, "gr") == PresentationConfig(
        min_font_size=16, max_font_size=26
    )


@pytest.mark.unit
def test_presentation_config_defaults():
    assert presentation_config_for(TRANSLATIONS, "de") == PresentationConfig()
    assert presentation_config_for(TRANSLATIONS, "xx") == PresentationConfig()
