#ui/language.py
import logging
from typing import Any, Dict, List

import streamlit as st

from core import language_data
from core.i18n import QUERY_PARAM, detect_language, normalize_language, translate
from core.settings_manager import save_settings
from ui import browser

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"


@st.cache_data(show_spinner=False)
def load_registry() -> Dict[str, Any]:
    return language_data.load_registry()


def supported_languages() -> List[str]:
    """Languages that have both a translation entry and a data file."""
    translations = load_registry()["translations"]
    listed = language_data.available_languages()
    langs = [code for code in listed if code in translations]
    return langs or list(translations.keys())


def current_language(settings: Dict[str, Any]) -> str:
    lang = st.session_state.get(LANGUAGE_KEY)
    if isinstance(lang, str) and lang in supported_languages():
        return lang

    saved = settings.get("preferred_language") or browser.get_saved_language()
    lang = detect_language(
        url_lang=browser.get_query_param(QUERY_PARAM),
        saved_lang=saved,
        browser_lang=browser.get_browser_language(),
        supported=supported_languages(),
    )
    st.session_state[LANGUAGE_KEY] = lang
    return lang


def set_language(lang: str, settings: Dict[str, Any]) -> str:
    """Switch the active language and persist the preference everywhere."""
    lang = normalize_language(lang, supported_languages())
    st.session_state[LANGUAGE_KEY] = lang

    settings["preferred_language"] = lang
    try:
        save_settings(settings)
    except OSError as exc:
        logger.warning("Could not save language preference: %s", exc)

    browser.save_language(lang)
    browser.set_query_param(QUERY_PARAM, lang)
    return lang


def t(key: str, lang: str = None) -> Any:
    lang = lang or st.session_state.get(LANGUAGE_KEY) or "en"
    return translate(load_registry()["translations"], lang, key)
