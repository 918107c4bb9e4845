from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from core.presentation import FONT_SIZES, PresentationConfig

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
QUERY_PARAM = "lang"


def _clean(lang: Optional[str]) -> Optional[str]:
    if not isinstance(lang, str):
        return None
    lang = lang.strip()
    if not lang or lang in ("null", "undefined"):
        return None
    return lang


def browser_base_language(browser_lang: Optional[str]) -> Optional[str]:
    """'fr-CA' -> 'fr'."""
    lang = _clean(browser_lang)
    if not lang:
        return None
    return lang.split("-")[0].lower()


def detect_language(
    url_lang: Optional[str],
    saved_lang: Optional[str],
    browser_lang: Optional[str],
    supported: Iterable[str],
    default: str = DEFAULT_LANGUAGE,
) -> str:
    """Pick the active language.

    Order: ?lang= URL parameter, then the saved preference, then the
    browser language (region stripped), then `default`. Values that are not
    supported fall through to the next source.
    """
    supported = set(supported)
    for candidate in (_clean(url_lang), _clean(saved_lang), browser_base_language(browser_lang)):
        if candidate and candidate in supported:
            return candidate
    return default


def normalize_language(lang: Optional[str], supported: Iterable[str], default: str = DEFAULT_LANGUAGE) -> str:
    if lang in set(supported):
        return lang
    logger.warning("Language %s not supported, falling back to %s", lang, default)
    return default


def translate(translations: Dict[str, dict], lang: str, key: str) -> Any:
    """Look up a dotted key like 'buttons.location'; '' when missing."""
    value: Any = translations.get(lang)
    if value is None:
        logger.error("Translation not found for language: %s", lang)
        return ""

    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            logger.error("Translation key not found: %s in language %s", key, lang)
            return ""
        value = value[part]
    return value


def presentation_config_for(translations: Dict[str, dict], lang: str) -> PresentationConfig:
    """Per-language font sizes from the `fontSizes` entry, with defaults."""
    sizes = (translations.get(lang) or {}).get("fontSizes") or {}
    try:
        small = int(sizes.get("small", FONT_SIZES["small"]))
        large = int(sizes.get("large", FONT_SIZES["large"]))
    except (TypeError, ValueError):
        logger.warning("Bad fontSizes for %s: %r; using defaults", lang, sizes)
        small, large = FONT_SIZES["small"], FONT_SIZES["large"]
    return PresentationConfig(min_font_size=small, max_font_size=large)
