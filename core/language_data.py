"""Loaders for the translation registry and per-language suggestion pools.

Layout under the data directory:

  data/translations.json            {"translations": {...}, "languageNames": {...}}
  data/suggestions/manifest.json    {"files": ["en.json", "fr.json", ...]}
  data/suggestions/<code>.json      {"language": "<code>", "suggestions": {...}}

The data directory defaults to ./data and can be moved with IMPROV_DATA_DIR.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.categories import Category

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "IMPROV_DATA_DIR"
TRANSLATIONS_FILE = "translations.json"
SUGGESTIONS_DIR = "suggestions"
MANIFEST_FILE = "manifest.json"


def data_dir() -> Path:
    return Path(os.getenv(DATA_DIR_ENV, "data"))


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_registry(base: Optional[Path] = None) -> Dict[str, Any]:
    """Raw registry dict with both `translations` and `languageNames`."""
    base = base or data_dir()
    raw = _read_json(base / TRANSLATIONS_FILE)
    if not isinstance(raw, dict):
        return {"translations": {}, "languageNames": {}}
    raw.setdefault("translations", {})
    raw.setdefault("languageNames", {})
    return raw


def load_translations(base: Optional[Path] = None) -> Dict[str, dict]:
    return load_registry(base)["translations"]


def load_language_names(base: Optional[Path] = None) -> Dict[str, str]:
    return load_registry(base)["languageNames"]


def load_manifest(base: Optional[Path] = None) -> List[str]:
    """Return the include list of language data files (may be empty)."""
    base = base or data_dir()
    path = base / SUGGESTIONS_DIR / MANIFEST_FILE
    if not path.exists():
        return []
    raw = _read_json(path)
    files = raw.get("files") if isinstance(raw, dict) else None
    return [str(f) for f in (files or [])]


def suggestions_path(code: str, base: Optional[Path] = None) -> Path:
    base = base or data_dir()
    return base / SUGGESTIONS_DIR / f"{code}.json"


def available_languages(base: Optional[Path] = None) -> List[str]:
    """Language codes listed in the manifest, in manifest order."""
    return [Path(f).stem for f in load_manifest(base)]


def load_pools(code: str, base: Optional[Path] = None) -> Dict[Category, List[str]]:
    """Load the suggestion pools for `code`, keyed by Category.

    A category missing from the file becomes an empty pool (logged), so the
    cycler always sees the full category set.
    """
    path = suggestions_path(code, base)
    if not path.exists():
        raise FileNotFoundError(f"Suggestion data not found for language {code!r}: {path}")

    raw = _read_json(path)
    data = raw.get("suggestions") if isinstance(raw, dict) else None
    if not isinstance(data, dict):
        data = {}

    pools: Dict[Category, List[str]] = {}
    for category in Category.known():
        items = data.get(category.value)
        if not isinstance(items, list):
            logger.warning("No %s suggestions for language %s", category.value, code)
            items = []
        pools[category] = [str(x) for x in items if x is not None]
    return pools
