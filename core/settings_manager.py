import json
from copy import deepcopy
from pathlib import Path

SETTINGS_FILE = Path("data/user_settings.json")

DEFAULT_SETTINGS = {
    # Last language picked in the switcher; None means "detect".
    "preferred_language": None,
    # Session-independent UI preferences.
    "ui": {
        "compact": False,
    },
}


def load_settings(path: Path = None):
    """Load saved user settings, merged with defaults."""
    path = Path(path) if path else SETTINGS_FILE
    merged = deepcopy(DEFAULT_SETTINGS)
    if not path.exists():
        return merged

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except Exception:
        return merged

    if not isinstance(loaded, dict):
        return merged

    # Merge top-level keys; merge the known nested dict.
    for k, v in loaded.items():
        if k == "ui" and isinstance(v, dict):
            merged.setdefault(k, {})
            merged[k].update(v)
        else:
            merged[k] = v

    lang = merged.get("preferred_language")
    if lang is not None and not (isinstance(lang, str) and lang.strip()):
        merged["preferred_language"] = None

    return merged


def save_settings(settings: dict, path: Path = None):
    path = Path(path) if path else SETTINGS_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
