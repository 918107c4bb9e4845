"""CSV -> language data conversion.

The source sheet has one suggestion per category per row at fixed column
positions, plus an optional (English key, translated text) pair used to
build the site copy for that language:

  LEN,LOCATION,LEN,Translation,,LEN,RELATIONSHIP,LEN,Translation,,LEN,WORDS,LEN,Translation,,Key,Translation

Row problems are collected as warnings; only a file with no usable rows at
all is fatal.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.categories import Category
from core.language_data import MANIFEST_FILE, SUGGESTIONS_DIR, TRANSLATIONS_FILE
from core.presentation import FONT_SIZES
from core.validation import validate_pools

logger = logging.getLogger(__name__)

COLUMN_INDICES = {
    Category.LOCATION: 3,
    Category.RELATIONSHIP: 8,
    Category.WORD: 13,
    "site_text": 15,
    "site_text_translation": 16,
}

LANGUAGE_NAMES = {
    "en": "English",
    "fr": "French",
    "gr": "Greek",
    "dk": "Danish",
    "dn": "Danish",
    "de": "German",
    "es": "Spanish",
}

CREDIT_LINKS = (
    '<a href="http://gil.browdy.net" target="_blank">gil browdy</a> && '
    '<a href="http://www.vinnyfrancois.com" target="_blank">vinny francois</a>'
)


class GeneratorError(Exception):
    """The input cannot produce a language file at all."""


@dataclass
class ParseResult:
    pools: Dict[Category, List[str]] = field(default_factory=dict)
    site_texts: List[Tuple[str, str]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return any(self.pools.get(c) for c in Category.known())


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code.upper())


def parse_rows(lines: Iterable[str]) -> ParseResult:
    """Extract the category columns and site texts from CSV lines.

    The first line is the header. Line numbers in warnings are 1-based and
    count the header.
    """
    lines = list(lines)
    if len(lines) < 2:
        raise GeneratorError("CSV file must have at least a header row and one data row")

    result = ParseResult(pools={c: [] for c in Category.known()})
    key_col = COLUMN_INDICES["site_text"]
    value_col = COLUMN_INDICES["site_text_translation"]

    reader = csv.reader(lines)
    next(reader)
    start = reader.line_num + 1

    for parts in reader:
        # A quoted cell can span physical lines; report where the record starts.
        line_no, start = start, reader.line_num + 1
        non_blank = "".join(parts).strip() != ""

        for category in Category.known():
            col = COLUMN_INDICES[category]
            if len(parts) > col:
                value = parts[col].strip()
                if value:
                    result.pools[category].append(value)
            elif non_blank:
                result.warnings.append(f"Line {line_no}: Missing {category.value} column")

        if len(parts) > value_col:
            key = parts[key_col].strip()
            value = parts[value_col].strip()
            if key and value:
                result.site_texts.append((key, value))

    if not result.has_data:
        raise GeneratorError("No valid data found in CSV file")
    return result


def read_csv(path: Path) -> ParseResult:
    text = Path(path).read_text(encoding="utf-8")
    return parse_rows(text.strip().splitlines(keepends=True))


def build_translation_entry(
    site_texts: List[Tuple[str, str]],
    min_font_size: int = FONT_SIZES["small"],
    max_font_size: int = FONT_SIZES["large"],
) -> Optional[Dict[str, Any]]:
    """Map the English source keys to a translation entry; None if empty."""
    if not site_texts:
        return None

    entry: Dict[str, Any] = {
        "title": "",
        "subtitle": "",
        "buttons": {"location": "", "relationship": "", "word": ""},
        "credit": "",
        "fontSizes": {"small": min_font_size, "large": max_font_size},
        "bodyClass": "",
    }

    for key, value in site_texts:
        if key == "Can I Get A...":
            entry["title"] = value
        elif "improv suggestions" in key:
            entry["subtitle"] = value
        elif key == "Location":
            entry["buttons"]["location"] = value
        elif key == "Relationship":
            entry["buttons"]["relationship"] = value
        elif key == "Word":
            entry["buttons"]["word"] = value
        elif "Gil Browdy" in key:
            # The translated line starts with the word for "by".
            by = value.split()[0] if value.split() else "by"
            entry["credit"] = f"{by} {CREDIT_LINKS}" + entry["credit"]
        elif "Translated in" in key:
            entry["credit"] += f"<br/>{value}"

    return entry


def language_payload(code: str, pools: Dict[Category, List[str]]) -> Dict[str, Any]:
    return {
        "language": code,
        "name": language_name(code),
        "suggestions": {c.value: list(pools.get(c) or []) for c in Category.known()},
    }


def write_language_file(path: Path, code: str, pools: Dict[Category, List[str]]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(language_payload(code, pools), f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path


def update_translations(path: Path, code: str, entry: Dict[str, Any]) -> bool:
    """Insert or replace `code` in the registry. Returns True if it existed."""
    path = Path(path)
    registry: Dict[str, Any] = {"translations": {}, "languageNames": {}}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if isinstance(loaded, dict):
            registry.update(loaded)

    translations = registry.setdefault("translations", {})
    existed = code in translations
    translations[code] = entry

    names = registry.setdefault("languageNames", {})
    if code not in names:
        names[code] = code
        logger.info("Added %s to languageNames", code)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(registry, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return existed


def update_manifest(path: Path, filename: str) -> bool:
    """Append `filename` to the include list once. Returns True if added."""
    path = Path(path)
    files: List[str] = []
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if isinstance(loaded, dict):
            files = [str(x) for x in (loaded.get("files") or [])]

    if filename in files:
        return False

    files.append(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"files": files}, f, indent=2)
        f.write("\n")
    return True


def default_paths(data_dir: Path, code: str) -> Dict[str, Path]:
    data_dir = Path(data_dir)
    return {
        "output": data_dir / SUGGESTIONS_DIR / f"{code}.json",
        "translations": data_dir / TRANSLATIONS_FILE,
        "manifest": data_dir / SUGGESTIONS_DIR / MANIFEST_FILE,
    }


def run(
    input_file: Path,
    *,
    code: Optional[str] = None,
    output: Optional[Path] = None,
    min_font_size: int = FONT_SIZES["small"],
    max_font_size: int = FONT_SIZES["large"],
    data_dir: Path = Path("data"),
) -> ParseResult:
    """Convert one CSV and update the registry and include list.

    Failing to update the registry or manifest is reported but does not
    fail the run; the language file itself must be written.
    """
    input_file = Path(input_file)
    code = code or input_file.stem[:2].lower()
    paths = default_paths(data_dir, code)
    output = Path(output) if output else paths["output"]

    result = read_csv(input_file)
    result.warnings.extend(validate_pools(result.pools, language=code))

    if result.warnings:
        print("\nWarnings during parsing:")
        for w in result.warnings:
            print(f"  - {w}")
        print("")

    write_language_file(output, code, result.pools)
    print(f"✓ Successfully converted {input_file} to {output}")
    print(f"  Locations:     {len(result.pools[Category.LOCATION])}")
    print(f"  Relationships: {len(result.pools[Category.RELATIONSHIP])}")
    print(f"  Words:         {len(result.pools[Category.WORD])}")
    print(f"  Font sizes:    {min_font_size}px / {max_font_size}px")

    try:
        if update_manifest(paths["manifest"], output.name):
            print(f"✓ Added {output.name} to {paths['manifest']}")
        else:
            print(f"  {output.name} already in {paths['manifest']}")
    except (OSError, ValueError) as exc:
        logger.warning("Could not update %s: %s", paths["manifest"], exc)
        print(f"⚠ Could not update {paths['manifest']}: {exc}")

    entry = build_translation_entry(result.site_texts, min_font_size, max_font_size)
    if entry:
        try:
            existed = update_translations(paths["translations"], code, entry)
            verb = "Updated existing" if existed else "Added new"
            print(f"✓ {verb} {code} entry in {paths['translations']}")
        except (OSError, ValueError) as exc:
            logger.warning("Could not update %s: %s", paths["translations"], exc)
            print(f"⚠ Could not update {paths['translations']}: {exc}")
            print("\nManually add this translation entry:")
            print(json.dumps(entry, indent=2, ensure_ascii=False))
        print(f"  Site texts:    {len(result.site_texts)}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Convert a suggestions CSV into a language data file")
    ap.add_argument("input", help="source CSV file")
    ap.add_argument("--lang", default=None, help="language code (default: first two letters of the file name)")
    ap.add_argument("--output", default=None, help="output JSON (default: <data-dir>/suggestions/<lang>.json)")
    ap.add_argument("--min-font", type=int, default=FONT_SIZES["small"])
    ap.add_argument("--max-font", type=int, default=FONT_SIZES["large"])
    ap.add_argument("--data-dir", default="data")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        run(
            Path(args.input),
            code=args.lang,
            output=Path(args.output) if args.output else None,
            min_font_size=args.min_font,
            max_font_size=args.max_font,
            data_dir=Path(args.data_dir),
        )
    except FileNotFoundError as exc:
        print(f"Error reading file {args.input}: {exc}")
        return 1
    except GeneratorError as exc:
        print(f"Error: {exc}")
        return 1
    return 0
