"""Convert a suggestions CSV into a language data file.

Usage:
  python scripts/csv_to_data.py danish.csv --lang dn --min-font 19 --max-font 30
  python scripts/csv_to_data.py danish.csv           (language "da", fonts 18/29)

Writes data/suggestions/<lang>.json, adds it to data/suggestions/manifest.json
and, when the sheet carries site texts, updates data/translations.json.
Run from the repo root after `pip install -e .`.
"""
import sys

from core.generator import main


if __name__ == "__main__":
    sys.exit(main())
