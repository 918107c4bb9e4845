from __future__ import annotations

import unicodedata
from typing import List, Mapping, Sequence, Union

from core.categories import Category

MAX_ITEM_LENGTH = 100
MAX_WORD_TOKENS = 4
RELATIONSHIP_SEPARATORS = ("/", "&")


def _has_control_chars(text: str) -> bool:
    return any(unicodedata.category(ch) == "Cc" for ch in text)


def validate_pools(pools: Mapping[Union[str, Category], Sequence[str]], language: str = "") -> List[str]:
    """Data-quality issues for a pool set, as human-readable strings.

    Nothing here is fatal; the generator reports these as warnings.
    """
    issues: List[str] = []
    prefix = f"{language}: " if language else ""

    for key, items in pools.items():
        category = Category.parse(key)
        name = category.value if category is not Category.UNRECOGNIZED else str(key)
        seen = set()

        for i, item in enumerate(items or []):
            where = f"{prefix}{name}[{i}]"
            if not isinstance(item, str) or not item.strip():
                issues.append(f"{where}: empty item")
                continue

            text = item.strip()
            if text in seen:
                issues.append(f"{where}: duplicate {text!r}")
            seen.add(text)

            if len(text) > MAX_ITEM_LENGTH:
                issues.append(f"{where}: longer than {MAX_ITEM_LENGTH} characters")
            if _has_control_chars(item):
                issues.append(f"{where}: contains control characters")

            if category is Category.RELATIONSHIP:
                if text.startswith(RELATIONSHIP_SEPARATORS) or text.endswith(RELATIONSHIP_SEPARATORS):
                    issues.append(f"{where}: starts or ends with a separator")
            elif category is Category.WORD:
                if "/" in text:
                    issues.append(f"{where}: word contains a slash")
                if len(text.split()) > MAX_WORD_TOKENS:
                    issues.append(f"{where}: more than {MAX_WORD_TOKENS} words")

    return issues
