from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Union


class Category(str, Enum):
    LOCATION = "location"
    RELATIONSHIP = "relationship"
    WORD = "word"
    # Error variant for controls that map to no pool.
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def known(cls) -> List["Category"]:
        return [c for c in cls if c is not cls.UNRECOGNIZED]

    @classmethod
    def parse(cls, value: Union[str, "Category"]) -> "Category":
        """Map a category name to its member, or UNRECOGNIZED."""
        if isinstance(value, Category):
            return value
        for c in cls.known():
            if c.value == value:
                return c
        return cls.UNRECOGNIZED


def resolve_category(tokens: Union[str, Iterable[str]]) -> Category:
    """Resolve a control's class-like tokens to a suggestion category.

    A plain string is split on whitespace, so "btn location" works the same
    as ["btn", "location"]. The first known category in enum order wins;
    matching is exact, like a DOM class list.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    present = set(tokens or [])
    for c in Category.known():
        if c.value in present:
            return c
    return Category.UNRECOGNIZED
